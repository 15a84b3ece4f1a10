"""
Translation of VanillaSoft webhook payloads into database column values.

VanillaSoft field names are inconsistent: some carry typos ("modifiedTUC",
"merket"), some change casing between releases ("contactownerUsername"), and
the record itself is sometimes nested under a "contact" envelope. Each column
is therefore described by an ordered list of candidate source keys; the first
candidate present with a non-null value wins.
"""
import json
from typing import Any, Dict, List, Optional

from config import ENVELOPE_KEYS

# column -> source keys in priority order
CALL_HISTORY_FIELDS: Dict[str, List[str]] = {
    "contact_id": ["contactId"],
    "call_date_utc": ["callDateUTC"],
    "comment": ["comment"],
    "result_code": ["resultCode"],
    "result_group": ["resultGroup"],
    "time_offset": ["timeOffset"],
    "username": ["username"],
    "event_date_utc": ["eventDateUTC"],
    "modified_utc": ["modifiedUTC", "modifiedTUC"],
    "scheduled_call_username": ["scheduledCallUsername"],
    "call_id": ["callId"],
}

CONTACT_FIELDS: Dict[str, List[str]] = {
    "contact_id": ["contactId"],
    "first_name": ["firstName"],
    "last_name": ["lastName"],
    "company": ["company"],
    "email": ["email"],
    "address1": ["address1"],
    "address2": ["address2"],
    "city": ["city"],
    "state": ["state"],
    "postal_code": ["postalCode"],
    "country": ["country"],
    "annual_revenue": ["annualRevenue"],
    "number_of_employees": ["numberofEmployees"],
    "number_of_owners": ["numberofOwners"],
    "industry": ["industry"],
    "primary_sic_code": ["primarySICCode"],
    "primary_sic_code_description": ["primarySICCodeDescription"],
    "classification": ["classification"],
    "hvt": ["hvt"],
    "market": ["market", "merket"],
    "website": ["website"],
    "modified_utc": ["modifiedUTC"],
    "created_utc": ["createdUTC"],
    "contact_owner_username": ["contactOwnerUsername", "contactownerUsername"],
    "call_flag": ["callFlag"],
    "closed_flag": ["closedFlag"],
}


def unwrap_envelope(body: Dict[str, Any]) -> Dict[str, Any]:
    """Return the record nested under a known envelope key, or the body itself."""
    for key in ENVELOPE_KEYS:
        nested = body.get(key)
        if isinstance(nested, dict):
            return nested
    return body


def lookup(payload: Dict[str, Any], candidates: List[str]) -> Any:
    for key in candidates:
        value = payload.get(key)
        if value is not None:
            return value
    return None


def map_fields(payload: Dict[str, Any], field_map: Dict[str, List[str]]) -> Dict[str, Any]:
    return {column: lookup(payload, candidates) for column, candidates in field_map.items()}


def serialize_employee_count(value: Any) -> Optional[str]:
    """
    VanillaSoft sends the employee count either as a scalar or as a list of
    ranges. Store it as a JSON-encoded list either way.
    """
    if value is None:
        return None
    if isinstance(value, list):
        return json.dumps(value)
    return json.dumps([value])


def map_call_history(payload: Dict[str, Any]) -> Dict[str, Any]:
    return map_fields(payload, CALL_HISTORY_FIELDS)


def map_contact(payload: Dict[str, Any]) -> Dict[str, Any]:
    values = map_fields(payload, CONTACT_FIELDS)
    values["number_of_employees"] = serialize_employee_count(values["number_of_employees"])
    return values
