from dataclasses import dataclass
from typing import Any, Dict, Optional

from sqlalchemy.exc import SQLAlchemyError

from repository.call_history_repository import create_call_history_entry
from repository.contact_repository import insert_contact_if_absent
from services.field_mapping import map_call_history, map_contact
from utils.logger import logger
from utils.time_utils import utc_now_iso

INSERTED = "inserted"
ALREADY_EXISTS = "already_exists"
FAILED = "failed"


@dataclass
class PersistResult:
    outcome: str
    timestamp: str
    affected_rows: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.outcome != FAILED


def _error_message(exc: SQLAlchemyError) -> str:
    # DBAPI errors wrap the driver exception. PyMySQL errors carry
    # (errno, message) args; the client only sees the message
    original = getattr(exc, "orig", None)
    if original is None:
        return str(exc)
    if len(original.args) > 1:
        return str(original.args[-1])
    return str(original)


def persist_call_history(payload: Dict[str, Any]) -> PersistResult:
    """Append one call_history row built from a VanillaSoft call payload."""
    values = map_call_history(payload)
    try:
        create_call_history_entry(values)
    except SQLAlchemyError as e:
        logger.error(f"❌ Call history database error: {e}")
        return PersistResult(outcome=FAILED, timestamp=utc_now_iso(), error=_error_message(e))

    logger.info("✅ Call history data inserted into database")
    return PersistResult(outcome=INSERTED, timestamp=utc_now_iso(), affected_rows=1)


def persist_contact(payload: Dict[str, Any]) -> PersistResult:
    """
    Insert a contact built from a VanillaSoft contact payload unless its
    contact ID is already stored. Existing contacts are never updated.
    """
    values = map_contact(payload)
    try:
        affected_rows = insert_contact_if_absent(values)
    except SQLAlchemyError as e:
        logger.error(f"❌ Contact database error: {e}")
        return PersistResult(outcome=FAILED, timestamp=utc_now_iso(), error=_error_message(e))

    outcome = INSERTED if affected_rows > 0 else ALREADY_EXISTS
    return PersistResult(outcome=outcome, timestamp=utc_now_iso(), affected_rows=affected_rows)
