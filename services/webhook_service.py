import json
from typing import Any, Dict
from flask import jsonify, request

from services.field_mapping import unwrap_envelope
from services.persistence_service import (
    ALREADY_EXISTS,
    PersistResult,
    persist_call_history,
    persist_contact,
)
from utils.logger import logger

INVALID_BODY_MESSAGE = "Request body must be a JSON object"


def _log_payload(title: str, data: Dict[str, Any]) -> None:
    logger.info("📋 %s FIELDS:", title)
    for key, value in data.items():
        logger.info("  %s: %s (%s)", key, value, type(value).__name__)


def _error_response(message: str, result: PersistResult) -> tuple[Dict[str, Any], int]:
    return {
        "status": "error",
        "message": message,
        "error": result.error,
    }, 500


def _invalid_body() -> tuple[Dict[str, Any], int]:
    logger.warning("Rejected webhook: %s", INVALID_BODY_MESSAGE)
    return {"status": "error", "message": INVALID_BODY_MESSAGE}, 400


def receive_call_event(body: Any) -> tuple[Dict[str, Any], int]:
    """Persist a VanillaSoft call-history webhook and build the HTTP reply."""
    if not isinstance(body, dict):
        return _invalid_body()

    data = unwrap_envelope(body)
    _log_payload("CALL HISTORY", data)

    result = persist_call_history(data)
    if not result.ok:
        return _error_response("Failed to save call history data", result)

    return {
        "status": "success",
        "message": "Call history data saved to database",
        "timestamp": result.timestamp,
    }, 200


def receive_contact_event(body: Any) -> tuple[Dict[str, Any], int]:
    """Persist a VanillaSoft contact webhook and build the HTTP reply."""
    if not isinstance(body, dict):
        return _invalid_body()

    data = unwrap_envelope(body)
    _log_payload("CONTACT", data)

    result = persist_contact(data)
    if not result.ok:
        return _error_response("Failed to save contact data", result)

    if result.outcome == ALREADY_EXISTS:
        message = "Contact already exists, skipped duplicate"
    else:
        message = "Contact data saved to database"

    return {
        "status": "success",
        "message": message,
        "timestamp": result.timestamp,
        "result": result.outcome,
        "affected_rows": result.affected_rows,
    }, 200


def _log_request(title: str) -> Any:
    body = request.get_json(silent=True)
    logger.info("=" * 80)
    logger.info(title)
    logger.debug("Headers: %s", json.dumps(dict(request.headers), indent=2))
    logger.info("Body: %s", json.dumps(body, indent=2, default=str))
    logger.info("=" * 80)
    return body


def handle_call_webhook():
    """Flask entry point for POST /webhook/call."""
    body = _log_request("📞 CALL HISTORY WEBHOOK RECEIVED")
    response, status = receive_call_event(body)
    return jsonify(response), status


def handle_contact_webhook():
    """Flask entry point for POST /webhook/contact."""
    body = _log_request("👤 CONTACT WEBHOOK RECEIVED")
    response, status = receive_contact_event(body)
    return jsonify(response), status
