from typing import Any, Dict
from sqlalchemy.orm import Session
from models.call_history import CallHistory
from database.connection import SessionLocal
from utils.logger import logger


def create_call_history_entry(values: Dict[str, Any]) -> int:
    """Insert one call_history row and return its ID. Raises on database errors."""
    session: Session = SessionLocal()
    try:
        entry = CallHistory(**values)
        session.add(entry)
        session.commit()
        session.refresh(entry)
        logger.info(f"Call history row {entry.id} created for contact {values.get('contact_id')}")
        return entry.id
    except Exception as e:
        logger.error(f"DB error while inserting call history: {e}")
        session.rollback()
        raise
    finally:
        session.close()
