from typing import Any, Dict, Optional
from sqlalchemy import Insert, insert
from sqlalchemy.orm import Session
from models.contact import Contact
from database.connection import SessionLocal
from utils.logger import logger


def _insert_ignore_statement(values: Dict[str, Any]) -> Insert:
    """INSERT into contacts that skips rows whose contact_id is already stored."""
    return (
        insert(Contact.__table__)
        .values(**values)
        .prefix_with("IGNORE", dialect="mysql")
        .prefix_with("IGNORE", dialect="mariadb")
        .prefix_with("OR IGNORE", dialect="sqlite")
    )


def insert_contact_if_absent(values: Dict[str, Any]) -> int:
    """
    Insert a contact unless one with the same contact_id already exists.

    Relies on the unique index on contacts.contact_id and the database's own
    ignore-on-conflict insert, so two concurrent webhooks for a new contact
    cannot both insert. Returns the number of affected rows: 1 when the row
    was created, 0 when it already existed. Raises on database errors.
    """
    statement = _insert_ignore_statement(values)
    session: Session = SessionLocal()
    try:
        result = session.execute(statement)
        session.commit()
        affected_rows = result.rowcount
        if affected_rows > 0:
            logger.info(f"Contact '{values.get('contact_id')}' inserted")
        else:
            logger.info(f"Contact '{values.get('contact_id')}' already exists, skipped duplicate")
        return affected_rows
    except Exception as e:
        logger.error(f"DB error while inserting contact '{values.get('contact_id')}': {e}")
        session.rollback()
        raise
    finally:
        session.close()


def get_contact_by_contact_id(contact_id: str) -> Optional[Contact]:
    session: Session = SessionLocal()
    try:
        return session.query(Contact).filter_by(contact_id=contact_id).first()
    finally:
        session.close()
