"""Shared fixtures: every test run gets its own throwaway SQLite database."""

import os
import shutil
import tempfile

# Must be set before config.py is imported anywhere
_DB_DIR = tempfile.mkdtemp(prefix="vanillasoft-webhooks-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'webhooks.db')}"
os.environ["LOG_FILE"] = ""
os.environ["ENVIRONMENT"] = "test"

import pytest
from sqlalchemy import delete

from app import app as flask_app
from database.connection import SessionLocal, engine, init_db
from models import CallHistory, Contact


@pytest.fixture(scope="session", autouse=True)
def _create_tables():
    init_db()
    yield
    engine.dispose()
    shutil.rmtree(_DB_DIR, ignore_errors=True)


@pytest.fixture(autouse=True)
def _clean_tables():
    yield
    session = SessionLocal()
    try:
        session.execute(delete(CallHistory))
        session.execute(delete(Contact))
        session.commit()
    finally:
        session.close()


@pytest.fixture
def client():
    flask_app.config["TESTING"] = True
    with flask_app.test_client() as client:
        yield client


@pytest.fixture
def call_payload():
    return {
        "contactId": "C100",
        "callDateUTC": "2025-03-04T15:20:00Z",
        "comment": "Left voicemail",
        "resultCode": "VM",
        "resultGroup": "No Contact",
        "timeOffset": "-5",
        "username": "agent.smith",
        "eventDateUTC": "2025-03-04T15:21:00Z",
        "modifiedUTC": "2025-03-04T15:22:00Z",
        "scheduledCallUsername": "agent.jones",
        "callId": "CALL-1",
    }


def call_history_for(contact_id):
    """All call_history rows for a contact, oldest first."""
    session = SessionLocal()
    try:
        return (
            session.query(CallHistory)
            .filter_by(contact_id=contact_id)
            .order_by(CallHistory.id)
            .all()
        )
    finally:
        session.close()


def count_contacts(contact_id):
    session = SessionLocal()
    try:
        return session.query(Contact).filter_by(contact_id=contact_id).count()
    finally:
        session.close()
