"""Tests for persisting call history and contacts."""

import json
from unittest.mock import patch

import pytest
from pymysql import err as mysql_err
from sqlalchemy.dialects import mysql, sqlite
from sqlalchemy.dialects.mysql.mariadb import MariaDBDialect
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError

from conftest import call_history_for, count_contacts
from models import CallHistory, Contact
from repository.contact_repository import (
    _insert_ignore_statement,
    get_contact_by_contact_id,
    insert_contact_if_absent,
)
from services.field_mapping import map_contact
from services.persistence_service import (
    ALREADY_EXISTS,
    FAILED,
    INSERTED,
    persist_call_history,
    persist_contact,
)


# ── Call history ──────────────────────────────────────────────────────────


class TestPersistCallHistory:
    def test_creates_row_matching_payload(self, call_payload):
        result = persist_call_history(call_payload)

        assert result.ok
        assert result.outcome == INSERTED
        assert result.timestamp.endswith("Z")

        rows = call_history_for("C100")
        assert len(rows) == 1
        row = rows[0]
        assert row.call_date_utc == "2025-03-04T15:20:00Z"
        assert row.comment == "Left voicemail"
        assert row.result_code == "VM"
        assert row.result_group == "No Contact"
        assert row.time_offset == "-5"
        assert row.username == "agent.smith"
        assert row.event_date_utc == "2025-03-04T15:21:00Z"
        assert row.modified_utc == "2025-03-04T15:22:00Z"
        assert row.scheduled_call_username == "agent.jones"
        assert row.call_id == "CALL-1"

    def test_missing_fields_are_stored_as_null(self):
        persist_call_history({"contactId": "C7", "resultCode": "SALE"})

        row = call_history_for("C7")[0]
        assert row.result_code == "SALE"
        assert row.comment is None
        assert row.modified_utc is None
        assert row.call_id is None

    def test_every_event_appends_a_row(self, call_payload):
        persist_call_history(call_payload)
        persist_call_history(call_payload)

        assert len(call_history_for("C100")) == 2

    def test_modified_typo_stored_like_canonical(self):
        persist_call_history({"contactId": "T1", "modifiedUTC": "2025-01-01T00:00:00Z"})
        persist_call_history({"contactId": "T1", "modifiedTUC": "2025-01-01T00:00:00Z"})

        first, second = call_history_for("T1")
        assert first.modified_utc == second.modified_utc == "2025-01-01T00:00:00Z"

    def test_database_failure_is_reported(self, call_payload):
        error = OperationalError(
            "INSERT INTO call_history", {}, mysql_err.OperationalError(2013, "Lost connection to MySQL server during query")
        )
        with patch("services.persistence_service.create_call_history_entry", side_effect=error):
            result = persist_call_history(call_payload)

        assert not result.ok
        assert result.outcome == FAILED
        assert result.error == "Lost connection to MySQL server during query"


# ── Contacts ──────────────────────────────────────────────────────────────


class TestPersistContact:
    def test_first_contact_is_inserted(self):
        result = persist_contact({"contactId": "C100", "firstName": "Jane", "lastName": "Doe"})

        assert result.ok
        assert result.outcome == INSERTED
        assert result.affected_rows == 1

        contact = get_contact_by_contact_id("C100")
        assert contact.first_name == "Jane"
        assert contact.last_name == "Doe"
        assert contact.company is None

    def test_duplicate_contact_is_a_no_op(self):
        persist_contact({"contactId": "C100", "firstName": "Jane"})
        result = persist_contact({"contactId": "C100", "firstName": "Janet", "email": "j@example.com"})

        assert result.ok
        assert result.outcome == ALREADY_EXISTS
        assert result.affected_rows == 0
        assert count_contacts("C100") == 1

        contact = get_contact_by_contact_id("C100")
        assert contact.first_name == "Jane"
        assert contact.email is None

    def test_employee_count_round_trip(self):
        persist_contact({"contactId": "E1", "numberofEmployees": 5})
        persist_contact({"contactId": "E2", "numberofEmployees": [5, 10]})
        persist_contact({"contactId": "E3"})

        assert json.loads(get_contact_by_contact_id("E1").number_of_employees) == [5]
        assert json.loads(get_contact_by_contact_id("E2").number_of_employees) == [5, 10]
        assert get_contact_by_contact_id("E3").number_of_employees is None

    def test_vendor_typos_are_tolerated(self):
        persist_contact({"contactId": "V1", "merket": "SMB", "contactownerUsername": "owner1"})

        contact = get_contact_by_contact_id("V1")
        assert contact.market == "SMB"
        assert contact.contact_owner_username == "owner1"

    def test_database_failure_is_reported(self):
        error = IntegrityError(
            "INSERT INTO contacts", {}, mysql_err.IntegrityError(1048, "Column 'email' cannot be null")
        )
        with patch("services.persistence_service.insert_contact_if_absent", side_effect=error):
            result = persist_contact({"contactId": "C100"})

        assert result.outcome == FAILED
        assert result.error == "Column 'email' cannot be null"

    def test_error_without_driver_exception(self):
        error = SQLAlchemyError("engine disposed")
        with patch("services.persistence_service.insert_contact_if_absent", side_effect=error):
            result = persist_contact({"contactId": "C100"})

        assert result.outcome == FAILED
        assert result.error == "engine disposed"


class TestInsertContactIfAbsent:
    def test_returns_affected_rows(self):
        values = map_contact({"contactId": "R1", "city": "Austin"})

        assert insert_contact_if_absent(values) == 1
        assert insert_contact_if_absent(values) == 0
        assert count_contacts("R1") == 1

    def test_rolls_back_and_raises_on_error(self):
        values = map_contact({"contactId": "R2"})
        values["no_such_column"] = "x"

        with pytest.raises(SQLAlchemyError):
            insert_contact_if_absent(values)

        assert count_contacts("R2") == 0


class TestInsertIgnoreStatement:
    VALUES = {"contact_id": "C100"}

    def _compile(self, dialect):
        return str(_insert_ignore_statement(self.VALUES).compile(dialect=dialect))

    def test_mysql_uses_insert_ignore(self):
        assert self._compile(mysql.dialect()).startswith("INSERT IGNORE INTO contacts")

    def test_mariadb_uses_insert_ignore(self):
        assert self._compile(MariaDBDialect()).startswith("INSERT IGNORE INTO contacts")

    def test_sqlite_uses_insert_or_ignore(self):
        assert self._compile(sqlite.dialect()).startswith("INSERT OR IGNORE INTO contacts")


# ── Column sizes ──────────────────────────────────────────────────────────


class TestColumnSizes:
    """MySQL truncates oversized values under INSERT IGNORE with only a warning."""

    @pytest.mark.parametrize("model", [CallHistory, Contact])
    def test_string_columns_hold_255_characters(self, model):
        for column in model.__table__.columns:
            length = getattr(column.type, "length", None)
            if length is not None:
                assert length >= 255, column.name

    def test_long_flag_is_stored_unchanged(self):
        flag = "Y" * 200
        persist_contact({"contactId": "L1", "callFlag": flag, "closedFlag": flag})

        contact = get_contact_by_contact_id("L1")
        assert contact.call_flag == flag
        assert contact.closed_flag == flag
