from datetime import date
from decimal import Decimal

import pytest

from src.otms.otms.core.enums import OTStatus
from src.otms.otms.core.exceptions import ValidationError
from src.otms.otms.reports.mysql_report_repository import (
    MySQLReportRepository,
    parse_violations,
    to_profile,
    to_request_row,
)


def test_parse_violations():
    assert parse_violations(None) is None
    assert parse_violations("") is None
    assert parse_violations('{"daily": true}') == {"daily": True}
    assert parse_violations(b'{"weekly": 2}') == {"weekly": 2}
    assert parse_violations({"monthly": 1}) == {"monthly": 1}


@pytest.mark.parametrize("bad", ["{not json", "[1, 2]"])
def test_parse_violations_rejects_bad_json(bad):
    with pytest.raises(ValidationError):
        parse_violations(bad)


def test_to_request_row_converts_columns():
    row = to_request_row(
        {
            "id": 7,
            "employee_id": 3,
            "ot_date": date(2026, 1, 5),
            "total_hours": Decimal("2.5"),
            "ot_amount": None,
            "status": "management_approved",
            "threshold_violations": '{"daily": "over 4h"}',
        }
    )

    assert row.request_id == "7"
    assert row.employee_id == "3"
    assert row.total_hours == 2.5
    assert row.ot_amount == 0.0
    assert row.has_violations


def test_to_request_row_rejects_non_numeric_hours():
    with pytest.raises(ValidationError):
        to_request_row(
            {
                "id": 1,
                "employee_id": 1,
                "ot_date": date(2026, 1, 5),
                "total_hours": "lots",
                "status": "approved",
            }
        )


def test_to_profile_blank_strings_become_none():
    profile = to_profile(
        {
            "id": 1,
            "employee_no": " EMP01 ",
            "full_name": "",
            "company_id": None,
            "department_name": "HR",
        }
    )

    assert profile.id == "1"
    assert profile.employee_no == "EMP01"
    assert profile.full_name is None
    assert profile.company_id is None
    assert profile.department == "HR"
    assert profile.position is None


class FakeCursor:
    def __init__(self, rows):
        self.rows = rows
        self.executed = []
        self.closed = False

    def execute(self, sql, params=()):
        self.executed.append((sql, params))

    def fetchall(self):
        return self.rows

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, rows):
        self.cursor_obj = FakeCursor(rows)
        self.committed = False
        self.closed = False

    def cursor(self, dictionary=False):
        return self.cursor_obj

    def commit(self):
        self.committed = True

    def rollback(self):
        pass

    def close(self):
        self.closed = True


class FakeConnFactory:
    def __init__(self, rows):
        self.conn = FakeConnection(rows)

    def connect(self):
        return self.conn


def test_list_requests_filters_by_period_and_status():
    factory = FakeConnFactory(
        [
            {
                "id": 1,
                "employee_id": "e1",
                "ot_date": date(2026, 1, 9),
                "total_hours": 2,
                "ot_amount": 50,
                "status": "management_approved",
                "threshold_violations": None,
            }
        ]
    )
    repo = MySQLReportRepository(factory)

    rows = repo.list_requests(
        start_date=date(2026, 1, 1),
        end_date=date(2026, 1, 31),
        statuses=[OTStatus.MANAGEMENT_APPROVED, "supervisor_verified"],
    )

    sql, params = factory.conn.cursor_obj.executed[0]
    assert "status IN (%s, %s)" in sql
    assert params == (date(2026, 1, 1), date(2026, 1, 31), "management_approved", "supervisor_verified")
    assert rows[0].total_hours == 2.0
    assert factory.conn.committed and factory.conn.closed


def test_list_profiles_maps_joined_columns():
    factory = FakeConnFactory(
        [{"id": "e1", "employee_no": "EMP1", "full_name": "Siti", "company_name": "Alpha", "position_title": "Clerk"}]
    )

    profiles = MySQLReportRepository(factory).list_profiles()

    assert profiles[0].company_name == "Alpha"
    assert profiles[0].position == "Clerk"
