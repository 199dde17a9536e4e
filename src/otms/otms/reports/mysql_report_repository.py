from __future__ import annotations

import json
import logging
from datetime import date
from typing import Any, Mapping, Optional, Sequence

from ..common.validators import optional_number, optional_text
from ..core.enums import OTStatus
from ..core.exceptions import ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import query_all
from .model import EmployeeProfile, OTRequestRow
from .repository import OTReportRepository

logger = logging.getLogger(__name__)


def parse_violations(value: Any) -> Optional[Mapping[str, Any]]:
    """Decode the JSON ``threshold_violations`` column."""
    if value is None or isinstance(value, Mapping):
        return value
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8")
    try:
        decoded = json.loads(value) if str(value).strip() else None
    except ValueError:
        raise ValidationError(f"threshold_violations is not valid JSON: {value!r}")
    if decoded is not None and not isinstance(decoded, Mapping):
        raise ValidationError("threshold_violations must be a JSON object")
    return decoded


def to_request_row(r: Mapping[str, Any]) -> OTRequestRow:
    return OTRequestRow(
        request_id=str(r["id"]),
        employee_id=str(r["employee_id"]),
        ot_date=r["ot_date"],
        total_hours=optional_number(r.get("total_hours"), "total_hours"),
        ot_amount=optional_number(r.get("ot_amount"), "ot_amount"),
        status=str(r["status"]),
        threshold_violations=parse_violations(r.get("threshold_violations")),
    )


def to_profile(r: Mapping[str, Any]) -> EmployeeProfile:
    return EmployeeProfile(
        id=str(r["id"]),
        employee_no=optional_text(r.get("employee_no")),
        full_name=optional_text(r.get("full_name")),
        company_id=optional_text(r.get("company_id")),
        company_name=optional_text(r.get("company_name")),
        company_code=optional_text(r.get("company_code")),
        department=optional_text(r.get("department_name")),
        position=optional_text(r.get("position_title")),
    )


class MySQLReportRepository(OTReportRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_requests(
        self,
        *,
        start_date: date,
        end_date: date,
        statuses: Optional[Sequence[OTStatus]] = None,
    ) -> Sequence[OTRequestRow]:
        clauses = ["ot_date >= %s", "ot_date <= %s"]
        params: list[object] = [start_date, end_date]

        if statuses:
            clauses.append(f"status IN ({', '.join(['%s'] * len(statuses))})")
            params.extend(OTStatus(s).value for s in statuses)

        rows = query_all(
            self._conn_factory,
            f"""
            SELECT id, employee_id, ot_date, total_hours, ot_amount,
                   status, threshold_violations
            FROM ot_requests
            WHERE {' AND '.join(clauses)}
            ORDER BY ot_date DESC
            """,
            params,
        )
        logger.debug("Loaded %d OT requests for %s..%s", len(rows), start_date, end_date)
        return [to_request_row(r) for r in rows]

    def list_profiles(self) -> Sequence[EmployeeProfile]:
        rows = query_all(
            self._conn_factory,
            """
            SELECT p.id, p.employee_id AS employee_no, p.full_name, p.company_id,
                   c.name AS company_name, c.code AS company_code,
                   d.name AS department_name, pos.title AS position_title
            FROM profiles p
            LEFT JOIN companies c ON c.id = p.company_id
            LEFT JOIN departments d ON d.id = p.department_id
            LEFT JOIN positions pos ON pos.id = p.position_id
            """,
        )
        logger.debug("Loaded %d employee profiles", len(rows))
        return [to_profile(r) for r in rows]
