"""Folding flat OT rows into per-employee and per-company report figures.

All functions are pure: they never mutate their inputs and return fresh
immutable records.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, Sequence, Union

from ..common.validators import optional_number
from ..core.constants import (
    NOT_AVAILABLE,
    UNKNOWN_COMPANY_ID,
    UNKNOWN_COMPANY_NAME,
    UNKNOWN_EMPLOYEE_NAME,
)
from ..core.enums import OTStatus
from .model import (
    CompanyReportGroup,
    CompanyStats,
    EmployeeProfile,
    EmployeeReportRow,
    OTRequestRow,
    OverallStats,
    ReportRowLike,
    RequestStats,
)


def _field(row: Any, name: str) -> Any:
    if isinstance(row, Mapping):
        return row.get(name)
    return getattr(row, name, None)


def _number(row: Any, name: str) -> float:
    return optional_number(_field(row, name), name)


def company_sort_key(company_name: str) -> tuple[str, str]:
    """Locale-style ordering: case-insensitive first, then lowercase before uppercase."""
    return company_name.casefold(), company_name.swapcase()


def group_by_company(rows: Iterable[ReportRowLike]) -> list[CompanyReportGroup]:
    """Group employee rows by ``company_id`` and total hours/cost per company.

    Rows without a company id land in the "unknown" bucket. Rows keep their
    input order inside a group; groups are sorted by company name.
    """
    buckets: dict[str, dict] = {}

    for row in rows:
        company_id = _field(row, "company_id") or UNKNOWN_COMPANY_ID
        bucket = buckets.get(company_id)
        if bucket is None:
            bucket = {
                "company_name": _field(row, "company_name") or UNKNOWN_COMPANY_NAME,
                "company_code": _field(row, "company_code") or NOT_AVAILABLE,
                "employees": [],
                "total_hours": 0.0,
                "total_cost": 0.0,
            }
            buckets[company_id] = bucket

        bucket["employees"].append(row)
        bucket["total_hours"] += _number(row, "total_ot_hours")
        bucket["total_cost"] += _number(row, "amount")

    groups = [
        CompanyReportGroup(
            company_id=company_id,
            company_name=b["company_name"],
            company_code=b["company_code"],
            employees=tuple(b["employees"]),
            stats=CompanyStats(
                total_employees=len(b["employees"]),
                total_hours=b["total_hours"],
                total_cost=b["total_cost"],
            ),
        )
        for company_id, b in buckets.items()
    ]
    return sorted(groups, key=lambda g: company_sort_key(g.company_name))


def calculate_overall_stats(groups: Sequence[CompanyReportGroup]) -> OverallStats:
    return OverallStats(
        total_companies=len(groups),
        total_employees=sum(g.stats.total_employees for g in groups),
        total_hours=sum(g.stats.total_hours for g in groups),
        total_cost=sum(g.stats.total_cost for g in groups),
    )


def aggregate_by_employee(
    requests: Iterable[OTRequestRow],
    profiles: Iterable[EmployeeProfile],
) -> list[EmployeeReportRow]:
    """Sum OT requests per employee, labelled with the employee's current profile."""
    profile_map = {p.id: p for p in profiles}
    totals: dict[str, dict] = {}

    for req in requests:
        t = totals.get(req.employee_id)
        if t is None:
            t = {"total_ot_hours": 0.0, "amount": 0.0, "has_violations": False}
            totals[req.employee_id] = t
        t["total_ot_hours"] += _number(req, "total_hours")
        t["amount"] += _number(req, "ot_amount")
        t["has_violations"] = t["has_violations"] or req.has_violations

    out: list[EmployeeReportRow] = []
    for employee_id, t in totals.items():
        p = profile_map.get(employee_id)
        out.append(
            EmployeeReportRow(
                employee_id=employee_id,
                employee_no=(p and p.employee_no) or employee_id,
                employee_name=(p and p.full_name) or UNKNOWN_EMPLOYEE_NAME,
                department=(p and p.department) or NOT_AVAILABLE,
                position=(p and p.position) or NOT_AVAILABLE,
                company_id=(p and p.company_id) or UNKNOWN_COMPANY_ID,
                company_name=(p and p.company_name) or UNKNOWN_COMPANY_NAME,
                company_code=(p and p.company_code) or NOT_AVAILABLE,
                total_ot_hours=t["total_ot_hours"],
                amount=t["amount"],
                monthly_total=t["amount"],
                has_violations=t["has_violations"],
            )
        )
    return out


def calculate_request_stats(
    requests: Sequence[OTRequestRow],
    *,
    pending_status: Union[OTStatus, str] = OTStatus.SUPERVISOR_VERIFIED,
) -> RequestStats:
    pending = getattr(pending_status, "value", pending_status)
    return RequestStats(
        pending_review=sum(1 for r in requests if r.status == pending),
        total_hours=sum(_number(r, "total_hours") for r in requests),
        total_cost=sum(_number(r, "ot_amount") for r in requests),
        with_violations=sum(1 for r in requests if r.has_violations),
    )
