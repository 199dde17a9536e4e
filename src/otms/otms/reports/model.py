from __future__ import annotations

from dataclasses import asdict, dataclass, is_dataclass
from datetime import date
from typing import Any, Mapping, Optional, Union


@dataclass(frozen=True)
class OTRequestRow:
    """One OT request as read for reporting."""

    request_id: str
    employee_id: str
    ot_date: date
    total_hours: float
    ot_amount: float
    status: str
    threshold_violations: Optional[Mapping[str, Any]] = None

    @property
    def has_violations(self) -> bool:
        return bool(self.threshold_violations)


@dataclass(frozen=True)
class EmployeeProfile:
    """Current profile of an employee (company/department may change over time)."""

    id: str
    employee_no: Optional[str]
    full_name: Optional[str]
    company_id: Optional[str]
    company_name: Optional[str]
    company_code: Optional[str]
    department: Optional[str]
    position: Optional[str]


@dataclass(frozen=True)
class EmployeeReportRow:
    """Read-model: OT totals of one employee over a report period."""

    employee_id: str
    employee_no: str
    employee_name: str
    department: str
    position: str
    company_id: str
    company_name: str
    company_code: str
    total_ot_hours: float = 0.0
    amount: float = 0.0
    monthly_total: float = 0.0
    has_violations: bool = False


ReportRowLike = Union[EmployeeReportRow, Mapping[str, Any]]


@dataclass(frozen=True)
class CompanyStats:
    total_employees: int
    total_hours: float
    total_cost: float


@dataclass(frozen=True)
class CompanyReportGroup:
    company_id: str
    company_name: str
    company_code: str
    employees: tuple[ReportRowLike, ...]
    stats: CompanyStats

    def to_dict(self) -> dict:
        return {
            "company_id": self.company_id,
            "company_name": self.company_name,
            "company_code": self.company_code,
            "employees": [row_to_dict(r) for r in self.employees],
            "stats": asdict(self.stats),
        }


@dataclass(frozen=True)
class OverallStats:
    total_companies: int
    total_employees: int
    total_hours: float
    total_cost: float


@dataclass(frozen=True)
class RequestStats:
    pending_review: int
    total_hours: float
    total_cost: float
    with_violations: int


@dataclass(frozen=True)
class CompanyReport:
    start: date
    end: date
    groups: tuple[CompanyReportGroup, ...]
    overall: OverallStats
    stats: RequestStats

    def to_dict(self) -> dict:
        return {
            "start": self.start.strftime("%Y-%m-%d"),
            "end": self.end.strftime("%Y-%m-%d"),
            "groups": [g.to_dict() for g in self.groups],
            "overall": asdict(self.overall),
            "stats": asdict(self.stats),
        }


def row_to_dict(row: Any) -> dict:
    if is_dataclass(row):
        return asdict(row)
    return dict(row)
