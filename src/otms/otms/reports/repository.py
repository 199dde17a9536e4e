from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import OTStatus
from .model import EmployeeProfile, OTRequestRow


class OTReportRepository(Protocol):
    """Read-only access to OT requests and employee profiles for reports.

    Note (DIP): the report service depends on this interface, not on a concrete DB.
    """

    def list_requests(
        self,
        *,
        start_date: date,
        end_date: date,
        statuses: Optional[Sequence[OTStatus]] = None,
    ) -> Sequence[OTRequestRow]:
        raise NotImplementedError

    def list_profiles(self) -> Sequence[EmployeeProfile]:
        raise NotImplementedError
