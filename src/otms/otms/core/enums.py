from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Application roles used for route gating."""

    EMPLOYEE = "employee"
    SUPERVISOR = "supervisor"
    HR = "hr"
    BOD = "bod"
    ADMIN = "admin"


class DayType(str, Enum):
    """Pay-rate class of an OT date, decided by the database holiday lookup."""

    WEEKDAY = "weekday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"
    PUBLIC_HOLIDAY = "public_holiday"


class OTStatus(str, Enum):
    """Status column of an OT request.

    MANAGEMENT_APPROVED and SUPERVISOR_VERIFIED are the values the report
    queries filter on.
    """

    PENDING_VERIFICATION = "pending_verification"
    VERIFIED = "verified"
    APPROVED = "approved"
    REVIEWED = "reviewed"
    REJECTED = "rejected"
    SUPERVISOR_VERIFIED = "supervisor_verified"
    MANAGEMENT_APPROVED = "management_approved"
