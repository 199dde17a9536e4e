from __future__ import annotations

from typing import Union

from ..core.enums import OTStatus

STATUS_LABELS: dict[OTStatus, str] = {
    OTStatus.PENDING_VERIFICATION: "Pending Verification",
    OTStatus.VERIFIED: "Verified",
    OTStatus.APPROVED: "Approved",
    OTStatus.REVIEWED: "Reviewed",
    OTStatus.REJECTED: "Rejected",
    OTStatus.SUPERVISOR_VERIFIED: "Supervisor Verified",
    OTStatus.MANAGEMENT_APPROVED: "Management Approved",
}

STATUS_COLORS: dict[OTStatus, str] = {
    OTStatus.PENDING_VERIFICATION: "bg-warning text-warning-foreground",
    OTStatus.VERIFIED: "bg-info text-info-foreground",
    OTStatus.APPROVED: "bg-success text-success-foreground",
    OTStatus.REVIEWED: "bg-info text-info-foreground",
    OTStatus.REJECTED: "bg-destructive text-destructive-foreground",
    OTStatus.SUPERVISOR_VERIFIED: "bg-info text-info-foreground",
    OTStatus.MANAGEMENT_APPROVED: "bg-success text-success-foreground",
}

DEFAULT_STATUS_COLOR = "bg-muted text-muted-foreground"


def status_label(status: Union[OTStatus, str]) -> str:
    """Human label for a status; unknown values are shown as-is."""
    try:
        return STATUS_LABELS[OTStatus(status)]
    except ValueError:
        return str(status)


def status_color(status: Union[OTStatus, str]) -> str:
    try:
        return STATUS_COLORS[OTStatus(status)]
    except ValueError:
        return DEFAULT_STATUS_COLOR
