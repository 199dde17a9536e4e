from __future__ import annotations

from typing import Any, Optional

from ..core.exceptions import ValidationError


def optional_number(value: Any, field_name: str) -> float:
    """Coerce a nullable numeric column to float, treating None as 0."""
    if value is None:
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be numeric, got {value!r}")


def optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None
