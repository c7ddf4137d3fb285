from __future__ import annotations

import re
from typing import Any, Optional

from ..core.exceptions import InvalidTimeFormatError, ValidationError

_HH_MM = re.compile(r"^(?:[01]\d|2[0-3]):[0-5]\d$")
_HH_MM_SS = re.compile(r"^(?:[01]\d|2[0-3]):[0-5]\d(?::[0-5]\d)?$")


def require_text(value: Any, field_name: str) -> Optional[str]:
    """JSON bodies can carry numbers or lists where a string is expected."""
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    return value


def require_non_empty(value: Any, field_name: str) -> str:
    require_text(value, field_name)
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: Any, field_name: str, min_len: int) -> str:
    require_text(value, field_name)
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def normalize_manual_time(value: Optional[str]) -> Optional[str]:
    """Validate an HR-entered HH:mm time and widen it to HH:mm:00.

    Empty input clears the field.
    """

    if value is None or value == "":
        return None
    if not isinstance(value, str) or not _HH_MM.match(value):
        raise InvalidTimeFormatError("Please use HH:mm format (e.g., 09:30 or 17:00).")
    return f"{value}:00"


def normalize_record_time(value: Any, field_name: str) -> Optional[str]:
    """Accept HH:mm or HH:mm:ss for a full-record write; return HH:mm:ss."""

    if value is None or value == "":
        return None
    if not isinstance(value, str) or not _HH_MM_SS.match(value):
        raise InvalidTimeFormatError(f"{field_name} must use HH:mm or HH:mm:ss format.")
    return value if value.count(":") == 2 else f"{value}:00"
