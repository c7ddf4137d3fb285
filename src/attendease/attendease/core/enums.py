from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Role of a directory entry, also used for authorization."""

    HR = "HR"
    EMPLOYEE = "Employee"


class AttendanceStatus(str, Enum):
    """Daily attendance status as persisted in the ledger."""

    PRESENT = "Present"
    LATE = "Late"
    ABSENT = "Absent"
    ON_LEAVE = "On Leave"

    @property
    def is_manual_override(self) -> bool:
        """Absent / On Leave are set by HR and never re-derived from times."""
        return self in (AttendanceStatus.ABSENT, AttendanceStatus.ON_LEAVE)
