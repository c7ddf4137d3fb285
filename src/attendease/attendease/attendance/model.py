from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..core.enums import AttendanceStatus


def make_record_id(employee_id: str, work_date: str) -> str:
    """The only key of the ledger: one record per employee per day."""
    return f"{employee_id}-{work_date}"


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance for one calendar day.

    Dates are ``YYYY-MM-DD`` and times ``HH:MM:SS`` strings, exactly as stored.
    """

    employee_id: str
    employee_name: str
    work_date: str
    status: AttendanceStatus
    check_in_time: Optional[str] = None
    check_out_time: Optional[str] = None
    total_hours: Optional[str] = None
    remarks: Optional[str] = None

    @property
    def record_id(self) -> str:
        return make_record_id(self.employee_id, self.work_date)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "id": self.record_id,
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "date": self.work_date,
            "status": self.status.value,
        }
        for key, value in (
            ("check_in_time", self.check_in_time),
            ("check_out_time", self.check_out_time),
            ("total_hours", self.total_hours),
            ("remarks", self.remarks),
        ):
            if value is not None:
                out[key] = value
        return out

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "AttendanceRecord":
        return cls(
            employee_id=str(raw["employee_id"]),
            employee_name=str(raw.get("employee_name", "")),
            work_date=str(raw["date"]),
            status=AttendanceStatus(raw["status"]),
            check_in_time=raw.get("check_in_time"),
            check_out_time=raw.get("check_out_time"),
            total_hours=raw.get("total_hours"),
            remarks=raw.get("remarks"),
        )
