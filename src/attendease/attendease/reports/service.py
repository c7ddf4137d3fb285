from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from ..attendance.service import AttendanceService
from ..common.datetime_utils import format_display_time

EXPORT_COLUMNS = [
    "Employee ID",
    "Employee Name",
    "Date",
    "Check-In",
    "Check-Out",
    "Total Hours",
    "Status",
    "Remarks",
]

SUMMARY_COLUMNS = ["Employee ID", "Employee Name", "Days", "Total Hours"]

_DURATION = re.compile(r"^(\d+)h (\d+)m$")


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: list[dict]


def _duration_minutes(total_hours: Optional[str]) -> int:
    m = _DURATION.match(total_hours or "")
    if not m:
        return 0
    return int(m.group(1)) * 60 + int(m.group(2))


class AttendanceReportService:
    """Rows of the HR attendance table, ready for the exporters."""

    def __init__(self, attendance: AttendanceService):
        self._attendance = attendance

    def build_attendance_report(self, *, search: str = "", work_date: Optional[str] = None) -> ReportData:
        records = self._attendance.list_view(search=search, work_date=work_date)

        summary_map: dict[str, dict] = {}
        out_rows: list[dict] = []

        for r in records:
            out_rows.append(
                {
                    "Employee ID": r.employee_id,
                    "Employee Name": r.employee_name,
                    "Date": r.work_date,
                    "Check-In": format_display_time(r.check_in_time),
                    "Check-Out": format_display_time(r.check_out_time),
                    "Total Hours": r.total_hours or "N/A",
                    "Status": r.status.value,
                    "Remarks": r.remarks or "N/A",
                }
            )

            s = summary_map.get(r.employee_id)
            if not s:
                s = {
                    "employee_id": r.employee_id,
                    "employee_name": r.employee_name,
                    "days": 0,
                    "total_minutes": 0,
                }
                summary_map[r.employee_id] = s
            s["days"] += 1
            s["total_minutes"] += _duration_minutes(r.total_hours)

        summary = []
        for s in summary_map.values():
            total_minutes = int(s["total_minutes"])
            summary.append(
                {
                    "employee_id": s["employee_id"],
                    "employee_name": s["employee_name"],
                    "days": s["days"],
                    "total_minutes": total_minutes,
                    "total_hours": f"{total_minutes // 60}h {total_minutes % 60}m",
                }
            )

        summary.sort(key=lambda x: x["total_minutes"], reverse=True)
        return ReportData(rows=out_rows, summary=summary)
