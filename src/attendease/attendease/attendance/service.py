from __future__ import annotations

import dataclasses
import logging
from datetime import date, datetime
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import combine, format_date, format_time, now_local, parse_iso_date
from ..common.validators import normalize_manual_time, normalize_record_time, require_text
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..users.repository import EmployeeRepository
from .duration import calculate_total_hours
from .factory import AttendanceStrategyFactory
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

_RECORD_FIELDS = (
    "employee_id",
    "employee_name",
    "date",
    "status",
    "check_in_time",
    "check_out_time",
    "total_hours",
    "remarks",
)
_TIME_FIELDS = ("check_in_time", "check_out_time")
_TEXT_FIELDS = ("employee_id", "employee_name", "date", "status", "total_hours", "remarks")


class AttendanceService:
    """Check-in / check-out lifecycle and HR edits over the Attendance Ledger."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository | None = None,
        *,
        strategy_factory: AttendanceStrategyFactory | None = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._factory = strategy_factory or AttendanceStrategyFactory()

    def _status_for(self, check_in: datetime) -> AttendanceStatus:
        strategy = self._factory.for_checkin(check_in=check_in)
        return strategy.decide_checkin(check_in=check_in).status

    def check_in(self, employee_id: str, employee_name: str, *, now: datetime | None = None) -> AttendanceRecord:
        now = now or now_local()
        today = format_date(now)
        status = self._status_for(now)

        record = self._attendance.get_for_employee_and_date(employee_id, today)
        if record:
            # Repeated check-ins never move the first recorded time.
            record = dataclasses.replace(
                record,
                check_in_time=record.check_in_time or format_time(now),
                status=status if record.status == AttendanceStatus.ABSENT else record.status,
            )
        else:
            record = AttendanceRecord(
                employee_id=employee_id,
                employee_name=employee_name,
                work_date=today,
                check_in_time=format_time(now),
                status=status,
            )

        self._attendance.save(record)
        logger.info("Check-in %s on %s at %s (%s)", employee_id, today, record.check_in_time, record.status.value)
        return record

    def check_out(self, employee_id: str, *, now: datetime | None = None) -> Optional[AttendanceRecord]:
        now = now or now_local()
        today = format_date(now)

        record = self._attendance.get_for_employee_and_date(employee_id, today)
        if not record:
            logger.warning("Check-out for %s on %s without a check-in", employee_id, today)
            return None

        check_out_time = format_time(now)
        record = dataclasses.replace(
            record,
            check_out_time=check_out_time,
            total_hours=calculate_total_hours(record.check_in_time, check_out_time, today),
        )
        self._attendance.save(record)
        logger.info("Check-out %s on %s at %s (%s)", employee_id, today, check_out_time, record.total_hours)
        return record

    def upsert_record(
        self,
        changes: AttendanceRecord | Mapping[str, Any],
        *,
        record_id: Optional[str] = None,
    ) -> AttendanceRecord:
        """Insert a record or shallow-merge ``changes`` over the existing one.

        The id is always ``employee_id-date``; a caller-supplied id that does
        not match is rejected. Duration and (unless Absent / On Leave) status
        are re-derived from the times before saving.
        """

        if isinstance(changes, AttendanceRecord):
            fields = changes.to_dict()
            for name in _RECORD_FIELDS:
                fields.setdefault(name, None)
        else:
            fields = dict(changes)

        body_id = fields.pop("id", None)
        if record_id and body_id and body_id != record_id:
            raise ValidationError("Record id in body does not match the target record")
        caller_id = record_id or body_id

        unknown = set(fields) - set(_RECORD_FIELDS)
        if unknown:
            raise ValidationError(f"Unknown attendance fields: {', '.join(sorted(unknown))}")
        fields = self._clean_fields(fields)

        existing = self._attendance.get_by_id(caller_id) if caller_id else None
        if existing is None and fields.get("employee_id") and fields.get("date"):
            existing = self._attendance.get_for_employee_and_date(fields["employee_id"], fields["date"])

        merged: dict[str, Any] = dict(existing.to_dict()) if existing else {}
        merged.pop("id", None)
        merged.update(fields)

        record = self._build_record(merged)
        if caller_id and caller_id != record.record_id:
            raise ValidationError(f"Record id must be {record.record_id}")

        record = self._apply_derived_fields(record)
        self._attendance.save(record)
        logger.info(
            "%s attendance record %s (%s)",
            "Updated" if existing else "Inserted",
            record.record_id,
            record.status.value,
        )
        return record

    def apply_manual_edit(self, record_id: str, field: str, value: Optional[str]) -> AttendanceRecord:
        """One HR table cell edit, validated and routed through ``upsert_record``."""

        record = self._attendance.get_by_id(record_id)
        if not record:
            raise NotFoundError("Attendance record not found.")

        changes: dict[str, Any]
        if field in _TIME_FIELDS:
            changes = {field: normalize_manual_time(value)}
            if changes[field] is None:
                changes["total_hours"] = None
        elif field == "status":
            status = self._coerce_status(value)
            changes = {"status": status.value}
            if status.is_manual_override:
                changes.update(check_in_time=None, check_out_time=None, total_hours=None)
        elif field == "remarks":
            changes = {"remarks": value or None}
        else:
            raise ValidationError(f"Field {field!r} cannot be edited")

        return self.upsert_record(changes, record_id=record_id)

    @staticmethod
    def _clean_fields(fields: Mapping[str, Any]) -> dict[str, Any]:
        # Only the incoming values; stored records are not re-validated.
        out = dict(fields)
        for name in _TEXT_FIELDS:
            if name in out:
                require_text(out[name], name)
        for name in _TIME_FIELDS:
            if name in out:
                out[name] = normalize_record_time(out[name], name)
        return out

    def _build_record(self, merged: Mapping[str, Any]) -> AttendanceRecord:
        employee_id = merged.get("employee_id")
        work_date = merged.get("date")
        if not employee_id or not work_date:
            raise ValidationError("employee_id and date are required")
        try:
            parse_iso_date(work_date)
        except (TypeError, ValueError):
            raise ValidationError("Date must be YYYY-MM-DD")

        employee_name = merged.get("employee_name")
        if not employee_name and self._employees:
            employee = self._employees.get_by_id(employee_id)
            employee_name = employee.name if employee else None

        return AttendanceRecord(
            employee_id=str(employee_id),
            employee_name=employee_name or "",
            work_date=work_date,
            status=self._coerce_status(merged.get("status")),
            check_in_time=merged.get("check_in_time") or None,
            check_out_time=merged.get("check_out_time") or None,
            total_hours=merged.get("total_hours") or None,
            remarks=merged.get("remarks") or None,
        )

    def _apply_derived_fields(self, record: AttendanceRecord) -> AttendanceRecord:
        if record.check_in_time and record.check_out_time and record.work_date:
            record = dataclasses.replace(
                record,
                total_hours=calculate_total_hours(record.check_in_time, record.check_out_time, record.work_date),
            )

        if not record.status.is_manual_override and record.check_in_time:
            check_in = combine(record.work_date, record.check_in_time)
            # Unparsable check-in is never after the cutoff.
            status = self._status_for(check_in) if check_in else AttendanceStatus.PRESENT
            record = dataclasses.replace(record, status=status)
        return record

    @staticmethod
    def _coerce_status(value: Any) -> AttendanceStatus:
        try:
            return AttendanceStatus(value)
        except ValueError:
            raise ValidationError("Status must be one of Present, Late, Absent, On Leave")

    def get_all(self) -> Sequence[AttendanceRecord]:
        return self._attendance.list_all()

    def get_by_employee_and_date(self, employee_id: str, work_date: str) -> Optional[AttendanceRecord]:
        return self._attendance.get_for_employee_and_date(employee_id, work_date)

    def get_by_date(self, work_date: str) -> Sequence[AttendanceRecord]:
        return self._attendance.list_for_date(work_date)

    def get_history(self, employee_id: str, *, limit: int | None = None) -> list[AttendanceRecord]:
        """Employee's records, newest first."""
        if limit is not None and limit < 1:
            raise ValidationError("limit must be a positive number")
        rows = sorted(self._attendance.list_for_employee(employee_id), key=lambda r: r.work_date, reverse=True)
        return rows if limit is None else rows[:limit]

    def get_today_record(self, employee_id: str, today: date | None = None) -> Optional[AttendanceRecord]:
        """Get today's attendance record for an employee"""
        today = today or now_local().date()
        return self._attendance.get_for_employee_and_date(employee_id, format_date(today))

    def list_view(self, *, search: str = "", work_date: str | None = None) -> list[AttendanceRecord]:
        """HR table: date descending, then employee name; optional filters."""

        needle = (search or "").strip().lower()
        rows = [
            r
            for r in self._attendance.list_all()
            if (not needle or needle in r.employee_name.lower() or needle in r.employee_id.lower())
            and (not work_date or r.work_date == work_date)
        ]
        rows.sort(key=lambda r: r.employee_name.lower())
        rows.sort(key=lambda r: r.work_date, reverse=True)
        return rows
