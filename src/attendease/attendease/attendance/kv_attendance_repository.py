from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import ATTENDANCE_KEY
from ..database.store import KeyValueStore
from .model import AttendanceRecord
from .repository import AttendanceRepository


class KVAttendanceRepository(AttendanceRepository):
    """Attendance Ledger kept as one JSON list under ``ATTENDANCE_KEY``."""

    def __init__(self, store: KeyValueStore, *, key: str = ATTENDANCE_KEY):
        self._store = store
        self._key = key

    def _load(self) -> list[AttendanceRecord]:
        raw = self._store.get(self._key) or []
        return [AttendanceRecord.from_dict(r) for r in raw]

    def list_all(self) -> Sequence[AttendanceRecord]:
        return self._load()

    def get_by_id(self, record_id: str) -> Optional[AttendanceRecord]:
        return next((r for r in self._load() if r.record_id == record_id), None)

    def get_for_employee_and_date(self, employee_id: str, work_date: str) -> Optional[AttendanceRecord]:
        return next(
            (r for r in self._load() if r.employee_id == employee_id and r.work_date == work_date),
            None,
        )

    def list_for_date(self, work_date: str) -> Sequence[AttendanceRecord]:
        return [r for r in self._load() if r.work_date == work_date]

    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        return [r for r in self._load() if r.employee_id == employee_id]

    def save(self, record: AttendanceRecord) -> None:
        records = self._load()
        for i, r in enumerate(records):
            if r.record_id == record.record_id:
                records[i] = record
                break
        else:
            records.append(record)
        self._store.set(self._key, [r.to_dict() for r in records])
