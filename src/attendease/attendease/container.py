from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Optional

from .attendance.factory import AttendanceStrategyFactory
from .attendance.kv_attendance_repository import KVAttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import parse_time_of_day
from .core.constants import DEFAULT_LATE_CUTOFF
from .database.bootstrap import apply_schema
from .database.connection import DBConfig, DatabaseConnection
from .database.json_store import JsonFileKeyValueStore
from .database.memory_store import InMemoryKeyValueStore
from .database.mysql_store import MySQLKeyValueStore
from .database.store import KeyValueStore
from .reports.service import AttendanceReportService
from .users.kv_employee_repository import KVEmployeeRepository
from .users.service import AuthService, EmployeeService


@dataclass(frozen=True)
class Container:
    store: KeyValueStore

    employees_repo: KVEmployeeRepository
    attendance_repo: KVAttendanceRepository

    auth_service: AuthService
    employee_service: EmployeeService
    attendance_service: AttendanceService
    report_service: AttendanceReportService


def build_store(
    backend: str,
    *,
    storage_path: Optional[str] = None,
    db_config: Optional[dict] = None,
    auto_init_db: bool = False,
) -> KeyValueStore:
    backend = (backend or "json").lower()
    if backend == "memory":
        return InMemoryKeyValueStore()
    if backend == "json":
        if not storage_path:
            raise ValueError("STORAGE_PATH is required for the json storage backend")
        return JsonFileKeyValueStore(storage_path)
    if backend == "mysql":
        conn = DatabaseConnection(DBConfig.from_mapping(db_config or {}))
        if auto_init_db:
            apply_schema(conn)
        return MySQLKeyValueStore(conn)
    raise ValueError(f"Unknown storage backend: {backend!r}")


def build_container(*, store: KeyValueStore, late_cutoff: time | str | None = None) -> Container:
    if isinstance(late_cutoff, str):
        late_cutoff = parse_time_of_day(late_cutoff)

    employees_repo = KVEmployeeRepository(store)
    attendance_repo = KVAttendanceRepository(store)

    auth_service = AuthService(employees_repo)
    employee_service = EmployeeService(employees_repo)
    attendance_service = AttendanceService(
        attendance_repo,
        employees_repo,
        strategy_factory=AttendanceStrategyFactory(late_cutoff=late_cutoff or DEFAULT_LATE_CUTOFF),
    )
    report_service = AttendanceReportService(attendance_service)

    return Container(
        store=store,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        auth_service=auth_service,
        employee_service=employee_service,
        attendance_service=attendance_service,
        report_service=report_service,
    )
