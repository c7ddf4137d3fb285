from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.attendease.attendease.container import build_container, build_store
from src.attendease.attendease.core.enums import Role
from src.attendease.attendease.core.exceptions import DuplicateIdentifierError

DEMO_EMPLOYEES = [
    {"employee_id": "EMP001", "name": "Jane Cooper", "role": Role.EMPLOYEE, "password": "employee123", "email": "jane@example.com"},
    {"employee_id": "EMP002", "name": "Wade Warren", "role": Role.EMPLOYEE, "password": "employee123"},
    {"employee_id": "HR002", "name": "Esther Howard", "role": Role.HR, "password": "hrpassword2", "email": "esther@example.com"},
]


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    store = build_store(
        settings.STORAGE_BACKEND,
        storage_path=getattr(settings, "STORAGE_PATH", None),
        db_config=getattr(settings, "DB_CONFIG", None),
        auto_init_db=bool(getattr(settings, "AUTO_INIT_DB", False)),
    )
    container = build_container(store=store, late_cutoff=getattr(settings, "LATE_CUTOFF", None))
    container.auth_service.ensure_default_admin()

    added = 0
    for data in DEMO_EMPLOYEES:
        try:
            container.employee_service.add_employee(**data)
        except DuplicateIdentifierError:
            print(f"SKIP: {data['employee_id']} already exists")
            continue
        added += 1

    print(f"OK: Seeded {added} demo employees ({settings.STORAGE_BACKEND} storage)")


if __name__ == "__main__":
    main()
