"""Example: drive the service layer directly (no Flask).

Controllers stay thin; the business rules live in the services.
"""

from src.attendease.attendease.container import build_container
from src.attendease.attendease.core.enums import Role
from src.attendease.attendease.database.memory_store import InMemoryKeyValueStore
from src.attendease.attendease.users.session import KVSessionStore


def main():
    store = InMemoryKeyValueStore()
    container = build_container(store=store)
    container.auth_service.ensure_default_admin()

    session = KVSessionStore(store)
    hr = container.auth_service.login("HR001", "hrpassword", Role.HR, session=session)
    print("logged in:", hr)

    container.employee_service.add_employee(employee_id="EMP001", name="Jane Cooper", role=Role.EMPLOYEE, password="secret1")
    record = container.attendance_service.check_in("EMP001", "Jane Cooper")
    print("check-in:", record.to_dict())
    print("check-out:", container.attendance_service.check_out("EMP001").to_dict())


if __name__ == "__main__":
    main()
