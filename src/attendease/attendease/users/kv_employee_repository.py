from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import EMPLOYEES_KEY
from ..database.store import KeyValueStore
from .model import Employee
from .repository import EmployeeRepository


class KVEmployeeRepository(EmployeeRepository):
    """Employee Directory kept as one JSON list under ``EMPLOYEES_KEY``.

    Every write re-serializes the whole list.
    """

    def __init__(self, store: KeyValueStore, *, key: str = EMPLOYEES_KEY):
        self._store = store
        self._key = key

    def _load(self) -> list[Employee]:
        raw = self._store.get(self._key) or []
        return [Employee.from_dict(r) for r in raw]

    def _save(self, employees: Sequence[Employee]) -> None:
        self._store.set(self._key, [e.to_dict() for e in employees])

    def list_all(self) -> Sequence[Employee]:
        return self._load()

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        for e in self._load():
            if e.employee_id == employee_id:
                return e
        return None

    def add(self, employee: Employee) -> None:
        employees = self._load()
        employees.append(employee)
        self._save(employees)

    def replace(self, employee: Employee) -> bool:
        employees = self._load()
        for i, e in enumerate(employees):
            if e.employee_id == employee.employee_id:
                employees[i] = employee
                self._save(employees)
                return True
        return False

    def delete_by_id(self, employee_id: str) -> bool:
        employees = self._load()
        kept = [e for e in employees if e.employee_id != employee_id]
        if len(kept) == len(employees):
            return False
        self._save(kept)
        return True

    def seed_if_empty(self, employees: Sequence[Employee]) -> bool:
        raw = self._store.get(self._key)
        if raw:
            return False
        payload = [e.to_dict() for e in employees]
        if raw is None:
            return self._store.set_if_absent(self._key, payload)
        self._store.set(self._key, payload)
        return True
