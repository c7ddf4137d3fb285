from __future__ import annotations

import dataclasses
import logging
from typing import Any, Mapping, Optional, Sequence

from ..common.validators import require_min_length, require_non_empty, require_text
from ..core.constants import (
    DEFAULT_ADMIN_EMAIL,
    DEFAULT_ADMIN_ID,
    DEFAULT_ADMIN_NAME,
    DEFAULT_ADMIN_PASSWORD,
    MIN_PASSWORD_LENGTH,
)
from ..core.enums import Role
from ..core.exceptions import (
    DuplicateIdentifierError,
    LastAdminViolationError,
    NotFoundError,
    ValidationError,
)
from .model import Employee, SessionUser
from .repository import EmployeeRepository
from .session import SessionStore

logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS = ("name", "role", "password", "email", "phone", "is_phone_verified")


def _coerce_role(value: Any) -> Role:
    if isinstance(value, Role):
        return value
    try:
        return Role(value)
    except ValueError:
        raise ValidationError("Role must be HR or Employee")


class AuthService:
    """Use case: log in / log out against the Employee Directory."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def ensure_default_admin(self) -> bool:
        """Seed the bootstrap HR account when the directory is empty.

        Safe to call on every start; returns True only when it seeded.
        """

        admin = Employee(
            employee_id=DEFAULT_ADMIN_ID,
            name=DEFAULT_ADMIN_NAME,
            role=Role.HR,
            password=DEFAULT_ADMIN_PASSWORD,
            email=DEFAULT_ADMIN_EMAIL,
        )
        seeded = self._employees.seed_if_empty([admin])
        if seeded:
            logger.info("Employee directory was empty; seeded default HR account %s", admin.employee_id)
        return seeded

    def login(self, employee_id: str, password: str, role: Role | str, *, session: SessionStore) -> Optional[SessionUser]:
        try:
            role = Role(role)
        except ValueError:
            return None

        employee = self._employees.get_by_id(employee_id)
        if not employee or employee.role != role:
            return None
        if employee.password is None or employee.password != password:
            logger.warning("Rejected login for %s (%s)", employee_id, role.value)
            return None

        user = SessionUser.from_employee(employee)
        session.set(user)
        logger.info("%s logged in as %s", employee_id, role.value)
        return user

    def logout(self, *, session: SessionStore) -> None:
        session.clear()

    def get_current_user(self, *, session: SessionStore) -> Optional[SessionUser]:
        return session.get()


class EmployeeService:
    """Use case: manage the Employee Directory (HR)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_all(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._employees.get_by_id(employee_id)

    def does_id_exist_with_role(self, employee_id: str, role: Role | str) -> bool:
        try:
            role = Role(role)
        except ValueError:
            return False
        employee = self._employees.get_by_id(employee_id)
        return employee is not None and employee.role == role

    def search(self, term: str = "") -> list[Employee]:
        """Name/id/role substring search, sorted by name."""
        needle = (term or "").strip().lower()
        out = [
            e
            for e in self._employees.list_all()
            if not needle
            or needle in e.name.lower()
            or needle in e.employee_id.lower()
            or needle in e.role.value.lower()
        ]
        out.sort(key=lambda e: e.name.lower())
        return out

    def add_employee(
        self,
        *,
        employee_id: str,
        name: str,
        role: Role | str,
        password: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> Employee:
        employee_id = require_non_empty(employee_id, "Employee ID")
        name = require_non_empty(name, "Name")
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)
        role = _coerce_role(role)
        require_text(email, "Email")
        require_text(phone, "Phone")

        if self._employees.get_by_id(employee_id):
            raise DuplicateIdentifierError("Employee ID already exists.")

        employee = Employee(
            employee_id=employee_id,
            name=name,
            role=role,
            password=password,
            email=email or None,
            phone=phone or None,
        )
        self._employees.add(employee)
        logger.info("Added employee %s (%s)", employee_id, role.value)
        return employee

    def sign_up_hr(
        self,
        *,
        employee_id: str,
        name: str,
        password: str,
        confirm_password: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> Employee:
        """Self-service HR account creation; the role is always HR."""

        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)
        if password != confirm_password:
            raise ValidationError("Passwords do not match")
        return self.add_employee(
            employee_id=employee_id,
            name=name,
            role=Role.HR,
            password=password,
            email=email,
            phone=phone,
        )

    def update_employee(self, employee_id: str, changes: Mapping[str, Any]) -> Employee:
        """Merge ``changes`` onto the stored employee field by field.

        Keys not present are left alone. A missing or empty ``password`` keeps
        the stored credential.
        """

        current = self._employees.get_by_id(employee_id)
        if not current:
            raise NotFoundError("Employee not found.")

        changes = dict(changes)
        new_id = changes.pop("id", employee_id)
        if new_id != employee_id:
            raise ValidationError("Employee ID cannot be changed")
        unknown = set(changes) - set(_UPDATABLE_FIELDS)
        if unknown:
            raise ValidationError(f"Unknown employee fields: {', '.join(sorted(unknown))}")

        if not changes.get("password"):
            changes.pop("password", None)
        else:
            require_min_length(changes["password"], "Password", MIN_PASSWORD_LENGTH)
        if "name" in changes:
            changes["name"] = require_non_empty(changes["name"], "Name")
        for key in ("email", "phone"):
            if key in changes:
                changes[key] = require_text(changes[key], key.capitalize()) or None
        if "is_phone_verified" in changes and not isinstance(changes["is_phone_verified"], bool):
            raise ValidationError("is_phone_verified must be true or false")
        if "role" in changes:
            changes["role"] = _coerce_role(changes["role"])
            if current.role == Role.HR and changes["role"] != Role.HR and self._hr_count(self._employees.list_all()) <= 1:
                raise LastAdminViolationError("Cannot change the role of the last HR admin.")

        updated = dataclasses.replace(current, **changes)
        self._employees.replace(updated)
        logger.info("Updated employee %s (%s)", employee_id, ", ".join(sorted(changes)) or "no changes")
        return updated

    def remove_employee(self, employee_id: str) -> None:
        employees = self._employees.list_all()
        target = next((e for e in employees if e.employee_id == employee_id), None)
        if not target:
            raise NotFoundError("Employee not found.")

        if target.role == Role.HR and self._hr_count(employees) <= 1:
            logger.warning("Refused to remove %s: last HR account", employee_id)
            raise LastAdminViolationError("Cannot delete the last HR admin.")

        self._employees.delete_by_id(employee_id)
        # Attendance records of the removed employee stay in the ledger.
        logger.info("Removed employee %s", employee_id)

    @staticmethod
    def _hr_count(employees: Sequence[Employee]) -> int:
        return sum(1 for e in employees if e.role == Role.HR)
