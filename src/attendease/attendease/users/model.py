from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Employee:
    """Domain entity: a directory entry.

    Note: plain data, no storage access. ``password`` is kept as entered.
    """

    employee_id: str
    name: str
    role: Role
    password: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    is_phone_verified: Optional[bool] = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "id": self.employee_id,
            "name": self.name,
            "role": self.role.value,
        }
        for key, value in (
            ("password", self.password),
            ("email", self.email),
            ("phone", self.phone),
            ("is_phone_verified", self.is_phone_verified),
        ):
            if value is not None:
                out[key] = value
        return out

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Employee":
        return cls(
            employee_id=str(raw["id"]),
            name=str(raw.get("name", "")),
            role=Role(raw["role"]),
            password=raw.get("password"),
            email=raw.get("email"),
            phone=raw.get("phone"),
            is_phone_verified=raw.get("is_phone_verified"),
        )

    def public_dict(self) -> dict[str, Any]:
        """Serialized form without the credential, for API responses."""
        out = self.to_dict()
        out.pop("password", None)
        return out


@dataclass(frozen=True)
class SessionUser:
    """What we keep in the session after login: an Employee minus credential."""

    employee_id: str
    name: str
    role: Role
    email: Optional[str] = None
    phone: Optional[str] = None
    is_phone_verified: Optional[bool] = None

    @classmethod
    def from_employee(cls, employee: Employee) -> "SessionUser":
        return cls(
            employee_id=employee.employee_id,
            name=employee.name,
            role=employee.role,
            email=employee.email,
            phone=employee.phone,
            is_phone_verified=employee.is_phone_verified,
        )

    @property
    def is_hr(self) -> bool:
        return self.role == Role.HR

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.employee_id,
            "name": self.name,
            "role": self.role.value,
            "email": self.email,
            "phone": self.phone,
            "is_phone_verified": self.is_phone_verified,
        }

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "SessionUser":
        return cls(
            employee_id=str(raw["id"]),
            name=str(raw.get("name", "")),
            role=Role(raw["role"]),
            email=raw.get("email"),
            phone=raw.get("phone"),
            is_phone_verified=raw.get("is_phone_verified"),
        )
