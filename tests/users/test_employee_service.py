from __future__ import annotations

import pytest

from src.attendease.attendease.core.enums import Role
from src.attendease.attendease.core.exceptions import (
    DuplicateIdentifierError,
    LastAdminViolationError,
    NotFoundError,
    ValidationError,
)
from src.attendease.attendease.database.memory_store import InMemoryKeyValueStore
from src.attendease.attendease.users.kv_employee_repository import KVEmployeeRepository
from src.attendease.attendease.users.service import AuthService, EmployeeService


@pytest.fixture
def repo():
    r = KVEmployeeRepository(InMemoryKeyValueStore())
    AuthService(r).ensure_default_admin()
    return r


@pytest.fixture
def svc(repo):
    return EmployeeService(repo)


def test_add_then_get(svc):
    svc.add_employee(employee_id="EMP001", name="Jane Cooper", role=Role.EMPLOYEE, password="secret1", email="jane@example.com")

    emp = svc.get_by_id("EMP001")
    assert emp is not None
    assert emp.employee_id == "EMP001"
    assert emp.role == Role.EMPLOYEE
    assert emp.email == "jane@example.com"


def test_add_duplicate_id_fails(svc):
    svc.add_employee(employee_id="EMP001", name="Jane", role="Employee", password="secret1")

    with pytest.raises(DuplicateIdentifierError):
        svc.add_employee(employee_id="EMP001", name="Other", role="HR", password="secret2")
    assert len(svc.list_all()) == 2


@pytest.mark.parametrize(
    "kwargs",
    [
        {"employee_id": "", "name": "Jane", "role": "Employee", "password": "secret1"},
        {"employee_id": "EMP009", "name": " ", "role": "Employee", "password": "secret1"},
        {"employee_id": "EMP009", "name": "Jane", "role": "Manager", "password": "secret1"},
        {"employee_id": "EMP009", "name": "Jane", "role": "Employee", "password": "short"},
    ],
)
def test_add_validates_input(svc, kwargs):
    with pytest.raises(ValidationError):
        svc.add_employee(**kwargs)


def test_update_without_password_keeps_it(svc, repo):
    svc.add_employee(employee_id="EMP001", name="Jane", role="Employee", password="secret1")

    svc.update_employee("EMP001", {"name": "Jane Cooper", "phone": "555-0101"})
    svc.update_employee("EMP001", {"password": ""})

    emp = repo.get_by_id("EMP001")
    assert emp.name == "Jane Cooper"
    assert emp.phone == "555-0101"
    assert emp.password == "secret1"


def test_update_with_password_replaces_it(svc, repo):
    svc.add_employee(employee_id="EMP001", name="Jane", role="Employee", password="secret1")

    svc.update_employee("EMP001", {"password": "newsecret"})

    assert repo.get_by_id("EMP001").password == "newsecret"


def test_update_missing_employee(svc):
    with pytest.raises(NotFoundError):
        svc.update_employee("NOPE", {"name": "x"})


def test_update_cannot_change_id(svc):
    svc.add_employee(employee_id="EMP001", name="Jane", role="Employee", password="secret1")

    with pytest.raises(ValidationError):
        svc.update_employee("EMP001", {"id": "EMP002"})


def test_remove_last_hr_fails(svc):
    with pytest.raises(LastAdminViolationError):
        svc.remove_employee("HR001")
    assert svc.get_by_id("HR001") is not None


def test_remove_non_last_hr_and_employee(svc):
    svc.add_employee(employee_id="HR002", name="Esther", role="HR", password="secret1")
    svc.add_employee(employee_id="EMP001", name="Jane", role="Employee", password="secret1")

    svc.remove_employee("HR001")
    svc.remove_employee("EMP001")

    assert [e.employee_id for e in svc.list_all()] == ["HR002"]


def test_remove_missing_employee(svc):
    with pytest.raises(NotFoundError):
        svc.remove_employee("NOPE")


def test_last_hr_cannot_be_demoted(svc):
    with pytest.raises(LastAdminViolationError):
        svc.update_employee("HR001", {"role": "Employee"})


def test_does_id_exist_with_role(svc):
    assert svc.does_id_exist_with_role("HR001", "HR")
    assert not svc.does_id_exist_with_role("HR001", "Employee")
    assert not svc.does_id_exist_with_role("HR001", "Boss")
    assert not svc.does_id_exist_with_role("NOPE", "HR")


def test_search_sorted_by_name(svc):
    svc.add_employee(employee_id="EMP002", name="Wade Warren", role="Employee", password="secret1")
    svc.add_employee(employee_id="EMP001", name="Jane Cooper", role="Employee", password="secret1")

    assert [e.name for e in svc.search()] == ["Admin HR", "Jane Cooper", "Wade Warren"]
    assert [e.employee_id for e in svc.search("employee")] == ["EMP001", "EMP002"]
    assert [e.employee_id for e in svc.search("WADE")] == ["EMP002"]


@pytest.mark.parametrize(
    "changes",
    [
        {"name": 42},
        {"password": 1234567},
        {"email": ["jane@example.com"]},
        {"is_phone_verified": "yes"},
    ],
)
def test_update_rejects_wrong_types(svc, repo, changes):
    svc.add_employee(employee_id="EMP001", name="Jane", role="Employee", password="secret1")

    with pytest.raises(ValidationError):
        svc.update_employee("EMP001", changes)
    assert repo.get_by_id("EMP001").name == "Jane"


def test_add_rejects_non_string_name(svc):
    with pytest.raises(ValidationError):
        svc.add_employee(employee_id="EMP001", name=7, role="Employee", password="secret1")


def test_sign_up_hr_forces_role(svc):
    emp = svc.sign_up_hr(employee_id="HR002", name="Esther", password="secret1", confirm_password="secret1")

    assert emp.role == Role.HR
    assert svc.does_id_exist_with_role("HR002", "HR")


def test_sign_up_hr_checks_passwords(svc):
    with pytest.raises(ValidationError):
        svc.sign_up_hr(employee_id="HR002", name="Esther", password="secret1", confirm_password="secret2")
    with pytest.raises(ValidationError):
        svc.sign_up_hr(employee_id="HR002", name="Esther", password="abc", confirm_password="abc")
    with pytest.raises(DuplicateIdentifierError):
        svc.sign_up_hr(employee_id="HR001", name="Dup", password="secret1", confirm_password="secret1")
    assert svc.get_by_id("HR002") is None
