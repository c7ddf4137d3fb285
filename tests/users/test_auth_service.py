from __future__ import annotations

from src.attendease.attendease.core.constants import DEFAULT_ADMIN_ID, DEFAULT_ADMIN_NAME, DEFAULT_ADMIN_PASSWORD
from src.attendease.attendease.core.enums import Role
from src.attendease.attendease.database.memory_store import InMemoryKeyValueStore
from src.attendease.attendease.users.kv_employee_repository import KVEmployeeRepository
from src.attendease.attendease.users.session import KVSessionStore, MappingSessionStore
from src.attendease.attendease.users.service import AuthService, EmployeeService


def _auth():
    store = InMemoryKeyValueStore()
    repo = KVEmployeeRepository(store)
    return AuthService(repo), repo, store


def test_bootstrap_seeds_single_hr():
    auth, repo, _ = _auth()

    assert auth.ensure_default_admin() is True
    assert auth.ensure_default_admin() is False

    employees = repo.list_all()
    assert len(employees) == 1
    assert employees[0].employee_id == DEFAULT_ADMIN_ID
    assert employees[0].name == DEFAULT_ADMIN_NAME
    assert employees[0].role == Role.HR


def test_bootstrap_skips_non_empty_directory():
    auth, repo, _ = _auth()
    EmployeeService(repo).add_employee(employee_id="HR777", name="Boss", role="HR", password="secret1")

    assert auth.ensure_default_admin() is False
    assert [e.employee_id for e in repo.list_all()] == ["HR777"]


def test_login_with_default_admin():
    auth, _, store = _auth()
    auth.ensure_default_admin()
    session = KVSessionStore(store)

    user = auth.login(DEFAULT_ADMIN_ID, DEFAULT_ADMIN_PASSWORD, Role.HR, session=session)

    assert user is not None
    assert user.role == Role.HR
    assert "password" not in user.to_dict()
    assert auth.get_current_user(session=session) == user


def test_login_wrong_role_fails():
    auth, _, store = _auth()
    auth.ensure_default_admin()
    session = KVSessionStore(store)

    assert auth.login(DEFAULT_ADMIN_ID, DEFAULT_ADMIN_PASSWORD, "Employee", session=session) is None
    assert auth.get_current_user(session=session) is None


def test_login_wrong_password_fails():
    auth, _, _ = _auth()
    auth.ensure_default_admin()
    session = MappingSessionStore({})

    assert auth.login(DEFAULT_ADMIN_ID, "wrong", "HR", session=session) is None
    assert session.get() is None


def test_login_unknown_role_value_fails():
    auth, _, _ = _auth()
    auth.ensure_default_admin()

    assert auth.login(DEFAULT_ADMIN_ID, DEFAULT_ADMIN_PASSWORD, "Admin", session=MappingSessionStore({})) is None


def test_sessions_are_independent():
    auth, repo, _ = _auth()
    auth.ensure_default_admin()
    EmployeeService(repo).add_employee(employee_id="EMP001", name="Jane", role="Employee", password="secret1")
    hr_session = MappingSessionStore({})
    emp_session = MappingSessionStore({})

    auth.login(DEFAULT_ADMIN_ID, DEFAULT_ADMIN_PASSWORD, "HR", session=hr_session)
    auth.login("EMP001", "secret1", "Employee", session=emp_session)
    auth.logout(session=hr_session)

    assert hr_session.get() is None
    assert emp_session.get().employee_id == "EMP001"
