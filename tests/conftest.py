from __future__ import annotations

from datetime import datetime

import pytest

from src.attendease.attendease.container import build_container
from src.attendease.attendease.database.memory_store import InMemoryKeyValueStore
from src.attendease.attendease.main import create_app


@pytest.fixture
def fixed_now():
    return datetime(2026, 2, 2, 9, 0, 0)


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
def container(store):
    c = build_container(store=store)
    c.auth_service.ensure_default_admin()
    return c


@pytest.fixture
def app(store):
    return create_app(settings_module="config.testing", store=store)


@pytest.fixture
def client(app):
    return app.test_client()
