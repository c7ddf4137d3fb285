from __future__ import annotations

import json

import pytest

from src.attendease.attendease.container import build_store
from src.attendease.attendease.core.constants import EMPLOYEES_KEY
from src.attendease.attendease.database.json_store import JsonFileKeyValueStore
from src.attendease.attendease.database.memory_store import InMemoryKeyValueStore
from src.attendease.attendease.users.kv_employee_repository import KVEmployeeRepository
from src.attendease.attendease.users.service import AuthService


def test_json_store_persists_across_instances(tmp_path):
    path = tmp_path / "data" / "store.json"
    JsonFileKeyValueStore(path).set("k", {"a": [1, 2]})

    assert JsonFileKeyValueStore(path).get("k") == {"a": [1, 2]}
    assert json.loads(path.read_text(encoding="utf-8")) == {"k": {"a": [1, 2]}}
    assert not path.with_suffix(".json.tmp").exists()


def test_json_store_missing_file_reads_empty(tmp_path):
    store = JsonFileKeyValueStore(tmp_path / "nope.json")

    assert store.get("anything") is None


def test_json_store_set_if_absent_and_remove(tmp_path):
    store = JsonFileKeyValueStore(tmp_path / "store.json")

    assert store.set_if_absent("k", 1) is True
    assert store.set_if_absent("k", 2) is False
    assert store.get("k") == 1

    store.remove("k")
    store.remove("k")
    assert store.get("k") is None


def test_memory_store_copies_values():
    store = InMemoryKeyValueStore()
    value = {"rows": [1]}
    store.set("k", value)

    value["rows"].append(2)
    got = store.get("k")
    got["rows"].append(3)

    assert store.get("k") == {"rows": [1]}


def test_default_admin_seeded_once_in_json_store(tmp_path):
    path = tmp_path / "store.json"
    first = AuthService(KVEmployeeRepository(JsonFileKeyValueStore(path)))
    second = AuthService(KVEmployeeRepository(JsonFileKeyValueStore(path)))

    assert first.ensure_default_admin() is True
    assert second.ensure_default_admin() is False
    assert len(JsonFileKeyValueStore(path).get(EMPLOYEES_KEY)) == 1


def test_build_store_backends(tmp_path):
    assert isinstance(build_store("memory"), InMemoryKeyValueStore)
    assert isinstance(build_store("JSON", storage_path=str(tmp_path / "s.json")), JsonFileKeyValueStore)

    with pytest.raises(ValueError):
        build_store("json")
    with pytest.raises(ValueError):
        build_store("redis")
