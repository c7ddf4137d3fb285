from __future__ import annotations

import json
from typing import Any, Optional

from .connection import DatabaseConnection
from .mysql_base import db_cursor, fetchone

KV_TABLE = "kv_store"


class MySQLKeyValueStore:
    """One row per key in ``kv_store``; values are JSON text."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, key: str) -> Optional[Any]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT v FROM {KV_TABLE} WHERE k=%s", (key,))
            row = fetchone(cur)
            if not row:
                return None
            return json.loads(row["v"])

    def set(self, key: str, value: Any) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO {KV_TABLE}(k, v) VALUES(%s, %s)
                ON DUPLICATE KEY UPDATE v=VALUES(v)
                """,
                (key, json.dumps(value, ensure_ascii=False)),
            )

    def set_if_absent(self, key: str, value: Any) -> bool:
        # INSERT IGNORE keeps two starting instances from both seeding a key.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT IGNORE INTO {KV_TABLE}(k, v) VALUES(%s, %s)",
                (key, json.dumps(value, ensure_ascii=False)),
            )
            return cur.rowcount > 0

    def remove(self, key: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM {KV_TABLE} WHERE k=%s", (key,))
