from __future__ import annotations

import json
from typing import Any, Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .repository import ColumnMappingStore


class MySQLColumnMappingStore(ColumnMappingStore):
    def __init__(self, conn_factory: DatabaseConnection, *, namespace: str):
        self._conn_factory = conn_factory
        self._namespace = namespace

    def get(self, key: str) -> Optional[dict[str, Any]]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT value
                FROM app_storage
                WHERE namespace=%s AND storage_key=%s
                """,
                (self._namespace, key),
            )
            r = fetchone(cur)
            if not r or not r.get("value"):
                return None
            return json.loads(r["value"])

    def set(self, key: str, value: dict[str, Any]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO app_storage(namespace, storage_key, value)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE value=VALUES(value)
                """,
                (self._namespace, key, json.dumps(value)),
            )
