from __future__ import annotations

from typing import Optional

from .base import KeyValueStorage
from .bootstrap import KV_TABLE
from .connection import DatabaseConnection
from .mysql_base import db_cursor, fetchone


class MySQLStorage(KeyValueStorage):
    """Key-value rows in a single MySQL table."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def read(self, key: str) -> Optional[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT payload FROM {KV_TABLE} WHERE storage_key=%s",
                (key,),
            )
            row = fetchone(cur)
            if not row:
                return None
            return str(row["payload"])

    def write(self, key: str, value: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO {KV_TABLE}(storage_key, payload)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE payload=VALUES(payload)
                """,
                (key, value),
            )

    def remove(self, key: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM {KV_TABLE} WHERE storage_key=%s", (key,))
