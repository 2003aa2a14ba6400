from __future__ import annotations

import logging

from .connection import DatabaseConnection
from .mysql_base import db_cursor

logger = logging.getLogger(__name__)

KV_TABLE = "kv_store"

SCHEMA_SQL = f"""
CREATE TABLE IF NOT EXISTS {KV_TABLE} (
    storage_key VARCHAR(64) NOT NULL PRIMARY KEY,
    payload LONGTEXT NOT NULL,
    updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP
)
"""


def ensure_schema(conn_factory: DatabaseConnection) -> None:
    """Create the key-value table if missing (idempotent)."""
    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        cur.execute(SCHEMA_SQL)
    logger.info("storage table %s ready", KV_TABLE)
