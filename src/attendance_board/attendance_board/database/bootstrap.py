from __future__ import annotations

import logging

from .connection import DatabaseConnection
from .mysql_base import db_cursor

logger = logging.getLogger(__name__)

STORAGE_TABLE = "app_storage"

# Named JSON blobs per application namespace; the column mapping lives under 'config'.
STORAGE_TABLE_DDL = f"""
CREATE TABLE IF NOT EXISTS {STORAGE_TABLE} (
    storage_id INT AUTO_INCREMENT PRIMARY KEY,
    namespace VARCHAR(100) NOT NULL,
    storage_key VARCHAR(100) NOT NULL,
    value TEXT NOT NULL,
    updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP,
    UNIQUE KEY uq_app_storage_key (namespace, storage_key)
) CHARACTER SET utf8mb4
"""


def ensure_storage_table(conn_factory: DatabaseConnection) -> None:
    """Create the settings table in the configured database if it is missing."""

    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        cur.execute(STORAGE_TABLE_DDL)
    logger.info("Storage table %s is ready", STORAGE_TABLE)
