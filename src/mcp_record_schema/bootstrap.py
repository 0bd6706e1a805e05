"""
Bootstrap - open a SQLite file and create tables for a set of records
"""

import logging
import sqlite3
from typing import Any, Dict, Iterable

from .errors import DatabaseOpenError, DbError
from .schema_applier import SchemaApplier
from .schema_models import RecordSchema

logger = logging.getLogger(__name__)


def open_database(db_path: str) -> sqlite3.Connection:
    try:
        return sqlite3.connect(db_path)
    except sqlite3.Error as e:
        logger.error("Failed to open database '%s': %s", db_path, e)
        raise DatabaseOpenError(db_path, str(e)) from e


def create_tables(db_path: str, records: Iterable[RecordSchema]) -> Dict[str, Any]:
    """Create one table per record in the given database file.

    Records are applied one at a time in the order given. A failing table is
    reported in ``errors`` and the remaining records are still applied.
    """
    conn = open_database(db_path)
    applier = SchemaApplier(conn)

    tables = []
    errors = []
    try:
        for record in records:
            try:
                result = applier.apply(record)
            except DbError as e:
                logger.error("Error creating table '%s': %s", e.table_name, e.message)
                errors.append({"table": e.table_name, "error": e.message})
                continue
            tables.append(result.table_name)
    finally:
        conn.close()

    return {
        "db_path": db_path,
        "tables_created": len(tables),
        "tables": tables,
        "errors": errors,
    }
