"""
Schema Applier - executes generated DDL against an open SQLite connection
"""

import logging
import sqlite3
from dataclasses import dataclass
from typing import Optional

from .config import settings
from .errors import DbError
from .schema_converter import SchemaConverter
from .schema_models import RecordSchema

logger = logging.getLogger(__name__)


@dataclass
class ApplyResult:
    """Outcome of a successful CREATE TABLE IF NOT EXISTS"""
    table_name: str
    sql: str


def log_generated_sql(sql: str) -> None:
    level = logging.INFO if settings.ECHO_SQL else logging.DEBUG
    logger.log(level, "--- Generated SQL ---\n%s\n---------------------", sql)


def apply_schema(conn: sqlite3.Connection, sql: str, table_name: str) -> ApplyResult:
    """Execute one CREATE TABLE statement.

    The statement runs on its own. It is committed only when executing it
    opened a transaction, so work the caller left pending stays uncommitted.
    ``IF NOT EXISTS`` makes a second run a no-op; an existing table is not
    compared against the statement.

    Raises:
        DbError: the driver rejected the statement or the connection is unusable.
    """
    try:
        was_in_transaction = conn.in_transaction
        conn.execute(sql)
        if conn.in_transaction and not was_in_transaction:
            conn.commit()
    except sqlite3.Error as e:
        logger.debug("Error creating table '%s': %s", table_name, e)
        raise DbError(str(e), table_name=table_name, sql=sql) from e

    logger.info("Successfully created table '%s'.", table_name)
    return ApplyResult(table_name=table_name, sql=sql)


class SchemaApplier:
    """Compiles record schemas and applies them to one connection, in order"""

    def __init__(self, conn: sqlite3.Connection, converter: Optional[SchemaConverter] = None):
        self.conn = conn
        self.converter = converter or SchemaConverter()

    def apply(self, schema: RecordSchema) -> ApplyResult:
        sql = self.converter.record_to_sql(schema)
        log_generated_sql(sql)
        return apply_schema(self.conn, sql, schema.table_name)
