"""
Errors raised while opening databases and applying schemas
"""

from typing import Optional


class DbError(Exception):
    """A DDL statement failed against the database"""

    def __init__(self, message: str, table_name: Optional[str] = None, sql: Optional[str] = None):
        self.message = message
        self.table_name = table_name
        self.sql = sql
        if table_name:
            super().__init__(f"Failed to create table '{table_name}': {message}")
        else:
            super().__init__(message)


class DatabaseOpenError(Exception):
    """The database file could not be opened"""

    def __init__(self, db_path: str, message: str):
        self.db_path = db_path
        self.message = message
        super().__init__(f"Failed to open database '{db_path}': {message}")
