"""
Tests for creating tables in a database file
"""

import logging
import sqlite3

import pytest

from mcp_record_schema.bootstrap import create_tables, open_database
from mcp_record_schema.config import Settings
from mcp_record_schema.errors import DatabaseOpenError
from mcp_record_schema.schema_models import RecordSchema


def test_create_tables(db_path, user_schema, product_schema):
    result = create_tables(db_path, [user_schema, product_schema])

    assert result == {
        "db_path": db_path,
        "tables_created": 2,
        "tables": ["users", "products"],
        "errors": [],
    }

    conn = sqlite3.connect(db_path)
    try:
        names = [row[0] for row in conn.execute("SELECT name FROM sqlite_master WHERE type='table' ORDER BY name")]
    finally:
        conn.close()
    assert "users" in names
    assert "products" in names


def test_create_tables_twice(db_path, user_schema):
    create_tables(db_path, [user_schema])
    result = create_tables(db_path, [user_schema])

    assert result["tables"] == ["users"]
    assert result["errors"] == []


def test_create_tables_continues_after_failure(db_path, user_schema, product_schema):
    empty = RecordSchema(record_name="Empty")

    result = create_tables(db_path, [user_schema, empty, product_schema])

    assert result["tables"] == ["users", "products"]
    assert len(result["errors"]) == 1
    assert result["errors"][0]["table"] == "emptys"
    assert "syntax error" in result["errors"][0]["error"]


def test_open_database_missing_directory(tmp_path, user_schema):
    missing = str(tmp_path / "missing" / "company.db")

    with pytest.raises(DatabaseOpenError) as exc_info:
        open_database(missing)
    assert exc_info.value.db_path == missing

    with pytest.raises(DatabaseOpenError):
        create_tables(missing, [user_schema])


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("RECORD_SCHEMA_DB_PATH", "inventory.db")
    monkeypatch.setenv("RECORD_SCHEMA_ECHO_SQL", "false")

    settings = Settings(_env_file=None)

    assert settings.DB_PATH == "inventory.db"
    assert settings.ECHO_SQL is False
    assert settings.LOG_LEVEL == "INFO"


def test_create_tables_logs_each_failure_once(db_path, caplog):
    empty = RecordSchema(record_name="Empty")

    with caplog.at_level(logging.DEBUG, logger="mcp_record_schema"):
        create_tables(db_path, [empty])

    errors = [r for r in caplog.records if r.levelno >= logging.ERROR]
    assert len(errors) == 1
    assert "emptys" in errors[0].getMessage()
