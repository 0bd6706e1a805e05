import sqlite3

import pytest

from mcp_record_schema.field_types import SemanticType
from mcp_record_schema.schema_models import RecordSchema


@pytest.fixture
def user_schema():
    return RecordSchema.from_fields("User", [
        ("id", SemanticType.INTEGER),
        ("name", SemanticType.TEXT),
        ("email", SemanticType.TEXT),
        ("age", SemanticType.INTEGER),
        ("is_active", SemanticType.BOOLEAN),
    ])


@pytest.fixture
def product_schema():
    return RecordSchema.from_fields("Product", [
        ("id", SemanticType.INTEGER),
        ("name", SemanticType.TEXT),
        ("price", SemanticType.FLOAT),
        ("in_stock", SemanticType.BOOLEAN),
        ("image_data", SemanticType.BLOB),
    ])


@pytest.fixture
def record_document():
    return {
        "records": [
            {
                "name": "User",
                "fields": [
                    {"name": "id", "type": "i32"},
                    {"name": "name", "type": "String"},
                    {"name": "email", "type": "String"},
                    {"name": "age", "type": "u32"},
                    {"name": "is_active", "type": "bool"},
                ],
            },
            {
                "name": "Product",
                "fields": {
                    "id": "i32",
                    "name": "String",
                    "price": "f64",
                    "in_stock": "bool",
                    "image_data": "Vec<u8>",
                },
            },
        ]
    }


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "company.db")


@pytest.fixture
def conn(db_path):
    connection = sqlite3.connect(db_path)
    yield connection
    connection.close()


@pytest.fixture
def table_columns():
    """(name, type, pk) for each column, as SQLite reports them"""
    def columns(connection, table_name):
        rows = connection.execute(f"PRAGMA table_info({table_name})").fetchall()
        return [(row[1], row[2], row[5]) for row in rows]
    return columns
