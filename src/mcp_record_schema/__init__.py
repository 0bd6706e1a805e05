"""
MCP Record Schema

Derives SQLite tables from typed record definitions.
Provides type mapping, CREATE TABLE generation, idempotent
table creation and an MCP server exposing them as tools.
"""

__version__ = "0.1.0"

from .errors import DatabaseOpenError, DbError
from .field_types import SemanticType, map_type
from .schema_applier import ApplyResult, SchemaApplier, apply_schema
from .schema_converter import SchemaConverter, build_column, compile_schema
from .schema_models import ColumnDefinition, FieldDeclaration, RecordSchema, table_name_for

__all__ = [
    "ApplyResult",
    "ColumnDefinition",
    "DatabaseOpenError",
    "DbError",
    "FieldDeclaration",
    "RecordSchema",
    "SchemaApplier",
    "SchemaConverter",
    "SemanticType",
    "apply_schema",
    "build_column",
    "compile_schema",
    "map_type",
    "table_name_for",
]
