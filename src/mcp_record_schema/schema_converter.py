"""
Schema Converter - record schema to SQLite DDL conversion logic
"""

from typing import Callable, List, Optional

from .field_types import SemanticType, map_type
from .schema_models import ColumnDefinition, RecordSchema, table_name_for

# (field name, resolved SQL type) -> is this field the primary key?
PrimaryKeyPolicy = Callable[[str, str], bool]


def id_integer_primary_key(field_name: str, sql_type: str) -> bool:
    """Default convention: an INTEGER field named ``id`` is the primary key"""
    return field_name == "id" and sql_type == "INTEGER"


class SchemaConverter:
    """Handles conversion between record schemas and SQL DDL"""

    def __init__(self, primary_key_policy: Optional[PrimaryKeyPolicy] = None):
        self.primary_key_policy = primary_key_policy or id_integer_primary_key

    def build_column(self, field_name: str, semantic_type: SemanticType, allow_primary_key: bool = True) -> ColumnDefinition:
        """Build the column definition for one field"""
        sql_type = map_type(semantic_type)
        is_primary_key = allow_primary_key and self.primary_key_policy(field_name, sql_type)
        return ColumnDefinition(name=field_name, sql_type=sql_type, is_primary_key=is_primary_key)

    def build_columns(self, schema: RecordSchema) -> List[ColumnDefinition]:
        """Build all columns in declaration order.

        Only the first field accepted by the primary-key policy is marked as the
        primary key; any later match becomes a plain column.
        """
        columns = []
        has_primary_key = False
        for field in schema.fields:
            column = self.build_column(field.name, field.semantic_type, allow_primary_key=not has_primary_key)
            has_primary_key = has_primary_key or column.is_primary_key
            columns.append(column)
        return columns

    def record_to_sql(self, schema: RecordSchema) -> str:
        """Generate the CREATE TABLE IF NOT EXISTS statement for a record"""
        table_name = table_name_for(schema.record_name)
        column_lines = [f"    {column.to_sql()}" for column in self.build_columns(schema)]
        return f"CREATE TABLE IF NOT EXISTS {table_name} (\n" + ",\n".join(column_lines) + "\n);"

    def records_to_sql(self, schemas: List[RecordSchema]) -> str:
        """Generate DDL for several records, one statement per record"""
        sql_statements = ["-- Generated from record definitions"]
        for schema in schemas:
            sql_statements.append("")
            sql_statements.append(f"-- {schema.record_name}")
            sql_statements.append(self.record_to_sql(schema))
        return "\n".join(sql_statements)


_default_converter = SchemaConverter()


def build_column(field_name: str, semantic_type: SemanticType) -> ColumnDefinition:
    """Build one column with the default primary-key convention"""
    return _default_converter.build_column(field_name, semantic_type)


def compile_schema(schema: RecordSchema) -> str:
    """Compile a record schema to DDL with the default primary-key convention"""
    return _default_converter.record_to_sql(schema)
