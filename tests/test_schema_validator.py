"""
Tests for SchemaValidator
"""

import pytest

from mcp_record_schema.schema_validator import SchemaValidator


@pytest.fixture
def validator():
    return SchemaValidator()


def test_valid_document(validator, record_document):
    result = validator.validate_records(record_document)

    assert result["is_valid"]
    assert result["errors"] == []
    assert result["warnings"] == []
    assert result["record_count"] == 2
    assert result["total_fields"] == 10


def test_missing_records_section(validator):
    result = validator.validate_records({"tables": {}})

    assert not result["is_valid"]
    assert "Missing 'records' section" in result["errors"][0]


def test_duplicate_field_names(validator):
    document = {"records": [{"name": "Pair", "fields": [{"name": "id", "type": "i32"}, {"name": "id", "type": "i64"}]}]}

    result = validator.validate_records(document)

    assert not result["is_valid"]
    assert result["errors"] == ["Record 'Pair': Duplicate field name 'id'"]


def test_duplicate_table_names(validator):
    document = {"records": [
        {"name": "User", "fields": {"id": "i32"}},
        {"name": "user", "fields": {"id": "i32"}},
    ]}

    result = validator.validate_records(document)

    assert not result["is_valid"]
    assert "Table name 'users' is already used" in result["errors"][0]


def test_invalid_identifiers(validator):
    document = {"records": [{"name": "Bad Name", "fields": {"first name": "String", "id": "i32"}}]}

    result = validator.validate_records(document)

    assert not result["is_valid"]
    assert len(result["errors"]) == 2


def test_field_missing_type(validator):
    document = {"records": [{"name": "User", "fields": [{"name": "id"}]}]}

    result = validator.validate_records(document)

    assert result["errors"] == ["Record 'User', field 'id': Missing 'type' field"]


def test_warnings_do_not_invalidate(validator):
    document = {"records": [
        {"name": "Event", "fields": {"happened_at": "DateTime<Utc>"}},
        {"name": "Empty", "fields": []},
    ]}

    result = validator.validate_records(document)

    assert result["is_valid"]
    assert "Unknown type 'DateTime<Utc>' will be stored as TEXT" in result["warnings"][0]
    assert "No integer 'id' field" in result["warnings"][1]
    assert "No fields defined" in result["warnings"][2]


def test_single_record_document(validator):
    result = validator.validate_records({"name": "Tag", "fields": {"id": "i64", "label": "String"}})

    assert result["is_valid"]
    assert result["record_count"] == 1


def test_duplicate_field_names_ignore_case(validator):
    document = {"records": [{"name": "User", "fields": {"id": "i32", "ID": "i64"}}]}

    result = validator.validate_records(document)

    assert not result["is_valid"]
    assert result["errors"] == ["Record 'User': Duplicate field name 'ID'"]
