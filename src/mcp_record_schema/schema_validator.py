"""
Schema Validator - record document integrity validation
"""

import re
from typing import Any, Dict, List

from .field_types import SemanticType
from .schema_models import table_name_for

IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class SchemaValidator:
    """Validates record documents before they are converted to DDL"""

    def validate_records(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """Validate a record document and return validation result"""
        errors = []
        warnings = []

        if "records" in document:
            records = document["records"]
        elif "name" in document:
            records = [document]
        else:
            errors.append("Missing 'records' section - document must contain records")
            return self._create_result(False, errors, warnings, [])

        if not isinstance(records, list):
            errors.append("'records' must be a list")
            return self._create_result(False, errors, warnings, [])

        # Validate each record
        table_names = set()
        for i, record in enumerate(records):
            record_errors, record_warnings = self._validate_record(i, record)
            errors.extend(record_errors)
            warnings.extend(record_warnings)

            if isinstance(record, dict) and isinstance(record.get("name"), str):
                table_name = table_name_for(record["name"])
                if table_name in table_names:
                    errors.append(f"Record '{record['name']}': Table name '{table_name}' is already used by another record")
                table_names.add(table_name)

        return self._create_result(len(errors) == 0, errors, warnings, records)

    def _validate_record(self, index: int, record: Any) -> tuple:
        """Validate a single record definition"""
        errors = []
        warnings = []

        if not isinstance(record, dict):
            errors.append(f"Record {index}: Must be an object")
            return errors, warnings

        record_name = record.get("name")
        if not record_name or not isinstance(record_name, str):
            errors.append(f"Record {index}: Missing 'name' field")
            return errors, warnings

        if not IDENTIFIER_PATTERN.match(record_name):
            errors.append(f"Record '{record_name}': Invalid name, expected letters, digits and underscores")

        if "fields" not in record:
            errors.append(f"Record '{record_name}': Missing 'fields' definition")
            return errors, warnings

        fields = self._field_pairs(record_name, record["fields"], errors)
        if fields is None:
            return errors, warnings

        if not fields:
            warnings.append(f"Record '{record_name}': No fields defined - SQLite rejects a table without columns")
            return errors, warnings

        # Validate each field
        seen = set()
        has_primary_key = False
        for field_name, type_name in fields:
            if not isinstance(field_name, str) or not IDENTIFIER_PATTERN.match(field_name):
                errors.append(f"Record '{record_name}': Invalid field name '{field_name}'")
                continue

            # SQLite column names are case-insensitive
            if field_name.lower() in seen:
                errors.append(f"Record '{record_name}': Duplicate field name '{field_name}'")
            seen.add(field_name.lower())

            if not isinstance(type_name, str):
                errors.append(f"Record '{record_name}', field '{field_name}': Type must be a string")
                continue

            semantic_type = SemanticType.from_type_name(type_name)
            if semantic_type is SemanticType.UNKNOWN:
                warnings.append(f"Record '{record_name}', field '{field_name}': Unknown type '{type_name}' will be stored as TEXT")

            if field_name == "id" and semantic_type is SemanticType.INTEGER:
                has_primary_key = True

        if not has_primary_key:
            warnings.append(f"Record '{record_name}': No integer 'id' field - table will have no primary key")

        return errors, warnings

    def _field_pairs(self, record_name: str, fields: Any, errors: List[str]):
        if isinstance(fields, dict):
            return list(fields.items())

        if not isinstance(fields, list):
            errors.append(f"Record '{record_name}': 'fields' must be a list or an object")
            return None

        pairs = []
        for i, field in enumerate(fields):
            if not isinstance(field, dict):
                errors.append(f"Record '{record_name}', field {i}: Must be an object")
                continue
            if "name" not in field:
                errors.append(f"Record '{record_name}', field {i}: Missing 'name' field")
                continue
            if "type" not in field:
                errors.append(f"Record '{record_name}', field '{field['name']}': Missing 'type' field")
                continue
            pairs.append((field["name"], field["type"]))
        return pairs

    def _create_result(self, is_valid: bool, errors: List[str], warnings: List[str], records: List[Any]) -> Dict[str, Any]:
        """Create validation result dictionary"""
        total_fields = 0
        for record in records:
            if isinstance(record, dict) and isinstance(record.get("fields"), (list, dict)):
                total_fields += len(record["fields"])

        return {
            "is_valid": is_valid,
            "errors": errors,
            "warnings": warnings,
            "record_count": len(records),
            "total_fields": total_fields,
        }
