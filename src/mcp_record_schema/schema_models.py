"""
Schema Models - record definitions and derived column definitions
"""

import dataclasses
import typing
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from .field_types import SemanticType


def table_name_for(record_name: str) -> str:
    """Derive the table name for a record: ``User`` -> ``users``"""
    return record_name.lower() + "s"


class FieldDeclaration(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    semantic_type: SemanticType


class ColumnDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    sql_type: str
    is_primary_key: bool = False

    def to_sql(self) -> str:
        """Render the column fragment used inside CREATE TABLE"""
        if self.is_primary_key:
            return f"{self.name} {self.sql_type} PRIMARY KEY AUTOINCREMENT"
        return f"{self.name} {self.sql_type}"


class RecordSchema(BaseModel):
    """Ordered field list of one record type. Field order is column order."""

    model_config = ConfigDict(frozen=True)

    record_name: str
    fields: Tuple[FieldDeclaration, ...] = ()

    @property
    def table_name(self) -> str:
        return table_name_for(self.record_name)

    @classmethod
    def from_fields(cls, record_name: str, fields) -> "RecordSchema":
        """Build from ``(name, type)`` pairs; types may be SemanticType or type names"""
        declarations = []
        for field_name, field_type in fields:
            if not isinstance(field_type, SemanticType):
                field_type = SemanticType.from_type_name(field_type)
            declarations.append(FieldDeclaration(name=field_name, semantic_type=field_type))
        return cls(record_name=record_name, fields=tuple(declarations))

    @classmethod
    def from_model(cls, model: type, record_name: Optional[str] = None) -> "RecordSchema":
        """Build from a pydantic model or dataclass using its declared annotations"""
        name = record_name or model.__name__

        if isinstance(model, type) and issubclass(model, BaseModel):
            annotations = [(field_name, info.annotation) for field_name, info in model.model_fields.items()]
        elif dataclasses.is_dataclass(model):
            hints = typing.get_type_hints(model)
            annotations = [(f.name, hints.get(f.name, f.type)) for f in dataclasses.fields(model)]
        else:
            raise TypeError(f"Expected a pydantic model or dataclass, got {model!r}")

        return cls(
            record_name=name,
            fields=tuple(
                FieldDeclaration(name=field_name, semantic_type=SemanticType.from_annotation(annotation))
                for field_name, annotation in annotations
            ),
        )

    @classmethod
    def from_dict(cls, record: Dict[str, Any]) -> "RecordSchema":
        """Build from a JSON record object.

        ``fields`` may be a list of ``{"name": ..., "type": ...}`` objects or an
        ordered mapping of field name to type name.
        """
        if not isinstance(record, dict):
            raise ValueError(f"Record must be an object, got {type(record).__name__}")
        if not record.get("name"):
            raise ValueError("Record is missing 'name'")

        raw_fields = record.get("fields", [])
        if isinstance(raw_fields, dict):
            pairs = list(raw_fields.items())
        elif isinstance(raw_fields, list):
            pairs = []
            for i, field in enumerate(raw_fields):
                if not isinstance(field, dict) or "name" not in field or "type" not in field:
                    raise ValueError(f"Record '{record['name']}', field {i}: expected an object with 'name' and 'type'")
                pairs.append((field["name"], field["type"]))
        else:
            raise ValueError(f"Record '{record['name']}': 'fields' must be a list or an object")

        for field_name, field_type in pairs:
            if not isinstance(field_type, str):
                raise ValueError(f"Record '{record['name']}', field '{field_name}': type must be a string")

        return cls.from_fields(record["name"], pairs)


def records_from_document(document: Dict[str, Any]) -> List[RecordSchema]:
    """Read every record of a record document (or a single bare record)"""
    if "records" in document:
        return [RecordSchema.from_dict(record) for record in document["records"]]
    return [RecordSchema.from_dict(document)]
