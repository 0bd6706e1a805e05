"""
Field Types - semantic field kinds and their SQLite column types
"""

import types
from enum import Enum
from typing import Any, Union, get_args, get_origin


class SemanticType(str, Enum):
    """Closed set of scalar kinds a record field can declare"""

    INTEGER = "integer"
    FLOAT = "float"
    TEXT = "text"
    BOOLEAN = "boolean"
    BLOB = "blob"
    UNKNOWN = "unknown"

    @classmethod
    def from_type_name(cls, type_name: str) -> "SemanticType":
        """Resolve a written type name such as ``i32``, ``String`` or ``Vec<u8>``"""
        return TYPE_NAME_ALIASES.get(type_name.strip().lower(), cls.UNKNOWN)

    @classmethod
    def from_annotation(cls, annotation: Any) -> "SemanticType":
        """Resolve a Python type annotation, unwrapping ``Optional[X]``"""
        if get_origin(annotation) in (Union, types.UnionType):
            args = [arg for arg in get_args(annotation) if arg is not type(None)]
            if len(args) != 1:
                return cls.UNKNOWN
            annotation = args[0]

        if not isinstance(annotation, type):
            return cls.UNKNOWN

        # bool is a subclass of int
        if issubclass(annotation, bool):
            return cls.BOOLEAN
        if issubclass(annotation, int):
            return cls.INTEGER
        if issubclass(annotation, float):
            return cls.FLOAT
        if issubclass(annotation, str):
            return cls.TEXT
        if issubclass(annotation, (bytes, bytearray, memoryview)):
            return cls.BLOB
        return cls.UNKNOWN


TYPE_NAME_ALIASES = {
    **{name: SemanticType.INTEGER for name in (
        "i8", "i16", "i32", "i64", "i128", "isize",
        "u8", "u16", "u32", "u64", "u128", "usize",
        "int", "integer",
    )},
    **{name: SemanticType.FLOAT for name in ("f32", "f64", "float", "real", "double")},
    **{name: SemanticType.TEXT for name in ("string", "&str", "str", "text")},
    **{name: SemanticType.BOOLEAN for name in ("bool", "boolean")},
    **{name: SemanticType.BLOB for name in ("vec<u8>", "bytes", "bytearray", "blob")},
}

SQLITE_TYPE_MAPPING = {
    SemanticType.INTEGER: "INTEGER",
    SemanticType.FLOAT: "REAL",
    SemanticType.TEXT: "TEXT",
    SemanticType.BOOLEAN: "INTEGER",  # 0 = false, 1 = true
    SemanticType.BLOB: "BLOB",
}

FALLBACK_SQL_TYPE = "TEXT"


def map_type(semantic_type: SemanticType) -> str:
    """Map a semantic type to its SQLite column type. Unknown kinds become TEXT."""
    # plain strings hash equal to str-enum members
    if not isinstance(semantic_type, SemanticType):
        return FALLBACK_SQL_TYPE
    return SQLITE_TYPE_MAPPING.get(semantic_type, FALLBACK_SQL_TYPE)
