"""
Schema — Compiled schema trees and the compiler that builds them.
"""

from jsonguard.schema.compiler import compile_schema
from jsonguard.schema.loader import clear_cache, get_schema, load_schema, load_schema_text
from jsonguard.schema.models import (
    ALWAYS_TRUE,
    Constraint,
    CustomCheck,
    EnumValues,
    Maximum,
    MaxItems,
    MaxLength,
    Minimum,
    MinItems,
    MinLength,
    Pattern,
    SchemaNode,
    SchemaType,
)

__all__ = [
    "ALWAYS_TRUE",
    "Constraint",
    "CustomCheck",
    "EnumValues",
    "Maximum",
    "MaxItems",
    "MaxLength",
    "Minimum",
    "MinItems",
    "MinLength",
    "Pattern",
    "SchemaNode",
    "SchemaType",
    "compile_schema",
    "clear_cache",
    "get_schema",
    "load_schema",
    "load_schema_text",
]
