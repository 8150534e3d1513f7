"""
Document — Immutable JSON values and the parsers that build them.
"""

from jsonguard.document.model import (
    NULL,
    DocumentKind,
    DocumentValue,
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    structurally_equal,
)
from jsonguard.document.parser import (
    from_python,
    load_document,
    parse_json,
    parse_yaml,
)

__all__ = [
    "NULL",
    "DocumentKind",
    "DocumentValue",
    "JsonArray",
    "JsonBool",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonString",
    "structurally_equal",
    "from_python",
    "load_document",
    "parse_json",
    "parse_yaml",
]
