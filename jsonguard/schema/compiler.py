"""
Schema Compiler — Turn a schema document into a SchemaNode tree.

Compilation is eager and strict about the keywords it understands:
the first malformed keyword aborts with a path-qualified SchemaError.
Keywords it does not understand are ignored.
"""

import re
from typing import Optional

from jsonguard.core.logging import LogChannel, get_logger
from jsonguard.document.model import (
    DocumentValue,
    JsonArray,
    JsonBool,
    JsonNumber,
    JsonObject,
    JsonString,
)
from jsonguard.errors import (
    InvalidConstraintError,
    InvalidPatternError,
    NotAnObjectError,
    SchemaTooDeepError,
    UnknownTypeError,
)
from jsonguard.report.models import escape_pointer_token
from jsonguard.schema.models import ALWAYS_TRUE, SchemaNode, SchemaType

log = get_logger(LogChannel.COMPILE)

TYPE_NAMES = {t.value: t for t in SchemaType}

# Schema keyword -> SchemaNode field
LENGTH_KEYWORDS = {
    "minLength": "min_length",
    "maxLength": "max_length",
    "minItems": "min_items",
    "maxItems": "max_items",
}
RANGE_KEYWORDS = {
    "minimum": "minimum",
    "maximum": "maximum",
}

# Nesting limit for properties/items
MAX_SCHEMA_DEPTH = 128


def compile_schema(schema: DocumentValue) -> SchemaNode:
    """
    Compile a schema document.

    Args:
        schema: Parsed schema document

    Returns:
        The root SchemaNode

    Raises:
        SchemaError: On the first malformed keyword (NotAnObjectError,
            UnknownTypeError, InvalidConstraintError, InvalidPatternError,
            SchemaTooDeepError)
    """
    node = _compile_node(schema, "", 0)
    log.debug("schema_compiled", always_true=node.is_always_true, type=_type_name(node))
    return node


def _compile_node(schema: DocumentValue, path: str, depth: int) -> SchemaNode:
    if depth > MAX_SCHEMA_DEPTH:
        raise SchemaTooDeepError(MAX_SCHEMA_DEPTH, schema_path=path)
    if isinstance(schema, JsonBool) and schema.value:
        return ALWAYS_TRUE
    if not isinstance(schema, JsonObject):
        raise NotAnObjectError(schema.kind.value, schema_path=path)

    fields: dict = {}

    if "type" in schema:
        fields["type"] = _compile_type(schema.members["type"], path)

    if "required" in schema:
        fields["required"] = _compile_required(schema.members["required"], path)

    if "properties" in schema:
        fields["properties"] = _compile_properties(schema.members["properties"], path, depth)

    if "items" in schema:
        fields["items"] = _compile_node(schema.members["items"], _child(path, "items"), depth + 1)

    for keyword, attr in LENGTH_KEYWORDS.items():
        if keyword in schema:
            fields[attr] = _compile_count(schema.members[keyword], keyword, path)

    for keyword, attr in RANGE_KEYWORDS.items():
        if keyword in schema:
            fields[attr] = _compile_number(schema.members[keyword], keyword, path)

    if "pattern" in schema:
        fields["pattern"] = _compile_pattern(schema.members["pattern"], path)

    if "enum" in schema:
        enum_doc = schema.members["enum"]
        if not isinstance(enum_doc, JsonArray):
            raise InvalidConstraintError(
                "enum", "expected an array", schema_path=_child(path, "enum")
            )
        fields["enum_values"] = enum_doc.elements

    if not fields:
        return ALWAYS_TRUE
    return SchemaNode(**fields)


def _compile_type(value: DocumentValue, path: str) -> SchemaType:
    type_path = _child(path, "type")
    if not isinstance(value, JsonString):
        raise InvalidConstraintError("type", "expected a string", schema_path=type_path)
    schema_type = TYPE_NAMES.get(value.value)
    if schema_type is None:
        raise UnknownTypeError(value.value, schema_path=type_path)
    return schema_type


def _compile_required(value: DocumentValue, path: str) -> tuple[str, ...]:
    if not isinstance(value, JsonArray):
        raise InvalidConstraintError(
            "required", "expected an array", schema_path=_child(path, "required")
        )
    # Non-string entries are skipped, not rejected
    names = []
    for entry in value.elements:
        if isinstance(entry, JsonString):
            names.append(entry.value)
        else:
            log.verbose("required_entry_skipped", schema_path=path, entry_kind=entry.kind.value)
    return tuple(names)


def _compile_properties(value: DocumentValue, path: str, depth: int) -> dict[str, SchemaNode]:
    properties_path = _child(path, "properties")
    if not isinstance(value, JsonObject):
        raise InvalidConstraintError(
            "properties", "expected an object", schema_path=properties_path
        )
    return {
        name: _compile_node(subschema, _child(properties_path, name), depth + 1)
        for name, subschema in value.members.items()
    }


def _compile_count(value: DocumentValue, keyword: str, path: str) -> int:
    if not isinstance(value, JsonNumber) or not value.value.is_integer() or value.value < 0:
        raise InvalidConstraintError(
            keyword, "expected a non-negative integer", schema_path=_child(path, keyword)
        )
    return int(value.value)


def _compile_number(value: DocumentValue, keyword: str, path: str) -> float:
    if not isinstance(value, JsonNumber):
        raise InvalidConstraintError(
            keyword, "expected a number", schema_path=_child(path, keyword)
        )
    return value.value


def _compile_pattern(value: DocumentValue, path: str) -> re.Pattern:
    pattern_path = _child(path, "pattern")
    if not isinstance(value, JsonString):
        raise InvalidConstraintError("pattern", "expected a string", schema_path=pattern_path)
    try:
        return re.compile(value.value)
    except re.error as e:
        raise InvalidPatternError(value.value, str(e), schema_path=pattern_path) from e


def _child(path: str, token: str) -> str:
    return f"{path}/{escape_pointer_token(token)}"


def _type_name(node: SchemaNode) -> Optional[str]:
    return node.type.value if node.type else None
