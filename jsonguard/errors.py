"""
Errors — Exceptions raised by jsonguard.

Only malformed inputs raise: bad document text and bad schemas.
A document that fails validation is reported as data, never raised.
"""

from enum import Enum
from typing import Optional


class JsonGuardError(ValueError):
    """Base class for all jsonguard exceptions."""


class DocumentSyntaxError(JsonGuardError):
    """Raised when text or decoded data is not a valid JSON document."""


class SchemaErrorKind(str, Enum):
    """Why a schema failed to compile."""

    NOT_AN_OBJECT = "not_an_object"
    UNKNOWN_TYPE = "unknown_type"
    INVALID_CONSTRAINT = "invalid_constraint"
    INVALID_PATTERN = "invalid_pattern"
    TOO_DEEP = "too_deep"


class SchemaError(JsonGuardError):
    """
    Raised when a schema document cannot be compiled.

    ``schema_path`` is a JSON pointer into the schema document
    (e.g. ``/properties/age/minimum``), empty for the root.
    """

    kind: SchemaErrorKind

    def __init__(self, message: str, schema_path: str = "") -> None:
        self.message = message
        self.schema_path = schema_path
        location = schema_path or "/"
        super().__init__(f"{location}: {message}")


class NotAnObjectError(SchemaError):
    """A schema (or nested schema) is not a JSON object."""

    kind = SchemaErrorKind.NOT_AN_OBJECT

    def __init__(self, actual: str, schema_path: str = "") -> None:
        self.actual = actual
        super().__init__(f"schema must be an object, got {actual}", schema_path)


class UnknownTypeError(SchemaError):
    """The ``type`` keyword names something other than the six JSON types."""

    kind = SchemaErrorKind.UNKNOWN_TYPE

    def __init__(self, name: str, schema_path: str = "") -> None:
        self.name = name
        super().__init__(f"unknown type '{name}'", schema_path)


class InvalidConstraintError(SchemaError):
    """A constraint keyword carries a value of the wrong shape."""

    kind = SchemaErrorKind.INVALID_CONSTRAINT

    def __init__(self, key: str, reason: Optional[str] = None, schema_path: str = "") -> None:
        self.key = key
        message = f"invalid value for '{key}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, schema_path)


class InvalidPatternError(SchemaError):
    """The ``pattern`` keyword is not a valid regular expression."""

    kind = SchemaErrorKind.INVALID_PATTERN

    def __init__(self, pattern: str, reason: str, schema_path: str = "") -> None:
        self.pattern = pattern
        super().__init__(f"invalid pattern {pattern!r}: {reason}", schema_path)


class SchemaTooDeepError(SchemaError):
    """Nested schemas go deeper than the compiler allows."""

    kind = SchemaErrorKind.TOO_DEEP

    def __init__(self, limit: int, schema_path: str = "") -> None:
        self.limit = limit
        super().__init__(f"schema nesting exceeds {limit} levels", schema_path)
