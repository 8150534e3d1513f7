"""
Report Enums — Outcome and violation codes.
"""

from enum import Enum


class ValidationStatus(str, Enum):
    """Overall validation outcome."""

    VALID = "valid"
    INVALID = "invalid"


class ValidationErrorKind(str, Enum):
    """
    Category of a single violation.

    - TYPE_MISMATCH: instance tag differs from the declared type
    - MISSING_FIELD: a required member is absent
    - CONSTRAINT_VIOLATION: length, pattern, range or size rule failed
    - INVALID_ENUM_VALUE: instance equals none of the listed values
    - DEPTH_EXCEEDED: nesting went past the configured limit
    """

    TYPE_MISMATCH = "type_mismatch"
    MISSING_FIELD = "missing_field"
    CONSTRAINT_VIOLATION = "constraint_violation"
    INVALID_ENUM_VALUE = "invalid_enum_value"
    DEPTH_EXCEEDED = "depth_exceeded"
