"""
Schema Models — Compiled validation rules.

A SchemaNode is the compiled form of one schema object. Value rules
(length, pattern, range, size, enum) are held as Constraint objects
that share one interface, so the validator applies them uniformly.
"""

import dataclasses
import json
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, ClassVar, Mapping, Optional

from jsonguard.document.model import (
    DocumentKind,
    DocumentValue,
    JsonArray,
    JsonNumber,
    JsonString,
    structurally_equal,
)
from jsonguard.report.enums import ValidationErrorKind

# The six schema types are exactly the six document kinds
SchemaType = DocumentKind


# =============================================================================
# Constraints
# =============================================================================

class Constraint(ABC):
    """
    A single value rule.

    ``applies_to`` limits the rule to one document kind (None = any).
    ``check`` returns None when the value passes, otherwise a detail
    message for the report.
    """

    applies_to: ClassVar[Optional[DocumentKind]] = None
    error_kind: ClassVar[ValidationErrorKind] = ValidationErrorKind.CONSTRAINT_VIOLATION

    @property
    @abstractmethod
    def rule(self) -> str:
        """Schema keyword this constraint enforces."""
        ...

    @abstractmethod
    def check(self, value: DocumentValue) -> Optional[str]:
        """Check the value. Returns a failure detail, or None if it passes."""
        ...

    def accepts_kind(self, kind: DocumentKind) -> bool:
        return self.applies_to is None or self.applies_to is kind


@dataclass(frozen=True)
class MinLength(Constraint):
    """String must have at least ``limit`` code points."""

    limit: int
    applies_to: ClassVar[Optional[DocumentKind]] = DocumentKind.STRING

    @property
    def rule(self) -> str:
        return "minLength"

    def check(self, value: JsonString) -> Optional[str]:
        length = len(value.value)
        if length < self.limit:
            return f"minLength: length {length} is less than {self.limit}"
        return None


@dataclass(frozen=True)
class MaxLength(Constraint):
    """String must have at most ``limit`` code points."""

    limit: int
    applies_to: ClassVar[Optional[DocumentKind]] = DocumentKind.STRING

    @property
    def rule(self) -> str:
        return "maxLength"

    def check(self, value: JsonString) -> Optional[str]:
        length = len(value.value)
        if length > self.limit:
            return f"maxLength: length {length} is greater than {self.limit}"
        return None


@dataclass(frozen=True)
class Pattern(Constraint):
    """String must contain a match for ``regex`` (search, not full match)."""

    regex: re.Pattern
    applies_to: ClassVar[Optional[DocumentKind]] = DocumentKind.STRING

    @property
    def rule(self) -> str:
        return "pattern"

    def check(self, value: JsonString) -> Optional[str]:
        if self.regex.search(value.value) is None:
            return f"pattern: {value.value!r} does not match {self.regex.pattern!r}"
        return None


@dataclass(frozen=True)
class Minimum(Constraint):
    """Number must be >= ``limit``."""

    limit: float
    applies_to: ClassVar[Optional[DocumentKind]] = DocumentKind.NUMBER

    @property
    def rule(self) -> str:
        return "minimum"

    def check(self, value: JsonNumber) -> Optional[str]:
        if value.value < self.limit:
            return f"minimum: {_format_number(value.value)} is less than {_format_number(self.limit)}"
        return None


@dataclass(frozen=True)
class Maximum(Constraint):
    """Number must be <= ``limit``."""

    limit: float
    applies_to: ClassVar[Optional[DocumentKind]] = DocumentKind.NUMBER

    @property
    def rule(self) -> str:
        return "maximum"

    def check(self, value: JsonNumber) -> Optional[str]:
        if value.value > self.limit:
            return f"maximum: {_format_number(value.value)} is greater than {_format_number(self.limit)}"
        return None


@dataclass(frozen=True)
class MinItems(Constraint):
    """Array must have at least ``limit`` elements."""

    limit: int
    applies_to: ClassVar[Optional[DocumentKind]] = DocumentKind.ARRAY

    @property
    def rule(self) -> str:
        return "minItems"

    def check(self, value: JsonArray) -> Optional[str]:
        if len(value) < self.limit:
            return f"minItems: {len(value)} items is fewer than {self.limit}"
        return None


@dataclass(frozen=True)
class MaxItems(Constraint):
    """Array must have at most ``limit`` elements."""

    limit: int
    applies_to: ClassVar[Optional[DocumentKind]] = DocumentKind.ARRAY

    @property
    def rule(self) -> str:
        return "maxItems"

    def check(self, value: JsonArray) -> Optional[str]:
        if len(value) > self.limit:
            return f"maxItems: {len(value)} items is more than {self.limit}"
        return None


@dataclass(frozen=True)
class EnumValues(Constraint):
    """Value must structurally equal one of ``values``. Applies to every kind."""

    values: tuple
    error_kind: ClassVar[ValidationErrorKind] = ValidationErrorKind.INVALID_ENUM_VALUE

    @property
    def rule(self) -> str:
        return "enum"

    def check(self, value: DocumentValue) -> Optional[str]:
        if any(structurally_equal(value, allowed) for allowed in self.values):
            return None
        allowed = ", ".join(_dump(v) for v in self.values)
        return f"enum: {_dump(value)} is not one of [{allowed}]"


@dataclass(frozen=True)
class CustomCheck(Constraint):
    """
    Caller-supplied rule.

    ``predicate`` receives the document value and returns True when it
    passes. Set ``kind`` to restrict the check to one document kind.
    """

    name: str
    predicate: Callable[[DocumentValue], bool]
    message: str = "custom check failed"
    kind: Optional[DocumentKind] = None

    @property
    def rule(self) -> str:
        return self.name

    def accepts_kind(self, kind: DocumentKind) -> bool:
        return self.kind is None or self.kind is kind

    def check(self, value: DocumentValue) -> Optional[str]:
        if self.predicate(value):
            return None
        return f"{self.name}: {self.message}"


def _format_number(number: float) -> str:
    if number.is_integer():
        return str(int(number))
    return repr(number)


def _dump(value: DocumentValue) -> str:
    return json.dumps(value.to_python(), ensure_ascii=False, sort_keys=True)


# =============================================================================
# Schema Node
# =============================================================================

@dataclass(frozen=True)
class SchemaNode:
    """
    One compiled schema object.

    An empty node (no type, no constraints) accepts every value.
    ``required``, ``properties`` and ``items`` only take effect when the
    instance has the matching kind; they are ignored otherwise.
    """

    type: Optional[SchemaType] = None
    required: tuple[str, ...] = ()
    properties: Mapping[str, "SchemaNode"] = field(default_factory=dict)
    items: Optional["SchemaNode"] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    pattern: Optional[re.Pattern] = None
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    min_items: Optional[int] = None
    max_items: Optional[int] = None
    enum_values: Optional[tuple] = None
    checks: tuple[Constraint, ...] = ()

    constraints: tuple[Constraint, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "required", tuple(dict.fromkeys(self.required)))
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))
        object.__setattr__(self, "checks", tuple(self.checks))
        object.__setattr__(self, "constraints", self._build_constraints())

    def _build_constraints(self) -> tuple[Constraint, ...]:
        """Value rules in application order; enum and custom checks last."""
        built: list[Constraint] = []
        if self.min_length is not None:
            built.append(MinLength(self.min_length))
        if self.max_length is not None:
            built.append(MaxLength(self.max_length))
        if self.pattern is not None:
            built.append(Pattern(self.pattern))
        if self.minimum is not None:
            built.append(Minimum(self.minimum))
        if self.maximum is not None:
            built.append(Maximum(self.maximum))
        if self.min_items is not None:
            built.append(MinItems(self.min_items))
        if self.max_items is not None:
            built.append(MaxItems(self.max_items))
        if self.enum_values is not None:
            built.append(EnumValues(tuple(self.enum_values)))
        built.extend(self.checks)
        return tuple(built)

    @property
    def is_always_true(self) -> bool:
        """True if this node accepts every value."""
        return (
            self.type is None
            and not self.required
            and not self.properties
            and self.items is None
            and not self.constraints
        )

    def with_checks(self, *checks: Constraint) -> "SchemaNode":
        """Return a copy of this node with extra custom constraints appended."""
        return dataclasses.replace(self, checks=self.checks + tuple(checks))

    def property_schema(self, name: str) -> Optional["SchemaNode"]:
        return self.properties.get(name)


ALWAYS_TRUE = SchemaNode()
