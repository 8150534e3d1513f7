"""
Document Model — Immutable representation of parsed JSON values.

Every JSON value is exactly one of six variants. The validator never
probes raw Python objects; it dispatches on ``kind``.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, ClassVar, Mapping, Optional, Union


class DocumentKind(str, Enum):
    """Runtime tag of a document value (values are the JSON type names)."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


@dataclass(frozen=True)
class JsonNull:
    """The JSON ``null`` literal."""

    kind: ClassVar[DocumentKind] = DocumentKind.NULL

    def to_python(self) -> Any:
        return None


@dataclass(frozen=True)
class JsonBool:
    """A JSON boolean. Never equal to a number."""

    value: bool
    kind: ClassVar[DocumentKind] = DocumentKind.BOOLEAN

    def to_python(self) -> Any:
        return self.value


@dataclass(frozen=True)
class JsonNumber:
    """A JSON number, held as a float so that ``1`` and ``1.0`` compare equal."""

    value: float
    kind: ClassVar[DocumentKind] = DocumentKind.NUMBER

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))

    def to_python(self) -> Any:
        if self.value.is_integer():
            return int(self.value)
        return self.value


@dataclass(frozen=True)
class JsonString:
    """A JSON string."""

    value: str
    kind: ClassVar[DocumentKind] = DocumentKind.STRING

    def to_python(self) -> Any:
        return self.value


@dataclass(frozen=True)
class JsonArray:
    """An ordered, immutable sequence of document values."""

    elements: tuple = ()
    kind: ClassVar[DocumentKind] = DocumentKind.ARRAY

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", tuple(self.elements))

    def __len__(self) -> int:
        return len(self.elements)

    def to_python(self) -> Any:
        return [element.to_python() for element in self.elements]


@dataclass(frozen=True)
class JsonObject:
    """A read-only mapping of member names to document values."""

    members: Mapping[str, "DocumentValue"] = field(default_factory=dict)
    kind: ClassVar[DocumentKind] = DocumentKind.OBJECT

    def __post_init__(self) -> None:
        object.__setattr__(self, "members", MappingProxyType(dict(self.members)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonObject):
            return NotImplemented
        return structurally_equal(self, other)

    def __hash__(self) -> int:
        return hash(frozenset(self.members.items()))

    def __len__(self) -> int:
        return len(self.members)

    def __contains__(self, name: object) -> bool:
        return name in self.members

    def get(self, name: str) -> Optional["DocumentValue"]:
        return self.members.get(name)

    def to_python(self) -> Any:
        return {name: value.to_python() for name, value in self.members.items()}


DocumentValue = Union[JsonNull, JsonBool, JsonNumber, JsonString, JsonArray, JsonObject]

NULL = JsonNull()


def structurally_equal(left: DocumentValue, right: DocumentValue) -> bool:
    """
    Deep equality across two document trees.

    Tags must match at every level. Numbers compare by value, object
    members compare without regard to order.
    """
    if left.kind is not right.kind:
        return False

    if isinstance(left, JsonArray):
        if len(left.elements) != len(right.elements):
            return False
        return all(
            structurally_equal(a, b) for a, b in zip(left.elements, right.elements)
        )

    if isinstance(left, JsonObject):
        if left.members.keys() != right.members.keys():
            return False
        return all(
            structurally_equal(value, right.members[name])
            for name, value in left.members.items()
        )

    if isinstance(left, JsonNull):
        return True

    return left.value == right.value
