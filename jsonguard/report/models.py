"""
Report Models — Pydantic models for validation outcomes.

A report is plain data: it can be compared, serialized and rendered,
but it never raises.
"""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from jsonguard.report.enums import ValidationErrorKind, ValidationStatus

REPORT_VERSION = "0.1.0"

PathSegment = Union[int, str]


def escape_pointer_token(token: PathSegment) -> str:
    """Escape one path segment for a JSON pointer (RFC 6901)."""
    return str(token).replace("~", "~0").replace("/", "~1")


def format_pointer(path: tuple[PathSegment, ...] | list[PathSegment]) -> str:
    """Render a path as a JSON pointer. The root is the empty string."""
    return "".join(f"/{escape_pointer_token(segment)}" for segment in path)


class ValidationError(BaseModel):
    """A single violation found while walking an instance."""

    model_config = ConfigDict(frozen=True)

    path: tuple[PathSegment, ...] = Field(
        default=(),
        description="Object keys and array indices from the root to the failing node",
    )
    kind: ValidationErrorKind = Field(..., description="Violation category")
    detail: str = Field(..., description="Human-readable explanation")
    rule: Optional[str] = Field(None, description="Schema keyword that failed (e.g. minLength)")
    expected: Optional[str] = Field(None, description="Expected type for type mismatches")
    actual: Optional[str] = Field(None, description="Actual type for type mismatches")

    @property
    def pointer(self) -> str:
        """JSON pointer to the failing node."""
        return format_pointer(self.path)

    def render(self) -> str:
        """Render as ``<path> : <kind> : <detail>``."""
        return f"{self.pointer or '/'} : {self.kind.value} : {self.detail}"


class ValidationResult(BaseModel):
    """The complete outcome of validating one instance."""

    version: str = Field(default=REPORT_VERSION, description="Report schema version")
    status: ValidationStatus
    errors: list[ValidationError] = Field(default_factory=list)

    @classmethod
    def from_errors(cls, errors: list[ValidationError]) -> ValidationResult:
        """Valid when no errors were collected, Invalid otherwise."""
        status = ValidationStatus.INVALID if errors else ValidationStatus.VALID
        return cls(status=status, errors=list(errors))

    @property
    def valid(self) -> bool:
        return self.status == ValidationStatus.VALID

    def errors_at(self, pointer: str) -> list[ValidationError]:
        """Errors whose JSON pointer equals ``pointer``."""
        return [e for e in self.errors if e.pointer == pointer]

    def render(self) -> str:
        """Human-facing report, one line per error."""
        if self.valid:
            return "valid"
        return "\n".join(error.render() for error in self.errors)

    def to_json(self, indent: Optional[int] = 2) -> str:
        return self.model_dump_json(indent=indent)

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> ValidationResult:
        return cls.model_validate_json(text)
