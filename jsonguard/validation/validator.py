"""
Validator — Walk a document against a compiled schema.

The walk is depth-first, left to right. Each node is checked in a
fixed order:

1. depth guard
2. type (a mismatch stops this node)
3. object members / array elements (recursive)
4. value constraints, enum, custom checks

Violations are collected, never raised.
"""

from typing import Optional, Union

from jsonguard.core.config import DEFAULT_MAX_DEPTH, ValidationMode, ValidatorSettings
from jsonguard.core.logging import LogChannel, get_logger
from jsonguard.document.model import DocumentValue, JsonArray, JsonObject
from jsonguard.report.enums import ValidationErrorKind
from jsonguard.report.models import PathSegment, ValidationError, ValidationResult
from jsonguard.schema.models import SchemaNode

log = get_logger(LogChannel.VALIDATE)

Path = tuple[PathSegment, ...]


class _StopWalk(Exception):
    """Raised internally to end a fail-fast run."""


class Validator:
    """
    Schema validator.

    Holds only immutable settings, so one instance may be shared
    across threads and reused for any number of runs.

    Usage:
        validator = Validator(max_depth=32)
        result = validator.validate(instance, compile_schema(schema_doc))
        if not result.valid:
            print(result.render())
    """

    def __init__(
        self,
        max_depth: int = DEFAULT_MAX_DEPTH,
        mode: Union[ValidationMode, str] = ValidationMode.COLLECT_ALL,
    ) -> None:
        self.settings = ValidatorSettings(max_depth=max_depth, mode=mode)

    @classmethod
    def from_settings(cls, settings: ValidatorSettings) -> "Validator":
        return cls(max_depth=settings.max_depth, mode=settings.mode)

    @property
    def max_depth(self) -> int:
        return self.settings.max_depth

    @property
    def mode(self) -> ValidationMode:
        return self.settings.mode

    def validate(self, instance: DocumentValue, schema: SchemaNode) -> ValidationResult:
        """
        Validate an instance against a compiled schema.

        Returns:
            ValidationResult, Valid iff no violation was found
        """
        log.verbose("validation_started", mode=self.mode.value, max_depth=self.max_depth)

        errors: list[ValidationError] = []
        try:
            self._validate_at((), instance, schema, errors, 0)
        except _StopWalk:
            pass

        result = ValidationResult.from_errors(errors)
        log.info("validation_completed", status=result.status.value, errors=len(errors))
        return result

    def _record(self, errors: list[ValidationError], error: ValidationError) -> None:
        errors.append(error)
        log.debug(
            "violation_found",
            pointer=error.pointer,
            kind=error.kind.value,
            rule=error.rule,
        )
        if self.settings.fail_fast:
            raise _StopWalk()

    def _validate_at(
        self,
        path: Path,
        instance: DocumentValue,
        schema: SchemaNode,
        errors: list[ValidationError],
        depth: int,
    ) -> None:
        if depth > self.max_depth:
            self._record(errors, ValidationError(
                path=path,
                kind=ValidationErrorKind.DEPTH_EXCEEDED,
                detail=f"nesting depth {depth} exceeds maximum {self.max_depth}",
            ))
            return

        if schema.is_always_true:
            return

        kind = instance.kind
        if schema.type is not None and schema.type is not kind:
            # Nothing below a wrong type is meaningful
            self._record(errors, ValidationError(
                path=path,
                kind=ValidationErrorKind.TYPE_MISMATCH,
                detail=f"expected {schema.type.value}, got {kind.value}",
                rule="type",
                expected=schema.type.value,
                actual=kind.value,
            ))
            return

        if isinstance(instance, JsonObject):
            self._validate_object(path, instance, schema, errors, depth)
        elif isinstance(instance, JsonArray):
            self._validate_array(path, instance, schema, errors, depth)

        for constraint in schema.constraints:
            if not constraint.accepts_kind(kind):
                continue
            detail = constraint.check(instance)
            if detail is not None:
                self._record(errors, ValidationError(
                    path=path,
                    kind=constraint.error_kind,
                    detail=detail,
                    rule=constraint.rule,
                ))

    def _validate_object(
        self,
        path: Path,
        instance: JsonObject,
        schema: SchemaNode,
        errors: list[ValidationError],
        depth: int,
    ) -> None:
        for name in schema.required:
            if name not in instance:
                self._record(errors, ValidationError(
                    path=path + (name,),
                    kind=ValidationErrorKind.MISSING_FIELD,
                    detail=f"required field '{name}' is missing",
                    rule="required",
                ))

        # Members without a property schema are not checked
        for name, value in instance.members.items():
            subschema = schema.property_schema(name)
            if subschema is not None:
                self._validate_at(path + (name,), value, subschema, errors, depth + 1)

    def _validate_array(
        self,
        path: Path,
        instance: JsonArray,
        schema: SchemaNode,
        errors: list[ValidationError],
        depth: int,
    ) -> None:
        if schema.items is None:
            return
        for index, element in enumerate(instance.elements):
            self._validate_at(path + (index,), element, schema.items, errors, depth + 1)


def validate(
    instance: DocumentValue,
    schema: SchemaNode,
    max_depth: int = DEFAULT_MAX_DEPTH,
    mode: Union[ValidationMode, str] = ValidationMode.COLLECT_ALL,
    settings: Optional[ValidatorSettings] = None,
) -> ValidationResult:
    """
    Convenience function for one-off validation.

    Args:
        instance: Parsed document
        schema: Compiled schema
        max_depth: Maximum nesting depth before DEPTH_EXCEEDED
        mode: collect_all (default) or fail_fast
        settings: Overrides max_depth and mode when given
    """
    if settings is not None:
        validator = Validator.from_settings(settings)
    else:
        validator = Validator(max_depth=max_depth, mode=mode)
    return validator.validate(instance, schema)
