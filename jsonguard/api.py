"""
One-shot helpers — parse, compile and validate in a single call.

For repeated validation against the same schema, compile once with
``compile_schema`` and reuse a ``Validator`` instead.
"""

from pathlib import Path
from typing import Any, Optional, Union

from jsonguard.core.config import ValidatorSettings
from jsonguard.document.parser import from_python, load_document, parse_json
from jsonguard.report.models import ValidationResult
from jsonguard.schema.compiler import compile_schema
from jsonguard.schema.loader import get_schema
from jsonguard.validation.validator import Validator


def _validator(settings: Optional[ValidatorSettings]) -> Validator:
    return Validator.from_settings(settings or ValidatorSettings.from_env())


def validate_text(
    schema_text: Union[str, bytes],
    instance_text: Union[str, bytes],
    settings: Optional[ValidatorSettings] = None,
) -> ValidationResult:
    """
    Validate JSON instance text against JSON schema text.

    Raises:
        DocumentSyntaxError: If either text is not valid JSON
        SchemaError: If the schema is malformed
    """
    schema = compile_schema(parse_json(schema_text))
    instance = parse_json(instance_text)
    return _validator(settings).validate(instance, schema)


def validate_data(
    schema: Any,
    instance: Any,
    settings: Optional[ValidatorSettings] = None,
) -> ValidationResult:
    """Validate decoded Python data (as from ``json.loads``) against a decoded schema."""
    node = compile_schema(from_python(schema))
    return _validator(settings).validate(from_python(instance), node)


def validate_file(
    schema_path: Union[str, Path],
    instance_path: Union[str, Path],
    settings: Optional[ValidatorSettings] = None,
) -> ValidationResult:
    """Validate an instance file against a schema file (schema cached by path)."""
    schema = get_schema(schema_path)
    instance = load_document(instance_path)
    return _validator(settings).validate(instance, schema)
