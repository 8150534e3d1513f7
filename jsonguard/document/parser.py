"""
Document Parser — Build document values from text or decoded data.

JSON text goes through the standard ``json`` decoder. YAML text is
accepted for schema files, which are often hand-written.
"""

import json
import math
from pathlib import Path
from typing import Any, Union

import yaml

from jsonguard.document.model import (
    NULL,
    DocumentValue,
    JsonArray,
    JsonBool,
    JsonNumber,
    JsonObject,
    JsonString,
)
from jsonguard.errors import DocumentSyntaxError

YAML_SUFFIXES = {".yaml", ".yml"}


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def _decode_float(literal: str) -> float:
    value = float(literal)
    if not math.isfinite(value):
        raise ValueError(f"number out of range: {literal}")
    return value


def from_python(data: Any) -> DocumentValue:
    """
    Convert decoded Python data into a document value.

    Accepts exactly what ``json.loads`` produces (plus tuples). Anything
    else, including NaN/Infinity and non-string keys, is rejected.

    Raises:
        DocumentSyntaxError: If the data is not representable as JSON
    """
    if data is None:
        return NULL
    # bool before int: bool is an int subclass
    if isinstance(data, bool):
        return JsonBool(data)
    if isinstance(data, (int, float)):
        if isinstance(data, float) and not math.isfinite(data):
            raise DocumentSyntaxError(f"Number is not finite: {data!r}")
        try:
            return JsonNumber(data)
        except OverflowError as e:
            raise DocumentSyntaxError(f"Number out of range: {e}") from e
    if isinstance(data, str):
        return JsonString(data)
    if isinstance(data, (list, tuple)):
        return JsonArray(tuple(from_python(item) for item in data))
    if isinstance(data, dict):
        members = {}
        for key, value in data.items():
            if not isinstance(key, str):
                raise DocumentSyntaxError(f"Object key is not a string: {key!r}")
            members[key] = from_python(value)
        return JsonObject(members)

    raise DocumentSyntaxError(f"Unsupported value of type {type(data).__name__}")


def parse_json(text: Union[str, bytes]) -> DocumentValue:
    """
    Parse JSON text into a document value.

    Numbers must fit in a double; literals such as ``1e400`` are rejected
    rather than silently becoming infinity.

    Raises:
        DocumentSyntaxError: If the text is not valid JSON
    """
    try:
        data = json.loads(text, parse_float=_decode_float, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        raise DocumentSyntaxError(f"Invalid JSON: {e}") from e

    try:
        return from_python(data)
    except RecursionError as e:
        raise DocumentSyntaxError("Invalid JSON: nesting too deep") from e


def parse_yaml(text: str) -> DocumentValue:
    """
    Parse YAML text into a document value.

    Only the JSON-compatible part of YAML survives: dates, sets and
    non-string keys are rejected by ``from_python``.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DocumentSyntaxError(f"Invalid YAML: {e}") from e

    return from_python(data)


def load_document(path: Union[str, Path]) -> DocumentValue:
    """Load a document from a ``.json``, ``.yaml`` or ``.yml`` file."""
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in YAML_SUFFIXES:
        return parse_yaml(text)
    return parse_json(text)
