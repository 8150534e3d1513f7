"""
Schema Loader — Load and compile schema files.

Schema files may be JSON (``.json``) or YAML (``.yaml``/``.yml``).
Compiled schemas are cached by resolved path.
"""

from pathlib import Path
from typing import Union

from jsonguard.core.logging import LogChannel, get_logger
from jsonguard.document.parser import load_document, parse_json, parse_yaml
from jsonguard.schema.compiler import compile_schema
from jsonguard.schema.models import SchemaNode

log = get_logger(LogChannel.LOAD)


def load_schema(path: Union[str, Path]) -> SchemaNode:
    """
    Load and compile a schema file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        DocumentSyntaxError: If the file is not valid JSON/YAML
        SchemaError: If the schema is malformed
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Schema not found: {path}")

    document = load_document(path)
    node = compile_schema(document)
    log.info("schema_loaded", path=str(path))
    return node


def load_schema_text(text: str, format: str = "json") -> SchemaNode:
    """Compile a schema from JSON or YAML text."""
    if format == "yaml":
        document = parse_yaml(text)
    elif format == "json":
        document = parse_json(text)
    else:
        raise ValueError(f"Unsupported schema format: {format}")
    return compile_schema(document)


def list_schemas(directory: Union[str, Path]) -> list[str]:
    """List schema file names (without suffix) in a directory."""
    directory = Path(directory)
    if not directory.exists():
        return []
    names = {
        p.stem
        for pattern in ("*.json", "*.yaml", "*.yml")
        for p in directory.glob(pattern)
    }
    return sorted(names)


# Cache for compiled schemas
_cache: dict[Path, SchemaNode] = {}


def get_schema(path: Union[str, Path], use_cache: bool = True) -> SchemaNode:
    """Get a compiled schema, using cache by default."""
    key = Path(path).resolve()
    if use_cache and key in _cache:
        return _cache[key]

    node = load_schema(key)
    _cache[key] = node
    return node


def clear_cache() -> None:
    """Clear the schema cache."""
    _cache.clear()
