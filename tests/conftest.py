"""
Shared fixtures for the jsonguard test suite.
"""

import pytest

from jsonguard.document.parser import from_python
from jsonguard.schema.compiler import compile_schema
from jsonguard.schema.loader import clear_cache


@pytest.fixture
def compile_py():
    """Compile a schema given as decoded Python data."""
    def _compile(schema):
        return compile_schema(from_python(schema))
    return _compile


@pytest.fixture
def person_schema():
    """Object schema with a required string and a bounded number."""
    return {
        "type": "object",
        "required": ["name"],
        "properties": {
            "name": {"type": "string", "minLength": 1},
            "age": {"type": "number", "minimum": 0},
        },
    }


@pytest.fixture(autouse=True)
def _fresh_schema_cache():
    clear_cache()
    yield
    clear_cache()
