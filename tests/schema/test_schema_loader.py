"""
Tests for schema file loading and caching.
"""

import json

import pytest

from jsonguard.errors import DocumentSyntaxError, UnknownTypeError
from jsonguard.schema import SchemaType
from jsonguard.schema.loader import (
    clear_cache,
    get_schema,
    list_schemas,
    load_schema,
    load_schema_text,
)


@pytest.fixture
def schema_dir(tmp_path):
    (tmp_path / "person.json").write_text(
        json.dumps({"type": "object", "required": ["name"]}), encoding="utf-8"
    )
    (tmp_path / "tag.yaml").write_text("type: string\nminLength: 1\n", encoding="utf-8")
    (tmp_path / "count.yml").write_text("type: number\n", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("not a schema", encoding="utf-8")
    return tmp_path


class TestLoadSchema:

    def test_json_file(self, schema_dir):
        node = load_schema(schema_dir / "person.json")
        assert node.type is SchemaType.OBJECT
        assert node.required == ("name",)

    def test_yaml_file(self, schema_dir):
        node = load_schema(str(schema_dir / "tag.yaml"))
        assert node.type is SchemaType.STRING
        assert node.min_length == 1

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_schema(tmp_path / "absent.json")

    def test_malformed_file(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text('{"type": ', encoding="utf-8")
        with pytest.raises(DocumentSyntaxError):
            load_schema(path)

    def test_malformed_schema(self, tmp_path):
        path = tmp_path / "bad.yml"
        path.write_text("type: integer\n", encoding="utf-8")
        with pytest.raises(UnknownTypeError):
            load_schema(path)

    def test_text_formats(self):
        assert load_schema_text('{"type": "null"}').type is SchemaType.NULL
        assert load_schema_text("type: boolean", format="yaml").type is SchemaType.BOOLEAN
        with pytest.raises(ValueError):
            load_schema_text("<schema/>", format="xml")


class TestListSchemas:

    def test_lists_schema_files(self, schema_dir):
        assert list_schemas(schema_dir) == ["count", "person", "tag"]

    def test_missing_directory(self, tmp_path):
        assert list_schemas(tmp_path / "nowhere") == []


class TestCache:

    def test_cached_by_path(self, schema_dir):
        path = schema_dir / "person.json"
        first = get_schema(path)
        assert get_schema(str(path)) is first

    def test_bypass_and_clear(self, schema_dir):
        path = schema_dir / "person.json"
        first = get_schema(path)
        path.write_text(json.dumps({"type": "array"}), encoding="utf-8")

        assert get_schema(path) is first
        assert get_schema(path, use_cache=False).type is SchemaType.ARRAY

        clear_cache()
        path.write_text(json.dumps({"type": "string"}), encoding="utf-8")
        assert get_schema(path).type is SchemaType.STRING
