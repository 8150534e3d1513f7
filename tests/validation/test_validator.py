"""
Unit tests for the Validator.
"""

from jsonguard.document import JsonObject, from_python, parse_json
from jsonguard.report import ValidationErrorKind, ValidationStatus
from jsonguard.validation import Validator, validate


class TestAlwaysTrueSchema:
    """An empty schema accepts everything."""

    def test_empty_schema_accepts_any_value(self, compile_py):
        """Every kind of value passes {}."""
        schema = compile_py({})
        for value in [None, True, 0, -1.5, "", "text", [], [1, "a"], {}, {"a": {"b": [None]}}]:
            result = validate(from_python(value), schema)
            assert result.valid, value
            assert result.status == ValidationStatus.VALID
            assert result.errors == []

    def test_boolean_true_schema_accepts_any_value(self, compile_py):
        """The `true` schema behaves like {}."""
        schema = compile_py(True)
        assert validate(from_python([1, {"x": None}]), schema).valid


class TestObjects:
    """Tests for required fields and nested properties."""

    def test_missing_required_field(self, compile_py):
        """Exactly one MISSING_FIELD is reported at the missing member."""
        schema = compile_py({"type": "object", "required": ["a", "b"]})
        result = validate(from_python({"a": 1}), schema)

        assert not result.valid
        assert len(result.errors) == 1
        error = result.errors[0]
        assert error.kind == ValidationErrorKind.MISSING_FIELD
        assert error.pointer == "/b"
        assert error.rule == "required"

    def test_type_mismatch_short_circuits(self, compile_py):
        """A wrong type yields one error and nothing nested."""
        schema = compile_py({
            "type": "object",
            "properties": {"age": {"type": "number", "minimum": 0, "enum": [1, 2]}},
        })
        result = validate(from_python({"age": "thirty"}), schema)

        assert len(result.errors) == 1
        error = result.errors[0]
        assert error.kind == ValidationErrorKind.TYPE_MISMATCH
        assert error.pointer == "/age"
        assert error.expected == "number"
        assert error.actual == "string"

    def test_root_type_mismatch_skips_required(self, compile_py):
        """A non-object root does not also report missing fields."""
        schema = compile_py({"type": "object", "required": ["name"]})
        result = validate(from_python([1, 2]), schema)

        assert [e.kind for e in result.errors] == [ValidationErrorKind.TYPE_MISMATCH]
        assert result.errors[0].pointer == ""

    def test_unknown_members_are_ignored(self, compile_py):
        """Members without a property schema are not validated."""
        schema = compile_py({"type": "object", "properties": {"a": {"type": "string"}}})
        assert validate(from_python({"a": "x", "extra": 123}), schema).valid

    def test_nested_paths(self, compile_py):
        """Paths thread through objects and arrays."""
        schema = compile_py({
            "type": "object",
            "properties": {
                "items": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "required": ["name"],
                        "properties": {"name": {"type": "string"}},
                    },
                },
            },
        })
        instance = from_python({"items": [{"name": "a"}, {"name": "b"}, {}, {"name": 4}]})
        result = validate(instance, schema)

        assert [e.pointer for e in result.errors] == ["/items/2/name", "/items/3/name"]
        assert result.errors[0].kind == ValidationErrorKind.MISSING_FIELD
        assert result.errors[1].kind == ValidationErrorKind.TYPE_MISMATCH
        assert result.errors[1].path == ("items", 3, "name")

    def test_properties_without_type_still_apply(self, compile_py):
        """Object keywords apply to objects even when type is absent."""
        schema = compile_py({"required": ["id"], "properties": {"id": {"type": "number"}}})

        assert validate(from_python({"id": 3}), schema).valid
        assert validate(from_python({}), schema).errors[0].kind == ValidationErrorKind.MISSING_FIELD
        # Not an object: object keywords are ignored
        assert validate(from_python("plain"), schema).valid

    def test_mismatched_keywords_are_ignored(self, compile_py):
        """`items` on an object schema and `required` on a string schema do nothing."""
        schema = compile_py({"type": "string", "required": ["x"], "items": {"type": "number"}})
        assert validate(from_python("hello"), schema).valid


class TestArrays:
    """Tests for homogeneous items and size limits."""

    def test_single_bad_element(self, compile_py):
        """Only the offending element is reported."""
        schema = compile_py({"type": "array", "items": {"type": "number"}})
        result = validate(from_python([1, 2, "x"]), schema)

        assert len(result.errors) == 1
        assert result.errors[0].kind == ValidationErrorKind.TYPE_MISMATCH
        assert result.errors[0].pointer == "/2"

    def test_min_and_max_items(self, compile_py):
        """Array size bounds are inclusive."""
        schema = compile_py({"type": "array", "minItems": 1, "maxItems": 2})

        assert validate(from_python([1]), schema).valid
        assert validate(from_python([1, 2]), schema).valid

        too_few = validate(from_python([]), schema)
        assert too_few.errors[0].kind == ValidationErrorKind.CONSTRAINT_VIOLATION
        assert too_few.errors[0].rule == "minItems"

        too_many = validate(from_python([1, 2, 3]), schema)
        assert too_many.errors[0].rule == "maxItems"

    def test_element_errors_precede_size_error(self, compile_py):
        """Elements are walked before the size rule is checked."""
        schema = compile_py({"type": "array", "items": {"type": "string"}, "maxItems": 1})
        result = validate(from_python([1, "ok"]), schema)

        assert [(e.pointer, e.rule) for e in result.errors] == [("/0", "type"), ("", "maxItems")]


class TestStrings:
    """Tests for string length and pattern."""

    def test_length_boundaries(self, compile_py):
        """minLength/maxLength are inclusive."""
        schema = compile_py({"type": "string", "minLength": 3, "maxLength": 5})

        assert not validate(from_python("ab"), schema).valid
        assert validate(from_python("abc"), schema).valid
        assert validate(from_python("abcde"), schema).valid
        assert not validate(from_python("abcdef"), schema).valid

    def test_length_counts_code_points(self, compile_py):
        """Length is measured in characters, not UTF-8 bytes."""
        schema = compile_py({"type": "string", "maxLength": 2})
        assert validate(from_python("日本"), schema).valid
        assert not validate(from_python("日本語"), schema).valid

    def test_length_violation_detail(self, compile_py):
        """The rule name appears in the detail."""
        schema = compile_py({"type": "string", "minLength": 3})
        error = validate(from_python("ab"), schema).errors[0]

        assert error.kind == ValidationErrorKind.CONSTRAINT_VIOLATION
        assert error.rule == "minLength"
        assert error.detail.startswith("minLength")

    def test_pattern_uses_search(self, compile_py):
        """A match anywhere in the string satisfies the pattern."""
        schema = compile_py({"type": "string", "pattern": "[0-9]+"})

        assert validate(from_python("abc123def"), schema).valid
        result = validate(from_python("abcdef"), schema)
        assert result.errors[0].rule == "pattern"

    def test_anchored_pattern(self, compile_py):
        """Anchors written in the pattern are honoured."""
        schema = compile_py({"type": "string", "pattern": "^[a-z]+$"})
        assert validate(from_python("abc"), schema).valid
        assert not validate(from_python("abc1"), schema).valid


class TestNumbers:
    """Tests for numeric ranges."""

    def test_inclusive_bounds(self, compile_py):
        """minimum/maximum accept the bound itself."""
        schema = compile_py({"type": "number", "minimum": 0, "maximum": 10})

        assert validate(from_python(0), schema).valid
        assert validate(from_python(10), schema).valid
        assert validate(from_python(5.5), schema).valid
        assert validate(from_python(-0.1), schema).errors[0].rule == "minimum"
        assert validate(from_python(10.5), schema).errors[0].rule == "maximum"

    def test_boolean_is_not_a_number(self, compile_py):
        """true is a boolean, never a number."""
        schema = compile_py({"type": "number"})
        error = validate(from_python(True), schema).errors[0]
        assert error.kind == ValidationErrorKind.TYPE_MISMATCH
        assert error.actual == "boolean"

    def test_null_and_boolean_types(self, compile_py):
        """null and boolean types match only their own kind."""
        assert validate(from_python(None), compile_py({"type": "null"})).valid
        assert not validate(from_python(0), compile_py({"type": "null"})).valid
        assert validate(from_python(False), compile_py({"type": "boolean"})).valid
        assert not validate(from_python("false"), compile_py({"type": "boolean"})).valid


class TestEnum:
    """Tests for enum membership."""

    def test_enum_membership(self, compile_py):
        """4 is rejected, 2 is accepted."""
        schema = compile_py({"enum": [1, 2, 3]})

        result = validate(from_python(4), schema)
        assert not result.valid
        assert result.errors[0].kind == ValidationErrorKind.INVALID_ENUM_VALUE
        assert result.errors[0].rule == "enum"

        assert validate(from_python(2), schema).valid

    def test_enum_numbers_compare_by_value(self, compile_py):
        """2.0 equals 2; true does not equal 1."""
        schema = compile_py({"enum": [1, 2]})
        assert validate(parse_json("2.0"), schema).valid
        assert not validate(from_python(True), schema).valid

    def test_enum_deep_equality(self, compile_py):
        """Objects match regardless of member order; arrays need the same order."""
        schema = compile_py({"enum": [{"a": 1, "b": [1, 2]}, None]})

        assert validate(parse_json('{"b": [1, 2], "a": 1}'), schema).valid
        assert validate(from_python(None), schema).valid
        assert not validate(parse_json('{"a": 1, "b": [2, 1]}'), schema).valid

    def test_enum_applies_regardless_of_type(self, compile_py):
        """enum is checked alongside type constraints."""
        schema = compile_py({"type": "string", "minLength": 2, "enum": ["b", "bb"]})
        result = validate(from_python("a"), schema)
        assert [e.rule for e in result.errors] == ["minLength", "enum"]


class TestCollectAll:
    """Tests for error accumulation and ordering."""

    def test_scenario_two_errors(self, compile_py, person_schema):
        """Empty name and negative age are both reported, in document order."""
        schema = compile_py(person_schema)
        result = validate(from_python({"name": "", "age": -5}), schema)

        assert not result.valid
        assert [(e.pointer, e.kind, e.rule) for e in result.errors] == [
            ("/name", ValidationErrorKind.CONSTRAINT_VIOLATION, "minLength"),
            ("/age", ValidationErrorKind.CONSTRAINT_VIOLATION, "minimum"),
        ]

    def test_valid_person(self, compile_py, person_schema):
        """A conforming document is valid."""
        schema = compile_py(person_schema)
        assert validate(from_python({"name": "Ada", "age": 36}), schema).valid

    def test_missing_fields_reported_before_members(self, compile_py):
        """Required checks run before member recursion."""
        schema = compile_py({
            "type": "object",
            "required": ["a", "z"],
            "properties": {"b": {"type": "string"}},
        })
        result = validate(from_python({"b": 1}), schema)
        assert [e.pointer for e in result.errors] == ["/a", "/z", "/b"]

    def test_missing_fields_follow_declared_order(self, compile_py):
        """Missing fields are reported in the order `required` lists them."""
        schema = compile_py({"type": "object", "required": ["z", "a", "m", "z"]})
        result = validate(from_python({}), schema)
        assert [e.pointer for e in result.errors] == ["/z", "/a", "/m"]


class TestPurity:
    """Validation has no side effects."""

    def test_repeated_runs_are_identical(self, compile_py, person_schema):
        """Two runs over the same inputs give equal results and leave inputs untouched."""
        schema = compile_py(person_schema)
        instance = from_python({"name": "", "age": -5, "extra": [1, 2]})
        snapshot = from_python({"name": "", "age": -5, "extra": [1, 2]})

        validator = Validator()
        first = validator.validate(instance, schema)
        second = validator.validate(instance, schema)

        assert first == second
        assert first.model_dump_json() == second.model_dump_json()
        assert instance == snapshot
        assert isinstance(instance, JsonObject)
