"""
test_schema_validator.py
------------------------
Unit tests for contentlab.validators.schema module.

Tests field checks, defaults, coercion, issue collection and transforms.
"""
import pytest
from datetime import date, datetime

from contentlab.core.exceptions import ValidationError
from contentlab.validators.schema import (
    FieldKind,
    Schema,
    array,
    boolean,
    isodate,
    number,
    obj,
    opaque,
    string,
    validate,
)


class TestFieldChecks:
    """Test single-field validation."""

    def test_valid_record_passes(self):
        schema = Schema({"title": string(), "count": number(), "draft": boolean()})
        record = {"title": "Hi", "count": 3, "draft": False}
        assert validate(record, schema) == record

    def test_undeclared_keys_stripped(self):
        schema = Schema({"title": string()})
        assert validate({"title": "Hi", "raw": "..."}, schema) == {"title": "Hi"}

    def test_required_missing(self):
        with pytest.raises(ValidationError) as exc_info:
            validate({}, Schema({"title": string()}))
        assert exc_info.value.fields == ["title"]

    def test_none_counts_as_missing(self):
        with pytest.raises(ValidationError):
            validate({"title": None}, Schema({"title": string()}))

    def test_optional_missing_omitted(self):
        schema = Schema({"description": string(required=False)})
        assert validate({}, schema) == {}

    def test_default_applied_and_copied(self):
        schema = Schema({"tags": array(string(), default=[])})
        first = validate({}, schema)
        first["tags"].append("x")
        assert validate({}, schema) == {"tags": []}

    def test_string_max_length(self):
        schema = Schema({"title": string(max_length=99)})
        assert validate({"title": "x" * 99}, schema)["title"] == "x" * 99
        with pytest.raises(ValidationError, match="longer than 99"):
            validate({"title": "x" * 100}, schema)

    def test_bool_is_not_a_number(self):
        with pytest.raises(ValidationError, match="Expected number"):
            validate({"n": True}, Schema({"n": number()}))

    def test_opaque_accepts_anything(self):
        schema = Schema({"blob": opaque()})
        assert validate({"blob": {"a": [1]}}, schema) == {"blob": {"a": [1]}}

    def test_field_kinds(self):
        assert "date" in FieldKind.choices()


class TestDates:
    """Test date coercion."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (date(2024, 1, 15), "2024-01-15"),
            ("2024-01-15", "2024-01-15"),
            (datetime(2024, 1, 15, 9, 30), "2024-01-15T09:30:00"),
            ("2024-01-15T09:30:00Z", "2024-01-15T09:30:00+00:00"),
            ("2024-01-15 10:00:00 +0000", "2024-01-15T10:00:00+00:00"),
            ("2024-01-15 10:00 -0500", "2024-01-15T10:00:00-05:00"),
        ],
    )
    def test_coerced_to_iso(self, value, expected):
        assert validate({"d": value}, Schema({"d": isodate()})) == {"d": expected}

    @pytest.mark.parametrize("value", ["yesterday", "2024-02-30", 20240115])
    def test_invalid(self, value):
        with pytest.raises(ValidationError, match="Invalid date"):
            validate({"d": value}, Schema({"d": isodate()}))


class TestNested:
    """Test arrays and objects."""

    def test_array_item_paths(self):
        schema = Schema({"tags": array(string())})
        with pytest.raises(ValidationError) as exc_info:
            validate({"tags": ["ok", 1, "fine", 2]}, schema)
        assert exc_info.value.fields == ["tags[1]", "tags[3]"]

    def test_nested_object_paths(self):
        schema = Schema({"nav": array(obj({"title": string(), "href": string()}))})
        with pytest.raises(ValidationError) as exc_info:
            validate({"nav": [{"title": "Home", "href": "/"}, {"title": "Blog"}]}, schema)
        assert exc_info.value.fields == ["nav[1].href"]

    def test_nested_unknown_keys_stripped(self):
        schema = Schema({"author": obj({"name": string()})})
        result = validate({"author": {"name": "A", "extra": 1}}, schema)
        assert result == {"author": {"name": "A"}}

    def test_free_form_object(self):
        schema = Schema({"site": obj()})
        assert validate({"site": {"any": "thing"}}, schema) == {"site": {"any": "thing"}}

    def test_wrong_container_types(self):
        schema = Schema({"tags": array(string()), "site": obj()})
        with pytest.raises(ValidationError) as exc_info:
            validate({"tags": "a,b", "site": []}, schema)
        assert exc_info.value.fields == ["tags", "site"]


class TestIssueCollection:
    """Every violation is reported at once."""

    def test_all_issues_reported(self):
        schema = Schema({"title": string(), "date": isodate(), "featured": boolean()})
        with pytest.raises(ValidationError) as exc_info:
            validate({"date": "nope", "featured": "yes"}, schema, file_path="a.md")

        error = exc_info.value
        assert error.fields == ["title", "date", "featured"]
        assert "3 schema violation(s)" in str(error)
        assert "a.md" in str(error)

    def test_non_mapping_record(self):
        with pytest.raises(ValidationError, match="Expected a mapping"):
            validate(["not", "a", "dict"], Schema({}))


class TestTransforms:
    """Test schema transforms."""

    def test_transform_adds_field(self):
        schema = Schema(
            {"slug": string()},
            transform=lambda r: {**r, "permalink": f"/{r['slug']}"},
        )
        assert validate({"slug": "posts/a"}, schema) == {
            "slug": "posts/a",
            "permalink": "/posts/a",
        }

    def test_transform_runs_after_defaults(self):
        schema = Schema(
            {"featured": boolean(default=False)},
            transform=lambda r: {**r, "flag": str(r["featured"])},
        )
        assert validate({}, schema)["flag"] == "False"

    def test_transform_dropping_required_field(self):
        schema = Schema({"title": string()}, transform=lambda r: {})
        with pytest.raises(ValidationError, match="removed by transform"):
            validate({"title": "Hi"}, schema)

    def test_transform_must_return_mapping(self):
        schema = Schema({"title": string()}, transform=lambda r: None)
        with pytest.raises(ValidationError, match="must return a mapping"):
            validate({"title": "Hi"}, schema)

    def test_transform_not_run_on_invalid_record(self):
        calls = []
        schema = Schema({"title": string()}, transform=lambda r: calls.append(r) or r)
        with pytest.raises(ValidationError):
            validate({}, schema)
        assert calls == []
