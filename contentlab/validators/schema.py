#!/usr/bin/env python3
"""
schema.py
---------
Declarative record schemas and the generic validator that applies them.

A collection schema is data: a mapping of field name to Field descriptor
plus an optional transform. One validator walks any schema, coerces what
it can (dates become ISO strings), strips undeclared keys and collects
every violation before failing.

Key Principles:
- Schema as data: no per-collection validation code
- All issues at once: ValidationError lists every violated field
- Transforms are pure functions from validated record to enriched record

Usage:
    from contentlab.validators.schema import Schema, string, isodate, array, validate

    schema = Schema(
        fields={
            "title": string(max_length=99),
            "date": isodate(required=False),
            "tags": array(string(), required=False),
        },
        transform=lambda r: {**r, "permalink": f"/{r['slug']}"},
    )
    record = validate(raw_record, schema, file_path=path)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import copy
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

# --- Local imports ---
from contentlab.core.exceptions import ValidationError

# Jekyll frontmatter dates, e.g. "2024-01-15 10:00:00 +0000"
JEKYLL_DATETIME_FORMATS = ("%Y-%m-%d %H:%M:%S %z", "%Y-%m-%d %H:%M %z")


class FieldKind(str, Enum):
    """Runtime types a field may hold."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    ARRAY = "array"
    OBJECT = "object"
    OPAQUE = "opaque"

    @classmethod
    def choices(cls) -> List[str]:
        return [kind.value for kind in cls]


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()
"""Sentinel for 'no default declared' (None is a legitimate default)."""


@dataclass(frozen=True)
class Field:
    """
    Descriptor for one record field.

    Attributes:
        kind: Expected runtime type
        required: Whether a value must be present after defaults
        default: Value used when the field is missing (deep-copied)
        max_length: Maximum length for string values
        items: Descriptor applied to each element of an array
        fields: Nested descriptors for objects (None accepts any mapping)
        unique: Values must differ across records of a collection
    """

    kind: FieldKind
    required: bool = True
    default: Any = MISSING
    max_length: Optional[int] = None
    items: Optional[Field] = None
    fields: Optional[Dict[str, Field]] = None
    unique: bool = False

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING


Transform = Callable[[Dict[str, Any]], Dict[str, Any]]


@dataclass(frozen=True)
class Schema:
    """Collection schema: field descriptors plus an optional transform."""

    fields: Dict[str, Field]
    transform: Optional[Transform] = None

    @property
    def required_fields(self) -> List[str]:
        return [name for name, spec in self.fields.items() if spec.required]

    @property
    def unique_fields(self) -> List[str]:
        return [name for name, spec in self.fields.items() if spec.unique]


@dataclass
class SchemaIssue:
    """Represents a schema validation issue."""

    field_path: str  # e.g., "nav[0].href"
    message: str
    actual_value: Optional[Any] = None


# ========== Field Constructors ==========


def string(
    max_length: Optional[int] = None,
    required: bool = True,
    default: Any = MISSING,
    unique: bool = False,
) -> Field:
    return Field(
        FieldKind.STRING,
        required=required,
        default=default,
        max_length=max_length,
        unique=unique,
    )


def number(required: bool = True, default: Any = MISSING) -> Field:
    return Field(FieldKind.NUMBER, required=required, default=default)


def boolean(required: bool = True, default: Any = MISSING) -> Field:
    return Field(FieldKind.BOOLEAN, required=required, default=default)


def isodate(required: bool = True, default: Any = MISSING) -> Field:
    return Field(FieldKind.DATE, required=required, default=default)


def array(items: Field, required: bool = True, default: Any = MISSING) -> Field:
    return Field(FieldKind.ARRAY, required=required, default=default, items=items)


def obj(
    fields: Optional[Dict[str, Field]] = None,
    required: bool = True,
    default: Any = MISSING,
) -> Field:
    return Field(FieldKind.OBJECT, required=required, default=default, fields=fields)


def opaque(required: bool = True, default: Any = MISSING) -> Field:
    return Field(FieldKind.OPAQUE, required=required, default=default)


# ========== Validation ==========


def _type_name(value: Any) -> str:
    return type(value).__name__


def _coerce_date(value: Any) -> Optional[str]:
    """Return the ISO form of a date value, or None if it is not one."""
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text).isoformat()
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text.replace("Z", "+00:00")).isoformat()
        except ValueError:
            pass
        for fmt in JEKYLL_DATETIME_FORMATS:
            try:
                return datetime.strptime(text, fmt).isoformat()
            except ValueError:
                continue
        return None
    return None


def _check_fields(
    data: Mapping,
    specs: Dict[str, Field],
    prefix: str,
    issues: List[SchemaIssue],
) -> Dict[str, Any]:
    """Validate declared fields of a mapping; undeclared keys are dropped."""
    result: Dict[str, Any] = {}
    for name, spec in specs.items():
        path = f"{prefix}.{name}" if prefix else name
        value = data.get(name)

        if value is None:
            if spec.has_default:
                result[name] = copy.deepcopy(spec.default)
            elif spec.required:
                issues.append(SchemaIssue(path, "Required field missing"))
            continue

        checked = _check_value(value, spec, path, issues)
        if checked is not MISSING:
            result[name] = checked
    return result


def _check_value(
    value: Any, spec: Field, path: str, issues: List[SchemaIssue]
) -> Any:
    """
    Check one value against its descriptor.

    Returns the (possibly coerced) value, or MISSING after recording an issue.
    """
    kind = spec.kind

    if kind is FieldKind.OPAQUE:
        return value

    if kind is FieldKind.STRING:
        if not isinstance(value, str):
            issues.append(
                SchemaIssue(path, f"Expected string, got {_type_name(value)}", value)
            )
            return MISSING
        if spec.max_length is not None and len(value) > spec.max_length:
            issues.append(
                SchemaIssue(
                    path,
                    f"String longer than {spec.max_length} characters "
                    f"({len(value)})",
                    value,
                )
            )
            return MISSING
        return value

    if kind is FieldKind.NUMBER:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            issues.append(
                SchemaIssue(path, f"Expected number, got {_type_name(value)}", value)
            )
            return MISSING
        return value

    if kind is FieldKind.BOOLEAN:
        if not isinstance(value, bool):
            issues.append(
                SchemaIssue(path, f"Expected boolean, got {_type_name(value)}", value)
            )
            return MISSING
        return value

    if kind is FieldKind.DATE:
        iso = _coerce_date(value)
        if iso is None:
            issues.append(
                SchemaIssue(path, f"Invalid date: {value!r}", value)
            )
            return MISSING
        return iso

    if kind is FieldKind.ARRAY:
        if not isinstance(value, (list, tuple)):
            issues.append(
                SchemaIssue(path, f"Expected array, got {_type_name(value)}", value)
            )
            return MISSING
        if spec.items is None:
            return list(value)
        before = len(issues)
        items = [
            _check_value(item, spec.items, f"{path}[{i}]", issues)
            for i, item in enumerate(value)
        ]
        if len(issues) > before:
            return MISSING
        return items

    if kind is FieldKind.OBJECT:
        if not isinstance(value, Mapping):
            issues.append(
                SchemaIssue(path, f"Expected object, got {_type_name(value)}", value)
            )
            return MISSING
        if spec.fields is None:
            return dict(value)
        return _check_fields(value, spec.fields, path, issues)

    raise ValueError(f"Unknown field kind: {kind}")


def validate(
    record: Any, schema: Schema, file_path: Optional[Path] = None
) -> Dict[str, Any]:
    """
    Validate a loaded record and apply the schema transform.

    Args:
        record: Pre-validation record produced by a loader
        schema: Collection schema
        file_path: Source file, for error reporting

    Returns:
        Validated (and transformed) record

    Raises:
        ValidationError: Listing every violated field, or when the
            transform drops a required field
    """
    if not isinstance(record, Mapping):
        raise ValidationError(
            [SchemaIssue("<record>", f"Expected a mapping, got {_type_name(record)}")],
            file_path=file_path,
        )

    issues: List[SchemaIssue] = []
    validated = _check_fields(record, schema.fields, "", issues)
    if issues:
        raise ValidationError(issues, file_path=file_path)

    if schema.transform is None:
        return validated

    transformed = schema.transform(copy.deepcopy(validated))
    if not isinstance(transformed, Mapping):
        raise ValidationError(
            [
                SchemaIssue(
                    "<transform>",
                    f"Transform must return a mapping, got {_type_name(transformed)}",
                )
            ],
            file_path=file_path,
        )

    dropped = [
        SchemaIssue(name, "Required field removed by transform")
        for name in schema.required_fields
        if name not in transformed
    ]
    if dropped:
        raise ValidationError(dropped, file_path=file_path)

    return dict(transformed)
