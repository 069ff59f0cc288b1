#!/usr/bin/env python3
"""
validators
----------
Record validation for contentlab collections.

Architecture:
    - schema.py: Field/Schema descriptors, SchemaIssue, validate()

Usage:
    from contentlab.validators import Schema, string, validate
"""

from .schema import (
    MISSING,
    Field,
    FieldKind,
    Schema,
    SchemaIssue,
    array,
    boolean,
    isodate,
    number,
    obj,
    opaque,
    string,
    validate,
)

__all__ = [
    "MISSING",
    "Field",
    "FieldKind",
    "Schema",
    "SchemaIssue",
    "array",
    "boolean",
    "isodate",
    "number",
    "obj",
    "opaque",
    "string",
    "validate",
]
