#!/usr/bin/env python3
"""
data.py
-------
Loaders for structured data files: JSON5, YAML, CSV and TOML.

Each file is data as a whole (no frontmatter split). JSON5, YAML and TOML
documents become the record verbatim; schema validation happens later in
the collection builder. CSV files become ``{"rows": [...]}`` with the first
row as headers and every value kept as a string.

Usage:
    from contentlab.loaders.data import load_csv

    load_csv(b"id,name\\n1,Widget\\n", Path("data/products.csv"))
    # {'rows': [{'id': '1', 'name': 'Widget'}]}

Dependencies:
    - json5
    - PyYAML
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import csv
import io
import tomllib
from pathlib import Path
from typing import Any, Dict, List

# --- Third-party imports ---
import json5
import yaml

# --- Local imports ---
from contentlab.core.exceptions import ParseError
from contentlab.loaders.base import decode_text


def parse_json5(text: str, file_path: Path) -> Any:
    """
    Parse JSON5 text (comments, trailing commas, unquoted keys).

    Raises:
        ParseError: If the text is not valid JSON5
    """
    try:
        return json5.loads(text)
    except ValueError as e:
        raise ParseError(f"Invalid JSON5: {e}", file_path=file_path) from e


def load_json5(raw: bytes, file_path: Path) -> Any:
    """Load a JSON5 document as the record, unchanged."""
    return parse_json5(decode_text(raw, file_path), file_path)


def load_yaml(raw: bytes, file_path: Path) -> Any:
    """
    Load a YAML document as the record, unchanged.

    An empty document loads as an empty record.

    Raises:
        ParseError: If the YAML is malformed
    """
    text = decode_text(raw, file_path)
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        line = mark.line + 1 if mark is not None else None
        raise ParseError(f"Invalid YAML: {e}", file_path=file_path, line=line) from e
    return {} if data is None else data


def load_csv(raw: bytes, file_path: Path) -> Dict[str, List[Dict[str, str]]]:
    """
    Load a CSV file using its first row as column headers.

    Values are never coerced: callers needing numbers convert downstream.
    Rows shorter than the header get empty strings for the missing cells.

    Returns:
        ``{"rows": [{column: value, ...}, ...]}``

    Raises:
        ParseError: If a row has more cells than the header, or the CSV
            is malformed
    """
    text = decode_text(raw, file_path)
    reader = csv.DictReader(io.StringIO(text, newline=""), restval="", strict=True)
    rows: List[Dict[str, str]] = []
    try:
        for row in reader:
            if None in row:
                raise ParseError(
                    f"Row has {len(reader.fieldnames or []) + len(row[None])} cells, "
                    f"header has {len(reader.fieldnames or [])}",
                    file_path=file_path,
                    line=reader.line_num,
                )
            rows.append(dict(row))
    except csv.Error as e:
        raise ParseError(
            f"Invalid CSV: {e}", file_path=file_path, line=reader.line_num
        ) from e
    return {"rows": rows}


def load_toml(raw: bytes, file_path: Path) -> Dict[str, Any]:
    """
    Load a TOML document as the record, unchanged.

    Raises:
        ParseError: If the TOML is malformed
    """
    text = decode_text(raw, file_path)
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ParseError(
            f"Invalid TOML: {e}", file_path=file_path, line=getattr(e, "lineno", None)
        ) from e
