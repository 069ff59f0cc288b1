#!/usr/bin/env python3
"""
base.py
-------
Helpers shared by the format loaders.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path

# --- Local imports ---
from contentlab.core.exceptions import ParseError


def decode_text(raw: bytes, file_path: Path) -> str:
    """
    Decode raw file bytes as UTF-8, dropping a leading BOM.

    Raises:
        ParseError: If the bytes are not valid UTF-8
    """
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ParseError(
            f"File is not valid UTF-8 (byte offset {e.start})", file_path=file_path
        ) from e
