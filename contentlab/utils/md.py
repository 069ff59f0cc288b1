#!/usr/bin/env python3
"""
md.py
-------------------
Markdown-specific utilities for contentlab.

Provides functions for splitting and parsing YAML frontmatter from
Markdown (and MDX) sources. Rendering lives in contentlab.loaders.markdown;
this module only deals with the text structure of the file.
"""
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Any, Dict, List, Optional

# --- Third party imports ---
import yaml

# --- Local imports ---
from contentlab.core.exceptions import ParseError


# ----- YAML Frontmatter Parsing -----
def split_frontmatter(content: str) -> tuple[str, List[str]]:
    """
    Split markdown content into YAML frontmatter and body.

    Expected format:
        ---
        yaml: content
        ---

        Body content here...

    Args:
        content: Full markdown file content

    Returns:
        Tuple of (frontmatter_text, body_lines)
        - frontmatter_text: YAML content as string (empty if no frontmatter)
        - body_lines: List of body content lines

    Examples:
        >>> fm, body = split_frontmatter("---\\ntitle: Hi\\n---\\n\\nBody text")
        >>> fm
        'title: Hi'
        >>> body
        ['Body text']
    """
    lines = content.splitlines()

    if not lines or lines[0].strip() != "---":
        return "", lines

    closing = None
    for i, line in enumerate(lines[1:], 1):
        if line.strip() == "---":
            closing = i
            break

    # An unterminated block is body text, not frontmatter
    if closing is None:
        return "", lines

    frontmatter_lines = lines[1:closing]
    body_lines = lines[closing + 1 :]

    while body_lines and body_lines[0].strip() == "":
        body_lines.pop(0)

    return "\n".join(frontmatter_lines), body_lines


def parse_frontmatter(
    frontmatter_text: str, file_path: Optional[Path] = None
) -> Dict[str, Any]:
    """
    Parse frontmatter text into a dictionary.

    Args:
        frontmatter_text: YAML text between the ``---`` delimiters
        file_path: Source file, for error reporting

    Returns:
        Frontmatter fields (empty dict for empty frontmatter)

    Raises:
        ParseError: If the YAML is malformed or not a mapping
    """
    if not frontmatter_text.strip():
        return {}

    try:
        data: Any = yaml.safe_load(frontmatter_text)
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        # +1 for the opening delimiter, +1 for 1-based numbering
        line = mark.line + 2 if mark is not None else None
        raise ParseError(
            f"Invalid YAML frontmatter: {e}", file_path=file_path, line=line
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ParseError(
            f"YAML frontmatter must be a mapping, got {type(data).__name__}",
            file_path=file_path,
        )
    return data
