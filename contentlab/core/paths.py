#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants for the contentlab project.

All default locations are resolved relative to the project root at import
time. CLI options override them per invocation.

The project structure:
    ROOT/
    ├── contentlab/    # Package source
    ├── content/       # Content tree (posts, articles, data, ...)
    ├── .content/      # Built collections (JSON, one file per collection)
    └── logs/          # Application logs
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path


def _get_project_root() -> Path:
    """
    Determine the project root directory.

    Assumes this file lives at ROOT/contentlab/core/paths.py.

    Raises:
        RuntimeError: If the package directory cannot be found under ROOT
    """
    current_file = Path(__file__).resolve()
    root = current_file.parent.parent.parent

    if not (root / "contentlab").is_dir():
        raise RuntimeError(
            f"Cannot determine project root. "
            f"Expected {root / 'contentlab'} to exist. "
            f"Current file: {current_file}"
        )

    return root


# ----- Project directory -----
ROOT: Path = _get_project_root()
PACKAGE_DIR = ROOT / "contentlab"

# ---- Content tree ----
CONTENT_DIR = ROOT / "content"
ARTICLES_DIR = CONTENT_DIR / "articles"

# ---- Build output ----
OUTPUT_DIR = ROOT / ".content"

# ---- Logs ----
LOG_DIR = ROOT / "logs"
