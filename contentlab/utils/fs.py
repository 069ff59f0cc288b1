#!/usr/bin/env python3
"""
fs.py
-------------------
Filesystem utilities for content discovery and file writes.

Functions:
    find_content_files: Discover content files by glob pattern, sorted
    relative_stem: Path relative to a root, without extension
    extract_date_slug: Split a YYYY-MM-DD- prefix off a filename
    atomic_write_text: Write a file through a temp file and os.replace

Usage:
    from contentlab.utils.fs import find_content_files, extract_date_slug

    files = find_content_files(Path("content"), "posts/**/*.md")
    extract_date_slug(Path("2024-01-15-hello-world.md"))
    # {'date': '2024-01-15', 'slug': 'hello-world'}
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
import re
import tempfile
from datetime import date
from pathlib import Path
from typing import Dict, List, Optional, Union

SIDECAR_SUFFIX = ".meta.json"

DATED_FILENAME = re.compile(r"^(\d{4})-(\d{2})-(\d{2})-(.+)$")


def find_content_files(directory: Path, pattern: str) -> List[Path]:
    """
    Find files under ``directory`` matching ``pattern``.

    Metadata sidecars are never content files. Results are sorted by their
    POSIX path relative to ``directory`` so builds are deterministic.
    """
    if not directory.exists():
        return []
    matches = [
        path
        for path in directory.glob(pattern)
        if path.is_file() and not path.name.endswith(SIDECAR_SUFFIX)
    ]
    return sorted(matches, key=lambda p: p.relative_to(directory).as_posix())


def relative_stem(path: Path, root: Path) -> str:
    """
    POSIX path of ``path`` relative to ``root`` without its extension.

    Examples:
        >>> relative_stem(Path("content/posts/hello.md"), Path("content"))
        'posts/hello'
    """
    relative = path.relative_to(root)
    return relative.with_suffix("").as_posix()


def extract_date_slug(path: Union[str, Path]) -> Dict[str, Optional[str]]:
    """
    Derive a publication date and slug from a dated filename.

    Recognizes a leading ``YYYY-MM-DD-`` prefix on the file's base name.
    A prefix that is not a real calendar date counts as no prefix.

    Args:
        path: File path or name

    Returns:
        Dict with 'date' (ISO string or None) and 'slug'

    Examples:
        >>> extract_date_slug("2024-01-15-hello-world.md")
        {'date': '2024-01-15', 'slug': 'hello-world'}
        >>> extract_date_slug("hello-world.md")
        {'date': None, 'slug': 'hello-world'}
    """
    stem = Path(path).stem
    match = DATED_FILENAME.match(stem)
    if match:
        year, month, day, slug = match.groups()
        try:
            published = date(int(year), int(month), int(day))
        except ValueError:
            return {"date": None, "slug": stem}
        return {"date": published.isoformat(), "slug": slug}
    return {"date": None, "slug": stem}


def atomic_write_text(path: Path, text: str) -> None:
    """
    Write ``text`` to ``path`` so readers never see a partial file.

    The content goes to a temporary file in the same directory, which then
    replaces the target. The temporary file is removed on any failure.

    Raises:
        OSError: If the directory is not writable or the disk is full
        UnicodeEncodeError: If ``text`` holds lone surrogates
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(text)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
