"""
Utilities package for contentlab.

This package provides commonly-used utilities organized by domain:
- md: Frontmatter splitting and parsing
- fs: File discovery, filename dates, atomic writes
- slugify: Slugs and heading anchors
- txt: Word count and reading time

Import commonly-used utilities directly from this package:
    from contentlab.utils import split_frontmatter, extract_date_slug
"""

from .md import split_frontmatter, parse_frontmatter

from .fs import (
    SIDECAR_SUFFIX,
    find_content_files,
    relative_stem,
    extract_date_slug,
    atomic_write_text,
)

from .slugify import slugify, unique_slug

from .txt import compute_metrics

__all__ = [
    # Markdown/YAML
    "split_frontmatter",
    "parse_frontmatter",
    # Filesystem
    "SIDECAR_SUFFIX",
    "find_content_files",
    "relative_stem",
    "extract_date_slug",
    "atomic_write_text",
    # Slugs
    "slugify",
    "unique_slug",
    # Text
    "compute_metrics",
]
