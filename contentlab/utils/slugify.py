#!/usr/bin/env python3
"""
slugify.py
----------
String slugification for URL fragments and heading anchors.

Key Features:
    - Lowercase transformation
    - Accent/diacritic normalization (Café → cafe)
    - Space to hyphen conversion
    - Maximum length enforcement

Usage:
    from contentlab.utils.slugify import slugify, unique_slug

    slugify("Getting Started")  # "getting-started"

    seen = {}
    unique_slug("Usage", seen)  # "usage"
    unique_slug("Usage", seen)  # "usage-1"
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
import unicodedata
from typing import Dict


def slugify(text: str, max_length: int = 200) -> str:
    """
    Convert text to a URL-safe slug.

    Args:
        text: Input text to slugify
        max_length: Maximum slug length

    Returns:
        Lowercase ASCII slug made of letters, digits and hyphens

    Examples:
        >>> slugify("Café Society")
        'cafe-society'
        >>> slugify("What's new (2024)?")
        'whats-new-2024'
    """
    if not text:
        return ""

    # Decompose accents, then keep ASCII only
    text = unicodedata.normalize("NFKD", text)
    text = text.encode("ascii", "ignore").decode("ascii")
    text = text.lower()

    text = text.replace("'", "")
    text = re.sub(r"[(){}\[\]]", " ", text)
    text = text.replace("&", "and")
    text = text.replace("/", "-")
    text = re.sub(r"[\s_]+", "-", text)
    text = re.sub(r"[^a-z0-9-]", "", text)
    text = re.sub(r"-+", "-", text)
    text = text.strip("-")

    if len(text) > max_length:
        text = text[:max_length].rstrip("-")

    return text


def unique_slug(text: str, seen: Dict[str, int]) -> str:
    """
    Slugify ``text`` and disambiguate repeats within one document.

    The first occurrence keeps the bare slug; later ones get ``-1``, ``-2``...
    ``seen`` is updated in place.

    Examples:
        >>> seen = {}
        >>> [unique_slug(t, seen) for t in ["Intro", "Intro", "Intro"]]
        ['intro', 'intro-1', 'intro-2']
    """
    base = slugify(text) or "section"
    if base not in seen:
        seen[base] = 0
        return base

    seen[base] += 1
    candidate = f"{base}-{seen[base]}"
    while candidate in seen:
        seen[base] += 1
        candidate = f"{base}-{seen[base]}"
    seen[candidate] = 0
    return candidate
