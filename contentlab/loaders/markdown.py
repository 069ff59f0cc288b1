#!/usr/bin/env python3
"""
markdown.py
-----------
Loader for Markdown (and MDX) files with YAML frontmatter.

Splits the frontmatter from the body, renders the body to HTML with
markdown-it-py and derives the reading aids a content page needs:

    {
        **frontmatter,
        "content": "<h2 id=\"intro\">Intro</h2>\\n<p>...</p>",
        "excerpt": "Plain text of the first paragraph",
        "toc": [{"depth": 2, "title": "Intro", "anchor": "intro"}],
        "metadata": {"word_count": 120, "reading_time": 1},
        "raw": "## Intro\\n\\n...",
    }

MDX bodies go through the same renderer; JSX is not compiled.

Dependencies:
    - markdown-it-py >= 3.0.0
    - PyYAML
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

# --- Third-party imports ---
from markdown_it import MarkdownIt
from markdown_it.token import Token

# --- Local imports ---
from contentlab.loaders.base import decode_text
from contentlab.utils.md import parse_frontmatter, split_frontmatter
from contentlab.utils.slugify import unique_slug
from contentlab.utils.txt import compute_metrics

logger = logging.getLogger(__name__)


def create_renderer() -> MarkdownIt:
    """CommonMark renderer with GFM tables enabled."""
    return MarkdownIt("commonmark").enable("table")


_renderer = create_renderer()


def _inline_text(token: Optional[Token]) -> str:
    """Plain text of an inline token, markup removed."""
    if token is None or not token.children:
        return token.content if token is not None else ""
    parts: List[str] = []
    for child in token.children:
        if child.type in ("text", "code_inline"):
            parts.append(child.content)
        elif child.type in ("softbreak", "hardbreak"):
            parts.append(" ")
        elif child.type == "image":
            parts.append(_inline_text(child))
    return "".join(parts).strip()


def build_toc(tokens: Sequence[Token]) -> List[Dict[str, Any]]:
    """
    Collect the heading outline and stamp an ``id`` on each heading.

    Anchors are unique within the document; the heading tokens are
    modified in place so the rendered HTML carries the same anchors.
    """
    seen: Dict[str, int] = {}
    toc: List[Dict[str, Any]] = []
    for i, token in enumerate(tokens):
        if token.type != "heading_open":
            continue
        inline = tokens[i + 1] if i + 1 < len(tokens) else None
        title = _inline_text(inline)
        anchor = unique_slug(title, seen)
        token.attrSet("id", anchor)
        toc.append({"depth": int(token.tag[1]), "title": title, "anchor": anchor})
    return toc


def first_paragraph(tokens: Sequence[Token]) -> Optional[str]:
    """Plain text of the first top-level paragraph, or None."""
    for i, token in enumerate(tokens):
        if token.type == "paragraph_open" and token.level == 0:
            text = _inline_text(tokens[i + 1])
            return text or None
    return None


def render_markdown(source: str) -> Dict[str, Any]:
    """
    Render a markdown body.

    Args:
        source: Raw markdown text (no frontmatter)

    Returns:
        Dict with 'content' (HTML), 'excerpt' and 'toc'
    """
    env: Dict[str, Any] = {}
    tokens = _renderer.parse(source, env)
    toc = build_toc(tokens)
    excerpt = first_paragraph(tokens)
    html = _renderer.renderer.render(tokens, _renderer.options, env)
    return {"content": html, "excerpt": excerpt, "toc": toc}


def load_markdown(raw: bytes, file_path: Path) -> Dict[str, Any]:
    """
    Load a Markdown file with optional YAML frontmatter.

    Args:
        raw: File bytes
        file_path: Source path, for error reporting

    Returns:
        Record of frontmatter fields plus content, excerpt, toc,
        metadata and raw

    Raises:
        ParseError: If the file is not UTF-8 or the frontmatter is invalid
    """
    text = decode_text(raw, file_path)
    frontmatter_text, body_lines = split_frontmatter(text)
    fields = parse_frontmatter(frontmatter_text, file_path)

    body = "\n".join(body_lines)
    rendered = render_markdown(body)

    logger.debug(
        f"Loaded markdown {file_path}: {len(fields)} frontmatter fields, "
        f"{len(rendered['toc'])} headings"
    )

    record: Dict[str, Any] = dict(fields)
    record.update(rendered)
    record["metadata"] = compute_metrics(body)
    record["raw"] = body
    return record
