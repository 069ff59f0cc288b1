#!/usr/bin/env python3
"""
editorjs.py
-----------
Loader for Editor.js block documents (``*.editorjs``).

An Editor.js document is JSON of the form::

    {"time": 1700000000000, "blocks": [{"type": "paragraph", "data": {...}}], "version": "2.28.0"}

Each block is rendered by the renderer registered for its type and the
fragments are concatenated in block order with no separator. Block text
is inline HTML produced by the editor and is emitted as-is; code blocks
are escaped.

Unknown block types fail the whole document with ParseError. Dropping
them would let content silently vanish from the site.

Metadata (title, slug, date, ...) lives in the ``.meta.json`` sidecar and
is merged by the collection builder, so this loader only returns
``{"content": html}``.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import html
import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List

# --- Local imports ---
from contentlab.core.exceptions import ParseError
from contentlab.loaders.base import decode_text

logger = logging.getLogger(__name__)

BlockRenderer = Callable[[Dict[str, Any]], str]


class BlockError(ValueError):
    """A block whose data cannot be rendered."""


def _text(data: Dict[str, Any], key: str = "text") -> str:
    value = data.get(key, "")
    if not isinstance(value, str):
        raise BlockError(f"'{key}' must be a string")
    return value


def render_paragraph(data: Dict[str, Any]) -> str:
    return f"<p>{_text(data)}</p>"


def render_header(data: Dict[str, Any]) -> str:
    level = data.get("level", 2)
    if isinstance(level, bool) or not isinstance(level, int) or not 1 <= level <= 6:
        raise BlockError(f"Invalid header level: {level!r}")
    return f"<h{level}>{_text(data)}</h{level}>"


def _list_items(items: List[Any], tag: str) -> str:
    rendered = []
    for item in items:
        # Nested lists store {content, items}; flat lists store strings
        if isinstance(item, dict):
            inner = item.get("content", "")
            children = item.get("items") or []
            nested = f"<{tag}>{_list_items(children, tag)}</{tag}>" if children else ""
            rendered.append(f"<li>{inner}{nested}</li>")
        elif isinstance(item, str):
            rendered.append(f"<li>{item}</li>")
        else:
            raise BlockError(f"Invalid list item: {item!r}")
    return "".join(rendered)


def render_list(data: Dict[str, Any]) -> str:
    style = data.get("style", "unordered")
    if style not in ("ordered", "unordered"):
        raise BlockError(f"Invalid list style: {style!r}")
    items = data.get("items", [])
    if not isinstance(items, list):
        raise BlockError("'items' must be a list")
    tag = "ol" if style == "ordered" else "ul"
    return f"<{tag}>{_list_items(items, tag)}</{tag}>"


def render_code(data: Dict[str, Any]) -> str:
    return f"<pre><code>{html.escape(_text(data, 'code'))}</code></pre>"


def render_quote(data: Dict[str, Any]) -> str:
    caption = data.get("caption") or ""
    cite = f"<cite>{caption}</cite>" if caption else ""
    return f"<blockquote>{_text(data)}{cite}</blockquote>"


def render_delimiter(data: Dict[str, Any]) -> str:
    return "<hr/>"


def render_image(data: Dict[str, Any]) -> str:
    file_info = data.get("file") or {}
    url = file_info.get("url") if isinstance(file_info, dict) else None
    url = url or data.get("url")
    if not isinstance(url, str) or not url:
        raise BlockError("Image block without a url")
    caption = data.get("caption") or ""
    alt = html.escape(caption, quote=True)
    return f'<img src="{html.escape(url, quote=True)}" alt="{alt}"/>'


BLOCK_RENDERERS: Dict[str, BlockRenderer] = {
    "paragraph": render_paragraph,
    "header": render_header,
    "list": render_list,
    "code": render_code,
    "quote": render_quote,
    "delimiter": render_delimiter,
    "image": render_image,
}


def render_blocks(document: Any, file_path: Path) -> str:
    """
    Render an Editor.js document to HTML.

    Args:
        document: Parsed JSON document
        file_path: Source path, for error reporting

    Returns:
        Concatenated HTML fragments

    Raises:
        ParseError: If the document shape is wrong, a block type is
            unknown or a block's data is invalid
    """
    if not isinstance(document, dict) or not isinstance(document.get("blocks"), list):
        raise ParseError(
            "Editor.js document must be an object with a 'blocks' list",
            file_path=file_path,
        )

    fragments: List[str] = []
    for index, block in enumerate(document["blocks"]):
        if not isinstance(block, dict) or "type" not in block:
            raise ParseError(f"Block {index} has no 'type'", file_path=file_path)

        block_type = block["type"]
        renderer = BLOCK_RENDERERS.get(block_type)
        if renderer is None:
            raise ParseError(
                f"Unknown block type '{block_type}' at block {index}",
                file_path=file_path,
            )

        data = block.get("data") or {}
        if not isinstance(data, dict):
            raise ParseError(
                f"Block {index} ({block_type}) data must be an object",
                file_path=file_path,
            )
        try:
            fragments.append(renderer(data))
        except BlockError as e:
            raise ParseError(
                f"Block {index} ({block_type}): {e}", file_path=file_path
            ) from e

    return "".join(fragments)


def load_editorjs(raw: bytes, file_path: Path) -> Dict[str, Any]:
    """
    Load an Editor.js document.

    Returns:
        ``{"content": html}``

    Raises:
        ParseError: If the JSON is malformed or a block cannot be rendered
    """
    text = decode_text(raw, file_path)
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(
            f"Invalid JSON: {e.msg}", file_path=file_path, line=e.lineno
        ) from e

    content = render_blocks(document, file_path)
    logger.debug(f"Rendered {len(document['blocks'])} blocks from {file_path}")
    return {"content": content}
