#!/usr/bin/env python3
"""
html.py
-------
Loader for HTML pages carrying their metadata in an embedded script tag.

A page declares its fields as JSON5 inside ``<script id="meta">``::

    <html><body>
      <script id="meta" type="application/json">{title: "About", }</script>
      <h1>About us</h1>
    </body></html>

The script is removed from the output and the record becomes
``{"content": <body inner HTML>, **meta}``. Documents without a ``<body>``
use the whole remaining markup as content.

Dependencies:
    - beautifulsoup4
    - json5
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
from pathlib import Path
from typing import Any, Dict

# --- Third-party imports ---
from bs4 import BeautifulSoup

# --- Local imports ---
from contentlab.core.exceptions import ParseError
from contentlab.loaders.base import decode_text
from contentlab.loaders.data import parse_json5

logger = logging.getLogger(__name__)

META_SCRIPT_ID = "meta"


def load_html(raw: bytes, file_path: Path) -> Dict[str, Any]:
    """
    Load an HTML document and its embedded metadata.

    Raises:
        ParseError: If the metadata script is not a JSON5 object
    """
    text = decode_text(raw, file_path)
    soup = BeautifulSoup(text, features="html.parser")

    meta: Dict[str, Any] = {}
    script = soup.find("script", id=META_SCRIPT_ID)
    if script is not None:
        data = parse_json5(script.string or "", file_path)
        if not isinstance(data, dict):
            raise ParseError(
                f"Embedded metadata must be an object, got {type(data).__name__}",
                file_path=file_path,
            )
        meta = data
        script.decompose()
    else:
        logger.debug(f"No <script id=\"{META_SCRIPT_ID}\"> in {file_path}")

    body = soup.body
    content = body.decode_contents() if body is not None else soup.decode()

    record: Dict[str, Any] = {"content": content.strip()}
    record.update(meta)
    return record
