#!/usr/bin/env python3
"""
sidecar.py
----------
Content files paired with an optional ``.meta.json`` metadata sidecar.

The naming convention lives here and nowhere else::

    articles/hello.editorjs   ->  articles/hello.meta.json

Both the collection builder (read-only merge) and the article store
(read/write/delete) go through ContentResource.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Union

# --- Local imports ---
from contentlab.core.exceptions import ParseError
from contentlab.loaders.base import decode_text
from contentlab.utils.fs import SIDECAR_SUFFIX


@dataclass(frozen=True)
class ContentResource:
    """
    A content file and its (possibly absent) metadata sidecar.

    Attributes:
        content_path: Primary content file
        meta_path: Sidecar path, whether or not it exists
    """

    content_path: Path
    meta_path: Path

    @classmethod
    def for_path(cls, content_path: Union[str, Path]) -> ContentResource:
        path = Path(content_path)
        return cls(path, path.with_name(f"{path.stem}{SIDECAR_SUFFIX}"))

    @classmethod
    def for_slug(cls, directory: Path, slug: str, extension: str) -> ContentResource:
        return cls.for_path(Path(directory) / f"{slug}{extension}")

    @property
    def slug(self) -> str:
        return self.content_path.stem

    def has_content(self) -> bool:
        return self.content_path.is_file()

    def has_meta(self) -> bool:
        return self.meta_path.is_file()

    def read_meta(self) -> Dict[str, Any]:
        """
        Read the sidecar, or return an empty record if there is none.

        Raises:
            ParseError: If the sidecar exists but is not a JSON object
        """
        if not self.has_meta():
            return {}

        text = decode_text(self.meta_path.read_bytes(), self.meta_path)
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ParseError(
                f"Invalid metadata JSON: {e.msg}",
                file_path=self.meta_path,
                line=e.lineno,
            ) from e

        if not isinstance(data, dict):
            raise ParseError(
                f"Metadata must be a JSON object, got {type(data).__name__}",
                file_path=self.meta_path,
            )
        return data


def resolve_meta(file_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Return the sidecar metadata for ``file_path``.

    Examples:
        >>> resolve_meta(Path("articles/hello.editorjs"))  # no hello.meta.json
        {}
    """
    return ContentResource.for_path(file_path).read_meta()
