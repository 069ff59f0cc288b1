#!/usr/bin/env python3
"""
articles.py
-----------
Filesystem store for block-editor articles.

Each article is two files in one directory:

    <slug>.editorjs     Editor.js document (pretty-printed JSON)
    <slug>.meta.json    Metadata sidecar (optional)

The store writes files out-of-band from any build: edits become visible
to readers on the next build pass. Running the store and a build against
the same directory at the same time is not supported; writes replace
files atomically so a concurrent reader sees either the old or the new
file, never a partial one.

Usage:
    store = ArticleStore(ARTICLES_DIR)
    store.save_article("hello", {"blocks": [...]}, {"title": "Hello"})
    store.get_article("hello")   # {'slug': 'hello', 'content': {...}, 'meta': {...}}
    store.list_articles()        # [{'slug': 'hello', 'title': 'Hello'}]
    store.delete_article("hello")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

# --- Local imports ---
from contentlab.core.exceptions import (
    ArticleNotFoundError,
    InvalidSlugError,
    MissingSlugError,
    ParseError,
    StoreError,
)
from contentlab.core.logging_manager import ContentLogger, safe_logger
from contentlab.loaders import EDITORJS_EXTENSION
from contentlab.loaders.sidecar import ContentResource
from contentlab.utils.fs import atomic_write_text


class ArticleStore:
    """
    CRUD over the two-files-per-article convention.

    Attributes:
        articles_dir: Directory holding the article files
        logger: Optional logger for operation tracking
    """

    def __init__(self, articles_dir: Path, logger: Optional[ContentLogger] = None):
        self.articles_dir = Path(articles_dir)
        self.logger = logger

    # ---- Helpers ----
    def _resource(self, slug: Optional[str]) -> ContentResource:
        """
        Map a slug to its files.

        Raises:
            MissingSlugError: If the slug is empty
            InvalidSlugError: If the slug would leave the store directory
        """
        if not slug:
            raise MissingSlugError("Slug is required")
        if "/" in slug or "\\" in slug or slug in (".", "..") or "\x00" in slug:
            raise InvalidSlugError(f"Invalid slug: {slug!r}")
        return ContentResource.for_slug(self.articles_dir, slug, EDITORJS_EXTENSION)

    def _read_meta(self, resource: ContentResource) -> Dict[str, Any]:
        try:
            return resource.read_meta()
        except (ParseError, OSError) as e:
            raise StoreError(f"Cannot read metadata for '{resource.slug}': {e}") from e

    # ---- Operations ----
    def list_articles(self) -> List[Dict[str, str]]:
        """
        List every article in the directory.

        Returns:
            ``[{"slug": ..., "title": ...}]`` sorted by slug; the title falls
            back to the slug when the sidecar has none
        """
        if not self.articles_dir.is_dir():
            return []

        articles = []
        for path in self.articles_dir.glob(f"*{EDITORJS_EXTENSION}"):
            resource = ContentResource.for_path(path)
            meta = self._read_meta(resource)
            title = meta.get("title") or resource.slug
            articles.append({"slug": resource.slug, "title": str(title)})
        return sorted(articles, key=lambda article: article["slug"])

    def get_article(self, slug: Optional[str]) -> Dict[str, Any]:
        """
        Read one article.

        Returns:
            ``{"slug", "content", "meta"}``; meta is ``{}`` without a sidecar

        Raises:
            ArticleNotFoundError: If the content file does not exist
            StoreError: If a stored file is unreadable or malformed
        """
        resource = self._resource(slug)
        if not resource.has_content():
            raise ArticleNotFoundError(f"Article not found: {slug}")

        try:
            content = json.loads(resource.content_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise StoreError(f"Cannot read article '{slug}': {e}") from e

        return {"slug": slug, "content": content, "meta": self._read_meta(resource)}

    def save_article(
        self,
        slug: Optional[str],
        content: Any,
        meta: Optional[Dict[str, Any]] = None,
    ) -> ContentResource:
        """
        Write an article's content and, when given, its metadata.

        Raises:
            StoreError: If a file cannot be written
        """
        resource = self._resource(slug)
        try:
            # Both documents are serialized before either file is replaced
            content_text = json.dumps(content, indent=2)
            meta_text = json.dumps(meta, indent=2) if meta is not None else None

            atomic_write_text(resource.content_path, content_text)
            if meta_text is not None:
                atomic_write_text(resource.meta_path, meta_text)
        except (OSError, TypeError, ValueError) as e:
            safe_logger(self.logger).log_error(e, {"operation": "save", "slug": slug})
            raise StoreError(f"Failed to save article '{slug}': {e}") from e

        safe_logger(self.logger).log_operation(
            "article_saved", {"slug": slug, "meta": meta is not None}
        )
        return resource

    def delete_article(self, slug: Optional[str]) -> bool:
        """
        Remove an article's files. Deleting a missing article is a no-op.

        Returns:
            True if any file was removed

        Raises:
            StoreError: If an existing file cannot be removed
        """
        resource = self._resource(slug)
        removed = False
        try:
            for path in (resource.content_path, resource.meta_path):
                if path.exists():
                    path.unlink()
                    removed = True
        except OSError as e:
            raise StoreError(f"Failed to delete article '{slug}': {e}") from e

        safe_logger(self.logger).log_operation(
            "article_deleted", {"slug": slug, "removed": removed}
        )
        return removed
