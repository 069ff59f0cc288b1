#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the contentlab project.

This module defines the exceptions raised while loading, validating and
assembling content collections, and by the article store.

Exception Hierarchy:
    Exception (built-in)
    ├── ContentError - Base for all build-time errors
    │   ├── ParseError - Malformed input for a given file format
    │   ├── ValidationError - Record does not match its collection schema
    │   ├── ConfigError - Bad loader registration or collection definition
    │   └── BuildError - Unreadable files, build lifecycle misuse
    └── StoreError - Base for article store failures
        ├── MissingSlugError - Request without a slug
        ├── InvalidSlugError - Slug that would escape the store directory
        └── ArticleNotFoundError - Content file absent

Usage:
    from contentlab.core.exceptions import ParseError, ValidationError

    try:
        result = build(root_dir, DEFAULT_COLLECTIONS)
    except ValidationError as e:
        logger.error(f"Invalid record: {e}")
    except ContentError as e:
        logger.error(f"Build failed: {e}")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, Union

if TYPE_CHECKING:
    from contentlab.validators.schema import SchemaIssue


class ContentError(Exception):
    """
    Base exception for build-time content errors.

    Every build error can carry the collection and file it was raised for.
    The collection builder fills in whatever context the raising code did
    not know about, so a failure always names where it happened.

    Attributes:
        message: Error description without context
        collection: Name of the collection being built, if known
        file_path: File being processed, if known

    Examples:
        >>> raise ContentError("Something went wrong", file_path="posts/a.md")
    """

    def __init__(
        self,
        message: str,
        file_path: Optional[Union[str, Path]] = None,
        collection: Optional[str] = None,
    ) -> None:
        self.message = message
        self.file_path = Path(file_path) if file_path is not None else None
        self.collection = collection
        super().__init__(message)

    def with_context(
        self,
        collection: Optional[str] = None,
        file_path: Optional[Union[str, Path]] = None,
    ) -> ContentError:
        """
        Attach missing collection/file context and return self.

        Context already present on the error is never overwritten.
        """
        if self.collection is None and collection is not None:
            self.collection = collection
        if self.file_path is None and file_path is not None:
            self.file_path = Path(file_path)
        return self

    def _location(self) -> str:
        parts = []
        if self.collection:
            parts.append(f"collection '{self.collection}'")
        if self.file_path is not None:
            parts.append(str(self.file_path))
        return ", ".join(parts)

    def __str__(self) -> str:
        location = self._location()
        if location:
            return f"[{location}] {self.message}"
        return self.message


class ParseError(ContentError):
    """
    Exception for malformed input files.

    Raised by format loaders when raw content does not conform to the
    grammar of its format:
    - Unparsable YAML frontmatter or YAML documents
    - Invalid JSON / JSON5 / TOML
    - CSV rows wider than their header
    - Unknown Editor.js block types
    - Invalid UTF-8

    Attributes:
        line: 1-based line number reported by the underlying parser, if any

    Examples:
        >>> raise ParseError("Invalid YAML frontmatter", file_path="posts/a.md", line=3)
    """

    def __init__(
        self,
        message: str,
        file_path: Optional[Union[str, Path]] = None,
        line: Optional[int] = None,
        collection: Optional[str] = None,
    ) -> None:
        self.line = line
        super().__init__(message, file_path=file_path, collection=collection)

    def _location(self) -> str:
        location = super()._location()
        if self.line is not None:
            return f"{location}:{self.line}" if location else f"line {self.line}"
        return location


class ValidationError(ContentError):
    """
    Exception for schema validation failures.

    Lists every violated field, not only the first one:
    - Missing required fields
    - Type mismatches
    - Strings over their maximum length
    - Transforms that drop required fields
    - Duplicate values for unique fields

    Attributes:
        issues: SchemaIssue objects, one per violation

    Examples:
        >>> raise ValidationError([SchemaIssue("title", "Required field missing")])
    """

    def __init__(
        self,
        issues: List["SchemaIssue"],
        file_path: Optional[Union[str, Path]] = None,
        collection: Optional[str] = None,
    ) -> None:
        self.issues = list(issues)
        details = "; ".join(f"{i.field_path}: {i.message}" for i in self.issues)
        super().__init__(
            f"{len(self.issues)} schema violation(s): {details}",
            file_path=file_path,
            collection=collection,
        )

    @property
    def fields(self) -> List[str]:
        """Field paths of every violation, in detection order."""
        return [issue.field_path for issue in self.issues]


class ConfigError(ContentError):
    """
    Exception for configuration errors.

    Raised when:
    - Two loaders are registered for the same pattern
    - No loader, or more than one, matches a file
    - A single-file collection matches zero or several files
    - A required collection matches nothing
    - Collection names repeat or the content root is missing

    Examples:
        >>> raise ConfigError("No loader registered for 'notes.txt'")
    """

    pass


class BuildError(ContentError):
    """
    Exception for build failures outside any file format.

    Raised when:
    - A content file cannot be read from disk
    - A build is started (or reset) while another is in progress

    Examples:
        >>> raise BuildError("A build is already in progress")
    """

    pass


class StoreError(Exception):
    """
    Base exception for article store failures.

    Raised when reading or writing article files fails (permissions,
    disk errors, malformed stored JSON).

    Examples:
        >>> raise StoreError("Failed to write article 'hello': disk full")
    """

    pass


class MissingSlugError(StoreError):
    """Exception for store requests that carry no slug."""

    pass


class InvalidSlugError(StoreError):
    """
    Exception for slugs that cannot name a file inside the store.

    Examples:
        >>> raise InvalidSlugError("Invalid slug: '../etc/passwd'")
    """

    pass


class ArticleNotFoundError(StoreError):
    """Exception for reads of an article whose content file is absent."""

    pass
