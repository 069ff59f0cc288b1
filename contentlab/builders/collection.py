#!/usr/bin/env python3
"""
collection.py
-------------------
Builds validated content collections from a content tree.

For every collection definition the builder:
1. Enumerates files under the root matching the collection's glob,
   sorted by relative path
2. Resolves exactly one loader per file from the registry
3. Loads the file, merges its ``.meta.json`` sidecar when the loader
   supports one, derives date/slug from dated filenames and the path
   field when the collection asks for them
4. Validates and transforms the record against the collection schema
5. Assembles an ordered list, or a single record for single-file
   collections

Any failure aborts the whole build. The raised error names the collection
and the file; there is no best-effort mode, so a broken content file can
never silently disappear from the output.

Usage:
    from contentlab.builders.collection import build
    from contentlab.configs.collections import DEFAULT_COLLECTIONS

    result = build(Path("content"), DEFAULT_COLLECTIONS)
    result["posts"]     # [{...}, {...}]
    result["site"]      # {...}
"""
from __future__ import annotations

# --- Standard library imports ---
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

# --- Local imports ---
from contentlab.builders.base import BaseBuilder, BuilderStats
from contentlab.core.exceptions import BuildError, ConfigError, ContentError, ValidationError
from contentlab.core.logging_manager import ContentLogger
from contentlab.loaders import default_registry
from contentlab.loaders.registry import LoaderRegistry
from contentlab.loaders.sidecar import resolve_meta
from contentlab.utils.fs import (
    atomic_write_text,
    extract_date_slug,
    find_content_files,
    relative_stem,
)
from contentlab.validators.schema import Schema, SchemaIssue, validate

Record = Dict[str, Any]
CollectionResult = Union[Record, List[Record]]


@dataclass(frozen=True)
class CollectionDef:
    """
    Definition of one content collection.

    Attributes:
        name: Collection name (key in the build result)
        pattern: Glob relative to the content root
        schema: Record schema and transform
        single: Exactly one file, yielding one record instead of a list
        required: Fail the build if a multi-file collection matches nothing
        filename_dates: Derive 'date' and 'slug' from YYYY-MM-DD-slug names
        path_field: Field filled with the root-relative path sans extension
    """

    name: str
    pattern: str
    schema: Schema
    single: bool = False
    required: bool = False
    filename_dates: bool = False
    path_field: Optional[str] = None


class CollectionStats(BuilderStats):
    """
    Statistics for one build pass.

    Attributes:
        files_loaded: Files loaded across all collections
        records: Record count per collection name
    """

    def __init__(self) -> None:
        super().__init__()
        self.files_loaded: int = 0
        self.records: Dict[str, int] = {}

    def summary(self) -> str:
        parts = [f"{name}: {count}" for name, count in self.records.items()]
        detail = f" ({', '.join(parts)})" if parts else ""
        return (
            f"{len(self.records)} collections{detail}, "
            f"{self.files_loaded} files loaded, "
            f"{self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "files_loaded": self.files_loaded,
            "records": dict(self.records),
            "duration": self.duration(),
        }


class CollectionBuilder(BaseBuilder):
    """
    Builds every configured collection from one content root.

    Attributes:
        root_dir: Content tree root
        collections: Collection definitions, built in order
        registry: Loader registry used to dispatch files
        stats: Statistics of the last build
    """

    def __init__(
        self,
        root_dir: Path,
        collections: Sequence[CollectionDef],
        registry: Optional[LoaderRegistry] = None,
        logger: Optional[ContentLogger] = None,
    ) -> None:
        super().__init__(logger)
        self.root_dir = Path(root_dir)
        self.collections = list(collections)
        self.registry = registry if registry is not None else default_registry()
        self.stats = CollectionStats()

    def _check_definitions(self) -> None:
        if not self.root_dir.is_dir():
            raise ConfigError(f"Content root not found: {self.root_dir}")

        seen = set()
        for definition in self.collections:
            if definition.name in seen:
                raise ConfigError(
                    f"Duplicate collection name '{definition.name}'",
                    collection=definition.name,
                )
            seen.add(definition.name)

    def build(self) -> Dict[str, CollectionResult]:
        """
        Build all collections.

        Returns:
            Mapping of collection name to a record list (or one record)

        Raises:
            ConfigError: Bad definitions, loader resolution or file counts
            ParseError: Malformed content file
            ValidationError: Record that does not match its schema
            BuildError: Unreadable content file
        """
        self.stats = CollectionStats()
        self._check_definitions()
        self._log_info(
            f"Building {len(self.collections)} collections from {self.root_dir}"
        )

        result: Dict[str, CollectionResult] = {}
        for definition in self.collections:
            try:
                result[definition.name] = self.build_collection(definition)
            except ContentError as e:
                e.with_context(collection=definition.name)
                self._log_error(
                    e, {"collection": definition.name, "file": e.file_path}
                )
                raise

        self._log_operation("build_complete", self.stats.to_dict())
        return result

    def build_collection(self, definition: CollectionDef) -> CollectionResult:
        """
        Build one collection.

        Raises:
            ConfigError: Wrong number of files for the collection
        """
        files = find_content_files(self.root_dir, definition.pattern)
        self._log_debug(
            f"Collection '{definition.name}': {len(files)} files match "
            f"'{definition.pattern}'"
        )

        if definition.single and len(files) != 1:
            raise ConfigError(
                f"Single-file collection matched {len(files)} files "
                f"for pattern '{definition.pattern}'"
                + (f": {', '.join(self._relative(f) for f in files)}" if files else ""),
                collection=definition.name,
            )
        if definition.required and not files:
            raise ConfigError(
                f"Required collection matched no files for pattern "
                f"'{definition.pattern}'",
                collection=definition.name,
            )
        if not files:
            self._log_warning(
                f"Collection '{definition.name}' is empty: nothing matches "
                f"'{definition.pattern}'"
            )

        records: List[Record] = []
        for file_path in files:
            try:
                records.append(self.load_record(definition, file_path))
            except ContentError as e:
                e.with_context(collection=definition.name, file_path=file_path)
                raise
            self.stats.files_loaded += 1

        self._check_unique(definition, files, records)
        self.stats.records[definition.name] = len(records)
        self._log_operation(
            "collection_built", {"collection": definition.name, "records": len(records)}
        )

        return records[0] if definition.single else records

    def load_record(self, definition: CollectionDef, file_path: Path) -> Record:
        """
        Load, enrich and validate a single file.

        Raises:
            ConfigError: No loader or several loaders match the file
            ParseError: The file (or its sidecar) is malformed
            ValidationError: The record does not match the schema
            BuildError: The file cannot be read
        """
        spec = self.registry.resolve(file_path)
        try:
            raw = file_path.read_bytes()
        except OSError as e:
            raise BuildError(f"Cannot read file: {e}", file_path=file_path) from e

        record = spec.load(raw, file_path)

        if isinstance(record, dict):
            if spec.sidecar:
                record.update(resolve_meta(file_path))
            if definition.filename_dates:
                for key, value in extract_date_slug(file_path).items():
                    if value is not None and record.get(key) is None:
                        record[key] = value
            if definition.path_field and record.get(definition.path_field) is None:
                record[definition.path_field] = relative_stem(file_path, self.root_dir)

        return validate(record, definition.schema, file_path=file_path)

    def _check_unique(
        self,
        definition: CollectionDef,
        files: Sequence[Path],
        records: Sequence[Record],
    ) -> None:
        """Fail if a unique field repeats a value within the collection."""
        issues: List[SchemaIssue] = []
        for field_name in definition.schema.unique_fields:
            owners: Dict[Any, Path] = {}
            for file_path, record in zip(files, records):
                value = record.get(field_name)
                if value is None:
                    continue
                key = json.dumps(value, sort_keys=True, default=str)
                if key in owners:
                    issues.append(
                        SchemaIssue(
                            field_name,
                            f"Duplicate value {value!r} in "
                            f"{self._relative(owners[key])} and "
                            f"{self._relative(file_path)}",
                            value,
                        )
                    )
                else:
                    owners[key] = file_path
        if issues:
            raise ValidationError(issues, collection=definition.name)

    def _relative(self, file_path: Path) -> str:
        return file_path.relative_to(self.root_dir).as_posix()


def build(
    root_dir: Path,
    collections: Iterable[CollectionDef],
    registry: Optional[LoaderRegistry] = None,
    logger: Optional[ContentLogger] = None,
) -> Dict[str, CollectionResult]:
    """
    Build collections from ``root_dir``.

    Convenience wrapper around CollectionBuilder; see its ``build()``.
    """
    builder = CollectionBuilder(Path(root_dir), list(collections), registry, logger)
    return builder.build()


def write_collections(
    result: Dict[str, CollectionResult], output_dir: Path
) -> List[Path]:
    """
    Write each collection to ``<output_dir>/<name>.json``.

    Only call with the result of a complete build. Every collection is
    serialized before the first file is touched; each file is then
    replaced atomically.

    Returns:
        Paths written, in collection order

    Raises:
        BuildError: A collection cannot be serialized as UTF-8 JSON
    """
    payloads: Dict[str, str] = {}
    for name, data in result.items():
        try:
            text = json.dumps(data, indent=2, ensure_ascii=False, default=str) + "\n"
            text.encode("utf-8")
        except (TypeError, ValueError) as e:
            raise BuildError(
                f"Collection cannot be written as JSON: {e}", collection=name
            ) from e
        payloads[name] = text

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    written: List[Path] = []
    for name, text in payloads.items():
        target = output_dir / f"{name}.json"
        atomic_write_text(target, text)
        written.append(target)
    return written
