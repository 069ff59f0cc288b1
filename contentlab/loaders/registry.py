#!/usr/bin/env python3
"""
registry.py
-----------
Explicit registry mapping filename patterns to format loaders.

Loaders are registered once, at configuration time, against a glob pattern
on the file's base name (``*.md``, ``*.editorjs``). Resolving a file must
find exactly one loader: zero or several matches are configuration errors,
never silently resolved by order.

Usage:
    from contentlab.loaders.registry import LoaderRegistry, LoaderSpec

    registry = LoaderRegistry()
    registry.register(LoaderSpec("yaml", "*.yaml", load_yaml))
    spec = registry.resolve(Path("data/team.yaml"))
    record = spec.load(raw_bytes, path)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List

# --- Local imports ---
from contentlab.core.exceptions import ConfigError

LoadFunction = Callable[[bytes, Path], Any]


@dataclass(frozen=True)
class LoaderSpec:
    """
    One registered loader.

    Attributes:
        name: Human-readable loader name
        pattern: Glob matched against the file's base name
        load: Pure function (raw bytes, file path) -> record
        sidecar: Whether records of this format merge a ``.meta.json`` sidecar
    """

    name: str
    pattern: str
    load: LoadFunction
    sidecar: bool = False

    def matches(self, file_path: Path) -> bool:
        return fnmatchcase(file_path.name, self.pattern)


class LoaderRegistry:
    """Pattern → loader table with exhaustive, unambiguous resolution."""

    def __init__(self, specs: Iterable[LoaderSpec] = ()) -> None:
        self._specs: Dict[str, LoaderSpec] = {}
        for spec in specs:
            self.register(spec)

    def register(self, spec: LoaderSpec) -> None:
        """
        Register a loader.

        Raises:
            ConfigError: If the pattern is already claimed
        """
        existing = self._specs.get(spec.pattern)
        if existing is not None:
            raise ConfigError(
                f"Pattern '{spec.pattern}' already claimed by loader "
                f"'{existing.name}', cannot register '{spec.name}'"
            )
        self._specs[spec.pattern] = spec

    def resolve(self, file_path: Path) -> LoaderSpec:
        """
        Return the single loader whose pattern matches ``file_path``.

        Raises:
            ConfigError: If no loader or more than one loader matches
        """
        matches = [spec for spec in self._specs.values() if spec.matches(file_path)]
        if not matches:
            raise ConfigError(
                f"No loader registered for '{file_path.name}'", file_path=file_path
            )
        if len(matches) > 1:
            names = ", ".join(f"{m.name} ({m.pattern})" for m in matches)
            raise ConfigError(
                f"Ambiguous loaders for '{file_path.name}': {names}",
                file_path=file_path,
            )
        return matches[0]

    @property
    def patterns(self) -> List[str]:
        return list(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def __contains__(self, pattern: object) -> bool:
        return pattern in self._specs
