"""
builders
--------
Collection building and build lifecycle.

- base: BaseBuilder / BuilderStats
- collection: CollectionDef, CollectionBuilder, build(), write_collections()
- lifecycle: BuildState, BuildLifecycle
"""

from .base import BaseBuilder, BuilderStats
from .collection import (
    CollectionBuilder,
    CollectionDef,
    CollectionStats,
    build,
    write_collections,
)
from .lifecycle import BuildLifecycle, BuildState

__all__ = [
    "BaseBuilder",
    "BuilderStats",
    "BuildLifecycle",
    "BuildState",
    "CollectionBuilder",
    "CollectionDef",
    "CollectionStats",
    "build",
    "write_collections",
]
