"""
contentlab
==========

Multi-format content collections for static sites.

Loads a content tree made of Markdown (with YAML frontmatter), MDX,
Editor.js block documents, JSON5, HTML with embedded metadata, YAML,
CSV and TOML; validates every record against its collection schema and
assembles named collections. A small filesystem store (with an HTTP API)
manages the Editor.js articles.

Main Components:
    - loaders: One pure loader per format, plus the loader registry
    - validators: Declarative schemas and the generic validator
    - builders: Collection builder, build lifecycle, JSON output
    - configs: Default collection definitions
    - store / api: Article persistence and its HTTP surface
    - core: Exceptions, logging, paths

Primary Interfaces:
    - contentlab.builders.build
    - contentlab.store.ArticleStore
    - contentlab.cli: Command-line entry point

Example Usage:
    >>> from contentlab import build, DEFAULT_COLLECTIONS
    >>> result = build(Path("content"), DEFAULT_COLLECTIONS)
    >>> [post["permalink"] for post in result["posts"]]
    ['/posts/hello-world']
"""

__version__ = "0.1.0"

from contentlab.builders.collection import CollectionDef, build
from contentlab.configs.collections import DEFAULT_COLLECTIONS

__all__ = [
    "CollectionDef",
    "DEFAULT_COLLECTIONS",
    "build",
]
