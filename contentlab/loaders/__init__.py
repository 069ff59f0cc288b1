"""
loaders
-------
Format loaders and the registry that dispatches files to them.

Every loader is a pure function ``load(raw: bytes, file_path: Path)``
returning a pre-validation record. ``default_registry()`` wires up the
formats the default collections use.

Usage:
    from contentlab.loaders import default_registry

    registry = default_registry()
    spec = registry.resolve(path)
    record = spec.load(path.read_bytes(), path)
"""

from .data import load_csv, load_json5, load_toml, load_yaml
from .editorjs import load_editorjs
from .html import load_html
from .markdown import load_markdown
from .registry import LoaderRegistry, LoaderSpec
from .sidecar import ContentResource, resolve_meta

EDITORJS_EXTENSION = ".editorjs"


def default_registry() -> LoaderRegistry:
    """Registry with one loader per supported extension."""
    return LoaderRegistry(
        [
            LoaderSpec("markdown", "*.md", load_markdown),
            LoaderSpec("mdx", "*.mdx", load_markdown),
            LoaderSpec("editorjs", f"*{EDITORJS_EXTENSION}", load_editorjs, sidecar=True),
            LoaderSpec("json5", "*.json5", load_json5),
            LoaderSpec("html", "*.html", load_html),
            LoaderSpec("yaml", "*.yaml", load_yaml),
            LoaderSpec("yml", "*.yml", load_yaml),
            LoaderSpec("csv", "*.csv", load_csv),
            LoaderSpec("toml", "*.toml", load_toml),
        ]
    )


__all__ = [
    "EDITORJS_EXTENSION",
    "ContentResource",
    "LoaderRegistry",
    "LoaderSpec",
    "default_registry",
    "load_csv",
    "load_editorjs",
    "load_html",
    "load_json5",
    "load_markdown",
    "load_toml",
    "load_yaml",
    "resolve_meta",
]
