"""
store
-----
Filesystem persistence for block-editor articles.
"""

from .articles import ArticleStore

__all__ = ["ArticleStore"]
