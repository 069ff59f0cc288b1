"""
configs
-------
Configuration data for contentlab builds.

- collections: DEFAULT_COLLECTIONS and their schemas
"""

from .collections import DEFAULT_COLLECTIONS

__all__ = ["DEFAULT_COLLECTIONS"]
