"""Domain model for scanned filesystem trees with recursive size aggregates.

This package contains the non-rendering tree primitives:
- file/directory entry datatypes with nested children
- the depth-first scanner that builds a ``Tree`` from a path
"""

from __future__ import annotations

from .types import DirectoryEntry, FileEntry, FileTreeEntry, Tree, iter_entries
from .fs import build_directory_entry, build_entry, explore

__all__ = [
    "DirectoryEntry",
    "FileEntry",
    "FileTreeEntry",
    "Tree",
    "iter_entries",
    "build_entry",
    "build_directory_entry",
    "explore",
]
