"""Domain datatypes for scanned file trees with aggregate sizes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FileEntry:
    """Leaf entry: a regular file, symlink, or anything else that is not a directory."""

    path: Path
    size: int = 0


@dataclass(frozen=True)
class DirectoryEntry:
    """Directory entry whose ``size`` is the sum of its children's sizes."""

    path: Path
    size: int = 0
    children: tuple["FileTreeEntry", ...] = ()


FileTreeEntry = DirectoryEntry | FileEntry


@dataclass(frozen=True)
class Tree:
    """Completed scan result owning one root directory."""

    root: DirectoryEntry


def iter_entries(entry: FileTreeEntry) -> Iterator[FileTreeEntry]:
    """Yield ``entry`` and every descendant in depth-first pre-order."""
    yield entry
    if isinstance(entry, DirectoryEntry):
        for child in entry.children:
            yield from iter_entries(child)


__all__ = [
    "FileEntry",
    "DirectoryEntry",
    "FileTreeEntry",
    "Tree",
    "iter_entries",
]
