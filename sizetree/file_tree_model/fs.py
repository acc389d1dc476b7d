"""Filesystem scanning and aggregate-size tree construction.

The scan is a single synchronous depth-first pass. Every per-entry failure is
absorbed here: unreadable directories become empty zero-size directories,
entries whose metadata cannot be read become zero-size files, and items the
listing itself fails to produce are skipped.
"""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

from .types import DirectoryEntry, FileEntry, FileTreeEntry, Tree

logger = logging.getLogger(__name__)

Scandir = Callable[[Path], object]


def _iter_listing(directory: Path, listing: Iterable[os.DirEntry]) -> Iterator[os.DirEntry]:
    """Yield listing items, skipping the ones whose retrieval raises ``OSError``."""
    iterator = iter(listing)
    while True:
        try:
            item = next(iterator)
        except StopIteration:
            return
        except OSError as exc:
            logger.debug("skipping unreadable item in %s: %s", directory, exc)
            continue
        yield item


def build_entry(item: os.DirEntry, scandir: Scandir = os.scandir) -> FileTreeEntry:
    """Turn one listing item into a file or (recursively scanned) directory entry.

    Symlinks are never followed; a link is a leaf sized by the link itself.
    """
    path = Path(item.path)
    try:
        info = item.stat(follow_symlinks=False)
    except OSError as exc:
        logger.debug("cannot stat %s: %s", path, exc)
        return FileEntry(path=path, size=0)

    if stat.S_ISDIR(info.st_mode):
        return build_directory_entry(path, scandir=scandir)
    return FileEntry(path=path, size=int(info.st_size))


def build_directory_entry(directory: Path, scandir: Scandir = os.scandir) -> DirectoryEntry:
    """Scan ``directory`` depth-first and return it with its aggregate size.

    A directory that cannot be listed degrades to ``size=0`` with no children.
    """
    children: list[FileTreeEntry] = []
    total = 0
    try:
        with scandir(directory) as listing:
            for item in _iter_listing(directory, listing):
                child = build_entry(item, scandir=scandir)
                total += child.size
                children.append(child)
    except OSError as exc:
        logger.debug("cannot list %s: %s", directory, exc)
        return DirectoryEntry(path=directory, size=0, children=())

    return DirectoryEntry(path=directory, size=total, children=tuple(children))


def explore(path: str | os.PathLike[str], scandir: Scandir = os.scandir) -> Tree:
    """Build a :class:`Tree` rooted at ``path``.

    ``path`` is not validated; a missing or unreadable root yields a tree whose
    root has size zero and no children. ``scandir`` defaults to ``os.scandir``
    and can be replaced by any callable returning a context-managed listing of
    ``os.DirEntry``-like items.
    """
    return Tree(root=build_directory_entry(Path(path), scandir=scandir))


__all__ = [
    "build_entry",
    "build_directory_entry",
    "explore",
]
