"""Render a scanned :class:`Tree` as box-drawing text, one row per entry.

Rows are emitted depth-first in stored child order. Each child's connector and
the prefix handed down to its subtree depend only on whether the child and its
ancestors were the last among their siblings.
"""

from __future__ import annotations

import logging
import re
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from .file_tree_model import DirectoryEntry, FileTreeEntry, Tree
from .size_units import DEFAULT_SIZE_UNIT, SizeUnit, format_size

logger = logging.getLogger(__name__)

LAST_ITEM = "└─"
LAST_PREFIX = "  "
NOT_LAST_ITEM = "├─"
NOT_LAST_PREFIX = "│ "

_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")


@dataclass(frozen=True)
class RenderOptions:
    """Row formatting options.

    ``max_depth`` of ``0`` means unlimited; otherwise entries deeper than
    ``max_depth`` (root is depth 0) are not printed at all.
    """

    hide_size: bool = False
    unit: SizeUnit = DEFAULT_SIZE_UNIT
    max_depth: int = 0

    def allows_depth(self, depth: int) -> bool:
        return self.max_depth == 0 or depth <= self.max_depth


def _escape_control_characters(name: str) -> str:
    """Escape terminal control characters so names cannot drive the terminal."""
    if _CONTROL_RE.search(name) is None:
        return name
    return _CONTROL_RE.sub(lambda match: f"\\x{ord(match.group()):02x}", name)


def display_name(path: Path) -> str:
    """Return the printable final component of ``path``.

    Names holding undecodable bytes are shown with backslash escapes and a
    warning is logged instead of failing the render.
    """
    name = path.name or str(path)
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        try:
            raw = name.encode("utf-8", errors="surrogateescape")
        except UnicodeEncodeError:
            # Lone surrogates outside U+DC80..U+DCFF carry no original byte.
            raw = name.encode("utf-8", errors="backslashreplace")
        replacement = raw.decode("utf-8", errors="backslashreplace")
        logger.warning("file name is not valid UTF-8, showing %s", _escape_control_characters(replacement))
        name = replacement
    return _escape_control_characters(name)


def format_tree_row(prefix: str, entry: FileTreeEntry, options: RenderOptions) -> str:
    """Format one row: prefix, display name, then the optional size suffix."""
    row = f"{prefix}{display_name(entry.path)}"
    if options.hide_size:
        return row
    return f"{row} ({format_size(entry.size, options.unit)})"


def _iter_children_rows(
    directory: DirectoryEntry,
    children_prefix: str,
    depth: int,
    options: RenderOptions,
) -> Iterator[str]:
    if not options.allows_depth(depth):
        return
    last_idx = len(directory.children) - 1
    for idx, child in enumerate(directory.children):
        last = idx == last_idx
        connector = LAST_ITEM if last else NOT_LAST_ITEM
        yield format_tree_row(children_prefix + connector, child, options)
        if isinstance(child, DirectoryEntry):
            next_prefix = children_prefix + (LAST_PREFIX if last else NOT_LAST_PREFIX)
            yield from _iter_children_rows(child, next_prefix, depth + 1, options)


def iter_tree_lines(tree: Tree, options: RenderOptions | None = None) -> Iterator[str]:
    """Yield rendered rows (without newlines) in depth-first pre-order."""
    if options is None:
        options = RenderOptions()
    yield format_tree_row("", tree.root, options)
    yield from _iter_children_rows(tree.root, "", 1, options)


def render_tree(tree: Tree, options: RenderOptions | None = None) -> str:
    """Return the whole rendering as text, each row terminated by a newline."""
    return "".join(f"{line}\n" for line in iter_tree_lines(tree, options))


def print_tree(tree: Tree, options: RenderOptions | None = None, stream: TextIO | None = None) -> None:
    """Write the rendering to ``stream`` (standard output by default)."""
    out = sys.stdout if stream is None else stream
    for line in iter_tree_lines(tree, options):
        out.write(f"{line}\n")


__all__ = [
    "LAST_ITEM",
    "LAST_PREFIX",
    "NOT_LAST_ITEM",
    "NOT_LAST_PREFIX",
    "RenderOptions",
    "display_name",
    "format_tree_row",
    "iter_tree_lines",
    "render_tree",
    "print_tree",
]
