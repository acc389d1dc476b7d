"""Command-line front door for sizetree.

Parses CLI options on top of config/environment defaults, resolves the target
path, scans it, and prints the size tree to standard output.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from .config import load_defaults, parse_max_depth
from .file_tree_model import explore
from .render import RenderOptions, print_tree
from .size_units import SizeUnit, parse_size_unit, unit_names

LOG_FORMAT = "sizetree: %(levelname)s: %(message)s"


def _size_unit(value: str) -> SizeUnit:
    """argparse type for size unit names."""
    try:
        return parse_size_unit(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _non_negative_int(value: str) -> int:
    """argparse type for non-negative integer values."""
    try:
        return parse_max_depth(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def configure_logging(verbose: bool) -> None:
    """Send package log records to stderr; DEBUG when ``verbose``."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger = logging.getLogger("sizetree")
    package_logger.handlers[:] = [handler]
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sizetree",
        description="Print a directory tree with recursive sizes.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to scan. Defaults to current directory.")
    size_group = parser.add_mutually_exclusive_group()
    size_group.add_argument(
        "--hide-size",
        dest="hide_size",
        action="store_const",
        const=True,
        default=None,
        help="Do not print sizes.",
    )
    size_group.add_argument(
        "--show-size",
        dest="hide_size",
        action="store_const",
        const=False,
        help="Print sizes even if hidden by config or environment.",
    )
    parser.add_argument(
        "--unit",
        type=_size_unit,
        default=None,
        metavar="|".join(unit_names()),
        help="Decimal unit for sizes (default: kilo).",
    )
    parser.add_argument(
        "--max-depth",
        type=_non_negative_int,
        default=None,
        metavar="N",
        help="Only print entries up to depth N below the root (0: unlimited).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log skipped and unreadable entries to stderr.")
    return parser


def main(argv: Sequence[str] | None = None, default_path: Path | None = None) -> int:
    """Parse CLI arguments, scan the target path, and print its size tree.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. A missing or unreadable path still prints a root row
    with size zero.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    defaults = load_defaults(os.environ)
    options = RenderOptions(
        hide_size=defaults.hide_size if args.hide_size is None else args.hide_size,
        unit=defaults.unit if args.unit is None else args.unit,
        max_depth=defaults.max_depth if args.max_depth is None else args.max_depth,
    )

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path) if args.path is not None else default_path

    reconfigure = getattr(sys.stdout, "reconfigure", None)
    if reconfigure is not None:
        # Box-drawing glyphs on a non-UTF-8 stdout become escapes.
        reconfigure(errors="backslashreplace")

    tree = explore(path)
    try:
        print_tree(tree, options)
        sys.stdout.flush()
    except BrokenPipeError:
        # Reader went away (e.g. `| head`); silence the flush at interpreter exit.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
