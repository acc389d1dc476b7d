"""Public package surface for sizetree.

Exports ``main`` for programmatic CLI invocation.
Scanning lives in ``sizetree.file_tree_model`` and rendering in ``sizetree.render``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
