"""Module entrypoint for ``python -m sizetree``.

All argument parsing and logging setup happen in ``sizetree.cli``.
"""

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
