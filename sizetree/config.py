"""Read-only defaults from the user config file and environment.

Precedence (lowest to highest): built-in defaults, JSON config file,
``SIZETREE_*`` environment variables. CLI flags are applied on top by the
caller. All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

from platformdirs import user_config_dir

from .size_units import DEFAULT_SIZE_UNIT, SizeUnit, parse_size_unit

logger = logging.getLogger(__name__)

APP_NAME = "sizetree"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

ENV_UNIT = "SIZETREE_UNIT"
ENV_HIDE_SIZE = "SIZETREE_HIDE_SIZE"
ENV_MAX_DEPTH = "SIZETREE_MAX_DEPTH"

_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class TreeDefaults:
    """Default render settings before CLI flags are applied."""

    unit: SizeUnit = DEFAULT_SIZE_UNIT
    hide_size: bool = False
    max_depth: int = 0


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def _coerce_max_depth(value: object) -> int | None:
    """Accept non-negative ints only; booleans are rejected."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value >= 0 else None


def parse_bool(text: str) -> bool:
    """Parse ``1/true/yes/on`` and ``0/false/no/off`` (case-insensitive)."""
    word = text.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ValueError(f"not a boolean: {text!r}")


def parse_max_depth(text: str) -> int:
    """Parse a non-negative depth; ``0`` means unlimited."""
    try:
        value = int(text.strip())
    except ValueError as exc:
        raise ValueError(f"invalid integer value: {text!r}") from exc
    if value < 0:
        raise ValueError("value must be >= 0")
    return value


def defaults_from_config(data: Mapping[str, object], base: TreeDefaults | None = None) -> TreeDefaults:
    """Overlay valid config-file keys on ``base``; invalid values are ignored."""
    defaults = TreeDefaults() if base is None else base

    raw_unit = data.get("unit")
    if isinstance(raw_unit, str):
        try:
            defaults = replace(defaults, unit=parse_size_unit(raw_unit))
        except ValueError:
            logger.warning("ignoring config unit %r", raw_unit)

    raw_hide_size = data.get("hide_size")
    if isinstance(raw_hide_size, bool):
        defaults = replace(defaults, hide_size=raw_hide_size)

    max_depth = _coerce_max_depth(data.get("max_depth"))
    if max_depth is not None:
        defaults = replace(defaults, max_depth=max_depth)
    return defaults


def defaults_from_environ(environ: Mapping[str, str], base: TreeDefaults | None = None) -> TreeDefaults:
    """Overlay ``SIZETREE_*`` variables on ``base``; invalid values warn and are ignored."""
    defaults = TreeDefaults() if base is None else base

    raw_unit = environ.get(ENV_UNIT)
    if raw_unit:
        try:
            defaults = replace(defaults, unit=parse_size_unit(raw_unit))
        except ValueError as exc:
            logger.warning("ignoring %s: %s", ENV_UNIT, exc)

    raw_hide_size = environ.get(ENV_HIDE_SIZE)
    if raw_hide_size:
        try:
            defaults = replace(defaults, hide_size=parse_bool(raw_hide_size))
        except ValueError as exc:
            logger.warning("ignoring %s: %s", ENV_HIDE_SIZE, exc)

    raw_max_depth = environ.get(ENV_MAX_DEPTH)
    if raw_max_depth:
        try:
            defaults = replace(defaults, max_depth=parse_max_depth(raw_max_depth))
        except ValueError as exc:
            logger.warning("ignoring %s: %s", ENV_MAX_DEPTH, exc)
    return defaults


def load_defaults(environ: Mapping[str, str] | None = None) -> TreeDefaults:
    """Return built-in defaults overlaid with the config file, then the environment."""
    if environ is None:
        environ = os.environ
    defaults = defaults_from_config(load_config())
    return defaults_from_environ(environ, base=defaults)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "ENV_UNIT",
    "ENV_HIDE_SIZE",
    "ENV_MAX_DEPTH",
    "TreeDefaults",
    "load_config",
    "parse_bool",
    "parse_max_depth",
    "defaults_from_config",
    "defaults_from_environ",
    "load_defaults",
]
