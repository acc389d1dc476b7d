"""Decimal size units used for the ``(123KB)`` suffix on rendered rows."""

from __future__ import annotations

from enum import Enum


class SizeUnit(Enum):
    """Display unit; each value is ``(divisor, abbreviation)``."""

    BYTE = (1, "B")
    KILO = (1_000, "KB")
    MEGA = (1_000_000, "MB")
    GIGA = (1_000_000_000, "GB")
    TERA = (1_000_000_000_000, "TB")

    @property
    def divisor(self) -> int:
        return self.value[0]

    @property
    def abbreviation(self) -> str:
        return self.value[1]

    @property
    def cli_name(self) -> str:
        return self.name.lower()


DEFAULT_SIZE_UNIT = SizeUnit.KILO

_UNIT_ALIASES: dict[str, SizeUnit] = {}
for _unit in SizeUnit:
    _UNIT_ALIASES[_unit.cli_name] = _unit
    _UNIT_ALIASES[_unit.abbreviation.lower()] = _unit
del _unit


def unit_names() -> list[str]:
    """Return the lowercase unit names in ascending order of magnitude."""
    return [unit.cli_name for unit in SizeUnit]


def parse_size_unit(text: str) -> SizeUnit:
    """Parse ``kilo``/``KB``-style text into a :class:`SizeUnit`.

    Raises ``ValueError`` for unknown names.
    """
    unit = _UNIT_ALIASES.get(text.strip().lower())
    if unit is None:
        raise ValueError(f"unknown size unit: {text!r} (expected one of {', '.join(unit_names())})")
    return unit


def format_size(size: int, unit: SizeUnit) -> str:
    """Format ``size`` bytes with truncating integer division, e.g. ``2500KB``."""
    return f"{size // unit.divisor}{unit.abbreviation}"


__all__ = [
    "SizeUnit",
    "DEFAULT_SIZE_UNIT",
    "unit_names",
    "parse_size_unit",
    "format_size",
]
