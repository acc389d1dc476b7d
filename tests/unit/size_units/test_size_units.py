"""Tests for decimal size unit parsing and formatting."""

from __future__ import annotations

import unittest

from sizetree.size_units import DEFAULT_SIZE_UNIT, SizeUnit, format_size, parse_size_unit, unit_names


class SizeUnitTests(unittest.TestCase):
    def test_divisors_are_decimal_powers(self) -> None:
        self.assertEqual([unit.divisor for unit in SizeUnit], [1, 10**3, 10**6, 10**9, 10**12])
        self.assertEqual([unit.abbreviation for unit in SizeUnit], ["B", "KB", "MB", "GB", "TB"])

    def test_default_unit_is_kilo(self) -> None:
        self.assertIs(DEFAULT_SIZE_UNIT, SizeUnit.KILO)

    def test_format_size_truncates_instead_of_rounding(self) -> None:
        self.assertEqual(format_size(1999, SizeUnit.KILO), "1KB")
        self.assertEqual(format_size(999, SizeUnit.KILO), "0KB")
        self.assertEqual(format_size(0, SizeUnit.TERA), "0TB")

    def test_parse_accepts_names_and_abbreviations(self) -> None:
        self.assertIs(parse_size_unit("mega"), SizeUnit.MEGA)
        self.assertIs(parse_size_unit("GIGA"), SizeUnit.GIGA)
        self.assertIs(parse_size_unit(" kb "), SizeUnit.KILO)
        self.assertIs(parse_size_unit("B"), SizeUnit.BYTE)
        self.assertIs(parse_size_unit("tb"), SizeUnit.TERA)

    def test_parse_rejects_unknown_units(self) -> None:
        with self.assertRaises(ValueError):
            parse_size_unit("kibi")

    def test_unit_names_are_cli_spellings(self) -> None:
        self.assertEqual(unit_names(), ["byte", "kilo", "mega", "giga", "tera"])


if __name__ == "__main__":
    unittest.main()
