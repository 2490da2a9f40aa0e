"""Tests for human-readable byte size labels."""

from __future__ import annotations

import unittest

from mole.sizes import GB, KB, MB, format_size


class FormatSizeTests(unittest.TestCase):
    def test_threshold_boundaries(self) -> None:
        self.assertEqual(format_size(0), "0 B")
        self.assertEqual(format_size(1023), "1023 B")
        self.assertEqual(format_size(1024), "1.00 KB")
        self.assertEqual(format_size(1048576), "1.00 MB")
        self.assertEqual(format_size(1073741824), "1.00 GB")

    def test_values_just_below_next_unit_stay_in_smaller_unit(self) -> None:
        self.assertTrue(format_size(MB - 1).endswith(" KB"))
        self.assertTrue(format_size(GB - 1).endswith(" MB"))

    def test_two_decimal_places(self) -> None:
        self.assertEqual(format_size(1536), "1.50 KB")
        self.assertEqual(format_size(5 * MB + MB // 4), "5.25 MB")
        self.assertEqual(format_size(3 * GB), "3.00 GB")

    def test_gigabytes_do_not_roll_over_into_larger_unit(self) -> None:
        self.assertEqual(format_size(2048 * GB), "2048.00 GB")

    def test_exactly_one_unit_is_used(self) -> None:
        for value in (1, KB + 7, 9 * MB + 3, 4 * GB + 11):
            label = format_size(value)
            units = [unit for unit in ("B", "KB", "MB", "GB") if label.endswith(f" {unit}")]
            self.assertEqual(len(units), 1, label)

    def test_negative_input_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            format_size(-1)


if __name__ == "__main__":
    unittest.main()
