"""Tests for case-insensitive deterministic entry ordering."""

from __future__ import annotations

import random
import unittest
from pathlib import Path

from iconls.listing import DirectoryEntry, sort_entries


def _entry(name: str, is_directory: bool = False) -> DirectoryEntry:
    return DirectoryEntry(name=name, is_directory=is_directory, path=Path(name))


class SortEntriesTests(unittest.TestCase):
    def test_orders_case_insensitively(self) -> None:
        listing = (_entry("b.TXT"), _entry("A.md"), _entry("c"), _entry("D", is_directory=True))

        ordered = sort_entries(listing)

        self.assertEqual([entry.name for entry in ordered], ["A.md", "b.TXT", "c", "D"])

    def test_case_only_differences_break_ties_by_exact_name(self) -> None:
        listing = (_entry("readme"), _entry("README"), _entry("ReadMe"))

        ordered = sort_entries(listing)

        self.assertEqual([entry.name for entry in ordered], ["README", "ReadMe", "readme"])

    def test_sorting_is_idempotent_and_independent_of_input_order(self) -> None:
        names = ["zeta", "Alpha", "alpha", "beta", "Beta.py", "_private", "10", "9"]
        shuffled = [_entry(name) for name in names]
        random.Random(7).shuffle(shuffled)

        once = sort_entries(shuffled)
        twice = sort_entries(once)
        from_reversed = sort_entries(reversed(shuffled))

        self.assertEqual(once, twice)
        self.assertEqual(once, from_reversed)
        keys = [entry.name.lower() for entry in once]
        self.assertEqual(keys, sorted(keys))

    def test_returns_new_tuple_without_mutating_input(self) -> None:
        listing = [_entry("b"), _entry("a")]

        ordered = sort_entries(listing)

        self.assertIsInstance(ordered, tuple)
        self.assertEqual([entry.name for entry in listing], ["b", "a"])


if __name__ == "__main__":
    unittest.main()
