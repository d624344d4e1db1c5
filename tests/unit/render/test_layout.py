"""Tests for terminal-width grid packing."""

from __future__ import annotations

import os
import unittest
from unittest import mock

from iconls.render import grid_geometry, pack, probe_terminal_width, usable_width
from iconls.theme import DEFAULT_THEME


class GridGeometryTests(unittest.TestCase):
    def test_width_80_with_ten_character_names_gives_six_columns(self) -> None:
        geometry = grid_geometry(["abcdefghij", "short"], 80)

        self.assertEqual(geometry.column_width, 12)
        self.assertEqual(geometry.columns, 6)

    def test_narrow_width_falls_back_to_default(self) -> None:
        geometry = grid_geometry(["abcdefghij"], 15)

        self.assertEqual(geometry.width, 80)
        self.assertEqual(geometry.columns, 6)

    def test_minimum_usable_width_is_kept(self) -> None:
        self.assertEqual(usable_width(20), 20)
        self.assertEqual(usable_width(19), 80)
        self.assertEqual(usable_width(None, fallback=100), 100)

    def test_long_names_still_get_one_column(self) -> None:
        geometry = grid_geometry(["x" * 200], 80)

        self.assertEqual(geometry.columns, 1)

    def test_ansi_escapes_do_not_count_toward_width(self) -> None:
        painted = DEFAULT_THEME.paint("*blue*", "abcdefghij")

        geometry = grid_geometry([painted], 80)

        self.assertEqual(geometry.column_width, 12)


class PackTests(unittest.TestCase):
    def test_rows_break_after_every_nth_name_and_after_last(self) -> None:
        names = ["aa", "bb", "cc", "dd", "ee"]

        rendered = pack(names, terminal_width=20)

        # column width 4, 20 // 4 = 5 columns
        self.assertEqual(rendered, "aa  bb  cc  dd  ee  \n")

    def test_wraps_into_multiple_rows(self) -> None:
        names = ["a" * 8, "b", "c", "d"]

        rendered = pack(names, terminal_width=20)

        # column width 10, two columns per row
        self.assertEqual(rendered, "aaaaaaaa  b         \nc         d         \n")

    def test_final_newline_is_not_doubled_on_full_row(self) -> None:
        rendered = pack(["abcdefgh", "ijklmnop"], terminal_width=20)

        self.assertEqual(rendered, "abcdefgh  ijklmnop  \n")

    def test_single_column_for_overlong_names(self) -> None:
        names = ["x" * 90, "y"]

        rendered = pack(names, terminal_width=80)

        lines = rendered.split("\n")
        self.assertEqual(len(lines), 3)
        self.assertEqual(lines[0], "x" * 90 + "  ")
        self.assertEqual(lines[1], "y" + " " * 91)
        self.assertEqual(lines[2], "")

    def test_empty_input_renders_nothing(self) -> None:
        self.assertEqual(pack([], terminal_width=80), "")

    def test_colored_names_are_padded_by_visible_width(self) -> None:
        painted = DEFAULT_THEME.paint("*blue*", "dir")
        rendered = pack([painted, "file"], terminal_width=80)

        self.assertEqual(rendered, f"{painted}   file  \n")

    def test_probes_terminal_when_width_omitted(self) -> None:
        with mock.patch("iconls.render.layout.shutil.get_terminal_size", return_value=os.terminal_size((24, 40))):
            rendered = pack(["abcdefghij", "b", "c"])

        # 24 // 12 = 2 columns
        self.assertEqual(rendered.count("\n"), 2)


class ProbeTerminalWidthTests(unittest.TestCase):
    def test_uses_reported_columns(self) -> None:
        with mock.patch("iconls.render.layout.shutil.get_terminal_size", return_value=os.terminal_size((132, 50))):
            self.assertEqual(probe_terminal_width(), 132)

    def test_unavailable_terminal_uses_fallback(self) -> None:
        with mock.patch("iconls.render.layout.shutil.get_terminal_size", return_value=os.terminal_size((0, 0))):
            self.assertEqual(probe_terminal_width(), 80)
            self.assertEqual(probe_terminal_width(fallback=100), 100)

    def test_tiny_terminal_uses_fallback(self) -> None:
        with mock.patch("iconls.render.layout.shutil.get_terminal_size", return_value=os.terminal_size((15, 10))):
            self.assertEqual(probe_terminal_width(), 80)


if __name__ == "__main__":
    unittest.main()
