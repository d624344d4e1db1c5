"""Tests for listing themes, color-mode resolution and ANSI measurement."""

from __future__ import annotations

import io
import unittest

from iconls.ansi import pad_right, strip_ansi, visible_length
from iconls.theme import (
    DEFAULT_THEME,
    OCEAN_THEME,
    PLAIN_THEME,
    color_enabled,
    normalize_theme_name,
    resolve_theme,
)


class _TtyStream(io.StringIO):
    def isatty(self) -> bool:
        return True


class ThemeTests(unittest.TestCase):
    def test_normalize_theme_name_falls_back_to_default(self) -> None:
        self.assertEqual(normalize_theme_name(" Ocean "), "ocean")
        self.assertEqual(normalize_theme_name("plain"), "default")
        self.assertEqual(normalize_theme_name("missing"), "default")
        self.assertEqual(normalize_theme_name(None), "default")

    def test_resolve_theme_respects_no_color(self) -> None:
        self.assertIs(resolve_theme("ocean"), OCEAN_THEME)
        self.assertIs(resolve_theme("ocean", no_color=True), PLAIN_THEME)

    def test_plain_theme_paints_nothing(self) -> None:
        self.assertEqual(PLAIN_THEME.paint_name("*", "dir", is_directory=True), "* dir")
        self.assertEqual(PLAIN_THEME.paint_error("boom"), "boom")

    def test_default_theme_paints_directories_only(self) -> None:
        painted_dir = DEFAULT_THEME.paint_name("*", "dir", is_directory=True)
        painted_file = DEFAULT_THEME.paint_name("*", "file", is_directory=False)

        self.assertEqual(painted_dir, "\x1b[36m*\x1b[39;49;00m \x1b[01m\x1b[34mdir\x1b[39;49;00m")
        self.assertTrue(painted_file.endswith(" file"))
        self.assertEqual(strip_ansi(painted_dir), "* dir")


class ColorModeTests(unittest.TestCase):
    def test_never_and_always(self) -> None:
        self.assertFalse(color_enabled("never", _TtyStream()))
        self.assertTrue(color_enabled("always", io.StringIO()))

    def test_auto_follows_tty(self) -> None:
        self.assertTrue(color_enabled("auto", _TtyStream()))
        self.assertFalse(color_enabled("auto", io.StringIO()))

    def test_unknown_mode_means_never(self) -> None:
        self.assertFalse(color_enabled("rainbow", _TtyStream()))


class AnsiTests(unittest.TestCase):
    def test_visible_length_ignores_escapes(self) -> None:
        self.assertEqual(visible_length("\x1b[01m\x1b[34mabc\x1b[39;49;00m"), 3)
        self.assertEqual(visible_length("plain"), 5)

    def test_pad_right_pads_visible_width(self) -> None:
        self.assertEqual(pad_right("\x1b[34mab\x1b[0m", 4), "\x1b[34mab\x1b[0m  ")
        self.assertEqual(pad_right("toolong", 3), "toolong")


if __name__ == "__main__":
    unittest.main()
