"""Color themes for listing output.

Themes hold Pygments console color specs (``"blue"``, ``"*blue*"`` for bold,
``"_blue_"`` for underline). The plain theme paints nothing, which keeps
output byte-identical to uncolored listings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO

from pygments.console import ansiformat

COLOR_MODES = ("never", "auto", "always")
DEFAULT_COLOR_MODE = "never"


@dataclass(frozen=True)
class ListingTheme:
    """Semantic color specs used by renderers."""

    name: str
    directory: str
    symbol: str
    error: str

    def paint(self, spec: str, text: str) -> str:
        if not spec or not text:
            return text
        return ansiformat(spec, text)

    def paint_name(self, symbol: str, name: str, is_directory: bool) -> str:
        """Return ``"<symbol> <name>"`` with theme colors applied."""
        painted_name = self.paint(self.directory, name) if is_directory else name
        return f"{self.paint(self.symbol, symbol)} {painted_name}"

    def paint_error(self, text: str) -> str:
        return self.paint(self.error, text)


DEFAULT_THEME = ListingTheme(
    name="default",
    directory="*blue*",
    symbol="cyan",
    error="red",
)

OCEAN_THEME = ListingTheme(
    name="ocean",
    directory="*brightcyan*",
    symbol="brightblue",
    error="brightred",
)

PLAIN_THEME = ListingTheme(
    name="plain",
    directory="",
    symbol="",
    error="",
)

_THEMES: dict[str, ListingTheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def normalize_color_mode(mode: str | None) -> str:
    if not mode:
        return DEFAULT_COLOR_MODE
    candidate = str(mode).strip().lower()
    return candidate if candidate in COLOR_MODES else DEFAULT_COLOR_MODE


def color_enabled(mode: str | None, stream: TextIO) -> bool:
    """Decide whether to colorize output written to ``stream``."""
    normalized = normalize_color_mode(mode)
    if normalized == "always":
        return True
    if normalized == "never":
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def resolve_theme(name: str | None, *, no_color: bool = False) -> ListingTheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "COLOR_MODES",
    "DEFAULT_COLOR_MODE",
    "ListingTheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "normalize_theme_name",
    "normalize_color_mode",
    "color_enabled",
    "resolve_theme",
]
