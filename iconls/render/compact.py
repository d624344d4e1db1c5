"""Default multi-column listing."""

from __future__ import annotations

from collections.abc import Sequence

from ..config import DEFAULT_FALLBACK_WIDTH
from ..icons import classify
from ..listing.types import DirectoryEntry
from ..theme import PLAIN_THEME, ListingTheme
from .layout import pack


def render_compact(
    listing: Sequence[DirectoryEntry],
    terminal_width: int | None = None,
    theme: ListingTheme = PLAIN_THEME,
    fallback_width: int = DEFAULT_FALLBACK_WIDTH,
) -> str:
    """Render icon-prefixed names of ``listing`` as a terminal-width grid."""
    names = [theme.paint_name(classify(entry), entry.name, entry.is_directory) for entry in listing]
    return pack(names, terminal_width, fallback_width)


__all__ = ["render_compact"]
