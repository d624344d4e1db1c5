"""Text renderers for sorted listings.

``render_compact`` packs icon-prefixed names into a grid; ``render_long``
emits the detailed per-entry table with its ``total`` header.
"""

from __future__ import annotations

from .layout import COLUMN_PADDING, GridGeometry, grid_geometry, pack, probe_terminal_width, usable_width
from .compact import render_compact
from .long_format import LongRow, collect_rows, format_row, render_long, total_blocks

__all__ = [
    "COLUMN_PADDING",
    "GridGeometry",
    "usable_width",
    "probe_terminal_width",
    "grid_geometry",
    "pack",
    "render_compact",
    "LongRow",
    "collect_rows",
    "total_blocks",
    "format_row",
    "render_long",
]
