"""Multi-column grid layout sized to the terminal width."""

from __future__ import annotations

import logging
import shutil
from collections.abc import Sequence
from dataclasses import dataclass

from ..ansi import pad_right, visible_length
from ..config import DEFAULT_FALLBACK_WIDTH, MIN_USABLE_WIDTH

logger = logging.getLogger(__name__)

COLUMN_PADDING = 2


@dataclass(frozen=True)
class GridGeometry:
    """Resolved grid sizing for one set of names."""

    width: int
    column_width: int
    columns: int


def usable_width(width: int | None, fallback: int = DEFAULT_FALLBACK_WIDTH) -> int:
    """Return ``width`` unless it is missing or below ``MIN_USABLE_WIDTH``."""
    if width is None or width < MIN_USABLE_WIDTH:
        return fallback
    return width


def probe_terminal_width(fallback: int = DEFAULT_FALLBACK_WIDTH) -> int:
    """Query the output terminal's column count.

    ``shutil.get_terminal_size`` reports ``(0, 0)`` here when stdout is not a
    terminal, which then resolves to ``fallback`` like any too-narrow width.
    """
    columns = shutil.get_terminal_size((0, 0)).columns
    width = usable_width(columns, fallback)
    logger.debug("terminal width probe: %d columns, using %d", columns, width)
    return width


def grid_geometry(
    names: Sequence[str],
    terminal_width: int | None,
    fallback: int = DEFAULT_FALLBACK_WIDTH,
) -> GridGeometry:
    """Compute column width and count; at least one column is always used."""
    width = usable_width(terminal_width, fallback)
    longest = max((visible_length(name) for name in names), default=0)
    column_width = longest + COLUMN_PADDING
    return GridGeometry(
        width=width,
        column_width=column_width,
        columns=max(1, width // column_width),
    )


def pack(
    names: Sequence[str],
    terminal_width: int | None = None,
    fallback: int = DEFAULT_FALLBACK_WIDTH,
) -> str:
    """Render ``names`` row-major into left-aligned, padded columns.

    A newline follows every ``columns``-th name and the final name. When
    ``terminal_width`` is omitted the terminal is probed.
    """
    if not names:
        return ""
    if terminal_width is None:
        terminal_width = probe_terminal_width(fallback)
    geometry = grid_geometry(names, terminal_width, fallback)

    out: list[str] = []
    last = len(names) - 1
    for idx, name in enumerate(names):
        out.append(pad_right(name, geometry.column_width))
        if (idx + 1) % geometry.columns == 0 or idx == last:
            out.append("\n")
    return "".join(out)


__all__ = [
    "COLUMN_PADDING",
    "GridGeometry",
    "usable_width",
    "probe_terminal_width",
    "grid_geometry",
    "pack",
]
