"""Long-format (``ls -l``) rendering.

Metadata is extracted once per entry. Entries whose stat fails are reported
inline and left out of the ``total`` block count.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import tzinfo

from ..errors import EntryStatError
from ..icons import classify
from ..listing.types import DirectoryEntry
from ..metadata import Metadata, MetadataProvider, PosixMetadataProvider, extract
from ..theme import PLAIN_THEME, ListingTheme

logger = logging.getLogger(__name__)

SIZE_FIELD_WIDTH = 4


@dataclass(frozen=True)
class LongRow:
    """One listed entry with either its metadata or the stat failure."""

    entry: DirectoryEntry
    metadata: Metadata | None = None
    error: EntryStatError | None = None


def collect_rows(
    listing: Sequence[DirectoryEntry],
    provider: MetadataProvider | None = None,
    now: float | None = None,
    tz: tzinfo | None = None,
) -> list[LongRow]:
    """Extract metadata for every entry, containing per-entry failures."""
    if provider is None:
        provider = PosixMetadataProvider()
    if now is None:
        now = time.time()
    rows: list[LongRow] = []
    for entry in listing:
        try:
            rows.append(LongRow(entry, metadata=extract(entry, provider, now, tz)))
        except EntryStatError as exc:
            logger.debug("skipping %s from totals: %s", entry.name, exc.cause)
            rows.append(LongRow(entry, error=exc))
    return rows


def total_blocks(rows: Sequence[LongRow]) -> int:
    """Sum 512-byte blocks of successful rows, expressed in 1K blocks."""
    return sum(row.metadata.blocks for row in rows if row.metadata is not None) // 2


def format_row(row: LongRow, theme: ListingTheme = PLAIN_THEME) -> str:
    if row.metadata is None:
        return theme.paint_error(f"ls: {row.error}")
    meta = row.metadata
    name = theme.paint_name(classify(row.entry), row.entry.name, row.entry.is_directory)
    return (
        f"{meta.mode} {meta.nlink} {meta.owner} {meta.group} "
        f"{meta.size:{SIZE_FIELD_WIDTH}d} {meta.mtime_display} {name}"
    )


def render_long(
    listing: Sequence[DirectoryEntry],
    provider: MetadataProvider | None = None,
    now: float | None = None,
    theme: ListingTheme = PLAIN_THEME,
    tz: tzinfo | None = None,
) -> str:
    """Render the ``total`` header followed by one line per entry."""
    rows = collect_rows(listing, provider, now, tz)
    lines = [f"total {total_blocks(rows)}"]
    lines.extend(format_row(row, theme) for row in rows)
    return "\n".join(lines) + "\n"


__all__ = [
    "SIZE_FIELD_WIDTH",
    "LongRow",
    "collect_rows",
    "total_blocks",
    "format_row",
    "render_long",
]
