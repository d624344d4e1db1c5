"""ANSI-aware text measurement for grid layout.

Color escape sequences take no terminal columns, so padding must be computed
from the visible text only.
"""

from __future__ import annotations

import re

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from ``text``."""
    if "\x1b" not in text:
        return text
    return ANSI_ESCAPE_RE.sub("", text)


def visible_length(text: str) -> int:
    """Return the number of characters left after stripping escapes.

    Each code point counts as one column, matching how icon-prefixed names
    are measured for the grid.
    """
    return len(strip_ansi(text))


def pad_right(text: str, width: int) -> str:
    """Left-align ``text`` in a field of ``width`` visible columns."""
    missing = width - visible_length(text)
    if missing <= 0:
        return text
    return text + " " * missing


__all__ = [
    "ANSI_ESCAPE_RE",
    "strip_ansi",
    "visible_length",
    "pad_right",
]
