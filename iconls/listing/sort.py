"""Deterministic ordering for listings."""

from __future__ import annotations

from collections.abc import Iterable

from .types import DirectoryEntry, Listing


def entry_sort_key(entry: DirectoryEntry) -> tuple[str, str]:
    """Case-insensitive name first, then the exact name as a tiebreak."""
    return (entry.name.lower(), entry.name)


def sort_entries(entries: Iterable[DirectoryEntry]) -> Listing:
    """Return a new listing ordered by ``entry_sort_key``."""
    return tuple(sorted(entries, key=entry_sort_key))


__all__ = [
    "entry_sort_key",
    "sort_entries",
]
