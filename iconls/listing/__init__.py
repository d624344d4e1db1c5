"""Directory entry model plus reading and ordering helpers.

This package contains the filesystem-facing half of a listing:
- the immutable entry datatype
- non-recursive directory scanning
- case-insensitive deterministic sorting
"""

from __future__ import annotations

from .types import DirectoryEntry, Listing, file_extension
from .reader import DEFAULT_DIRECTORY, read_directory
from .sort import entry_sort_key, sort_entries

__all__ = [
    "DirectoryEntry",
    "Listing",
    "file_extension",
    "DEFAULT_DIRECTORY",
    "read_directory",
    "entry_sort_key",
    "sort_entries",
]
