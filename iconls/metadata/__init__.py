"""Per-entry stat metadata for long listings.

- provider capability (real POSIX lookups or in-memory records)
- extraction of display fields with lenient identity fallback
"""

from __future__ import annotations

from .provider import InMemoryMetadataProvider, MetadataProvider, PosixMetadataProvider, StatRecord
from .extract import (
    MONTH_ABBREVIATIONS,
    RECENT_WINDOW,
    Metadata,
    extract,
    format_mode,
    format_mtime,
    resolve_group,
    resolve_owner,
)

__all__ = [
    "StatRecord",
    "MetadataProvider",
    "PosixMetadataProvider",
    "InMemoryMetadataProvider",
    "RECENT_WINDOW",
    "MONTH_ABBREVIATIONS",
    "Metadata",
    "format_mode",
    "format_mtime",
    "resolve_owner",
    "resolve_group",
    "extract",
]
