"""Derive long-listing fields from provider stat records.

Owner and group lookups degrade to numeric ids; only a failed ``stat`` is
surfaced, as ``EntryStatError`` for that one entry.
"""

from __future__ import annotations

import logging
import stat
import time
from dataclasses import dataclass
from datetime import datetime, timedelta, tzinfo

from ..errors import EntryStatError, GroupLookupError, OwnerLookupError
from ..listing.types import DirectoryEntry
from .provider import MetadataProvider, PosixMetadataProvider

logger = logging.getLogger(__name__)

RECENT_WINDOW = timedelta(hours=6 * 30 * 24)
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
_PERMISSION_BITS = (
    (stat.S_IRUSR, "r"), (stat.S_IWUSR, "w"), (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"), (stat.S_IWGRP, "w"), (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"), (stat.S_IWOTH, "w"), (stat.S_IXOTH, "x"),
)


@dataclass(frozen=True)
class Metadata:
    """Display-ready long-format fields for one entry."""

    mode: str
    nlink: int
    owner: str
    group: str
    size: int
    mtime: datetime
    mtime_display: str
    blocks: int


def format_mode(mode: int, is_directory: bool) -> str:
    """Return ``d`` or ``-`` followed by the nine ``rwx`` permission flags.

    Setuid, setgid and sticky bits are not rendered.
    """
    flags = "".join(char if mode & bit else "-" for bit, char in _PERMISSION_BITS)
    return ("d" if is_directory else "-") + flags


def format_mtime(mtime: float, now: float, tz: tzinfo | None = None) -> str:
    """Render a modification timestamp the way ``ls -l`` does.

    Entries at most ``RECENT_WINDOW`` old (or in the future) show
    ``Mon DD HH:MM``; strictly older ones show ``Mon DD YYYY``. The day is
    space-padded to two columns and month names ignore the locale.
    """
    moment = datetime.fromtimestamp(mtime, tz)
    month = MONTH_ABBREVIATIONS[moment.month - 1]
    if now - mtime > RECENT_WINDOW.total_seconds():
        return f"{month} {moment.day:>2} {moment.year}"
    return f"{month} {moment.day:>2} {moment.hour:02d}:{moment.minute:02d}"


def resolve_owner(provider: MetadataProvider, uid: int) -> str:
    """Return the user name for ``uid`` or the id itself as text."""
    try:
        return provider.user_name(uid)
    except OwnerLookupError as exc:
        logger.debug("%s; showing numeric id", exc)
        return str(uid)


def resolve_group(provider: MetadataProvider, gid: int) -> str:
    """Return the group name for ``gid`` or the id itself as text."""
    try:
        return provider.group_name(gid)
    except GroupLookupError as exc:
        logger.debug("%s; showing numeric id", exc)
        return str(gid)


def extract(
    entry: DirectoryEntry,
    provider: MetadataProvider | None = None,
    now: float | None = None,
    tz: tzinfo | None = None,
) -> Metadata:
    """Build ``Metadata`` for ``entry``.

    ``now`` defaults to the current time at the moment of the call, so the
    recent/old cutoff tracks rendering time rather than read time. Raises
    ``EntryStatError`` when the entry cannot be stat'ed.
    """
    if provider is None:
        provider = PosixMetadataProvider()
    try:
        record = provider.stat(entry)
    except OSError as exc:
        raise EntryStatError(entry.name, exc) from exc

    if now is None:
        now = time.time()
    return Metadata(
        mode=format_mode(record.mode, entry.is_directory),
        nlink=record.nlink,
        owner=resolve_owner(provider, record.uid),
        group=resolve_group(provider, record.gid),
        size=record.size,
        mtime=datetime.fromtimestamp(record.mtime, tz),
        mtime_display=format_mtime(record.mtime, now, tz),
        blocks=record.blocks,
    )


__all__ = [
    "RECENT_WINDOW",
    "MONTH_ABBREVIATIONS",
    "Metadata",
    "format_mode",
    "format_mtime",
    "resolve_owner",
    "resolve_group",
    "extract",
]
