"""Stat and identity lookups behind a substitutable provider.

``PosixMetadataProvider`` reads the real filesystem and the password/group
databases. ``InMemoryMetadataProvider`` serves canned records so rendering
can be exercised without touching disk.
"""

from __future__ import annotations

import errno
import grp
import os
import pwd
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

from ..errors import GroupLookupError, OwnerLookupError
from ..listing.types import DirectoryEntry


@dataclass(frozen=True)
class StatRecord:
    """The subset of ``os.stat_result`` a listing needs."""

    mode: int
    nlink: int
    uid: int
    gid: int
    size: int
    mtime: float
    blocks: int = 0

    @classmethod
    def from_stat_result(cls, result: os.stat_result) -> "StatRecord":
        return cls(
            mode=result.st_mode,
            nlink=result.st_nlink,
            uid=result.st_uid,
            gid=result.st_gid,
            size=result.st_size,
            mtime=result.st_mtime,
            # st_blocks is absent on some platforms.
            blocks=int(getattr(result, "st_blocks", 0)),
        )


class MetadataProvider(Protocol):
    """Capability used by the metadata extractor.

    ``stat`` raises ``OSError`` on failure; ``user_name`` and ``group_name``
    raise ``OwnerLookupError`` / ``GroupLookupError``.
    """

    def stat(self, entry: DirectoryEntry) -> StatRecord: ...

    def user_name(self, uid: int) -> str: ...

    def group_name(self, gid: int) -> str: ...


class PosixMetadataProvider:
    """Provider backed by ``os.lstat``, ``pwd`` and ``grp``."""

    def stat(self, entry: DirectoryEntry) -> StatRecord:
        return StatRecord.from_stat_result(os.lstat(entry.path))

    def user_name(self, uid: int) -> str:
        try:
            return pwd.getpwuid(uid).pw_name
        except KeyError as exc:
            raise OwnerLookupError(uid) from exc

    def group_name(self, gid: int) -> str:
        try:
            return grp.getgrgid(gid).gr_name
        except KeyError as exc:
            raise GroupLookupError(gid) from exc


class InMemoryMetadataProvider:
    """Provider serving fixed records keyed by entry name.

    A value in ``stats`` may be an exception instance, which ``stat`` raises
    for that entry. Names missing from ``stats`` raise ``FileNotFoundError``.
    Ids missing from ``users`` / ``groups`` fail lookup.
    """

    def __init__(
        self,
        stats: Mapping[str, StatRecord | BaseException],
        users: Mapping[int, str] | None = None,
        groups: Mapping[int, str] | None = None,
    ) -> None:
        self._stats = dict(stats)
        self._users = dict(users or {})
        self._groups = dict(groups or {})
        self.stat_calls: list[str] = []

    def stat(self, entry: DirectoryEntry) -> StatRecord:
        self.stat_calls.append(entry.name)
        record = self._stats.get(entry.name)
        if record is None:
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), entry.name)
        if isinstance(record, BaseException):
            raise record
        return record

    def user_name(self, uid: int) -> str:
        try:
            return self._users[uid]
        except KeyError as exc:
            raise OwnerLookupError(uid) from exc

    def group_name(self, gid: int) -> str:
        try:
            return self._groups[gid]
        except KeyError as exc:
            raise GroupLookupError(gid) from exc


__all__ = [
    "StatRecord",
    "MetadataProvider",
    "PosixMetadataProvider",
    "InMemoryMetadataProvider",
]
