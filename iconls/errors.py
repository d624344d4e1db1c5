"""Failure taxonomy for directory listings.

Only ``DirectoryAccessError`` is fatal to an invocation. The other errors are
raised close to the filesystem and converted into degraded per-entry output
by their callers.
"""

from __future__ import annotations


class ListingError(Exception):
    """Base class for all listing failures."""


class DirectoryAccessError(ListingError):
    """Target directory is missing, unreadable, or not a directory."""

    def __init__(self, path: str, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"cannot access '{path}': {describe_cause(cause)}")


class EntryStatError(ListingError):
    """Metadata for a single entry could not be read."""

    def __init__(self, name: str, cause: BaseException) -> None:
        self.name = name
        self.cause = cause
        super().__init__(f"error reading file info for {name}: {describe_cause(cause)}")


class OwnerLookupError(ListingError):
    """Numeric user id has no password-database entry."""

    def __init__(self, uid: int) -> None:
        self.uid = uid
        super().__init__(f"unknown user id {uid}")


class GroupLookupError(ListingError):
    """Numeric group id has no group-database entry."""

    def __init__(self, gid: int) -> None:
        self.gid = gid
        super().__init__(f"unknown group id {gid}")


def describe_cause(cause: BaseException) -> str:
    """Return the short human description of an underlying failure.

    ``OSError`` instances render as their ``strerror`` (``No such file or
    directory``) rather than the full ``[Errno 2] ...: 'path'`` repr.
    """
    if isinstance(cause, OSError) and cause.strerror:
        return cause.strerror
    text = str(cause)
    return text if text else type(cause).__name__


__all__ = [
    "ListingError",
    "DirectoryAccessError",
    "EntryStatError",
    "OwnerLookupError",
    "GroupLookupError",
    "describe_cause",
]
