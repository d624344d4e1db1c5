"""Domain datatypes for one non-recursive directory read."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


def file_extension(name: str) -> str:
    """Return lowercased text from the last dot onward, or ``""``.

    Unlike ``Path.suffix``, dotfiles count: ``.env`` has extension ``.env``.
    """
    dot = name.rfind(".")
    if dot < 0:
        return ""
    return name[dot:].lower()


@dataclass(frozen=True)
class DirectoryEntry:
    """One child of a listed directory.

    ``path`` is kept so metadata can be queried lazily; reading the entry does
    not stat it beyond the type check ``os.scandir`` provides.
    """

    name: str
    is_directory: bool
    path: Path


Listing = tuple[DirectoryEntry, ...]


__all__ = [
    "file_extension",
    "DirectoryEntry",
    "Listing",
]
