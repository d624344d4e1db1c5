"""Non-recursive directory scanning."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..errors import DirectoryAccessError
from .types import DirectoryEntry, Listing

logger = logging.getLogger(__name__)

DEFAULT_DIRECTORY = "."


def read_directory(path: str | os.PathLike[str] | None = None) -> Listing:
    """Return every direct child of ``path`` in scan order.

    Hidden entries are included and nothing is recursed into. Symlinks are
    not followed when deciding ``is_directory``. Any failure to open the
    directory raises ``DirectoryAccessError``; no partial listing escapes.
    """
    target = DEFAULT_DIRECTORY if path is None else os.fspath(path)
    entries: list[DirectoryEntry] = []
    try:
        with os.scandir(target) as scanned:
            for child in scanned:
                try:
                    is_dir = child.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False
                entries.append(
                    DirectoryEntry(
                        name=child.name,
                        is_directory=is_dir,
                        path=Path(child.path),
                    )
                )
    except OSError as exc:
        logger.debug("scandir failed for %s: %s", target, exc)
        raise DirectoryAccessError(target, exc) from exc

    logger.debug("read %d entries from %s", len(entries), target)
    return tuple(entries)


__all__ = [
    "DEFAULT_DIRECTORY",
    "read_directory",
]
