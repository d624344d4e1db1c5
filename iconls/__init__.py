"""iconls: directory listings with file-type icons.

Lists one directory as an icon-prefixed column grid or, with ``-l``, as a
long table of permissions, ownership, size and modification time.
``main`` runs the ``ls`` command line.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import the CLI entrypoint so ``import iconls`` stays cheap."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
