"""Command-line front door for iconls.

Parses ``ls [-l] [path]``, reads and sorts the directory, then renders it in
compact or long format. Only a failure to open the directory stops output.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from . import config
from .errors import DirectoryAccessError, describe_cause
from .listing import DEFAULT_DIRECTORY, read_directory, sort_entries
from .metadata import MetadataProvider
from .render import render_compact, render_long
from .theme import PLAIN_THEME, ListingTheme, color_enabled, resolve_theme

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ACCESS_ERROR = 2
LOG_FORMAT = "%(name)s: %(levelname)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ls",
        description="List directory contents with file-type icons.",
    )
    parser.add_argument("-l", dest="long_format", action="store_true", help="Use a long listing format.")
    parser.add_argument(
        "path",
        nargs="?",
        default=DEFAULT_DIRECTORY,
        help="Directory to list. Defaults to the current directory.",
    )
    return parser


def configure_logging(level_name: str) -> None:
    """Send log records to stderr at ``level_name``."""
    logging.basicConfig(level=getattr(logging, level_name), format=LOG_FORMAT, stream=sys.stderr)


def write_text(stream: TextIO, text: str) -> None:
    """Write ``text`` so undecodable filename bytes reach the stream unchanged.

    ``os.scandir`` decodes such bytes as lone surrogates. Streams backed by a
    binary buffer receive them re-encoded with ``surrogateescape``.
    """
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        stream.write(text)
        return
    stream.flush()
    buffer.write(text.encode(getattr(stream, "encoding", None) or "utf-8", "surrogateescape"))
    buffer.flush()


def render_listing(
    path: str,
    long_format: bool,
    theme: ListingTheme = PLAIN_THEME,
    terminal_width: int | None = None,
    fallback_width: int = config.DEFAULT_FALLBACK_WIDTH,
    provider: MetadataProvider | None = None,
) -> str:
    """Read, sort and render ``path``.

    Raises ``DirectoryAccessError`` when the directory cannot be read.
    """
    listing = sort_entries(read_directory(path))
    if long_format:
        return render_long(listing, provider=provider, theme=theme)
    return render_compact(listing, terminal_width, theme=theme, fallback_width=fallback_width)


def main(
    argv: Sequence[str] | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Run ``ls`` and return the process exit status.

    ``stdout`` / ``stderr`` default to the process streams and are mainly
    overridden by tests.
    """
    out = sys.stdout if stdout is None else stdout
    err = sys.stderr if stderr is None else stderr
    args = build_parser().parse_args(argv)

    settings = config.load_config()
    configure_logging(config.load_log_level(settings))
    theme = resolve_theme(
        config.load_theme_name(settings),
        no_color=not color_enabled(config.load_color_mode(settings), out),
    )

    try:
        rendered = render_listing(
            args.path,
            args.long_format,
            theme=theme,
            fallback_width=config.load_fallback_width(settings),
        )
    except DirectoryAccessError as exc:
        logger.debug("listing aborted", exc_info=exc)
        write_text(err, f"ls: cannot access '{exc.path}': {describe_cause(exc.cause)}\n")
        return EXIT_ACCESS_ERROR

    write_text(out, rendered)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
