"""Nerd Font symbols for directory entries.

Classification is an ordered, declarative rule list evaluated top to bottom:

1. directories always get ``DIRECTORY_SYMBOL``
2. exact (case-sensitive) filename rules
3. lowercase extension rules, resolved through one immutable lookup table
4. ``FALLBACK_SYMBOL``

All tables are built once at import time and never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal

from .listing.types import DirectoryEntry, file_extension

DIRECTORY_SYMBOL = "\ue5ff"
FALLBACK_SYMBOL = "\uea7b"


@dataclass(frozen=True)
class IconRule:
    """Bind a set of exact names or lowercase extensions to one symbol."""

    kind: Literal["name", "extension"]
    keys: frozenset[str]
    symbol: str
    label: str

    def matches(self, name: str, extension: str) -> bool:
        if self.kind == "name":
            return name in self.keys
        return extension in self.keys


def _names(label: str, symbol: str, *keys: str) -> IconRule:
    return IconRule("name", frozenset(keys), symbol, label)


def _exts(label: str, symbol: str, *keys: str) -> IconRule:
    return IconRule("extension", frozenset(keys), symbol, label)


NAME_RULES: tuple[IconRule, ...] = (
    _names("go", "\U000f07d3", "go.mod", "go.sum"),
    _names("docker", "\uf21f", "Dockerfile", "docker-compose.yml", ".dockerignore"),
    _names("rust", "\ue68b", "cargo.toml"),
    _names("git", "\uf1d3", ".github", ".gitignore"),
    _names("make", "\ue673", "Makefile"),
)

EXTENSION_RULES: tuple[IconRule, ...] = (
    # documents
    _exts("markdown", "\U000f0354", ".md"),
    _exts("text", "\uf15c", ".txt", ".rtf"),
    _exts("word", "\U000f022c", ".doc", ".docx", ".odt"),
    _exts("spreadsheet", "\U000f021b", ".xls", ".xlsx", ".ods"),
    _exts("presentation", "\U000f0227", ".ppt", ".pptx", ".odp"),
    _exts("pdf", "\ue67d", ".pdf"),
    _exts("tabular", "\ue64a", ".csv", ".tsv"),
    _exts("tex", "\ue81f", ".tex"),
    _exts("ebook", "\uede2", ".mobi", ".epub", ".azw"),
    _exts("vcard", "\uf2b9", ".vcf"),
    _exts("calendar", "\uf073", ".ics"),
    # markup and web
    _exts("html", "\ue60e", ".html", ".htm"),
    _exts("xml", "\U000f05c0", ".xml", ".xhtml"),
    _exts("css", "\ue749", ".css"),
    _exts("javascript", "\uf2ef", ".js"),
    _exts("json", "\ueb0f", ".json"),
    _exts("web-archive", "\U000f059f", ".mht", ".mhtml"),
    # source code
    _exts("php", "\ue608", ".php"),
    _exts("jsp", "\ue66d", ".jsp"),
    _exts("java", "\ue738", ".java", ".jar", ".war", ".ear"),
    _exts("python", "\U000f0320", ".py"),
    _exts("ruby", "\U000f0d2d", ".rb"),
    _exts("cpp", "\U000f0672", ".cpp"),
    _exts("c", "\ue61e", ".c"),
    _exts("csharp", "\ue7b2", ".cs"),
    _exts("go", "\ue65e", ".go"),
    _exts("swift", "\ue699", ".swift"),
    _exts("kotlin", "\ue634", ".kt"),
    _exts("perl", "\ue67e", ".pl"),
    _exts("r", "\ue881", ".r"),
    # scripts
    _exts("shell", "\ue760", ".sh"),
    _exts("batch", "\uebc4", ".bat", ".cmd"),
    _exts("powershell", "\ue86c", ".ps1"),
    _exts("installer", "\ueb7b", ".run"),
    # data
    _exts("database", "\uf472", ".sql", ".db", ".sqlite"),
    _exts("backup", "\U000f006f", ".bak"),
    _exts("log", "\U000f1085", ".log"),
    _exts("partial", "\U000f1462", ".part"),
    _exts("temporary", "\uf509", ".tmp"),
    # executables and packages
    _exts("executable", "\U000f0a21", ".exe", ".dll", ".sys", ".msi"),
    _exts("debian", "\ue77d", ".deb"),
    _exts("rpm", "\uef5d", ".rpm"),
    _exts("android", "\U000f0032", ".apk"),
    _exts("kernel-module", "\ue712", ".ko"),
    _exts("desktop-unit", "\ue615", ".desktop", ".service"),
    # disk images
    _exts("disc", "\uf0be", ".ipa", ".iso"),
    _exts("disk-image", "\U000f0a23", ".img"),
    _exts("binary", "\ueae8", ".bin"),
    _exts("cue", "\U000f153c", ".cue"),
    _exts("virtual-disk", "\U000f02ca", ".vhd", ".vmdk", ".dmg"),
    # archives
    _exts(
        "archive",
        "\U000f0ffa",
        ".zip", ".rar", ".7z", ".tar", ".gz", ".bz2", ".xz", ".zst", ".cpio",
    ),
    # audio and video
    _exts("audio", "\U000f147d", ".mp3", ".wav", ".flac", ".aac", ".ogg", ".wma", ".m4a", ".aiff"),
    _exts(
        "video",
        "\U000f022b",
        ".avi", ".mp4", ".mkv", ".mov", ".wmv", ".flv", ".mpeg", ".mpg", ".m4v", ".3gp", ".3g2", ".vob",
    ),
    _exts("flash", "\uf1c8", ".swf"),
    # images
    _exts("image", "\uf1c5", ".png", ".jpg", ".jpeg", ".gif", ".bmp", ".tiff", ".ico", ".heic"),
    _exts("svg", "\U000f0560", ".svg"),
    _exts("photoshop", "\ue67f", ".psd"),
    _exts("illustrator", "\ue669", ".ai"),
    _exts("sketch", "\U000f027c", ".sketch"),
    _exts("gimp", "\uf338", ".xcf"),
    _exts("raw-image", "\U000f1a0f", ".raw"),
    _exts("coreldraw", "\U000f01de", ".cdr"),
    # fonts and configuration
    _exts("font", "\ue659", ".ttf", ".otf", ".fon"),
    _exts("config", "\ueb51", ".cfg", ".ini", ".conf", ".env", ".reg"),
)


def _build_extension_table(rules: tuple[IconRule, ...]) -> MappingProxyType[str, str]:
    """Flatten extension rules into a read-only ``extension -> symbol`` map.

    Raises ``ValueError`` if two rules claim the same extension, since the
    result would then depend on declaration order.
    """
    table: dict[str, str] = {}
    for rule in rules:
        for key in rule.keys:
            if key in table:
                raise ValueError(f"duplicate icon rule for extension {key!r}")
            table[key] = rule.symbol
    return MappingProxyType(table)


EXTENSION_ICONS = _build_extension_table(EXTENSION_RULES)


def classify_name(name: str, is_directory: bool) -> str:
    """Return the display symbol for a bare name and entry type."""
    if is_directory:
        return DIRECTORY_SYMBOL
    extension = file_extension(name)
    for rule in NAME_RULES:
        if rule.matches(name, extension):
            return rule.symbol
    return EXTENSION_ICONS.get(extension, FALLBACK_SYMBOL)


def classify(entry: DirectoryEntry) -> str:
    """Return the display symbol for ``entry``."""
    return classify_name(entry.name, entry.is_directory)


def render_name(entry: DirectoryEntry) -> str:
    """Return ``entry.name`` prefixed with its symbol and one space."""
    return f"{classify(entry)} {entry.name}"


__all__ = [
    "DIRECTORY_SYMBOL",
    "FALLBACK_SYMBOL",
    "IconRule",
    "NAME_RULES",
    "EXTENSION_RULES",
    "EXTENSION_ICONS",
    "classify_name",
    "classify",
    "render_name",
]
