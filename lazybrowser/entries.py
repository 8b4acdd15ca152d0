"""Directory listing primitive and per-entry metadata.

Listings are best-effort: a child whose metadata cannot be read is left out
instead of failing the whole read. Order is whatever ``os.scandir`` yields.
"""

from __future__ import annotations

import enum
import mimetypes
import os
import stat
import time
from dataclasses import dataclass
from pathlib import Path

PREVIEW_LINE_LIMIT = 10
PREVIEW_LINE_CHARS = 512
DIRECTORY_MIME_TYPE = "inode/directory"


class EntryKind(enum.Enum):
    DIRECTORY = "directory"
    REGULAR_FILE = "file"
    OTHER = "other"


@dataclass(frozen=True)
class Entry:
    """One filesystem object observed during a directory read."""

    name: str
    kind: EntryKind
    mode: int
    size: int | None = None
    mtime: float | None = None
    mime_type: str | None = None

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.kind is EntryKind.REGULAR_FILE

    @property
    def permissions(self) -> str:
        """Owner/group/other read-write-execute bits as ``rwxr-x---``."""
        return stat.filemode(self.mode)[1:]


def kind_for_mode(mode: int) -> EntryKind:
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if stat.S_ISREG(mode):
        return EntryKind.REGULAR_FILE
    return EntryKind.OTHER


def guess_mime_type(name: str, kind: EntryKind) -> str | None:
    if kind is EntryKind.DIRECTORY:
        return DIRECTORY_MIME_TYPE
    if kind is not EntryKind.REGULAR_FILE:
        return None
    mime_type, _encoding = mimetypes.guess_type(name)
    return mime_type


def entry_from_stat(name: str, st: os.stat_result) -> Entry:
    """Build an ``Entry`` from an ``lstat`` result."""
    kind = kind_for_mode(st.st_mode)
    return Entry(
        name=name,
        kind=kind,
        mode=st.st_mode,
        size=int(st.st_size) if kind is EntryKind.REGULAR_FILE else None,
        mtime=float(st.st_mtime),
        mime_type=guess_mime_type(name, kind),
    )


def read_directory(path: Path, show_hidden: bool = True) -> list[Entry]:
    """List ``path`` in OS order.

    Raises ``OSError`` when the directory itself cannot be scanned. Children
    whose metadata lookup fails are dropped from the result.
    """
    entries: list[Entry] = []
    with os.scandir(path) as children:
        for child in children:
            if not show_hidden and child.name.startswith("."):
                continue
            try:
                st = child.stat(follow_symlinks=False)
            except OSError:
                continue
            entries.append(entry_from_stat(child.name, st))
    return entries


def preview_lines(directory: Path, entry: Entry | None, limit: int = PREVIEW_LINE_LIMIT) -> list[str]:
    """Return up to ``limit`` leading lines of a regular file.

    Each line is cut at ``PREVIEW_LINE_CHARS``; a cut line ends the preview.

    Directories, special files, and anything that fails to open or decode
    preview as an empty list.
    """
    if entry is None or not entry.is_file:
        return []
    try:
        with open(directory / entry.name, encoding="utf-8") as handle:
            lines: list[str] = []
            for _ in range(max(0, limit)):
                line = handle.readline(PREVIEW_LINE_CHARS)
                if not line:
                    break
                lines.append(line.rstrip("\r\n"))
                if not line.endswith("\n"):
                    break
            return lines
    except (OSError, UnicodeDecodeError):
        return []


def format_size(size: int) -> str:
    value = float(size)
    for unit in ("B", "K", "M", "G"):
        if value < 1024 or unit == "G":
            if unit == "B":
                return f"{int(value)} {unit}"
            return f"{value:.1f} {unit}"
        value /= 1024
    return f"{size} B"


def describe_entry(entry: Entry | None) -> list[str]:
    """Info-panel text for the selected entry."""
    if entry is None:
        return []
    lines = [stat.filemode(entry.mode)]
    if entry.size is not None:
        lines.append(format_size(entry.size))
    if entry.mtime is not None:
        lines.append(time.strftime("%Y-%m-%d %H:%M", time.localtime(entry.mtime)))
    if entry.mime_type:
        lines.append(entry.mime_type)
    return lines


__all__ = [
    "PREVIEW_LINE_LIMIT",
    "EntryKind",
    "Entry",
    "kind_for_mode",
    "guess_mime_type",
    "entry_from_stat",
    "read_directory",
    "preview_lines",
    "format_size",
    "describe_entry",
]
