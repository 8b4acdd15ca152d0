"""Directory navigation state and the controller that replaces it.

``DirectoryState`` is an immutable snapshot of the current directory and its
selection. Every navigation action builds a new snapshot; a failed read keeps
the previous one and raises ``NavigationError``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace
from pathlib import Path

from .entries import Entry, read_directory
from .errors import NavigationError, OpenError
from .opener import open_file

logger = logging.getLogger(__name__)

DirectoryReader = Callable[[Path], Sequence[Entry]]
FileOpener = Callable[[Path, str], str | None]


def _clamp_selection(selected: int | None, count: int) -> int | None:
    if count <= 0:
        return None
    if selected is None or selected < 0 or selected >= count:
        return 0
    return selected


@dataclass(frozen=True)
class DirectoryState:
    """Current directory listing plus selected index.

    ``selected`` is ``None`` exactly when ``entries`` is empty, otherwise a
    valid index into ``entries``.
    """

    path: Path
    entries: tuple[Entry, ...] = ()
    selected: int | None = None

    @classmethod
    def create(cls, path: Path, entries: Sequence[Entry], selected: int | None = 0) -> DirectoryState:
        """Build a snapshot, clamping ``selected`` into the valid range."""
        entries_tuple = tuple(entries)
        return cls(
            path=path,
            entries=entries_tuple,
            selected=_clamp_selection(selected, len(entries_tuple)),
        )

    @property
    def selected_entry(self) -> Entry | None:
        if self.selected is None:
            return None
        return self.entries[self.selected]


class NavigationController:
    """Translate movement and open/close commands into new ``DirectoryState``."""

    def __init__(
        self,
        state: DirectoryState,
        reader: DirectoryReader = read_directory,
        opener: FileOpener = open_file,
    ) -> None:
        self.state = state
        self._reader = reader
        self._opener = opener

    @classmethod
    def open(
        cls,
        path: Path,
        reader: DirectoryReader = read_directory,
        opener: FileOpener = open_file,
    ) -> NavigationController:
        """Read ``path`` and return a controller positioned on its first entry."""
        target = Path(path).absolute()
        entries = cls._read(reader, target)
        return cls(DirectoryState.create(target, entries, 0), reader=reader, opener=opener)

    @staticmethod
    def _read(reader: DirectoryReader, path: Path) -> Sequence[Entry]:
        try:
            return reader(path)
        except OSError as exc:
            logger.warning("directory read failed for %s: %s", path, exc)
            raise NavigationError(path, exc.strerror or str(exc)) from exc

    @property
    def path(self) -> Path:
        return self.state.path

    @property
    def selected_entry(self) -> Entry | None:
        return self.state.selected_entry

    @property
    def selected_name(self) -> str | None:
        entry = self.state.selected_entry
        return entry.name if entry is not None else None

    def move_selection(self, delta: int) -> None:
        """Move the cursor by ``delta``, wrapping at both ends."""
        count = len(self.state.entries)
        if count == 0 or self.state.selected is None:
            return
        self.state = replace(self.state, selected=(self.state.selected + delta) % count)

    def change_directory(self, path: Path) -> None:
        """Read ``path`` and make it current with the first entry selected."""
        entries = self._read(self._reader, path)
        self.state = DirectoryState.create(path, entries, 0)

    def enter(self) -> None:
        """Descend into the selected directory or open the selected file."""
        entry = self.state.selected_entry
        if entry is None:
            return
        if entry.is_dir:
            self.change_directory(self.state.path / entry.name)
        elif entry.is_file:
            self.open_selected()

    def open_selected(self) -> None:
        """Hand the selected regular file to the external opener."""
        entry = self.state.selected_entry
        if entry is None or not entry.is_file:
            return
        error = self._opener(self.state.path, entry.name)
        if error is not None:
            raise OpenError(entry.name, error)

    def leave(self) -> None:
        """Ascend to the parent directory; a no-op at the filesystem root."""
        parent = self.state.path.parent
        if parent == self.state.path:
            return
        self.change_directory(parent)

    def refresh(self) -> None:
        """Re-read the current directory, keeping the index when still valid."""
        entries = self._read(self._reader, self.state.path)
        self.state = DirectoryState.create(self.state.path, entries, self.state.selected)


__all__ = [
    "DirectoryReader",
    "FileOpener",
    "DirectoryState",
    "NavigationController",
]
