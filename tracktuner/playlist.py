"""A folder of MP3 tracks with a current selection."""

from __future__ import annotations

import random
from collections.abc import Iterator
from pathlib import Path

SONG_SUFFIX = ".mp3"
NO_SELECTION = -1


def find_songs(folder: str | Path) -> list[str]:
    """Return the names of the ``*.mp3`` entries in *folder*, sorted case-insensitively."""
    names = (
        entry.name
        for entry in Path(folder).iterdir()
        if entry.name.lower().endswith(SONG_SUFFIX)
    )
    return sorted(names, key=str.casefold)


class Playlist:
    """The songs of one folder in display order, plus the selected position."""

    def __init__(self, folder: str | Path) -> None:
        self.folder = Path(folder)
        self.items: list[str] = []
        self.index = NO_SELECTION
        self.reload()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[str]:
        return iter(self.items)

    @property
    def current(self) -> str | None:
        """The selected song name, or None when nothing is selected."""
        if 0 <= self.index < len(self.items):
            return self.items[self.index]
        return None

    def path_of(self, name: str) -> Path:
        return self.folder / name

    def reload(self) -> None:
        """Re-read the folder, restoring its natural order and clearing the selection."""
        self.items = find_songs(self.folder)
        self.index = NO_SELECTION

    def select(self, index: int) -> str:
        """Select the song at *index* and return its name."""
        if not 0 <= index < len(self.items):
            raise IndexError(f"song index {index} out of range")
        self.index = index
        return self.items[index]

    def advance(self) -> str | None:
        """Move to the next song and return it; return None at the end of the list."""
        if self.index < len(self.items) - 1:
            self.index += 1
            return self.items[self.index]
        return None

    def retreat(self) -> str | None:
        """Move to the previous song and return it; return None at the start of the list."""
        if self.index > 0:
            self.index -= 1
            return self.items[self.index]
        return None

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Shuffle the order in place; the selected position is kept as a number."""
        (rng or random).shuffle(self.items)