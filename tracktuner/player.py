"""Playback control: playlist navigation, looping, shuffling, seeking and volume."""

from __future__ import annotations

import random
import threading
from enum import Enum
from pathlib import Path
from typing import Protocol

from .playlist import NO_SELECTION, Playlist

TICKS_PER_SECOND = 10_000_000
SKIP_TICKS = 150_000_000
VOLUME_MIN = 0
VOLUME_MAX = 100
VOLUME_STEP = 10
DIRECTORY_MISSING = "Directory Does Not Exist."
NO_FOLDER = "Open a folder first."
NO_MEDIA = "No song is loaded."


class MediaState(Enum):
    UNAVAILABLE = "unavailable"
    PLAYING = "playing"
    STOPPED = "stopped"


class Backend(Protocol):
    """An audio output. Times are in 100-nanosecond ticks; volume is 0.0 to 1.0."""

    state: MediaState
    current_time: int
    duration: int | None
    volume: float

    def load(self, path: Path) -> None: ...

    def play(self) -> None: ...

    def stop(self) -> None: ...


def _clamp_volume(value: int) -> int:
    return max(VOLUME_MIN, min(VOLUME_MAX, value))


class TrackTuner:
    """Drives a backend from a folder playlist the way the player's controls do."""

    def __init__(self, backend: Backend) -> None:
        self.backend = backend
        self.playlist: Playlist | None = None
        self.song_name = ""
        self.position = 0
        self.position_max = 0
        self.volume_level = _clamp_volume(round(backend.volume * VOLUME_MAX))
        self.loop = False
        self.shuffled = False
        self.stopped_by_user = False
        self.timer_enabled = False
        self._update_volume = False
        self.lock = threading.RLock()

    def _require_playlist(self) -> Playlist:
        if self.playlist is None:
            raise RuntimeError(NO_FOLDER)
        return self.playlist

    @property
    def songs(self) -> list[str]:
        return list(self._require_playlist())

    def open_folder(self, folder: str | Path) -> Playlist:
        """Load the songs of *folder*; raise FileNotFoundError if it is not a directory."""
        path = Path(folder)
        if not path.is_dir():
            raise FileNotFoundError(DIRECTORY_MISSING)
        self.playlist = Playlist(path)
        self.shuffled = False
        self._update_volume = True
        return self.playlist

    def _play(self, name: str) -> None:
        playlist = self._require_playlist()
        self.song_name = name
        self.backend.load(playlist.path_of(name))
        self.backend.play()
        self.timer_enabled = True

    def choose(self, name: str) -> None:
        """Select and play the song called *name*."""
        playlist = self._require_playlist()
        try:
            index = playlist.items.index(name)
        except ValueError:
            raise ValueError(f"no such song: {name}") from None
        playlist.select(index)
        self._play(name)

    def play_pause(self) -> MediaState:
        """Stop when playing, play when stopped; return the resulting state."""
        self._update_volume = False
        state = self.backend.state
        if state is MediaState.PLAYING:
            self.stopped_by_user = True
            self.backend.stop()
        elif state is MediaState.STOPPED:
            self.stopped_by_user = False
            self.backend.play()
        self._update_volume = True
        return self.backend.state

    def previous(self) -> str | None:
        name = self._require_playlist().retreat()
        if name is not None:
            self._play(name)
        return name

    def next(self) -> str | None:
        name = self._require_playlist().advance()
        if name is not None:
            self._play(name)
        return name

    def play_next(self) -> str | None:
        """Play the following song, or stop playback after the last one."""
        name = self.next()
        if name is None:
            self.backend.stop()
        return name

    def play_same(self) -> str | None:
        """Start the selected song again from the beginning."""
        playlist = self._require_playlist()
        playlist.index = max(playlist.index - 1, NO_SELECTION)
        return self.play_next()

    def tick(self) -> None:
        """Periodic update: follow the playback position and move on when a song ends."""
        if not self.timer_enabled:
            return
        duration = self.backend.duration
        if duration is not None:
            self.position_max = duration
            self.position = self.backend.current_time
        if self.backend.state is MediaState.STOPPED and not self.stopped_by_user:
            if self.loop:
                self.play_same()
            else:
                self.play_next()

    def on_time(self, time: int, duration: int) -> None:
        if time >= duration:
            self.play_next()

    def seek(self, value: int) -> None:
        self.backend.current_time = value
        self.position = value

    def set_volume(self, value: int) -> int:
        """Move the volume slider to *value* (0 to 100); return the slider value."""
        self.volume_level = _clamp_volume(value)
        if self._update_volume:
            self.backend.volume = self.volume_level / VOLUME_MAX
        return self.volume_level

    def _apply_volume(self, value: int) -> int:
        self.volume_level = _clamp_volume(value)
        self.backend.volume = self.volume_level / VOLUME_MAX
        return self.volume_level

    def volume_up(self) -> int:
        return self._apply_volume(self.volume_level + VOLUME_STEP)

    def volume_down(self) -> int:
        return self._apply_volume(self.volume_level - VOLUME_STEP)

    def full_volume(self) -> int:
        return self._apply_volume(VOLUME_MAX)

    def mute(self) -> int:
        return self._apply_volume(VOLUME_MIN)

    def back15(self) -> int:
        """Jump back 15 seconds, not before the start; return the new time."""
        current = self.backend.current_time
        target = current - SKIP_TICKS if current >= SKIP_TICKS else 0
        self.backend.current_time = target
        self.position = self.backend.current_time
        return self.position

    def forward15(self) -> int:
        """Jump forward 15 seconds, not past the end; return the new time."""
        duration = self.backend.duration
        if duration is None:
            raise RuntimeError(NO_MEDIA)
        current = self.backend.current_time
        target = current + SKIP_TICKS if current + SKIP_TICKS <= duration else duration
        self.backend.current_time = target
        self.position = self.backend.current_time
        return self.position

    def toggle_loop(self) -> bool:
        self.loop = not self.loop
        return self.loop

    def toggle_shuffle(self, rng: random.Random | None = None) -> bool:
        """Shuffle the list, or restore the folder order if already shuffled."""
        playlist = self._require_playlist()
        if self.shuffled:
            playlist.reload()
            self.shuffled = False
        else:
            playlist.shuffle(rng)
            self.shuffled = True
        return self.shuffled