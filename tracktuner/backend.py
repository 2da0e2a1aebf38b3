"""Audio output through pygame's mixer."""

from __future__ import annotations

import os
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .player import TICKS_PER_SECOND, MediaState  # noqa: E402

_TICKS_PER_MS = TICKS_PER_SECOND // 1000


class PygameBackend:
    """Plays one file at a time with ``pygame.mixer.music``."""

    def __init__(self) -> None:
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        self._loaded = False
        self._duration: int | None = None
        self._offset = 0

    def __enter__(self) -> PygameBackend:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        if pygame.mixer.get_init():
            pygame.mixer.music.stop()
            pygame.mixer.quit()
        self._loaded = False
        self._duration = None

    @property
    def state(self) -> MediaState:
        if not self._loaded:
            return MediaState.UNAVAILABLE
        return MediaState.PLAYING if pygame.mixer.music.get_busy() else MediaState.STOPPED

    @property
    def duration(self) -> int | None:
        return self._duration

    @property
    def current_time(self) -> int:
        if not self._loaded:
            return 0
        elapsed = pygame.mixer.music.get_pos()
        if elapsed < 0 or not pygame.mixer.music.get_busy():
            return self._offset
        return min(self._offset + elapsed * _TICKS_PER_MS, self._duration or 0)

    @current_time.setter
    def current_time(self, value: int) -> None:
        if not self._loaded:
            return
        self._offset = max(0, min(int(value), self._duration or 0))
        if pygame.mixer.music.get_busy():
            pygame.mixer.music.play(start=self._offset / TICKS_PER_SECOND)

    @property
    def volume(self) -> float:
        return pygame.mixer.music.get_volume()

    @volume.setter
    def volume(self, value: float) -> None:
        pygame.mixer.music.set_volume(max(0.0, min(1.0, value)))

    def load(self, path: str | Path) -> None:
        """Open *path* for playback, positioned at its start."""
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"no such file: {path}")
        pygame.mixer.music.load(str(path))
        length = pygame.mixer.Sound(str(path)).get_length()
        self._duration = round(length * TICKS_PER_SECOND)
        self._offset = 0
        self._loaded = True

    def play(self) -> None:
        if self._loaded:
            pygame.mixer.music.play(start=self._offset / TICKS_PER_SECOND)

    def stop(self) -> None:
        if self._loaded:
            self._offset = self.current_time
            pygame.mixer.music.stop()