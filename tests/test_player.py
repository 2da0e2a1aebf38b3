import random

import pytest

from tracktuner.player import (
    DIRECTORY_MISSING,
    SKIP_TICKS,
    MediaState,
    TrackTuner,
)

DURATION = 1_800_000_000


class FakeBackend:
    def __init__(self):
        self.state = MediaState.UNAVAILABLE
        self.current_time = 0
        self.duration = None
        self.volume = 1.0
        self.loaded = []

    def load(self, path):
        self.loaded.append(path)
        self.duration = DURATION
        self.current_time = 0
        self.state = MediaState.STOPPED

    def play(self):
        self.state = MediaState.PLAYING

    def stop(self):
        self.state = MediaState.STOPPED


@pytest.fixture
def folder(tmp_path):
    for name in ("a.mp3", "b.mp3", "c.mp3"):
        (tmp_path / name).write_bytes(b"")
    return tmp_path


@pytest.fixture
def tuner(folder):
    t = TrackTuner(FakeBackend())
    t.open_folder(folder)
    return t


def test_open_missing_folder(tmp_path):
    tuner = TrackTuner(FakeBackend())
    with pytest.raises(FileNotFoundError, match=DIRECTORY_MISSING):
        tuner.open_folder(tmp_path / "nope")


def test_requires_folder():
    tuner = TrackTuner(FakeBackend())
    with pytest.raises(RuntimeError):
        tuner.next()


def test_choose_plays(tuner, folder):
    tuner.choose("b.mp3")
    assert tuner.backend.loaded == [folder / "b.mp3"]
    assert tuner.backend.state is MediaState.PLAYING
    assert tuner.song_name == "b.mp3"
    assert tuner.timer_enabled
    assert tuner.playlist.index == 1


def test_choose_unknown(tuner):
    with pytest.raises(ValueError):
        tuner.choose("zzz.mp3")


def test_play_pause_toggles(tuner):
    tuner.choose("a.mp3")
    assert tuner.play_pause() is MediaState.STOPPED
    assert tuner.stopped_by_user
    assert tuner.play_pause() is MediaState.PLAYING
    assert not tuner.stopped_by_user


def test_next_and_previous(tuner):
    tuner.choose("a.mp3")
    assert tuner.next() == "b.mp3"
    assert tuner.previous() == "a.mp3"
    assert tuner.previous() is None
    assert tuner.song_name == "a.mp3"


def test_play_next_at_end_stops(tuner):
    tuner.choose("c.mp3")
    assert tuner.play_next() is None
    assert tuner.backend.state is MediaState.STOPPED


def test_tick_moves_on_when_song_ends(tuner, folder):
    tuner.choose("a.mp3")
    tuner.backend.state = MediaState.STOPPED
    tuner.tick()
    assert tuner.song_name == "b.mp3"
    assert tuner.backend.loaded[-1] == folder / "b.mp3"


def test_tick_loop_replays_same(tuner, folder):
    tuner.choose("b.mp3")
    tuner.toggle_loop()
    tuner.backend.state = MediaState.STOPPED
    tuner.tick()
    assert tuner.backend.loaded == [folder / "b.mp3", folder / "b.mp3"]
    assert tuner.backend.state is MediaState.PLAYING


def test_tick_ignores_user_stop(tuner):
    tuner.choose("a.mp3")
    tuner.play_pause()
    tuner.tick()
    assert len(tuner.backend.loaded) == 1


def test_tick_tracks_position(tuner):
    tuner.choose("a.mp3")
    tuner.backend.current_time = 42
    tuner.tick()
    assert tuner.position == 42
    assert tuner.position_max == DURATION


def test_on_time_at_end_plays_next(tuner):
    tuner.choose("a.mp3")
    tuner.on_time(DURATION, DURATION)
    assert tuner.song_name == "b.mp3"
    tuner.on_time(0, DURATION)
    assert tuner.song_name == "b.mp3"


def test_volume_limits(tuner):
    assert tuner.volume_level == 100
    assert tuner.volume_up() == 100
    tuner.mute()
    assert tuner.backend.volume == 0.0
    assert tuner.volume_down() == 0
    tuner.full_volume()
    assert tuner.backend.volume == 1.0


def test_set_volume_before_open_keeps_backend():
    backend = FakeBackend()
    tuner = TrackTuner(backend)
    assert tuner.set_volume(40) == 40
    assert backend.volume == 1.0


def test_set_volume_after_open(tuner):
    tuner.set_volume(50)
    assert tuner.backend.volume == 0.5


def test_skip_forward_and_back(tuner):
    tuner.choose("a.mp3")
    assert tuner.forward15() == SKIP_TICKS
    assert tuner.back15() == 0
    assert tuner.back15() == 0
    tuner.seek(DURATION - 1)
    assert tuner.forward15() == DURATION


def test_forward_without_media():
    tuner = TrackTuner(FakeBackend())
    with pytest.raises(RuntimeError):
        tuner.forward15()


def test_toggle_loop(tuner):
    assert tuner.toggle_loop() is True
    assert tuner.toggle_loop() is False


def test_toggle_shuffle_restores(tuner):
    original = tuner.songs
    assert tuner.toggle_shuffle(random.Random(3)) is True
    assert sorted(tuner.songs) == sorted(original)
    assert tuner.toggle_shuffle(random.Random(3)) is False
    assert tuner.songs == original