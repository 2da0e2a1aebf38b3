# tracktuner

A small MP3 player that works on one folder at a time. Open a directory and
it lists every `*.mp3` file in it, sorted by name without regard to case.
You can then play a track, stop and resume it, move to the previous or next
track, seek 15 seconds back or forward or to a given second, and change the
volume in steps of 10 on a 0–100 scale. There is a loop mode and a shuffle
mode. When a track ends, playback moves on to the next one in the list and
stops after the last. In loop mode the same track plays again.

Audio output goes through `pygame`'s mixer.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install ".[test]"
```

## Command line

```
tracktuner [FOLDER]
```

The program prints its title and then reads one command per line from
standard input. If `FOLDER` is given, it is opened first, as if `open FOLDER`
had been typed. Once a second it checks playback and moves to the next track
(or repeats the current one in loop mode) when a track has ended, unless you
stopped it yourself.

| Command        | Effect                                                        |
|----------------|---------------------------------------------------------------|
| `open DIR`     | load the MP3 files of `DIR` and list them                     |
| `list`         | list the tracks; `*` marks the selected one                   |
| `play N\|NAME` | play track number `N` (from 1) or the track called `NAME`     |
| `pause`        | stop when playing, resume when stopped; prints the state      |
| `next`, `prev` | play the following or preceding track                         |
| `loop`         | toggle loop mode                                              |
| `shuffle`      | shuffle the list, or restore folder order if already shuffled |
| `vol+`, `vol-` | raise or lower the volume by 10                               |
| `full`, `mute` | set the volume to 100 or 0                                    |
| `back`, `fwd`  | jump 15 seconds back (not before 0) or forward (not past end) |
| `seek SECONDS` | move to the given position                                    |
| `status`       | show state, track, position, length and volume                |
| `help`         | list the commands                                             |
| `quit`, `exit` | leave the program (end of input does the same)                |

Errors, such as a folder that does not exist ("Directory Does Not Exist.") or
a command given before a folder is open, are printed and the program carries
on.

## Using it from Python

The playback logic lives in `tracktuner.player.TrackTuner`. It drives any
object that follows the `tracktuner.player.Backend` protocol: `state`
(a `MediaState`), `current_time` and `duration` in 100-nanosecond ticks,
`volume` from 0.0 to 1.0, and `load`, `play` and `stop`.
`tracktuner.backend.PygameBackend` plays real audio and can be used as a
context manager, which shuts the mixer down on exit.

```python
from tracktuner.backend import PygameBackend
from tracktuner.player import TrackTuner

with PygameBackend() as backend:
    tuner = TrackTuner(backend)
    tuner.open_folder("/path/to/music")   # FileNotFoundError if missing
    tuner.choose("song.mp3")
    tuner.volume_up()
    tuner.forward15()
    tuner.toggle_loop()
    tuner.tick()          # call periodically; advances when a track ends
```

`tracktuner.app.run(tuner, lines, out)` executes the commands above from any
iterable of lines, writing replies to `out`.

The folder listing is handled by `tracktuner.playlist.Playlist` (with
`reload`, `select`, `advance`, `retreat` and `shuffle`) and
`tracktuner.playlist.find_songs`.

## What it does not do

There is no graphical window: no buttons, sliders, track artwork or
background image. Control is by typed commands only, and the position is
shown only when a command reports it.

## Running the tests

```
pytest
```