"""Line-oriented front end for the player."""

from __future__ import annotations

import argparse
import itertools
import sys
import threading
from collections.abc import Iterable
from typing import TextIO

from .player import TICKS_PER_SECOND, TrackTuner

TITLE = "Project - Track Tuner"
WELCOME = "Welcome To Track Tuner."
TICK_INTERVAL = 1.0
HELP = (
    "commands: open DIR, list, play N|NAME, pause, next, prev, loop, shuffle, "
    "vol+, vol-, full, mute, back, fwd, seek SECONDS, status, quit"
)


def _seconds(ticks: int) -> str:
    return f"{ticks / TICKS_PER_SECOND:.1f}s"


def _write_list(tuner: TrackTuner, out: TextIO) -> None:
    selected = tuner.playlist.index if tuner.playlist else -1
    for number, name in enumerate(tuner.songs, start=1):
        marker = "*" if number - 1 == selected else " "
        print(f"{marker}{number:3d}. {name}", file=out)


def _choose(tuner: TrackTuner, argument: str) -> str:
    if argument.isdigit():
        name = tuner.songs[int(argument) - 1] if int(argument) >= 1 else ""
        if not name:
            raise IndexError(f"song number {argument} out of range")
    else:
        name = argument
    tuner.choose(name)
    return name


def _handle(tuner: TrackTuner, command: str, argument: str, out: TextIO) -> None:
    if command == "open":
        tuner.open_folder(argument)
        print(WELCOME, file=out)
        _write_list(tuner, out)
    elif command == "list":
        _write_list(tuner, out)
    elif command == "play":
        print(f"Playing: {_choose(tuner, argument)}", file=out)
    elif command == "pause":
        print(f"State: {tuner.play_pause().value}", file=out)
    elif command in ("next", "prev"):
        name = tuner.next() if command == "next" else tuner.previous()
        print(f"Playing: {name}" if name else "No more songs.", file=out)
    elif command == "loop":
        print(f"Loop {'on' if tuner.toggle_loop() else 'off'}", file=out)
    elif command == "shuffle":
        print(f"Shuffle {'on' if tuner.toggle_shuffle(None) else 'off'}", file=out)
        _write_list(tuner, out)
    elif command in ("vol+", "vol-", "full", "mute"):
        action = {
            "vol+": tuner.volume_up,
            "vol-": tuner.volume_down,
            "full": tuner.full_volume,
            "mute": tuner.mute,
        }[command]
        print(f"Volume: {action()}", file=out)
    elif command == "back":
        print(f"Position: {_seconds(tuner.back15())}", file=out)
    elif command == "fwd":
        print(f"Position: {_seconds(tuner.forward15())}", file=out)
    elif command == "seek":
        tuner.seek(round(float(argument) * TICKS_PER_SECOND))
        print(f"Position: {_seconds(tuner.position)}", file=out)
    elif command == "status":
        backend = tuner.backend
        print(
            f"{backend.state.value} {tuner.song_name or '-'} "
            f"{_seconds(backend.current_time)}/{_seconds(backend.duration or 0)} "
            f"volume {tuner.volume_level}",
            file=out,
        )
    elif command == "help":
        print(HELP, file=out)
    else:
        print(f"Unknown command: {command}", file=out)


def run(tuner: TrackTuner, lines: Iterable[str], out: TextIO) -> None:
    """Execute one command per line until the input ends or a quit command."""
    print(TITLE, file=out)
    for line in lines:
        command, _, argument = line.strip().partition(" ")
        command = command.lower()
        if not command:
            continue
        if command in ("quit", "exit"):
            break
        with tuner.lock:
            try:
                _handle(tuner, command, argument.strip(), out)
            except (FileNotFoundError, RuntimeError, ValueError, IndexError) as error:
                message = error.args[0] if error.args else str(error)
                print(message, file=out)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="tracktuner", description="Play the MP3 files of a folder.")
    parser.add_argument("folder", nargs="?", help="folder to open at start")
    args = parser.parse_args(argv)

    from .backend import PygameBackend

    with PygameBackend() as backend:
        tuner = TrackTuner(backend)
        stopping = threading.Event()

        def ticker() -> None:
            while not stopping.wait(TICK_INTERVAL):
                with tuner.lock:
                    tuner.tick()

        thread = threading.Thread(target=ticker, daemon=True)
        thread.start()
        lines: Iterable[str] = sys.stdin
        if args.folder:
            lines = itertools.chain([f"open {args.folder}"], sys.stdin)
        try:
            run(tuner, lines, sys.stdout)
        finally:
            stopping.set()
            thread.join()
    return 0