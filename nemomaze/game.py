"""Settings, the interactive game loop and the command-line entry point."""

from __future__ import annotations

import os
import random
import sys
import time
from dataclasses import dataclass
from typing import TextIO

from nemomaze.maze import Maze, MazeError

MAX_STEPS = 350
"""Steps after which an automated game gives up."""

DEFAULT_SETTINGS_FILE = "settings.ini"

_PROMPT = "Command (<space> to step, <a> to automate, <s> for stats, <q> to quit): "
_WHITESPACE = {" ", "\n", "\r", "\t"}


class SettingsError(Exception):
    """Raised when the game cannot be configured as asked."""


@dataclass
class Settings:
    """Game options read from a settings file."""

    maze_file: str = "maze_lecture.txt"
    backtrack: bool = True
    frame_delay: int = 500
    num_sharks: int = 0


def _parse_int(setting: str, value: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise SettingsError(f"{setting} setting expects an integer, given: {value}") from exc


def load_settings(path: str) -> Settings:
    """Read ``key=value`` lines; all whitespace is ignored, blank lines skipped."""
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except OSError as exc:
        raise SettingsError(f"could not open file {path}") from exc

    settings = Settings()
    for raw in lines:
        line = "".join(c for c in raw if c not in _WHITESPACE)
        if not line:
            continue
        setting, sep, value = line.partition("=")
        if not sep:
            value = line

        if setting == "mazeFile":
            try:
                with open(value, encoding="utf-8"):
                    pass
            except OSError as exc:
                raise SettingsError(f"could not open file {value}") from exc
            settings.maze_file = value
        elif setting == "havePlayerBackTack":
            if value not in ("true", "false"):
                raise SettingsError(
                    "havePlayerBackTack setting incorrect format, "
                    f"expected: true/false, given: {value}"
                )
            settings.backtrack = value == "true"
        elif setting == "frameTimeDelay":
            settings.frame_delay = _parse_int(setting, value)
        elif setting == "numSharks":
            settings.num_sharks = _parse_int(setting, value)
        else:
            raise SettingsError(f"unknown setting {setting} {value}")
    return settings


class Game:
    """A maze with its player and sharks, driven step by step or automatically."""

    def __init__(
        self,
        maze_file: str,
        num_sharks: int = 0,
        delay: int = 500,
        backtrack: bool = True,
        rng: random.Random | None = None,
    ) -> None:
        self._maze = Maze(maze_file, backtrack, rng)
        self._delay = delay
        self._automate = False
        self._show_steps = False
        self._steps = 0

        max_sharks = self._maze.num_open_rooms() // 2
        if num_sharks > max_sharks:
            raise SettingsError(
                f"too many sharks: {num_sharks} for game size: {max_sharks}"
            )
        for _ in range(num_sharks):
            self._maze.add_baddie()

    @classmethod
    def from_settings(
        cls, path: str = DEFAULT_SETTINGS_FILE, rng: random.Random | None = None
    ) -> Game:
        """Create a game configured by the settings file at ``path``."""
        settings = load_settings(path)
        return cls(
            settings.maze_file,
            settings.num_sharks,
            settings.frame_delay,
            settings.backtrack,
            rng,
        )

    @property
    def maze(self) -> Maze:
        return self._maze

    @property
    def steps(self) -> int:
        """Number of steps taken so far."""
        return self._steps

    def run(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        """Play until the exit is found, the player is stuck, or the user quits."""
        inp = stdin if stdin is not None else sys.stdin
        out = stdout if stdout is not None else sys.stdout

        teleports: list[int] = []
        self._show_steps = False
        current = next_room = self._maze.player.room

        while True:
            self._clear_screen(out)

            if not current.adjacent(next_room):
                teleports.append(self._steps)

            if self._show_steps:
                runtime = self._maze.player_update_runtime()
                out.write(
                    f"Step: {self._steps}, Total Player::Update Runtime: {runtime:g}, "
                    f"Runtime/Step: {self._per_step(runtime):g}\n"
                )
                out.write(
                    "Teleported at steps: " + "".join(f" {n}" for n in teleports) + "\n"
                )
                out.write(f"Teleported: {len(teleports)} times. \n")

            self._maze.draw(out)

            player = self._maze.player
            if player.stuck():
                out.write("Got stuck with no way out :( \n")
                self._wait_for_enter(inp, out)
                return
            if player.found_exit():
                out.write("You've reached the end! Congratulations! \n")
                self._wait_for_enter(inp, out)
                return

            if not self._automate:
                out.write(_PROMPT)
                out.flush()
                line = inp.readline()
                if not line:
                    out.write("Quitting Game.\n")
                    return
                command = line.rstrip("\n")[:1]
                if command == "q":
                    out.write("Quitting Game.\n")
                    return
                if command == "a":
                    self._automate = True
                elif command == "s":
                    self._show_steps = not self._show_steps
                elif command != " ":
                    out.write("\a\n")
                    continue
            else:
                if self._steps >= MAX_STEPS:
                    out.write("Reached max steps, quitting.\n")
                    return
                time.sleep(self._delay / 1000)

            self._maze.update()
            self._maze.interact()

            current = next_room
            next_room = self._maze.player.room
            self._steps += 1

    def _per_step(self, runtime: float) -> float:
        if self._steps:
            return runtime / self._steps
        return float("nan") if runtime == 0 else float("inf")

    @staticmethod
    def _wait_for_enter(inp: TextIO, out: TextIO) -> None:
        out.write("Press enter to continue.")
        out.flush()
        inp.readline()

    @staticmethod
    def _clear_screen(out: TextIO) -> None:
        term = os.environ.get("TERM")
        if term is None or term == "dumb":
            out.write("\n")
        else:
            out.write("\x1b[2J\x1b[H")
        out.flush()


def main(argv: list[str] | None = None) -> int:
    """Run the game configured by a settings file (``settings.ini`` by default)."""
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else DEFAULT_SETTINGS_FILE
    try:
        game = Game.from_settings(path)
    except (SettingsError, MazeError) as exc:
        print(f"ERROR Game: {exc}. Exiting.", file=sys.stderr)
        return 1
    game.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())