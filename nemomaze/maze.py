"""The maze grid, its inhabitants and how they are drawn."""

from __future__ import annotations

import random
import sys
import time
from typing import TextIO

from nemomaze.entity import Entity, Interact
from nemomaze.player import Player
from nemomaze.room import Room
from nemomaze.shark import Shark

MAX_ACTORS = 50
"""Most entities, the player included, a maze can hold."""


class MazeError(Exception):
    """Raised when a maze cannot be loaded or populated."""


class Maze:
    """A rectangular maze read from text.

    ``X`` marks a wall, ``S`` the start and ``E`` the exit; every line,
    the last included, ends with a newline.
    """

    def __init__(
        self,
        filename: str,
        backtrack: bool = True,
        rng: random.Random | None = None,
    ) -> None:
        try:
            with open(filename, encoding="utf-8", newline="") as handle:
                text = handle.read()
        except OSError as exc:
            raise MazeError(f"could not open file {filename}") from exc
        self._load(text, backtrack, rng)

    @classmethod
    def from_text(
        cls,
        text: str,
        backtrack: bool = True,
        rng: random.Random | None = None,
    ) -> Maze:
        """Build a maze from its textual layout."""
        maze = cls.__new__(cls)
        maze._load(text, backtrack, rng)
        return maze

    def _load(self, text: str, backtrack: bool, rng: random.Random | None) -> None:
        self._rng = rng if rng is not None else random.Random()
        rows = text.count("\n")
        cell_count = sum(1 for c in text if c not in "\r\n")
        if rows == 0 or cell_count < rows:
            raise MazeError("maze needs at least one non-empty line ending in a newline")
        cols = cell_count // rows

        grid = [["X"] * cols for _ in range(rows)]
        x = y = 0
        for c in text:
            if c == "\n":
                y += 1
            elif c != "\r":
                if y >= rows:
                    raise MazeError("maze text continues after the final newline")
                grid[y][x % cols] = c
                x += 1

        self._rows = rows
        self._cols = cols
        self._start = Room()
        self._end = Room()
        open_rooms: list[Room] = []
        for y, row in enumerate(grid):
            for x, cell in enumerate(row):
                if cell not in ("X", "S"):
                    open_rooms.append(Room(x, y))
                if cell == "S":
                    row[x] = " "
                    self._start = Room(x, y)
                elif cell == "E":
                    row[x] = " "
                    self._end = Room(x, y)
        open_rooms.reverse()
        self._open_rooms = open_rooms
        self._open_set = frozenset(open_rooms)
        self._template = grid
        self._duration = 0.0

        self._player = Player(self, self._start, "Nemo", "@", backtrack)
        self._entities: list[Entity] = [self._player]

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def start(self) -> Room:
        return self._start

    @property
    def end(self) -> Room:
        return self._end

    @property
    def player(self) -> Player:
        return self._player

    @property
    def entities(self) -> tuple[Entity, ...]:
        """All entities, the player first."""
        return tuple(self._entities)

    def num_open_rooms(self) -> int:
        return len(self._open_rooms)

    def is_open(self, room: Room) -> bool:
        return room in self._open_set

    def found_exit(self, room: Room) -> bool:
        return room == self._end

    def rand_int(self, low: int, high: int) -> int:
        """Uniform random integer between the bounds, inclusive, in either order."""
        if high < low:
            low, high = high, low
        return self._rng.randint(low, high)

    def add_baddie(self) -> int:
        """Place a shark in a random open room; return the number of entities."""
        if len(self._entities) >= MAX_ACTORS:
            raise MazeError(f"a maze holds at most {MAX_ACTORS} entities")
        if all(room == self._player.room for room in self._open_rooms):
            raise MazeError("no open room is free for a shark")
        while True:
            room = self._open_rooms[self.rand_int(0, len(self._open_rooms) - 1)]
            if room != self._player.room:
                break
        name = f"Shark {len(self._entities) - 1}"
        self._entities.append(Shark(self, room, name, "S"))
        return len(self._entities)

    def player_update_runtime(self) -> float:
        """Total nanoseconds spent in the player's updates."""
        return self._duration

    def update(self) -> None:
        started = time.perf_counter_ns()
        self._player.update()
        self._duration += time.perf_counter_ns() - started
        for entity in self._entities[1:]:
            entity.update()

    def interact(self) -> None:
        """Set how entities sharing a room relate; meeting the player is an attack."""
        for entity in self._entities:
            entity.interact = Interact.ALONE
        for i, first in enumerate(self._entities[:-1]):
            for second in self._entities[i + 1 :]:
                if first.room != second.room:
                    continue
                if first is self._player:
                    first.interact = Interact.ATTACK
                    second.interact = Interact.ATTACK
                elif first.interact is not Interact.ATTACK:
                    first.interact = Interact.GREET
                    second.interact = Interact.GREET

    def render(self) -> str:
        """Return the map with entities and the player's next target drawn in.

        ``@`` is the player, ``S`` a shark, ``2``-``9`` several sharks,
        ``!`` an attack and ``T`` the room the player looks at next.
        """
        canvas = [row[:] for row in self._template]
        for entity in self._entities:
            row = canvas[entity.room.y]
            cell = row[entity.room.x]
            if cell == " ":
                row[entity.room.x] = entity.draw()
            elif cell == "@":
                row[entity.room.x] = "!"
            elif cell == "S":
                row[entity.room.x] = "2"
            elif cell not in ("!", "9"):
                row[entity.room.x] = chr(ord(cell) + 1)

        if not (self._player.stuck() or self._player.found_exit()):
            target = self._player.target_room()
            if target.x >= 0 and target.y >= 0:
                canvas[target.y][target.x] = "T"

        return "".join("".join(row) + "\n" for row in canvas)

    def draw(self, out: TextIO | None = None) -> None:
        """Write the rendered map followed by what every entity says."""
        out = out if out is not None else sys.stdout
        out.write(self.render())
        out.write("===\n")
        for entity in self._entities:
            out.write(entity.say() + "\n")