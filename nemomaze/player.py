"""The maze explorer, searching depth first for the exit."""

from __future__ import annotations

from typing import TYPE_CHECKING

from nemomaze.containers import Stack
from nemomaze.entity import Entity, Interact, State
from nemomaze.room import Room

if TYPE_CHECKING:
    from nemomaze.maze import Maze

NO_ROOM = Room(-1, -1)
"""Returned by :meth:`Player.target_room` when nothing is left to look at."""

_DIRECTIONS = (Room(-1, 0), Room(1, 0), Room(0, -1), Room(0, 1))

_LOST_LINES = {
    State.LOOK: "Where is the exit?",
    State.NOEXIT: "Oh no! I am Trapped!",
    State.BACKTRACK: "Got to backtrack...",
}


class Player(Entity):
    """Explores the maze one room per update until it finds the exit or gives up.

    With backtracking enabled the player walks back over its own trail to
    reach the next room to look at; otherwise it jumps straight there.
    """

    def __init__(
        self, maze: Maze, room: Room, name: str, sprite: str, backtrack: bool
    ) -> None:
        super().__init__(maze, room, name, sprite)
        self._backtrack = backtrack
        self._looking: Stack[Room] = Stack()
        self._trail: Stack[Room] = Stack()
        self._discovered: set[Room] = {room}
        self._looking.push(room)

    @property
    def backtrack_enabled(self) -> bool:
        return self._backtrack

    def found_exit(self) -> bool:
        return self.state is State.EXIT

    def stuck(self) -> bool:
        return self.state is State.NOEXIT

    def target_room(self) -> Room:
        """The next room to look around, or ``NO_ROOM`` if there is none."""
        if self._looking.empty():
            return NO_ROOM
        return self._looking.peek()

    def say(self) -> str:
        if self.state is State.EXIT:
            return f"{self.name}: WEEEEEEEEE!"
        if self.interact is Interact.ATTACK:
            return f"{self.name}: OUCH!"
        if self.interact is Interact.GREET:
            return ""
        line = _LOST_LINES.get(self.state, "A - hee - ahee ha - hee!")
        return f"{self.name}: {line}"

    def update(self) -> None:
        if self.state is State.BACKTRACK:
            self._step_back()
        elif self.state is State.LOOK:
            self._look()

    def _step_back(self) -> None:
        previous = self._trail.peek()
        self._trail.pop()
        self.move(previous)
        if self._trail.empty() or self.room.adjacent(self._looking.peek()):
            self.state = State.LOOK

    def _look(self) -> None:
        target = self.target_room()
        self._looking.pop()
        if self._backtrack:
            self._trail.push(self.room)
        self.move(target)
        if self.maze.found_exit(target):
            self.state = State.EXIT
            return
        for step in _DIRECTIONS:
            neighbour = target + step
            if self.maze.is_open(neighbour) and neighbour not in self._discovered:
                self._looking.push(neighbour)
                self._discovered.add(neighbour)
        if self._looking.empty():
            self.state = State.NOEXIT
            return
        if self._backtrack and not self.room.adjacent(self._looking.peek()):
            self.state = State.BACKTRACK