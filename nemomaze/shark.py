"""Sharks that wander the maze at random."""

from __future__ import annotations

from nemomaze.entity import Entity, Interact


class Shark(Entity):
    """A roaming enemy that moves one room in a random direction per update."""

    def update(self) -> None:
        direction = self.maze.rand_int(0, 3)
        x, y = self.room.x, self.room.y
        rows, cols = self.maze.rows, self.maze.cols

        # Stay clear of the outer walls, keeping one spare cell of room.
        if direction == 0:
            if y <= 2:
                return
            y -= 1
        elif direction == 1:
            if y >= rows - 3:
                return
            y += 1
        elif direction == 2:
            if x <= 2:
                return
            x -= 1
        elif direction == 3:
            if x >= cols - 3:
                return
            x += 1
        else:
            return

        destination = type(self.room)(x, y)
        if self.maze.is_open(destination):
            self.move(destination)

    def say(self) -> str:
        if self.interact is Interact.ATTACK:
            return f"{self.name}: OM NOM!"
        if self.interact is Interact.ALONE:
            return f"{self.name}: I'm hungry"
        if self.interact is Interact.GREET:
            return f"{self.name}: Hey Buddy"
        return f"{self.name}: ..."