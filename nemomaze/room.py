"""Grid coordinates of maze rooms."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Room:
    """A cell on the maze grid."""

    x: int = 0
    y: int = 0

    def adjacent(self, other: Room) -> bool:
        """True when ``other`` is this room or one orthogonal step away."""
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy <= 1

    def __add__(self, other: Room) -> Room:
        if not isinstance(other, Room):
            return NotImplemented
        return Room(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Room) -> Room:
        if not isinstance(other, Room):
            return NotImplemented
        return Room(self.x - other.x, self.y - other.y)

    def __str__(self) -> str:
        return f"({self.x},{self.y})"