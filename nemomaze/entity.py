"""Common base for everything that occupies a room in the maze."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import TYPE_CHECKING

from nemomaze.room import Room

if TYPE_CHECKING:
    from nemomaze.maze import Maze


class State(Enum):
    """What an entity is currently doing."""

    LOOK = auto()
    NOEXIT = auto()
    BACKTRACK = auto()
    EXIT = auto()


class Interact(Enum):
    """How an entity relates to others sharing its room."""

    GREET = auto()
    ATTACK = auto()
    ALONE = auto()


class Entity(ABC):
    """Something with a name and a sprite that lives in a maze room."""

    def __init__(self, maze: Maze, room: Room, name: str, sprite: str) -> None:
        self.maze = maze
        self.room = room
        self.name = name
        self.sprite = sprite
        self.state = State.LOOK
        self.interact = Interact.ALONE

    def move(self, room: Room) -> None:
        self.room = room

    @abstractmethod
    def update(self) -> None:
        """Advance this entity by one step."""

    @abstractmethod
    def say(self) -> str:
        """Return what the entity says about its situation."""

    def draw(self) -> str:
        """Return the character that represents this entity on the map."""
        return self.sprite