import pytest

from nemomaze.entity import Entity, Interact, State
from nemomaze.room import Room


class Walker(Entity):
    def update(self):
        self.move(self.room + Room(1, 0))

    def say(self):
        return f"{self.name} walks"


def test_entity_is_abstract():
    with pytest.raises(TypeError):
        Entity(None, Room(), "ghost", "g")


def test_new_entity_looks_alone():
    walker = Walker(None, Room(2, 3), "walker", "w")
    assert walker.state is State.LOOK
    assert walker.interact is Interact.ALONE


def test_move_changes_room():
    walker = Walker(None, Room(2, 3), "walker", "w")
    walker.move(Room(4, 5))
    assert walker.room == Room(4, 5)


def test_draw_returns_sprite():
    walker = Walker(None, Room(), "walker", "w")
    assert walker.draw() == "w"


def test_subclass_update_and_say():
    start = Room(2, 3)
    walker = Walker(None, start, "walker", "w")
    walker.update()
    assert walker.room == start + Room(1, 0)
    assert walker.say() == "walker walks"


def test_maze_reference_is_kept():
    marker = object()
    walker = Walker(marker, Room(), "walker", "w")
    assert walker.maze is marker


def test_state_enum_members():
    assert [s.name for s in State] == ["LOOK", "NOEXIT", "BACKTRACK", "EXIT"]
    assert [i.name for i in Interact] == ["GREET", "ATTACK", "ALONE"]
    walker = Walker(None, Room(), "walker", "w")
    assert walker.state is list(State)[0]
    assert walker.interact is list(Interact)[-1]