import io
import random

import pytest

from nemomaze.entity import Interact
from nemomaze.maze import MAX_ACTORS, Maze, MazeError
from nemomaze.room import Room
from nemomaze.shark import Shark

CORRIDOR = "XXXXX\nXS EX\nXXXXX\n"
OPEN = (
    "XXXXXXX\n"
    "XS    X\n"
    "X     X\n"
    "X     X\n"
    "X     X\n"
    "X    EX\n"
    "XXXXXXX\n"
)


def _lines(maze):
    return maze.render().splitlines()


def test_dimensions_follow_text():
    maze = Maze.from_text(CORRIDOR)
    lines = CORRIDOR.splitlines()
    assert maze.rows == len(lines)
    assert maze.cols == len(lines[0])


def test_start_and_end_found():
    maze = Maze.from_text(CORRIDOR)
    assert maze.start == Room(1, 1)
    assert maze.end == Room(3, 1)
    assert maze.found_exit(maze.end)
    assert not maze.found_exit(maze.start)


def test_open_rooms_exclude_walls_and_start():
    maze = Maze.from_text(CORRIDOR)
    assert maze.num_open_rooms() == 2
    assert maze.is_open(maze.end)
    assert not maze.is_open(maze.start)
    assert not maze.is_open(Room(0, 0))


def test_carriage_returns_are_ignored():
    plain = Maze.from_text(CORRIDOR)
    windows = Maze.from_text(CORRIDOR.replace("\n", "\r\n"))
    assert windows.render() == plain.render()
    assert windows.num_open_rooms() == plain.num_open_rooms()


def test_load_from_file(tmp_path):
    path = tmp_path / "maze.txt"
    path.write_text(CORRIDOR)
    maze = Maze(str(path))
    assert maze.render() == Maze.from_text(CORRIDOR).render()


def test_missing_file_raises(tmp_path):
    with pytest.raises(MazeError):
        Maze(str(tmp_path / "absent.txt"))


@pytest.mark.parametrize("text", ["", "XXX"])
def test_text_without_rows_raises(text):
    with pytest.raises(MazeError):
        Maze.from_text(text)


def test_text_after_final_newline_raises():
    with pytest.raises(MazeError):
        Maze.from_text(CORRIDOR + "XX")


def test_initial_render_marks_target():
    maze = Maze.from_text(CORRIDOR)
    lines = _lines(maze)
    assert lines[maze.start.y][maze.start.x] == "T"
    assert lines[0] == "XXXXX"


def test_render_shows_player_after_step():
    maze = Maze.from_text(CORRIDOR)
    maze.update()
    lines = _lines(maze)
    assert lines[maze.start.y][maze.start.x] == "@"
    target = maze.player.target_room()
    assert lines[target.y][target.x] == "T"


def test_draw_writes_map_and_speech():
    maze = Maze.from_text(CORRIDOR)
    out = io.StringIO()
    maze.draw(out)
    assert out.getvalue() == maze.render() + "===\nNemo: Where is the exit?\n"


def test_add_baddie_limit():
    maze = Maze.from_text(OPEN, rng=random.Random(2))
    for _ in range(MAX_ACTORS - 1):
        maze.add_baddie()
    with pytest.raises(MazeError):
        maze.add_baddie()
    assert len(maze.entities) == MAX_ACTORS


def test_add_baddie_without_space():
    maze = Maze.from_text("XXX\nXSX\nXXX\n")
    with pytest.raises(MazeError):
        maze.add_baddie()


def test_rand_int_accepts_reversed_bounds():
    maze = Maze.from_text(CORRIDOR, rng=random.Random(3))
    values = {maze.rand_int(5, 1) for _ in range(200)}
    assert values <= {1, 2, 3, 4, 5}
    assert len(values) > 1


def test_attack_drawn_after_player_moves():
    maze = Maze.from_text(OPEN, rng=random.Random(5))
    maze.player.update()
    maze.add_baddie()
    shark = maze.entities[1]
    shark.move(maze.player.room)
    lines = _lines(maze)
    room = maze.player.room
    assert lines[room.y][room.x] == "!"


def test_sharks_together_greet():
    maze = Maze.from_text(OPEN, rng=random.Random(6))
    maze.add_baddie()
    maze.add_baddie()
    meeting = Room(3, 3)
    for shark in maze.entities[1:]:
        shark.move(meeting)
    maze.interact()
    assert [e.interact for e in maze.entities] == [
        Interact.ALONE,
        Interact.GREET,
        Interact.GREET,
    ]
    assert _lines(maze)[meeting.y][meeting.x] == "2"


def test_interact_resets_to_alone():
    maze = Maze.from_text(OPEN, rng=random.Random(8))
    maze.add_baddie()
    shark = maze.entities[1]
    shark.move(maze.player.room)
    maze.interact()
    shark.move(Room(3, 3))
    maze.interact()
    assert shark.interact is Interact.ALONE
    assert maze.player.interact is Interact.ALONE


def test_update_moves_player_and_times_it():
    maze = Maze.from_text(CORRIDOR)
    assert maze.player_update_runtime() == 0
    for _ in range(3):
        maze.update()
    assert maze.player.found_exit()
    assert maze.player_update_runtime() >= 0
    lines = _lines(maze)
    assert lines[maze.end.y][maze.end.x] == "@"
    assert "T" not in maze.render()