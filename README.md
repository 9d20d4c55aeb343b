# nemomaze

A small terminal simulation. Nemo (`@`) explores a maze read from a text file,
looking for the exit with a depth-first search, while sharks (`S`) wander at
random. The next room Nemo plans to look at is marked `T`. When Nemo and a
shark share a room it is drawn as `!`; several sharks in one room are drawn as
a digit from `2` to `9`.

Under the map each entity says what it is doing: Nemo is looking, backtracking,
trapped, bitten ("OUCH!") or free; a shark is hungry, greeting another shark,
or attacking.

## Installing

    pip install .

## Running

    nemomaze

The command reads `settings.ini` from the current directory. A different
settings file can be given as the first argument:

    nemomaze path/to/settings.ini

Each line of the settings file is `setting=value`; all whitespace is ignored
and blank lines are skipped:

    mazeFile=maze_lecture.txt
    havePlayerBackTack=true
    frameTimeDelay=500
    numSharks=2

- `mazeFile`: the maze file (default `maze_lecture.txt`). The file must exist.
- `havePlayerBackTack`: `true` or `false` (default `true`). With backtracking
  on, Nemo walks back one room at a time to reach the next room to look at.
  With it off, Nemo jumps straight there.
- `frameTimeDelay`: milliseconds between steps when running automatically
  (default `500`).
- `numSharks`: number of sharks (default `0`). It may be at most half the
  number of open rooms.

A missing settings or maze file, an unknown setting, a badly formed value or
too many sharks makes the command print an `ERROR Game: ...` message to
standard error and exit with status 1.

### Maze files

A maze is a rectangle of characters with one newline after each row, the last
row included. `X` is a wall, `S` is the start, `E` is the exit, and a space is
an open room.

### Controls

At each prompt enter:

- a space to take one step,
- `a` to run automatically (for at most 350 steps),
- `s` to show or hide step and timing statistics (player update time in
  nanoseconds, and the steps at which Nemo jumped rather than walked),
- `q` to quit.

Any other input rings the terminal bell and asks again. End of input quits.
When Nemo reaches the exit or is trapped, the game waits for Enter and ends.

## Using it from Python

    import random
    from nemomaze.maze import Maze

    maze = Maze.from_text("XXXXX\nXS EX\nXXXXX\n", backtrack=True, rng=random.Random(1))
    while not (maze.player.found_exit() or maze.player.stuck()):
        maze.update()
        maze.interact()
    print(maze.render())

- `nemomaze.maze.Maze` loads a maze from a file (or `Maze.from_text`), places
  sharks with `add_baddie`, advances everyone with `update`, settles meetings
  with `interact`, and draws with `render` or `draw(out)`. Problems loading or
  populating a maze raise `MazeError`.
- `nemomaze.game.Game` runs the interactive loop; `Game.run(stdin, stdout)`
  takes its input and output streams. `Game.from_settings(path)` builds a game
  from a settings file, and `nemomaze.game.load_settings` reads one into a
  `Settings` object, raising `SettingsError` on bad input.
- `nemomaze.player.Player` and `nemomaze.shark.Shark` are the two kinds of
  `nemomaze.entity.Entity`; `nemomaze.room.Room` is a grid coordinate.
- `nemomaze.dllist.DLList`, and `nemomaze.containers.Stack` and `Queue` built
  on it, are the containers the search uses.

## What it does not include

No maze file or settings file is shipped with the package; supply your own
`settings.ini` and the maze file it names.

## Tests

    pip install .[test]
    pytest