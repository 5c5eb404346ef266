import pytest

from aoc2024.common import MissingEndError, MissingStartError, UnknownTileError
from aoc2024.day16 import (
    Dir,
    State,
    Tile,
    find_places_to_sit,
    find_shortest_path,
    parse_input,
    solve_a,
    solve_b,
)

CORRIDOR = "#####\n#S.E#\n#####\n"
TURN = "#####\n#..E#\n#S###\n#####\n"
NO_PATH = "#####\n#S#E#\n#####\n"


def _floor(maze):
    return {
        (x, y)
        for y in range(maze.height)
        for x in range(maze.width)
        if maze.get(x, y) is Tile.FLOOR
    }


def test_dir_turns_round_trip():
    for d in Dir:
        assert d.turn_left().turn_right() == d
        assert d.turn_left().turn_left().turn_left().turn_left() == d
    assert Dir.UP.turn_left() == Dir.LEFT
    assert Dir.UP.turn_right() == Dir.RIGHT


def test_dir_deltas():
    assert Dir.RIGHT.delta() == (1, 0)
    assert Dir.UP.delta() == (0, -1)
    assert str(Dir.DOWN) == "v"


def test_state_equality_ignores_cost():
    assert State(5, 1, 1, Dir.UP) == State(9, 1, 1, Dir.UP)
    assert hash(State(5, 1, 1, Dir.UP)) == hash(State(9, 1, 1, Dir.UP))
    assert State(5, 1, 1, Dir.UP) != State(5, 1, 1, Dir.DOWN)


def test_parse_and_render_round_trip():
    maze, start, end = parse_input(TURN)
    assert start == (1, 2)
    assert end == (3, 1)
    assert str(maze) == TURN.replace("S", ".").replace("E", ".")


def test_maze_outside_is_wall():
    maze, _, _ = parse_input(CORRIDOR)
    assert maze.is_wall(-1, 0)
    assert maze.is_wall(maze.width, 1)
    assert not maze.is_wall(2, 1)
    assert maze.get(0, maze.height) is None


def test_state_step():
    maze, start, _ = parse_input(CORRIDOR)
    state = State.start(start, Dir.RIGHT)
    moved = state.step(maze)
    assert (moved.x, moved.y, moved.cost) == (start[0] + 1, start[1], 1)
    assert state.turn_left(maze) is None
    assert State.start(start, Dir.LEFT).step(maze) is None


def test_corridor_cost():
    assert solve_a(CORRIDOR) == 2


def test_turn_cost():
    assert solve_a(TURN) == 2003


def test_no_path():
    maze, start, end = parse_input(NO_PATH)
    assert find_shortest_path(maze, start, end, Dir.RIGHT) is None
    assert solve_a(NO_PATH) is None
    assert solve_b(NO_PATH) is None


def test_start_state_is_visited():
    maze, start, end = parse_input(TURN)
    _, visited = find_shortest_path(maze, start, end, Dir.RIGHT)
    assert State.start(start, Dir.RIGHT) in visited
    costs = [v.cost for v in visited if (v.x, v.y) == start]
    assert min(costs) == 0


@pytest.mark.parametrize("text", [CORRIDOR, TURN])
def test_seats_cover_the_only_path(text):
    maze, start, end = parse_input(text)
    cost, visited = find_shortest_path(maze, start, end, Dir.RIGHT)
    seats = find_places_to_sit(visited, end, cost)
    assert seats == _floor(maze)
    assert start in seats and end in seats
    assert solve_b(text) == len(_floor(maze))


def test_unknown_tile():
    with pytest.raises(UnknownTileError):
        parse_input("#S?E#\n")


def test_missing_start():
    with pytest.raises(MissingStartError):
        parse_input("#..E#\n")


def test_missing_end():
    with pytest.raises(MissingEndError):
        parse_input("#S..#\n")