import pytest

from aoc2024.common import (
    FileFormatError,
    RobotNotFoundError,
    UnknownActionError,
    UnknownTileError,
)
from aoc2024.day15 import (
    Action,
    Robot,
    Tile,
    WideWarehouse,
    WTile,
    parse_action,
    parse_actions,
    parse_input,
    parse_warehouse,
    solve_a,
    solve_b,
    step,
    wide_step,
)

SMALL = """########
#..O.O.#
##@.O..#
#...O..#
#.#.O..#
#...O..#
#......#
########

<^^>>>vv<v>>v<<
"""

WIDE = """#######
#...#.#
#.....#
#..OO@#
#..O..#
#.....#
#######

<vv<<^^<<^^
"""


def test_solve_a_small_example():
    assert solve_a(SMALL) == 2028


def test_solve_b_wide_example():
    assert solve_b(WIDE) == 618


def test_wide_example_final_state():
    warehouse, robot, actions = parse_input(WIDE)
    wide = WideWarehouse.from_warehouse(warehouse)
    robot.x *= 2
    for action in actions:
        wide_step(wide, robot, action)
    assert wide.render(robot).splitlines() == [
        "##############",
        "##...[].##..##",
        "##...@.[]...##",
        "##....[]....##",
        "##..........##",
        "##..........##",
        "##############",
    ]


def test_parse_warehouse_round_trips_render():
    text = "#####\n#.O@#\n#####"
    warehouse, robot = parse_warehouse(text)
    assert robot == Robot(3, 1)
    assert warehouse.render(robot) == text


def test_box_count_preserved():
    warehouse, robot, actions = parse_input(SMALL)
    before = warehouse.tiles.count(Tile.BOX)
    for action in actions:
        step(warehouse, robot, action)
    assert warehouse.tiles.count(Tile.BOX) == before


def test_push_line_of_boxes():
    warehouse, robot = parse_warehouse("#######\n#@OO..#\n#######")
    step(warehouse, robot, Action.RIGHT)
    assert robot == Robot(2, 1)
    assert warehouse.render(robot) == "#######\n#.@OO.#\n#######"


def test_push_into_wall_does_nothing():
    warehouse, robot = parse_warehouse("#####\n#@OO#\n#####")
    step(warehouse, robot, Action.RIGHT)
    assert robot == Robot(1, 1)
    assert warehouse.render(robot) == "#####\n#@OO#\n#####"


def test_get_outside_is_none():
    warehouse, _ = parse_warehouse("###\n#@#\n###")
    assert warehouse.get(-1, 0) is None
    assert warehouse.get(3, 0) is None


def test_wide_gps_doubles_columns():
    warehouse, _ = parse_warehouse("#####\n#@.O#\n#####")
    wide = WideWarehouse.from_warehouse(warehouse)
    assert wide.width == warehouse.width * 2
    assert wide.get(6, 1) is WTile.LBOX
    assert wide.get(7, 1) is WTile.RBOX
    assert wide.gps() == 100 * 1 + 2 * 3


def test_wide_horizontal_push_keeps_boxes_whole():
    warehouse, robot = parse_warehouse("######\n#.OO@#\n######")
    wide = WideWarehouse.from_warehouse(warehouse)
    robot.x *= 2
    wide_step(wide, robot, Action.LEFT)
    rendered = wide.render(robot)
    assert rendered.splitlines()[1].replace("@", ".").count("[]") == 2


def test_parse_actions_skips_newlines():
    assert parse_actions("<^\nv>") == [Action.LEFT, Action.UP, Action.DOWN, Action.RIGHT]


def test_parse_action_unknown():
    with pytest.raises(UnknownActionError):
        parse_action("x")


def test_unknown_tile():
    with pytest.raises(UnknownTileError):
        parse_warehouse("#X@#")


def test_missing_robot():
    with pytest.raises(RobotNotFoundError):
        parse_warehouse("####\n#..#\n####")


def test_missing_blank_line():
    with pytest.raises(FileFormatError):
        parse_input("#@#\n<>")