import pytest

from aoc2024.common import FileFormatError, ParseIntError
from aoc2024.day10 import (
    HikeMap,
    build_trailhead,
    parse_input,
    solve_a,
    solve_b,
    trailhead_ratings,
    trailhead_scores,
)

EXAMPLE = """89010123
78121874
87430965
96549874
45678903
32019012
01329801
10456732
"""


def test_example_scores():
    assert solve_a(EXAMPLE) == 36


def test_example_ratings():
    assert solve_b(EXAMPLE) == 81


def test_single_trail_score():
    assert solve_a("0123456789\n") == 1


def test_ratings_never_below_scores():
    map_ = parse_input(EXAMPLE)
    assert trailhead_ratings(map_) >= trailhead_scores(map_)


def test_direction_of_trail_does_not_matter():
    assert solve_a("0123456789\n") == solve_a("9876543210\n")
    assert solve_b("0123456789\n") == solve_b("9876543210\n")


def test_parse_reads_digits_and_dots():
    map_ = parse_input("01\n.9\n")
    assert map_.width == 2
    assert map_.height == 2
    assert map_.get(0, 0) == 0
    assert map_.get(1, 1) == 9
    assert map_.get(0, 1) == 11


def test_get_out_of_bounds():
    map_ = parse_input("01\n23\n")
    assert map_.get(-1, 0) is None
    assert map_.get(2, 0) is None
    assert map_.get(0, 2) is None


def test_len_matches_dimensions():
    map_ = parse_input(EXAMPLE)
    assert len(map_) == map_.width * map_.height


def test_xy_index_round_trip():
    map_ = HikeMap(list(range(6)), 3, 2)
    for index in range(len(map_)):
        assert map_.xy_index(index % 3, index // 3) == index


def test_peak_reaches_itself():
    map_ = parse_input("09\n")
    trailhead = build_trailhead(map_)
    assert trailhead[1] == {1: 1}


def test_invalid_character():
    with pytest.raises(ParseIntError):
        parse_input("01x\n")


def test_empty_input():
    with pytest.raises(FileFormatError):
        parse_input("")