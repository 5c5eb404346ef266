import pytest

from aoc2024.common import FileFormatError, ParseIntError
from aoc2024.day07 import (
    Op,
    apply_ops,
    find_operators,
    parse_equation,
    parse_input,
    solve_a,
    solve_b,
)

EXAMPLE = "\n".join(
    [
        "190: 10 19",
        "3267: 81 40 27",
        "83: 17 5",
        "156: 15 6",
        "7290: 6 8 6 15",
        "161011: 16 10 13",
        "192: 17 8 14",
        "21037: 9 7 18 13",
        "292: 11 6 16 20",
    ]
)


@pytest.mark.parametrize(
    "lhs, rhs, expected",
    [(15, 6, 156), (17, 8, 178), (178, 1, 1781), (1, 234, 1234)],
)
def test_concat(lhs, rhs, expected):
    assert Op.CONCAT.apply(lhs, rhs) == expected


def test_add_and_multiply():
    assert Op.ADD.apply(15, 6) == 15 + 6
    assert Op.MULTIPLY.apply(15, 6) == 15 * 6


def test_solve_a_example():
    assert solve_a(EXAMPLE) == 3749


def test_solve_b_example():
    assert solve_b(EXAMPLE) == 11387


def test_parse_equation():
    assert parse_equation("3267: 81 40 27") == (3267, [81, 40, 27])


def test_found_operators_reach_target():
    for equation in parse_input(EXAMPLE):
        ops = find_operators(equation, True)
        if ops is not None:
            assert apply_ops(equation[1], ops) == equation[0]
            assert len(ops) == len(equation[1]) - 1


def test_concat_needed():
    assert find_operators((156, [15, 6]), False) is None
    assert find_operators((156, [15, 6]), True) == [Op.CONCAT]


def test_impossible_equation():
    assert find_operators((7, [2, 2]), True) is None


def test_single_number():
    assert find_operators((5, [5]), False) == [Op.ADD]
    assert find_operators((6, [5]), True) is None


def test_missing_separator():
    with pytest.raises(FileFormatError):
        parse_equation("190 10 19")


def test_bad_target():
    with pytest.raises(ParseIntError):
        parse_equation("x: 1 2")


def test_bad_number():
    with pytest.raises(ParseIntError):
        parse_equation("5: 1 a")