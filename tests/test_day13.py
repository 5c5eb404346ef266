import pytest

from aoc2024.common import FileFormatError, ParseIntError
from aoc2024.day13 import (
    PRIZE_OFFSET,
    Machine,
    Pos,
    Press,
    parse_button,
    parse_input,
    parse_machine,
    parse_prize,
    solve_a,
)

FIRST = """Button A: X+94, Y+34
Button B: X+22, Y+67
Prize: X=8400, Y=5400"""

SECOND = """Button A: X+26, Y+66
Button B: X+67, Y+21
Prize: X=12748, Y=12176"""

THIRD = """Button A: X+17, Y+86
Button B: X+84, Y+37
Prize: X=7870, Y=6450"""

FOURTH = """Button A: X+69, Y+23
Button B: X+27, Y+71
Prize: X=18641, Y=10279"""

EXAMPLE = "\n\n".join([FIRST, SECOND, THIRD, FOURTH]) + "\n"


def test_example_total():
    assert solve_a(EXAMPLE) == 480


def test_parse_button_and_prize():
    assert parse_button("Button A: X+94, Y+34") == Pos(94, 34)
    assert parse_prize("Prize: X=8400, Y=5400") == Pos(8400, 5400)


def test_parse_machine():
    machine = parse_machine(FIRST)
    assert machine == Machine(Pos(94, 34), Pos(22, 67), Pos(8400, 5400))


def test_parse_input_count():
    assert len(parse_input(EXAMPLE)) == 4


def test_cram_a_first_machine():
    assert parse_machine(FIRST).cram_a() == 80


def test_first_machine_wins_are_winning():
    machine = parse_machine(FIRST)
    presses = list(machine.wins())
    assert len(presses) > 0
    assert all(machine.is_winning(p.a, p.b) for p in presses)


def test_cram_agrees_with_search():
    machine = parse_machine(FIRST)
    a = machine.cram_a()
    assert machine.get_b(a) in list(machine.wins())


def test_single_machine_cost_is_cheapest_win():
    machine = parse_machine(FIRST)
    assert solve_a(FIRST) == min(press.cost() for press in machine.wins())


def test_second_machine_has_no_win():
    assert list(parse_machine(SECOND).wins()) == []


def test_second_machine_wins_after_fix():
    machine = parse_machine(SECOND)
    machine.fix_prize()
    a = machine.cram_a()
    press = machine.get_b(a)
    assert machine.is_winning(press.a, press.b)


def test_fix_prize_moves_prize():
    machine = parse_machine(FIRST)
    machine.fix_prize()
    assert machine.prize == Pos(8400 + PRIZE_OFFSET, 5400 + PRIZE_OFFSET)


def test_pos_operations():
    assert Pos(10, 20) - Pos(0, 0) == Pos(10, 20)
    assert Pos(7, 9).scaled(1) == Pos(7, 9)
    assert Pos(7, 9) - Pos(7, 9) == Pos(7, 9).scaled(0)


def test_press_cost_weights_a_more():
    assert Press(1, 0).cost() > Press(0, 1).cost()


def test_button_without_comma():
    with pytest.raises(FileFormatError):
        parse_button("Button A: X+94 Y+34")


def test_prize_with_bad_number():
    with pytest.raises(ParseIntError):
        parse_prize("Prize: X=abc, Y=1")


def test_machine_missing_line():
    with pytest.raises(FileFormatError):
        parse_machine("Button A: X+1, Y+2\nButton B: X+3, Y+4")