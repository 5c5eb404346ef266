import pytest

from aoc2024.common import FileFormatError, ParseIntError
from aoc2024.day17 import (
    Device,
    Halt,
    Opcode,
    UndefinedComboOperand,
    UndefinedLiteralOperand,
    UndefinedOpcode,
    find_reg_a,
    parse_input,
    parse_program,
    parse_register,
    parse_registers,
    solve_a,
    solve_b,
)

EXAMPLE = "Register A: 729\nRegister B: 0\nRegister C: 0\n\nProgram: 0,1,5,4,3,0\n"
QUINE = "Register A: 2024\nRegister B: 0\nRegister C: 0\n\nProgram: 0,3,5,4,3,0\n"


def test_bst_from_register_c():
    device = Device(0, 0, 9)
    device.run([2, 6])
    assert device.b == 1


def test_output_literals_and_register():
    device = Device(10, 0, 0)
    device.run([5, 0, 5, 1, 5, 4])
    assert device.output == [0, 1, 2]


def test_loop_until_a_is_zero():
    device = Device(2024, 0, 0)
    device.run([0, 1, 5, 4, 3, 0])
    assert device.output == [4, 2, 5, 6, 7, 7, 7, 7, 3, 1, 0]
    assert device.a == 0


def test_step_past_end_halts():
    with pytest.raises(Halt):
        Device(0).step([])


def test_undefined_opcode():
    with pytest.raises(UndefinedOpcode) as info:
        Device(0).step([8, 0])
    assert info.value.opcode == 8


def test_undefined_combo_operand():
    with pytest.raises(UndefinedComboOperand) as info:
        Device(0).step([Opcode.ADV, 7])
    assert info.value.operand == 7


def test_undefined_literal_operand():
    with pytest.raises(UndefinedLiteralOperand):
        Device(0).step([Opcode.BXL, 8])


def test_missing_operand_halts():
    with pytest.raises(Halt):
        Device(0).step([Opcode.OUT])


def test_jnz_jumps_when_a_nonzero():
    device = Device(1)
    device.step([Opcode.JNZ, 4])
    assert device.ip == 4


def test_parse_register_and_errors():
    assert parse_register("Register A: 729") == 729
    with pytest.raises(FileFormatError):
        parse_register("Register A 729")
    with pytest.raises(ParseIntError):
        parse_register("Register A: x")


def test_parse_registers_needs_three_lines():
    assert parse_registers("Register A: 1\nRegister B: 2\nRegister C: 3") == (1, 2, 3)
    with pytest.raises(FileFormatError):
        parse_registers("Register A: 1\nRegister B: 2")


def test_parse_program():
    assert parse_program("Program: 0,1,5,4,3,0\n") == [0, 1, 5, 4, 3, 0]
    with pytest.raises(ParseIntError):
        parse_program("Program: 0,256")


def test_parse_input_needs_blank_line():
    device, program = parse_input(EXAMPLE)
    assert (device.a, device.b, device.c) == (729, 0, 0)
    assert program == [0, 1, 5, 4, 3, 0]
    with pytest.raises(FileFormatError):
        parse_input("Register A: 1")


def test_solve_a_example():
    assert solve_a(EXAMPLE) == "4,6,3,5,6,3,5,2,1,0"


def test_solve_b_reproduces_program():
    reg_a = solve_b(QUINE)
    assert reg_a == 117440
    device = Device(reg_a)
    device.run([0, 3, 5, 4, 3, 0])
    assert device.output == [0, 3, 5, 4, 3, 0]


def test_find_reg_a_without_solution():
    assert find_reg_a(0, [5, 0], 0) is None