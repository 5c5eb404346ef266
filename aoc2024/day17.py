"""Day 17: Chronospatial Computer."""

from __future__ import annotations

import re
from collections.abc import Sequence
from enum import IntEnum

from .common import AdventError, FileFormatError, ParseIntError

TITLE = "Day 17: Chronospatial Computer"

_INT = re.compile(r"[+-]?[0-9]+")
_UINT = re.compile(r"\+?[0-9]+")
_MAX_OP = 255

Program = list[int]


class Opcode(IntEnum):
    ADV = 0
    BXL = 1
    BST = 2
    JNZ = 3
    BXC = 4
    OUT = 5
    BDV = 6
    CDV = 7


class DeviceError(AdventError):
    """The device stopped while running a program."""


class Halt(DeviceError):
    """The instruction pointer ran past the end of the program."""


class UndefinedComboOperand(DeviceError):
    """A combo operand outside 0..6 was used."""

    def __init__(self, operand: int) -> None:
        super().__init__(operand)
        self.operand = operand


class UndefinedLiteralOperand(DeviceError):
    """A literal operand outside 0..7 was used."""

    def __init__(self, operand: int) -> None:
        super().__init__(operand)
        self.operand = operand


class UndefinedOpcode(DeviceError):
    """An instruction outside 0..7 was met."""

    def __init__(self, opcode: int) -> None:
        super().__init__(opcode)
        self.opcode = opcode


class Device:
    """A three-bit computer with registers A, B and C."""

    def __init__(self, a: int, b: int = 0, c: int = 0) -> None:
        self.a = a
        self.b = b
        self.c = c
        self.ip = 0
        self.output: list[int] = []

    def _operand(self, program: Sequence[int]) -> int:
        if self.ip + 1 >= len(program):
            raise Halt()
        return program[self.ip + 1]

    def _literal(self, program: Sequence[int]) -> int:
        operand = self._operand(program)
        if operand < 8:
            return operand
        raise UndefinedLiteralOperand(operand)

    def _combo(self, program: Sequence[int]) -> int:
        operand = self._operand(program)
        if operand < 4:
            return operand
        if operand == 4:
            return self.a
        if operand == 5:
            return self.b
        if operand == 6:
            return self.c
        raise UndefinedComboOperand(operand)

    def _divided_a(self, program: Sequence[int]) -> int:
        """Register A divided by two to the power of the combo operand, truncated."""
        power = self._combo(program)
        if self.a >= 0:
            return self.a >> power
        return -((-self.a) >> power)

    def _adv(self, program: Sequence[int]) -> None:
        self.a = self._divided_a(program)
        self.ip += 2

    def _bxl(self, program: Sequence[int]) -> None:
        self.b ^= self._literal(program)
        self.ip += 2

    def _bst(self, program: Sequence[int]) -> None:
        self.b = self._combo(program) & 0b111
        self.ip += 2

    def _jnz(self, program: Sequence[int]) -> None:
        if self.a == 0:
            self.ip += 2
            return
        self.ip = self._literal(program)

    def _bxc(self, program: Sequence[int]) -> None:
        self._literal(program)
        self.b ^= self.c
        self.ip += 2

    def _out(self, program: Sequence[int]) -> None:
        self.output.append(self._combo(program) % 8)
        self.ip += 2

    def _bdv(self, program: Sequence[int]) -> None:
        self.b = self._divided_a(program)
        self.ip += 2

    def _cdv(self, program: Sequence[int]) -> None:
        self.c = self._divided_a(program)
        self.ip += 2

    def step(self, program: Sequence[int]) -> None:
        """Execute one instruction; raise Halt past the end of the program."""
        if self.ip >= len(program):
            raise Halt()
        value = program[self.ip]
        try:
            opcode = Opcode(value)
        except ValueError:
            raise UndefinedOpcode(value) from None
        handlers = {
            Opcode.ADV: self._adv,
            Opcode.BXL: self._bxl,
            Opcode.BST: self._bst,
            Opcode.JNZ: self._jnz,
            Opcode.BXC: self._bxc,
            Opcode.OUT: self._out,
            Opcode.BDV: self._bdv,
            Opcode.CDV: self._cdv,
        }
        handlers[opcode](program)

    def run(self, program: Sequence[int]) -> None:
        """Run until the program halts; other device errors propagate."""
        while True:
            try:
                self.step(program)
            except Halt:
                return


def _run_until_stop(device: Device, program: Sequence[int]) -> None:
    try:
        device.run(program)
    except DeviceError:
        pass


def find_reg_a(offset: int, program: Sequence[int], value: int) -> int | None:
    """Smallest register A found, three bits at a time, that reproduces the program."""
    for i in range(8):
        candidate = value + i
        device = Device(candidate, 0, 0)
        _run_until_stop(device, program)
        if device.output[:1] != [program[offset]]:
            continue
        if offset == 0:
            return candidate
        found = find_reg_a(offset - 1, program, candidate << 3)
        if found is not None:
            return found
    return None


def parse_register(register: str) -> int:
    """Parse ``Register X: value``."""
    _, sep, value = register.strip().partition(": ")
    if not sep:
        raise FileFormatError(register)
    if not _INT.fullmatch(value):
        raise ParseIntError(value)
    return int(value)


def parse_registers(registers: str) -> tuple[int, int, int]:
    lines = registers.splitlines()
    if len(lines) < 3:
        raise FileFormatError(registers)
    return parse_register(lines[0]), parse_register(lines[1]), parse_register(lines[2])


def parse_program(program: str) -> Program:
    """Parse ``Program: 0,1,2,...``."""
    _, sep, ops = program.strip().partition(": ")
    if not sep:
        raise FileFormatError(program)
    parsed: Program = []
    for op in ops.split(","):
        if not _UINT.fullmatch(op) or int(op) > _MAX_OP:
            raise ParseIntError(op)
        parsed.append(int(op))
    return parsed


def parse_input(text: str) -> tuple[Device, Program]:
    registers, sep, program = text.partition("\n\n")
    if not sep:
        raise FileFormatError(text)
    a, b, c = parse_registers(registers)
    return Device(a, b, c), parse_program(program)


def solve_a(text: str) -> str:
    device, program = parse_input(text)
    _run_until_stop(device, program)
    return ",".join(str(value) for value in device.output)


def solve_b(text: str) -> int | None:
    _, program = parse_input(text)
    return find_reg_a(len(program) - 1, program, 0)