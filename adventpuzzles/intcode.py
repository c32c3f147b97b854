"""An intcode computer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Iterable


class Op(IntEnum):
    ADD = 1
    MULTIPLY = 2
    INPUT = 3
    OUTPUT = 4
    JUMP_IF_TRUE = 5
    JUMP_IF_FALSE = 6
    LESS_THAN = 7
    EQUALS = 8
    ADJUST_REL = 9
    HALT = 99


class Mode(IntEnum):
    POSITION = 0
    IMMEDIATE = 1
    RELATIVE = 2


class Signal(IntEnum):
    IN = 0
    OUT = 1


class DecodeError(ValueError):
    """Raised for an opcode that names no operation or parameter mode."""


@dataclass(frozen=True)
class Instruction:
    op: Op
    mode1: Mode = Mode.POSITION
    mode2: Mode = Mode.POSITION
    mode3: Mode = Mode.POSITION


_MODES = {mode.value for mode in Mode}


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // b
    return quotient if a >= 0 else -quotient


def _trunc_mod(a: int, b: int) -> int:
    return a - b * _trunc_div(a, b)


def decode(opcode: int) -> Instruction:
    """Split an opcode into its operation and parameter modes."""
    op = _trunc_mod(opcode, 100)
    if op < 1 or (op > 9 and op != 99):
        raise DecodeError(f"illegal operation {op} in opcode {opcode}")

    modes = []
    for index, place in enumerate((100, 1000, 10000), start=1):
        mode = _trunc_mod(_trunc_div(opcode, place), 10)
        if mode not in _MODES:
            raise DecodeError(f"illegal mode {mode} for parameter {index} in opcode {opcode}")
        modes.append(Mode(mode))

    return Instruction(Op(op), *modes)


class Computer:
    """Runs an intcode program over a private copy of its memory.

    Input values are drawn from ``inputs``; each output value is passed to
    ``output``, or appended to ``outputs`` when no callable is given.
    """

    def __init__(
        self,
        program: Iterable[int],
        inputs: Iterable[int] = (),
        output: Callable[[int], object] | None = None,
    ) -> None:
        self.memory: list[int] = list(program)
        self.halted = False
        self.outputs: list[int] = []
        self._pc = 0
        self._rel = 0
        self._inputs = iter(inputs)
        self._emit = output if output is not None else self.outputs.append
        self._signal: Callable[[Signal], object] | None = None

    def add_signal_handler(self, handler: Callable[[Signal], object]) -> None:
        """Call ``handler`` before every input and output."""
        self._signal = handler

    def _cell(self, addr: int) -> int:
        if not 0 <= addr < len(self.memory):
            raise IndexError(f"address {addr} out of range")
        return self.memory[addr]

    def _expand(self, addr: int) -> None:
        if addr < 0:
            raise IndexError(f"address {addr} out of range")
        if addr >= len(self.memory):
            self.memory.extend([0] * (addr + 1 - len(self.memory)))

    def _read(self, addr: int) -> int:
        self._expand(addr)
        return self.memory[addr]

    def _write(self, addr: int, value: int) -> None:
        self._expand(addr)
        self.memory[addr] = value

    def _fetch(self, offset: int, mode: Mode) -> int:
        param = self._cell(self._pc + offset)
        if mode is Mode.POSITION:
            return self._read(param)
        if mode is Mode.RELATIVE:
            return self._read(param + self._rel)
        return param

    def _place(self, offset: int, value: int, mode: Mode) -> None:
        param = self._cell(self._pc + offset)
        if mode is Mode.POSITION:
            self._write(param, value)
        else:
            self._write(param + self._rel, value)

    def _notify(self, signal: Signal) -> None:
        if self._signal is not None:
            self._signal(signal)

    def step(self) -> None:
        """Execute one instruction."""
        pc = self._pc
        try:
            ins = decode(self._cell(pc))
        except DecodeError as err:
            raise DecodeError(f"failed decode at address {pc}: {err}") from err

        match ins.op:
            case Op.ADD | Op.MULTIPLY:
                x = self._fetch(1, ins.mode1)
                y = self._fetch(2, ins.mode2)
                self._place(3, x + y if ins.op is Op.ADD else x * y, ins.mode3)
                self._pc += 4
            case Op.INPUT:
                self._notify(Signal.IN)
                try:
                    value = next(self._inputs)
                except StopIteration:
                    raise EOFError("intcode input exhausted") from None
                self._place(1, value, ins.mode1)
                self._pc += 2
            case Op.OUTPUT:
                self._notify(Signal.OUT)
                self._emit(self._fetch(1, ins.mode1))
                self._pc += 2
            case Op.JUMP_IF_TRUE | Op.JUMP_IF_FALSE:
                x = self._fetch(1, ins.mode1)
                y = self._fetch(2, ins.mode2)
                if (x != 0) == (ins.op is Op.JUMP_IF_TRUE):
                    self._pc = y
                else:
                    self._pc += 3
            case Op.LESS_THAN:
                x = self._fetch(1, ins.mode1)
                y = self._fetch(2, ins.mode2)
                self._place(3, int(x < y), ins.mode3)
                self._pc += 4
            case Op.EQUALS:
                x = self._fetch(1, ins.mode1)
                y = self._fetch(2, ins.mode2)
                self._place(3, int(x == y), ins.mode3)
                self._pc += 4
            case Op.ADJUST_REL:
                self._rel += self._fetch(1, ins.mode1)
                self._pc += 2
            case Op.HALT:
                self.halted = True

    def run(self) -> None:
        """Run until the program halts."""
        while not self.halted:
            self.step()