import pytest

from adventpuzzles.intcode import (
    Computer,
    DecodeError,
    Instruction,
    Mode,
    Op,
    Signal,
    decode,
)


def run_program(program, inputs=()):
    feed = iter(inputs)
    outputs = []
    computer = Computer(program, feed, outputs.append)
    computer.run()
    assert next(feed, None) is None, "not all input was read"
    return computer, outputs


@pytest.mark.parametrize("program", [[1, 2, 3, 4], [0]])
def test_new_computer_copies_program(program):
    computer = Computer(program)
    assert computer.memory == program
    computer.memory[0] += 1
    assert program[0] != computer.memory[0]


@pytest.mark.parametrize(
    "opcode,expected",
    [
        (1, Instruction(Op.ADD, Mode.POSITION, Mode.POSITION, Mode.POSITION)),
        (2, Instruction(Op.MULTIPLY, Mode.POSITION, Mode.POSITION, Mode.POSITION)),
        (3, Instruction(Op.INPUT, Mode.POSITION, Mode.POSITION, Mode.POSITION)),
        (4, Instruction(Op.OUTPUT, Mode.POSITION, Mode.POSITION, Mode.POSITION)),
        (99, Instruction(Op.HALT, Mode.POSITION, Mode.POSITION, Mode.POSITION)),
        (1002, Instruction(Op.MULTIPLY, Mode.POSITION, Mode.IMMEDIATE, Mode.POSITION)),
        (11101, Instruction(Op.ADD, Mode.IMMEDIATE, Mode.IMMEDIATE, Mode.IMMEDIATE)),
        (20001, Instruction(Op.ADD, Mode.POSITION, Mode.POSITION, Mode.RELATIVE)),
    ],
)
def test_decode(opcode, expected):
    assert decode(opcode) == expected


@pytest.mark.parametrize("opcode", [17, -1, 0, 301, 3001, 30001])
def test_decode_errors(opcode):
    with pytest.raises(DecodeError):
        decode(opcode)


@pytest.mark.parametrize(
    "program,final,inputs,outputs",
    [
        ([1, 0, 0, 0, 99], [2, 0, 0, 0, 99], [], []),
        ([2, 4, 4, 5, 99, 0], [2, 4, 4, 5, 99, 9801], [], []),
        (
            [1, 9, 10, 3, 2, 3, 11, 0, 99, 30, 40, 50],
            [3500, 9, 10, 70, 2, 3, 11, 0, 99, 30, 40, 50],
            [],
            [],
        ),
        ([1, 1, 1, 4, 99, 5, 6, 0, 99], [30, 1, 1, 4, 2, 5, 6, 0, 99], [], []),
        ([3, 3, 99, 0], [3, 3, 99, 15], [15], []),
        ([3, 6, 3, 0, 99, 0, 0], [44, 6, 3, 0, 99, 0, 2], [2, 44], []),
        ([4, 0, 99], [4, 0, 99], [], [4]),
        ([1002, 4, 3, 4, 33], [1002, 4, 3, 4, 99], [], []),
    ],
    ids=[
        "add 1",
        "multiply 1",
        "add and multiply 1",
        "add and multiply 2",
        "input single value",
        "input multiple values",
        "output single value",
        "multiply immediate mode",
    ],
)
def test_run(program, final, inputs, outputs):
    computer, got = run_program(program, inputs)
    assert computer.memory == final
    assert got == outputs
    assert computer.halted


EQUAL_8 = [3, 9, 8, 9, 10, 9, 4, 9, 99, -1, 8]
LESS_8 = [3, 9, 7, 9, 10, 9, 4, 9, 99, -1, 8]
NONZERO_POS = [3, 12, 6, 12, 15, 1, 13, 14, 13, 4, 13, 99, -1, 0, 1, 9]
NONZERO_IMM = [3, 3, 1105, -1, 9, 1101, 0, 0, 12, 4, 12, 99, 1]
COMPARE_8 = [
    3, 21, 1008, 21, 8, 20, 1005, 20, 22, 107, 8, 21, 20, 1006, 20, 31, 1106, 0, 36, 98, 0,
    0, 1002, 21, 125, 20, 4, 20, 1105, 1, 46, 104, 999, 1105, 1, 46, 1101, 1000, 1, 20, 4,
    20, 1105, 1, 46, 98, 99,
]


@pytest.mark.parametrize(
    "program,inputs,outputs",
    [
        (EQUAL_8, [8], [1]),
        (EQUAL_8, [7], [0]),
        (LESS_8, [8], [0]),
        (LESS_8, [3], [1]),
        (NONZERO_POS, [0], [0]),
        (NONZERO_POS, [1], [1]),
        (NONZERO_IMM, [0], [0]),
        (NONZERO_IMM, [1], [1]),
        (COMPARE_8, [7], [999]),
        (COMPARE_8, [8], [1000]),
        (COMPARE_8, [9], [1001]),
    ],
)
def test_more_ops(program, inputs, outputs):
    _, got = run_program(program, inputs)
    assert got == outputs


QUINE = [109, 1, 204, -1, 1001, 100, 1, 100, 1008, 100, 16, 101, 1006, 101, 0, 99]


@pytest.mark.parametrize(
    "program,outputs",
    [
        ([109, 2, 204, -2, 99], [109]),
        (QUINE, QUINE),
        ([1102, 34915192, 34915192, 7, 4, 7, 99, 0], [1219070632396864]),
        ([104, 1125899906842624, 99], [1125899906842624]),
    ],
    ids=["relative adjust", "quine", "16 digit number", "middle number"],
)
def test_complete_features(program, outputs):
    _, got = run_program(program)
    assert got == outputs


def test_outputs_collected_without_callable():
    computer = Computer([104, 1125899906842624, 99])
    computer.run()
    assert computer.outputs == [1125899906842624]


def test_signal_handler_sees_input_and_output():
    signals = []
    computer = Computer([3, 0, 4, 0, 99], [5])
    computer.add_signal_handler(signals.append)
    computer.run()
    assert signals == [Signal.IN, Signal.OUT]
    assert computer.outputs == [5]


def test_step_reports_address_of_bad_opcode():
    computer = Computer([1101, 1, 1, 5, 17, 0])
    with pytest.raises(DecodeError, match="failed decode at address 4"):
        computer.run()


def test_exhausted_input_raises():
    computer = Computer([3, 0, 99])
    with pytest.raises(EOFError):
        computer.run()