import pytest

import bf_instructions
from bf_instructions import Instruction, Op, jump_nonzero, jump_zero
from bf_interpreter import BrainfuckState
from bf_io import BufferInputter, BufferOutputter


def execute(instr, state, inputter=None, outputter=None):
    instr.execute(state,
                  inputter if inputter is not None else BufferInputter(),
                  outputter if outputter is not None else BufferOutputter())


class TestCellArithmetic:
    def test_increment_wraps(self):
        state = BrainfuckState(4)
        state.tape[0] = 255
        execute(bf_instructions.INC, state)
        assert state.tape[0] == 0

    def test_decrement_wraps(self):
        state = BrainfuckState(4)
        execute(bf_instructions.DEC, state)
        assert state.tape[0] == 255

    def test_touches_only_current_cell(self):
        state = BrainfuckState(4)
        state.data_cursor = 2
        execute(bf_instructions.INC, state)
        assert list(state.tape) == [0, 0, 1, 0]


class TestCursor:
    def test_next_and_prev(self):
        state = BrainfuckState(4)
        execute(bf_instructions.NEXT, state)
        execute(bf_instructions.NEXT, state)
        assert state.data_cursor == 2
        execute(bf_instructions.PREV, state)
        assert state.data_cursor == 1
        assert state.program_cursor == 0


class TestIO:
    def test_out_writes_current_cell(self):
        state = BrainfuckState(4)
        state.tape[0] = 0x41
        sink = BufferOutputter()
        execute(bf_instructions.OUT, state, outputter=sink)
        assert bytes(sink.data) == b"A"

    def test_in_reads_one_byte(self):
        state = BrainfuckState(4)
        source = BufferInputter(b"\x07\x08")
        execute(bf_instructions.IN, state, inputter=source)
        assert state.tape[0] == 7
        assert source.pos == 1

    def test_in_at_eof(self):
        state = BrainfuckState(4)
        state.tape[0] = 9
        execute(bf_instructions.IN, state, inputter=BufferInputter(b"", eof_value=0))
        assert state.tape[0] == 0


class TestJumps:
    def test_jump_zero_taken(self):
        state = BrainfuckState(4)
        execute(jump_zero(5), state)
        assert state.program_cursor == 5

    def test_jump_zero_not_taken(self):
        state = BrainfuckState(4)
        state.tape[0] = 1
        execute(jump_zero(5), state)
        assert state.program_cursor == 0

    def test_jump_nonzero_taken(self):
        state = BrainfuckState(4)
        state.tape[0] = 3
        state.program_cursor = 7
        execute(jump_nonzero(2), state)
        assert state.program_cursor == 2

    def test_jump_nonzero_not_taken(self):
        state = BrainfuckState(4)
        state.program_cursor = 7
        execute(jump_nonzero(2), state)
        assert state.program_cursor == 7


class TestInstruction:
    def test_immutable(self):
        with pytest.raises(AttributeError):
            bf_instructions.INC.op = Op.DEC
        with pytest.raises(AttributeError):
            jump_zero(1).jump_target = 2

    def test_jump_needs_target(self):
        with pytest.raises(ValueError):
            Instruction(Op.JUMP_ZERO)

    def test_equality(self):
        assert jump_zero(3) == jump_zero(3)
        assert jump_zero(3) != jump_nonzero(3)
        assert hash(jump_zero(3)) == hash(jump_zero(3))

    def test_repr(self):
        assert repr(bf_instructions.INC) == "+"
        assert repr(jump_nonzero(4)) == "] (target: 4)"

    def test_simple_table_covers_six_ops(self):
        assert sorted(bf_instructions.SIMPLE) == sorted("+-><.,")
        assert {i.op for i in bf_instructions.SIMPLE.values()} == set(Op) - set(bf_instructions.JUMP_OPS)
