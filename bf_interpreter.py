import logging

import bf_config
from bf_io import StdInputter, StdOutputter
from bf_program import build_program

logger = logging.getLogger(__name__)


class BrainfuckState:
    def __init__(self, tape_size=None):
        if tape_size is None:
            tape_size = bf_config.TAPE_SIZE
        self.data_cursor = 0
        self.program_cursor = 0
        self.tape = bytearray(tape_size)

    def __repr__(self):
        return (f"BrainfuckState(data_cursor={self.data_cursor}, "
                f"program_cursor={self.program_cursor}, tape_size={len(self.tape)})")


class Interpreter:
    """
    Fetch / execute / advance loop over a built program.

    The program cursor is bumped after every instruction, jumps included,
    so a jump to index t resumes at t + 1.
    """

    def __init__(self, code, inputter=None, outputter=None):
        self.code = code
        self.inputter = inputter if inputter is not None else StdInputter()
        self.outputter = outputter if outputter is not None else StdOutputter()

    def halted(self, state):
        return state.program_cursor >= len(self.code)

    def step(self, state):
        self.code[state.program_cursor].execute(state, self.inputter, self.outputter)
        state.program_cursor += 1

    def interpret(self, state):
        code = self.code
        inputter = self.inputter
        outputter = self.outputter
        size = len(code)
        steps = 0
        try:
            while state.program_cursor < size:
                code[state.program_cursor].execute(state, inputter, outputter)
                state.program_cursor += 1
                steps += 1
        finally:
            outputter.flush()
        logger.debug("halted after %d steps", steps)
        return steps


def run(source, tape_size=None, inputter=None, outputter=None, lazy=False):
    """Build and run a program from raw source, returning the final state."""
    program = build_program(source, lazy=lazy)
    state = BrainfuckState(tape_size)
    Interpreter(program, inputter, outputter).interpret(state)
    return state
