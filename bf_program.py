"""
Turns Brainfuck source into an indexed program with every jump resolved.

Two representations are provided. parse_code() builds a list with one
Instruction per position. FlyweightCode keeps the source string and only
stores the bracket instructions, handing out the shared singletons for
everything else. Both support len() and indexing, which is all the
interpreter needs.
"""
import logging

import bf_config
from bf_instructions import Op, SIMPLE, jump_zero, jump_nonzero

logger = logging.getLogger(__name__)


class BrainfuckError(Exception):
    pass


class MalformedProgramError(BrainfuckError):
    def __init__(self, message, position=None):
        super().__init__(message)
        self.message = message
        self.position = position


class ProgramTooLargeError(BrainfuckError):
    def __init__(self, size, limit):
        super().__init__(f"program has {size} instructions, limit is {limit}")
        self.size = size
        self.limit = limit


def filter_source(source):
    """Keep only the eight command characters, in order."""
    if isinstance(source, (bytes, bytearray)):
        source = source.decode('latin-1')
    return ''.join(c for c in source if c in bf_config.VALID_CHARS)


def _check_size(code, max_size):
    if max_size is not None and len(code) > max_size:
        raise ProgramTooLargeError(len(code), max_size)


def match_brackets(code):
    """
    Yields (open, close) index pairs in the order the ']' are seen.
    Raises MalformedProgramError on an unmatched bracket.
    """
    loop_stack = []
    for i, c in enumerate(code):
        if c == '[':
            loop_stack.append(i)
        elif c == ']':
            if not loop_stack:
                raise MalformedProgramError(f"unmatched ']' at index {i}", i)
            yield loop_stack.pop(), i
    if loop_stack:
        # outermost unclosed one
        i = loop_stack[0]
        raise MalformedProgramError(f"unmatched '[' at index {i}", i)


def parse_code(code, max_size=None):
    if max_size is None:
        max_size = bf_config.MAX_PROGRAM_SIZE
    _check_size(code, max_size)

    ops = [SIMPLE.get(c) for c in code]
    pairs = 0
    for j, i in match_brackets(code):
        ops[j] = jump_zero(i)
        ops[i] = jump_nonzero(j)
        pairs += 1

    if None in ops:
        i = ops.index(None)
        raise MalformedProgramError(f"unknown command {code[i]!r} at index {i}", i)

    logger.debug("built program: %d instructions, %d loops", len(ops), pairs)
    return ops


class FlyweightCode:
    def __init__(self, code, max_size=None):
        if max_size is None:
            max_size = bf_config.MAX_PROGRAM_SIZE
        _check_size(code, max_size)
        for i, c in enumerate(code):
            if c not in bf_config.VALID_CHARS:
                raise MalformedProgramError(f"unknown command {c!r} at index {i}", i)
        self.code = code
        self.bracket_map = {}
        self.build_bracket_map()
        logger.debug("built flyweight program: %d instructions, %d loops",
                     len(code), len(self.bracket_map) // 2)

    def build_bracket_map(self):
        for j, i in match_brackets(self.code):
            self.bracket_map[j] = jump_zero(i)
            self.bracket_map[i] = jump_nonzero(j)

    def __getitem__(self, i):
        c = self.code[i]
        if c in '[]':
            return self.bracket_map[i]
        return SIMPLE[c]

    def __len__(self):
        return len(self.code)

    def __iter__(self):
        for i in range(len(self.code)):
            yield self[i]


def build_program(source, lazy=False, max_size=None):
    code = filter_source(source)
    if lazy:
        return FlyweightCode(code, max_size=max_size)
    return parse_code(code, max_size=max_size)


def bracket_pairs(program):
    """Returns {open_index: close_index} for a built program."""
    pairs = {}
    for i, op in enumerate(program):
        if op.op is Op.JUMP_ZERO:
            pairs[i] = op.jump_target
    return pairs
