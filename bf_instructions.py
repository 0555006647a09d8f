from enum import Enum


class Op(Enum):
    INC = '+'
    DEC = '-'
    NEXT = '>'
    PREV = '<'
    IN = ','
    OUT = '.'
    JUMP_ZERO = '['
    JUMP_NONZERO = ']'


JUMP_OPS = (Op.JUMP_ZERO, Op.JUMP_NONZERO)


class Instruction:
    __slots__ = ('op', 'jump_target')

    def __init__(self, op, jump_target=None):
        if op in JUMP_OPS and jump_target is None:
            raise ValueError(f"{op.name} needs a jump target")
        object.__setattr__(self, 'op', op)
        object.__setattr__(self, 'jump_target', jump_target)

    def __setattr__(self, name, value):
        raise AttributeError("Instruction is immutable")

    def __eq__(self, other):
        if not isinstance(other, Instruction):
            return NotImplemented
        return self.op is other.op and self.jump_target == other.jump_target

    def __hash__(self):
        return hash((self.op, self.jump_target))

    def __repr__(self):
        if self.jump_target is not None:
            return f"{self.op.value} (target: {self.jump_target})"
        return f"{self.op.value}"

    def execute(self, state, inputter, outputter):
        op = self.op
        if op is Op.INC:
            state.tape[state.data_cursor] = (state.tape[state.data_cursor] + 1) & 0xff
        elif op is Op.DEC:
            state.tape[state.data_cursor] = (state.tape[state.data_cursor] - 1) & 0xff
        elif op is Op.NEXT:
            state.data_cursor += 1
        elif op is Op.PREV:
            state.data_cursor -= 1
        elif op is Op.IN:
            state.tape[state.data_cursor] = inputter.read_byte() & 0xff
        elif op is Op.OUT:
            outputter.write_byte(state.tape[state.data_cursor])
        elif op is Op.JUMP_ZERO:
            if state.tape[state.data_cursor] == 0:
                state.program_cursor = self.jump_target
        elif op is Op.JUMP_NONZERO:
            if state.tape[state.data_cursor] != 0:
                state.program_cursor = self.jump_target


# Shared by every position holding the same parameterless op
INC = Instruction(Op.INC)
DEC = Instruction(Op.DEC)
NEXT = Instruction(Op.NEXT)
PREV = Instruction(Op.PREV)
IN = Instruction(Op.IN)
OUT = Instruction(Op.OUT)

SIMPLE = {
    '+': INC,
    '-': DEC,
    '>': NEXT,
    '<': PREV,
    ',': IN,
    '.': OUT,
}


def jump_zero(target):
    return Instruction(Op.JUMP_ZERO, target)


def jump_nonzero(target):
    return Instruction(Op.JUMP_NONZERO, target)
