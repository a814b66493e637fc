"""
Binary addition as a rule table for the single-tape machine.

The tape starts as `_ a + b _`. Each pass peels the rightmost digit off the
first operand (overwriting it with `+`), walks right to the marked region of
the second operand and adds the digit to the rightmost unmarked cell there,
rippling a carry leftwards through unmarked digits. Marked cells (`O`, `I`)
hold finished result digits. The machine halts through the no-rule path once
GetLast finds no digit left of the separators.
"""

from collections import namedtuple
from functools import lru_cache

from simulator.symbols import (
    BLANK, ONE, ONE_MARKED, PLUS, ZERO, ZERO_MARKED, ControlState, Direction, unmark,
)
from simulator.transition_table import TransitionTable
from simulator.turing_machine import TuringMachine

S = ControlState
L = Direction.LEFT
R = Direction.RIGHT

# (state, read, write, direction, next_state)
ADDER_RULES = (
    # Skip the leading blank and the first operand until the separator
    (S.FIND_PLUS, BLANK, BLANK, R, S.FIND_PLUS),
    (S.FIND_PLUS, ONE, ONE, R, S.FIND_PLUS),
    (S.FIND_PLUS, ZERO, ZERO, R, S.FIND_PLUS),
    (S.FIND_PLUS, PLUS, PLUS, L, S.GET_LAST),

    # Consume the last digit of the first operand
    (S.GET_LAST, ZERO, PLUS, R, S.ADD_ZERO),
    (S.GET_LAST, ONE, PLUS, R, S.ADD_ONE),

    # Walk right to the end of the unmarked digits
    (S.ADD_ZERO, ONE, ONE, R, S.ADD_ZERO),
    (S.ADD_ZERO, ZERO, ZERO, R, S.ADD_ZERO),
    (S.ADD_ZERO, PLUS, PLUS, R, S.ADD_ZERO),
    (S.ADD_ZERO, ONE_MARKED, ONE_MARKED, L, S.ADD_DIGIT_ZERO),
    (S.ADD_ZERO, ZERO_MARKED, ZERO_MARKED, L, S.ADD_DIGIT_ZERO),
    (S.ADD_ZERO, BLANK, BLANK, L, S.ADD_DIGIT_ZERO),

    (S.ADD_ONE, ONE, ONE, R, S.ADD_ONE),
    (S.ADD_ONE, ZERO, ZERO, R, S.ADD_ONE),
    (S.ADD_ONE, PLUS, PLUS, R, S.ADD_ONE),
    (S.ADD_ONE, ONE_MARKED, ONE_MARKED, L, S.ADD_DIGIT_ONE),
    (S.ADD_ONE, ZERO_MARKED, ZERO_MARKED, L, S.ADD_DIGIT_ONE),
    (S.ADD_ONE, BLANK, BLANK, L, S.ADD_DIGIT_ONE),

    # Mark the digit; a separator cell becomes a new leading result digit
    (S.ADD_DIGIT_ZERO, ONE, ONE_MARKED, L, S.BACK_TO_START),
    (S.ADD_DIGIT_ZERO, ZERO, ZERO_MARKED, L, S.BACK_TO_START),
    (S.ADD_DIGIT_ZERO, PLUS, ZERO_MARKED, L, S.BACK_TO_START),

    (S.ADD_DIGIT_ONE, ONE, ZERO_MARKED, L, S.CARRY),
    (S.ADD_DIGIT_ONE, ZERO, ONE_MARKED, L, S.BACK_TO_START),
    (S.ADD_DIGIT_ONE, PLUS, ONE_MARKED, L, S.BACK_TO_START),

    # Ripple carry through the digits still waiting to be marked
    (S.CARRY, ZERO, ONE, L, S.BACK_TO_START),
    (S.CARRY, ONE, ZERO, L, S.CARRY),
    (S.CARRY, PLUS, ONE, L, S.BACK_TO_START),

    (S.BACK_TO_START, ZERO, ZERO, L, S.BACK_TO_START),
    (S.BACK_TO_START, ONE, ONE, L, S.BACK_TO_START),
    (S.BACK_TO_START, PLUS, PLUS, L, S.BACK_TO_START),
    (S.BACK_TO_START, BLANK, BLANK, R, S.FIND_PLUS),
)

class AdditionResult(namedtuple("AdditionResult", ["a", "b", "result", "steps", "tape"])):
    __slots__ = ()

    @property
    def value(self):
        return int(self.result, 2)

    @property
    def expected(self):
        return int(self.a, 2) + int(self.b, 2)


@lru_cache(maxsize=None)
def build_adder_table():
    """Build the shared, read-only binary addition table (once per process)."""
    return TransitionTable(ADDER_RULES)


def to_binary(operand):
    if isinstance(operand, int):
        if operand < 0:
            raise ValueError(f"Operands must be non-negative, got {operand}")
        return format(operand, "b")
    operand = str(operand)
    if not operand or any(ch not in (ZERO, ONE) for ch in operand):
        raise ValueError(f"Operand must be a non-empty binary string, got {operand!r}")
    return operand


def encode_operands(a, b):
    """Lay out `_ a + b _` on a fresh list of symbols."""
    return [BLANK, *to_binary(a), PLUS, *to_binary(b), BLANK]


def decode_result(tape):
    """Read the sum: the cells right of the last separator, blanks dropped and marks removed."""
    cells = list(tape)
    if PLUS not in cells:
        raise ValueError("Tape holds no separator; nothing to decode")
    last_plus = len(cells) - 1 - cells[::-1].index(PLUS)
    return "".join(unmark(cell) for cell in cells[last_plus + 1:] if cell != BLANK)


def add(a, b, max_steps=None, on_step=None):
    a_bits, b_bits = to_binary(a), to_binary(b)
    machine = TuringMachine(encode_operands(a_bits, b_bits), build_adder_table())
    steps = machine.run(max_steps=max_steps, on_step=on_step)
    return AdditionResult(a_bits, b_bits, decode_result(machine.tape), steps, machine.tape)
