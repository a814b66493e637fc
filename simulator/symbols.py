from enum import Enum

# === Tape alphabet ===
BLANK = "_"
ZERO = "0"
ONE = "1"
PLUS = "+"
ZERO_MARKED = "O"
ONE_MARKED = "I"

ALPHABET = (BLANK, ZERO, ONE, PLUS, ZERO_MARKED, ONE_MARKED)

_UNMARKED = {ZERO_MARKED: ZERO, ONE_MARKED: ONE}


def unmark(symbol):
    """Map a marked digit back to its plain digit, leave anything else alone."""
    return _UNMARKED.get(symbol, symbol)


class Direction(Enum):
    LEFT = "L"
    RIGHT = "R"

    @classmethod
    def parse(cls, text):
        for direction in cls:
            if text == direction.value or text == direction.name:
                return direction
        raise ValueError(f"Unknown direction: {text!r}")


class ControlState(Enum):
    FIND_PLUS = "FindPlus"
    GET_LAST = "GetLast"
    ADD_ZERO = "AddZero"
    ADD_ONE = "AddOne"
    ADD_DIGIT_ZERO = "AddDigitZero"
    ADD_DIGIT_ONE = "AddDigitOne"
    CARRY = "Carry"
    BACK_TO_START = "BackToStart"
    HALT = "Halt"

    @classmethod
    def parse(cls, text):
        for state in cls:
            if text == state.value or text == state.name:
                return state
        raise ValueError(f"Unknown control state: {text!r}")

    def __str__(self):
        return self.value


INITIAL_STATE = ControlState.FIND_PLUS
