from enum import Enum

from simulator.errors import StepLimitExceeded
from simulator.symbols import INITIAL_STATE, ControlState
from simulator.tape import Tape
from simulator.trace import TraceRecord, format_caret


class HaltReason(Enum):
    NO_RULE = "no_rule"
    HALT_STATE = "halt_state"


class TuringMachine:
    def __init__(self, tape, transitions, initial_state=INITIAL_STATE, head=0):
        self.transitions = transitions
        self.initial_symbols = tuple(tape)
        self.initial_state = initial_state
        self.initial_head = head
        self._tape = Tape(self.initial_symbols, head=head)
        self.state = initial_state
        self.steps = 0
        self.halt_reason = None

    @property
    def tape(self):
        return list(self._tape.cells)

    @property
    def head(self):
        return self._tape.head

    @property
    def halted(self):
        return self.state is ControlState.HALT

    @property
    def growth_events(self):
        return self._tape.growth_events

    def snapshot(self, final=False):
        return TraceRecord(self.steps, self._tape.snapshot(), self._tape.head, self.state, final)

    def step(self):
        """Execute one transition; return it, or None when no rule matched."""
        if self.halted:
            return None

        transition = self.transitions.lookup(self.state, self._tape.read())
        self.steps += 1
        if transition is None:
            self.state = ControlState.HALT
            self.halt_reason = HaltReason.NO_RULE
            return None

        self._tape.write(transition.write)
        self._tape.move_head(transition.direction)
        self.state = transition.next_state
        if self.halted:
            self.halt_reason = HaltReason.HALT_STATE
        return transition

    def _check_limit(self, max_steps):
        if max_steps is not None and self.steps >= max_steps:
            raise StepLimitExceeded(self.steps, self.state)

    def trace(self, max_steps=None):
        """Yield a record before every step and one final record once halted."""
        while not self.halted:
            self._check_limit(max_steps)
            yield self.snapshot()
            self.step()
        yield self.snapshot(final=True)

    def run(self, max_steps=None, on_step=None):
        if on_step is None:
            # No consumer: skip building a tape snapshot per step
            while not self.halted:
                self._check_limit(max_steps)
                self.step()
            return self.steps

        for record in self.trace(max_steps=max_steps):
            on_step(record)
        return self.steps

    def reset(self):
        self._tape = Tape(self.initial_symbols, head=self.initial_head)
        self.state = self.initial_state
        self.steps = 0
        self.halt_reason = None

    def visualize(self, window=10):
        """Display a small window around the head."""
        print(format_caret(self.snapshot(final=self.halted), window=window))
