from collections import namedtuple
from collections.abc import Mapping
from types import MappingProxyType

from simulator.errors import InvalidTransitionTable
from simulator.symbols import ControlState, Direction

Transition = namedtuple("Transition", ["write", "direction", "next_state"])


class TransitionTable(Mapping):
    """
    Read-only mapping (state, symbol) -> Transition(write, direction, next_state).
    Built once from 5-tuples (state, read, write, direction, next_state).
    A missing key is not an error: the machine treats it as a halt.
    """

    def __init__(self, rules=()):
        transitions = {}
        for state, read, write, direction, next_state in rules:
            if not isinstance(direction, Direction):
                direction = Direction.parse(direction)
            if state is ControlState.HALT:
                raise InvalidTransitionTable(f"Halt has no outgoing transitions (read {read!r})")
            key = (state, read)
            if key in transitions:
                raise InvalidTransitionTable(f"Duplicate transition for state {state}, symbol {read!r}")
            transitions[key] = Transition(write, direction, next_state)
        self._transitions = MappingProxyType(transitions)

    def __getitem__(self, key):
        return self._transitions[key]

    def __iter__(self):
        return iter(self._transitions)

    def __len__(self):
        return len(self._transitions)

    def lookup(self, state, symbol):
        return self._transitions.get((state, symbol))

    def states(self):
        seen = []
        for state, _ in self._transitions:
            if state not in seen:
                seen.append(state)
        return seen

    def symbols(self):
        seen = []
        for _, symbol in self._transitions:
            if symbol not in seen:
                seen.append(symbol)
        return seen

    def rules(self):
        for (state, read), (write, direction, next_state) in self._transitions.items():
            yield state, read, write, direction, next_state

    def serialize(self):
        """JSON-friendly list of [state, read, write, direction, next_state] rows."""
        return [
            [state.value, read, write, direction.value, next_state.value]
            for state, read, write, direction, next_state in self.rules()
        ]
