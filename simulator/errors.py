class MachineError(Exception):
    """Base class for errors raised around the machine engine."""


class StepLimitExceeded(MachineError):
    """The machine did not reach Halt within the configured step ceiling."""

    def __init__(self, steps, state=None):
        self.steps = steps
        self.state = state
        super().__init__(f"Machine did not halt within {steps:,} steps (state: {state})")


class InvalidTransitionTable(MachineError, ValueError):
    """Raised while building a table that is not a pure function."""
