from collections import namedtuple


class TraceRecord(namedtuple("TraceRecord", ["step", "tape", "head", "state", "final"])):
    """Snapshot of the machine: tape contents, head index and control state."""

    __slots__ = ()

    def to_dict(self):
        return {
            "step": self.step,
            "tape": "".join(self.tape),
            "head": self.head,
            "state": self.state.value,
            "final": self.final,
        }


def format_record(record):
    prefix = "Final Tape" if record.final else "Tape"
    return f"{prefix}: {list(record.tape)}, Head: {record.head}, State: {record.state.value}"


def format_caret(record, window=None):
    """Render the tape with a caret under the head, optionally clipped to a window around it."""
    start, end = 0, len(record.tape)
    if window is not None:
        start = max(0, record.head - window)
        end = min(len(record.tape), record.head + window + 1)

    tape_str = ""
    head_str = ""
    for pos in range(start, end):
        tape_str += f"{record.tape[pos]} "
        head_str += "^ " if pos == record.head else "  "
    status = "Halted" if record.final else f"Step {record.step}"
    return f"{tape_str.rstrip()}\n{head_str.rstrip()}\nState: {record.state.value}, {status}"
