# tools/run_adder.py

import argparse
import sys
import uuid

from logger.logger import JSONLogger
from simulator.binary_adder import add
from simulator.errors import StepLimitExceeded
from simulator.trace import format_caret, format_record

DEFAULT_A = "1010011011"
DEFAULT_B = "1011"


def make_printer(trace_format="text", window=None):
    if trace_format == "caret":
        return lambda record: print(format_caret(record, window=window))
    return lambda record: print(format_record(record))


def run_addition(a=DEFAULT_A, b=DEFAULT_B, max_steps=None, trace=True, trace_format="text", logger=None):
    """Run one addition, printing the trace and optionally logging it as JSON lines."""
    records = []
    printer = make_printer(trace_format) if trace else None

    def on_step(record):
        if printer is not None:
            printer(record)
        if logger is not None:
            records.append(record)

    try:
        result = add(a, b, max_steps=max_steps, on_step=on_step)
    finally:
        if logger is not None and records:
            logger.log_trace(records, run_id=uuid.uuid4().hex)

    if logger is not None:
        logger.log({
            "a": result.a,
            "b": result.b,
            "result": result.result,
            "value": result.value,
            "steps": result.steps,
            "correct": result.value == result.expected
        })
    return result


# === CLI ===
def main(argv=None):
    parser = argparse.ArgumentParser(description="Add two binary numbers on a single-tape Turing machine.")
    parser.add_argument("--a", default=DEFAULT_A, help=f"First operand in binary (default: {DEFAULT_A})")
    parser.add_argument("--b", default=DEFAULT_B, help=f"Second operand in binary (default: {DEFAULT_B})")
    parser.add_argument("--max_steps", type=int, default=0, help="Step ceiling, 0 for none (default: 0)")
    parser.add_argument("--format", choices=["text", "caret"], default="text", help="Trace line format")
    parser.add_argument("--quiet", action="store_true", help="Do not print the per-step trace")
    parser.add_argument("--log", action="store_true", help="Write trace and result to JSON lines under logs/")
    args = parser.parse_args(argv)

    logger = JSONLogger() if args.log else None
    try:
        result = run_addition(
            args.a,
            args.b,
            max_steps=args.max_steps or None,
            trace=not args.quiet,
            trace_format=args.format,
            logger=logger
        )
    except (ValueError, StepLimitExceeded) as e:
        print(f"[ERROR] {e}")
        return 1

    print(f"[INFO] {result.a} + {result.b} = {result.result} ({result.value:,}) in {result.steps:,} steps")
    return 0


if __name__ == "__main__":
    sys.exit(main())
