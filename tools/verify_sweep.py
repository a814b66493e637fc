# tools/verify_sweep.py

import argparse
import os
import sys
from itertools import product
from pathlib import Path

import numpy as np
from rich.progress import Progress, SpinnerColumn, BarColumn, TextColumn, TimeElapsedColumn

from logger.logger import JSONLogger
from simulator.binary_adder import add
from simulator.errors import MachineError, StepLimitExceeded


# === Case Generation ===
def exhaustive_pairs(max_bits):
    """Every pair of operands below 2**max_bits, as binary strings."""
    values = [format(v, "b") for v in range(1 << max_bits)]
    return list(product(values, repeat=2))


def random_pairs(count, bits, seed=0):
    """Random fixed-width operand pairs (leading zeros included)."""
    if count == 0 or bits == 0:
        return []
    rng = np.random.default_rng(seed)
    digits = rng.integers(0, 2, size=(count, 2, bits))
    return [("".join(map(str, a)), "".join(map(str, b))) for a, b in digits.tolist()]


# === Single Case ===
def simulate_case(a, b, max_steps=None):
    expected = int(a, 2) + int(b, 2)
    try:
        result = add(a, b, max_steps=max_steps)
    except StepLimitExceeded as e:
        return {
            "a": a,
            "b": b,
            "expected": expected,
            "result": None,
            "steps": e.steps,
            "halted": False,
            "correct": False
        }

    return {
        "a": a,
        "b": b,
        "expected": expected,
        "result": result.result,
        "steps": result.steps,
        "halted": True,
        "correct": result.value == expected
    }


def console_message(msg):
    print(f"[{Path(os.getcwd()).name}] {msg}")


# === Main Sweep Runner ===
def verify_sweep(pairs, batch_size=256, max_steps=None, logger=None, show_progress=True):
    if batch_size <= 0:
        raise ValueError(f"batch_size must be positive, got {batch_size}")
    summary = {"total": len(pairs), "passed": 0, "failed": 0, "did_not_halt": 0, "errors": 0, "max_steps_seen": 0}
    console_message(f"Verifying {len(pairs):,} additions.")

    for batch_start in range(0, len(pairs), batch_size):
        batch = pairs[batch_start:batch_start + batch_size]

        with Progress(
                SpinnerColumn(),
                BarColumn(),
                "[progress.percentage]{task.percentage:>3.0f}%",
                TextColumn("{task.completed}/{task.total} Additions"),
                TimeElapsedColumn(),
                disable=not show_progress
        ) as progress:

            task = progress.add_task("[cyan]Simulating...", total=len(batch))

            batch_results = []
            batch_failures = []

            for a, b in batch:
                try:
                    entry = simulate_case(a, b, max_steps=max_steps)
                except (ValueError, MachineError) as e:
                    summary["errors"] += 1
                    console_message(f"[WARNING] Failed to simulate {a} + {b}: {e}")
                    progress.update(task, advance=1)
                    continue

                batch_results.append(entry)
                summary["max_steps_seen"] = max(summary["max_steps_seen"], entry["steps"])
                if entry["correct"]:
                    summary["passed"] += 1
                else:
                    summary["failed"] += 1
                    if not entry["halted"]:
                        summary["did_not_halt"] += 1
                    batch_failures.append(entry)

                progress.update(task, advance=1)

        # === BULK WRITE once per batch ===
        if logger is not None:
            logger.log_results(batch_results)
            if batch_failures:
                logger.log_failures(batch_failures)

    console_message(
        f"[INFO] {summary['passed']:,} passed, {summary['failed']:,} failed "
        f"({summary['did_not_halt']:,} did not halt), {summary['errors']:,} errors."
    )
    return summary


# === CLI ===
def main(argv=None):
    parser = argparse.ArgumentParser(description="Check the adder machine against Python integer addition.")
    parser.add_argument("--max_bits", type=int, default=4, help="Exhaustively test operands below 2**max_bits")
    parser.add_argument("--random", type=int, default=200, help="Number of random operand pairs")
    parser.add_argument("--random_bits", type=int, default=16, help="Width of random operands")
    parser.add_argument("--seed", type=int, default=0, help="Seed for random operands")
    parser.add_argument("--batch_size", type=int, default=256, help="Additions per progress bar / log write")
    parser.add_argument("--max_steps", type=int, default=1000000, help="Step ceiling per addition, 0 for none")
    parser.add_argument("--log", action="store_true", help="Write results as JSON lines under logs/")
    args = parser.parse_args(argv)
    if args.batch_size <= 0:
        parser.error("--batch_size must be positive")
    for name in ("max_bits", "random", "random_bits", "max_steps"):
        if getattr(args, name) < 0:
            parser.error(f"--{name} must be >= 0")

    pairs = exhaustive_pairs(args.max_bits) + random_pairs(args.random, args.random_bits, seed=args.seed)
    summary = verify_sweep(
        pairs,
        batch_size=args.batch_size,
        max_steps=args.max_steps or None,
        logger=JSONLogger() if args.log else None
    )
    return 0 if summary["failed"] == 0 and summary["errors"] == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
