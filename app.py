# app.py

import argparse
import sys

from rich.console import Console
from rich.prompt import Prompt, IntPrompt, Confirm
from rich.table import Table

from config.config_loader import DEFAULT_CONFIG_PATH, load_config, save_config, step_ceiling
from logger.logger import JSONLogger
from simulator.binary_adder import build_adder_table
from simulator.errors import StepLimitExceeded
from simulator.symbols import ALPHABET
from tools.run_adder import run_addition
from tools.table_inspect import table_rows
from tools.verify_sweep import exhaustive_pairs, random_pairs, verify_sweep

console = Console()


# === Utilities ===
def load_runtime_config(path=DEFAULT_CONFIG_PATH):
    try:
        return load_config(path, verbose=False)
    except FileNotFoundError:
        console.print(f"[red]Error: {path} not found![/red]")
        sys.exit(1)
    except (ValueError, TypeError) as e:
        console.print(f"[red]Error: invalid configuration: {e}[/red]")
        sys.exit(1)


def make_logger(config):
    if not config["log_traces"]:
        return None
    return JSONLogger(config["output_directory"], config["log_file_prefix"])


def show_main_menu():
    console.print("\n[bold cyan]Binary Adder Turing Machine[/bold cyan]")
    console.print("[1] Run Example Addition")
    console.print("[2] Run Custom Addition")
    console.print("[3] Verify Sweep")
    console.print("[4] Inspect Transition Table")
    console.print("[5] Edit Config")
    console.print("[6] Exit")


def handle_run(config, a, b):
    try:
        result = run_addition(
            a,
            b,
            max_steps=step_ceiling(config),
            trace=config["trace"],
            trace_format=config["trace_format"],
            logger=make_logger(config)
        )
    except ValueError as e:
        console.print(f"[red]Invalid operands: {e}[/red]")
        return None
    except StepLimitExceeded as e:
        console.print(f"[red]{e}[/red]")
        return None

    color = "green" if result.value == result.expected else "red"
    console.print(f"[{color}]{result.a} + {result.b} = {result.result} ({result.value:,}) in {result.steps:,} steps[/{color}]")
    return result


def handle_custom(config):
    console.print("\n[bold]Run Custom Addition[/bold]")
    a = Prompt.ask("First operand (binary)", default=config["default_operands"][0])
    b = Prompt.ask("Second operand (binary)", default=config["default_operands"][1])
    return handle_run(config, a, b)


def handle_sweep(config):
    sweep = config["sweep"]
    pairs = exhaustive_pairs(sweep["max_bits"]) + random_pairs(sweep["random_cases"], sweep["random_bits"], seed=sweep["seed"])
    logger = JSONLogger(config["output_directory"], config["log_file_prefix"])
    summary = verify_sweep(pairs, batch_size=sweep["batch_size"], max_steps=step_ceiling(config), logger=logger)

    table = Table(show_header=True, header_style="bold magenta")
    for column in ("Total", "Passed", "Failed", "Did Not Halt", "Errors", "Longest Run"):
        table.add_column(column, justify="center")
    table.add_row(*(f"{summary[k]:,}" for k in ("total", "passed", "failed", "did_not_halt", "errors", "max_steps_seen")))
    console.print(table)
    return summary


def handle_inspect():
    table = Table(show_header=True, header_style="bold magenta", title="Transition Table")
    table.add_column("State")
    for symbol in ALPHABET:
        table.add_column(symbol, justify="center")
    for state, actions in table_rows(build_adder_table()):
        table.add_row(state.value, *(f"[red]{a}[/red]" if a == "HALT" else a for a in actions))
    console.print(table)


def handle_edit_config(config, path=DEFAULT_CONFIG_PATH):
    console.print("\n[bold]Edit Configuration[/bold]")

    max_steps = IntPrompt.ask("Max Steps (0 = unbounded)", default=config["max_steps"])
    trace = Confirm.ask("Print trace?", default=config["trace"])
    trace_format = Prompt.ask("Trace format", choices=["text", "caret"], default=config["trace_format"])
    log_traces = Confirm.ask("Log traces as JSON lines?", default=config["log_traces"])
    a = Prompt.ask("Default first operand", default=config["default_operands"][0])
    b = Prompt.ask("Default second operand", default=config["default_operands"][1])

    config.update({
        "max_steps": max_steps,
        "trace": trace,
        "trace_format": trace_format,
        "log_traces": log_traces,
        "default_operands": [a, b]
    })

    try:
        save_config(config, path)
    except (ValueError, TypeError) as e:
        console.print(f"[red]Configuration not saved: {e}[/red]")
        return
    console.print("[green]Configuration updated successfully.[/green]")


def interactive_main(path=DEFAULT_CONFIG_PATH):
    config = load_runtime_config(path)

    while True:
        show_main_menu()
        choice = Prompt.ask("\nChoose an option", choices=["1", "2", "3", "4", "5", "6"], default="6")

        if choice == "1":
            handle_run(config, *config["default_operands"])
        elif choice == "2":
            handle_custom(config)
        elif choice == "3":
            handle_sweep(config)
        elif choice == "4":
            handle_inspect()
        elif choice == "5":
            handle_edit_config(config, path)
            config = load_runtime_config(path)
        elif choice == "6":
            console.print("[bold green]Goodbye![/bold green]")
            break


# === CLI Mode for Automation ===
def cli_main(args):
    config = load_runtime_config(args.config)

    if args.run:
        handle_run(config, *config["default_operands"])
    if args.sweep:
        summary = handle_sweep(config)
        if summary["failed"] or summary["errors"]:
            return 1
    if args.inspect:
        handle_inspect()
    return 0


def main():
    parser = argparse.ArgumentParser(description="Binary Adder Turing Machine Application")
    parser.add_argument("--run", action="store_true", help="Run the configured example addition immediately")
    parser.add_argument("--sweep", action="store_true", help="Run the verification sweep immediately")
    parser.add_argument("--inspect", action="store_true", help="Print the transition table")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="Path to runtime_config.json")
    args = parser.parse_args()

    if args.run or args.sweep or args.inspect:
        sys.exit(cli_main(args))
    else:
        interactive_main(args.config)


if __name__ == "__main__":
    main()
