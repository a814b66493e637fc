import argparse
import json

from simulator.binary_adder import build_adder_table
from simulator.symbols import ALPHABET, ControlState


def format_action(transition):
    if transition is None:
        return "HALT"
    return f"{transition.write}{transition.direction.value}{transition.next_state.value}"


def table_rows(table, symbols=ALPHABET):
    """One row per non-terminal state: the action for every symbol (HALT where no rule exists)."""
    rows = []
    for state in ControlState:
        if state is ControlState.HALT:
            continue
        rows.append((state, [format_action(table.lookup(state, symbol)) for symbol in symbols]))
    return rows


def pretty_print_table(table, symbols=ALPHABET):
    """Pretty print the rules in a state x symbol grid."""
    rows = table_rows(table, symbols)

    # === Terminal Human-Readable Table ===
    print("\n=== Transition Table ===")
    header = [" "] + list(symbols)
    print("\t".join(header))
    for state, actions in rows:
        print("\t".join([state.value] + actions))

    # === LaTeX Table Output ===
    print("\n=== LaTeX Table ===")
    print(r"\begin{array}{c|" + "c" * len(symbols) + "}")
    print("State/Symbol & " + " & ".join([f"\\text{{{s}}}" for s in symbols]) + r" \\ \hline")
    for state, actions in rows:
        latex_actions = [a.replace("_", r"\_") for a in actions]
        print(" & ".join([f"\\text{{{state.value}}}"] + latex_actions) + r" \\")
    print(r"\end{array}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Binary Adder Transition Table Inspector")
    parser.add_argument("--json", action="store_true", help="Dump the rules as JSON rows instead")
    args = parser.parse_args(argv)

    table = build_adder_table()
    print(f"[INFO] {len(table)} rules over {len(table.states())} states and {len(table.symbols())} symbols")
    if args.json:
        print(json.dumps(table.serialize(), indent=2))
    else:
        pretty_print_table(table)


if __name__ == "__main__":
    main()
