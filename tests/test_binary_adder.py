"""Tests for the binary addition rule table running on the engine."""

import pytest

from simulator.binary_adder import (
    ADDER_RULES, add, build_adder_table, decode_result, encode_operands, to_binary,
)
from simulator.errors import StepLimitExceeded
from simulator.symbols import ControlState
from simulator.turing_machine import HaltReason, TuringMachine


class TestAdderTable:
    def test_table_is_built_once(self):
        assert build_adder_table() is build_adder_table()

    def test_every_rule_is_present(self, adder_table):
        assert len(adder_table) == len(ADDER_RULES)

    def test_halt_has_no_outgoing_rules(self, adder_table):
        assert ControlState.HALT not in adder_table.states()


class TestEncoding:
    def test_encode_ints(self):
        assert encode_operands(5, 0) == ["_", "1", "0", "1", "+", "0", "_"]

    def test_encode_binary_strings(self):
        assert encode_operands("011", "1") == ["_", "0", "1", "1", "+", "1", "_"]

    @pytest.mark.parametrize("operand", [-1, "", "102", "1 0", "abc"])
    def test_invalid_operands_raise(self, operand):
        with pytest.raises(ValueError):
            to_binary(operand)

    def test_decode_strips_marks_and_blanks(self):
        assert decode_result(["_", "+", "+", "1", "O", "I", "_"]) == "101"

    def test_decode_without_separator_raises(self):
        with pytest.raises(ValueError):
            decode_result(["_", "1", "_"])


class TestScenarios:
    def test_zero_plus_zero(self, adder_table):
        machine = TuringMachine(list("_0+0_"), adder_table)
        steps = machine.run()
        assert machine.state is ControlState.HALT
        assert machine.halt_reason is HaltReason.NO_RULE
        assert machine.tape == ["_", "+", "+", "O", "_"]
        assert machine.head == 0
        assert steps == 13
        assert decode_result(machine.tape) == "0"

    def test_one_plus_one(self, adder_table):
        machine = TuringMachine(list("_1+1_"), adder_table)
        steps = machine.run()
        assert machine.tape == ["_", "+", "1", "O", "_"]
        assert steps == 13
        assert decode_result(machine.tape) == "10"

    def test_example_from_source(self):
        result = add("1010011011", "1011")
        assert result.result == "1010100110"
        assert result.value == 678
        assert result.value == result.expected

    def test_missing_blanks_grow_tape(self, adder_table):
        machine = TuringMachine(list("1+1"), adder_table)
        steps = machine.run()
        assert steps == 12
        assert machine.growth_events == 2
        assert machine.tape == ["_", "+", "1", "O", "_"]
        assert decode_result(machine.tape) == "10"

    def test_unknown_symbol_halts_in_place(self, adder_table):
        machine = TuringMachine(list("_x+1_"), adder_table)
        machine.run()
        assert machine.halt_reason is HaltReason.NO_RULE
        assert machine.tape == list("_x+1_")
        assert machine.head == 1
        assert machine.steps == 2

    def test_empty_first_operand_halts(self, adder_table):
        machine = TuringMachine(list("_+1_"), adder_table)
        machine.run()
        assert machine.halted
        assert decode_result(machine.tape) == "1"

    def test_missing_separator_does_not_halt(self, adder_table):
        machine = TuringMachine(list("_11_"), adder_table)
        with pytest.raises(StepLimitExceeded):
            machine.run(max_steps=100)


class TestAdditionProperties:
    @pytest.mark.parametrize("a", range(16))
    def test_sums_match_python(self, a):
        for b in range(16):
            result = add(a, b)
            assert result.value == a + b, f"{a} + {b} gave {result.result}"

    @pytest.mark.parametrize("leading,trailing", [(0, 0), (0, 2), (2, 0), (3, 1)])
    def test_halt_reachable_with_any_blank_padding(self, adder_table, leading, trailing):
        for a in ["0", "1", "10", "111", "0101"]:
            for b in ["0", "1", "11", "1000"]:
                tape = ["_"] * leading + list(a) + ["+"] + list(b) + ["_"] * trailing
                machine = TuringMachine(tape, adder_table)
                machine.run(max_steps=10_000)
                assert machine.halted
                assert int(decode_result(machine.tape), 2) == int(a, 2) + int(b, 2)

    def test_head_in_bounds_and_growth_lazy(self, adder_table):
        machine = TuringMachine(list("1101+11"), adder_table)
        previous = None

        def check(record):
            nonlocal previous
            assert 0 <= record.head < len(record.tape)
            if previous is not None:
                assert len(record.tape) - len(previous.tape) in (0, 1)
            previous = record

        machine.run(on_step=check)
        assert len(machine.tape) == 7 + machine.growth_events
        assert decode_result(machine.tape) == format(13 + 3, "b")

    def test_operands_with_leading_zeros(self):
        result = add("0001", "0011")
        assert result.value == 4
