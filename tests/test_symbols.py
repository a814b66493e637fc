"""Unit tests for the tape alphabet and the Direction / ControlState enums."""

import pytest

from simulator.symbols import INITIAL_STATE, ControlState, Direction, unmark


class TestMarks:
    def test_unmark_marked_digits(self):
        assert unmark("O") == "0"
        assert unmark("I") == "1"

    def test_unmark_leaves_other_symbols(self):
        for symbol in ["0", "1", "+", "_", "x"]:
            assert unmark(symbol) == symbol


class TestDirection:
    def test_exactly_two_directions(self):
        assert set(Direction) == {Direction.LEFT, Direction.RIGHT}

    @pytest.mark.parametrize("text,expected", [
        ("L", Direction.LEFT),
        ("R", Direction.RIGHT),
        ("LEFT", Direction.LEFT),
        ("RIGHT", Direction.RIGHT),
    ])
    def test_parse(self, text, expected):
        assert Direction.parse(text) is expected

    def test_parse_rejects_stay(self):
        with pytest.raises(ValueError):
            Direction.parse("S")


class TestControlState:
    def test_initial_state_is_find_plus(self):
        assert INITIAL_STATE is ControlState.FIND_PLUS

    def test_parse_by_value_and_name(self):
        assert ControlState.parse("BackToStart") is ControlState.BACK_TO_START
        assert ControlState.parse("HALT") is ControlState.HALT

    def test_parse_unknown_raises(self):
        with pytest.raises(ValueError):
            ControlState.parse("Accept")

    def test_str_is_display_name(self):
        assert str(ControlState.ADD_DIGIT_ONE) == "AddDigitOne"
