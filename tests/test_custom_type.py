"""End-to-end tests for CustomType and Confirm."""

from __future__ import annotations

import pytest

from pi.inquire import (
    Confirm,
    CustomType,
    CustomUserError,
    InquireIOError,
    Validation,
    parse_float,
    parse_int,
)

from virtual_terminal import VirtualTerminal

KEY_ENTER = "\r"
KEY_BACKSPACE = "\x7f"


class TestCustomType:
    def test_parses_float(self):
        term = VirtualTerminal("12.5", KEY_ENTER)
        assert CustomType("Amount", parse_float).prompt(term) == 12.5

    def test_parse_error_keeps_input(self):
        term = VirtualTerminal("abc", KEY_ENTER)
        with pytest.raises(InquireIOError):
            CustomType("Amount", parse_float).prompt(term)
        assert term.last_frame == "# Invalid input\n? Amount abc \n"

    def test_recovers_after_parse_error(self):
        term = VirtualTerminal("x", KEY_ENTER, KEY_BACKSPACE, "7", KEY_ENTER)
        assert CustomType("Count", parse_int).prompt(term) == 7

    def test_custom_error_message(self):
        term = VirtualTerminal("x", KEY_ENTER)
        with pytest.raises(InquireIOError):
            CustomType("Count", parse_int, error_message="Digits only").prompt(term)
        assert "# Digits only" in term.last_frame

    def test_default_on_empty_input(self):
        term = VirtualTerminal(KEY_ENTER)
        assert CustomType("Count", parse_int, default=3).prompt(term) == 3

    def test_default_shown_in_header(self):
        term = VirtualTerminal(KEY_ENTER)
        CustomType(
            "Price", parse_float, default=9.5, default_value_formatter=lambda v: f"${v:.2f}"
        ).prompt(term)
        assert term.frames[0].startswith("? Price ($9.50)")

    def test_validators_run_after_parsing(self):
        def positive(value):
            return Validation.valid() if value > 0 else Validation.invalid("must be positive")

        term = VirtualTerminal("-1", KEY_ENTER, KEY_BACKSPACE * 2, "2", KEY_ENTER)
        assert CustomType("Count", parse_int, validators=[positive]).prompt(term) == 2
        assert any("# must be positive" in frame for frame in term.frames)

    def test_parser_bugs_are_user_errors(self):
        def broken(text):
            raise KeyError(text)

        term = VirtualTerminal("x", KEY_ENTER)
        with pytest.raises(CustomUserError):
            CustomType("Count", broken).prompt(term)

    def test_answer_formatter(self):
        term = VirtualTerminal("12.5", KEY_ENTER)
        CustomType("Amount", parse_float, formatter=lambda v: f"${v:.2f}").prompt(term)
        assert term.last_frame == "? Amount $12.50\n"


class TestConfirm:
    @pytest.mark.parametrize("text,expected", [("y", True), ("YES", True), ("n", False), ("No", False)])
    def test_answers(self, text, expected):
        term = VirtualTerminal(text, KEY_ENTER)
        assert Confirm("Sure?").prompt(term) is expected

    def test_default_hint_and_value(self):
        term = VirtualTerminal(KEY_ENTER)
        assert Confirm("Sure?", default=False).prompt(term) is False
        assert term.frames[0].startswith("? Sure? (y/N)")

    def test_default_true_hint(self):
        term = VirtualTerminal(KEY_ENTER)
        Confirm("Sure?", default=True).prompt(term)
        assert term.frames[0].startswith("? Sure? (Y/n)")

    def test_invalid_answer(self):
        term = VirtualTerminal("maybe", KEY_ENTER)
        with pytest.raises(InquireIOError):
            Confirm("Sure?").prompt(term)
        assert "# Invalid answer, try typing 'y' for yes or 'n' for no" in term.last_frame

    def test_answer_row(self):
        term = VirtualTerminal("y", KEY_ENTER)
        Confirm("Sure?").prompt(term)
        assert term.last_frame == "? Sure? Yes\n"
