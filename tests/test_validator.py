"""Tests for validators, parsers, formatters and history."""

from __future__ import annotations

from datetime import date

import pytest

from pi.inquire.formatter import (
    default_bool_formatter,
    default_date_formatter,
    default_multi_option_formatter,
    editor_formatter,
    password_formatter,
)
from pi.inquire.history import NoHistory, SimpleHistory
from pi.inquire.list_option import ListOption
from pi.inquire.parser import bool_default_value_formatter, parse_bool, parse_float, parse_int
from pi.inquire.validator import (
    ErrorMessage,
    ExactLengthValidator,
    MaxLengthValidator,
    MinLengthValidator,
    Validation,
    ValueRequiredValidator,
)


class TestValidation:
    def test_valid(self):
        assert Validation.valid().is_valid

    def test_invalid_wraps_message(self):
        result = Validation.invalid("bad")
        assert not result.is_valid
        assert result.error == ErrorMessage("bad")

    def test_invalid_without_message_uses_default(self):
        assert Validation.invalid().error == ErrorMessage.default()


class TestBuiltinValidators:
    def test_value_required(self):
        validator = ValueRequiredValidator()
        assert not validator("").is_valid
        assert not validator([]).is_valid
        assert validator("x").is_valid
        assert validator("").error == ErrorMessage("A response is required.")

    def test_lengths_count_graphemes(self):
        flag = "\U0001f1eb\U0001f1f7"
        assert MaxLengthValidator(1)(flag).is_valid
        assert ExactLengthValidator(2)("éa").is_valid

    def test_min_and_max(self):
        assert MinLengthValidator(2)("ab").is_valid
        assert not MinLengthValidator(3)("ab").is_valid
        assert not MaxLengthValidator(1)("ab").is_valid

    def test_lists(self):
        assert MinLengthValidator(2)([1, 2]).is_valid
        assert not MaxLengthValidator(1)([1, 2]).is_valid

    def test_default_messages(self):
        assert MaxLengthValidator(5)("too long").error == ErrorMessage(
            "The length of the response should be at most 5"
        )
        assert ExactLengthValidator(3)("ab").error == ErrorMessage(
            "The length of the response should be 3"
        )


class TestParsers:
    @pytest.mark.parametrize("text", ["y", "Y", "yes", "Yes"])
    def test_yes(self, text):
        assert parse_bool(text) is True

    @pytest.mark.parametrize("text", ["n", "N", "no", "NO"])
    def test_no(self, text):
        assert parse_bool(text) is False

    @pytest.mark.parametrize("text", ["", "ye", "yess", "nope", "true"])
    def test_rejected(self, text):
        with pytest.raises(ValueError):
            parse_bool(text)

    def test_numbers(self):
        assert parse_int(" 42 ") == 42
        assert parse_float("1e3") == 1000.0
        with pytest.raises(ValueError):
            parse_int("4.2")

    def test_bool_default_hint(self):
        assert bool_default_value_formatter(True) == "Y/n"
        assert bool_default_value_formatter(False) == "y/N"


class TestFormatters:
    def test_bool(self):
        assert default_bool_formatter(True) == "Yes"
        assert default_bool_formatter(False) == "No"

    def test_date(self):
        assert default_date_formatter(date(2021, 8, 1)) == "August 1, 2021"

    def test_multi_option(self):
        options = [ListOption(0, "a"), ListOption(2, "c")]
        assert default_multi_option_formatter(options) == "a, c"
        assert default_multi_option_formatter([]) == ""

    def test_masked_answers(self):
        assert password_formatter("hunter2") == "********"
        assert editor_formatter("long text") == "<received>"


class TestHistory:
    def test_no_history(self):
        history = NoHistory()
        history.prepend("x")
        assert history.earlier() is None
        assert history.later() is None

    def test_earlier_stops_at_oldest(self):
        history = SimpleHistory(["b", "a"])
        assert history.earlier() == "b"
        assert history.earlier() == "a"
        assert history.earlier() == "a"

    def test_later_returns_to_typed_input(self):
        history = SimpleHistory(["b", "a"])
        history.earlier()
        assert history.later() is None
        assert history.earlier() == "b"

    def test_prepend_resets_browsing(self):
        history = SimpleHistory(["a"])
        history.earlier()
        history.prepend("b")
        assert history.entries == ["b", "a"]
        assert history.earlier() == "b"

    def test_empty_history(self):
        assert SimpleHistory().earlier() is None
