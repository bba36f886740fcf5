"""Tests for key-to-action decoding."""

from __future__ import annotations

import pytest

from pi.inquire.actions import (
    decode_control,
    decode_date_select,
    decode_editor,
    decode_input,
    decode_multiselect,
    decode_password,
    decode_select,
    decode_text,
)
from pi.inquire.keys import Key
from pi.inquire.text_buffer import Delete, MoveCursor, Write


class TestControl:
    @pytest.mark.parametrize(
        "key,action",
        [
            (Key.enter, "submit"),
            (Key.ctrl("j"), "submit"),
            (Key.escape, "cancel"),
            (Key.ctrl("d"), "cancel"),
            (Key.ctrl("c"), "interrupt"),
        ],
    )
    def test_control_keys(self, key, action):
        assert decode_control(key) == action

    def test_other_keys(self):
        assert decode_control(Key.char("a")) is None


class TestInput:
    def test_printable(self):
        assert decode_input(Key.char("x")) == Write("x")

    def test_shifted_char_still_writes(self):
        assert decode_input(Key.shift(Key.char("X"))) == Write("X")

    def test_ctrl_char_is_swallowed(self):
        assert decode_input(Key.ctrl("h")) is None

    def test_alt_char_is_swallowed(self):
        assert decode_input(Key.alt("b")) is None

    def test_editing_keys(self):
        assert decode_input(Key.backspace) == Delete("char", "left")
        assert decode_input(Key.delete) == Delete("char", "right")
        assert decode_input(Key.ctrl(Key.delete)) == Delete("word", "right")
        assert decode_input(Key.home) == MoveCursor("line", "left")
        assert decode_input(Key.end) == MoveCursor("line", "right")
        assert decode_input(Key.left) == MoveCursor("char", "left")
        assert decode_input(Key.ctrl(Key.right)) == MoveCursor("word", "right")


class TestSelect:
    def test_navigation(self):
        assert decode_select(Key.up) == "move_up"
        assert decode_select(Key.down) == "move_down"
        assert decode_select(Key.ctrl("p")) == "move_up"
        assert decode_select(Key.ctrl("n")) == "move_down"
        assert decode_select(Key.page_up) == "page_up"
        assert decode_select(Key.page_down) == "page_down"

    def test_home_end_jump_instead_of_editing_filter(self):
        assert decode_select(Key.home) == "move_to_start"
        assert decode_select(Key.end) == "move_to_end"

    def test_vim_keys_only_in_vim_mode(self):
        assert decode_select(Key.char("j"), vim_mode=True) == "move_down"
        assert decode_select(Key.char("k"), vim_mode=True) == "move_up"
        assert decode_select(Key.char("j")) == Write("j")

    def test_space_is_filter_text(self):
        assert decode_select(Key.space) == Write(" ")

    def test_filter_disabled(self):
        assert decode_select(Key.char("a"), filter_input=False) is None


class TestMultiSelect:
    def test_toggle_and_bulk(self):
        assert decode_multiselect(Key.space) == "toggle"
        assert decode_multiselect(Key.right) == "select_all"
        assert decode_multiselect(Key.left) == "clear_all"

    def test_typing_filters(self):
        assert decode_multiselect(Key.char("a")) == Write("a")


class TestText:
    def test_suggestion_keys(self):
        assert decode_text(Key.up) == "move_to_suggestion_above"
        assert decode_text(Key.down) == "move_to_suggestion_below"
        assert decode_text(Key.page_up) == "move_to_suggestion_page_up"
        assert decode_text(Key.page_down) == "move_to_suggestion_page_down"
        assert decode_text(Key.tab) == "use_current_suggestion"

    def test_enter_submits(self):
        assert decode_text(Key.enter) == "submit"


class TestPassword:
    def test_toggle_needs_flag(self):
        assert decode_password(Key.ctrl("r")) is None
        assert decode_password(Key.ctrl("r"), display_toggle=True) == "toggle_display_mode"
        assert decode_password(Key.ctrl("R"), display_toggle=True) == "toggle_display_mode"


class TestDateSelect:
    @pytest.mark.parametrize(
        "key,action",
        [
            (Key.left, "go_to_prev_day"),
            (Key.right, "go_to_next_day"),
            (Key.up, "go_to_prev_week"),
            (Key.down, "go_to_next_week"),
            (Key.tab, "go_to_next_week"),
            (Key.ctrl("b"), "go_to_prev_day"),
            (Key.ctrl("f"), "go_to_next_day"),
            (Key.ctrl("p"), "go_to_prev_week"),
            (Key.ctrl("n"), "go_to_next_week"),
            (Key.ctrl(Key.left), "go_to_prev_month"),
            (Key.ctrl(Key.right), "go_to_next_month"),
            (Key.ctrl(Key.up), "go_to_prev_year"),
            (Key.ctrl(Key.down), "go_to_next_year"),
        ],
    )
    def test_moves(self, key, action):
        assert decode_date_select(key) == action

    def test_vim_mode(self):
        assert decode_date_select(Key.char("h")) is None
        assert decode_date_select(Key.char("h"), vim_mode=True) == "go_to_prev_day"
        assert decode_date_select(Key.char("l"), vim_mode=True) == "go_to_next_day"


class TestEditor:
    def test_e_opens_editor(self):
        assert decode_editor(Key.char("e")) == "open_editor"

    def test_other_chars_ignored(self):
        assert decode_editor(Key.char("x")) is None
