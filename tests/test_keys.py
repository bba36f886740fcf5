"""Tests for pi.inquire.keys: decoding raw terminal input into key events."""

from __future__ import annotations

import pytest

from pi.inquire.keys import (
    ALT,
    CTRL,
    SHIFT,
    Key,
    KeyEvent,
    parse_key,
    parse_key_id,
    split_sequences,
)


# ---------------------------------------------------------------------------
# Single bytes
# ---------------------------------------------------------------------------


class TestParseSingle:
    """One-byte input maps to plain keys and Ctrl+letter."""

    def test_printable_char(self):
        assert parse_key("a") == KeyEvent("char", "a")

    def test_unicode_char(self):
        assert parse_key("é") == KeyEvent("char", "é")

    def test_space_is_a_char(self):
        assert parse_key(" ") == Key.space

    @pytest.mark.parametrize("data", ["\r", "\n"])
    def test_enter(self, data):
        assert parse_key(data) == Key.enter

    def test_tab(self):
        assert parse_key("\t") == Key.tab

    def test_backspace(self):
        assert parse_key("\x7f") == Key.backspace

    def test_lone_escape(self):
        assert parse_key("\x1b") == Key.escape

    def test_ctrl_c(self):
        event = parse_key("\x03")
        assert event == KeyEvent("char", "c", CTRL)
        assert event.ctrl

    def test_ctrl_h_is_not_backspace(self):
        assert parse_key("\x08") == KeyEvent("char", "h", CTRL)

    def test_nul_is_ctrl_space(self):
        assert parse_key("\x00") == KeyEvent("char", " ", CTRL)

    def test_empty_input(self):
        assert parse_key("") is None


# ---------------------------------------------------------------------------
# Escape sequences
# ---------------------------------------------------------------------------


class TestParseEscapeSequences:
    """CSI / SS3 sequences and ESC-prefixed Alt keys."""

    @pytest.mark.parametrize(
        "data,kind",
        [
            ("\x1b[A", "up"),
            ("\x1b[B", "down"),
            ("\x1b[C", "right"),
            ("\x1b[D", "left"),
            ("\x1b[H", "home"),
            ("\x1b[F", "end"),
            ("\x1bOA", "up"),
            ("\x1bOH", "home"),
            ("\x1b[1~", "home"),
            ("\x1b[3~", "delete"),
            ("\x1b[4~", "end"),
            ("\x1b[5~", "page_up"),
            ("\x1b[6~", "page_down"),
        ],
    )
    def test_named_keys(self, data, kind):
        assert parse_key(data) == KeyEvent(kind)

    def test_ctrl_left(self):
        assert parse_key("\x1b[1;5D") == KeyEvent("left", None, CTRL)

    def test_shift_up(self):
        assert parse_key("\x1b[1;2A") == KeyEvent("up", None, SHIFT)

    def test_ctrl_delete(self):
        assert parse_key("\x1b[3;5~") == KeyEvent("delete", None, CTRL)

    def test_shift_tab(self):
        assert parse_key("\x1b[Z") == KeyEvent("tab", None, SHIFT)

    def test_alt_letter(self):
        assert parse_key("\x1bx") == KeyEvent("char", "x", ALT)

    def test_unknown_tilde_code(self):
        assert parse_key("\x1b[99~") is None


# ---------------------------------------------------------------------------
# Splitting
# ---------------------------------------------------------------------------


class TestSplitSequences:
    """A read buffer is split into complete sequences plus a remainder."""

    def test_plain_text(self):
        assert split_sequences("abc") == (["a", "b", "c"], "")

    def test_mixed(self):
        assert split_sequences("a\x1b[Bb") == (["a", "\x1b[B", "b"], "")

    def test_incomplete_csi_is_remainder(self):
        assert split_sequences("x\x1b[1;") == (["x"], "\x1b[1;")

    def test_lone_escape_is_remainder(self):
        assert split_sequences("\x1b") == ([], "\x1b")


# ---------------------------------------------------------------------------
# Key ids and helpers
# ---------------------------------------------------------------------------


class TestKeyIds:
    def test_plain(self):
        assert parse_key_id("enter") == Key.enter

    def test_modified(self):
        assert parse_key_id("ctrl+left") == KeyEvent("left", None, CTRL)

    def test_char(self):
        assert parse_key_id("ctrl+r") == Key.ctrl("r")

    def test_space(self):
        assert parse_key_id("space") == Key.space

    def test_unknown_modifier(self):
        assert parse_key_id("hyper+a") is None

    def test_str_roundtrip_names(self):
        assert str(Key.ctrl(Key.left)) == "ctrl+left"
        assert str(Key.char("a")) == "a"


class TestKeyEvent:
    def test_is_char_requires_exact_modifiers(self):
        assert Key.char("e").is_char("e")
        assert not Key.ctrl("e").is_char("e")
        assert Key.ctrl("e").is_char("e", CTRL)

    def test_modifier_properties(self):
        event = Key.alt(Key.shift(Key.up))
        assert event.alt and event.shift and not event.ctrl
