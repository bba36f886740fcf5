"""Tests for the grapheme-aware TextBuffer."""

from __future__ import annotations

import pytest

from pi.inquire.text_buffer import Delete, MoveCursor, TextBuffer, Write, needs_redraw


class TestInitialState:
    def test_empty(self):
        buf = TextBuffer()
        assert buf.content == ""
        assert buf.cursor == 0
        assert buf.is_empty()

    def test_cursor_starts_at_end(self):
        buf = TextBuffer("hello")
        assert buf.cursor == 5
        assert buf.split() == ("hello", " ", "")

    def test_placeholder_is_not_content(self):
        buf = TextBuffer(placeholder="type here")
        assert buf.is_empty()
        assert buf.placeholder == "type here"


class TestInsert:
    def test_insert_at_end(self):
        buf = TextBuffer("ab")
        assert buf.handle(Write("c")) == "content_changed"
        assert buf.content == "abc"
        assert buf.cursor == 3

    def test_insert_in_middle(self):
        buf = TextBuffer("ac")
        buf.handle(MoveCursor("char", "left"))
        buf.handle(Write("b"))
        assert buf.content == "abc"
        assert buf.cursor == 2

    def test_combining_mark_joins_previous_grapheme(self):
        buf = TextBuffer("e")
        buf.handle(Write("\u0301"))
        assert buf.length == 1
        assert buf.cursor == 1
        assert buf.content == "e\u0301"

    def test_flag_counts_as_one(self):
        buf = TextBuffer("\U0001f1eb\U0001f1f7")
        assert buf.length == 1
        assert buf.cursor == 1


class TestDelete:
    def test_backspace(self):
        buf = TextBuffer("abc")
        assert buf.handle(Delete("char", "left")) == "content_changed"
        assert buf.content == "ab"

    def test_backspace_at_start_is_clean(self):
        buf = TextBuffer("abc")
        buf.handle(MoveCursor("line", "left"))
        assert buf.handle(Delete("char", "left")) == "clean"
        assert buf.content == "abc"

    def test_delete_at_end_is_clean(self):
        buf = TextBuffer("abc")
        assert buf.handle(Delete("char", "right")) == "clean"

    def test_delete_forward(self):
        buf = TextBuffer("abc")
        buf.handle(MoveCursor("line", "left"))
        buf.handle(Delete("char", "right"))
        assert buf.content == "bc"
        assert buf.cursor == 0

    def test_delete_word_left(self):
        buf = TextBuffer("hello big world")
        buf.handle(Delete("word", "left"))
        assert buf.content == "hello big "
        assert buf.cursor == 10

    def test_delete_word_right(self):
        buf = TextBuffer("hello big world")
        buf.handle(MoveCursor("line", "left"))
        buf.handle(Delete("word", "right"))
        assert buf.content == " big world"

    def test_delete_line_left(self):
        buf = TextBuffer("hello")
        buf.handle(MoveCursor("char", "left"))
        buf.handle(Delete("line", "left"))
        assert buf.content == "o"
        assert buf.cursor == 0


class TestMoveCursor:
    def test_left_and_right(self):
        buf = TextBuffer("ab")
        assert buf.handle(MoveCursor("char", "left")) == "position_changed"
        assert buf.cursor == 1
        assert buf.handle(MoveCursor("char", "right")) == "position_changed"
        assert buf.cursor == 2

    def test_right_at_end_is_clean(self):
        buf = TextBuffer("ab")
        assert buf.handle(MoveCursor("char", "right")) == "clean"

    def test_word_left_skips_to_word_start(self):
        buf = TextBuffer("foo bar")
        buf.handle(MoveCursor("word", "left"))
        assert buf.cursor == 4
        buf.handle(MoveCursor("word", "left"))
        assert buf.cursor == 0

    def test_word_left_at_start_is_clean(self):
        buf = TextBuffer("foo bar")
        buf.handle(MoveCursor("line", "left"))
        assert buf.handle(MoveCursor("word", "left")) == "clean"
        assert buf.cursor == 0

    def test_word_right(self):
        buf = TextBuffer("foo bar")
        buf.handle(MoveCursor("line", "left"))
        buf.handle(MoveCursor("word", "right"))
        assert buf.cursor == 3

    def test_line_moves(self):
        buf = TextBuffer("foo")
        buf.handle(MoveCursor("line", "left"))
        assert buf.cursor == 0
        buf.handle(MoveCursor("line", "right"))
        assert buf.cursor == 3

    def test_split_mid_buffer(self):
        buf = TextBuffer("abc")
        buf.handle(MoveCursor("char", "left"))
        assert buf.split() == ("ab", "c", "")


class TestSetContent:
    def test_moves_cursor_to_end(self):
        buf = TextBuffer("x")
        buf.set_content("hello")
        assert buf.cursor == 5

    def test_clear(self):
        buf = TextBuffer("x")
        buf.clear()
        assert buf.is_empty()
        assert buf.cursor == 0


def test_needs_redraw():
    assert needs_redraw("content_changed")
    assert needs_redraw("position_changed")
    assert not needs_redraw("clean")


# ---------------------------------------------------------------------------
# Properties over every buffer, cursor and action
# ---------------------------------------------------------------------------

CONTENTS = ["", "a", "foo bar", "  spaced  out ", "été", "a\U0001f1eb\U0001f1f7b", "x_y-z"]

ACTIONS = [
    Write("q"),
    *(Delete(m, d) for m in ("char", "word", "line") for d in ("left", "right")),
    *(MoveCursor(m, d) for m in ("char", "word", "line") for d in ("left", "right")),
]


def _buffer_at(content: str, cursor: int) -> TextBuffer:
    buf = TextBuffer(content)
    for _ in range(buf.length - cursor):
        buf.handle(MoveCursor("char", "left"))
    return buf


def _states():
    for content in CONTENTS:
        for cursor in range(TextBuffer(content).length + 1):
            yield content, cursor


class TestProperties:
    @pytest.mark.parametrize("content,cursor", list(_states()))
    @pytest.mark.parametrize("action", ACTIONS, ids=repr)
    def test_cursor_never_passes_length(self, content, cursor, action):
        buf = _buffer_at(content, cursor)
        buf.handle(action)
        assert 0 <= buf.cursor <= buf.length
        buf.handle(action)
        assert 0 <= buf.cursor <= buf.length

    @pytest.mark.parametrize("content,cursor", list(_states()))
    @pytest.mark.parametrize("char", ["z", "é", "漢"])
    def test_insert_then_backspace_restores(self, content, cursor, char):
        buf = _buffer_at(content, cursor)
        buf.handle(Write(char))
        assert buf.cursor == cursor + 1
        buf.handle(Delete("char", "left"))
        assert buf.content == content
        assert buf.cursor == cursor

    @pytest.mark.parametrize("content,cursor", list(_states()))
    def test_line_left_then_right_ends_at_length(self, content, cursor):
        buf = _buffer_at(content, cursor)
        buf.handle(MoveCursor("line", "left"))
        buf.handle(MoveCursor("line", "right"))
        assert buf.cursor == buf.length
