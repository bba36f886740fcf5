"""TextBuffer - single-line, grapheme-aware edit buffer with a cursor.

Cursor positions and lengths are counted in grapheme clusters, never in
code points, so a flag emoji or a letter with a combining accent is a
single cursor step.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal, Union

import grapheme

Magnitude = Literal["char", "word", "line"]
Direction = Literal["left", "right"]
InputActionResult = Literal["content_changed", "position_changed", "clean"]

_WORD_CHAR_RE = re.compile(r"\w")


# ---------------------------------------------------------------------------
# Input actions
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Delete:
    magnitude: Magnitude
    direction: Direction


@dataclass(frozen=True)
class MoveCursor:
    magnitude: Magnitude
    direction: Direction


@dataclass(frozen=True)
class Write:
    char: str


InputAction = Union[Delete, MoveCursor, Write]


def needs_redraw(result: InputActionResult) -> bool:
    return result != "clean"


def is_alphanumeric(g: str) -> bool:
    """True when the grapheme contains a Unicode word character."""
    return bool(_WORD_CHAR_RE.search(g))


# ---------------------------------------------------------------------------
# TextBuffer
# ---------------------------------------------------------------------------


class TextBuffer:
    """Edit buffer backing every prompt that takes typed input."""

    def __init__(self, content: str = "", placeholder: str | None = None) -> None:
        self._graphemes: list[str] = list(grapheme.graphemes(content))
        self._cursor: int = len(self._graphemes)
        self.placeholder: str | None = placeholder

    # -- read access --------------------------------------------------------

    @property
    def content(self) -> str:
        return "".join(self._graphemes)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def length(self) -> int:
        return len(self._graphemes)

    def is_empty(self) -> bool:
        return not self._graphemes

    def pre_cursor(self) -> str:
        return "".join(self._graphemes[: self._cursor])

    def split(self) -> tuple[str, str, str]:
        """Return ``(before, at, after)`` around the cursor.

        ``at`` is the grapheme under the cursor, or a single space when the
        cursor sits past the last grapheme.
        """
        before = self.pre_cursor()
        if self._cursor < len(self._graphemes):
            at = self._graphemes[self._cursor]
            after = "".join(self._graphemes[self._cursor + 1 :])
        else:
            at = " "
            after = ""
        return before, at, after

    # -- mutation -----------------------------------------------------------

    def set_content(self, content: str) -> None:
        """Replace the whole content and move the cursor to the end."""
        self._graphemes = list(grapheme.graphemes(content))
        self._cursor = len(self._graphemes)

    def clear(self) -> None:
        self.set_content("")

    def handle(self, action: InputAction) -> InputActionResult:
        if isinstance(action, Write):
            return self.insert(action.char)
        if isinstance(action, Delete):
            return self.delete(action.magnitude, action.direction)
        return self.move_cursor(action.magnitude, action.direction)

    def insert(self, c: str) -> InputActionResult:
        old_len = len(self._graphemes)
        before = "".join(self._graphemes[: self._cursor])
        after = "".join(self._graphemes[self._cursor :])
        self._graphemes = list(grapheme.graphemes(before + c + after))

        # A combining mark merges into the previous cluster.
        if len(self._graphemes) > old_len:
            self._cursor += 1
        self._cursor = min(self._cursor, len(self._graphemes))
        return "content_changed"

    def delete(self, magnitude: Magnitude, direction: Direction) -> InputActionResult:
        if direction == "left":
            if self._cursor == 0:
                return "clean"
            end = self._cursor
            if magnitude == "char":
                start = end - 1
            elif magnitude == "word":
                start = self._prev_word_index()
            else:
                start = 0
            self._cursor = start
        else:
            start = self._cursor
            if magnitude == "char":
                end = min(start + 1, len(self._graphemes))
            elif magnitude == "word":
                end = self._next_word_index()
            else:
                end = len(self._graphemes)

        if start >= end:
            return "clean"

        del self._graphemes[start:end]
        return "content_changed"

    def move_cursor(self, magnitude: Magnitude, direction: Direction) -> InputActionResult:
        if direction == "left":
            if magnitude == "char":
                target = self._cursor - 1
            elif magnitude == "word":
                target = self._prev_word_index()
            else:
                target = 0
        else:
            if magnitude == "char":
                target = self._cursor + 1
            elif magnitude == "word":
                target = self._next_word_index()
            else:
                target = len(self._graphemes)

        target = max(0, min(target, len(self._graphemes)))
        if target == self._cursor:
            return "clean"
        self._cursor = target
        return "position_changed"

    # -- word boundaries ----------------------------------------------------

    def _prev_word_index(self) -> int:
        seen_word = False
        for i in range(self._cursor - 1, -1, -1):
            if is_alphanumeric(self._graphemes[i]):
                seen_word = True
            elif seen_word:
                return i + 1
        return 0

    def _next_word_index(self) -> int:
        seen_word = False
        for i in range(self._cursor, len(self._graphemes)):
            if is_alphanumeric(self._graphemes[i]):
                seen_word = True
            elif seen_word:
                return i
        return len(self._graphemes)
