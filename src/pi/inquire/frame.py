"""Frame - a line-counted view of what the prompt drew last.

Every write goes straight to the terminal's output buffer and is mirrored,
ANSI-free, in memory. ``setup()`` erases the rows drawn by the previous
frame; ``finish()`` lays the mirrored text out against the terminal width to
park the cursor where the text input expects it, then flushes.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass

import grapheme
import wcwidth as _wcwidth

from pi.inquire.style import Styled
from pi.inquire.terminal import Terminal


@dataclass
class Position:
    row: int = 0
    col: int = 0


def grapheme_width(cluster: str) -> int:
    """Display width of one grapheme cluster.

    Emoji clusters (VS16, ZWJ sequences, skin tones, flags) take two cells;
    marks and format characters take none; anything else is sized by
    ``wcwidth`` on its first code point.
    """
    if not cluster:
        return 0

    if len(cluster) == 1:
        cp = ord(cluster)
        if cp < 0x20 or 0x7F <= cp <= 0x9F:
            return 0
        return max(_wcwidth.wcwidth(cluster), 0)

    for ch in cluster:
        cp = ord(ch)
        if cp in (0xFE0F, 0x200D) or 0x1F3FB <= cp <= 0x1F3FF or 0x1F1E6 <= cp <= 0x1F1FF:
            return 2

    first = cluster[0]
    first_cp = ord(first)
    if first_cp >= 0x1F000 or 0x2600 <= first_cp <= 0x27BF:
        return 2

    category = unicodedata.category(first)
    if category.startswith("M") or category == "Cf":
        return 0
    return max(_wcwidth.wcwidth(first), 0)


class Frame:
    def __init__(self, terminal: Terminal) -> None:
        self._terminal = terminal
        self.lines_drawn: int = 0
        self._content: list[str] = []
        self._content_len: int = 0
        self._cursor_offset: int | None = None
        self._show_cursor: bool = False
        # Where the terminal cursor is and where the frame ends, relative to
        # the frame's first row.
        self._current = Position()
        self._end = Position()
        self._width: int = terminal.size()[0]

    @property
    def terminal(self) -> Terminal:
        return self._terminal

    @property
    def content(self) -> str:
        """Plain text drawn since the last ``setup()``."""
        return "".join(self._content)

    @property
    def cursor_visible(self) -> bool:
        return self._show_cursor

    # -- writing ------------------------------------------------------------

    def write(self, text: str) -> None:
        self._terminal.write(text)
        self._mirror(text)

    def write_styled(self, token: Styled) -> None:
        self._terminal.write_styled(token)
        self._mirror(token.content)

    def new_line(self) -> None:
        self._terminal.write("\r\n")
        self._mirror("\n")
        self.lines_drawn += 1

    def mark_cursor(self, offset: int = 0, *, show: bool = True) -> None:
        """Record that the input cursor sits *offset* grapheme clusters ahead."""
        self._cursor_offset = self._content_len + offset
        if show:
            self._show_cursor = True

    def _mirror(self, text: str) -> None:
        self._content.append(text)
        self._content_len += grapheme.length(text)

    # -- frame lifecycle ----------------------------------------------------

    def setup(self) -> None:
        """Erase the previous frame and start counting lines from zero."""
        self._terminal.cursor_hide()
        self._terminal.flush()

        if self._current.row < self._end.row:
            self._terminal.cursor_down(self._end.row - self._current.row)
            self._terminal.cursor_move_to_column(self._end.col)

        for _ in range(self._end.row):
            self._terminal.cursor_up(1)
            self._terminal.clear_line()

        self._width = max(self._terminal.size()[0], 1)
        self.lines_drawn = 0
        self._content = []
        self._content_len = 0
        self._cursor_offset = None
        self._show_cursor = False
        self._current = Position()
        self._end = Position()

    def finish(self) -> None:
        """Place the cursor at the marked input position and flush."""
        end, cursor = self._layout()
        self._end = end
        self._current = end

        if cursor is not None:
            self._terminal.cursor_up(end.row - cursor.row)
            self._terminal.cursor_move_to_column(cursor.col)
            self._current = cursor

        if self._show_cursor:
            self._terminal.cursor_show()
        else:
            self._terminal.cursor_hide()
        self._terminal.flush()

    def forget(self) -> None:
        """Treat whatever is on screen as scrolled past; draw below it."""
        self._current = Position()
        self._end = Position()

    def _layout(self) -> tuple[Position, Position | None]:
        pos = Position()
        cursor: Position | None = None

        for idx, cluster in enumerate(grapheme.graphemes(self.content)):
            width = grapheme_width(cluster)
            if cluster == "\n":
                pos = Position(pos.row + 1, 0)
            elif self._width - pos.col >= width:
                pos = Position(pos.row, pos.col + width)
            else:
                pos = Position(pos.row + 1, width)

            if idx == self._cursor_offset:
                cursor = Position(pos.row, max(pos.col - width, 0))

        return pos, cursor
