"""Virtual terminal for testing -- implements the Terminal protocol in-memory.

This module provides a ``VirtualTerminal`` class that satisfies the
``pi.inquire.terminal.Terminal`` protocol without performing any real I/O.
Keys are scripted up front; all output is captured for assertions.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from pi.inquire.keys import KeyEvent, parse_key, split_sequences
from pi.inquire.style import Styled


class VirtualTerminal:
    """In-memory terminal that replays scripted keys and records all writes.

    Implements the ``Terminal`` protocol from ``pi.inquire.terminal``.

    Parameters
    ----------
    keys:
        Raw input strings (``"abc"``, ``"\\x1b[B"``) and/or ``KeyEvent``
        objects, replayed in order by ``read_key``.
    columns:
        Number of terminal columns (width).
    rows:
        Number of terminal rows (height).
    """

    def __init__(self, *keys: str | KeyEvent, columns: int = 80, rows: int = 24) -> None:
        self._columns = columns
        self._rows = rows
        self._keys: list[KeyEvent] = []
        self._buffer: list[str] = []
        self._pending: list[str] = []
        self.frames: list[str] = []
        self.cursor_visible = True
        self.suspend_count = 0
        self.feed(*keys)

    def feed(self, *keys: str | KeyEvent) -> None:
        """Queue more input. Raw strings are decoded like real terminal input."""
        for key in keys:
            if isinstance(key, KeyEvent):
                self._keys.append(key)
                continue
            sequences, remainder = split_sequences(key)
            if remainder:
                sequences.append(remainder)
            for sequence in sequences:
                event = parse_key(sequence)
                if event is not None:
                    self._keys.append(event)

    # -- Terminal protocol: input -------------------------------------------

    def size(self) -> tuple[int, int]:
        return self._columns, self._rows

    def read_key(self) -> KeyEvent:
        if not self._keys:
            raise EOFError("virtual terminal ran out of scripted keys")
        return self._keys.pop(0)

    # -- Terminal protocol: output ------------------------------------------

    def write(self, text: str) -> None:
        self._buffer.append(text)
        self._pending.append(text.replace("\r\n", "\n"))

    def write_styled(self, token: Styled) -> None:
        self._buffer.append(token.render())
        self._pending.append(token.content)

    def clear_line(self) -> None:
        self._buffer.append("\x1b[2K\r")

    def clear_until_eol(self) -> None:
        self._buffer.append("\x1b[K")

    def cursor_up(self, n: int) -> None:
        if n > 0:
            self._buffer.append(f"\x1b[{n}A")

    def cursor_down(self, n: int) -> None:
        if n > 0:
            self._buffer.append(f"\x1b[{n}B")

    def cursor_left(self, n: int) -> None:
        if n > 0:
            self._buffer.append(f"\x1b[{n}D")

    def cursor_right(self, n: int) -> None:
        if n > 0:
            self._buffer.append(f"\x1b[{n}C")

    def cursor_move_to_column(self, col: int) -> None:
        self._buffer.append(f"\x1b[{col + 1}G")

    def cursor_hide(self) -> None:
        self.cursor_visible = False
        self._buffer.append("\x1b[?25l")

    def cursor_show(self) -> None:
        self.cursor_visible = True
        self._buffer.append("\x1b[?25h")

    def flush(self) -> None:
        """Close the current frame, if anything was drawn since the last one."""
        if self._pending:
            self.frames.append("".join(self._pending))
            self._pending = []

    @contextmanager
    def suspended(self) -> Iterator[None]:
        self.suspend_count += 1
        yield

    # -- Test helpers -------------------------------------------------------

    @property
    def output(self) -> str:
        """Everything written to the terminal, escape codes included."""
        return "".join(self._buffer)

    @property
    def last_frame(self) -> str:
        """Plain text of the most recently flushed frame."""
        return self.frames[-1] if self.frames else ""

    @property
    def remaining_keys(self) -> int:
        return len(self._keys)
