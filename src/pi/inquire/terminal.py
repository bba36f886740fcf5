"""Terminal abstraction for raw-mode prompt interaction.

Provides the ``Terminal`` protocol the prompt engine draws on and a concrete
``ProcessTerminal`` backed by the process's stdin/stdout. Raw mode is scoped:
it is acquired by ``open()`` (or entering the context manager) and restored
by ``close()`` on every exit path.
"""

from __future__ import annotations

import codecs
import logging
import os
import select
import sys
import termios
import tty
from contextlib import AbstractContextManager, contextmanager
from typing import IO, Iterator, Protocol

from pi.inquire.errors import NotTTYError
from pi.inquire.keys import KeyEvent, parse_key, split_sequences
from pi.inquire.style import Styled

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# ANSI escape constants
# ---------------------------------------------------------------------------

_HIDE_CURSOR = "\x1b[?25l"
_SHOW_CURSOR = "\x1b[?25h"
_CLEAR_LINE = "\x1b[2K\r"
_CLEAR_UNTIL_EOL = "\x1b[K"
_CURSOR_UP_FMT = "\x1b[{}A"
_CURSOR_DOWN_FMT = "\x1b[{}B"
_CURSOR_RIGHT_FMT = "\x1b[{}C"
_CURSOR_LEFT_FMT = "\x1b[{}D"
_CURSOR_COLUMN_FMT = "\x1b[{}G"

# How long a lone ESC waits for the rest of an escape sequence.
_ESCAPE_TIMEOUT = 0.01


# ---------------------------------------------------------------------------
# Terminal protocol
# ---------------------------------------------------------------------------


class Terminal(Protocol):
    """Interface for the terminal operations a prompt needs."""

    def size(self) -> tuple[int, int]: ...

    def read_key(self) -> KeyEvent: ...

    def write(self, text: str) -> None: ...

    def write_styled(self, token: Styled) -> None: ...

    def clear_line(self) -> None: ...

    def clear_until_eol(self) -> None: ...

    def cursor_up(self, n: int) -> None: ...

    def cursor_down(self, n: int) -> None: ...

    def cursor_left(self, n: int) -> None: ...

    def cursor_right(self, n: int) -> None: ...

    def cursor_move_to_column(self, col: int) -> None: ...

    def cursor_hide(self) -> None: ...

    def cursor_show(self) -> None: ...

    def flush(self) -> None: ...

    def suspended(self) -> AbstractContextManager[None]: ...


# ---------------------------------------------------------------------------
# ProcessTerminal implementation
# ---------------------------------------------------------------------------


class ProcessTerminal:
    """Terminal backed by ``sys.stdin``/``sys.stdout``.

    Output is buffered until ``flush()``. Input is read from the raw file
    descriptor and split into complete escape sequences before decoding.
    """

    def __init__(self, stdin: IO[str] | None = None, stdout: IO[str] | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._original_termios: list | None = None
        self._out_buffer: list[str] = []
        self._pending: list[str] = []
        self._remainder: str = ""
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    # -- raw mode -----------------------------------------------------------

    def open(self) -> ProcessTerminal:
        """Switch stdin to raw mode, remembering the previous attributes."""
        try:
            fd = self._stdin.fileno()
        except (AttributeError, ValueError, OSError) as err:
            raise NotTTYError() from err

        if not os.isatty(fd):
            raise NotTTYError()

        try:
            self._original_termios = termios.tcgetattr(fd)
            tty.setraw(fd)
        except termios.error as err:
            raise NotTTYError() from err

        logger.debug("raw mode enabled on fd %d", fd)
        return self

    def close(self) -> None:
        """Restore the terminal to the state ``open()`` found it in."""
        try:
            self.cursor_show()
            self.flush()
        finally:
            if self._original_termios is not None:
                termios.tcsetattr(
                    self._stdin.fileno(), termios.TCSADRAIN, self._original_termios
                )
                self._original_termios = None
                logger.debug("raw mode released")

    def __enter__(self) -> ProcessTerminal:
        return self.open()

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @contextmanager
    def suspended(self) -> Iterator[None]:
        """Hand the terminal back in cooked mode, e.g. to a child process."""
        self.cursor_show()
        self.flush()
        fd = self._stdin.fileno()
        raw_attrs = termios.tcgetattr(fd) if self._original_termios is not None else None
        if self._original_termios is not None:
            termios.tcsetattr(fd, termios.TCSADRAIN, self._original_termios)
        try:
            yield
        finally:
            if raw_attrs is not None:
                termios.tcsetattr(fd, termios.TCSADRAIN, raw_attrs)

    # -- properties ---------------------------------------------------------

    def size(self) -> tuple[int, int]:
        try:
            size = os.get_terminal_size(self._stdout.fileno())
            return size.columns, size.lines
        except (ValueError, OSError):
            return 80, 24

    # -- input --------------------------------------------------------------

    def read_key(self) -> KeyEvent:
        """Block until a complete, recognised key has been read."""
        while True:
            while self._pending:
                key = parse_key(self._pending.pop(0))
                if key is not None:
                    return key
            self._fill()

    def _fill(self) -> None:
        fd = self._stdin.fileno()
        timeout = _ESCAPE_TIMEOUT if self._remainder else None
        ready, _, _ = select.select([fd], [], [], timeout)

        if not ready:
            # Nothing followed the partial sequence: emit it as-is (a lone
            # ESC becomes the Escape key).
            self._pending.append(self._remainder)
            self._remainder = ""
            return

        raw = os.read(fd, 1024)
        if not raw:
            raise EOFError("end of input while waiting for a key")

        text = self._remainder + self._decoder.decode(raw)
        sequences, self._remainder = split_sequences(text)
        self._pending.extend(sequences)

    # -- output -------------------------------------------------------------

    def write(self, text: str) -> None:
        self._out_buffer.append(text)

    def write_styled(self, token: Styled) -> None:
        self._out_buffer.append(token.render())

    def flush(self) -> None:
        if not self._out_buffer:
            return
        data = "".join(self._out_buffer)
        self._out_buffer.clear()
        self._stdout.write(data)
        self._stdout.flush()

    # -- cursor / line manipulation -----------------------------------------

    def clear_line(self) -> None:
        self.write(_CLEAR_LINE)

    def clear_until_eol(self) -> None:
        self.write(_CLEAR_UNTIL_EOL)

    def cursor_up(self, n: int) -> None:
        if n > 0:
            self.write(_CURSOR_UP_FMT.format(n))

    def cursor_down(self, n: int) -> None:
        if n > 0:
            self.write(_CURSOR_DOWN_FMT.format(n))

    def cursor_left(self, n: int) -> None:
        if n > 0:
            self.write(_CURSOR_LEFT_FMT.format(n))

    def cursor_right(self, n: int) -> None:
        if n > 0:
            self.write(_CURSOR_RIGHT_FMT.format(n))

    def cursor_move_to_column(self, col: int) -> None:
        # CSI G is 1-based
        self.write(_CURSOR_COLUMN_FMT.format(col + 1))

    def cursor_hide(self) -> None:
        self.write(_HIDE_CURSOR)

    def cursor_show(self) -> None:
        self.write(_SHOW_CURSOR)
