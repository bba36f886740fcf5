"""Key events and decoding of raw terminal input.

Turns the byte stream of a raw-mode terminal into ``KeyEvent`` values. Only
the legacy xterm encodings are understood: CSI/SS3 sequences for arrows and
navigation keys (with the ``;<mod>`` parameter for modifiers), single control
bytes, ESC-prefixed Alt combinations and printable characters.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

# ---------------------------------------------------------------------------
# Key model
# ---------------------------------------------------------------------------

KeyKind = Literal[
    "char",
    "enter",
    "escape",
    "tab",
    "backspace",
    "delete",
    "home",
    "end",
    "page_up",
    "page_down",
    "up",
    "down",
    "left",
    "right",
]

SHIFT = 1
ALT = 2
CTRL = 4

MODIFIERS: dict[str, int] = {
    "shift": SHIFT,
    "alt": ALT,
    "ctrl": CTRL,
}

ESC = "\x1b"


@dataclass(frozen=True)
class KeyEvent:
    """A decoded key press.

    ``char`` is set only for ``kind == "char"``. ``modifiers`` is a bitset of
    ``SHIFT``, ``ALT`` and ``CTRL``.
    """

    kind: KeyKind
    char: str | None = None
    modifiers: int = 0

    @property
    def ctrl(self) -> bool:
        return bool(self.modifiers & CTRL)

    @property
    def alt(self) -> bool:
        return bool(self.modifiers & ALT)

    @property
    def shift(self) -> bool:
        return bool(self.modifiers & SHIFT)

    def is_char(self, c: str, modifiers: int = 0) -> bool:
        return self.kind == "char" and self.char == c and self.modifiers == modifiers

    def __str__(self) -> str:
        prefix = "".join(f"{name}+" for name, bit in MODIFIERS.items() if self.modifiers & bit)
        return prefix + (self.char if self.kind == "char" and self.char else self.kind)


class Key:
    """Constructors for common key events."""

    enter = KeyEvent("enter")
    escape = KeyEvent("escape")
    tab = KeyEvent("tab")
    backspace = KeyEvent("backspace")
    delete = KeyEvent("delete")
    home = KeyEvent("home")
    end = KeyEvent("end")
    page_up = KeyEvent("page_up")
    page_down = KeyEvent("page_down")
    up = KeyEvent("up")
    down = KeyEvent("down")
    left = KeyEvent("left")
    right = KeyEvent("right")
    space = KeyEvent("char", " ")

    @staticmethod
    def char(c: str, modifiers: int = 0) -> KeyEvent:
        return KeyEvent("char", c, modifiers)

    @staticmethod
    def ctrl(key: KeyEvent | str) -> KeyEvent:
        if isinstance(key, str):
            return KeyEvent("char", key, CTRL)
        return KeyEvent(key.kind, key.char, key.modifiers | CTRL)

    @staticmethod
    def alt(key: KeyEvent | str) -> KeyEvent:
        if isinstance(key, str):
            return KeyEvent("char", key, ALT)
        return KeyEvent(key.kind, key.char, key.modifiers | ALT)

    @staticmethod
    def shift(key: KeyEvent) -> KeyEvent:
        return KeyEvent(key.kind, key.char, key.modifiers | SHIFT)


def parse_key_id(key_id: str) -> KeyEvent | None:
    """Build a ``KeyEvent`` from an identifier such as ``"ctrl+left"``."""
    *mods, name = key_id.split("+")
    modifiers = 0
    for mod in mods:
        bit = MODIFIERS.get(mod.lower())
        if bit is None:
            return None
        modifiers |= bit

    if name == "space":
        return KeyEvent("char", " ", modifiers)
    if name in _NAMED_KINDS:
        return KeyEvent(name, None, modifiers)  # type: ignore[arg-type]
    if len(name) == 1:
        return KeyEvent("char", name, modifiers)
    return None


_NAMED_KINDS: frozenset[str] = frozenset(
    {
        "enter",
        "escape",
        "tab",
        "backspace",
        "delete",
        "home",
        "end",
        "page_up",
        "page_down",
        "up",
        "down",
        "left",
        "right",
    }
)

# ---------------------------------------------------------------------------
# Legacy escape sequences
# ---------------------------------------------------------------------------

# CSI <n> ; <mod> <final>  and  SS3 <final>
_CSI_RE = re.compile(r"^\x1b\[(?:(\d+)(?:;(\d+))?)?([A-DHFZ~])$")
_SS3_RE = re.compile(r"^\x1bO([A-DHF])$")

_FINAL_KEYS: dict[str, KeyKind] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
    "H": "home",
    "F": "end",
}

_TILDE_KEYS: dict[str, KeyKind] = {
    "1": "home",
    "3": "delete",
    "4": "end",
    "5": "page_up",
    "6": "page_down",
    "7": "home",
    "8": "end",
}


def _xterm_modifiers(param: str | None) -> int:
    """Decode the xterm ``1 + bitmask`` modifier parameter."""
    if not param:
        return 0
    return (int(param) - 1) & (SHIFT | ALT | CTRL)


def _parse_escape_sequence(data: str) -> KeyEvent | None:
    ss3 = _SS3_RE.match(data)
    if ss3:
        return KeyEvent(_FINAL_KEYS[ss3.group(1)])

    csi = _CSI_RE.match(data)
    if csi:
        number, mod_param, final = csi.groups()
        modifiers = _xterm_modifiers(mod_param)
        if final == "Z":
            return KeyEvent("tab", None, SHIFT)
        if final == "~":
            kind = _TILDE_KEYS.get(number or "")
            if kind is None:
                return None
            return KeyEvent(kind, None, modifiers)
        return KeyEvent(_FINAL_KEYS[final], None, modifiers)

    # Alt + key (ESC prefix)
    if len(data) == 2:
        inner = _parse_single(data[1])
        if inner is None:
            return None
        return KeyEvent(inner.kind, inner.char, inner.modifiers | ALT)

    return None


def _parse_single(ch: str) -> KeyEvent | None:
    if ch == ESC:
        return KeyEvent("escape")
    if ch == "\r" or ch == "\n":
        return KeyEvent("enter")
    if ch == "\t":
        return KeyEvent("tab")
    if ch == "\x7f":
        return KeyEvent("backspace")
    if ch == "\x00":
        return KeyEvent("char", " ", CTRL)

    code = ord(ch)
    # Ctrl + letter (0x01 - 0x1a); 0x08 stays Ctrl+H since some terminals
    # send it for Ctrl+Backspace.
    if 1 <= code <= 26:
        return KeyEvent("char", chr(code + ord("a") - 1), CTRL)

    if ch.isprintable():
        return KeyEvent("char", ch)
    return None


def parse_key(data: str) -> KeyEvent | None:
    """Parse one complete input sequence and return its ``KeyEvent``.

    Returns ``None`` for empty input and for sequences that do not map to a
    key this library understands.
    """
    if not data:
        return None
    if len(data) == 1:
        return _parse_single(data)
    if data.startswith(ESC):
        return _parse_escape_sequence(data)
    return None


# ---------------------------------------------------------------------------
# Splitting a read buffer into sequences
# ---------------------------------------------------------------------------

SequenceStatus = Literal["complete", "incomplete", "not-escape"]


def _sequence_status(data: str) -> SequenceStatus:
    if not data.startswith(ESC):
        return "not-escape"
    if len(data) == 1:
        return "incomplete"

    after_esc = data[1:]
    if after_esc.startswith("["):
        if len(data) < 3:
            return "incomplete"
        last_code = ord(data[-1])
        return "complete" if 0x40 <= last_code <= 0x7E else "incomplete"
    if after_esc.startswith("O"):
        return "complete" if len(after_esc) >= 2 else "incomplete"
    return "complete"


def split_sequences(buffer: str) -> tuple[list[str], str]:
    """Split *buffer* into complete key sequences.

    Returns ``(sequences, remainder)`` where *remainder* is a trailing
    escape sequence that needs more bytes.
    """
    sequences: list[str] = []
    pos = 0

    while pos < len(buffer):
        remaining = buffer[pos:]

        if not remaining.startswith(ESC):
            sequences.append(remaining[0])
            pos += 1
            continue

        seq_end = 1
        while seq_end <= len(remaining):
            candidate = remaining[:seq_end]
            if _sequence_status(candidate) == "incomplete":
                seq_end += 1
                continue
            sequences.append(candidate)
            pos += seq_end
            break
        else:
            return sequences, remaining

    return sequences, ""
