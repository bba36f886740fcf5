"""Mapping from key events to prompt actions.

Every decoder here is a pure function of the key (and, for some prompts, a
config flag). Actions fall into three disjoint families:

- control actions (``"submit"``, ``"cancel"``, ``"interrupt"``) handled by
  the engine itself,
- input actions (``Delete``/``MoveCursor``/``Write``) applied to the
  prompt's text buffer,
- inner actions, plain strings understood only by one prompt kind.
"""

from __future__ import annotations

from typing import Literal, Optional, Union

from pi.inquire.keys import CTRL, SHIFT, KeyEvent
from pi.inquire.text_buffer import Delete, InputAction, MoveCursor, Write

ControlAction = Literal["submit", "cancel", "interrupt"]

SelectAction = Literal[
    "move_up",
    "move_down",
    "page_up",
    "page_down",
    "move_to_start",
    "move_to_end",
]

MultiSelectAction = Literal[
    "move_up",
    "move_down",
    "page_up",
    "page_down",
    "move_to_start",
    "move_to_end",
    "toggle",
    "select_all",
    "clear_all",
]

TextAction = Literal[
    "move_to_suggestion_above",
    "move_to_suggestion_below",
    "move_to_suggestion_page_up",
    "move_to_suggestion_page_down",
    "use_current_suggestion",
]

DateSelectAction = Literal[
    "go_to_prev_day",
    "go_to_next_day",
    "go_to_prev_week",
    "go_to_next_week",
    "go_to_prev_month",
    "go_to_next_month",
    "go_to_prev_year",
    "go_to_next_year",
]

EditorAction = Literal["open_editor"]

PasswordAction = Literal["toggle_display_mode"]

Action = Union[ControlAction, InputAction, str]


# ---------------------------------------------------------------------------
# Shared families
# ---------------------------------------------------------------------------


def decode_control(key: KeyEvent) -> Optional[ControlAction]:
    if key.kind == "enter" or key.is_char("j", CTRL):
        return "submit"
    if key.kind == "escape" or key.is_char("d", CTRL):
        return "cancel"
    if key.is_char("c", CTRL):
        return "interrupt"
    return None


def decode_input(key: KeyEvent) -> Optional[InputAction]:
    kind = key.kind

    if kind == "backspace":
        return Delete("char", "left")
    if kind == "delete":
        return Delete("word", "right") if key.ctrl else Delete("char", "right")
    if kind == "home":
        return MoveCursor("line", "left")
    if kind == "end":
        return MoveCursor("line", "right")
    if kind in ("left", "right"):
        magnitude = "word" if key.ctrl else "char"
        return MoveCursor(magnitude, kind)

    if kind == "char" and key.char is not None:
        # Ctrl+H is ambiguous with Ctrl+Backspace on many terminals
        if key.modifiers & ~SHIFT:
            return None
        return Write(key.char)

    return None


def _decode_list_navigation(key: KeyEvent, vim_mode: bool) -> Optional[SelectAction]:
    if key.kind == "up" and not key.modifiers:
        return "move_up"
    if key.kind == "down" and not key.modifiers:
        return "move_down"
    if key.is_char("p", CTRL):
        return "move_up"
    if key.is_char("n", CTRL):
        return "move_down"
    if vim_mode and key.is_char("k"):
        return "move_up"
    if vim_mode and key.is_char("j"):
        return "move_down"
    if key.kind == "page_up":
        return "page_up"
    if key.kind == "page_down":
        return "page_down"
    if key.kind == "home":
        return "move_to_start"
    if key.kind == "end":
        return "move_to_end"
    return None


def _first(*candidates: Optional[Action]) -> Optional[Action]:
    for candidate in candidates:
        if candidate is not None:
            return candidate
    return None


# ---------------------------------------------------------------------------
# Per-prompt decoders
# ---------------------------------------------------------------------------


def decode_select(key: KeyEvent, vim_mode: bool = False, filter_input: bool = True) -> Optional[Action]:
    return _first(
        decode_control(key),
        _decode_list_navigation(key, vim_mode),
        decode_input(key) if filter_input else None,
    )


def decode_multiselect(key: KeyEvent, vim_mode: bool = False, filter_input: bool = True) -> Optional[Action]:
    inner: Optional[MultiSelectAction] = None
    if key.is_char(" "):
        inner = "toggle"
    elif key.kind == "right" and not key.modifiers:
        inner = "select_all"
    elif key.kind == "left" and not key.modifiers:
        inner = "clear_all"

    return _first(
        decode_control(key),
        inner,
        _decode_list_navigation(key, vim_mode),
        decode_input(key) if filter_input else None,
    )


def decode_text(key: KeyEvent) -> Optional[Action]:
    inner: Optional[TextAction] = None
    if key.kind == "up" and not key.modifiers:
        inner = "move_to_suggestion_above"
    elif key.kind == "down" and not key.modifiers:
        inner = "move_to_suggestion_below"
    elif key.kind == "page_up":
        inner = "move_to_suggestion_page_up"
    elif key.kind == "page_down":
        inner = "move_to_suggestion_page_down"
    elif key.kind == "tab" and not key.modifiers:
        inner = "use_current_suggestion"

    return _first(decode_control(key), inner, decode_input(key))


def decode_custom_type(key: KeyEvent) -> Optional[Action]:
    return _first(decode_control(key), decode_input(key))


def decode_password(key: KeyEvent, display_toggle: bool = False) -> Optional[Action]:
    inner: Optional[PasswordAction] = None
    if display_toggle and key.kind == "char" and key.ctrl and key.char in ("r", "R"):
        inner = "toggle_display_mode"
    return _first(decode_control(key), inner, decode_input(key))


def decode_date_select(key: KeyEvent, vim_mode: bool = False) -> Optional[Action]:
    control = decode_control(key)
    if control is not None:
        return control

    kind = key.kind
    if key.ctrl and kind in ("left", "right", "up", "down"):
        return {
            "left": "go_to_prev_month",
            "right": "go_to_next_month",
            "up": "go_to_prev_year",
            "down": "go_to_next_year",
        }[kind]

    if kind == "left" or key.is_char("b", CTRL) or (vim_mode and key.is_char("h")):
        return "go_to_prev_day"
    if kind == "right" or key.is_char("f", CTRL) or (vim_mode and key.is_char("l")):
        return "go_to_next_day"
    if kind == "up" or key.is_char("p", CTRL) or (vim_mode and key.is_char("k")):
        return "go_to_prev_week"
    if kind in ("down", "tab") or key.is_char("n", CTRL) or (vim_mode and key.is_char("j")):
        return "go_to_next_week"
    return None


def decode_editor(key: KeyEvent) -> Optional[Action]:
    control = decode_control(key)
    if control is not None:
        return control
    if key.is_char("e"):
        return "open_editor"
    return None
