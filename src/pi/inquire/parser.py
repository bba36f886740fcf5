"""Parsers for typed prompts.

A parser maps the raw input string to a value and raises ``ValueError`` when
it cannot; the prompt then shows its configured error message.
"""

from __future__ import annotations

from typing import Any, Callable

Parser = Callable[[str], Any]


def parse_int(text: str) -> int:
    return int(text.strip())


def parse_float(text: str) -> float:
    return float(text.strip())


def parse_bool(text: str) -> bool:
    """Accepts ``y``/``yes``/``n``/``no`` in any case."""
    if len(text) > 3:
        raise ValueError(f"not a yes/no answer: {text!r}")

    answer = text.lower()
    if answer in ("y", "yes"):
        return True
    if answer in ("n", "no"):
        return False
    raise ValueError(f"not a yes/no answer: {text!r}")


def bool_default_value_formatter(value: bool) -> str:
    return "Y/n" if value else "y/N"
