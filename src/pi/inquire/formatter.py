"""Formatters turn a submitted answer into the text shown after the prompt."""

from __future__ import annotations

from datetime import date
from typing import Any, Callable, Sequence

Formatter = Callable[[Any], str]


def default_string_formatter(value: str) -> str:
    return value


def default_bool_formatter(value: bool) -> str:
    return "Yes" if value else "No"


def default_date_formatter(value: date) -> str:
    """E.g. ``"August 1, 2021"``."""
    return f"{value.strftime('%B')} {value.day}, {value.year}"


def default_option_formatter(option: Any) -> str:
    return str(option)


def default_multi_option_formatter(options: Sequence[Any]) -> str:
    return ", ".join(str(option) for option in options)


def password_formatter(value: str) -> str:
    return "********"


def editor_formatter(value: str) -> str:
    return "<received>"
