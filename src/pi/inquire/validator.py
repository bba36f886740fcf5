"""Validators run over a prompt's answer on submit.

A validator is any callable ``value -> Validation``. Returning
``Validation.invalid(...)`` keeps the prompt open and shows the message on
the error row; raising an exception aborts the prompt with a
``CustomUserError``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Sized

import grapheme

Validator = Callable[[Any], "Validation"]


@dataclass(frozen=True)
class ErrorMessage:
    """Message shown on the error row; ``None`` uses the configured default."""

    text: str | None = None

    @classmethod
    def default(cls) -> ErrorMessage:
        return cls(None)


@dataclass(frozen=True)
class Validation:
    error: ErrorMessage | None = None

    @property
    def is_valid(self) -> bool:
        return self.error is None

    @classmethod
    def valid(cls) -> Validation:
        return cls(None)

    @classmethod
    def invalid(cls, message: str | ErrorMessage | None = None) -> Validation:
        if isinstance(message, ErrorMessage):
            return cls(message)
        return cls(ErrorMessage(message))


def _length(value: Any) -> int:
    if isinstance(value, str):
        return grapheme.length(value)
    if isinstance(value, Sized):
        return len(value)
    return len(str(value))


# ---------------------------------------------------------------------------
# Built-in validators
# ---------------------------------------------------------------------------


class ValueRequiredValidator:
    """Rejects empty strings and empty lists."""

    def __init__(self, message: str = "A response is required.") -> None:
        self.message = message

    def __call__(self, value: Any) -> Validation:
        if _length(value) == 0:
            return Validation.invalid(self.message)
        return Validation.valid()


class MaxLengthValidator:
    def __init__(self, limit: int, message: str | None = None) -> None:
        self.limit = limit
        self.message = message or f"The length of the response should be at most {limit}"

    def __call__(self, value: Any) -> Validation:
        if _length(value) <= self.limit:
            return Validation.valid()
        return Validation.invalid(self.message)


class MinLengthValidator:
    def __init__(self, limit: int, message: str | None = None) -> None:
        self.limit = limit
        self.message = message or f"The length of the response should be at least {limit}"

    def __call__(self, value: Any) -> Validation:
        if _length(value) >= self.limit:
            return Validation.valid()
        return Validation.invalid(self.message)


class ExactLengthValidator:
    def __init__(self, length: int, message: str | None = None) -> None:
        self.length = length
        self.message = message or f"The length of the response should be {length}"

    def __call__(self, value: Any) -> Validation:
        if _length(value) == self.length:
            return Validation.valid()
        return Validation.invalid(self.message)
