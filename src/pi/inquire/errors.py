"""Exception hierarchy raised by prompts.

Validation rejections are not errors: they are returned as values by
validators and rendered as the error row of the next frame.
"""

from __future__ import annotations

import errno
from typing import Any, Callable, TypeVar

T = TypeVar("T")

_NOT_TTY_ERRNOS = (errno.ENOTTY, errno.ENXIO)


class InquireError(Exception):
    """Base class for every error surfaced from a prompt call."""


class NotTTYError(InquireError):
    def __init__(self) -> None:
        super().__init__("The input device is not a TTY")


class InvalidConfigurationError(InquireError):
    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"The prompt configuration is invalid: {detail}")


class InquireIOError(InquireError):
    def __init__(self, inner: BaseException) -> None:
        self.inner = inner
        super().__init__(f"IO error: {inner}")


class OperationCanceledError(InquireError):
    def __init__(self) -> None:
        super().__init__("Operation was canceled by the user")


class OperationInterruptedError(InquireError):
    def __init__(self) -> None:
        super().__init__("Operation was interrupted by the user")


class CustomUserError(InquireError):
    """Wraps an exception raised by a caller-supplied callback."""

    def __init__(self, inner: BaseException) -> None:
        self.inner = inner
        super().__init__(f"User-provided error: {inner}")


def from_os_error(err: OSError) -> InquireError:
    """Map a terminal ``OSError`` to the matching prompt error."""
    if err.errno in _NOT_TTY_ERRNOS:
        return NotTTYError()
    return InquireIOError(err)


def call_user(fn: Callable[..., T], *args: Any) -> T:
    """Invoke a caller-supplied callback, wrapping what it raises."""
    try:
        return fn(*args)
    except InquireError:
        raise
    except Exception as err:
        raise CustomUserError(err) from err


__all__ = [
    "InquireError",
    "NotTTYError",
    "InvalidConfigurationError",
    "InquireIOError",
    "OperationCanceledError",
    "OperationInterruptedError",
    "CustomUserError",
    "from_os_error",
    "call_user",
]
