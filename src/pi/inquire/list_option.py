"""An option picked from a caller-provided list, with its original index."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ListOption(Generic[T]):
    index: int
    value: T

    def __str__(self) -> str:
        return str(self.value)
