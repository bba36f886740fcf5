"""Input history navigated with Up/Down in the text prompt."""

from __future__ import annotations

from typing import Protocol


class History(Protocol):
    def earlier(self) -> str | None: ...

    def later(self) -> str | None: ...

    def prepend(self, entry: str) -> None: ...


class NoHistory:
    def earlier(self) -> str | None:
        return None

    def later(self) -> str | None:
        return None

    def prepend(self, entry: str) -> None:
        pass


class SimpleHistory:
    """In-memory history, most recent entry first.

    ``index == -1`` means "not browsing": the buffer shows what the user
    typed rather than a history entry.
    """

    def __init__(self, entries: list[str] | None = None) -> None:
        self._entries: list[str] = list(entries or [])
        self._index: int = -1

    @property
    def entries(self) -> list[str]:
        return list(self._entries)

    def earlier(self) -> str | None:
        if self._index < len(self._entries) - 1:
            self._index += 1
            return self._entries[self._index]
        if self._entries:
            return self._entries[-1]
        return None

    def later(self) -> str | None:
        if self._index >= 1:
            self._index -= 1
            return self._entries[self._index]
        if self._index == 0:
            self._index = -1
        return None

    def prepend(self, entry: str) -> None:
        if entry:
            self._entries.insert(0, entry)
        self._index = -1
