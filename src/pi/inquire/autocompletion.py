"""Autocompletion capability for the text prompt.

An autocompleter suggests full answers for the current input and, when the
user presses Tab, may replace the input with a completion.
"""

from __future__ import annotations

import os
from typing import Protocol

from pi.inquire.fuzzy import fuzzy_match


class Autocomplete(Protocol):
    def get_suggestions(self, input: str) -> list[str]: ...

    def get_completion(self, input: str, highlighted_suggestion: str | None) -> str | None: ...


class NoAutocomplete:
    def get_suggestions(self, input: str) -> list[str]:
        return []

    def get_completion(self, input: str, highlighted_suggestion: str | None) -> str | None:
        return None


class WordListCompleter:
    """Suggests entries of a fixed word list that fuzzy-match the input."""

    def __init__(self, words: list[str], limit: int | None = None) -> None:
        self._words = list(words)
        self._limit = limit

    def get_suggestions(self, input: str) -> list[str]:
        if not input:
            return []
        scored: list[tuple[str, float]] = []
        for word in self._words:
            match = fuzzy_match(input, word)
            if match.matches:
                scored.append((word, match.score))
        scored.sort(key=lambda item: item[1])
        words = [word for word, _ in scored]
        return words[: self._limit] if self._limit is not None else words

    def get_completion(self, input: str, highlighted_suggestion: str | None) -> str | None:
        if highlighted_suggestion is not None:
            return highlighted_suggestion
        suggestions = self.get_suggestions(input)
        if len(suggestions) == 1:
            return suggestions[0]
        return None


class FilePathCompleter:
    """Completes filesystem paths relative to *base_path*.

    ``~`` is expanded for lookup but kept in the suggested text.
    """

    def __init__(self, base_path: str | None = None) -> None:
        self._base_path = base_path or os.getcwd()

    def _search_location(self, input: str) -> tuple[str, str, str]:
        """Return ``(directory to scan, display directory, file prefix)``."""
        if input.endswith("/") or input in ("", "~"):
            display_dir = input if input != "~" else "~/"
            file_prefix = ""
        else:
            display_dir = input[: input.rfind("/") + 1]
            file_prefix = input[len(display_dir) :]

        expanded = os.path.expanduser(display_dir) if display_dir.startswith("~") else display_dir
        search_dir = expanded if os.path.isabs(expanded) else os.path.join(self._base_path, expanded)
        return search_dir, display_dir, file_prefix

    def get_suggestions(self, input: str) -> list[str]:
        search_dir, display_dir, file_prefix = self._search_location(input)
        try:
            entries = list(os.scandir(search_dir))
        except OSError:
            return []

        suggestions: list[str] = []
        for entry in entries:
            if not entry.name.lower().startswith(file_prefix.lower()):
                continue
            try:
                is_directory = entry.is_dir()
            except OSError:
                is_directory = False
            suffix = "/" if is_directory else ""
            suggestions.append(f"{display_dir}{entry.name}{suffix}")

        # Directories first, then alphabetical
        suggestions.sort(key=lambda s: (not s.endswith("/"), s.lower()))
        return suggestions

    def get_completion(self, input: str, highlighted_suggestion: str | None) -> str | None:
        if highlighted_suggestion is not None:
            return highlighted_suggestion

        suggestions = self.get_suggestions(input)
        if not suggestions:
            return None
        common = os.path.commonprefix(suggestions)
        if len(common) <= len(input):
            return None
        return common
