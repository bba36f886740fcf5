"""Scored-options state shared by the select and multi-select prompts."""

from __future__ import annotations

from typing import Generic, Sequence, TypeVar

from pi.inquire.errors import InvalidConfigurationError, call_user
from pi.inquire.fuzzy import Scorer, score_options
from pi.inquire.list_option import ListOption
from pi.inquire.paginate import Page, paginate

T = TypeVar("T")


class ScoredOptions(Generic[T]):
    """Options, their string views, and the filtered order shown to the user.

    ``scored`` holds original indices in display order; ``cursor`` is a
    position within ``scored``.
    """

    def __init__(
        self,
        options: Sequence[T],
        scorer: Scorer,
        *,
        starting_cursor: int = 0,
        reset_cursor: bool = True,
    ) -> None:
        if not options:
            raise InvalidConfigurationError("Available options can not be empty")
        if starting_cursor < 0 or starting_cursor >= len(options):
            raise InvalidConfigurationError(
                f"Starting cursor index {starting_cursor} is out-of-bounds "
                f"for length {len(options)} of options"
            )

        self.options: list[T] = list(options)
        self.string_options: list[str] = [str(option) for option in self.options]
        self.scored: list[int] = list(range(len(self.options)))
        self.cursor: int = starting_cursor
        self.scorer = scorer
        self.reset_cursor = reset_cursor

    def __len__(self) -> int:
        return len(self.scored)

    def run_scorer(self, filter_input: str) -> bool:
        """Re-filter with *filter_input*; return True if the order changed."""
        scored = call_user(
            score_options, self.scorer, filter_input, self.options, self.string_options
        )
        if scored == self.scored:
            return False

        self.scored = scored
        if self.reset_cursor:
            self.cursor = 0
        else:
            self.cursor = min(self.cursor, max(len(scored) - 1, 0))
        return True

    # -- cursor movement ----------------------------------------------------

    def set_cursor(self, position: int) -> bool:
        if position == self.cursor:
            return False
        self.cursor = position
        return True

    def move_up(self) -> bool:
        if not self.scored:
            return False
        return self.set_cursor((self.cursor - 1) % len(self.scored))

    def move_down(self) -> bool:
        if not self.scored:
            return False
        return self.set_cursor((self.cursor + 1) % len(self.scored))

    def page_up(self, page_size: int) -> bool:
        return self.set_cursor(max(self.cursor - page_size, 0))

    def page_down(self, page_size: int) -> bool:
        if not self.scored:
            return False
        return self.set_cursor(min(self.cursor + page_size, len(self.scored) - 1))

    def move_to_start(self) -> bool:
        return self.set_cursor(0)

    def move_to_end(self) -> bool:
        return self.set_cursor(max(len(self.scored) - 1, 0))

    def handle(self, action: str, page_size: int) -> bool:
        if action == "move_up":
            return self.move_up()
        if action == "move_down":
            return self.move_down()
        if action == "page_up":
            return self.page_up(page_size)
        if action == "page_down":
            return self.page_down(page_size)
        if action == "move_to_start":
            return self.move_to_start()
        if action == "move_to_end":
            return self.move_to_end()
        return False

    # -- views --------------------------------------------------------------

    def highlighted(self) -> ListOption[T] | None:
        if not self.scored:
            return None
        index = self.scored[self.cursor]
        return ListOption(index, self.options[index])

    def page(self, page_size: int) -> Page[ListOption[str]]:
        """The visible window, with options shown as their string views."""
        choices = [ListOption(i, self.string_options[i]) for i in self.scored]
        focus = self.cursor if self.scored else None
        return paginate(page_size, choices, focus)
