"""Rendering primitives shared by every prompt kind.

Each public ``render_*`` method draws one or more complete rows into the
frame; every row ends with ``Frame.new_line``.
"""

from __future__ import annotations

import calendar
from datetime import date, timedelta
from typing import Any, Collection

from pi.inquire.frame import Frame
from pi.inquire.list_option import ListOption
from pi.inquire.paginate import Page, int_log10
from pi.inquire.render_config import RenderConfig
from pi.inquire.style import StyleSheet, Styled
from pi.inquire.terminal import Terminal
from pi.inquire.text_buffer import TextBuffer
from pi.inquire.validator import ErrorMessage

_WEEKDAY_NAMES = ["mo", "tu", "we", "th", "fr", "sa", "su"]


def calendar_start_date(month: int, year: int, week_start: int) -> date:
    """First cell of a 6x7 month grid.

    Walks back from the 1st of the month to the most recent *week_start*
    weekday (``0`` = Monday). A month starting exactly on *week_start* gets
    a full leading week from the previous month.
    """
    first = date(year, month, 1)
    back = (first.weekday() - week_start) % 7 or 7
    if first - date.min < timedelta(days=back):
        return date.min
    return first - timedelta(days=back)


class Renderer:
    def __init__(self, terminal: Terminal, config: RenderConfig) -> None:
        self.frame = Frame(terminal)
        self.config = config

    # -- frame lifecycle ----------------------------------------------------

    def frame_setup(self) -> None:
        self.frame.setup()

    def frame_finish(self) -> None:
        self.frame.finish()

    # -- low-level pieces ---------------------------------------------------

    def _print_prompt_with_prefix(self, prefix: Styled, message: str) -> None:
        self.frame.write_styled(prefix)
        self.frame.write(" ")
        self.frame.write_styled(Styled(message, self.config.prompt))

    def _print_prompt(self, message: str) -> None:
        self._print_prompt_with_prefix(self.config.prompt_prefix, message)

    def _print_default_value(self, value: str) -> None:
        self.frame.write_styled(Styled(f"({value})", self.config.default_value))

    def _print_input(self, buffer: TextBuffer) -> None:
        self.frame.write(" ")
        self.frame.mark_cursor(buffer.cursor)

        if buffer.is_empty():
            if buffer.placeholder:
                self.frame.write_styled(Styled(buffer.placeholder, self.config.placeholder))
        else:
            self.frame.write_styled(Styled(buffer.content, self.config.text_input))

        if buffer.cursor == buffer.length:
            self.frame.write(" ")

    def _print_prompt_with_input(
        self, message: str, default: str | None, buffer: TextBuffer
    ) -> None:
        self._print_prompt(message)
        if default is not None:
            self.frame.write(" ")
            self._print_default_value(default)
        self._print_input(buffer)
        self.frame.new_line()

    def _print_option_prefix(self, row: int, page: Page[Any]) -> None:
        if page.cursor == row:
            prefix = self.config.highlighted_option_prefix
        elif row == 0 and not page.first:
            prefix = self.config.scroll_up_prefix
        elif row + 1 == len(page.content) and not page.last:
            prefix = self.config.scroll_down_prefix
        else:
            prefix = Styled(" ")
        self.frame.write_styled(prefix)

    def _option_style(self, row: int, page: Page[Any]) -> StyleSheet:
        if self.config.selected_option is not None and page.cursor == row:
            return self.config.selected_option
        return self.config.option

    def _print_option_index_prefix(self, index: int, total: int) -> bool:
        number = index + 1
        width = int_log10(total)
        mode = self.config.option_index_prefix
        if mode == "simple":
            content = f"{number})"
        elif mode == "space_padded":
            content = f"{number:>{width}})"
        elif mode == "zero_padded":
            content = f"{number:0{width}})"
        else:
            return False
        self.frame.write_styled(Styled(content, self.config.option))
        return True

    # -- common rows --------------------------------------------------------

    def render_canceled_prompt(self, message: str) -> None:
        self._print_prompt(message)
        self.frame.write(" ")
        self.frame.write_styled(self.config.canceled_prompt_indicator)
        self.frame.new_line()

    def render_prompt_with_answer(self, message: str, answer: str) -> None:
        self._print_prompt_with_prefix(self.config.answered_prompt_prefix, message)
        self.frame.write(" ")
        self.frame.write_styled(Styled(answer, self.config.answer))
        self.frame.new_line()

    def render_error_message(self, error: ErrorMessage) -> None:
        cfg = self.config.error_message
        self.frame.write_styled(cfg.prefix)
        self.frame.write_styled(Styled(" ", cfg.separator))
        text = error.text if error.text is not None else cfg.default_message
        self.frame.write_styled(Styled(text, cfg.message))
        self.frame.new_line()

    def render_help_message(self, help_message: str) -> None:
        style = self.config.help_message
        self.frame.write_styled(Styled("[", style))
        self.frame.write_styled(Styled(help_message, style))
        self.frame.write_styled(Styled("]", style))
        self.frame.new_line()

    # -- prompt headers -----------------------------------------------------

    def render_prompt(self, message: str) -> None:
        """Header row with no input echo."""
        self._print_prompt(message)
        self.frame.new_line()

    def render_prompt_with_input(
        self, message: str, default: str | None, buffer: TextBuffer
    ) -> None:
        self._print_prompt_with_input(message, default, buffer)

    def render_list_prompt(self, message: str, buffer: TextBuffer | None) -> None:
        if buffer is not None:
            self._print_prompt_with_input(message, None, buffer)
        else:
            self.render_prompt(message)

    def render_prompt_with_masked_input(self, message: str, buffer: TextBuffer) -> None:
        masked = TextBuffer(self.config.password_mask * buffer.length)
        # Same cursor position over the masked text
        for _ in range(buffer.length - buffer.cursor):
            masked.move_cursor("char", "left")
        self._print_prompt_with_input(message, None, masked)

    def render_editor_prompt(self, message: str, editor_name: str) -> None:
        self._print_prompt(message)
        self.frame.write(" ")
        hint = f"[(e) to open {editor_name}, (enter) to submit]"
        self.frame.write_styled(Styled(hint, self.config.editor_prompt))
        self.frame.new_line()

    # -- lists --------------------------------------------------------------

    def render_options(self, page: Page[ListOption[Any]]) -> None:
        for row, option in enumerate(page.content):
            self._print_option_prefix(row, page)
            self.frame.write(" ")
            if self._print_option_index_prefix(option.index, page.total):
                self.frame.write(" ")
            self.frame.write_styled(Styled(str(option.value), self._option_style(row, page)))
            self.frame.new_line()

    def render_multi_options(self, page: Page[ListOption[Any]], checked: Collection[int]) -> None:
        for row, option in enumerate(page.content):
            self._print_option_prefix(row, page)
            self.frame.write(" ")
            if self._print_option_index_prefix(option.index, page.total):
                self.frame.write(" ")

            checkbox = (
                self.config.selected_checkbox
                if option.index in checked
                else self.config.unselected_checkbox
            )
            if self.config.selected_option is not None and page.cursor == row:
                checkbox = checkbox.with_style_sheet(self.config.selected_option)
            self.frame.write_styled(checkbox)
            self.frame.write(" ")

            self.frame.write_styled(Styled(str(option.value), self._option_style(row, page)))
            self.frame.new_line()

    def render_suggestions(self, page: Page[str]) -> None:
        for row, suggestion in enumerate(page.content):
            self._print_option_prefix(row, page)
            self.frame.write(" ")
            self.frame.write_styled(Styled(suggestion, self._option_style(row, page)))
            self.frame.new_line()

    # -- calendar -----------------------------------------------------------

    def _write_calendar_prefix(self) -> None:
        self.frame.write_styled(self.config.calendar.prefix)
        self.frame.write(" ")

    def render_calendar(
        self,
        month: int,
        year: int,
        week_start: int,
        today: date,
        selected: date,
        min_date: date | None,
        max_date: date | None,
    ) -> None:
        cfg = self.config.calendar

        header = f"{calendar.month_name[month].lower()} {year}"
        self._write_calendar_prefix()
        self.frame.write_styled(Styled(f"{header:^20}", cfg.header))
        self.frame.new_line()

        week_days = " ".join(_WEEKDAY_NAMES[(week_start + i) % 7] for i in range(7))
        self._write_calendar_prefix()
        self.frame.write_styled(Styled(week_days, cfg.week_header))
        self.frame.new_line()

        day = calendar_start_date(month, year, week_start)
        for _ in range(6):
            self._write_calendar_prefix()
            for col in range(7):
                if col > 0:
                    self.frame.write(" ")

                style = StyleSheet()
                if day == selected:
                    # Cursor goes on the last digit of single-digit days
                    self.frame.mark_cursor(1 if day.day < 10 else 0, show=cfg.selected_date is None)
                    if cfg.selected_date is not None:
                        style = cfg.selected_date
                elif day == today:
                    style = cfg.today_date
                elif day.month != month:
                    style = cfg.different_month_date

                if (min_date is not None and day < min_date) or (
                    max_date is not None and day > max_date
                ):
                    style = cfg.unavailable_date

                self.frame.write_styled(Styled(f"{day.day:2}", style))
                if day < date.max:
                    day += timedelta(days=1)
            self.frame.new_line()
