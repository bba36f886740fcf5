"""DateSelect - pick a day on an interactive month calendar."""

from __future__ import annotations

import calendar
from datetime import date, timedelta
from typing import Sequence

from pi.inquire.actions import Action, decode_date_select
from pi.inquire.errors import InvalidConfigurationError
from pi.inquire.formatter import Formatter, default_date_formatter
from pi.inquire.keys import KeyEvent
from pi.inquire.prompt import ActionResult, Prompt, PromptBase, PromptVariant
from pi.inquire.render_config import DEFAULT_VIM_MODE, RenderConfig, get_configuration
from pi.inquire.renderer import Renderer
from pi.inquire.validator import Validator


def shift_months(day: date, months: int) -> date:
    """Move *day* by whole months, clamping the day to the target month."""
    index = day.year * 12 + (day.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    if year < date.min.year:
        return date.min
    if year > date.max.year:
        return date.max
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def shift_days(day: date, days: int) -> date:
    try:
        return day + timedelta(days=days)
    except OverflowError:
        return date.min if days < 0 else date.max


class DateSelectVariant(PromptVariant[date]):
    def __init__(
        self,
        *,
        starting_date: date,
        min_date: date | None = None,
        max_date: date | None = None,
        week_start: int = calendar.SUNDAY,
        vim_mode: bool = DEFAULT_VIM_MODE,
        today: date | None = None,
    ) -> None:
        if min_date is not None and max_date is not None and min_date > max_date:
            raise InvalidConfigurationError("Min date can not be greater than max date")
        if min_date is not None and min_date > starting_date:
            raise InvalidConfigurationError("Min date can not be greater than starting date")
        if max_date is not None and max_date < starting_date:
            raise InvalidConfigurationError("Max date can not be smaller than starting date")

        self.current_date = starting_date
        self.min_date = min_date
        self.max_date = max_date
        self.week_start = week_start
        self.vim_mode = vim_mode
        self.today = today or date.today()

    def clamp(self, day: date) -> date:
        if self.min_date is not None and day < self.min_date:
            return self.min_date
        if self.max_date is not None and day > self.max_date:
            return self.max_date
        return day

    def decode(self, key: KeyEvent) -> Action | None:
        return decode_date_select(key, self.vim_mode)

    def handle(self, action: str) -> ActionResult:
        day = self.current_date
        if action == "go_to_prev_day":
            day = shift_days(day, -1)
        elif action == "go_to_next_day":
            day = shift_days(day, 1)
        elif action == "go_to_prev_week":
            day = shift_days(day, -7)
        elif action == "go_to_next_week":
            day = shift_days(day, 7)
        elif action == "go_to_prev_month":
            day = shift_months(day, -1)
        elif action == "go_to_next_month":
            day = shift_months(day, 1)
        elif action == "go_to_prev_year":
            day = shift_months(day, -12)
        elif action == "go_to_next_year":
            day = shift_months(day, 12)
        else:
            return "clean"

        day = self.clamp(day)
        if day == self.current_date:
            return "clean"
        self.current_date = day
        return "needs_redraw"

    def render(self, message: str, renderer: Renderer) -> None:
        renderer.render_prompt(message)
        renderer.render_calendar(
            self.current_date.month,
            self.current_date.year,
            self.week_start,
            self.today,
            self.current_date,
            self.min_date,
            self.max_date,
        )

    def current_submission(self) -> date:
        return self.current_date


class DateSelect(PromptBase[date]):
    """Calendar date picker.

    Arrows move by day and week; with Ctrl they move by month and year.
    ``week_start`` uses ``calendar`` weekday numbers (``calendar.MONDAY``
    is 0).
    """

    DEFAULT_HELP_MESSAGE = "arrows to move, with ctrl to move months and years, enter to select"

    def __init__(
        self,
        message: str,
        *,
        starting_date: date | None = None,
        min_date: date | None = None,
        max_date: date | None = None,
        week_start: int = calendar.SUNDAY,
        vim_mode: bool = DEFAULT_VIM_MODE,
        help_message: str | None = DEFAULT_HELP_MESSAGE,
        formatter: Formatter = default_date_formatter,
        validators: Sequence[Validator] = (),
        render_config: RenderConfig | None = None,
        today: date | None = None,
    ) -> None:
        self.message = message
        self.today = today or date.today()
        self.starting_date = starting_date or self.today
        self.min_date = min_date
        self.max_date = max_date
        self.week_start = week_start
        self.vim_mode = vim_mode
        self.help_message = help_message
        self.formatter = formatter
        self.validators = list(validators)
        self.render_config = render_config or get_configuration()

    def _build(self) -> Prompt[date]:
        variant = DateSelectVariant(
            starting_date=self.starting_date,
            min_date=self.min_date,
            max_date=self.max_date,
            week_start=self.week_start,
            vim_mode=self.vim_mode,
            today=self.today,
        )
        return Prompt(
            self.message,
            variant,
            help_message=self.help_message,
            validators=self.validators,
            formatter=self.formatter,
            render_config=self.render_config,
        )
