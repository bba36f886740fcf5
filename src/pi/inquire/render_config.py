"""Render configuration and the process-wide default.

Prompts take a snapshot of the global config when they are constructed and
never read the shared slot again, so replacing it mid-prompt has no effect
on a running prompt.
"""

from __future__ import annotations

import os
import threading
from dataclasses import dataclass, field, replace
from typing import Literal

from pi.inquire.style import Colors, StyleSheet, Styled

IndexPrefix = Literal["none", "simple", "space_padded", "zero_padded"]

DEFAULT_PAGE_SIZE = 7
DEFAULT_VIM_MODE = False


@dataclass(frozen=True)
class ErrorMessageRenderConfig:
    prefix: Styled = field(default_factory=lambda: Styled("#"))
    separator: StyleSheet = field(default_factory=StyleSheet)
    message: StyleSheet = field(default_factory=StyleSheet)
    default_message: str = "Invalid input."

    @classmethod
    def empty(cls) -> ErrorMessageRenderConfig:
        return cls()

    @classmethod
    def default_colored(cls) -> ErrorMessageRenderConfig:
        return cls(
            prefix=Styled("#").with_fg(Colors.LIGHT_RED),
            message=StyleSheet(fg=Colors.LIGHT_RED),
        )


@dataclass(frozen=True)
class CalendarRenderConfig:
    prefix: Styled = field(default_factory=lambda: Styled(">"))
    header: StyleSheet = field(default_factory=StyleSheet)
    week_header: StyleSheet = field(default_factory=StyleSheet)
    # None means "show the terminal cursor on the selected day instead"
    selected_date: StyleSheet | None = None
    today_date: StyleSheet = field(default_factory=StyleSheet)
    different_month_date: StyleSheet = field(default_factory=StyleSheet)
    unavailable_date: StyleSheet = field(default_factory=StyleSheet)

    @classmethod
    def empty(cls) -> CalendarRenderConfig:
        return cls()

    @classmethod
    def default_colored(cls) -> CalendarRenderConfig:
        return cls(
            prefix=Styled(">").with_fg(Colors.LIGHT_GREEN),
            selected_date=StyleSheet(fg=Colors.BLACK, bg=Colors.GREY),
            today_date=StyleSheet(fg=Colors.LIGHT_GREEN),
            different_month_date=StyleSheet(fg=Colors.DARK_GREY),
            unavailable_date=StyleSheet(fg=Colors.DARK_GREY),
        )


@dataclass(frozen=True)
class RenderConfig:
    """Every glyph and style the renderer needs."""

    prompt_prefix: Styled = field(default_factory=lambda: Styled("?"))
    answered_prompt_prefix: Styled = field(default_factory=lambda: Styled("?"))
    prompt: StyleSheet = field(default_factory=StyleSheet)
    default_value: StyleSheet = field(default_factory=StyleSheet)
    placeholder: StyleSheet = field(default_factory=StyleSheet)
    help_message: StyleSheet = field(default_factory=StyleSheet)
    password_mask: str = "*"
    text_input: StyleSheet = field(default_factory=StyleSheet)
    answer: StyleSheet = field(default_factory=StyleSheet)
    canceled_prompt_indicator: Styled = field(default_factory=lambda: Styled("<canceled>"))
    error_message: ErrorMessageRenderConfig = field(default_factory=ErrorMessageRenderConfig)
    highlighted_option_prefix: Styled = field(default_factory=lambda: Styled(">"))
    scroll_up_prefix: Styled = field(default_factory=lambda: Styled("^"))
    scroll_down_prefix: Styled = field(default_factory=lambda: Styled("v"))
    selected_checkbox: Styled = field(default_factory=lambda: Styled("[x]"))
    unselected_checkbox: Styled = field(default_factory=lambda: Styled("[ ]"))
    option_index_prefix: IndexPrefix = "none"
    option: StyleSheet = field(default_factory=StyleSheet)
    selected_option: StyleSheet | None = None
    calendar: CalendarRenderConfig = field(default_factory=CalendarRenderConfig)
    editor_prompt: StyleSheet = field(default_factory=StyleSheet)

    @classmethod
    def empty(cls) -> RenderConfig:
        return cls()

    @classmethod
    def default_colored(cls) -> RenderConfig:
        return cls(
            prompt_prefix=Styled("?").with_fg(Colors.LIGHT_GREEN),
            answered_prompt_prefix=Styled(">").with_fg(Colors.LIGHT_GREEN),
            placeholder=StyleSheet(fg=Colors.DARK_GREY),
            help_message=StyleSheet(fg=Colors.LIGHT_CYAN),
            answer=StyleSheet(fg=Colors.LIGHT_CYAN),
            canceled_prompt_indicator=Styled("<canceled>").with_fg(Colors.DARK_RED),
            error_message=ErrorMessageRenderConfig.default_colored(),
            highlighted_option_prefix=Styled(">").with_fg(Colors.LIGHT_CYAN),
            selected_checkbox=Styled("[x]").with_fg(Colors.LIGHT_GREEN),
            selected_option=StyleSheet(fg=Colors.LIGHT_CYAN),
            calendar=CalendarRenderConfig.default_colored(),
            editor_prompt=StyleSheet(fg=Colors.DARK_CYAN),
        )

    @classmethod
    def default(cls) -> RenderConfig:
        """Colored config, or the plain one when ``NO_COLOR`` is set."""
        if "NO_COLOR" in os.environ:
            return cls.empty()
        return cls.default_colored()

    def with_changes(self, **changes: object) -> RenderConfig:
        return replace(self, **changes)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Global default
# ---------------------------------------------------------------------------

_global_lock = threading.Lock()
_global_config: RenderConfig | None = None


def get_configuration() -> RenderConfig:
    """Return the current process-wide default render config."""
    global _global_config
    with _global_lock:
        if _global_config is None:
            _global_config = RenderConfig.default()
        return _global_config


def set_global_render_config(config: RenderConfig) -> None:
    """Replace the default used by prompts constructed from now on."""
    global _global_config
    with _global_lock:
        _global_config = config


def reset_global_render_config() -> None:
    """Drop the stored default so the next read re-evaluates ``NO_COLOR``."""
    global _global_config
    with _global_lock:
        _global_config = None
