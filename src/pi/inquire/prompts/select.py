"""Select - pick one option from a filterable list."""

from __future__ import annotations

from typing import Generic, Sequence, TypeVar

from pi.inquire.actions import Action, decode_select
from pi.inquire.formatter import Formatter, default_option_formatter
from pi.inquire.fuzzy import Scorer, default_scorer
from pi.inquire.keys import KeyEvent
from pi.inquire.list_option import ListOption
from pi.inquire.options import ScoredOptions
from pi.inquire.prompt import ActionResult, Prompt, PromptBase, PromptVariant, SubmitResult, ValidateFn
from pi.inquire.render_config import DEFAULT_PAGE_SIZE, DEFAULT_VIM_MODE, RenderConfig, get_configuration
from pi.inquire.renderer import Renderer
from pi.inquire.text_buffer import TextBuffer

T = TypeVar("T")


class SelectVariant(PromptVariant[ListOption[T]], Generic[T]):
    def __init__(
        self,
        options: Sequence[T],
        *,
        scorer: Scorer = default_scorer,
        page_size: int = DEFAULT_PAGE_SIZE,
        vim_mode: bool = DEFAULT_VIM_MODE,
        starting_cursor: int = 0,
        starting_filter_input: str | None = None,
        reset_cursor: bool = True,
        filter_input_enabled: bool = True,
    ) -> None:
        self.options = ScoredOptions(
            options, scorer, starting_cursor=starting_cursor, reset_cursor=reset_cursor
        )
        self.page_size = page_size
        self.vim_mode = vim_mode
        self.input: TextBuffer | None = (
            TextBuffer(starting_filter_input or "") if filter_input_enabled else None
        )

    def setup(self) -> None:
        if self.input is not None and not self.input.is_empty():
            self.options.run_scorer(self.input.content)

    def decode(self, key: KeyEvent) -> Action | None:
        return decode_select(key, self.vim_mode, self.input is not None)

    def active_input(self) -> TextBuffer | None:
        return self.input

    def on_content_changed(self) -> None:
        if self.input is not None:
            self.options.run_scorer(self.input.content)

    def handle(self, action: str) -> ActionResult:
        return "needs_redraw" if self.options.handle(action, self.page_size) else "clean"

    def render(self, message: str, renderer: Renderer) -> None:
        renderer.render_list_prompt(message, self.input)
        renderer.render_options(self.options.page(self.page_size))

    def current_submission(self) -> ListOption[T] | None:  # type: ignore[override]
        return self.options.highlighted()

    def submit(self, validate: ValidateFn) -> SubmitResult:
        if self.options.highlighted() is None:
            return None
        return super().submit(validate)


class Select(PromptBase[ListOption[T]], Generic[T]):
    """Single-choice list prompt.

    ``prompt()`` returns the chosen ``ListOption`` (original index and value).
    Typing filters the list; the filter can be disabled with
    ``filter_input_enabled=False``.
    """

    DEFAULT_HELP_MESSAGE = "↑↓ to move, enter to select, type to filter"

    def __init__(
        self,
        message: str,
        options: Sequence[T],
        *,
        help_message: str | None = DEFAULT_HELP_MESSAGE,
        page_size: int = DEFAULT_PAGE_SIZE,
        vim_mode: bool = DEFAULT_VIM_MODE,
        starting_cursor: int = 0,
        starting_filter_input: str | None = None,
        reset_cursor: bool = True,
        filter_input_enabled: bool = True,
        scorer: Scorer = default_scorer,
        formatter: Formatter = default_option_formatter,
        render_config: RenderConfig | None = None,
    ) -> None:
        self.message = message
        self.options = list(options)
        self.help_message = help_message
        self.page_size = page_size
        self.vim_mode = vim_mode
        self.starting_cursor = starting_cursor
        self.starting_filter_input = starting_filter_input
        self.reset_cursor = reset_cursor
        self.filter_input_enabled = filter_input_enabled
        self.scorer = scorer
        self.formatter = formatter
        self.render_config = render_config or get_configuration()

    def _build(self) -> Prompt[ListOption[T]]:
        variant: SelectVariant[T] = SelectVariant(
            self.options,
            scorer=self.scorer,
            page_size=self.page_size,
            vim_mode=self.vim_mode,
            starting_cursor=self.starting_cursor,
            starting_filter_input=self.starting_filter_input,
            reset_cursor=self.reset_cursor,
            filter_input_enabled=self.filter_input_enabled,
        )
        return Prompt(
            self.message,
            variant,
            help_message=self.help_message,
            formatter=self.formatter,
            render_config=self.render_config,
        )
