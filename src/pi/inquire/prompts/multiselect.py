"""MultiSelect - toggle any number of options from a filterable list."""

from __future__ import annotations

from typing import Generic, Sequence, TypeVar

from pi.inquire.actions import Action, decode_multiselect
from pi.inquire.errors import InvalidConfigurationError
from pi.inquire.formatter import Formatter, default_multi_option_formatter
from pi.inquire.fuzzy import Scorer, default_scorer
from pi.inquire.keys import KeyEvent
from pi.inquire.list_option import ListOption
from pi.inquire.options import ScoredOptions
from pi.inquire.prompt import ActionResult, Prompt, PromptBase, PromptVariant
from pi.inquire.render_config import DEFAULT_PAGE_SIZE, DEFAULT_VIM_MODE, RenderConfig, get_configuration
from pi.inquire.renderer import Renderer
from pi.inquire.text_buffer import TextBuffer
from pi.inquire.validator import Validator

T = TypeVar("T")


class MultiSelectVariant(PromptVariant[list[ListOption[T]]], Generic[T]):
    def __init__(
        self,
        options: Sequence[T],
        *,
        default: Sequence[int] = (),
        scorer: Scorer = default_scorer,
        page_size: int = DEFAULT_PAGE_SIZE,
        vim_mode: bool = DEFAULT_VIM_MODE,
        starting_cursor: int = 0,
        starting_filter_input: str | None = None,
        reset_cursor: bool = True,
        filter_input_enabled: bool = True,
        keep_filter: bool = True,
    ) -> None:
        self.options = ScoredOptions(
            options, scorer, starting_cursor=starting_cursor, reset_cursor=reset_cursor
        )
        for index in default:
            if index < 0 or index >= len(self.options.options):
                raise InvalidConfigurationError(
                    f"Index {index} is out-of-bounds for length "
                    f"{len(self.options.options)} of options"
                )

        self.checked: set[int] = set(default)
        self.page_size = page_size
        self.vim_mode = vim_mode
        self.keep_filter = keep_filter
        self.input: TextBuffer | None = (
            TextBuffer(starting_filter_input or "") if filter_input_enabled else None
        )

    def setup(self) -> None:
        if self.input is not None and not self.input.is_empty():
            self.options.run_scorer(self.input.content)

    def decode(self, key: KeyEvent) -> Action | None:
        return decode_multiselect(key, self.vim_mode, self.input is not None)

    def active_input(self) -> TextBuffer | None:
        return self.input

    def on_content_changed(self) -> None:
        if self.input is not None:
            self.options.run_scorer(self.input.content)

    def _clear_filter(self) -> None:
        if self.keep_filter or self.input is None or self.input.is_empty():
            return
        self.input.clear()
        self.options.run_scorer("")

    def handle(self, action: str) -> ActionResult:
        if action == "toggle":
            highlighted = self.options.highlighted()
            if highlighted is None:
                return "clean"
            self.checked ^= {highlighted.index}
            self._clear_filter()
            return "needs_redraw"

        if action == "select_all":
            self.checked.update(self.options.scored)
            self._clear_filter()
            return "needs_redraw"

        if action == "clear_all":
            self.checked.difference_update(self.options.scored)
            self._clear_filter()
            return "needs_redraw"

        return "needs_redraw" if self.options.handle(action, self.page_size) else "clean"

    def render(self, message: str, renderer: Renderer) -> None:
        renderer.render_list_prompt(message, self.input)
        renderer.render_multi_options(self.options.page(self.page_size), self.checked)

    def current_submission(self) -> list[ListOption[T]]:
        return [ListOption(index, self.options.options[index]) for index in sorted(self.checked)]


class MultiSelect(PromptBase[list[ListOption[T]]], Generic[T]):
    """Multiple-choice list prompt.

    ``prompt()`` returns the checked options in ascending original-index
    order. Space toggles the highlighted option; Right/Left check or uncheck
    every option currently visible through the filter.
    """

    DEFAULT_HELP_MESSAGE = (
        "↑↓ to move, space to select one, → to all, ← to none, type to filter"
    )

    def __init__(
        self,
        message: str,
        options: Sequence[T],
        *,
        default: Sequence[int] = (),
        help_message: str | None = DEFAULT_HELP_MESSAGE,
        page_size: int = DEFAULT_PAGE_SIZE,
        vim_mode: bool = DEFAULT_VIM_MODE,
        starting_cursor: int = 0,
        starting_filter_input: str | None = None,
        reset_cursor: bool = True,
        filter_input_enabled: bool = True,
        keep_filter: bool = True,
        scorer: Scorer = default_scorer,
        formatter: Formatter = default_multi_option_formatter,
        validators: Sequence[Validator] = (),
        render_config: RenderConfig | None = None,
    ) -> None:
        self.message = message
        self.options = list(options)
        self.default = list(default)
        self.help_message = help_message
        self.page_size = page_size
        self.vim_mode = vim_mode
        self.starting_cursor = starting_cursor
        self.starting_filter_input = starting_filter_input
        self.reset_cursor = reset_cursor
        self.filter_input_enabled = filter_input_enabled
        self.keep_filter = keep_filter
        self.scorer = scorer
        self.formatter = formatter
        self.validators = list(validators)
        self.render_config = render_config or get_configuration()

    def _build(self) -> Prompt[list[ListOption[T]]]:
        variant: MultiSelectVariant[T] = MultiSelectVariant(
            self.options,
            default=self.default,
            scorer=self.scorer,
            page_size=self.page_size,
            vim_mode=self.vim_mode,
            starting_cursor=self.starting_cursor,
            starting_filter_input=self.starting_filter_input,
            reset_cursor=self.reset_cursor,
            filter_input_enabled=self.filter_input_enabled,
            keep_filter=self.keep_filter,
        )
        return Prompt(
            self.message,
            variant,
            help_message=self.help_message,
            validators=self.validators,
            formatter=self.formatter,
            render_config=self.render_config,
        )
