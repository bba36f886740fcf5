"""Text - free-form single-line input with autocompletion and history."""

from __future__ import annotations

from typing import Sequence

from pi.inquire.actions import Action, decode_text
from pi.inquire.autocompletion import Autocomplete
from pi.inquire.errors import call_user
from pi.inquire.formatter import Formatter, default_string_formatter
from pi.inquire.history import History
from pi.inquire.keys import KeyEvent
from pi.inquire.paginate import paginate
from pi.inquire.prompt import ActionResult, Prompt, PromptBase, PromptVariant
from pi.inquire.render_config import DEFAULT_PAGE_SIZE, RenderConfig, get_configuration
from pi.inquire.renderer import Renderer
from pi.inquire.text_buffer import TextBuffer
from pi.inquire.validator import Validator


class TextVariant(PromptVariant[str]):
    def __init__(
        self,
        *,
        initial_value: str | None = None,
        default: str | None = None,
        placeholder: str | None = None,
        autocompleter: Autocomplete | None = None,
        history: History | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        self.input = TextBuffer(initial_value or "", placeholder=placeholder)
        self.default = default
        self.autocompleter = autocompleter
        self.history = history
        self.page_size = page_size
        self.suggestions: list[str] = []
        self.focus: int | None = None

    # -- suggestions --------------------------------------------------------

    def update_suggestions(self) -> None:
        if self.autocompleter is None:
            return
        self.suggestions = list(
            call_user(self.autocompleter.get_suggestions, self.input.content)
        )
        self.focus = None

    def move_focus_up(self, qty: int) -> ActionResult:
        if self.focus is None:
            return "clean"
        self.focus = None if self.focus < qty else self.focus - qty
        return "needs_redraw"

    def move_focus_down(self, qty: int) -> ActionResult:
        if not self.suggestions:
            return "clean"
        last = len(self.suggestions) - 1
        if self.focus is None:
            new_focus = min(qty - 1, last)
        else:
            new_focus = min(self.focus + qty, last)
        if new_focus == self.focus:
            return "clean"
        self.focus = new_focus
        return "needs_redraw"

    def focused_suggestion(self) -> str | None:
        if self.focus is None:
            return None
        return self.suggestions[self.focus]

    def use_current_suggestion(self) -> ActionResult:
        if self.autocompleter is None:
            return "clean"
        completion = call_user(
            self.autocompleter.get_completion, self.input.content, self.focused_suggestion()
        )
        if completion is None:
            return "clean"
        self.input.set_content(completion)
        self.update_suggestions()
        return "needs_redraw"

    # -- history ------------------------------------------------------------

    def _browse_history(self, earlier: bool) -> ActionResult:
        if self.history is None:
            return "clean"
        entry = call_user(self.history.earlier if earlier else self.history.later)
        if entry is None:
            return "clean"
        self.input.set_content(entry)
        self.update_suggestions()
        return "needs_redraw"

    # -- variant hooks ------------------------------------------------------

    def setup(self) -> None:
        self.update_suggestions()

    def decode(self, key: KeyEvent) -> Action | None:
        return decode_text(key)

    def active_input(self) -> TextBuffer:
        return self.input

    def on_content_changed(self) -> None:
        self.update_suggestions()

    def handle(self, action: str) -> ActionResult:
        # Up/Down browse history while no suggestion list is shown
        if not self.suggestions and action == "move_to_suggestion_above":
            return self._browse_history(earlier=True)
        if not self.suggestions and action == "move_to_suggestion_below":
            return self._browse_history(earlier=False)

        if action == "move_to_suggestion_above":
            return self.move_focus_up(1)
        if action == "move_to_suggestion_below":
            return self.move_focus_down(1)
        if action == "move_to_suggestion_page_up":
            return self.move_focus_up(self.page_size)
        if action == "move_to_suggestion_page_down":
            return self.move_focus_down(self.page_size)
        if action == "use_current_suggestion":
            return self.use_current_suggestion()
        return "clean"

    def render(self, message: str, renderer: Renderer) -> None:
        renderer.render_prompt_with_input(message, self.default, self.input)
        if self.suggestions:
            renderer.render_suggestions(paginate(self.page_size, self.suggestions, self.focus))

    def current_submission(self) -> str:
        focused = self.focused_suggestion()
        if focused is not None:
            return focused
        if self.input.is_empty() and self.default is not None:
            return self.default
        return self.input.content

    def on_submitted(self, value: str) -> None:
        if self.history is not None:
            call_user(self.history.prepend, value)


class Text(PromptBase[str]):
    """Single-line text prompt.

    Submitting returns the focused suggestion if one is highlighted,
    otherwise the typed text, otherwise ``default``, otherwise ``""``.
    """

    AUTOCOMPLETE_HELP_MESSAGE = "↑↓ to move, tab to autocomplete, enter to submit"

    def __init__(
        self,
        message: str,
        *,
        default: str | None = None,
        initial_value: str | None = None,
        placeholder: str | None = None,
        help_message: str | None = None,
        autocompleter: Autocomplete | None = None,
        history: History | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        formatter: Formatter = default_string_formatter,
        validators: Sequence[Validator] = (),
        render_config: RenderConfig | None = None,
    ) -> None:
        self.message = message
        self.default = default
        self.initial_value = initial_value
        self.placeholder = placeholder
        if help_message is None and autocompleter is not None:
            help_message = self.AUTOCOMPLETE_HELP_MESSAGE
        self.help_message = help_message
        self.autocompleter = autocompleter
        self.history = history
        self.page_size = page_size
        self.formatter = formatter
        self.validators = list(validators)
        self.render_config = render_config or get_configuration()

    def _build(self) -> Prompt[str]:
        variant = TextVariant(
            initial_value=self.initial_value,
            default=self.default,
            placeholder=self.placeholder,
            autocompleter=self.autocompleter,
            history=self.history,
            page_size=self.page_size,
        )
        return Prompt(
            self.message,
            variant,
            help_message=self.help_message,
            validators=self.validators,
            formatter=self.formatter,
            render_config=self.render_config,
        )
