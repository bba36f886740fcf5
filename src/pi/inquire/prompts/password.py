"""Password - secret input with optional confirmation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Sequence

from pi.inquire.actions import Action, decode_password
from pi.inquire.formatter import Formatter, password_formatter
from pi.inquire.keys import KeyEvent
from pi.inquire.prompt import ActionResult, Answer, Prompt, PromptBase, PromptVariant, SubmitResult, ValidateFn
from pi.inquire.render_config import RenderConfig, get_configuration
from pi.inquire.renderer import Renderer
from pi.inquire.text_buffer import TextBuffer
from pi.inquire.validator import ErrorMessage, Validator

# hidden: nothing echoed; masked: one mask glyph per grapheme; full: plain text
DisplayMode = Literal["hidden", "masked", "full"]


@dataclass
class Confirmation:
    message: str
    error_message: str
    input: TextBuffer = field(default_factory=TextBuffer)


class PasswordVariant(PromptVariant[str]):
    def __init__(
        self,
        *,
        display_mode: DisplayMode = "hidden",
        enable_display_toggle: bool = False,
        confirmation: Confirmation | None = None,
    ) -> None:
        self.input = TextBuffer()
        self.confirmation = confirmation
        self.standard_display_mode: DisplayMode = display_mode
        self.current_display_mode: DisplayMode = display_mode
        self.enable_display_toggle = enable_display_toggle
        self.confirmation_stage = False

    def decode(self, key: KeyEvent) -> Action | None:
        return decode_password(key, self.enable_display_toggle)

    def active_input(self) -> TextBuffer:
        if self.confirmation_stage and self.confirmation is not None:
            return self.confirmation.input
        return self.input

    def toggle_display_mode(self) -> ActionResult:
        if self.current_display_mode == "full":
            new_mode = self.standard_display_mode
        else:
            new_mode = "full"
        if new_mode == self.current_display_mode:
            return "clean"
        self.current_display_mode = new_mode
        return "needs_redraw"

    def handle(self, action: str) -> ActionResult:
        if action == "toggle_display_mode":
            return self.toggle_display_mode()
        return "clean"

    def pre_cancel(self) -> bool:
        if self.confirmation_stage and self.confirmation is not None:
            self.confirmation_stage = False
            self.confirmation.input.clear()
            return False
        return True

    def render(self, message: str, renderer: Renderer) -> None:
        if self.confirmation_stage and self.confirmation is not None:
            message = self.confirmation.message
        buffer = self.active_input()

        if self.current_display_mode == "hidden":
            renderer.render_prompt(message)
        elif self.current_display_mode == "masked":
            renderer.render_prompt_with_masked_input(message, buffer)
        else:
            renderer.render_prompt_with_input(message, None, buffer)

    def current_submission(self) -> str:
        return self.input.content

    def submit(self, validate: ValidateFn) -> SubmitResult:
        if self.confirmation is None:
            return self._validate_primary(validate) or Answer(self.input.content)

        if not self.confirmation_stage:
            error = self._validate_primary(validate)
            if error is not None:
                return error
            self.confirmation_stage = True
            if self.current_display_mode == "hidden":
                self.confirmation.input.clear()
            return None

        if self.confirmation.input.content == self.input.content:
            return Answer(self.input.content)

        # Both entries start over
        self.confirmation_stage = False
        self.input.clear()
        self.confirmation.input.clear()
        return ErrorMessage(self.confirmation.error_message)

    def _validate_primary(self, validate: ValidateFn) -> ErrorMessage | None:
        error = validate(self.input.content)
        # Nothing is echoed in hidden mode, so start the retry from blank
        if error is not None and self.current_display_mode == "hidden":
            self.input.clear()
        return error


class Password(PromptBase[str]):
    """Secret text prompt.

    With confirmation enabled (the default) the answer must be typed twice;
    Escape during the second entry goes back to the first one instead of
    canceling.
    """

    DEFAULT_CONFIRMATION_MESSAGE = "Confirmation:"
    DEFAULT_CONFIRMATION_ERROR_MESSAGE = "The answers don't match."
    TOGGLE_HELP_MESSAGE = "Ctrl+R to reveal/hide"

    def __init__(
        self,
        message: str,
        *,
        display_mode: DisplayMode = "hidden",
        enable_display_toggle: bool = False,
        enable_confirmation: bool = True,
        confirmation_message: str = DEFAULT_CONFIRMATION_MESSAGE,
        confirmation_error_message: str = DEFAULT_CONFIRMATION_ERROR_MESSAGE,
        help_message: str | None = None,
        formatter: Formatter = password_formatter,
        validators: Sequence[Validator] = (),
        render_config: RenderConfig | None = None,
    ) -> None:
        self.message = message
        self.display_mode: DisplayMode = display_mode
        self.enable_display_toggle = enable_display_toggle
        self.enable_confirmation = enable_confirmation
        self.confirmation_message = confirmation_message
        self.confirmation_error_message = confirmation_error_message
        if help_message is None and enable_display_toggle:
            help_message = self.TOGGLE_HELP_MESSAGE
        self.help_message = help_message
        self.formatter = formatter
        self.validators = list(validators)
        self.render_config = render_config or get_configuration()

    def _build(self) -> Prompt[str]:
        confirmation = None
        if self.enable_confirmation:
            confirmation = Confirmation(self.confirmation_message, self.confirmation_error_message)

        variant = PasswordVariant(
            display_mode=self.display_mode,
            enable_display_toggle=self.enable_display_toggle,
            confirmation=confirmation,
        )
        return Prompt(
            self.message,
            variant,
            help_message=self.help_message,
            validators=self.validators,
            formatter=self.formatter,
            render_config=self.render_config,
        )
