"""CustomType - text input parsed into an arbitrary value type."""

from __future__ import annotations

from typing import Callable, Generic, Optional, Sequence, TypeVar

from pi.inquire.actions import Action, decode_custom_type
from pi.inquire.errors import CustomUserError, call_user
from pi.inquire.formatter import Formatter
from pi.inquire.keys import KeyEvent
from pi.inquire.parser import Parser
from pi.inquire.prompt import Answer, Prompt, PromptBase, PromptVariant, SubmitResult, ValidateFn
from pi.inquire.render_config import RenderConfig, get_configuration
from pi.inquire.renderer import Renderer
from pi.inquire.text_buffer import TextBuffer
from pi.inquire.validator import ErrorMessage, Validator

T = TypeVar("T")

DEFAULT_ERROR_MESSAGE = "Invalid input"


class CustomTypeVariant(PromptVariant[T], Generic[T]):
    def __init__(
        self,
        parser: Parser,
        *,
        default: Optional[T] = None,
        default_value_formatter: Callable[[T], str] = str,
        error_message: str = DEFAULT_ERROR_MESSAGE,
        placeholder: str | None = None,
        initial_value: str | None = None,
    ) -> None:
        self.parser = parser
        self.default = default
        self.default_value_formatter = default_value_formatter
        self.error_message = error_message
        self.input = TextBuffer(initial_value or "", placeholder=placeholder)

    def decode(self, key: KeyEvent) -> Action | None:
        return decode_custom_type(key)

    def active_input(self) -> TextBuffer:
        return self.input

    def render(self, message: str, renderer: Renderer) -> None:
        default = None
        if self.default is not None:
            default = call_user(self.default_value_formatter, self.default)
        renderer.render_prompt_with_input(message, default, self.input)

    def submit(self, validate: ValidateFn) -> SubmitResult:
        if self.input.is_empty() and self.default is not None:
            value = self.default
        else:
            try:
                value = call_user(self.parser, self.input.content)
            except CustomUserError as err:
                if not isinstance(err.inner, ValueError):
                    raise
                return ErrorMessage(self.error_message)

        error = validate(value)
        if error is not None:
            return error
        return Answer(value)


class CustomType(PromptBase[T], Generic[T]):
    """Prompt whose answer is produced by a user-supplied parser.

    The parser receives the raw text and raises ``ValueError`` to reject it;
    the prompt then shows ``error_message`` and keeps the input. An empty
    input with a ``default`` set submits the default.
    """

    def __init__(
        self,
        message: str,
        parser: Parser,
        *,
        default: Optional[T] = None,
        default_value_formatter: Callable[[T], str] = str,
        error_message: str = DEFAULT_ERROR_MESSAGE,
        placeholder: str | None = None,
        initial_value: str | None = None,
        help_message: str | None = None,
        formatter: Formatter = str,
        validators: Sequence[Validator] = (),
        render_config: RenderConfig | None = None,
    ) -> None:
        self.message = message
        self.parser = parser
        self.default = default
        self.default_value_formatter = default_value_formatter
        self.error_message = error_message
        self.placeholder = placeholder
        self.initial_value = initial_value
        self.help_message = help_message
        self.formatter = formatter
        self.validators = list(validators)
        self.render_config = render_config or get_configuration()

    def _build(self) -> Prompt[T]:
        variant: CustomTypeVariant[T] = CustomTypeVariant(
            self.parser,
            default=self.default,
            default_value_formatter=self.default_value_formatter,
            error_message=self.error_message,
            placeholder=self.placeholder,
            initial_value=self.initial_value,
        )
        return Prompt(
            self.message,
            variant,
            help_message=self.help_message,
            validators=self.validators,
            formatter=self.formatter,
            render_config=self.render_config,
        )
