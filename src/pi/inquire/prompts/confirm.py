"""Confirm - a yes/no question."""

from __future__ import annotations

from typing import Optional, Sequence

from pi.inquire.formatter import Formatter, default_bool_formatter
from pi.inquire.parser import bool_default_value_formatter, parse_bool
from pi.inquire.prompt import Prompt, PromptBase
from pi.inquire.prompts.custom_type import CustomType
from pi.inquire.render_config import RenderConfig, get_configuration
from pi.inquire.validator import Validator


class Confirm(PromptBase[bool]):
    """``CustomType[bool]`` with a fixed y/yes/n/no parser."""

    DEFAULT_ERROR_MESSAGE = "Invalid answer, try typing 'y' for yes or 'n' for no"

    def __init__(
        self,
        message: str,
        *,
        default: Optional[bool] = None,
        placeholder: str | None = None,
        initial_value: str | None = None,
        help_message: str | None = None,
        error_message: str = DEFAULT_ERROR_MESSAGE,
        formatter: Formatter = default_bool_formatter,
        validators: Sequence[Validator] = (),
        render_config: RenderConfig | None = None,
    ) -> None:
        self.inner: CustomType[bool] = CustomType(
            message,
            parse_bool,
            default=default,
            default_value_formatter=bool_default_value_formatter,
            error_message=error_message,
            placeholder=placeholder,
            initial_value=initial_value,
            help_message=help_message,
            formatter=formatter,
            validators=validators,
            render_config=render_config or get_configuration(),
        )

    def _build(self) -> Prompt[bool]:
        return self.inner._build()
