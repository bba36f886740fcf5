"""The prompt engine: one generic loop driving every prompt kind.

The loop is ``setup -> (render -> read key -> decode -> dispatch)* ->
final render``. Prompt-specific behavior lives in a ``PromptVariant``; the
engine owns the message, help text, validators, formatter, error row and the
renderer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Literal, Optional, Sequence, TypeVar, Union

from pi.inquire.actions import Action
from pi.inquire.errors import (
    InquireIOError,
    OperationCanceledError,
    OperationInterruptedError,
    call_user,
    from_os_error,
)
from pi.inquire.formatter import Formatter
from pi.inquire.keys import KeyEvent
from pi.inquire.render_config import RenderConfig
from pi.inquire.renderer import Renderer
from pi.inquire.terminal import ProcessTerminal, Terminal
from pi.inquire.text_buffer import Delete, InputAction, MoveCursor, TextBuffer, Write, needs_redraw
from pi.inquire.validator import ErrorMessage, Validator

logger = logging.getLogger(__name__)

T = TypeVar("T")

ActionResult = Literal["needs_redraw", "clean"]

# Given an answer, the first validation error (if any).
ValidateFn = Callable[[Any], Optional[ErrorMessage]]


@dataclass(frozen=True)
class Answer(Generic[T]):
    value: T


# What a variant's ``submit`` produced: the final answer, an error for the
# next frame, or ``None`` for "state moved on, keep looping with no error".
SubmitResult = Union[Answer[Any], ErrorMessage, None]


# ---------------------------------------------------------------------------
# Variant base
# ---------------------------------------------------------------------------


class PromptVariant(Generic[T]):
    """State and behavior of one prompt kind.

    Subclasses implement ``decode``, ``render`` and ``current_submission``
    and override the other hooks where they need to.
    """

    def attach(self, renderer: Renderer) -> None:
        """Called once before ``setup`` with the renderer the engine uses."""

    def setup(self) -> None:
        pass

    def pre_cancel(self) -> bool:
        """Return False to swallow a Cancel instead of aborting."""
        return True

    def decode(self, key: KeyEvent) -> Action | None:
        raise NotImplementedError

    def active_input(self) -> TextBuffer | None:
        """The buffer input actions are applied to, if any."""
        return None

    def on_content_changed(self) -> None:
        """Hook run after the active buffer's content changed."""

    def handle_input(self, action: InputAction) -> ActionResult:
        buffer = self.active_input()
        if buffer is None:
            return "clean"
        result = buffer.handle(action)
        if result == "content_changed":
            self.on_content_changed()
        return "needs_redraw" if needs_redraw(result) else "clean"

    def handle(self, action: str) -> ActionResult:
        return "clean"

    def render(self, message: str, renderer: Renderer) -> None:
        raise NotImplementedError

    def current_submission(self) -> T:
        raise NotImplementedError

    def submit(self, validate: ValidateFn) -> SubmitResult:
        value = self.current_submission()
        error = validate(value)
        if error is not None:
            return error
        return Answer(value)

    def on_submitted(self, value: T) -> None:
        """Hook run once the answer is final, before it is returned."""

    def close(self) -> None:
        """Release resources owned by the variant; runs however the loop ends."""


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------


class Prompt(Generic[T]):
    def __init__(
        self,
        message: str,
        variant: PromptVariant[T],
        *,
        help_message: str | None = None,
        validators: Sequence[Validator] = (),
        formatter: Formatter,
        render_config: RenderConfig,
    ) -> None:
        self.message = message
        self.variant = variant
        self.help_message = help_message
        self.validators = list(validators)
        self.formatter = formatter
        self.render_config = render_config
        self.error: ErrorMessage | None = None
        self.renderer: Renderer | None = None

    def run(self, terminal: Terminal | None = None) -> T:
        """Run the prompt on *terminal*, or on the process's TTY by default."""
        try:
            if terminal is not None:
                return self._run(terminal)
            with ProcessTerminal() as process_terminal:
                return self._run(process_terminal)
        finally:
            self.variant.close()

    def _run(self, terminal: Terminal) -> T:
        try:
            return self._loop(terminal)
        except OSError as err:
            raise from_os_error(err) from err
        except EOFError as err:
            raise InquireIOError(err) from err

    def _loop(self, terminal: Terminal) -> T:
        renderer = Renderer(terminal, self.render_config)
        self.renderer = renderer
        self.variant.attach(renderer)
        self.variant.setup()

        state: ActionResult = "needs_redraw"
        while True:
            if state == "needs_redraw":
                self._render_active(renderer)

            key = terminal.read_key()
            action = self.variant.decode(key)
            if action is None:
                state = "clean"
                continue

            if action == "submit":
                result = self.variant.submit(self._validate)
                if isinstance(result, Answer):
                    logger.debug("prompt %r submitted", self.message)
                    value = result.value
                    self.variant.on_submitted(value)
                    self._render_final(renderer, self._format(value))
                    return value
                self.error = result
                state = "needs_redraw"
            elif action == "cancel":
                if self.variant.pre_cancel():
                    logger.debug("prompt %r canceled", self.message)
                    renderer.frame_setup()
                    renderer.render_canceled_prompt(self.message)
                    renderer.frame_finish()
                    raise OperationCanceledError()
                state = "needs_redraw"
            elif action == "interrupt":
                logger.debug("prompt %r interrupted", self.message)
                raise OperationInterruptedError()
            elif isinstance(action, (Delete, MoveCursor, Write)):
                state = self.variant.handle_input(action)
            else:
                state = self.variant.handle(action)

    # -- helpers ------------------------------------------------------------

    def _validate(self, value: Any) -> ErrorMessage | None:
        for validator in self.validators:
            validation = call_user(validator, value)
            if not validation.is_valid:
                return validation.error
        return None

    def _format(self, value: T) -> str:
        return call_user(self.formatter, value)

    def _render_active(self, renderer: Renderer) -> None:
        renderer.frame_setup()
        if self.error is not None:
            renderer.render_error_message(self.error)
        self.variant.render(self.message, renderer)
        if self.help_message is not None:
            renderer.render_help_message(self.help_message)
        renderer.frame_finish()

    def _render_final(self, renderer: Renderer, formatted: str) -> None:
        renderer.frame_setup()
        renderer.render_prompt_with_answer(self.message, formatted)
        renderer.frame_finish()


# ---------------------------------------------------------------------------
# Public prompt base
# ---------------------------------------------------------------------------


class PromptBase(Generic[T]):
    """Shared ``prompt``/``prompt_skippable`` entry points.

    Subclasses build the variant and engine in ``_build``; configuration
    errors surface there, before any terminal interaction.
    """

    def _build(self) -> Prompt[T]:
        raise NotImplementedError

    def prompt(self, terminal: Terminal | None = None) -> T:
        return self._build().run(terminal)

    def prompt_skippable(self, terminal: Terminal | None = None) -> T | None:
        """Like ``prompt`` but returns ``None`` when the user cancels."""
        try:
            return self.prompt(terminal)
        except OperationCanceledError:
            return None
