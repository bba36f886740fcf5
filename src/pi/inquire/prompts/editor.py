"""Editor - hand the answer off to an external text editor."""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
import sys
import tempfile
from pathlib import Path
from typing import Sequence

from pi.inquire.actions import Action, decode_editor
from pi.inquire.formatter import Formatter, editor_formatter
from pi.inquire.keys import KeyEvent
from pi.inquire.prompt import ActionResult, Prompt, PromptBase, PromptVariant
from pi.inquire.render_config import RenderConfig, get_configuration
from pi.inquire.renderer import Renderer
from pi.inquire.validator import Validator

logger = logging.getLogger(__name__)


def default_editor_command() -> list[str]:
    """``$VISUAL``, then ``$EDITOR``, then the platform's stock editor."""
    for var in ("VISUAL", "EDITOR"):
        value = os.environ.get(var, "").strip()
        if value:
            return shlex.split(value)
    return ["notepad" if sys.platform == "win32" else "nano"]


def strip_trailing_newlines(text: str) -> str:
    return text.rstrip("\r\n")


class EditorVariant(PromptVariant[str]):
    def __init__(
        self,
        *,
        command: str,
        args: Sequence[str] = (),
        file_extension: str = ".txt",
        predefined_text: str | None = None,
    ) -> None:
        self.command = command
        self.args = list(args)
        self.answer = strip_trailing_newlines(predefined_text or "")
        self.renderer: Renderer | None = None

        fd, path = tempfile.mkstemp(prefix="pi-inquire-", suffix=file_extension)
        self.path: Path | None = Path(path)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(predefined_text or "")

    @property
    def editor_name(self) -> str:
        return Path(self.command).stem or "editor"

    def attach(self, renderer: Renderer) -> None:
        self.renderer = renderer

    def decode(self, key: KeyEvent) -> Action | None:
        return decode_editor(key)

    def open_editor(self) -> ActionResult:
        if self.path is None:
            return "clean"

        argv = [self.command, *self.args, str(self.path)]
        logger.debug("spawning editor %s", argv)

        if self.renderer is not None:
            with self.renderer.frame.terminal.suspended():
                completed = subprocess.run(argv)
            # The editor drew over our frame; start the next one below it
            self.renderer.frame.forget()
        else:
            completed = subprocess.run(argv)

        if completed.returncode != 0:
            logger.warning("editor %s exited with status %d", self.command, completed.returncode)
            return "needs_redraw"

        self.answer = strip_trailing_newlines(
            self.path.read_text(encoding="utf-8", errors="replace")
        )
        return "needs_redraw"

    def handle(self, action: str) -> ActionResult:
        if action == "open_editor":
            return self.open_editor()
        return "clean"

    def render(self, message: str, renderer: Renderer) -> None:
        renderer.render_editor_prompt(message, self.editor_name)

    def current_submission(self) -> str:
        return self.answer

    def close(self) -> None:
        if self.path is None:
            return
        self.path.unlink(missing_ok=True)
        self.path = None


class Editor(PromptBase[str]):
    """Long-form text prompt backed by an external editor.

    Pressing ``e`` opens the editor on a temporary file; whatever the file
    holds when the editor exits becomes the answer (minus trailing line
    breaks). The temporary file is removed when the prompt finishes.
    """

    def __init__(
        self,
        message: str,
        *,
        editor_command: str | None = None,
        editor_command_args: Sequence[str] | None = None,
        file_extension: str = ".txt",
        predefined_text: str | None = None,
        help_message: str | None = None,
        formatter: Formatter = editor_formatter,
        validators: Sequence[Validator] = (),
        render_config: RenderConfig | None = None,
    ) -> None:
        if editor_command is None:
            editor_command, *default_args = default_editor_command()
            if editor_command_args is None:
                editor_command_args = default_args

        self.message = message
        self.editor_command = editor_command
        self.editor_command_args = list(editor_command_args or ())
        self.file_extension = file_extension
        self.predefined_text = predefined_text
        self.help_message = help_message
        self.formatter = formatter
        self.validators = list(validators)
        self.render_config = render_config or get_configuration()

    def _build(self) -> Prompt[str]:
        variant = EditorVariant(
            command=self.editor_command,
            args=self.editor_command_args,
            file_extension=self.file_extension,
            predefined_text=self.predefined_text,
        )
        return Prompt(
            self.message,
            variant,
            help_message=self.help_message,
            validators=self.validators,
            formatter=self.formatter,
            render_config=self.render_config,
        )
