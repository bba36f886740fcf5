"""Colors, style sheets and styled tokens rendered as ANSI SGR sequences."""

from __future__ import annotations

from dataclasses import dataclass, field

_RESET = "\x1b[0m"
_BOLD = "1"
_ITALIC = "3"


@dataclass(frozen=True)
class Color:
    """A terminal color as its foreground/background SGR parameters."""

    fg: str
    bg: str

    @classmethod
    def basic(cls, code: int) -> Color:
        return cls(str(code), str(code + 10))

    @classmethod
    def ansi_value(cls, value: int) -> Color:
        """One of the 256 indexed colors."""
        return cls(f"38;5;{value}", f"48;5;{value}")

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> Color:
        return cls(f"38;2;{r};{g};{b}", f"48;2;{r};{g};{b}")


class Colors:
    """The 16-color palette."""

    BLACK = Color.basic(30)
    DARK_RED = Color.basic(31)
    DARK_GREEN = Color.basic(32)
    DARK_YELLOW = Color.basic(33)
    DARK_BLUE = Color.basic(34)
    DARK_MAGENTA = Color.basic(35)
    DARK_CYAN = Color.basic(36)
    GREY = Color.basic(37)
    DARK_GREY = Color.basic(90)
    LIGHT_RED = Color.basic(91)
    LIGHT_GREEN = Color.basic(92)
    LIGHT_YELLOW = Color.basic(93)
    LIGHT_BLUE = Color.basic(94)
    LIGHT_MAGENTA = Color.basic(95)
    LIGHT_CYAN = Color.basic(96)
    WHITE = Color.basic(97)


@dataclass(frozen=True)
class StyleSheet:
    fg: Color | None = None
    bg: Color | None = None
    bold: bool = False
    italic: bool = False

    def is_empty(self) -> bool:
        return self.fg is None and self.bg is None and not self.bold and not self.italic

    def with_fg(self, fg: Color) -> StyleSheet:
        return StyleSheet(fg, self.bg, self.bold, self.italic)

    def with_bg(self, bg: Color) -> StyleSheet:
        return StyleSheet(self.fg, bg, self.bold, self.italic)

    def apply(self, text: str) -> str:
        if self.is_empty() or not text:
            return text

        params: list[str] = []
        if self.bold:
            params.append(_BOLD)
        if self.italic:
            params.append(_ITALIC)
        if self.fg is not None:
            params.append(self.fg.fg)
        if self.bg is not None:
            params.append(self.bg.bg)
        return f"\x1b[{';'.join(params)}m{text}{_RESET}"


@dataclass(frozen=True)
class Styled:
    """A piece of text paired with the style it is written in."""

    content: str
    style: StyleSheet = field(default_factory=StyleSheet)

    def with_fg(self, fg: Color) -> Styled:
        return Styled(self.content, self.style.with_fg(fg))

    def with_style_sheet(self, style: StyleSheet) -> Styled:
        return Styled(self.content, style)

    def render(self) -> str:
        return self.style.apply(self.content)
