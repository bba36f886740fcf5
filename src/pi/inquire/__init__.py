"""pi-inquire: interactive terminal prompts."""

# Autocompletion
from pi.inquire.autocompletion import (
    Autocomplete,
    FilePathCompleter,
    NoAutocomplete,
    WordListCompleter,
)

# Errors
from pi.inquire.errors import (
    CustomUserError,
    InquireError,
    InquireIOError,
    InvalidConfigurationError,
    NotTTYError,
    OperationCanceledError,
    OperationInterruptedError,
)

# Formatters and parsers
from pi.inquire.formatter import (
    Formatter,
    default_bool_formatter,
    default_date_formatter,
    default_multi_option_formatter,
    default_option_formatter,
    default_string_formatter,
)
from pi.inquire.parser import Parser, parse_bool, parse_float, parse_int

# Fuzzy filtering
from pi.inquire.fuzzy import Scorer, default_scorer, fuzzy_match, substring_scorer

# History
from pi.inquire.history import History, NoHistory, SimpleHistory

# Keyboard input
from pi.inquire.keys import Key, KeyEvent, parse_key, parse_key_id

# Options
from pi.inquire.list_option import ListOption

# Prompts
from pi.inquire.prompts import (
    Confirm,
    CustomType,
    DateSelect,
    DisplayMode,
    Editor,
    MultiSelect,
    Password,
    Select,
    Text,
)

# Render configuration
from pi.inquire.render_config import (
    CalendarRenderConfig,
    ErrorMessageRenderConfig,
    RenderConfig,
    get_configuration,
    reset_global_render_config,
    set_global_render_config,
)
from pi.inquire.style import Color, Colors, StyleSheet, Styled

# Terminal interface and implementation
from pi.inquire.terminal import ProcessTerminal, Terminal

# Validation
from pi.inquire.validator import (
    ErrorMessage,
    ExactLengthValidator,
    MaxLengthValidator,
    MinLengthValidator,
    Validation,
    Validator,
    ValueRequiredValidator,
)

__all__ = [
    # Autocompletion
    "Autocomplete",
    "FilePathCompleter",
    "NoAutocomplete",
    "WordListCompleter",
    # Errors
    "CustomUserError",
    "InquireError",
    "InquireIOError",
    "InvalidConfigurationError",
    "NotTTYError",
    "OperationCanceledError",
    "OperationInterruptedError",
    # Formatters and parsers
    "Formatter",
    "default_bool_formatter",
    "default_date_formatter",
    "default_multi_option_formatter",
    "default_option_formatter",
    "default_string_formatter",
    "Parser",
    "parse_bool",
    "parse_float",
    "parse_int",
    # Fuzzy
    "Scorer",
    "default_scorer",
    "fuzzy_match",
    "substring_scorer",
    # History
    "History",
    "NoHistory",
    "SimpleHistory",
    # Keys
    "Key",
    "KeyEvent",
    "parse_key",
    "parse_key_id",
    # Options
    "ListOption",
    # Prompts
    "Confirm",
    "CustomType",
    "DateSelect",
    "DisplayMode",
    "Editor",
    "MultiSelect",
    "Password",
    "Select",
    "Text",
    # Render configuration
    "CalendarRenderConfig",
    "ErrorMessageRenderConfig",
    "RenderConfig",
    "get_configuration",
    "reset_global_render_config",
    "set_global_render_config",
    "Color",
    "Colors",
    "StyleSheet",
    "Styled",
    # Terminal
    "ProcessTerminal",
    "Terminal",
    # Validation
    "ErrorMessage",
    "ExactLengthValidator",
    "MaxLengthValidator",
    "MinLengthValidator",
    "Validation",
    "Validator",
    "ValueRequiredValidator",
]
