"""Prompt kinds."""

from pi.inquire.prompts.confirm import Confirm
from pi.inquire.prompts.custom_type import CustomType
from pi.inquire.prompts.date_select import DateSelect
from pi.inquire.prompts.editor import Editor
from pi.inquire.prompts.multiselect import MultiSelect
from pi.inquire.prompts.password import DisplayMode, Password
from pi.inquire.prompts.select import Select
from pi.inquire.prompts.text import Text

__all__ = [
    "Confirm",
    "CustomType",
    "DateSelect",
    "DisplayMode",
    "Editor",
    "MultiSelect",
    "Password",
    "Select",
    "Text",
]
