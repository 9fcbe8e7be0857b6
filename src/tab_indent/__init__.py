"""Keystroke-driven indentation for flat text buffers and rich regions."""

from .engine import (
    Direction,
    EditOutcome,
    IndentUnit,
    SelectionError,
    SelectionRange,
    apply_edit,
    dedent,
    indent,
)
from .settings import IndentSettings, clamp_indent_width, parse_indent_width

__all__ = [
    "Direction",
    "EditOutcome",
    "IndentUnit",
    "SelectionError",
    "SelectionRange",
    "apply_edit",
    "dedent",
    "indent",
    "IndentSettings",
    "clamp_indent_width",
    "parse_indent_width",
]

__version__ = "0.1.0"
