"""Pure indentation engine: no I/O, no surface dependencies."""

from .indent import apply_edit, dedent, indent
from .lines import leading_spaces, line_start
from .model import Direction, EditOutcome, IndentUnit, SelectionRange
from .validation import SelectionError, ensure_selection

__all__ = [
    "Direction",
    "EditOutcome",
    "IndentUnit",
    "SelectionRange",
    "SelectionError",
    "apply_edit",
    "dedent",
    "ensure_selection",
    "indent",
    "leading_spaces",
    "line_start",
]
