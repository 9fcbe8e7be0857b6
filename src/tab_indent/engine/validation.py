"""Selection checks shared by the engine and the surface adapters."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .model import SelectionRange


class SelectionError(ValueError):
    """Raised when a selection is inverted, negative or past the end of the text."""

    def __init__(
        self, message: str, *, start: int | None = None, end: int | None = None
    ) -> None:
        super().__init__(message)
        self.start = start
        self.end = end


def ensure_selection(text: str, selection: "SelectionRange") -> "SelectionRange":
    if selection.end > len(text):
        raise SelectionError(
            f"Selection end {selection.end} is past the end of the text ({len(text)})",
            start=selection.start,
            end=selection.end,
        )
    return selection


__all__ = ["SelectionError", "ensure_selection"]
