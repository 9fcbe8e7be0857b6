"""Value types exchanged between the engine and surface adapters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .validation import SelectionError

MIN_INDENT_WIDTH = 1
MAX_INDENT_WIDTH = 8


class Direction(str, Enum):
    """Which way a keystroke moves the affected lines."""

    INDENT = "indent"
    DEDENT = "dedent"

    @classmethod
    def from_shift(cls, shift: bool) -> "Direction":
        return cls.DEDENT if shift else cls.INDENT


@dataclass(frozen=True, slots=True)
class IndentUnit:
    """``width`` literal spaces inserted per indentation level."""

    width: int

    def __post_init__(self) -> None:
        if not MIN_INDENT_WIDTH <= self.width <= MAX_INDENT_WIDTH:
            raise ValueError(
                f"indent width must be between {MIN_INDENT_WIDTH} and "
                f"{MAX_INDENT_WIDTH}, got {self.width}"
            )

    @property
    def text(self) -> str:
        return " " * self.width

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return self.width


@dataclass(frozen=True, slots=True)
class SelectionRange:
    """Half-open ``[start, end)`` character offsets; ``start == end`` is a caret."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0:
            raise SelectionError(
                f"Selection start {self.start} is negative",
                start=self.start,
                end=self.end,
            )
        if self.start > self.end:
            raise SelectionError(
                f"Selection start {self.start} is after its end {self.end}",
                start=self.start,
                end=self.end,
            )

    @classmethod
    def caret(cls, offset: int) -> "SelectionRange":
        return cls(offset, offset)

    @classmethod
    def ordered(cls, anchor: int, focus: int) -> "SelectionRange":
        """Build a range from an anchor/focus pair that may point backwards."""

        if anchor <= focus:
            return cls(anchor, focus)
        return cls(focus, anchor)

    @property
    def collapsed(self) -> bool:
        return self.start == self.end

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True, slots=True)
class EditOutcome:
    """New buffer text plus the selection that goes with it.

    Both fields must be committed together so the caret never points into
    stale content.
    """

    text: str
    selection: SelectionRange

    def changed_from(self, text: str) -> bool:
        return self.text != text


__all__ = [
    "Direction",
    "EditOutcome",
    "IndentUnit",
    "SelectionRange",
    "MIN_INDENT_WIDTH",
    "MAX_INDENT_WIDTH",
]
