"""Indent and dedent transformations over a text snapshot.

Both operations are total for any selection that fits the text. Indent works
on the exact selected substring; dedent widens the start of a selection back
to the start of its line but never widens the end.
"""

from __future__ import annotations

from typing import Union

from .lines import leading_spaces, line_start
from .model import Direction, EditOutcome, IndentUnit, SelectionRange
from .validation import ensure_selection

Unit = Union[IndentUnit, str]


def indent(text: str, selection: SelectionRange, unit: Unit) -> EditOutcome:
    """Insert ``unit`` at the caret, or before every line of the selection."""

    ensure_selection(text, selection)
    prefix = str(unit)
    start, end = selection.start, selection.end

    if selection.collapsed:
        new_text = text[:start] + prefix + text[start:]
        return EditOutcome(new_text, SelectionRange.caret(start + len(prefix)))

    segments = text[start:end].split("\n")
    indented = "\n".join(prefix + segment for segment in segments)
    new_text = text[:start] + indented + text[end:]
    return EditOutcome(new_text, SelectionRange(start, start + len(indented)))


def dedent(text: str, selection: SelectionRange, unit: Unit) -> EditOutcome:
    """Strip up to ``len(unit)`` leading spaces from each affected line."""

    ensure_selection(text, selection)
    width = len(str(unit))
    start, end = selection.start, selection.end
    region_start = line_start(text, start)

    if selection.collapsed:
        removed = leading_spaces(text[region_start : region_start + width], width)
        if not removed:
            return EditOutcome(text, selection)
        new_text = text[:region_start] + text[region_start + removed :]
        caret = max(region_start, start - removed)
        return EditOutcome(new_text, SelectionRange.caret(caret))

    segments = text[region_start:end].split("\n")
    counts = [leading_spaces(segment, width) for segment in segments]
    stripped = "\n".join(
        segment[count:] for segment, count in zip(segments, counts)
    )
    new_text = text[:region_start] + stripped + text[end:]
    new_start = max(region_start, start - counts[0])
    new_end = end - sum(counts)
    return EditOutcome(new_text, SelectionRange(new_start, new_end))


def apply_edit(
    direction: Direction, text: str, selection: SelectionRange, unit: Unit
) -> EditOutcome:
    if Direction(direction) is Direction.DEDENT:
        return dedent(text, selection, unit)
    return indent(text, selection, unit)


__all__ = ["apply_edit", "dedent", "indent"]
