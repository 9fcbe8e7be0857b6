from __future__ import annotations

import pytest

from tab_indent.engine import (
    Direction,
    EditOutcome,
    IndentUnit,
    SelectionError,
    SelectionRange,
    apply_edit,
    indent,
)


def make_unit(width: int = 2) -> IndentUnit:
    return IndentUnit(width)


def test_caret_inserts_unit_and_moves_after_it() -> None:
    outcome = indent("abc", SelectionRange.caret(1), make_unit())

    assert outcome == EditOutcome("a  bc", SelectionRange.caret(3))


@pytest.mark.parametrize("width", range(1, 9))
def test_caret_indent_grows_text_by_unit_length(width: int) -> None:
    text = "def f():\nreturn 1"
    selection = SelectionRange.caret(9)

    outcome = indent(text, selection, make_unit(width))

    assert len(outcome.text) == len(text) + width
    assert outcome.selection.start == selection.start + width
    assert outcome.selection.collapsed


def test_full_multiline_selection_prefixes_every_line() -> None:
    outcome = indent("ab\ncd", SelectionRange(0, 5), make_unit())

    assert outcome.text == "  ab\n  cd"
    assert outcome.selection == SelectionRange(0, 9)


def test_partial_selection_is_not_widened_to_line_boundaries() -> None:
    outcome = indent("xab\ncdy", SelectionRange(1, 6), make_unit())

    assert outcome.text == "x  ab\n  cdy"
    assert outcome.selection == SelectionRange(1, 10)


def test_selection_ending_after_newline_indents_empty_last_segment() -> None:
    outcome = indent("ab\n", SelectionRange(0, 3), make_unit())

    assert outcome.text == "  ab\n  "
    assert outcome.selection == SelectionRange(0, 7)


def test_single_line_selection_gets_one_prefix() -> None:
    outcome = indent("hello world", SelectionRange(6, 11), make_unit(4))

    assert outcome.text == "hello     world"
    assert outcome.selection == SelectionRange(6, 15)


def test_empty_text() -> None:
    outcome = indent("", SelectionRange.caret(0), make_unit(3))

    assert outcome.text == "   "
    assert outcome.selection == SelectionRange.caret(3)


def test_plain_string_unit_is_accepted() -> None:
    outcome = indent("a", SelectionRange.caret(0), " ")

    assert outcome.text == " a"


def test_apply_edit_accepts_direction_values() -> None:
    by_enum = apply_edit(Direction.INDENT, "a", SelectionRange.caret(0), make_unit())
    by_value = apply_edit("indent", "a", SelectionRange.caret(0), make_unit())  # type: ignore[arg-type]

    assert by_enum == by_value
    assert by_enum.text == "  a"


def test_selection_past_end_is_rejected() -> None:
    with pytest.raises(SelectionError):
        indent("ab", SelectionRange(0, 3), make_unit())


def test_selection_range_invariants() -> None:
    with pytest.raises(SelectionError):
        SelectionRange(3, 1)
    with pytest.raises(SelectionError):
        SelectionRange(-1, 2)

    assert SelectionRange.ordered(5, 2) == SelectionRange(2, 5)
    assert SelectionRange(2, 2).collapsed
    assert SelectionRange(2, 5).length == 3


@pytest.mark.parametrize("width", [0, 9, -1])
def test_indent_unit_width_bounds(width: int) -> None:
    with pytest.raises(ValueError):
        IndentUnit(width)


def test_indent_unit_behaves_like_its_text() -> None:
    unit = IndentUnit(4)

    assert str(unit) == "    "
    assert len(unit) == 4
    assert unit.text == "    "


def test_direction_from_shift() -> None:
    assert Direction.from_shift(True) is Direction.DEDENT
    assert Direction.from_shift(False) is Direction.INDENT
