from __future__ import annotations

from typing import List

import pytest

from tab_indent.engine import Direction, IndentUnit, SelectionError, SelectionRange
from tab_indent.surfaces import FlatBuffer, FlatBufferAdapter, TextBuffer


def make_adapter(text: str, selection: tuple[int, int]) -> tuple[FlatBufferAdapter, TextBuffer]:
    buffer = TextBuffer(text, selection)
    return FlatBufferAdapter(buffer), buffer


def test_text_buffer_satisfies_protocol() -> None:
    assert isinstance(TextBuffer(), FlatBuffer)
    assert not isinstance(object(), FlatBuffer)


def test_indent_commits_text_selection_and_notifies() -> None:
    adapter, buffer = make_adapter("ab\ncd", (0, 5))
    seen: List[str] = []
    buffer.on_change(seen.append)

    outcome = adapter.apply(Direction.INDENT, IndentUnit(2))

    assert outcome is not None
    assert buffer.get_text() == "  ab\n  cd"
    assert buffer.get_selection() == (0, 9)
    assert buffer.change_count == 1
    assert seen == ["  ab\n  cd"]


def test_dedent_commits_through_surface() -> None:
    adapter, buffer = make_adapter("  ab\n  cd", (2, 7))

    adapter.apply(Direction.DEDENT, IndentUnit(2))

    assert buffer.get_text() == "ab\ncd"
    assert buffer.get_selection() == (0, 3)


def test_dedent_without_indentation_still_notifies() -> None:
    adapter, buffer = make_adapter("ab", (0, 0))

    outcome = adapter.apply(Direction.DEDENT, IndentUnit(4))

    assert outcome is not None
    assert outcome.selection == SelectionRange.caret(0)
    assert buffer.get_text() == "ab"
    assert buffer.change_count == 1


def test_extract_state_reads_surface() -> None:
    adapter, _ = make_adapter("hello", (1, 4))

    state = adapter.extract_state()

    assert state is not None
    assert state.text == "hello"
    assert state.selection == SelectionRange(1, 4)


def test_text_buffer_rejects_selection_outside_text() -> None:
    buffer = TextBuffer("abc")

    with pytest.raises(SelectionError):
        buffer.set_selection(1, 5)
    with pytest.raises(SelectionError):
        buffer.set_selection(2, 1)


def test_text_buffer_clamps_selection_when_text_shrinks() -> None:
    buffer = TextBuffer("abcdef", (2, 6))

    buffer.set_text("ab")

    assert buffer.get_selection() == (2, 2)
