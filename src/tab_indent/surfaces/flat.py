"""Flat text buffers: one string plus a selection range."""

from __future__ import annotations

from typing import Callable, List, Optional, Protocol, Tuple, runtime_checkable

from tab_indent.engine import EditOutcome, SelectionRange
from tab_indent.engine.validation import SelectionError

from .base import SurfaceAdapter, SurfaceState


@runtime_checkable
class FlatBuffer(Protocol):
    """What a text-entry field has to expose to be indented."""

    def get_text(self) -> str:
        ...

    def set_text(self, text: str) -> None:
        ...

    def get_selection(self) -> Tuple[int, int]:
        ...

    def set_selection(self, start: int, end: int) -> None:
        ...

    def notify_changed(self) -> None:
        ...


class TextBuffer:
    """In-memory :class:`FlatBuffer` with change listeners."""

    def __init__(self, text: str = "", selection: Tuple[int, int] | None = None) -> None:
        self._text = text
        self._selection = (0, 0)
        self._listeners: List[Callable[[str], None]] = []
        self.change_count = 0
        if selection is not None:
            self.set_selection(*selection)

    def get_text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        self._text = text
        start, end = self._selection
        length = len(text)
        self._selection = (min(start, length), min(end, length))

    def get_selection(self) -> Tuple[int, int]:
        return self._selection

    def set_selection(self, start: int, end: int) -> None:
        if not 0 <= start <= end <= len(self._text):
            raise SelectionError(
                f"Selection ({start}, {end}) does not fit text of length {len(self._text)}",
                start=start,
                end=end,
            )
        self._selection = (start, end)

    def on_change(self, callback: Callable[[str], None]) -> None:
        self._listeners.append(callback)

    def notify_changed(self) -> None:
        self.change_count += 1
        for callback in list(self._listeners):
            callback(self._text)


class FlatBufferAdapter(SurfaceAdapter):
    """Reads offsets from a :class:`FlatBuffer` and writes the outcome back."""

    kind = "flat"

    def __init__(self, surface: FlatBuffer) -> None:
        super().__init__(surface)

    def extract_state(self) -> Optional[SurfaceState]:
        start, end = self.surface.get_selection()
        return SurfaceState(
            text=self.surface.get_text(),
            selection=SelectionRange.ordered(start, end),
        )

    def commit_state(self, state: SurfaceState, outcome: EditOutcome) -> None:
        self.surface.set_text(outcome.text)
        self.surface.set_selection(outcome.selection.start, outcome.selection.end)
        self.surface.notify_changed()


__all__ = ["FlatBuffer", "FlatBufferAdapter", "TextBuffer"]
