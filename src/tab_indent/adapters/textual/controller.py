"""Expose a Textual ``TextArea`` as a flat buffer and route Tab through it."""

from __future__ import annotations

from typing import Any, Optional, Tuple

from textual import events
from textual.widgets import TextArea
from textual.widgets.text_area import Selection

from tab_indent.host import KeyResult, TabIndentController
from tab_indent.surfaces import KeyEvent

Location = Tuple[int, int]

# Textual key names that carry the indent trigger, with their shift state.
TRIGGER_KEYS = {"tab": False, "shift+tab": True, "backtab": True}


def location_to_offset(text: str, location: Location) -> int:
    """``(row, column)`` -> character offset, clamped to the text."""

    lines = text.split("\n")
    row, column = location
    row = max(0, min(row, len(lines) - 1))
    column = max(0, min(column, len(lines[row])))
    offset = 0
    for line in lines[:row]:
        offset += len(line) + 1  # newline
    return offset + column


def offset_to_location(text: str, offset: int) -> Location:
    offset = max(0, min(offset, len(text)))
    head = text[:offset]
    row = head.count("\n")
    return (row, offset - (head.rfind("\n") + 1))


class TextAreaSurface:
    """:class:`~tab_indent.surfaces.FlatBuffer` view of a ``TextArea``."""

    def __init__(self, text_area: Any) -> None:
        self.text_area = text_area

    def get_text(self) -> str:
        return self.text_area.text

    def set_text(self, text: str) -> None:
        """Swap the document through ``replace`` so the edit lands in undo history."""

        current = self.text_area.text
        if text == current:
            return
        self.text_area.replace(
            text,
            (0, 0),
            offset_to_location(current, len(current)),
            maintain_selection_offset=False,
        )

    def get_selection(self) -> Tuple[int, int]:
        text = self.text_area.text
        selection = self.text_area.selection
        return (
            location_to_offset(text, selection.start),
            location_to_offset(text, selection.end),
        )

    def set_selection(self, start: int, end: int) -> None:
        text = self.text_area.text
        self.text_area.selection = Selection(
            offset_to_location(text, start), offset_to_location(text, end)
        )

    def notify_changed(self) -> None:
        self.text_area.post_message(TextArea.Changed(self.text_area))


class IndentingTextArea(TextArea):
    """``TextArea`` whose Tab / Shift+Tab go to a :class:`TabIndentController`."""

    def __init__(
        self,
        text: str = "",
        *,
        controller: Optional[TabIndentController] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(text, **kwargs)
        self.controller = controller
        self.indent_surface = TextAreaSurface(self)
        self.last_result: Optional[KeyResult] = None

    async def _on_key(self, event: events.Key) -> None:
        shift = TRIGGER_KEYS.get(event.key)
        if self.controller is not None and shift is not None:
            indent_event = KeyEvent(key="tab", shift=shift, target=self.indent_surface)
            self.last_result = self.controller.handle_key(indent_event)
            if self.last_result.consumed:
                event.prevent_default()
                event.stop()
                return
        await super()._on_key(event)


__all__ = [
    "IndentingTextArea",
    "TRIGGER_KEYS",
    "TextAreaSurface",
    "location_to_offset",
    "offset_to_location",
]
