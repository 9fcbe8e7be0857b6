"""Textual host: TextArea surface and a demo application."""

from .controller import (
    IndentingTextArea,
    TextAreaSurface,
    location_to_offset,
    offset_to_location,
)

__all__ = [
    "IndentingTextArea",
    "TextAreaSurface",
    "location_to_offset",
    "offset_to_location",
]
