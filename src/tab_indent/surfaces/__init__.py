"""Editable surfaces and the adapters that drive the engine over them."""

from .base import KeyEvent, SurfaceAdapter, SurfaceState
from .dispatch import select_adapter, surface_kind
from .flat import FlatBuffer, FlatBufferAdapter, TextBuffer
from .rich import (
    Boundary,
    Element,
    RegionRange,
    RichRegion,
    RichRegionAdapter,
    TextFragment,
)

__all__ = [
    "Boundary",
    "Element",
    "FlatBuffer",
    "FlatBufferAdapter",
    "KeyEvent",
    "RegionRange",
    "RichRegion",
    "RichRegionAdapter",
    "SurfaceAdapter",
    "SurfaceState",
    "TextBuffer",
    "TextFragment",
    "select_adapter",
    "surface_kind",
]
