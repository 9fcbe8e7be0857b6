"""Pick the adapter for a keydown target by what the target can do."""

from __future__ import annotations

from typing import Any, Optional

from .base import SurfaceAdapter
from .flat import FlatBuffer, FlatBufferAdapter
from .rich import RichRegion, RichRegionAdapter


def surface_kind(target: Any) -> Optional[str]:
    """``"rich"``, ``"flat"`` or ``None`` for targets that cannot be edited."""

    if isinstance(target, RichRegion):
        return "rich" if target.editable else None
    if isinstance(target, FlatBuffer):
        return "flat"
    return None


def select_adapter(target: Any) -> Optional[SurfaceAdapter]:
    kind = surface_kind(target)
    if kind == "rich":
        return RichRegionAdapter(target)
    if kind == "flat":
        return FlatBufferAdapter(target)
    return None


__all__ = ["select_adapter", "surface_kind"]
