"""Shared adapter plumbing between editable surfaces and the engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from tab_indent.engine import Direction, EditOutcome, SelectionRange, apply_edit
from tab_indent.engine.indent import Unit
from tab_indent.runtime import telemetry


@dataclass(slots=True)
class KeyEvent:
    """Keydown as delivered by a host: key name, shift state and target surface."""

    key: str
    shift: bool = False
    target: Any = None
    default_prevented: bool = field(default=False, init=False)
    propagation_stopped: bool = field(default=False, init=False)

    def prevent_default(self) -> None:
        self.default_prevented = True

    def stop_propagation(self) -> None:
        self.propagation_stopped = True


@dataclass(slots=True)
class SurfaceState:
    """Text and selection pulled from a surface, ready for the engine."""

    text: str
    selection: SelectionRange


class SurfaceAdapter:
    """Base class for one surface variant.

    Subclasses implement :meth:`extract_state` and :meth:`commit_state`;
    :meth:`apply` runs a single extract -> engine -> commit round.
    """

    kind: str = "surface"

    def __init__(self, surface: Any) -> None:
        self.surface = surface

    def extract_state(self) -> Optional[SurfaceState]:  # pragma: no cover - abstract
        raise NotImplementedError

    def commit_state(
        self, state: SurfaceState, outcome: EditOutcome
    ) -> None:  # pragma: no cover - abstract
        raise NotImplementedError

    def apply(self, direction: Direction, unit: Unit) -> Optional[EditOutcome]:
        direction = Direction(direction)
        with telemetry.span(
            f"surface::{self.kind}::{direction.value}",
            component="surfaces",
            metadata={"surface": self.kind, "width": len(str(unit))},
        ) as handle:
            state = self.extract_state()
            if state is None:
                handle.add_metadata("status", "nothing_to_edit")
                return None
            outcome = apply_edit(direction, state.text, state.selection, unit)
            self.commit_state(state, outcome)
            handle.add_metadata("changed", outcome.changed_from(state.text))
            return outcome


__all__ = ["KeyEvent", "SurfaceAdapter", "SurfaceState"]
