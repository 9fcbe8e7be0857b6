"""Trigger keys that map a keystroke to an indent direction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional

from tab_indent.engine.model import Direction
from tab_indent.runtime.telemetry import span


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """A key name plus modifiers; ``KeyStroke("Tab") == KeyStroke("tab")``."""

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key or not self.key.strip():
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "key", self.key.strip().lower())
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        if self.modifiers:
            return "+".join(self.modifiers) + "+" + self.key
        return self.key

    @classmethod
    def from_event(cls, key: str, *, shift: bool = False) -> "KeyStroke":
        return cls(key, ("shift",) if shift else ())

    @classmethod
    def parse(cls, token: str) -> "KeyStroke":
        """Parse ``"shift+tab"`` style tokens (the form Textual reports)."""

        *modifiers, key = token.split("+")
        return cls(key, tuple(modifiers))


@dataclass(frozen=True, slots=True)
class TriggerBinding:
    id: str
    stroke: KeyStroke
    direction: Direction
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        object.__setattr__(self, "direction", Direction(self.direction))


class TriggerConflictError(RuntimeError):
    """Raised when two bindings claim the same keystroke."""

    def __init__(self, binding: TriggerBinding, existing: TriggerBinding) -> None:
        super().__init__(
            f"Binding '{binding.id}' conflicts with '{existing.id}' on "
            f"'{binding.stroke.token}'"
        )
        self.binding = binding
        self.existing = existing


class TriggerMap:
    """Keystroke token -> binding table."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._by_token: Dict[str, TriggerBinding] = {}
        self._logger_name = logger_name

    def register(
        self, binding: TriggerBinding, *, replace: bool = False
    ) -> TriggerBinding:
        with span(
            "keymaps::register_trigger",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "token": binding.stroke.token},
        ) as handle:
            existing = self._by_token.get(binding.stroke.token)
            if existing is not None and existing.id != binding.id and not replace:
                handle.add_metadata("conflict", existing.id)
                raise TriggerConflictError(binding, existing)
            for token, current in list(self._by_token.items()):
                if current.id == binding.id:
                    del self._by_token[token]
            self._by_token[binding.stroke.token] = binding
            return binding

    def unregister(self, binding_id: str) -> Optional[TriggerBinding]:
        for token, binding in list(self._by_token.items()):
            if binding.id == binding_id:
                return self._by_token.pop(token)
        return None

    def resolve(self, stroke: KeyStroke) -> Optional[TriggerBinding]:
        return self._by_token.get(stroke.token)

    def __iter__(self) -> Iterator[TriggerBinding]:
        return iter(self._by_token.values())

    def __len__(self) -> int:
        return len(self._by_token)


DEFAULT_TRIGGERS: tuple[TriggerBinding, ...] = (
    TriggerBinding(
        id="tab.indent",
        stroke=KeyStroke("Tab"),
        direction=Direction.INDENT,
        description="Indent the caret or selected lines",
    ),
    TriggerBinding(
        id="tab.dedent",
        stroke=KeyStroke("Tab", ("shift",)),
        direction=Direction.DEDENT,
        description="Dedent the caret line or selected lines",
    ),
)


def load_default_triggers(
    triggers: Optional[TriggerMap] = None, *, replace: bool = False
) -> TriggerMap:
    triggers = triggers if triggers is not None else TriggerMap()
    for binding in DEFAULT_TRIGGERS:
        triggers.register(binding, replace=replace)
    return triggers


__all__ = [
    "DEFAULT_TRIGGERS",
    "KeyStroke",
    "TriggerBinding",
    "TriggerConflictError",
    "TriggerMap",
    "load_default_triggers",
]
