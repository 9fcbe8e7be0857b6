"""Keydown glue between a host UI and the indentation adapters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Union

from tab_indent.engine import Direction, EditOutcome
from tab_indent.keymaps import KeyStroke, TriggerMap, load_default_triggers
from tab_indent.runtime import telemetry
from tab_indent.settings import IndentSettings, parse_indent_width
from tab_indent.surfaces import KeyEvent, select_adapter

KEYDOWN = "keydown"
INDENT_APPLIED = "indent.applied"
SETTINGS_CHANGED = "settings.changed"


class EventBus:
    """Topic -> callbacks, delivered synchronously in subscription order."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, List[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def unsubscribe(self, event: str, callback: Callable[[object], None]) -> bool:
        callbacks = self._subscribers.get(event, [])
        if callback not in callbacks:
            return False
        callbacks.remove(callback)
        return True

    def subscribers(self, event: str) -> int:
        return len(self._subscribers.get(event, []))

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in list(self._subscribers.get(event, [])):
            callback(payload)


@dataclass(slots=True)
class KeyResult:
    """What happened to one keydown."""

    consumed: bool
    status: str = "ok"
    direction: Optional[Direction] = None
    surface: Optional[str] = None
    outcome: Optional[EditOutcome] = None


class TabIndentController:
    """Owns the settings and the keydown subscription for one host.

    ``handle_key`` can be called directly; ``attach`` subscribes it to the
    bus ``keydown`` topic, which is how ``set_enabled`` turns the feature
    on and off.
    """

    def __init__(
        self,
        settings: Optional[IndentSettings] = None,
        *,
        bus: Optional[EventBus] = None,
        triggers: Optional[TriggerMap] = None,
    ) -> None:
        self.settings = settings if settings is not None else IndentSettings()
        self.bus = bus if bus is not None else EventBus()
        self.triggers = triggers if triggers is not None else load_default_triggers()
        self._attached = False

    @property
    def attached(self) -> bool:
        return self._attached

    def start(self) -> None:
        """Subscribe to keydowns if the loaded settings say so."""

        if self.settings.enabled:
            self.attach()

    def attach(self) -> None:
        if self._attached:
            return
        self.bus.subscribe(KEYDOWN, self._on_keydown)
        self._attached = True

    def detach(self) -> None:
        if not self._attached:
            return
        self.bus.unsubscribe(KEYDOWN, self._on_keydown)
        self._attached = False

    def set_enabled(self, enabled: bool) -> IndentSettings:
        self.settings = self.settings.with_enabled(enabled)
        if self.settings.enabled:
            self.attach()
        else:
            self.detach()
        self._settings_changed("enabled")
        return self.settings

    def set_indent_width(self, value: Union[int, str]) -> IndentSettings:
        self.settings = self.settings.with_width(parse_indent_width(value))
        self._settings_changed("indent_width")
        return self.settings

    def handle_key(self, event: KeyEvent) -> KeyResult:
        binding = self.triggers.resolve(KeyStroke.from_event(event.key, shift=event.shift))
        if binding is None:
            return KeyResult(consumed=False, status="not_trigger")
        if not self.settings.enabled:
            return KeyResult(consumed=False, status="disabled")

        adapter = select_adapter(event.target)
        if adapter is None:
            telemetry.record_event(
                "indent.ignored",
                level="debug",
                data={"target": type(event.target).__name__},
            )
            return KeyResult(consumed=False, status="unsupported_surface")

        event.prevent_default()
        event.stop_propagation()
        outcome = adapter.apply(binding.direction, self.settings.indent_unit)
        result = KeyResult(
            consumed=True,
            status="applied" if outcome is not None else "no_selection",
            direction=binding.direction,
            surface=adapter.kind,
            outcome=outcome,
        )
        self.bus.emit(INDENT_APPLIED, result)
        telemetry.record_event(
            INDENT_APPLIED,
            level="debug",
            data={
                "surface": adapter.kind,
                "direction": binding.direction.value,
                "status": result.status,
            },
        )
        return result

    def _on_keydown(self, payload: object) -> None:
        if isinstance(payload, KeyEvent):
            self.handle_key(payload)

    def _settings_changed(self, field_name: str) -> None:
        payload: Dict[str, Any] = {"field": field_name, **self.settings.to_mapping()}
        self.bus.emit(SETTINGS_CHANGED, payload)
        telemetry.record_event(SETTINGS_CHANGED, data=payload)


__all__ = [
    "EventBus",
    "INDENT_APPLIED",
    "KEYDOWN",
    "KeyResult",
    "SETTINGS_CHANGED",
    "TabIndentController",
]
