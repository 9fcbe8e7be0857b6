from __future__ import annotations

import pytest

from tab_indent.engine import Direction
from tab_indent.keymaps import (
    KeyStroke,
    TriggerBinding,
    TriggerConflictError,
    TriggerMap,
    load_default_triggers,
)


def make_binding(
    binding_id: str = "custom", *, token: str = "ctrl+i", direction: Direction = Direction.INDENT
) -> TriggerBinding:
    return TriggerBinding(id=binding_id, stroke=KeyStroke.parse(token), direction=direction)


def test_keystroke_normalizes_key_and_modifiers() -> None:
    assert KeyStroke("Tab") == KeyStroke("tab")
    assert KeyStroke("Tab", ("Shift", "shift")).token == "shift+tab"
    assert KeyStroke("x", ("shift", "ctrl")).token == "ctrl+shift+x"
    assert KeyStroke.parse("shift+tab") == KeyStroke.from_event("Tab", shift=True)


def test_keystroke_rejects_empty_key() -> None:
    with pytest.raises(ValueError):
        KeyStroke(" ")


def test_default_triggers_resolve_tab_and_shift_tab() -> None:
    triggers = load_default_triggers()

    indent = triggers.resolve(KeyStroke.from_event("Tab"))
    dedent = triggers.resolve(KeyStroke.from_event("Tab", shift=True))

    assert indent is not None and indent.direction is Direction.INDENT
    assert dedent is not None and dedent.direction is Direction.DEDENT
    assert triggers.resolve(KeyStroke("tab", ("ctrl",))) is None
    assert triggers.resolve(KeyStroke("a")) is None
    assert len(triggers) == 2


def test_conflicting_binding_raises() -> None:
    triggers = load_default_triggers()

    with pytest.raises(TriggerConflictError) as info:
        triggers.register(make_binding("other", token="tab"))

    assert info.value.existing.id == "tab.indent"


def test_replace_moves_token_to_new_binding() -> None:
    triggers = load_default_triggers()

    triggers.register(
        make_binding("swap", token="tab", direction=Direction.DEDENT), replace=True
    )

    binding = triggers.resolve(KeyStroke("tab"))
    assert binding is not None and binding.id == "swap"


def test_reregistering_same_id_rebinds_it() -> None:
    triggers = TriggerMap()
    triggers.register(make_binding(token="ctrl+i"))
    triggers.register(make_binding(token="ctrl+j"))

    assert triggers.resolve(KeyStroke.parse("ctrl+i")) is None
    assert triggers.resolve(KeyStroke.parse("ctrl+j")) is not None
    assert len(triggers) == 1


def test_unregister() -> None:
    triggers = load_default_triggers()

    removed = triggers.unregister("tab.dedent")

    assert removed is not None
    assert triggers.resolve(KeyStroke.parse("shift+tab")) is None
    assert triggers.unregister("missing") is None
