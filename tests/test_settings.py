from __future__ import annotations

from typing import Any

import pytest

from tab_indent.settings import (
    DEFAULT_INDENT_WIDTH,
    IndentSettings,
    clamp_indent_width,
    parse_enabled,
    parse_indent_width,
)


@pytest.mark.parametrize(
    "width, expected",
    [(-3, 1), (0, 1), (1, 1), (2, 2), (5, 5), (8, 8), (9, 8), (40, 8)],
)
def test_clamp_indent_width(width: int, expected: int) -> None:
    assert clamp_indent_width(width) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("4", 4),
        (" 6", 6),
        ("3 spaces", 3),
        ("12", 8),
        ("-5", 1),
        ("abc", DEFAULT_INDENT_WIDTH),
        ("", DEFAULT_INDENT_WIDTH),
        ("0", DEFAULT_INDENT_WIDTH),
        (7, 7),
        (True, DEFAULT_INDENT_WIDTH),
        (None, DEFAULT_INDENT_WIDTH),
    ],
)
def test_parse_indent_width(raw: Any, expected: int) -> None:
    assert parse_indent_width(raw) == expected


def test_defaults() -> None:
    settings = IndentSettings()

    assert settings.enabled is True
    assert settings.indent_width == 2
    assert settings.indent_unit.text == "  "


def test_width_is_clamped_on_construction_and_update() -> None:
    assert IndentSettings(indent_width=50).indent_width == 8
    assert IndentSettings().with_width(-2).indent_width == 1


def test_from_mapping_fills_defaults_for_empty_entry() -> None:
    assert IndentSettings.from_mapping({}) == IndentSettings()
    assert IndentSettings.from_mapping(None) == IndentSettings()


def test_from_mapping_reads_stored_keys() -> None:
    settings = IndentSettings.from_mapping({"enabled": False, "indentSpaces": "6"})

    assert settings == IndentSettings(enabled=False, indent_width=6)
    assert settings.to_mapping() == {"enabled": False, "indentSpaces": 6}
    assert IndentSettings.from_mapping(settings.to_mapping()) == settings


def test_from_mapping_accepts_snake_case_width() -> None:
    assert IndentSettings.from_mapping({"indent_width": 4}).indent_width == 4


def test_from_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TAB_INDENT_ENABLED", "0")
    monkeypatch.setenv("TAB_INDENT_INDENT_WIDTH", "4")

    settings = IndentSettings.from_env()

    assert settings == IndentSettings(enabled=False, indent_width=4)


def test_from_env_keeps_base_when_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TAB_INDENT_ENABLED", raising=False)
    monkeypatch.delenv("TAB_INDENT_INDENT_WIDTH", raising=False)
    base = IndentSettings(enabled=True, indent_width=5)

    assert IndentSettings.from_env(base) == base


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, True),
        (True, True),
        (False, False),
        ("false", False),
        ("0", False),
        ("On", True),
        (0, False),
    ],
)
def test_parse_enabled(raw: Any, expected: bool) -> None:
    assert parse_enabled(raw) is expected


def test_from_mapping_reads_stored_string_flags() -> None:
    assert IndentSettings.from_mapping({"enabled": "false"}).enabled is False
    assert IndentSettings.from_mapping({"enabled": "true"}).enabled is True
