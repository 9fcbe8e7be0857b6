"""Host-owned settings read by the indentation core."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

from tab_indent.engine.model import MAX_INDENT_WIDTH, MIN_INDENT_WIDTH, IndentUnit
from tab_indent.runtime import telemetry

DEFAULT_ENABLED = True
DEFAULT_INDENT_WIDTH = 2

# Keys used by stored settings mappings.
ENABLED_KEY = "enabled"
WIDTH_KEY = "indentSpaces"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def clamp_indent_width(width: int) -> int:
    return max(MIN_INDENT_WIDTH, min(MAX_INDENT_WIDTH, int(width)))


def parse_indent_width(raw: Any, *, default: int = DEFAULT_INDENT_WIDTH) -> int:
    """Turn a raw settings-field value into a usable width.

    Only a leading integer is read (``"4 spaces"`` is 4). A value with no
    leading integer, or one that parses to 0, falls back to ``default``.
    Everything else is clamped into the allowed range.
    """

    if isinstance(raw, bool):
        return default
    if isinstance(raw, int):
        value = raw
    else:
        match = _LEADING_INT.match(str(raw))
        if match is None:
            return default
        value = int(match.group(1))
    if value == 0:
        return default
    return clamp_indent_width(value)


def parse_enabled(raw: Any, *, default: bool = DEFAULT_ENABLED) -> bool:
    """Read a stored enabled flag; strings use the same truthy words as the env."""

    if raw is None:
        return default
    if isinstance(raw, str):
        return raw.strip().lower() in telemetry.TRUE_VALUES
    return bool(raw)


@dataclass(frozen=True, slots=True)
class IndentSettings:
    """Enabled flag plus indent width, clamped on construction."""

    enabled: bool = DEFAULT_ENABLED
    indent_width: int = DEFAULT_INDENT_WIDTH

    def __post_init__(self) -> None:
        object.__setattr__(self, "enabled", bool(self.enabled))
        object.__setattr__(self, "indent_width", clamp_indent_width(self.indent_width))

    @property
    def indent_unit(self) -> IndentUnit:
        return IndentUnit(self.indent_width)

    def with_enabled(self, enabled: bool) -> "IndentSettings":
        return replace(self, enabled=enabled)

    def with_width(self, width: int) -> "IndentSettings":
        return replace(self, indent_width=width)

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "IndentSettings":
        """Load a stored settings entry; missing keys take their defaults."""

        if not data:
            return cls()
        enabled = parse_enabled(data.get(ENABLED_KEY))
        raw_width = data.get(WIDTH_KEY, data.get("indent_width"))
        if raw_width is None:
            width = DEFAULT_INDENT_WIDTH
        else:
            width = parse_indent_width(raw_width)
        return cls(enabled=enabled, indent_width=width)

    def to_mapping(self) -> dict[str, Any]:
        return {ENABLED_KEY: self.enabled, WIDTH_KEY: self.indent_width}

    @classmethod
    def from_env(cls, base: Optional["IndentSettings"] = None) -> "IndentSettings":
        """Apply ``TAB_INDENT_ENABLED`` / ``TAB_INDENT_INDENT_WIDTH`` on top of ``base``."""

        settings = base or cls()
        settings = settings.with_enabled(
            telemetry.env_flag("ENABLED", settings.enabled)
        )
        raw_width = telemetry.env("INDENT_WIDTH")
        if raw_width is not None:
            settings = settings.with_width(
                parse_indent_width(raw_width, default=settings.indent_width)
            )
        return settings


__all__ = [
    "DEFAULT_ENABLED",
    "DEFAULT_INDENT_WIDTH",
    "IndentSettings",
    "clamp_indent_width",
    "parse_enabled",
    "parse_indent_width",
]
