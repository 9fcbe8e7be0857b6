"""Textual demo app: an editor pane where Tab and Shift+Tab indent."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual.app import App, ComposeResult
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use tab_indent.adapters.textual.app"
    ) from exc

from tab_indent.host import INDENT_APPLIED, SETTINGS_CHANGED, KeyResult, TabIndentController
from tab_indent.settings import IndentSettings, parse_indent_width

from .controller import IndentingTextArea


def describe_result(result: KeyResult) -> str:
    if result.outcome is None:
        return f"{result.status}"
    selection = result.outcome.selection
    direction = result.direction.value if result.direction else "?"
    return f"{direction} -> selection {selection.start}..{selection.end}"


class TabIndentApp(App[None]):
    """Single text pane plus a status line."""

    CSS = """
	#editor {
		height: 1fr;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
        ("ctrl+t", "toggle_indent", "Toggle Tab indent"),
    ]

    def __init__(
        self, *, settings: Optional[IndentSettings] = None, text: str = ""
    ) -> None:
        super().__init__()
        self.controller = TabIndentController(settings or IndentSettings.from_env())
        self._text = text
        self._status: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield IndentingTextArea(self._text, controller=self.controller, id="editor")
        self._status = Static(self._settings_line(), id="status-line")
        yield self._status
        yield Footer()

    def on_mount(self) -> None:
        self.controller.bus.subscribe(INDENT_APPLIED, self._on_indent_applied)
        self.controller.bus.subscribe(SETTINGS_CHANGED, self._on_settings_changed)
        self.controller.start()

    def action_toggle_indent(self) -> None:
        self.controller.set_enabled(not self.controller.settings.enabled)

    def _on_indent_applied(self, payload: object) -> None:
        if isinstance(payload, KeyResult):
            self._update_status(f"{self._settings_line()} | {describe_result(payload)}")

    def _on_settings_changed(self, payload: object) -> None:
        del payload
        self._update_status(self._settings_line())

    def _settings_line(self) -> str:
        settings = self.controller.settings
        state = "on" if settings.enabled else "off"
        return f"Tab indent {state}, width {settings.indent_width}"

    def _update_status(self, text: str) -> None:
        if self._status:
            self._status.update(text)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Try Tab / Shift+Tab indentation.")
    parser.add_argument("path", nargs="?", help="Text file to open (not saved back)")
    parser.add_argument(
        "--width",
        default=None,
        help="Indent width in spaces, clamped to 1..8 (default: TAB_INDENT_INDENT_WIDTH or 2)",
    )
    parser.add_argument(
        "--disabled",
        action="store_true",
        help="Start with Tab indentation switched off (ctrl+t toggles it)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    settings = IndentSettings.from_env()
    if args.width is not None:
        settings = settings.with_width(parse_indent_width(args.width))
    if args.disabled:
        settings = settings.with_enabled(False)
    text = Path(args.path).read_text(encoding="utf-8") if args.path else ""
    TabIndentApp(settings=settings, text=text).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
