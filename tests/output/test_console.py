"""Tests for the Rich console factory and theme."""

from __future__ import annotations

from rich.text import Text

from goldsphere_contracts.output.console import (
    GS_THEME,
    create_console,
    get_output,
    style_for_status,
)


class TestCreateConsole:
    def test_renders_to_buffer(self) -> None:
        console = create_console()
        console.print("hello")
        assert get_output(console) == "hello\n"

    def test_no_ansi_outside_terminal(self) -> None:
        console = create_console()
        console.print(Text("OK", style="gs.ok"))
        assert "\x1b[" not in get_output(console)

    def test_width_override(self) -> None:
        assert create_console(width=40).width == 40

    def test_theme_styles_resolve(self) -> None:
        console = create_console()
        for name in GS_THEME.styles:
            assert console.get_style(name) is not None


class TestStyleForStatus:
    def test_known(self) -> None:
        assert style_for_status("success") == "gs.ok"
        assert style_for_status("error") == "gs.error"
        assert style_for_status("warning") == "gs.warning"

    def test_unknown_is_unstyled(self) -> None:
        assert style_for_status("pending") == ""
