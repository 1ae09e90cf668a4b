"""Tests for off-screen Rich rendering."""

from rich.console import Console
from rich.text import Text

from wallclock.output.console import RENDER_WIDTH, WALLCLOCK_THEME, render_to_text


class TestRenderToText:
    def test_returns_printed_text(self) -> None:
        assert render_to_text(lambda console: console.print("10:15")) == "10:15\n"

    def test_width(self) -> None:
        widths: list[int] = []

        def draw(console: Console) -> None:
            widths.append(console.width)

        render_to_text(draw)
        render_to_text(draw, width=40)
        assert widths == [RENDER_WIDTH, 40]

    def test_no_ansi(self) -> None:
        text = render_to_text(lambda console: console.print(Text("00:15", style="wc.result")))
        assert "\x1b[" not in text
        assert text == "00:15\n"

    def test_nothing_drawn(self) -> None:
        assert render_to_text(lambda console: None) == ""

    def test_theme_styles(self) -> None:
        for name in ("wc.ok", "wc.error", "wc.time", "wc.result", "wc.hex", "wc.unsupported"):
            assert name in WALLCLOCK_THEME.styles
