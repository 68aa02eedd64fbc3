"""Colored terminal output for rendered charts using rich."""

from typing import TYPE_CHECKING

from rich.console import Console
from rich.style import Style
from rich.text import Text

from candlechart.models import CandleType, RenderedLine

if TYPE_CHECKING:
    from candlechart.chart.chart import Chart


def rgb_style(color: tuple[int, int, int]) -> Style:
    """Build a rich style from an RGB tuple."""
    r, g, b = color
    return Style(color=f"rgb({r},{g},{b})")


def _append_line(text: Text, line: RenderedLine, styles: dict[CandleType, Style]) -> None:
    text.append(line.axis_component)
    for sample in line.samples:
        text.append(sample.content, style=styles[sample.candle_type])
    text.append("\n")


def to_text(chart: "Chart") -> Text:
    """Render ``chart`` as styled rich text, info bar first."""
    frame = chart.draw_to_buffer()
    text = Text(no_wrap=True, overflow="crop")

    if chart.info_bar.enabled:
        header = chart.info_bar.render()
        for i, line in enumerate(header):
            text.append(line, style="bold" if i == 1 else "dim")
            text.append("\n")

    candle_styles = {
        CandleType.BULLISH: rgb_style(chart.renderer.bullish_color),
        CandleType.BEARISH: rgb_style(chart.renderer.bearish_color),
    }
    volume_styles = {
        CandleType.BULLISH: rgb_style(chart.volume_pane.bullish_color),
        CandleType.BEARISH: rgb_style(chart.volume_pane.bearish_color),
    }

    # Volume rows are the trailing lines of the frame
    volume_rows = chart.volume_pane.height if chart.volume_pane.enabled else 0
    plot_rows = len(frame.lines) - volume_rows

    for i, line in enumerate(frame.lines):
        _append_line(text, line, candle_styles if i < plot_rows else volume_styles)

    text.rstrip()
    return text


def draw(chart: "Chart", console: Console) -> None:
    """Print ``chart`` to ``console``."""
    console.print(to_text(chart), soft_wrap=True)
