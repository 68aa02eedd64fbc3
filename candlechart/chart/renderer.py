"""Frame assembly: walks the rows and classifies every visible candle."""

import logging
from typing import TYPE_CHECKING

from candlechart.chart.glyphs import classify
from candlechart.models import (
    Candle,
    CandleType,
    RenderedChart,
    RenderedLine,
    RenderedSample,
)
from candlechart.panes.volume_pane import DEFAULT_BEARISH_COLOR, DEFAULT_BULLISH_COLOR

if TYPE_CHECKING:
    from candlechart.chart.chart import Chart
    from candlechart.panes.y_axis import YAxis

logger = logging.getLogger(__name__)


class ChartRenderer:
    """Turns a chart into a :class:`RenderedChart`.

    Holds the candle colors so presentation layers can style samples by
    their candle type; the colors never affect the rendered glyphs.
    """

    def __init__(self):
        self.bullish_color: tuple[int, int, int] = DEFAULT_BULLISH_COLOR
        self.bearish_color: tuple[int, int, int] = DEFAULT_BEARISH_COLOR

    def render_candle(self, candle: Candle, y: int, y_axis: "YAxis") -> tuple[CandleType, str]:
        """Classify ``candle`` at row ``y`` using the axis coordinate mapping."""
        high_y = y_axis.price_to_height(candle.high)
        low_y = y_axis.price_to_height(candle.low)
        max_y = y_axis.price_to_height(max(candle.open, candle.close))
        min_y = y_axis.price_to_height(min(candle.open, candle.close))

        glyph = classify(y, high_y, low_y, max_y, min_y)
        return candle.candle_type, glyph.value

    def render_to_buffer(self, chart: "Chart") -> RenderedChart:
        """Render the plot rows, then the volume pane rows when enabled."""
        chart_data = chart.chart_data
        chart_data.compute_visible_candles()
        chart_data.compute_height(chart.info_bar, chart.volume_pane)

        candles = chart_data.visible_candle_set.candles
        lines = []

        # Row 0 is never drawn
        for y in range(chart_data.height - 1, 0, -1):
            samples = [
                RenderedSample(candle_type=candle_type, content=content)
                for candle_type, content in (
                    self.render_candle(candle, y, chart.y_axis) for candle in candles
                )
            ]
            lines.append(RenderedLine(axis_component=chart.y_axis.render_line(y), samples=samples))

        if chart.volume_pane.enabled:
            for y in range(chart.volume_pane.height, 0, -1):
                samples = [
                    RenderedSample(candle_type=candle_type, content=content)
                    for candle_type, content in (
                        chart.volume_pane.render(candle, y) for candle in candles
                    )
                ]
                lines.append(RenderedLine(axis_component=chart.y_axis.render_empty(), samples=samples))

        logger.debug("Rendered %d lines for %d candles", len(lines), len(candles))
        return RenderedChart(lines=lines)


def render(chart: "Chart") -> RenderedChart:
    """Render ``chart`` with its own renderer."""
    return chart.renderer.render_to_buffer(chart)
