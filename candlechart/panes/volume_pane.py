"""Volume histogram drawn under the candles."""

import math
from typing import TYPE_CHECKING

from candlechart.models import Candle, CandleType

if TYPE_CHECKING:
    from candlechart.chart.data import ChartData

DEFAULT_BULLISH_COLOR = (52, 208, 88)
DEFAULT_BEARISH_COLOR = (234, 74, 90)


class VolumePane:
    """Bar per visible candle, scaled to the largest visible volume."""

    UNICODE_FILL = "┃"
    UNICODE_HALF_FILL = "╻"
    UNICODE_VOID = " "

    def __init__(self, chart_data: "ChartData", height: int):
        """Initialize the pane.

        Args:
            chart_data: Shared layout state.
            height: Number of rows used by the pane when enabled.
        """
        self.chart_data = chart_data
        self.height = height
        self.enabled = True
        self.unicode_fill = self.UNICODE_FILL
        self.bullish_color: tuple[int, int, int] = DEFAULT_BULLISH_COLOR
        self.bearish_color: tuple[int, int, int] = DEFAULT_BEARISH_COLOR

    def render(self, candle: Candle, y: int) -> tuple[CandleType, str]:
        """Render the cell of ``candle`` at pane row ``y`` (1 is the bottom row)."""
        max_volume = self.chart_data.visible_candle_set.max_volume
        volume = candle.volume or 0.0

        ratio = volume / max_volume * self.height if max_volume > 0 else 0.0

        if y < math.ceil(ratio):
            return candle.candle_type, self.unicode_fill

        # Keep a thin baseline under candles too small to fill a row
        if y == 1 and self.unicode_fill == self.UNICODE_FILL:
            return candle.candle_type, self.UNICODE_HALF_FILL

        return candle.candle_type, self.UNICODE_VOID
