"""Price axis: maps prices to row coordinates and renders axis labels."""

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from candlechart.chart.data import ChartData


class YAxis:
    """Vertical price axis drawn on the left of the chart.

    Row coordinates are continuous: the visible minimum price maps to 0
    and the visible maximum price maps to the plot height.
    """

    CHAR_PRECISION = 6
    DEC_PRECISION = 2
    MARGIN_RIGHT = 4
    WIDTH = CHAR_PRECISION + MARGIN_RIGHT + 1 + DEC_PRECISION

    # Label columns before the axis line
    LABEL_WIDTH = CHAR_PRECISION + DEC_PRECISION + 2

    def __init__(self, chart_data: "ChartData"):
        self.chart_data = chart_data

    def _price_range(self) -> tuple[float, float]:
        visible = self.chart_data.visible_candle_set
        return visible.min_price, visible.max_price

    def price_to_height(self, price: float) -> float:
        """Convert a price into a continuous row coordinate.

        Args:
            price: Price to map.

        Returns:
            Row coordinate, larger for higher prices. A flat or empty
            visible range maps every price to the middle of the plot.
        """
        height = self.chart_data.height
        min_value, max_value = self._price_range()

        if max_value == min_value:
            return height / 2

        span = max_value - min_value
        if math.isinf(span):
            # Range wider than the largest float: scale both sides by half
            return (price / 2 - min_value / 2) / (max_value / 2 - min_value / 2) * height

        return (price - min_value) / span * height

    def height_to_price(self, y: int) -> float:
        """Price shown at row ``y``."""
        height = self.chart_data.height
        min_value, max_value = self._price_range()

        if height <= 0:
            return min_value

        span = max_value - min_value
        if math.isinf(span):
            return (min_value / 2 + (max_value / 2 - min_value / 2) * y / height) * 2

        return min_value + y * span / height

    def render_line(self, y: int) -> str:
        """Render the label for row ``y``: a price tick every fourth row."""
        if y % 4 == 0:
            return self.render_tick(y)
        return self.render_empty()

    def render_tick(self, y: int) -> str:
        price = self.height_to_price(y)
        cell_width = self.CHAR_PRECISION + self.DEC_PRECISION + 1
        # Wide prices are cropped so the axis line stays in its column
        text = f"{price:<{cell_width}.{self.DEC_PRECISION}f}"[:cell_width]
        label = f"{text} │┈"
        return label[: self.WIDTH].ljust(self.WIDTH)

    def render_empty(self) -> str:
        return " " * self.LABEL_WIDTH + "│" + " " * (self.WIDTH - self.LABEL_WIDTH - 1)
