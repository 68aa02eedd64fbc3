"""Chart facade owning the layout state and its panes."""

from typing import Iterable, Optional

from rich.console import Console

from candlechart.chart.data import ChartData
from candlechart.chart.renderer import ChartRenderer
from candlechart.display import draw as draw_chart
from candlechart.models import Candle, RenderedChart
from candlechart.panes import InfoBar, VolumePane, YAxis

DEFAULT_NAME = "CHART"


class Chart:
    """Candlestick chart for a terminal-sized character grid.

    The chart owns a single :class:`ChartData`; the axis and both panes
    keep a reference to it. Derived layout (visible candles, plot height)
    is recomputed at the start of every render.

    Example:
        >>> chart = Chart(candles, canvas_size=(80, 24))
        >>> frame = chart.draw_to_buffer()
    """

    def __init__(
        self,
        candles: Iterable[Candle],
        canvas_size: Optional[tuple[int, int]] = None,
        name: str = DEFAULT_NAME,
        strict: bool = False,
    ):
        """Initialize the chart.

        Args:
            candles: Candles in chronological order.
            canvas_size: (columns, rows). Defaults to the terminal size.
            name: Name shown in the info bar.
            strict: Reject candles whose OHLC prices are not ordered.

        Raises:
            MalformedCandleError: If ``strict`` and a candle is inconsistent.
        """
        candles = list(candles)
        if strict:
            for candle in candles:
                candle.check_consistency()

        self.renderer = ChartRenderer()
        self.chart_data = ChartData(candles, canvas_size)
        self.y_axis = YAxis(self.chart_data)
        self.info_bar = InfoBar(name, self.chart_data)
        self.volume_pane = VolumePane(self.chart_data, self.chart_data.canvas_size[1] // 6)

        self.chart_data.compute_height(self.info_bar, self.volume_pane)

    def draw_to_buffer(self) -> RenderedChart:
        """Render the chart into plain rows of glyphs."""
        return self.renderer.render_to_buffer(self)

    def draw(self, console: Optional[Console] = None) -> None:
        """Print the chart with colors to ``console`` (stdout by default)."""
        draw_chart(self, console or Console())

    def set_canvas_size(self, canvas_size: tuple[int, int]) -> None:
        """Resize the canvas and refresh the derived layout."""
        self.chart_data.canvas_size = canvas_size
        self.chart_data.compute_visible_candles()
        self.chart_data.compute_height(self.info_bar, self.volume_pane)

    def set_name(self, name: str) -> None:
        """Set the name of the chart in the info bar."""
        self.info_bar.name = name

    def set_bear_color(self, r: int, g: int, b: int) -> None:
        """Set the color of bearish candles. Default is (234, 74, 90)."""
        self.renderer.bearish_color = (r, g, b)

    def set_bull_color(self, r: int, g: int, b: int) -> None:
        """Set the color of bullish candles. Default is (52, 208, 88)."""
        self.renderer.bullish_color = (r, g, b)

    def set_vol_bear_color(self, r: int, g: int, b: int) -> None:
        """Set the volume bar color of bearish candles."""
        self.volume_pane.bearish_color = (r, g, b)

    def set_vol_bull_color(self, r: int, g: int, b: int) -> None:
        """Set the volume bar color of bullish candles."""
        self.volume_pane.bullish_color = (r, g, b)

    def set_volume_pane_enabled(self, enabled: bool) -> None:
        self.volume_pane.enabled = enabled
        self.chart_data.compute_height(self.info_bar, self.volume_pane)

    def set_volume_pane_unicode_fill(self, unicode_fill: str) -> None:
        """Set the character used for volume bars."""
        self.volume_pane.unicode_fill = unicode_fill

    def set_volume_pane_height(self, height: int) -> None:
        """Set the volume pane height. Default is 1/6 of the canvas rows."""
        self.volume_pane.height = height
        self.chart_data.compute_height(self.info_bar, self.volume_pane)

    def set_info_bar_enabled(self, enabled: bool) -> None:
        self.info_bar.enabled = enabled
        self.chart_data.compute_height(self.info_bar, self.volume_pane)
