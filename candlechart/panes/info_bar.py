"""Header bar summarizing the whole candle series."""

from typing import TYPE_CHECKING

from candlechart.models import CandleSet

if TYPE_CHECKING:
    from candlechart.chart.data import ChartData


def format_volume(volume: float) -> str:
    """Format a volume with K/M/B suffixes."""
    for threshold, suffix in ((1e9, "B"), (1e6, "M"), (1e3, "K")):
        if abs(volume) >= threshold:
            return f"{volume / threshold:.2f}{suffix}"
    return f"{volume:.0f}"


class InfoBar:
    """Fixed-height header showing the chart name and series statistics.

    Statistics come from the main candle set, not the visible window.
    """

    HEIGHT = 4

    def __init__(self, name: str, chart_data: "ChartData"):
        self.name = name
        self.chart_data = chart_data
        self.enabled = True

    def summary(self) -> dict[str, str]:
        """Formatted statistics keyed by label, in display order."""
        candles: CandleSet = self.chart_data.main_candle_set
        sign = "+" if candles.variation >= 0 else ""

        return {
            "Price": f"{candles.last_price:.2f}",
            "Highest": f"{candles.max_price:.2f}",
            "Lowest": f"{candles.min_price:.2f}",
            "Var.": f"{sign}{candles.variation:.2f}%",
            "Avg.": f"{candles.average:.2f}",
            "Cum. Vol": format_volume(candles.cumulative_volume),
        }

    def render(self) -> list[str]:
        """Render the bar as ``HEIGHT`` plain-text lines."""
        width = max(self.chart_data.canvas_size[0], 0)
        fields = " | ".join(f"{label}: {value}" for label, value in self.summary().items())

        return [
            "",
            f"{self.name} | {fields}"[:width] if width else "",
            "─" * width,
            "",
        ]
