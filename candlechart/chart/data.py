"""Layout state shared by the chart, its axis and its panes."""

import logging
from typing import Iterable, Optional

from rich.console import Console

from candlechart.models import Candle, CandleSet
from candlechart.panes.info_bar import InfoBar
from candlechart.panes.volume_pane import VolumePane
from candlechart.panes.y_axis import YAxis

logger = logging.getLogger(__name__)


def terminal_size() -> tuple[int, int]:
    """Return the current terminal size as (columns, rows)."""
    size = Console().size
    return size.width, size.height


class ChartData:
    """Canvas size, candle sets and plot height of one chart.

    The main set holds every candle supplied by the caller. The visible set
    is the suffix of the main set that fits beside the Y axis, and ``height``
    is the number of rows left for candles once the auxiliary panes are
    subtracted. Both are derived and must be recomputed after any change to
    the canvas or the panes.
    """

    def __init__(
        self,
        candles: Iterable[Candle],
        canvas_size: Optional[tuple[int, int]] = None,
    ):
        """Initialize layout state.

        Args:
            candles: Candles in chronological order.
            canvas_size: (columns, rows). Defaults to the terminal size.
        """
        if canvas_size is None:
            canvas_size = terminal_size()

        self.main_candle_set = CandleSet(candles)
        self.visible_candle_set = CandleSet()
        self.canvas_size: tuple[int, int] = canvas_size
        self.height: int = canvas_size[1]

        self.compute_visible_candles()

    def compute_height(self, info_bar: InfoBar, volume_pane: VolumePane) -> None:
        """Recompute the plot height from the canvas and the enabled panes.

        The result is not clamped: panes taller than the canvas give a
        non-positive height, which renders no plot rows.
        """
        info_bar_height = InfoBar.HEIGHT if info_bar.enabled else 0
        volume_pane_height = volume_pane.height if volume_pane.enabled else 0

        self.height = self.canvas_size[1] - info_bar_height - volume_pane_height
        logger.debug(
            "Plot height %d (rows=%d, info bar=%d, volume pane=%d)",
            self.height, self.canvas_size[1], info_bar_height, volume_pane_height,
        )

    def compute_visible_candles(self) -> None:
        """Keep the last candles that fit in the columns right of the Y axis."""
        nb_visible = max(0, self.canvas_size[0] - YAxis.WIDTH)
        candles = self.main_candle_set.candles
        skip = max(0, len(candles) - nb_visible)

        self.visible_candle_set.set_candles(candles[skip:])
        logger.debug(
            "Visible candles %d of %d (columns=%d)",
            len(self.visible_candle_set), len(candles), self.canvas_size[0],
        )
