"""Ordered candle collection with derived price and volume statistics."""

from typing import Iterable

from candlechart.models.candle import Candle


class CandleSet:
    """Chronological sequence of candles.

    Statistics are recomputed every time the candles are replaced, and
    default to 0.0 for an empty set.
    """

    def __init__(self, candles: Iterable[Candle] = ()):
        """Initialize the set.

        Args:
            candles: Candles in chronological order.
        """
        self.candles: list[Candle] = []
        self.min_price = 0.0
        self.max_price = 0.0
        self.min_volume = 0.0
        self.max_volume = 0.0
        self.last_price = 0.0
        self.variation = 0.0
        self.average = 0.0
        self.cumulative_volume = 0.0
        self.set_candles(candles)

    def __len__(self) -> int:
        return len(self.candles)

    def __iter__(self):
        return iter(self.candles)

    def set_candles(self, candles: Iterable[Candle]) -> None:
        """Replace the candles and refresh the statistics."""
        self.candles = list(candles)
        self._compute_stats()

    def _compute_stats(self) -> None:
        if not self.candles:
            self.min_price = self.max_price = 0.0
            self.min_volume = self.max_volume = 0.0
            self.last_price = self.variation = self.average = 0.0
            self.cumulative_volume = 0.0
            return

        volumes = [c.volume or 0.0 for c in self.candles]
        first, last = self.candles[0], self.candles[-1]

        self.min_price = min(c.low for c in self.candles)
        self.max_price = max(c.high for c in self.candles)
        self.min_volume = min(volumes)
        self.max_volume = max(volumes)
        self.last_price = last.close
        self.cumulative_volume = sum(volumes)
        self.average = sum(c.close for c in self.candles) / len(self.candles)

        if first.open != 0:
            self.variation = (last.close - first.open) / first.open * 100
        else:
            self.variation = 0.0
