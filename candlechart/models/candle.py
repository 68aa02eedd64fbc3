"""Candle (OHLCV) data model."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class CandleType(str, Enum):
    """Direction of a candle, used by presentation layers for coloring."""

    BEARISH = "bearish"
    BULLISH = "bullish"


class MalformedCandleError(ValueError):
    """Raised when a candle violates low <= min(open, close) <= max(open, close) <= high."""


class Candle(BaseModel):
    """Represents a single OHLCV candle.

    The OHLC ordering is not enforced on construction: malformed candles
    render as incoherent glyphs instead of failing. Call
    :meth:`check_consistency` to validate explicitly.
    """

    open: float = Field(..., allow_inf_nan=False, description="Opening price")
    high: float = Field(..., allow_inf_nan=False, description="High price")
    low: float = Field(..., allow_inf_nan=False, description="Low price")
    close: float = Field(..., allow_inf_nan=False, description="Closing price")
    volume: Optional[float] = Field(
        default=None, ge=0, allow_inf_nan=False, description="Traded volume"
    )
    timestamp: Optional[int] = Field(
        default=None, description="Unix timestamp (informational only)"
    )

    model_config = {"frozen": True}

    @property
    def candle_type(self) -> CandleType:
        """Bullish when the close is above the open, bearish otherwise."""
        if self.open < self.close:
            return CandleType.BULLISH
        return CandleType.BEARISH

    def check_consistency(self) -> "Candle":
        """Validate the OHLC ordering.

        Returns:
            The candle itself, so the call can be chained.

        Raises:
            MalformedCandleError: If the prices are not ordered.
        """
        body_low = min(self.open, self.close)
        body_high = max(self.open, self.close)
        if not (self.low <= body_low <= body_high <= self.high):
            raise MalformedCandleError(
                f"Inconsistent candle: open={self.open} high={self.high} "
                f"low={self.low} close={self.close}"
            )
        return self
