"""Data models for candlechart."""

from candlechart.models.candle import Candle, CandleType, MalformedCandleError
from candlechart.models.candle_set import CandleSet
from candlechart.models.rendered import RenderedChart, RenderedLine, RenderedSample

__all__ = [
    "Candle",
    "CandleType",
    "MalformedCandleError",
    "CandleSet",
    "RenderedChart",
    "RenderedLine",
    "RenderedSample",
]
