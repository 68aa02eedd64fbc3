"""Candle input loaders."""

from candlechart.loaders.files import (
    VALID_FORMATS,
    CandleLoadError,
    detect_format,
    load_candles,
    parse_csv,
    parse_json,
)

__all__ = [
    "VALID_FORMATS",
    "CandleLoadError",
    "detect_format",
    "load_candles",
    "parse_csv",
    "parse_json",
]
