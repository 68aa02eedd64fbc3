"""Load candles from CSV or JSON text, files or stdin."""

import csv
import io
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from candlechart.models import Candle

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("open", "high", "low", "close")
OPTIONAL_COLUMNS = ("volume", "timestamp")
VALID_FORMATS = ["csv", "json"]


class CandleLoadError(ValueError):
    """Raised when candle input cannot be parsed."""


def _build_candle(record: dict, position: str) -> Candle:
    try:
        return Candle.model_validate(record)
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise CandleLoadError(f"Invalid candle at {position}: {errors}") from e


def parse_csv(text: str) -> list[Candle]:
    """Parse CSV text with a header row.

    Column names are case-insensitive. ``open``, ``high``, ``low`` and
    ``close`` are required; ``volume`` and ``timestamp`` are optional and
    empty cells are treated as missing.

    Raises:
        CandleLoadError: If a column is missing or a row is invalid.
    """
    reader = csv.DictReader(io.StringIO(text))
    if reader.fieldnames is None:
        return []

    columns = {name.strip().lower(): name for name in reader.fieldnames if name}
    missing = [col for col in REQUIRED_COLUMNS if col not in columns]
    if missing:
        raise CandleLoadError(f"Missing CSV columns: {', '.join(missing)}")

    candles = []
    # Line 1 is the header
    for line_no, row in enumerate(reader, start=2):
        record = {}
        for col in REQUIRED_COLUMNS + OPTIONAL_COLUMNS:
            if col not in columns:
                continue
            value = (row.get(columns[col]) or "").strip()
            if value:
                record[col] = value
        candles.append(_build_candle(record, f"line {line_no}"))

    logger.debug("Parsed %d candles from CSV", len(candles))
    return candles


def parse_json(text: str) -> list[Candle]:
    """Parse a JSON array of candle objects.

    Raises:
        CandleLoadError: If the document is not an array of valid candles.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CandleLoadError(f"Invalid JSON: {e}") from e

    if not isinstance(data, list):
        raise CandleLoadError("JSON input must be an array of candles")

    candles = []
    for index, record in enumerate(data):
        if not isinstance(record, dict):
            raise CandleLoadError(f"Invalid candle at index {index}: expected an object")
        candles.append(_build_candle(record, f"index {index}"))

    logger.debug("Parsed %d candles from JSON", len(candles))
    return candles


def detect_format(path: str) -> str:
    """Guess the input format from the file suffix, defaulting to CSV."""
    suffix = Path(path).suffix.lower().lstrip(".")
    return suffix if suffix in VALID_FORMATS else "csv"


def load_candles(path: str, fmt: Optional[str] = None) -> list[Candle]:
    """Load candles from a file, or from stdin when ``path`` is ``-``.

    Args:
        path: File path or ``-``.
        fmt: ``csv`` or ``json``. Guessed from the suffix when omitted.

    Raises:
        CandleLoadError: If the input cannot be read or parsed.
    """
    fmt = fmt or detect_format(path)
    if fmt not in VALID_FORMATS:
        raise CandleLoadError(f"Unsupported format: {fmt}. Must be one of {VALID_FORMATS}")

    if path == "-":
        text = sys.stdin.read()
    else:
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise CandleLoadError(f"Cannot read {path}: {e}") from e

    logger.debug("Loading %s candles from %s", fmt, path)
    return parse_json(text) if fmt == "json" else parse_csv(text)
