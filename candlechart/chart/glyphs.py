"""Sub-cell glyph classification.

Each terminal row is split into quarters. The body edge and the wick edge
of a candle are quantized against that grid (FULL, PARTIAL or NONE), and
the pair of tiers selects one of nine glyphs. This gives four levels of
vertical resolution per row with half-height box-drawing characters.
"""

import math
from enum import Enum


class Glyph(str, Enum):
    """Characters used to draw candles."""

    VOID = " "
    BODY = "┃"
    HALF_BODY_BOTTOM = "╻"
    HALF_BODY_TOP = "╹"
    WICK = "│"
    TOP = "╽"
    BOTTOM = "╿"
    UPPER_WICK = "╷"
    LOWER_WICK = "╵"


class Tier(Enum):
    """How much of a row an edge covers."""

    NONE = 0
    PARTIAL = 1
    FULL = 2


class Zone(Enum):
    UPPER_WICK = "upper"
    BODY = "body"
    LOWER_WICK = "lower"


UPPER_THRESHOLD = 0.75
LOWER_THRESHOLD = 0.25

# (zone, body tier, wick tier) -> glyph
GLYPH_TABLE: dict[tuple[Zone, Tier, Tier], Glyph] = {
    **{(Zone.UPPER_WICK, Tier.FULL, wick): Glyph.BODY for wick in Tier},
    **{(Zone.LOWER_WICK, Tier.FULL, wick): Glyph.BODY for wick in Tier},
    (Zone.UPPER_WICK, Tier.PARTIAL, Tier.FULL): Glyph.TOP,
    (Zone.UPPER_WICK, Tier.PARTIAL, Tier.PARTIAL): Glyph.HALF_BODY_BOTTOM,
    (Zone.UPPER_WICK, Tier.PARTIAL, Tier.NONE): Glyph.HALF_BODY_BOTTOM,
    (Zone.UPPER_WICK, Tier.NONE, Tier.FULL): Glyph.WICK,
    (Zone.UPPER_WICK, Tier.NONE, Tier.PARTIAL): Glyph.UPPER_WICK,
    (Zone.UPPER_WICK, Tier.NONE, Tier.NONE): Glyph.VOID,
    (Zone.LOWER_WICK, Tier.PARTIAL, Tier.FULL): Glyph.BOTTOM,
    (Zone.LOWER_WICK, Tier.PARTIAL, Tier.PARTIAL): Glyph.HALF_BODY_TOP,
    (Zone.LOWER_WICK, Tier.PARTIAL, Tier.NONE): Glyph.HALF_BODY_TOP,
    (Zone.LOWER_WICK, Tier.NONE, Tier.FULL): Glyph.WICK,
    (Zone.LOWER_WICK, Tier.NONE, Tier.PARTIAL): Glyph.LOWER_WICK,
    (Zone.LOWER_WICK, Tier.NONE, Tier.NONE): Glyph.VOID,
}


def upper_tier(offset: float) -> Tier:
    """Tier of an edge above the bottom of the row, ``offset`` rows up."""
    if offset > UPPER_THRESHOLD:
        return Tier.FULL
    if offset > LOWER_THRESHOLD:
        return Tier.PARTIAL
    return Tier.NONE


def lower_tier(offset: float) -> Tier:
    """Tier of an edge below the top of the row, ``offset`` rows up from the bottom."""
    if offset < LOWER_THRESHOLD:
        return Tier.FULL
    if offset < UPPER_THRESHOLD:
        return Tier.PARTIAL
    return Tier.NONE


def find_zone(y: int, high_y: float, low_y: float, max_y: float, min_y: float) -> Zone | None:
    """Locate row ``y`` relative to the candle; the first matching zone wins."""
    if not all(math.isfinite(v) for v in (high_y, low_y, max_y, min_y)):
        return None
    if math.ceil(high_y) >= y >= math.floor(max_y):
        return Zone.UPPER_WICK
    if math.floor(max_y) >= y >= math.ceil(min_y):
        return Zone.BODY
    if math.ceil(min_y) >= y >= math.floor(low_y):
        return Zone.LOWER_WICK
    return None


def classify(y: int, high_y: float, low_y: float, max_y: float, min_y: float) -> Glyph:
    """Choose the glyph of a candle at row ``y``.

    Args:
        y: Integer row coordinate.
        high_y: Row coordinate of the high.
        low_y: Row coordinate of the low.
        max_y: Row coordinate of the body top, max(open, close).
        min_y: Row coordinate of the body bottom, min(open, close).

    Returns:
        The glyph for the cell, ``Glyph.VOID`` when the candle does not
        reach the row.
    """
    # A candle without vertical extent sitting exactly on a row boundary
    # belongs to the row above that boundary.
    if high_y == low_y == y:
        return Glyph.BODY

    zone = find_zone(y, high_y, low_y, max_y, min_y)

    if zone is None:
        return Glyph.VOID
    if zone is Zone.BODY:
        return Glyph.BODY
    if zone is Zone.UPPER_WICK:
        key = (zone, upper_tier(max_y - y), upper_tier(high_y - y))
    else:
        key = (zone, lower_tier(min_y - y), lower_tier(low_y - y))

    return GLYPH_TABLE[key]
