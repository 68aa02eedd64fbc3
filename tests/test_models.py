"""Tests for the candle data models."""

import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from pydantic import ValidationError

from candlechart.models import Candle, CandleSet, CandleType, MalformedCandleError

prices = st.floats(min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False)


class TestCandleClassification:
    """
    **Property: Classification tie-break**

    *For any* prices, a candle is bullish only when close is strictly
    above open; equal open and close is bearish.
    """

    @given(price=prices, high=prices, low=prices)
    @settings(max_examples=100)
    def test_equal_open_close_is_bearish(self, price: float, high: float, low: float):
        candle = Candle(open=price, high=high, low=low, close=price)
        assert candle.candle_type is CandleType.BEARISH

    @given(open_=prices, close=prices)
    @settings(max_examples=100)
    def test_bullish_iff_close_above_open(self, open_: float, close: float):
        candle = Candle(open=open_, high=max(open_, close), low=min(open_, close), close=close)
        expected = CandleType.BULLISH if close > open_ else CandleType.BEARISH
        assert candle.candle_type is expected


class TestCandleValidation:
    """Construction-time validation of candle fields."""

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_non_finite_prices_rejected(self, bad: float):
        with pytest.raises(ValidationError):
            Candle(open=1.0, high=bad, low=0.5, close=1.0)

    def test_negative_volume_rejected(self):
        with pytest.raises(ValidationError):
            Candle(open=1.0, high=2.0, low=0.5, close=1.5, volume=-1)

    def test_optional_fields_default_to_none(self):
        candle = Candle(open=1.0, high=2.0, low=0.5, close=1.5)
        assert candle.volume is None
        assert candle.timestamp is None

    def test_candle_is_frozen(self):
        candle = Candle(open=1.0, high=2.0, low=0.5, close=1.5)
        with pytest.raises(ValidationError):
            candle.close = 3.0

    def test_malformed_candle_is_accepted_by_default(self):
        candle = Candle(open=5.0, high=1.0, low=10.0, close=3.0)
        assert candle.high < candle.low

    def test_check_consistency_rejects_low_above_high(self):
        candle = Candle(open=5.0, high=1.0, low=10.0, close=3.0)
        with pytest.raises(MalformedCandleError):
            candle.check_consistency()

    def test_check_consistency_rejects_body_outside_range(self):
        candle = Candle(open=5.0, high=6.0, low=4.0, close=7.0)
        with pytest.raises(MalformedCandleError):
            candle.check_consistency()

    @given(a=prices, b=prices, c=prices, d=prices)
    @settings(max_examples=100)
    def test_check_consistency_accepts_ordered_prices(self, a, b, c, d):
        low, body_low, body_high, high = sorted([a, b, c, d])
        candle = Candle(open=body_high, high=high, low=low, close=body_low)
        assert candle.check_consistency() is candle


class TestCandleSetStatistics:
    """Derived statistics of a candle set."""

    def test_empty_set_has_zero_statistics(self):
        candle_set = CandleSet()
        assert len(candle_set) == 0
        assert candle_set.min_price == 0.0
        assert candle_set.max_price == 0.0
        assert candle_set.max_volume == 0.0
        assert candle_set.variation == 0.0
        assert candle_set.average == 0.0
        assert candle_set.cumulative_volume == 0.0

    def test_statistics_of_series(self):
        candle_set = CandleSet([
            Candle(open=2.0, high=10.0, low=0.0, close=8.0, volume=100),
            Candle(open=8.0, high=9.0, low=1.0, close=4.0, volume=50),
            Candle(open=4.0, high=6.0, low=3.0, close=5.0),
        ])

        assert candle_set.min_price == 0.0
        assert candle_set.max_price == 10.0
        assert candle_set.min_volume == 0.0
        assert candle_set.max_volume == 100
        assert candle_set.last_price == 5.0
        assert candle_set.variation == pytest.approx(150.0)
        assert candle_set.average == pytest.approx(17.0 / 3)
        assert candle_set.cumulative_volume == 150

    def test_zero_first_open_gives_zero_variation(self):
        candle_set = CandleSet([Candle(open=0.0, high=1.0, low=0.0, close=1.0)])
        assert candle_set.variation == 0.0

    def test_set_candles_refreshes_statistics(self):
        candle_set = CandleSet([Candle(open=1.0, high=2.0, low=0.5, close=1.5)])
        candle_set.set_candles([Candle(open=10.0, high=20.0, low=5.0, close=15.0)])
        assert candle_set.max_price == 20.0
        assert candle_set.min_price == 5.0
        assert list(candle_set)[0].close == 15.0
