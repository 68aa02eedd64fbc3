"""Tests for the price axis, volume pane and info bar."""

from hypothesis import given, settings
from hypothesis import strategies as st

from candlechart.chart import Chart, ChartData
from candlechart.models import Candle, CandleType
from candlechart.panes import InfoBar, VolumePane, YAxis
from candlechart.panes.info_bar import format_volume

SERIES = [
    Candle(open=2.0, high=10.0, low=0.0, close=8.0, volume=1500),
    Candle(open=8.0, high=9.0, low=1.0, close=4.0, volume=2_500_000),
]


def make_axis(candles: list[Candle], rows: int = 12) -> YAxis:
    chart_data = ChartData(candles, canvas_size=(YAxis.WIDTH + len(candles), rows))
    chart_data.height = rows
    return YAxis(chart_data)


class TestPriceToHeight:
    """Continuous mapping from prices to row coordinates."""

    def test_extremes_map_to_plot_edges(self):
        axis = make_axis(SERIES)
        assert axis.price_to_height(0.0) == 0.0
        assert axis.price_to_height(10.0) == 12.0
        assert axis.price_to_height(5.0) == 6.0

    @given(
        a=st.floats(min_value=0.0, max_value=10.0),
        b=st.floats(min_value=0.0, max_value=10.0),
    )
    @settings(max_examples=100)
    def test_higher_prices_map_higher(self, a: float, b: float):
        axis = make_axis(SERIES)
        if a < b:
            assert axis.price_to_height(a) <= axis.price_to_height(b)

    def test_flat_range_maps_to_middle(self):
        axis = make_axis([Candle(open=3.0, high=3.0, low=3.0, close=3.0)])
        assert axis.price_to_height(3.0) == 6.0

    def test_empty_range_maps_to_middle(self):
        axis = make_axis([])
        assert axis.price_to_height(42.0) == 6.0

    def test_uses_visible_candles_only(self):
        candles = SERIES + [Candle(open=100.0, high=110.0, low=100.0, close=105.0)]
        chart_data = ChartData(candles, canvas_size=(YAxis.WIDTH + 1, 12))
        chart_data.height = 12
        axis = YAxis(chart_data)
        assert axis.price_to_height(100.0) == 0.0
        assert axis.price_to_height(110.0) == 12.0


class TestAxisLabels:
    """Fixed-width axis labels."""

    def test_width_constant(self):
        assert YAxis.WIDTH == 13

    def test_every_label_has_axis_width(self):
        axis = make_axis(SERIES)
        for y in range(1, 12):
            assert len(axis.render_line(y)) == YAxis.WIDTH

    def test_tick_rows(self):
        axis = make_axis(SERIES)
        assert axis.render_line(4) == axis.render_tick(4)
        assert axis.render_line(5) == axis.render_empty()
        assert axis.render_tick(6).startswith("5.00")
        assert "│┈" in axis.render_tick(6)

    def test_axis_line_aligned(self):
        axis = make_axis(SERIES)
        assert axis.render_empty().index("│") == axis.render_tick(8).index("│")

    def test_empty_label_is_not_blank(self):
        assert make_axis([]).render_empty().strip() == "│"

    def test_wide_prices_keep_axis_line_aligned(self):
        axis = make_axis([Candle(open=-123456.0, high=12345678.9, low=-123456.0, close=12345678.9)])
        column = axis.render_empty().index("│")

        for y in (0, 4, 8, 12):
            tick = axis.render_tick(y)
            assert len(tick) == YAxis.WIDTH
            assert tick.index("│") == column
        assert axis.render_tick(0).startswith("-123456.0")
        assert axis.render_tick(12).startswith("12345678.")


class TestVolumePane:
    """Volume bars scaled to the largest visible volume."""

    def make_pane(self, candles: list[Candle], height: int = 4) -> VolumePane:
        chart_data = ChartData(candles, canvas_size=(YAxis.WIDTH + len(candles), 24))
        return VolumePane(chart_data, height)

    def test_bar_heights(self):
        small = Candle(open=1.0, high=2.0, low=0.5, close=1.5, volume=50)
        large = Candle(open=2.0, high=3.0, low=1.5, close=1.0, volume=100)
        pane = self.make_pane([small, large])

        large_bar = [pane.render(large, y)[1] for y in range(4, 0, -1)]
        small_bar = [pane.render(small, y)[1] for y in range(4, 0, -1)]

        assert large_bar == [" ", "┃", "┃", "┃"]
        assert small_bar == [" ", " ", " ", "┃"]

    def test_half_fill_baseline(self):
        tiny = Candle(open=1.0, high=2.0, low=0.5, close=1.5, volume=1)
        large = Candle(open=1.0, high=2.0, low=0.5, close=1.5, volume=1000)
        pane = self.make_pane([tiny, large])
        assert pane.render(tiny, 1) == (CandleType.BULLISH, "╻")
        assert pane.render(tiny, 2) == (CandleType.BULLISH, " ")

    def test_custom_fill_has_no_baseline(self):
        tiny = Candle(open=1.0, high=2.0, low=0.5, close=1.5, volume=1)
        large = Candle(open=1.0, high=2.0, low=0.5, close=1.5, volume=1000)
        pane = self.make_pane([tiny, large])
        pane.unicode_fill = "#"
        assert pane.render(tiny, 1)[1] == " "
        assert pane.render(large, 1)[1] == "#"

    def test_missing_volumes_do_not_divide_by_zero(self):
        candle = Candle(open=1.0, high=2.0, low=0.5, close=1.0)
        pane = self.make_pane([candle])
        assert pane.render(candle, 1) == (CandleType.BEARISH, "╻")
        assert pane.render(candle, 2) == (CandleType.BEARISH, " ")


class TestInfoBar:
    """Series summary header."""

    def test_render_has_fixed_height(self):
        chart = Chart(SERIES, canvas_size=(120, 24), name="BTC-USD")
        lines = chart.info_bar.render()
        assert len(lines) == InfoBar.HEIGHT

    def test_summary_uses_main_series(self):
        chart = Chart(SERIES, canvas_size=(YAxis.WIDTH + 1, 24), name="BTC-USD")
        summary = chart.info_bar.summary()

        assert summary["Price"] == "4.00"
        assert summary["Highest"] == "10.00"
        assert summary["Lowest"] == "0.00"
        assert summary["Var."] == "+100.00%"
        assert summary["Avg."] == "6.00"
        assert summary["Cum. Vol"] == "2.50M"

    def test_name_in_header(self):
        chart = Chart(SERIES, canvas_size=(200, 24))
        chart.set_name("ETH-USD")
        assert chart.info_bar.render()[1].startswith("ETH-USD | Price: 4.00")

    def test_header_cropped_to_canvas(self):
        chart = Chart(SERIES, canvas_size=(20, 24), name="BTC-USD")
        assert all(len(line) <= 20 for line in chart.info_bar.render())

    def test_negative_variation_has_no_plus(self):
        candles = [Candle(open=10.0, high=11.0, low=4.0, close=5.0)]
        chart = Chart(candles, canvas_size=(200, 24))
        assert chart.info_bar.summary()["Var."] == "-50.00%"

    def test_format_volume(self):
        assert format_volume(999) == "999"
        assert format_volume(1500) == "1.50K"
        assert format_volume(2_500_000) == "2.50M"
        assert format_volume(3_000_000_000) == "3.00B"
