"""Candlestick chart layout, rasterization and frame assembly."""

from candlechart.chart.chart import Chart
from candlechart.chart.data import ChartData
from candlechart.chart.glyphs import Glyph, classify
from candlechart.chart.renderer import ChartRenderer, render

__all__ = [
    "Chart",
    "ChartData",
    "ChartRenderer",
    "Glyph",
    "classify",
    "render",
]
