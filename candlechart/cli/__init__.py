"""CLI commands for candlechart.

This package provides the command-line interface for drawing candlestick
charts and inspecting candle series.
"""

from candlechart.cli.main import cli, main

__all__ = ["cli", "main"]
