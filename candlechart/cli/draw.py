"""Draw command for the candlechart CLI."""

from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel

from candlechart.cli.config import ChartSettings, load_settings, parse_hex_color
from candlechart.loaders import VALID_FORMATS, CandleLoadError, load_candles
from candlechart.models import Candle, MalformedCandleError

console = Console()


def _error(message: str) -> None:
    console.print(Panel(
        f"[red]{message}[/red]",
        title="[bold red]Error[/bold red]",
        border_style="red",
    ))
    raise SystemExit(1)


def build_chart(
    candles: list[Candle],
    settings: ChartSettings,
    canvas_size: Optional[tuple[int, int]] = None,
    strict: bool = False,
):
    """Create a chart configured from ``settings``."""
    from candlechart.chart import Chart

    chart = Chart(candles, canvas_size=canvas_size, strict=strict)

    if settings.name:
        chart.set_name(settings.name)
    if settings.bull_color:
        chart.set_bull_color(*parse_hex_color(settings.bull_color))
    if settings.bear_color:
        chart.set_bear_color(*parse_hex_color(settings.bear_color))
    if settings.volume_bull_color:
        chart.set_vol_bull_color(*parse_hex_color(settings.volume_bull_color))
    if settings.volume_bear_color:
        chart.set_vol_bear_color(*parse_hex_color(settings.volume_bear_color))
    if settings.volume_height is not None:
        chart.set_volume_pane_height(settings.volume_height)
    if settings.volume_fill:
        chart.set_volume_pane_unicode_fill(settings.volume_fill)

    chart.set_volume_pane_enabled(settings.volume_enabled)
    chart.set_info_bar_enabled(settings.info_bar_enabled)
    return chart


def _canvas_size(width: Optional[int], height: Optional[int]) -> Optional[tuple[int, int]]:
    if width is None and height is None:
        return None
    size = console.size
    return (width if width is not None else size.width, height if height is not None else size.height)


@click.command()
@click.argument("file", default="-")
@click.option(
    "-f", "--format", "fmt",
    type=click.Choice(VALID_FORMATS),
    default=None,
    help="Input format (default: from the file suffix, csv for stdin).",
)
@click.option("-n", "--name", default=None, help="Chart name shown in the info bar.")
@click.option("--bull-color", default=None, help="Bullish candle color (#rrggbb).")
@click.option("--bear-color", default=None, help="Bearish candle color (#rrggbb).")
@click.option("--vol-bull-color", default=None, help="Bullish volume color (#rrggbb).")
@click.option("--vol-bear-color", default=None, help="Bearish volume color (#rrggbb).")
@click.option("--volume/--no-volume", default=None, help="Show or hide the volume pane.")
@click.option("--volume-height", type=click.IntRange(min=0), default=None, help="Volume pane rows.")
@click.option("--info-bar/--no-info-bar", default=None, help="Show or hide the info bar.")
@click.option("-W", "--width", type=click.IntRange(min=0), default=None, help="Canvas columns.")
@click.option("-H", "--height", type=click.IntRange(min=0), default=None, help="Canvas rows.")
@click.option("--strict", is_flag=True, help="Reject candles with inconsistent OHLC prices.")
def draw(
    file: str,
    fmt: Optional[str],
    name: Optional[str],
    bull_color: Optional[str],
    bear_color: Optional[str],
    vol_bull_color: Optional[str],
    vol_bear_color: Optional[str],
    volume: Optional[bool],
    volume_height: Optional[int],
    info_bar: Optional[bool],
    width: Optional[int],
    height: Optional[int],
    strict: bool,
) -> None:
    """Draw a candlestick chart from FILE.

    FILE is a CSV or JSON file with open, high, low, close and optional
    volume and timestamp fields. Use - to read from stdin.

    \b
    Examples:
      candlechart draw prices.csv
      candlechart draw prices.json --name BTC-USD --no-volume
      candlechart draw prices.csv --bull-color "#00ff00" -W 120 -H 40
    """
    try:
        settings = load_settings().merged(
            name=name,
            bull_color=bull_color,
            bear_color=bear_color,
            volume_bull_color=vol_bull_color,
            volume_bear_color=vol_bear_color,
            volume_enabled=volume,
            volume_height=volume_height,
            info_bar_enabled=info_bar,
        )
    except ValueError as e:
        _error(f"Invalid option: {e}")

    try:
        candles = load_candles(file, fmt)
        chart = build_chart(candles, settings, _canvas_size(width, height), strict=strict)
    except (CandleLoadError, MalformedCandleError) as e:
        _error(str(e))

    chart.draw(console)
