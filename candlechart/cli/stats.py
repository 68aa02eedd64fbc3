"""Stats command for the candlechart CLI."""

from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from candlechart.loaders import VALID_FORMATS, CandleLoadError, load_candles
from candlechart.models import Candle, CandleSet, CandleType
from candlechart.panes.info_bar import format_volume

console = Console()


def get_series_stats(candles: list[Candle]) -> dict:
    """Compute summary statistics for a candle series.

    Returns:
        Dict with count, bullish/bearish counts and the CandleSet statistics.
    """
    candle_set = CandleSet(candles)
    bullish = sum(1 for c in candles if c.candle_type is CandleType.BULLISH)

    return {
        "count": len(candles),
        "bullish": bullish,
        "bearish": len(candles) - bullish,
        "last_price": candle_set.last_price,
        "max_price": candle_set.max_price,
        "min_price": candle_set.min_price,
        "variation": candle_set.variation,
        "average": candle_set.average,
        "max_volume": candle_set.max_volume,
        "cumulative_volume": candle_set.cumulative_volume,
    }


@click.command()
@click.argument("file", default="-")
@click.option(
    "-f", "--format", "fmt",
    type=click.Choice(VALID_FORMATS),
    default=None,
    help="Input format (default: from the file suffix, csv for stdin).",
)
def stats(file: str, fmt: Optional[str]) -> None:
    """Show summary statistics of the candles in FILE.

    \b
    Examples:
      candlechart stats prices.csv
      cat prices.json | candlechart stats - -f json
    """
    try:
        candles = load_candles(file, fmt)
    except CandleLoadError as e:
        console.print(Panel(
            f"[red]{e}[/red]",
            title="[bold red]Error[/bold red]",
            border_style="red",
        ))
        raise SystemExit(1)

    result = get_series_stats(candles)
    var_style = "green" if result["variation"] >= 0 else "red"

    table = Table(
        title=f"{file} ({result['count']} candles)",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Metric", style="dim")
    table.add_column("Value", justify="right")

    table.add_row("Bullish / Bearish", f"{result['bullish']} / {result['bearish']}")
    table.add_row("Last price", f"{result['last_price']:.2f}")
    table.add_row("Highest", f"[green]{result['max_price']:.2f}[/green]")
    table.add_row("Lowest", f"[red]{result['min_price']:.2f}[/red]")
    table.add_row("Variation", f"[{var_style}]{result['variation']:+.2f}%[/{var_style}]")
    table.add_row("Average close", f"{result['average']:.2f}")
    table.add_row("Max volume", format_volume(result["max_volume"]))
    table.add_row("Cumulative volume", format_volume(result["cumulative_volume"]))

    console.print(table)
