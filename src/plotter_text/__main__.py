"""CLI entry point for plotter-backend-text."""

import math
import sys

import click

from plotter_text.backend import TextDrawingBackend
from plotter_text.chart import draw_chart
from plotter_text.config import BackendConfig
from plotter_text.errors import DrawingError
from plotter_text.logging_conf import setup_logging


def parse_series(text: str) -> list[tuple[float, float]]:
    """Parse one ``x y`` or ``x,y`` pair per line; blank and ``#`` lines are skipped."""
    points = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        fields = line.replace(",", " ").split()
        if len(fields) != 2:
            raise ValueError(f"line {lineno}: expected two numbers, got {line!r}")
        try:
            x, y = float(fields[0]), float(fields[1])
        except ValueError:
            raise ValueError(f"line {lineno}: not a number in {line!r}") from None
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValueError(f"line {lineno}: values must be finite, got {line!r}")
        points.append((x, y))
    return points


def _span(values: list[float]) -> tuple[float, float]:
    lo, hi = min(values), max(values)
    if lo == hi:
        return lo - 1.0, hi + 1.0
    return lo, hi


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--width", "-w", "width", type=int, default=100, help="Canvas width in characters")
@click.option("--height", "-H", "height", type=int, default=30, help="Canvas height in characters")
@click.option("--caption", "-c", "caption", type=str, default="", help="Chart caption")
@click.option("--legacy-stride", is_flag=True, help="Use the fixed 100-column row stride for lines and text")
@click.option("--output", "-o", "output", type=str, default=None, help="Write the chart to this file")
@click.option("--stdout", "to_stdout", is_flag=True, help="Write the chart to stdout instead of stderr")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(
    input: str | None,
    width: int,
    height: int,
    caption: str,
    legacy_stride: bool,
    output: str | None,
    to_stdout: bool,
    verbose: bool,
) -> None:
    """Plot x/y pairs as a text line chart."""
    setup_logging("DEBUG" if verbose else "WARNING")

    if input:
        try:
            with open(input) as f:
                text = f.read()
        except OSError as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        text = sys.stdin.read()

    try:
        series = parse_series(text)
    except ValueError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)
    if not series:
        click.echo("error: no data points", err=True)
        sys.exit(1)

    if legacy_stride:
        config = BackendConfig.legacy(width, height)
    else:
        config = BackendConfig(width=width, height=height)

    try:
        backend = TextDrawingBackend(config=config, sink=sys.stdout if to_stdout else None)
        x_range = _span([x for x, _ in series])
        y_range = _span([y for _, y in series])
        if output:
            with open(output, "w") as f:
                backend.sink = f
                draw_chart(backend, x_range, y_range, series, caption)
        else:
            draw_chart(backend, x_range, y_range, series, caption)
    except ValueError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)
    except (OSError, DrawingError) as e:
        click.echo(f"error: cannot write chart: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
