"""Command-line interface for the OHLC renderer.

This module uses the :mod:`click` library to expose the renderer as a
small tool: ``render`` turns a CSV of bars into a PNG chart and
``validate`` checks a CSV against the OHLC ordering rules without
drawing anything.

Canvas size and time unit defaults can be overridden through the
``OHLC_RENDER_WIDTH``, ``OHLC_RENDER_HEIGHT`` and
``OHLC_RENDER_TIME_UNITS`` environment variables; explicit options
take precedence.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple

import click

from .data.io import load_bars_csv
from .data.models import Bar
from .data.validation import validate_series
from .errors import ChartError
from .indicators.bollinger import BollingerBands
from .indicators.ema import ExponentialMovingAverage
from .options import AxisOptions, RenderOptions
from .renderer import render_and_save

DEFAULT_BOLLINGER_COLOUR = "0x1E64C8FF"
DEFAULT_EMA_COLOUR = "0xFF8C00FF"


def _parse_colour(value: str) -> int:
    """Parse ``#RRGGBB``, ``#RRGGBBAA`` or ``0xRRGGBBAA`` into a packed RGBA int."""
    text = value.strip().lower()
    if text.startswith("#"):
        text = text[1:]
    elif text.startswith("0x"):
        text = text[2:]
    if len(text) not in (6, 8):
        raise click.UsageError(f"Could not parse colour '{value}'")
    try:
        colour = int(text, 16)
    except ValueError as exc:
        raise click.UsageError(f"Could not parse colour '{value}'") from exc
    if len(text) == 6:
        colour = (colour << 8) | 0xFF
    return colour


def _parse_bollinger(value: str) -> Tuple[int, float]:
    """Parse a ``PERIODS:K`` pair such as ``20:2``."""
    try:
        periods_text, k_text = value.split(":", 1)
        periods = int(periods_text)
        k = float(k_text)
    except ValueError as exc:
        raise click.UsageError(f"Could not parse Bollinger spec '{value}'; expected PERIODS:K") from exc
    if periods < 1:
        raise click.UsageError(f"Bollinger periods must be >= 1, got {periods}")
    return periods, k


def _load_bars(input_path: str) -> List[Bar]:
    try:
        return load_bars_csv(input_path)
    except (OSError, ValueError) as exc:
        raise click.ClickException(f"Could not read bars from {input_path}: {exc}") from exc


@click.group()
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging (per-layer timings).")
def cli(verbose: bool) -> None:
    """OHLC chart renderer command-line interface."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.argument("output_path", type=click.Path(dir_okay=False))
@click.option("--width", type=int, default=None, help="Canvas width in pixels (default: env or 800).")
@click.option("--height", type=int, default=None, help="Canvas height in pixels (default: env or 600).")
@click.option("--title", type=str, default="", help="Chart title drawn in the top margin.")
@click.option("--time-units", type=int, default=None, help="Seconds represented by each bar (default: env or 3600).")
@click.option("--price-interval", type=float, default=0.0, help="Spacing of horizontal price grid lines (0 disables).")
@click.option("--time-interval", type=float, default=0.0, help="Spacing of vertical time grid lines in seconds (0 disables).")
@click.option("--label-every", type=int, default=1, help="Label every Nth grid line (0 disables labels).")
@click.option("--prefix", "value_prefix", type=str, default="", help="Prefix for price labels, e.g. '$'.")
@click.option("--suffix", "value_suffix", type=str, default="", help="Suffix for price labels.")
@click.option("--background", type=str, default=None, help="Background colour as #RRGGBB or 0xRRGGBBAA.")
@click.option(
    "--bollinger",
    "bollinger_specs",
    multiple=True,
    help="Add Bollinger Bands as PERIODS:K (repeatable), e.g. --bollinger 20:2",
)
@click.option("--bollinger-colour", type=str, default=DEFAULT_BOLLINGER_COLOUR, help="Bollinger band colour.")
@click.option("--ema", "ema_spans", type=int, multiple=True, help="Add an EMA overlay with the given span (repeatable).")
@click.option("--ema-colour", type=str, default=DEFAULT_EMA_COLOUR, help="EMA line colour.")
def render(
    input_path: str,
    output_path: str,
    width: Optional[int],
    height: Optional[int],
    title: str,
    time_units: Optional[int],
    price_interval: float,
    time_interval: float,
    label_every: int,
    value_prefix: str,
    value_suffix: str,
    background: Optional[str],
    bollinger_specs: Tuple[str, ...],
    bollinger_colour: str,
    ema_spans: Tuple[int, ...],
    ema_colour: str,
) -> None:
    """Render INPUT_PATH (CSV with open/high/low/close columns) to OUTPUT_PATH as PNG."""
    bars = _load_bars(input_path)
    try:
        options = RenderOptions.from_env()
        if width is not None or height is not None:
            options = options.with_size(width or options.width, height or options.height)
        if time_units is not None:
            options = options.with_time_units(time_units)
        options = (
            options.with_title(title)
            .with_value_prefix(value_prefix)
            .with_value_suffix(value_suffix)
            .with_price_axis(AxisOptions(line_interval=price_interval, label_frequency=label_every))
            .with_time_axis(AxisOptions(line_interval=time_interval, label_frequency=label_every))
        )
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc
    if background:
        options = options.with_background_colour(_parse_colour(background))
    for spec in bollinger_specs:
        periods, k = _parse_bollinger(spec)
        options = options.add_layer(BollingerBands(periods, k, _parse_colour(bollinger_colour)))
    for span in ema_spans:
        if span < 1:
            raise click.UsageError(f"EMA span must be >= 1, got {span}")
        options = options.add_layer(ExponentialMovingAverage(span, _parse_colour(ema_colour)))
    out_path = Path(output_path)
    try:
        out_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise click.ClickException(f"Could not create output directory {out_path.parent}: {exc}") from exc
    try:
        written = render_and_save(options, bars, out_path)
    except ChartError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"WROTE {written} ({len(bars)} bars, {options.width}x{options.height})")


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
def validate(input_path: str) -> None:
    """Check INPUT_PATH against the OHLC ordering rules."""
    bars = _load_bars(input_path)
    try:
        validate_series(bars)
    except ChartError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"OK: {len(bars)} bars")
