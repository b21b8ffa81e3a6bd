"""Tests for the built-in layers and the layer pipeline order."""

from __future__ import annotations

from typing import List, Optional, get_type_hints

from ohlc_render.canvas.buffer import ChartCanvas, Margin
from ohlc_render.data.models import Bar
from ohlc_render.indicators.bollinger import BollingerBands
from ohlc_render.indicators.ema import ExponentialMovingAverage
from ohlc_render.layers.base import Layer
from ohlc_render.layers.grid import GridLines, format_elapsed, format_price
from ohlc_render.layers.candles import CandleLayer
from ohlc_render.layers.markers import CurrentValueLayer
from ohlc_render.layers.text import TextOverlay
from ohlc_render.options import AxisOptions, RenderOptions
from ohlc_render.renderer import build_pipeline, render_canvas

UP = 0x00C800FF
DOWN = 0xDC0000FF
CURRENT = 0x0050DCFF
GRID = 0xAAAAAAFF
LABEL = 0x333333FF


def _small_options() -> RenderOptions:
    # 80x40 drawable rectangle starting at (10, 10)
    return (
        RenderOptions()
        .with_margin(Margin(top=10, bottom=10, left=10, right=10))
        .with_size(100, 60)
        .with_glyph_scale(1)
        .with_up_colour(UP)
        .with_down_colour(DOWN)
        .with_current_value_colour(CURRENT)
    )


def _two_bars() -> List[Bar]:
    return [
        Bar(open=1, high=4, low=0, close=3),  # up
        Bar(open=3, high=4, low=0, close=1),  # down
    ]


def _grid_canvas(high: float = 10.0, low: float = 0.0) -> ChartCanvas:
    return ChartCanvas(
        width=100,
        height=60,
        margin=Margin(top=10, bottom=10, left=10, right=10),
        high=high,
        low=low,
        time_span=100.0,
        time_units=10.0,
        background=0xFFFFFFFF,
        glyph_scale=1,
    )


class _FillLayer(Layer):
    def __init__(self, colour: int) -> None:
        self.colour = colour

    def apply(self, canvas, series) -> None:
        canvas.fill_rect(0, 0, canvas.width - 1, canvas.height - 1, self.colour)


class _DotLayer(Layer):
    def __init__(self, colour: int) -> None:
        self.colour = colour

    def apply(self, canvas, series) -> None:
        canvas.set_pixel(1, 1, self.colour)


def test_pipeline_order() -> None:
    options = _small_options().add_layer(TextOverlay((0, 0), "A", 0xFF)).add_layer(_DotLayer(0xFF))
    names = [layer.name() for layer in build_pipeline(options.with_title("T"))]
    assert names == ["Grid()", "Candles()", "CurrentValue()", "Text('A')", "_DotLayer", "Title('T')"]


def test_candle_colours_and_geometry() -> None:
    canvas = render_canvas(_small_options(), _two_bars())
    # Slot is 40px per bar; body centres at x=30 and x=70, price 2 -> y=30
    assert canvas.pixel(30, 30) == (0x00, 0xC8, 0x00)
    assert canvas.pixel(70, 30) == (0xDC, 0x00, 0x00)
    # Wick above the body (price ~3.8)
    assert canvas.pixel(30, 12) == (0x00, 0xC8, 0x00)
    # Inside the slot but outside both wick and body
    assert canvas.pixel(12, 12) == (255, 255, 255)
    # One pixel gap at the slot edge
    assert canvas.pixel(10, 30) == (255, 255, 255)


def test_current_value_line_overwrites_candles() -> None:
    canvas = render_canvas(_small_options(), _two_bars())
    # Last close 1 maps to row 40, drawn across the whole plot width
    assert canvas.pixel(15, 40) == (0x00, 0x50, 0xDC)
    assert canvas.pixel(89, 40) == (0x00, 0x50, 0xDC)
    # Diamond marker centred on the last bar
    assert canvas.pixel(70, 37) == (0x00, 0x50, 0xDC)
    assert canvas.pixel(73, 40) == (0x00, 0x50, 0xDC)


def test_later_layer_wins_at_shared_pixel() -> None:
    options = _small_options().add_layer(_DotLayer(0xFF0000FF)).add_layer(_DotLayer(0x0000FFFF))
    canvas = render_canvas(options, _two_bars())
    assert canvas.pixel(1, 1) == (0, 0, 255)
    swapped = _small_options().add_layer(_DotLayer(0x0000FFFF)).add_layer(_DotLayer(0xFF0000FF))
    assert render_canvas(swapped, _two_bars()).pixel(1, 1) == (255, 0, 0)


def test_extension_layers_run_after_builtins_and_before_title() -> None:
    options = (
        _small_options()
        .with_size(200, 60)
        .with_margin(Margin(top=30, bottom=10, left=70, right=10))
        .with_title("I")
        .with_text_colour(0x000000FF)
        .add_layer(_FillLayer(0xFF0000FF))
    )
    canvas = render_canvas(options, _two_bars())
    # Candles and markers are covered by the extension layer
    assert canvas.pixel(100, 45) == (255, 0, 0)
    # Title glyph drawn last at (70, 11): column 2 is ink, column 0 is background
    assert canvas.pixel(72, 11) == (0, 0, 0)
    assert canvas.pixel(70, 11) == (255, 255, 255)


def test_grid_price_lines_at_interval_multiples() -> None:
    canvas = _grid_canvas()
    GridLines(AxisOptions(line_colour=GRID, line_interval=5.0), AxisOptions()).apply(canvas, [])
    grid = (0xAA, 0xAA, 0xAA)
    assert canvas.pixel(50, 10) == grid  # price 10
    assert canvas.pixel(50, 30) == grid  # price 5
    assert canvas.pixel(50, 20) == (255, 255, 255)
    assert canvas.pixel(50, 29) == (255, 255, 255)
    # Lines stay inside the plot
    assert canvas.pixel(5, 30) == (255, 255, 255)


def test_grid_time_lines_at_interval_multiples() -> None:
    canvas = _grid_canvas()
    GridLines(AxisOptions(), AxisOptions(line_colour=GRID, line_interval=50.0)).apply(canvas, [])
    grid = (0xAA, 0xAA, 0xAA)
    assert canvas.pixel(10, 30) == grid  # t = 0
    assert canvas.pixel(50, 30) == grid  # t = 50
    assert canvas.pixel(49, 30) == (255, 255, 255)
    assert canvas.pixel(50, 5) == (255, 255, 255)


def test_grid_price_labels_that_do_not_fit_are_dropped() -> None:
    canvas = _grid_canvas()
    axis = AxisOptions(line_colour=GRID, line_interval=5.0, label_colour=LABEL, label_frequency=1)
    GridLines(axis, AxisOptions()).apply(canvas, [])
    # Left margin fits one 6px character: "10" is skipped entirely
    assert (canvas.buffer[7:14, 0:10] == 255).all()
    # "5" fits and is right-aligned at x=2, centred on row 30
    assert canvas.pixel(2, 27) == (0x33, 0x33, 0x33)
    assert canvas.pixel(2, 30) == (255, 255, 255)


def test_grid_time_labels_that_do_not_fit_are_dropped() -> None:
    canvas = _grid_canvas()
    axis = AxisOptions(line_colour=GRID, line_interval=95.0, label_colour=LABEL, label_frequency=1)
    GridLines(AxisOptions(), axis).apply(canvas, [])
    # Lines at t=0 (x=10) and t=95 (x=86)
    assert canvas.pixel(86, 30) == (0xAA, 0xAA, 0xAA)
    # "0s" below the plot at x=10; "95s" would overrun the right edge
    assert canvas.pixel(10, 53) == (0x33, 0x33, 0x33)
    assert (canvas.buffer[52:59, 86:100] == 255).all()


def test_grid_price_line_on_flat_series() -> None:
    canvas = _grid_canvas(high=5.0, low=5.0)
    axis = AxisOptions(line_colour=GRID, line_interval=5.0, label_colour=LABEL, label_frequency=1)
    GridLines(axis, AxisOptions()).apply(canvas, [])
    # A flat series maps to the vertical centre of the plot
    assert canvas.pixel(50, 30) == (0xAA, 0xAA, 0xAA)
    assert canvas.pixel(50, 29) == (255, 255, 255)
    assert canvas.pixel(2, 27) == (0x33, 0x33, 0x33)


def test_grid_flat_series_off_interval_draws_nothing() -> None:
    canvas = _grid_canvas(high=3.0, low=3.0)
    before = canvas.to_bytes()
    GridLines(AxisOptions(line_colour=GRID, line_interval=5.0), AxisOptions()).apply(canvas, [])
    assert canvas.to_bytes() == before


def test_grid_disabled_by_default() -> None:
    canvas = _grid_canvas()
    before = canvas.to_bytes()
    GridLines(AxisOptions(), AxisOptions()).apply(canvas, [])
    assert canvas.to_bytes() == before


def test_label_formatting() -> None:
    assert format_price(5.0, 0.25) == "5.00"
    assert format_price(12.0, 5.0) == "12"
    assert format_price(150.0, 50.0) == "150"
    assert format_elapsed(7200) == "2h"
    assert format_elapsed(5400) == "90m"
    assert format_elapsed(172800) == "2d"
    assert format_elapsed(90) == "90s"
    assert format_elapsed(0) == "0s"


def test_legend_colours() -> None:
    assert CandleLayer(UP, DOWN).legend_colour() == UP
    assert CurrentValueLayer(CURRENT).legend_colour() == CURRENT
    assert TextOverlay((0, 0), "x", 0xFF).legend_colour() is None
    for layer_type in (CandleLayer, CurrentValueLayer, BollingerBands, ExponentialMovingAverage):
        assert get_type_hints(layer_type.legend_colour)["return"] == Optional[int]
