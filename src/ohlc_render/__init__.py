"""Top-level package for the OHLC chart renderer.

This package turns a series of open/high/low/close bars into a raster
PNG chart.  The rendering engine lives in :mod:`ohlc_render.canvas`
(pixel buffer, coordinate mapping, rasterizer, glyphs) and
:mod:`ohlc_render.layers` (the ordered drawing pipeline); statistical
overlays are in :mod:`ohlc_render.indicators`.  A command-line
interface is provided by :mod:`ohlc_render.cli`.
"""

from .data import AggregateSummary, Bar, Candle, load_bars_csv, summarize, validate_series
from .errors import ChartError, CodecError, DataValidationError, ResourceError
from .indicators import BollingerBands, ExponentialMovingAverage
from .layers import Layer, TextOverlay
from .canvas import ChartCanvas, Margin
from .options import AxisOptions, RenderOptions
from .renderer import render, render_and_save, render_canvas

__all__ = [
    "AggregateSummary",
    "AxisOptions",
    "Bar",
    "BollingerBands",
    "Candle",
    "ChartCanvas",
    "ChartError",
    "CodecError",
    "DataValidationError",
    "ExponentialMovingAverage",
    "Layer",
    "Margin",
    "RenderOptions",
    "ResourceError",
    "TextOverlay",
    "load_bars_csv",
    "render",
    "render_and_save",
    "render_canvas",
    "summarize",
    "validate_series",
]
