"""Rendering layers.

The built-in layers run in a fixed order (grid, candles, current
value), followed by user-registered extension layers and finally the
title.  See :mod:`ohlc_render.layers.base` for the layer interface.
"""

from .base import Layer
from .grid import GridLines
from .candles import CandleLayer
from .markers import CurrentValueLayer
from .text import TextOverlay, TitleLayer

__all__ = [
    "Layer",
    "GridLines",
    "CandleLayer",
    "CurrentValueLayer",
    "TextOverlay",
    "TitleLayer",
]
