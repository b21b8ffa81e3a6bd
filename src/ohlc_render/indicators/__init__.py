"""Indicator math and statistical overlay layers.

Overlays are :class:`~ohlc_render.layers.base.Layer` implementations
that users register on ``RenderOptions``; they run after the built-in
layers in registration order.
"""

from .math import mean, representative_price, representative_prices, sample_stddev
from .bollinger import BandPoint, BollingerBands, compute_bands
from .ema import ExponentialMovingAverage, compute_ema

__all__ = [
    "mean",
    "sample_stddev",
    "representative_price",
    "representative_prices",
    "BandPoint",
    "BollingerBands",
    "compute_bands",
    "ExponentialMovingAverage",
    "compute_ema",
]
