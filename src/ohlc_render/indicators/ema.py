"""Exponential moving average overlay."""

from __future__ import annotations

from typing import List, Optional, Sequence

import pandas as pd  # type: ignore

from ..canvas.buffer import ChartCanvas
from ..data.models import Candle
from ..layers.base import Layer, bar_centre_time
from .math import representative_prices


def compute_ema(series: Sequence[Candle], span: int) -> List[float]:
    """EMA of representative prices, aligned one-to-one with ``series``.

    Uses the recursive form (``adjust=False``) so each value depends
    only on current and earlier bars.
    """
    if span < 1:
        raise ValueError(f"span must be >= 1, got {span}")
    prices = pd.Series(representative_prices(series), dtype=float)
    return [float(v) for v in prices.ewm(span=span, adjust=False).mean()]


class ExponentialMovingAverage(Layer):
    """Line through the EMA value at the centre of every bar.

    Series shorter than ``span`` are considered not warmed up and draw
    nothing.
    """

    def __init__(self, span: int, line_colour: int) -> None:
        if span < 1:
            raise ValueError(f"span must be >= 1, got {span}")
        self.span = span
        self.line_colour = line_colour

    def apply(self, canvas: ChartCanvas, series: Sequence[Candle]) -> None:
        if len(series) < self.span:
            return
        values = compute_ema(series, self.span)
        points = [
            canvas.to_pixel(value, bar_centre_time(canvas, i)) for i, value in enumerate(values)
        ]
        for p1, p2 in zip(points, points[1:]):
            canvas.line(p1, p2, self.line_colour)

    def legend_colour(self) -> Optional[int]:
        return self.line_colour

    def name(self) -> str:
        return f"EMA({self.span})"
