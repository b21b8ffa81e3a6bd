"""Bollinger Bands overlay.

For every bar ``i`` from ``periods`` onwards, the band point is
computed from the ``periods`` bars strictly before it: the
representative price of each bar in the window is averaged, and the
sample standard deviation scaled by ``k`` gives the upper and lower
bands.  Band point ``j`` is plotted at the centre of bar
``j + periods``, i.e. shifted ``(periods + 0.5)`` time units from the
start of its window.  Consecutive band points are joined with straight
segments, so a series with ``periods + 1`` bars or fewer draws
nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..canvas.buffer import ChartCanvas
from ..data.models import Candle
from ..layers.base import Layer
from .math import mean, representative_prices, sample_stddev


@dataclass(frozen=True)
class BandPoint:
    upper: float
    median: float
    lower: float


def compute_bands(series: Sequence[Candle], periods: int, k: float) -> List[BandPoint]:
    """Return one :class:`BandPoint` per bar from index ``periods`` on.

    Returns an empty list when the series has ``periods`` bars or
    fewer.
    """
    if periods < 1:
        raise ValueError(f"periods must be >= 1, got {periods}")
    prices = representative_prices(series)
    bands: List[BandPoint] = []
    for i in range(periods, len(prices)):
        window = prices[i - periods:i]
        avg = mean(window)
        spread = sample_stddev(window) * k
        bands.append(BandPoint(upper=avg + spread, median=avg, lower=avg - spread))
    return bands


class BollingerBands(Layer):
    """Upper, median and lower Bollinger bands in a single colour.

    Parameters
    ----------
    periods : int
        Number of bars in each trailing window.
    standard_deviations : float
        Band width multiplier ``k``.
    line_colour : int
        RGBA colour for all three bands.
    """

    def __init__(self, periods: int, standard_deviations: float, line_colour: int) -> None:
        if periods < 1:
            raise ValueError(f"periods must be >= 1, got {periods}")
        self.periods = periods
        self.standard_deviations = standard_deviations
        self.line_colour = line_colour

    def apply(self, canvas: ChartCanvas, series: Sequence[Candle]) -> None:
        bands = compute_bands(series, self.periods, self.standard_deviations)
        unit = canvas.time_units
        offset = (self.periods + 0.5) * unit
        for i in range(len(bands) - 1):
            t1 = i * unit + offset
            t2 = (i + 1) * unit + offset
            for attr in ("upper", "median", "lower"):
                p1 = canvas.to_pixel(getattr(bands[i], attr), t1)
                p2 = canvas.to_pixel(getattr(bands[i + 1], attr), t2)
                canvas.line(p1, p2, self.line_colour)

    def legend_colour(self) -> Optional[int]:
        return self.line_colour

    def name(self) -> str:
        return f"BB({self.periods}, {self.standard_deviations:g})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BollingerBands):
            return NotImplemented
        return (self.periods, self.standard_deviations, self.line_colour) == (
            other.periods,
            other.standard_deviations,
            other.line_colour,
        )

    def __hash__(self) -> int:
        return hash((self.periods, self.standard_deviations, self.line_colour))
