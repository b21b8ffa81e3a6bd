"""Aggregate statistics used to size the coordinate mapping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..errors import DataValidationError
from .models import Candle


@dataclass(frozen=True)
class AggregateSummary:
    """Overall price extent of a bar series.

    Attributes:
        high: Maximum ``high`` across all bars.
        low: Minimum ``low`` across all bars.
        last_close: ``close`` of the most recent bar.
    """

    high: float
    low: float
    last_close: float

    @property
    def range(self) -> float:
        return self.high - self.low


def summarize(series: Sequence[Candle]) -> AggregateSummary:
    """Scan the series once and return its :class:`AggregateSummary`.

    NaN prices are a precondition violation and are not handled.
    """
    if len(series) == 0:
        raise DataValidationError("Cannot summarize an empty bar series")
    high = series[0].high
    low = series[0].low
    for bar in series:
        if bar.high > high:
            high = bar.high
        if bar.low < low:
            low = bar.low
    return AggregateSummary(high=high, low=low, last_close=series[-1].close)
