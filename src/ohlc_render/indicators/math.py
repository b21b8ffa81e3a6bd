"""Stateless numeric helpers shared by the statistical overlays."""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from ..data.models import Candle


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean; ``0.0`` for an empty sequence."""
    if len(values) == 0:
        return 0.0
    return float(np.mean(np.asarray(values, dtype=float)))


def sample_stddev(values: Sequence[float]) -> float:
    """Sample standard deviation (``n - 1`` denominator).

    Returns ``0.0`` when there are fewer than two values.
    """
    if len(values) <= 1:
        return 0.0
    return float(np.std(np.asarray(values, dtype=float), ddof=1))


def representative_price(bar: Candle) -> float:
    """Median price of a bar, ``(high + low) / 2``."""
    return (bar.high + bar.low) / 2.0


def representative_prices(series: Sequence[Candle]) -> List[float]:
    return [representative_price(bar) for bar in series]
