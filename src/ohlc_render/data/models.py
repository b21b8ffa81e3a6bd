"""Models for the bar series consumed by the renderer.

The renderer is generic over any bar-like object that exposes
``open``, ``high``, ``low`` and ``close`` attributes (see
:class:`Candle`).  :class:`Bar` is the canonical concrete
implementation used by the CSV loader and the CLI.  It coerces its
fields to floats but deliberately does not enforce the OHLC ordering;
that check lives in :mod:`ohlc_render.data.validation` so callers get
a precise report of the violated relation.
"""

from __future__ import annotations

from typing import Any, Dict, Protocol

from pydantic import BaseModel


class Candle(Protocol):
    """Anything exposing the four OHLC prices as floats."""

    open: float
    high: float
    low: float
    close: float


class Bar(BaseModel):
    """Represents a single OHLC bar.

    Attributes:
        open: The opening price.
        high: The highest price.
        low: The lowest price.
        close: The closing price.
    """

    open: float
    high: float
    low: float
    close: float

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Bar":
        """Build a bar from a mapping with case-insensitive OHLC keys."""
        lowered = {str(k).strip().lower(): v for k, v in record.items()}
        return cls(
            open=lowered["open"],
            high=lowered["high"],
            low=lowered["low"],
            close=lowered["close"],
        )
