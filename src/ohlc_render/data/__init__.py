"""Bar models, validation and aggregate statistics.

This package defines the bar model consumed by the renderer, the OHLC
ordering validator that runs before any canvas is allocated, the
single-pass aggregator that sizes the coordinate mapping, and a CSV
loader used by the command-line interface.
"""

from .models import Bar, Candle
from .summary import AggregateSummary, summarize
from .validation import check_bar, validate_series
from .io import bars_from_dataframe, load_bars_csv

__all__ = [
    "Bar",
    "Candle",
    "AggregateSummary",
    "summarize",
    "check_bar",
    "validate_series",
    "bars_from_dataframe",
    "load_bars_csv",
]
