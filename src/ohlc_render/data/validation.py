"""OHLC ordering checks for bar series.

A series is renderable only when it is non-empty and every bar
satisfies ``low <= open <= high`` and ``low <= close <= high``.  The
checks run per bar in a fixed priority order and stop at the first
failure, so the reported relation is deterministic for a given input.
"""

from __future__ import annotations

from typing import Callable, List, Sequence, Tuple

from ..errors import DataValidationError
from .models import Candle

# Relations in priority order.  Each predicate returns True when the
# bar violates the relation.
_RELATIONS: List[Tuple[str, Callable[[Candle], bool]]] = [
    ("open>high", lambda b: b.open > b.high),
    ("close>high", lambda b: b.close > b.high),
    ("low>high", lambda b: b.low > b.high),
    ("open<low", lambda b: b.open < b.low),
    ("close<low", lambda b: b.close < b.low),
]


def check_bar(bar: Candle) -> str:
    """Return the first violated relation for a single bar, or ``""``."""
    for relation, violated in _RELATIONS:
        if violated(bar):
            return relation
    return ""


def validate_series(series: Sequence[Candle]) -> None:
    """Validate a bar series before rendering.

    Args:
        series: Bars ordered oldest first.

    Raises:
        DataValidationError: If the series is empty, or on the first bar
            that violates the OHLC ordering.  Bars after the failing one
            are not inspected.
    """
    if len(series) == 0:
        raise DataValidationError("Bar series is empty; at least one bar is required")
    for index, bar in enumerate(series):
        relation = check_bar(bar)
        if relation:
            raise DataValidationError(
                f"Bar {index} is invalid: {relation} "
                f"(open={bar.open}, high={bar.high}, low={bar.low}, close={bar.close})",
                index=index,
                relation=relation,
            )
