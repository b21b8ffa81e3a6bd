"""Loading bar series from tabular files.

Input files are CSVs with (case-insensitive) ``open``, ``high``,
``low`` and ``close`` columns.  Any other columns are ignored.  When a
timestamp column (``ts``, ``time``, ``timestamp`` or ``date``) is
present, rows are sorted by it so the resulting series is oldest
first; otherwise file order is preserved.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Union

import pandas as pd  # type: ignore

from .models import Bar

OHLC_COLUMNS = ["open", "high", "low", "close"]
TIMESTAMP_COLUMNS = ["ts", "time", "timestamp", "date"]


def bars_from_dataframe(df: pd.DataFrame) -> List[Bar]:
    """Convert a DataFrame with OHLC columns into a list of :class:`Bar`.

    Raises:
        ValueError: If any of the OHLC columns is missing.
    """
    df = df.rename(columns={c: str(c).strip().lower() for c in df.columns})
    missing = [c for c in OHLC_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {', '.join(missing)}")
    for col in TIMESTAMP_COLUMNS:
        if col in df.columns:
            df = df.sort_values(col, kind="mergesort").reset_index(drop=True)
            break
    records = df[OHLC_COLUMNS].astype(float).to_dict(orient="records")
    return [Bar(**record) for record in records]


def load_bars_csv(path: Union[str, Path]) -> List[Bar]:
    """Read a CSV file into a bar series ordered oldest first."""
    df = pd.read_csv(path)
    return bars_from_dataframe(df)
