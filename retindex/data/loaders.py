"""Return-history sources.

Reads periodic returns from CSV files, derives them from price series, and
generates deterministic synthetic histories for tests and demos.  Every
loader returns a ``float64`` Series indexed by calendar date, which
:class:`~retindex.index.ReturnIndex` accepts directly.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pandas as pd

from retindex.utils.dates import normalize_dates
from retindex.utils.validation import ReturnIndexValidationError


def _fold(name: str) -> str:
    return name.strip().lower().replace(" ", "_")


def read_returns_csv(
    path: str | Path,
    date_column: str = "date",
    return_column: str = "return",
) -> pd.Series:
    """Read one periodic return per row from a CSV file.

    Column names are matched case-insensitively, with spaces treated as
    underscores (``'Daily Return'`` matches ``daily_return``).

    Parameters
    ----------
    path : str or Path
        CSV file location.
    date_column, return_column : str
        Names of the date and return columns.

    Returns
    -------
    Series
        Returns indexed by calendar date, in file order.
    """
    path = Path(path)
    if not path.exists():
        raise ReturnIndexValidationError(f"CSV file not found: {path}")
    raw = pd.read_csv(path)
    raw.columns = [_fold(c) for c in raw.columns]
    wanted = [_fold(date_column), _fold(return_column)]
    missing = [c for c in wanted if c not in raw.columns]
    if missing:
        raise ReturnIndexValidationError(
            f"{path.name} missing required columns: {missing}."
        )
    dates = normalize_dates(raw[wanted[0]])
    values = pd.to_numeric(raw[wanted[1]], errors="coerce").to_numpy(dtype="float64")
    return pd.Series(values, index=dates, name="return")


def returns_from_prices(prices: pd.Series) -> pd.Series:
    """Simple period returns ``P_t / P_{t-1} - 1`` from a date-indexed price Series.

    The first observation has no return and is dropped.
    """
    if not isinstance(prices, pd.Series):
        raise ReturnIndexValidationError(
            f"prices must be a Series; got {type(prices).__name__}."
        )
    ordered = prices.copy()
    ordered.index = normalize_dates(ordered.index)
    ordered = ordered.sort_index()
    return (ordered / ordered.shift(1) - 1).iloc[1:].rename("return")


def generate_synthetic_returns(
    start: str = "2015-01-02",
    end: str = "2015-12-31",
    seed: int = 42,
    mean: float = 0.0003,
    vol: float = 0.01,
    density: float = 1.0,
) -> pd.Series:
    """Generate deterministic synthetic daily returns.

    Parameters
    ----------
    start, end : str
        Date range boundaries (business days).
    seed : int
        Random seed for reproducibility.
    mean, vol : float
        Mean and standard deviation of the normal daily return.
    density : float
        Fraction of business days kept, in ``(0, 1]``.  Values below 1 give
        a sparse history with gaps between observations.

    Returns
    -------
    Series
        Returns indexed by date, ascending.
    """
    if not 0 < density <= 1:
        raise ValueError(f"density must be in (0, 1]; got {density}")
    rng = np.random.default_rng(seed)
    dates = pd.bdate_range(start=start, end=end, freq="B", name="date")
    values = rng.normal(mean, vol, size=len(dates))
    keep = rng.uniform(size=len(dates)) < density
    return pd.Series(values[keep], index=dates[keep], name="return")
