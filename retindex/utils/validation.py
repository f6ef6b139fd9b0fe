"""Input validation helpers.

Structural problems with a return history (not a mapping, keys that are not
dates, values that are not numbers) raise :class:`ReturnIndexValidationError`
early, before any index is built.  Problems the index can work around are
reported through :mod:`warnings` and repaired:

- non-finite returns are dropped,
- keys that collapse onto the same calendar day keep the later entry,
- returns of ``-100%`` or worse are kept but flagged, since every later
  cumulative factor becomes zero or negative.
"""

from __future__ import annotations

import numbers
import warnings
from typing import Any, Mapping

import numpy as np
import pandas as pd


class ReturnIndexValidationError(ValueError):
    """Raised when input data violates expected invariants."""


def _coerce_return(date: pd.Timestamp, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, np.number)):
        raise ReturnIndexValidationError(
            f"return for {date.date()} must be a real number; "
            f"got {type(value).__name__}."
        )
    return float(value)


def validate_returns(
    returns: Mapping[Any, float] | pd.Series,
    drop_non_finite: bool = True,
) -> pd.Series:
    """Validate a periodic-return history and coerce it to a sorted Series.

    Parameters
    ----------
    returns : mapping or Series
        Date -> fractional return for that period (``0.05`` is +5%).
        Order does not matter.
    drop_non_finite : bool
        Drop NaN/infinite returns with a warning (default).  When False they
        raise instead.

    Returns
    -------
    Series
        ``float64`` returns indexed by calendar date (ascending, unique),
        named ``'return'``.

    Raises
    ------
    ReturnIndexValidationError
        On any structural violation.
    """
    # Imported here: dates.py depends on this module for the error type.
    from retindex.utils.dates import to_calendar_date

    if not hasattr(returns, "items"):
        raise ReturnIndexValidationError(
            f"returns must be a mapping of date -> return; "
            f"got {type(returns).__name__}."
        )

    dates: list[pd.Timestamp] = []
    values: list[float] = []
    for key, value in returns.items():
        date = to_calendar_date(key)
        dates.append(date)
        values.append(_coerce_return(date, value))

    series = pd.Series(
        values,
        index=pd.DatetimeIndex(dates, name="date"),
        dtype="float64",
        name="return",
    )

    finite = np.isfinite(series.values)
    if not finite.all():
        bad = [str(d.date()) for d in series.index[~finite]]
        if not drop_non_finite:
            raise ReturnIndexValidationError(
                f"returns contain {len(bad)} non-finite value(s): {bad}."
            )
        warnings.warn(
            f"Data integrity: dropped {len(bad)} non-finite return(s) on {bad}"
        )
        series = series[finite]

    dup = series.index.duplicated(keep="last")
    if dup.any():
        days = sorted({str(d.date()) for d in series.index[dup]})
        warnings.warn(
            f"Data integrity: {int(dup.sum())} return(s) share a calendar day "
            f"with a later entry and were discarded: {days}"
        )
        series = series[~dup]

    total_loss = series <= -1
    if total_loss.any():
        days = [str(d.date()) for d in series.index[total_loss.values]]
        warnings.warn(
            f"Data integrity: return(s) of -100% or worse on {days}; "
            "cumulative factors from those dates on are non-positive"
        )

    return series.sort_index()
