"""Calendar-date normalization.

The index works at calendar-day granularity: every date that enters it, as a
history key or as a query endpoint, is converted to a midnight
:class:`pandas.Timestamp` without time zone.  Time-zone-aware inputs keep
their wall-clock date.
"""

from __future__ import annotations

from typing import Any, Iterable

import pandas as pd

from retindex.utils.validation import ReturnIndexValidationError


def to_calendar_date(value: Any) -> pd.Timestamp:
    """Convert *value* to a midnight, tz-naive :class:`~pandas.Timestamp`.

    Parameters
    ----------
    value : date, datetime, str, numpy.datetime64 or Timestamp
        Anything :class:`pandas.Timestamp` can parse.

    Raises
    ------
    ReturnIndexValidationError
        If *value* is missing (``None``/``NaT``) or not a date.
    """
    if value is None:
        raise ReturnIndexValidationError("date must not be None.")
    try:
        ts = pd.Timestamp(value)
    except (TypeError, ValueError) as exc:
        raise ReturnIndexValidationError(
            f"cannot interpret {value!r} as a calendar date."
        ) from exc
    if pd.isna(ts):
        raise ReturnIndexValidationError(f"date is missing: {value!r}.")
    if ts.tzinfo is not None:
        ts = ts.tz_localize(None)
    return ts.normalize()


def normalize_dates(values: Iterable[Any]) -> pd.DatetimeIndex:
    """Element-wise :func:`to_calendar_date`, as a DatetimeIndex named ``date``."""
    return pd.DatetimeIndex([to_calendar_date(v) for v in values], name="date")
