"""Precomputed cumulative-return index over a sparse return history.

The index is built once: returns are sorted by date and chained into a
running product of ``(1 + r)`` starting from a growth factor of 1 before the
earliest observation.  A range query then needs two binary searches and at
most one division, instead of rescanning the history:

    growth(base, as_of) = factor[as_of] / factor[date before base] - 1

Query endpoints that fall between observations are snapped inwards: the base
moves forward to the next observed date, the as-of date moves back to the
last observed date.  The return realised *on* the effective base date is
part of the window.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

import numpy as np
import pandas as pd

from retindex.index.config import IndexConfig
from retindex.utils.dates import normalize_dates, to_calendar_date
from retindex.utils.validation import validate_returns


class ReturnIndex:
    """Cumulative growth factors keyed by calendar date.

    Parameters
    ----------
    returns : mapping or Series
        Date -> periodic fractional return.  May be empty and need not be
        sorted.
    config : IndexConfig, optional
        Query and validation settings.  Defaults to ``IndexConfig()``.

    Examples
    --------
    >>> idx = ReturnIndex.build({"2015-01-10": 0.10, "2015-02-10": 0.05})
    >>> round(idx.cumulative_return("2015-02-28", "2015-01-01"), 4)
    0.155
    """

    def __init__(
        self,
        returns: Mapping[Any, float] | pd.Series,
        config: IndexConfig | None = None,
    ) -> None:
        self._config = config or IndexConfig()
        clean = validate_returns(returns, drop_non_finite=self._config.drop_non_finite)
        self._dates = pd.DatetimeIndex(clean.index, name="date")
        # Sequential left-to-right product, same as chaining one date at a time.
        factors = np.cumprod(1.0 + clean.to_numpy(dtype="float64"))
        factors.flags.writeable = False
        self._factors = factors

    @classmethod
    def build(
        cls,
        returns: Mapping[Any, float] | pd.Series,
        config: IndexConfig | None = None,
    ) -> "ReturnIndex":
        """Build an index from an unordered date -> return mapping."""
        return cls(returns, config=config)

    # -- read-only accessors ------------------------------------------------

    @property
    def config(self) -> IndexConfig:
        return self._config

    @property
    def dates(self) -> pd.DatetimeIndex:
        """Observed dates, ascending."""
        return self._dates

    @property
    def factors(self) -> np.ndarray:
        """Cumulative growth factors aligned with :attr:`dates` (read-only)."""
        return self._factors

    @property
    def is_empty(self) -> bool:
        return len(self._dates) == 0

    @property
    def first_date(self) -> pd.Timestamp | None:
        return None if self.is_empty else self._dates[0]

    @property
    def last_date(self) -> pd.Timestamp | None:
        return None if self.is_empty else self._dates[-1]

    def __len__(self) -> int:
        return len(self._dates)

    def __contains__(self, date: Any) -> bool:
        try:
            return to_calendar_date(date) in self._dates
        except ValueError:
            return False

    def __repr__(self) -> str:
        if self.is_empty:
            return "ReturnIndex(empty)"
        return (
            f"ReturnIndex({len(self)} dates, "
            f"{self.first_date.date()}..{self.last_date.date()})"
        )

    def factor(self, date: Any) -> float:
        """Cumulative growth factor at an observed *date*.

        Raises :class:`KeyError` if *date* is not an observed date.
        """
        ts = to_calendar_date(date)
        if ts not in self._dates:
            raise KeyError(f"no return observed on {ts.date()}")
        return float(self._factors[self._dates.get_loc(ts)])

    def to_series(self) -> pd.Series:
        """Copy of the index as a Series of cumulative factors."""
        return pd.Series(
            self._factors.copy(), index=self._dates, name="cumulative_factor"
        )

    # -- queries ------------------------------------------------------------

    def _window_positions(self, as_of: Any, base: Any) -> tuple[int, int] | None:
        as_of_ts = to_calendar_date(as_of)
        base_ts = to_calendar_date(base)
        if as_of_ts < base_ts or self.is_empty:
            return None
        # First observed date >= base: base itself when observed, else the next one.
        start = int(self._dates.searchsorted(base_ts, side="left"))
        # Last observed date <= as_of.
        end = int(self._dates.searchsorted(as_of_ts, side="right")) - 1
        if start >= len(self._dates) or end < 0:
            return None
        if start > end:
            # Both endpoints sit between the same two observations.
            return None
        return start, end

    def resolve_window(
        self, as_of: Any, base: Any
    ) -> tuple[pd.Timestamp, pd.Timestamp] | None:
        """Effective ``(base, as_of)`` dates after snapping, or None.

        None means the query has no observed returns in range: *as_of* is
        before *base*, *base* is after the last observation, *as_of* is
        before the first observation, or no observation falls between them.
        """
        positions = self._window_positions(as_of, base)
        if positions is None:
            return None
        start, end = positions
        return self._dates[start], self._dates[end]

    def cumulative_return(self, as_of: Any, base: Any) -> float:
        """Compounded return from *base* through *as_of*, inclusive.

        Parameters
        ----------
        as_of : date-like
            End of the window.  Snaps back to the last observed date on or
            before it.
        base : date-like
            Start of the window.  Snaps forward to the first observed date on
            or after it; that date's own return is included.

        Returns
        -------
        float
            Total fractional growth over the effective window, e.g. ``0.0834``
            for +8.34%.  Queries without data in range return
            ``config.no_data_value`` (``0.0`` by default).
        """
        positions = self._window_positions(as_of, base)
        if positions is None:
            return self._config.no_data_value
        start, end = positions
        growth = float(self._factors[end])
        if start > 0:
            prior = float(self._factors[start - 1])
            if prior == 0.0:
                return self._config.no_data_value
            growth = growth / prior
        return growth - 1.0

    def cumulative_returns(self, as_of_dates: Iterable[Any], base: Any) -> pd.Series:
        """:meth:`cumulative_return` for each of *as_of_dates* against one *base*.

        Returns a Series indexed by the normalized as-of dates.
        """
        dates = normalize_dates(as_of_dates)
        values = [self.cumulative_return(d, base) for d in dates]
        return pd.Series(values, index=dates, dtype="float64", name="cumulative_return")
