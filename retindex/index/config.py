"""Return-index configuration dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

NO_DATA_POLICIES = ("zero", "nan")


@dataclass(frozen=True)
class IndexConfig:
    """Immutable configuration for a :class:`~retindex.index.ReturnIndex`.

    Parameters
    ----------
    no_data : str
        Result of a query whose effective window holds no observed returns
        (as-of before base, base after all data, as-of before all data,
        empty history).  ``'zero'`` returns ``0.0``, which reads the same as
        a flat period.  ``'nan'`` returns ``NaN`` so callers can tell the
        two apart.
    drop_non_finite : bool
        Drop NaN/infinite returns at construction with a warning instead of
        raising.
    """

    no_data: Literal["zero", "nan"] = "zero"
    drop_non_finite: bool = True

    def __post_init__(self) -> None:
        if self.no_data not in NO_DATA_POLICIES:
            raise ValueError(f"Unknown no-data policy: {self.no_data!r}")

    @property
    def no_data_value(self) -> float:
        return 0.0 if self.no_data == "zero" else float("nan")
