"""Shared test fixtures for retindex."""

from __future__ import annotations

from datetime import date

import pandas as pd
import pytest

from retindex import ReturnIndex
from retindex.data import generate_synthetic_returns


@pytest.fixture()
def scenario_returns() -> dict[date, float]:
    """Sparse 2015 history, deliberately given out of date order."""
    return {
        date(2015, 4, 15): -0.10,
        date(2015, 1, 10): 0.10,
        date(2015, 6, 10): -0.12,
        date(2015, 2, 10): 0.05,
        date(2015, 4, 10): 0.15,
    }


@pytest.fixture()
def scenario_index(scenario_returns) -> ReturnIndex:
    return ReturnIndex.build(scenario_returns)


@pytest.fixture()
def sparse_returns() -> pd.Series:
    """Deterministic sparse daily history (~40% of business days)."""
    return generate_synthetic_returns("2020-01-01", "2020-12-31", seed=7, density=0.4)
