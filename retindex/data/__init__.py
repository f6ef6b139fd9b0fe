"""Return-history loaders."""

from retindex.data.loaders import (
    read_returns_csv,
    returns_from_prices,
    generate_synthetic_returns,
)

__all__ = ["read_returns_csv", "returns_from_prices", "generate_synthetic_returns"]
