"""Cumulative-return index and its configuration."""

from retindex.index.config import IndexConfig
from retindex.index.return_index import ReturnIndex

__all__ = ["IndexConfig", "ReturnIndex"]
