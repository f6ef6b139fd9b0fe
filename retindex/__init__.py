"""retindex: cumulative returns over arbitrary date ranges from a sparse return history."""

from retindex.index import IndexConfig, ReturnIndex
from retindex.utils.validation import ReturnIndexValidationError

__all__ = ["IndexConfig", "ReturnIndex", "ReturnIndexValidationError"]
