"""Utility helpers: calendar dates, validation."""

from retindex.utils.validation import ReturnIndexValidationError, validate_returns
from retindex.utils.dates import to_calendar_date, normalize_dates

__all__ = [
    "ReturnIndexValidationError", "validate_returns",
    "to_calendar_date", "normalize_dates",
]
