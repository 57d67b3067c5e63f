"""
Error classifications for the analytics core.

Every error is local to one symbol or one computation. Batch callers catch
``AnalyticsError`` per symbol and drop the failed symbol from aggregation.
"""

from typing import Any, Dict, Optional


class AnalyticsError(Exception):
    """Base class for errors raised by the analytics core."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}


class InsufficientDataError(AnalyticsError):
    """Requested lookback window exceeds the available history."""

    def __init__(self, message: str, required_count: Optional[int] = None,
                 available_count: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.required_count = required_count
        self.available_count = available_count


class DegenerateInputError(AnalyticsError):
    """Arithmetic with no defined value, e.g. a zero price denominator."""

    def __init__(self, message: str, index: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.index = index


class AlignmentError(AnalyticsError):
    """Return series or weight vectors whose dimensions do not line up."""

    def __init__(self, message: str, expected: Optional[int] = None,
                 actual: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.expected = expected
        self.actual = actual
