"""
Data quality error classifications for price series processing.

These exceptions describe problems with the series handed to a model or
evaluator: too few points, out-of-order dates, impossible values.
"""

from typing import Optional, Dict, Any


class DataQualityError(Exception):
    """Base class for data quality issues that the caller can recover from."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class TemporalDataError(DataQualityError):
    """Dates are duplicated or not strictly increasing."""

    def __init__(self, message: str, index: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.index = index


class MalformedDataError(DataQualityError):
    """A point exists but holds an impossible value."""

    def __init__(self, message: str, field: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value


class InsufficientDataError(DataQualityError):
    """Not enough historical data for calculations."""

    def __init__(self, message: str, required_count: Optional[int] = None,
                 available_count: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.required_count = required_count
        self.available_count = available_count


class EmptyComparisonError(DataQualityError):
    """No overlapping points between actual and predicted sequences."""

    def __init__(self, message: str, actual_count: int = 0,
                 predicted_count: int = 0, **kwargs):
        super().__init__(message, **kwargs)
        self.actual_count = actual_count
        self.predicted_count = predicted_count
