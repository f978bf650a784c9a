"""
Calculation error classifications.

Raised where a formula would otherwise divide by zero and produce NaN or
infinity.
"""

from typing import Optional, Dict, Any


class CalculationError(Exception):
    """Base class for numerically undefined calculations."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class DegenerateFitError(CalculationError):
    """Least squares slope is undefined (fewer than two points)."""

    def __init__(self, message: str, point_count: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.point_count = point_count


class DivisionByZeroError(CalculationError):
    """A metric denominator is exactly zero."""

    def __init__(self, message: str, metric_name: Optional[str] = None,
                 index: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.metric_name = metric_name
        self.index = index
