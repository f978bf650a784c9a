"""
Error classification for the forecasting core.

Data quality and calculation errors are recoverable by the caller (shrink a
window, extend a series, skip a metric). Configuration failures are not.
"""

from .data_quality import (
    DataQualityError,
    TemporalDataError,
    MalformedDataError,
    InsufficientDataError,
    EmptyComparisonError,
)
from .calculation import (
    CalculationError,
    DegenerateFitError,
    DivisionByZeroError,
)
from .system_failures import (
    SystemFailureError,
    ConfigurationError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "TemporalDataError",
    "MalformedDataError",
    "InsufficientDataError",
    "EmptyComparisonError",
    # Calculation Errors
    "CalculationError",
    "DegenerateFitError",
    "DivisionByZeroError",
    # System Failures
    "SystemFailureError",
    "ConfigurationError",
]
