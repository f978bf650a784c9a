"""
Forecast model selection and dispatch.

One strategy per ModelKind; unknown selectors resolve to the naive
last-price strategy rather than an error.
"""

from .engine import ForecastEngine, forecast
from .models import ModelKind
from .strategies import (
    DifferencedARStrategy,
    EMAStrategy,
    ForecastStrategy,
    LinearTrendStrategy,
    NaiveStrategy,
    SMAStrategy,
)

__all__ = [
    "ForecastEngine",
    "forecast",
    "ModelKind",
    "ForecastStrategy",
    "SMAStrategy",
    "EMAStrategy",
    "LinearTrendStrategy",
    "DifferencedARStrategy",
    "NaiveStrategy",
]
