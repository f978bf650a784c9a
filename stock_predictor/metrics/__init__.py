"""Forecast model calculations and accuracy metrics"""

from .accuracy import AccuracyEvaluator, evaluate
from .differencing import estimate_drift, first_differences, forecast_step
from .regression import LinearFit, fit_linear_trend, predict_linear
from .smoothing import ema, sma

__all__ = [
    "AccuracyEvaluator",
    "evaluate",
    "sma",
    "ema",
    "LinearFit",
    "fit_linear_trend",
    "predict_linear",
    "first_differences",
    "estimate_drift",
    "forecast_step",
]
