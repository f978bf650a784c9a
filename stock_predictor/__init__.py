"""
Stock Price Predictor - Time Series Forecasting Core

Synthesizes daily price/volume series, forecasts them with simple
smoothing, trend and drift models, and scores forecasts against held-out
data. Presentation is left to the caller.
"""

from .data.generator import generate
from .forecasting.engine import forecast
from .forecasting.models import ModelKind
from .metrics.accuracy import evaluate
from .predictor import StockPredictor

__version__ = "0.1.0"
__author__ = "Stock Predictor Team"

__all__ = ["generate", "forecast", "evaluate", "ModelKind", "StockPredictor"]
