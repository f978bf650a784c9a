"""
Logging configuration and utilities for the forecasting core.
"""
from .config import configure_logging, get_forecast_logger, get_logger

__all__ = ["configure_logging", "get_logger", "get_forecast_logger"]
