"""MAE, RMSE and MAPE of a forecast against actual prices"""

import math
from typing import Optional

import structlog

from ..data.models import PriceInput, extract_prices
from ..errors import DivisionByZeroError, EmptyComparisonError
from ..logging.config import log_evaluation
from ..models.metrics import ForecastMetrics

logger = structlog.get_logger(__name__)


def align(actual: PriceInput, predicted: PriceInput) -> tuple[list[float], list[float]]:
    """
    Pair the last n actual prices with the first n predicted prices

    n = min(len(actual), len(predicted)). Alignment is positional, not by date.

    Args:
        actual: Held-out points (or prices)
        predicted: Forecast points (or prices)

    Returns:
        (actual_prices, predicted_prices), both of length n
    """
    actual_prices = extract_prices(actual)
    predicted_prices = extract_prices(predicted)
    n = min(len(actual_prices), len(predicted_prices))
    if n == 0:
        return [], []
    return actual_prices[-n:], predicted_prices[:n]


def evaluate(actual: PriceInput, predicted: PriceInput) -> ForecastMetrics:
    """
    Score a forecast against actual prices

    MAE  = mean(|a - p|)
    RMSE = sqrt(mean((a - p)^2))
    MAPE = mean(|(a - p) / a|) * 100

    Args:
        actual: Held-out points (or prices)
        predicted: Forecast points (or prices)

    Returns:
        ForecastMetrics with unrounded values

    Raises:
        EmptyComparisonError: If there is nothing to compare
        DivisionByZeroError: If an aligned actual price is exactly zero
    """
    actual_prices, predicted_prices = align(actual, predicted)
    n = len(actual_prices)

    if n == 0:
        raise EmptyComparisonError(
            "No overlapping points to evaluate",
            actual_count=len(actual),
            predicted_count=len(predicted),
        )

    for index, value in enumerate(actual_prices):
        if value == 0:
            raise DivisionByZeroError(
                f"Actual price at aligned index {index} is zero; MAPE is undefined",
                metric_name="mape",
                index=index,
            )

    errors = [a - p for a, p in zip(actual_prices, predicted_prices)]

    mae = sum(abs(e) for e in errors) / n
    rmse = math.sqrt(sum(e * e for e in errors) / n)
    mape = sum(abs(e / a) for e, a in zip(errors, actual_prices)) / n * 100.0

    metrics = ForecastMetrics(mae=mae, rmse=rmse, mape=mape)
    log_evaluation(logger, n, metrics.to_dict())
    return metrics


class AccuracyEvaluator:
    """Evaluator that can round metrics for display"""

    def __init__(self, digits: Optional[int] = None):
        self.digits = digits

    def evaluate(self, actual: PriceInput, predicted: PriceInput) -> ForecastMetrics:
        metrics = evaluate(actual, predicted)
        if self.digits is None:
            return metrics
        return metrics.rounded(self.digits)
