"""Differenced autoregressive drift heuristic

This is the "ARIMA" model of the application. It is a mean of recent first
differences used as a constant per-step drift: no parameter estimation, no
moving-average term, no order selection.
"""

import random

from ..data.models import PriceInput, extract_prices
from ..errors import InsufficientDataError


def first_differences(series: PriceInput) -> list[float]:
    """
    Calculate first differences

    diff_i = price_i - price_{i-1}

    Args:
        series: Points (or prices) in chronological order

    Returns:
        len(series) - 1 differences
    """
    prices = extract_prices(series)
    return [prices[i] - prices[i - 1] for i in range(1, len(prices))]


def estimate_drift(series: PriceInput, p: int = 2) -> float:
    """
    Estimate per-step drift as the mean of the last `p` differences

    When the series has fewer than p differences, all of them are used.

    Args:
        series: Points (or prices) in chronological order
        p: Number of recent differences to average (default 2)

    Returns:
        Drift per step

    Raises:
        InsufficientDataError: If the series has fewer than 2 points
    """
    if p < 1:
        raise ValueError(f"p must be positive, got {p}")

    prices = extract_prices(series)
    if len(prices) < 2:
        raise InsufficientDataError(
            "Drift estimate requires at least 2 points",
            required_count=2,
            available_count=len(prices),
        )

    diffs = first_differences(prices)
    recent = diffs[-p:]
    return sum(recent) / len(recent)


def forecast_step(series: PriceInput, p: int, step_index: int,
                  rng: random.Random, noise: float = 0.01) -> float:
    """
    Project the price `step_index` days past the end of `series`

    price = last + drift * step_index * (1 + (U - 0.5) * noise)

    Args:
        series: Points (or prices) in chronological order
        p: Number of recent differences in the drift estimate
        step_index: Days ahead, starting at 1
        rng: Random source for the drift noise
        noise: Full width of the uniform noise on the drift term

    Returns:
        Projected price (not floored)
    """
    prices = extract_prices(series)
    drift = estimate_drift(prices, p)
    return prices[-1] + drift * step_index * (1 + (rng.random() - 0.5) * noise)
