"""SMA (Simple Moving Average) and EMA (Exponential Moving Average) calculations"""

from ..data.models import PriceInput, extract_prices
from ..errors import InsufficientDataError


def sma(series: PriceInput, window: int = 20) -> list[float]:
    """
    Calculate the Simple Moving Average

    SMA_i = mean(price[i-window+1 .. i]) for i >= window-1

    Args:
        series: Points (or prices) in chronological order
        window: Averaging window (default 20)

    Returns:
        len(series) - window + 1 averages

    Raises:
        InsufficientDataError: If the series is shorter than the window
    """
    if window < 1:
        raise ValueError(f"window must be positive, got {window}")

    prices = extract_prices(series)
    if len(prices) < window:
        raise InsufficientDataError(
            f"SMA window {window} exceeds series length {len(prices)}",
            required_count=window,
            available_count=len(prices),
        )

    # Running sum keeps this O(n) regardless of window
    running = sum(prices[:window])
    averages = [running / window]
    for i in range(window, len(prices)):
        running += prices[i] - prices[i - window]
        averages.append(running / window)

    return averages


def ema(series: PriceInput, period: int = 20) -> list[float]:
    """
    Calculate the Exponential Moving Average

    k = 2 / (period + 1)
    EMA_0 = price_0
    EMA_i = price_i * k + EMA_{i-1} * (1 - k)

    Args:
        series: Points (or prices) in chronological order
        period: Smoothing period (default 20)

    Returns:
        One value per input point

    Raises:
        InsufficientDataError: If the series is empty
    """
    if period < 1:
        raise ValueError(f"period must be positive, got {period}")

    prices = extract_prices(series)
    if not prices:
        raise InsufficientDataError(
            "EMA requires at least one point",
            required_count=1,
            available_count=0,
        )

    multiplier = 2.0 / (period + 1)
    values = [prices[0]]
    for price in prices[1:]:
        values.append(price * multiplier + values[-1] * (1 - multiplier))

    return values
