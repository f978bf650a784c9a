"""Ordinary least squares trend line over index positions"""

from dataclasses import dataclass

from ..data.models import PriceInput, extract_prices
from ..errors import DegenerateFitError


@dataclass(frozen=True)
class LinearFit:
    """Fitted line price = slope * x + intercept, x = 0..n-1"""
    slope: float
    intercept: float

    def predict(self, x: float) -> float:
        return predict_linear(self.slope, self.intercept, x)

    def r_squared(self, series: PriceInput) -> float:
        """
        Coefficient of determination of this line against `series`

        A flat series has no variance to explain; 0.0 is returned.
        """
        prices = extract_prices(series)
        if not prices:
            return 0.0

        mean = sum(prices) / len(prices)
        ss_tot = sum((y - mean) ** 2 for y in prices)
        if ss_tot == 0:
            return 0.0

        ss_res = sum((y - self.predict(x)) ** 2 for x, y in enumerate(prices))
        return 1.0 - ss_res / ss_tot


def fit_linear_trend(series: PriceInput) -> LinearFit:
    """
    Fit a least squares line through (index, price) pairs

    slope = (n*Σxy - Σx*Σy) / (n*Σx² - (Σx)²)
    intercept = (Σy - slope*Σx) / n

    Args:
        series: Points (or prices) in chronological order

    Returns:
        LinearFit with slope and intercept

    Raises:
        DegenerateFitError: If the denominator is zero (fewer than 2 points)
    """
    prices = extract_prices(series)
    n = len(prices)

    sum_x = sum(range(n))
    sum_y = sum(prices)
    sum_xy = sum(x * y for x, y in enumerate(prices))
    sum_xx = sum(x * x for x in range(n))

    denominator = n * sum_xx - sum_x * sum_x
    if denominator == 0:
        raise DegenerateFitError(
            f"Cannot fit a line through {n} point(s)",
            point_count=n,
        )

    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n

    return LinearFit(slope=slope, intercept=intercept)


def predict_linear(slope: float, intercept: float, x: float) -> float:
    """price = slope * x + intercept"""
    return slope * x + intercept
