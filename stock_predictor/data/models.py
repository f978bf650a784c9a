"""
Canonical data models for daily price series.

Points are frozen dataclasses; a series is an ordered sequence of points
with strictly increasing dates.
"""

from dataclasses import dataclass
from datetime import date
from typing import Sequence, Union

from ..utils.time import format_date


@dataclass(frozen=True)
class PricePoint:
    """One day of (synthetic) market history."""
    date: date          # Calendar day
    price: float        # Closing price, > 0
    volume: int         # Shares traded, >= 0

    def to_dict(self) -> dict:
        return {"date": format_date(self.date), "price": self.price, "volume": self.volume}


@dataclass(frozen=True)
class ForecastPoint:
    """One predicted day, always after the last historical date."""
    date: date
    price: float
    is_prediction: bool = True

    def to_dict(self) -> dict:
        return {
            "date": format_date(self.date),
            "price": self.price,
            "isPrediction": self.is_prediction,
        }


Series = Sequence[PricePoint]

# Anything a model or evaluator can read prices from
PriceInput = Union[Sequence[PricePoint], Sequence[ForecastPoint], Sequence[float]]


def extract_prices(points: PriceInput) -> list[float]:
    """
    Read prices from points or pass plain numbers through.

    Args:
        points: Sequence of PricePoint/ForecastPoint or floats

    Returns:
        Prices as floats, in input order
    """
    return [float(p.price) if hasattr(p, "price") else float(p) for p in points]
