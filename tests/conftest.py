"""Pytest configuration and shared fixtures."""

import random
from datetime import date, timedelta
from typing import Callable, List, Sequence

import pytest

from stock_predictor.data.models import PricePoint


# A Wednesday, so weekday effects are easy to reason about
END_DATE = date(2024, 3, 13)


def make_series(prices: Sequence[float], start: date = date(2024, 1, 1),
                volume: int = 1_000_000) -> List[PricePoint]:
    """Build a daily series from a list of prices."""
    return [
        PricePoint(date=start + timedelta(days=i), price=float(price), volume=volume)
        for i, price in enumerate(prices)
    ]


@pytest.fixture
def end_date() -> date:
    """Fixed last date for generated series."""
    return END_DATE


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(42)


@pytest.fixture
def series_factory() -> Callable[..., List[PricePoint]]:
    """Factory building daily series from prices."""
    return make_series


@pytest.fixture
def sample_series() -> List[PricePoint]:
    """Five-point series used by the SMA scenario."""
    return make_series([100, 101, 99, 102, 103])


@pytest.fixture
def linear_series() -> List[PricePoint]:
    """Perfectly linear series: 100, 102, 104, ..."""
    return make_series([100 + 2 * i for i in range(60)])


@pytest.fixture
def long_series() -> List[PricePoint]:
    """Gently rising 120-point series with a small zig-zag."""
    return make_series([100 + 0.1 * i + (0.5 if i % 2 else -0.5) for i in range(120)])
