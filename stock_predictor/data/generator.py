"""
Synthetic daily price/volume series.

Prices follow a uniform random walk with a deterministic drift and small
weekday effects. Every stochastic step draws from one injectable
random.Random so a seed reproduces a series exactly.
"""

import random
from datetime import date
from typing import Optional

import structlog

from ..config.defaults import DefaultConfig, GeneratorParams, SymbolParams, get_default_config
from ..utils.time import is_friday, is_monday, resolve_end_date, trailing_dates
from .models import PricePoint

logger = structlog.get_logger(__name__)


class SeriesGenerator:
    """Generates synthetic history for one symbol's parameters."""

    def __init__(self, symbol_params: SymbolParams,
                 generator_params: Optional[GeneratorParams] = None):
        self.symbol_params = symbol_params
        self.params = generator_params or GeneratorParams()

    @classmethod
    def for_symbol(cls, symbol: str, config: Optional[DefaultConfig] = None) -> "SeriesGenerator":
        """Build a generator from configuration, using built-in symbol parameters by default."""
        config = config or get_default_config(symbol)
        return cls(config.symbol, config.generator)

    @property
    def price_floor(self) -> float:
        return self.params.floor_ratio * self.symbol_params.start_price

    def next_price(self, price: float, day: date, rng: random.Random) -> float:
        """
        Advance the running price by one day.

        price += U(-0.5, 0.5) * volatility * price + drift * price,
        then the Monday/Friday factor for `day`.
        """
        random_change = (rng.random() - 0.5) * self.symbol_params.volatility * price
        trend_change = self.symbol_params.drift * price
        price += random_change + trend_change

        if is_monday(day):
            price *= self.params.monday_factor
        elif is_friday(day):
            price *= self.params.friday_factor

        return price

    def generate(self, days: int, rng: random.Random,
                 end_date: Optional[date] = None) -> tuple[PricePoint, ...]:
        """
        Generate `days` consecutive daily points ending on `end_date`.

        Args:
            days: Number of points, > 0
            rng: Random source for price shocks and volumes
            end_date: Last date of the series (default today)

        Returns:
            Points ordered oldest to newest
        """
        if days <= 0:
            raise ValueError(f"days must be positive, got {days}")

        dates = trailing_dates(resolve_end_date(end_date), days)
        price = self.symbol_params.start_price
        floor = self.price_floor
        points = []

        for day in dates:
            price = self.next_price(price, day, rng)
            volume = rng.randrange(self.params.volume_min, self.params.volume_max)
            # Only the emitted price is floored; the walk itself continues
            points.append(PricePoint(date=day, price=max(price, floor), volume=volume))

        return tuple(points)


def generate(
    symbol: str,
    days: int,
    seed: Optional[int] = None,
    *,
    rng: Optional[random.Random] = None,
    end_date: Optional[date] = None,
    config: Optional[DefaultConfig] = None,
) -> tuple[PricePoint, ...]:
    """
    Generate a synthetic series for `symbol`.

    Args:
        symbol: Ticker; unknown symbols use default parameters
        days: Number of daily points, > 0
        seed: Seed for a fresh random source (ignored when rng is given)
        rng: Explicit random source, shared with later forecast calls if desired
        end_date: Last date of the series (default today)
        config: Resolved configuration; built-in defaults for the symbol if omitted

    Returns:
        Points ordered oldest to newest
    """
    if rng is None:
        rng = random.Random(seed)

    generator = SeriesGenerator.for_symbol(symbol, config)
    series = generator.generate(days, rng, end_date)

    logger.debug(
        "Generated synthetic series",
        symbol=symbol,
        days=days,
        start=series[0].date.isoformat(),
        end=series[-1].date.isoformat(),
        last_price=round(series[-1].price, 4),
    )
    return series
