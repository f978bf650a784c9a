"""
Forecast strategies, one per ModelKind.

Each strategy turns a price history into raw per-day predictions. Flooring
and dating are applied by the engine.
"""

import random
from abc import ABC, abstractmethod
from typing import Optional

from ..config.defaults import ModelParams
from ..metrics.differencing import estimate_drift
from ..metrics.regression import fit_linear_trend
from ..metrics.smoothing import ema, sma
from .models import ModelKind


def jitter(rng: random.Random, width: float) -> float:
    """Multiplicative factor 1 + U(-0.5, 0.5) * width."""
    return 1 + (rng.random() - 0.5) * width


class ForecastStrategy(ABC):
    """Base class for forecast strategies."""

    kind: ModelKind

    def __init__(self, params: Optional[ModelParams] = None):
        self.params = params or ModelParams()

    @abstractmethod
    def project(self, prices: list[float], horizon_days: int,
                rng: random.Random) -> list[float]:
        """
        Predict one price per future day.

        Args:
            prices: Historical prices, oldest to newest, non-empty
            horizon_days: Number of days to predict
            rng: Random source for forecast noise

        Returns:
            horizon_days raw predictions
        """


class SMAStrategy(ForecastStrategy):
    """Last SMA of the trailing window, jittered per day."""

    kind = ModelKind.SMA

    def project(self, prices, horizon_days, rng):
        window = self.params.sma_window
        anchor = sma(prices[-window:], window)[-1]
        return [anchor * jitter(rng, self.params.jitter_pct) for _ in range(horizon_days)]


class EMAStrategy(ForecastStrategy):
    """Last EMA of the trailing window, jittered per day."""

    kind = ModelKind.EMA

    def project(self, prices, horizon_days, rng):
        period = self.params.ema_period
        anchor = ema(prices[-period:], period)[-1]
        return [anchor * jitter(rng, self.params.jitter_pct) for _ in range(horizon_days)]


class LinearTrendStrategy(ForecastStrategy):
    """Least squares line over the trailing window, extrapolated without noise."""

    kind = ModelKind.LINEAR_REGRESSION

    def project(self, prices, horizon_days, rng):
        window = prices[-self.params.linear_lookback:]
        fit = fit_linear_trend(window)
        last_x = len(window) - 1
        return [fit.predict(last_x + step) for step in range(1, horizon_days + 1)]


class DifferencedARStrategy(ForecastStrategy):
    """Last price plus a drift from recent differences, with drift noise per day."""

    kind = ModelKind.DIFFERENCED_AR

    def project(self, prices, horizon_days, rng):
        drift = estimate_drift(prices[-self.params.ar_lookback:], self.params.ar_order)
        last_price = prices[-1]
        return [
            last_price + drift * step * jitter(rng, self.params.ar_noise_pct)
            for step in range(1, horizon_days + 1)
        ]


class NaiveStrategy(ForecastStrategy):
    """Last price, jittered per day."""

    kind = ModelKind.NAIVE

    def project(self, prices, horizon_days, rng):
        last_price = prices[-1]
        return [last_price * jitter(rng, self.params.jitter_pct) for _ in range(horizon_days)]


STRATEGIES: dict[ModelKind, type[ForecastStrategy]] = {
    ModelKind.SMA: SMAStrategy,
    ModelKind.EMA: EMAStrategy,
    ModelKind.LINEAR_REGRESSION: LinearTrendStrategy,
    ModelKind.DIFFERENCED_AR: DifferencedARStrategy,
    ModelKind.NAIVE: NaiveStrategy,
}


def create_strategy(kind: ModelKind, params: Optional[ModelParams] = None) -> ForecastStrategy:
    """Instantiate the strategy registered for `kind`."""
    return STRATEGIES.get(kind, NaiveStrategy)(params)
