"""
Forecast engine.

Resolves a model selector to a strategy, projects prices over the horizon,
floors every prediction relative to the last historical price, and dates the
results consecutively from the day after the history ends.
"""

import random
from typing import Optional, Union

import structlog

from ..config.defaults import ModelParams
from ..data.models import ForecastPoint, Series
from ..data.validators import validate_series
from ..logging.config import get_forecast_logger, log_model_selection
from ..utils.time import following_dates
from .models import ModelKind
from .strategies import ForecastStrategy, create_strategy

logger = structlog.get_logger(__name__)
forecast_logger = get_forecast_logger(__name__)


class ForecastEngine:
    """
    Dispatches forecasts to one strategy per ModelKind.

    The engine holds only immutable model parameters; all randomness comes
    from the source passed to forecast().
    """

    def __init__(self, params: Optional[ModelParams] = None) -> None:
        self.params = params or ModelParams()

    def strategy_for(self, model: Union[ModelKind, str]) -> ForecastStrategy:
        """Build the strategy serving `model`; unknown selectors get the naive strategy."""
        return create_strategy(ModelKind.parse(model), self.params)

    def forecast(
        self,
        series: Series,
        model: Union[ModelKind, str],
        horizon_days: int,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> list[ForecastPoint]:
        """
        Forecast `horizon_days` prices after the end of `series`.

        Args:
            series: Historical points, oldest to newest
            model: ModelKind or selector string
            horizon_days: Number of future days, > 0
            rng: Random source for forecast noise
            seed: Seed for a fresh random source when rng is not given

        Returns:
            horizon_days ForecastPoints on consecutive days

        Raises:
            ValueError: If horizon_days is not positive
            InsufficientDataError: If the series is too short for the model
            DegenerateFitError: If a linear fit has fewer than 2 points
        """
        if horizon_days <= 0:
            raise ValueError(f"horizon_days must be positive, got {horizon_days}")

        validate_series(series)

        if rng is None:
            rng = random.Random(seed)

        kind = ModelKind.parse(model)
        requested = model.value if isinstance(model, ModelKind) else str(model)
        log_model_selection(forecast_logger, requested, kind.value, horizon_days, len(series))

        prices = [point.price for point in series]
        last_price = prices[-1]
        floor = self.params.forecast_floor_ratio * last_price

        raw = self.strategy_for(kind).project(prices, horizon_days, rng)
        dates = following_dates(series[-1].date, horizon_days)

        points = [
            ForecastPoint(date=day, price=max(price, floor))
            for day, price in zip(dates, raw)
        ]

        logger.debug(
            "Forecast generated",
            model=kind.value,
            horizon_days=horizon_days,
            last_price=round(last_price, 4),
            final_price=round(points[-1].price, 4),
        )
        return points


def forecast(
    series: Series,
    model: Union[ModelKind, str],
    horizon_days: int,
    seed: Optional[int] = None,
    *,
    rng: Optional[random.Random] = None,
    params: Optional[ModelParams] = None,
) -> list[ForecastPoint]:
    """
    Forecast with default (or given) model parameters.

    See ForecastEngine.forecast.
    """
    return ForecastEngine(params).forecast(series, model, horizon_days, rng=rng, seed=seed)
