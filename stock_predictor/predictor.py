"""
Main prediction pipeline coordinator.

Runs the full request the presentation layer makes for one symbol, model
and horizon: generate history, forecast forward, backtest the same model on
a held-out tail, and derive the summary and chart view.
"""

import random
from datetime import date
from pathlib import Path
from typing import Any, Optional, Sequence, Union

import structlog

from .config.defaults import DefaultConfig
from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .data.generator import SeriesGenerator
from .data.models import ForecastPoint, PricePoint, Series
from .errors import CalculationError, ConfigurationError, DataQualityError
from .forecasting.engine import ForecastEngine
from .forecasting.models import ModelKind
from .logging.config import get_forecast_logger
from .metrics.accuracy import evaluate
from .models.metrics import ChartPoint, ForecastMetrics, PredictionResult, PredictionSummary

logger = structlog.get_logger(__name__)
forecast_logger = get_forecast_logger(__name__)


def summarize(history: Series, forecast: Sequence[ForecastPoint]) -> PredictionSummary:
    """
    Compare the last historical price with the last predicted price.

    Args:
        history: Non-empty historical series
        forecast: Non-empty forecast

    Returns:
        PredictionSummary with absolute and percentage change
    """
    current_price = history[-1].price
    predicted_price = forecast[-1].price
    change = predicted_price - current_price
    return PredictionSummary(
        current_price=current_price,
        predicted_price=predicted_price,
        change=change,
        change_pct=change / current_price * 100.0,
    )


def build_chart_points(history: Series, forecast: Sequence[ForecastPoint],
                       window: int = 90) -> tuple[ChartPoint, ...]:
    """
    Combine the last `window` historical points with the forecast.

    Historical rows carry only actual_price; forecast rows only predicted_price.
    """
    recent = history[-window:] if window > 0 else ()
    rows = [ChartPoint(date=p.date, actual_price=p.price) for p in recent]
    rows.extend(ChartPoint(date=p.date, predicted_price=p.price) for p in forecast)
    return tuple(rows)


class StockPredictor:
    """
    Coordinator for the forecasting pipeline.

    Manages the request pipeline:
    Configuration → Series Generation → Forecast → Backtest → Summary
    """

    def __init__(self, config_dir: Optional[Union[str, Path]] = None,
                 seed: Optional[int] = None) -> None:
        """Initialize the predictor; `seed` makes every run reproducible."""
        self.logger = logger
        self.config_loader = ConfigLoader.create(Path(config_dir) if config_dir else None)
        self.seed = seed

    def load_config(self, symbol: str,
                    overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """
        Merge and validate configuration for `symbol`.

        Raises:
            ConfigurationError: If the merged configuration is invalid
        """
        merged = self.config_loader.merge_config(symbol, overrides)
        errors = ConfigValidator.validate_config(merged)
        if errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in errors]
            self.logger.error(
                "Configuration validation failed",
                symbol=symbol,
                errors=error_msgs
            )
            raise ConfigurationError(
                f"Invalid configuration for {symbol}: {'; '.join(error_msgs)}",
                errors=errors,
                context={"symbol": symbol},
            )
        return ConfigLoader.from_dict(merged)

    def backtest(self, history: Series, model: Union[ModelKind, str],
                 config: DefaultConfig, rng: random.Random) -> Optional[ForecastMetrics]:
        """
        Forecast the held-out tail from the rest of the history and score it.

        Returns None when the history is too short or the model cannot fit
        the truncated history.
        """
        holdout = config.evaluation.holdout_days
        if len(history) <= holdout:
            self.logger.warning(
                "History too short for backtest",
                history_length=len(history),
                holdout_days=holdout
            )
            return None

        train, test = history[:-holdout], history[-holdout:]
        engine = ForecastEngine(config.models)

        try:
            predicted = engine.forecast(train, model, holdout, rng=rng)
            return evaluate(test, predicted)
        except (DataQualityError, CalculationError) as e:
            self.logger.warning(
                "Backtest skipped",
                model=ModelKind.parse(model).value,
                error=str(e),
                error_type=type(e).__name__
            )
            return None

    def run(
        self,
        symbol: str,
        model: Union[ModelKind, str] = ModelKind.SMA,
        horizon_days: int = 30,
        overrides: Optional[dict[str, Any]] = None,
        rng: Optional[random.Random] = None,
        end_date: Optional[date] = None,
    ) -> PredictionResult:
        """
        Run the full pipeline for one request.

        Args:
            symbol: Ticker; unknown symbols use default parameters
            model: ModelKind or selector string; unknown selectors use NAIVE
            horizon_days: Days to forecast, > 0
            overrides: Per-call configuration overrides
            rng: Random source; a fresh one from the predictor seed if omitted
            end_date: Last historical date (default today)

        Returns:
            PredictionResult for the presentation layer
        """
        if horizon_days <= 0:
            raise ValueError(f"horizon_days must be positive, got {horizon_days}")

        config = self.load_config(symbol, overrides)
        kind = ModelKind.parse(model)

        if rng is None:
            rng = random.Random(self.seed)

        generator = SeriesGenerator(config.symbol, config.generator)
        history: tuple[PricePoint, ...] = generator.generate(
            config.generator.history_days, rng, end_date
        )

        engine = ForecastEngine(config.models)
        predictions = tuple(engine.forecast(history, kind, horizon_days, rng=rng))
        backtest = self.backtest(history, kind, config, rng)

        result = PredictionResult(
            symbol=symbol.upper(),
            model=kind.value,
            horizon_days=horizon_days,
            history=history,
            forecast=predictions,
            summary=summarize(history, predictions),
            chart=build_chart_points(history, predictions, config.chart.history_window),
            backtest=backtest,
        )

        forecast_logger.info(
            "Prediction completed",
            symbol=result.symbol,
            model=result.model,
            horizon_days=horizon_days,
            current_price=round(result.summary.current_price, 2),
            predicted_price=round(result.summary.predicted_price, 2),
            mape=round(backtest.mape, 2) if backtest else None
        )
        return result
