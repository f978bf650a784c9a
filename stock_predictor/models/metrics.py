"""Data models for forecast results"""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..data.models import ForecastPoint, PricePoint
from ..utils.time import format_date


@dataclass(frozen=True)
class ForecastMetrics:
    """Accuracy of a forecast against held-out prices"""
    mae: float
    rmse: float
    mape: float         # Percentage

    def rounded(self, digits: int = 2) -> "ForecastMetrics":
        """Copy with every metric rounded for display"""
        return ForecastMetrics(
            mae=round(self.mae, digits),
            rmse=round(self.rmse, digits),
            mape=round(self.mape, digits),
        )

    def to_dict(self) -> dict[str, float]:
        return {"mae": self.mae, "rmse": self.rmse, "mape": self.mape}


@dataclass(frozen=True)
class PredictionSummary:
    """Current price against the last predicted price"""
    current_price: float
    predicted_price: float
    change: float
    change_pct: float

    @property
    def is_gain(self) -> bool:
        return self.change >= 0


@dataclass(frozen=True)
class ChartPoint:
    """One row of the combined history/forecast view; exactly one price is set"""
    date: date
    actual_price: Optional[float] = None
    predicted_price: Optional[float] = None

    @property
    def is_prediction(self) -> bool:
        return self.predicted_price is not None

    def to_dict(self) -> dict:
        return {
            "date": format_date(self.date),
            "actualPrice": self.actual_price,
            "predictedPrice": self.predicted_price,
        }


@dataclass(frozen=True)
class PredictionResult:
    """Everything one predictor run produces for a (symbol, model, horizon) request"""
    symbol: str
    model: str
    horizon_days: int
    history: tuple[PricePoint, ...]
    forecast: tuple[ForecastPoint, ...]
    summary: PredictionSummary
    chart: tuple[ChartPoint, ...]
    backtest: Optional[ForecastMetrics] = None

    @property
    def has_backtest(self) -> bool:
        return self.backtest is not None
