"""Forecast model kinds."""

from enum import Enum
from typing import Union


class ModelKind(str, Enum):
    """Closed set of forecast models; NAIVE is the default for anything unknown."""
    SMA = "sma"
    EMA = "ema"
    LINEAR_REGRESSION = "linear"
    DIFFERENCED_AR = "arima"
    NAIVE = "naive"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @classmethod
    def parse(cls, selector: Union["ModelKind", str, None]) -> "ModelKind":
        """
        Resolve a selector to a ModelKind.

        Accepts enum members, enum values, member names and a few aliases,
        case-insensitively. Anything else resolves to NAIVE.
        """
        if isinstance(selector, cls):
            return selector
        if not isinstance(selector, str):
            return cls.NAIVE

        key = selector.strip().lower()
        return _ALIASES.get(key, cls.NAIVE)


_DESCRIPTIONS = {
    ModelKind.SMA: "Simple Moving Average - Uses average of recent prices",
    ModelKind.EMA: "Exponential Moving Average - Gives more weight to recent prices",
    ModelKind.LINEAR_REGRESSION: "Linear Regression - Fits a straight line through price data",
    ModelKind.DIFFERENCED_AR: (
        "ARIMA Model - Mean of recent price differences projected as a constant drift"
    ),
    ModelKind.NAIVE: "Naive - Repeats the last price with small random noise",
}

_ALIASES = {kind.value: kind for kind in ModelKind}
_ALIASES.update({kind.name.lower(): kind for kind in ModelKind})
_ALIASES.update({
    "linear_regression": ModelKind.LINEAR_REGRESSION,
    "linearregression": ModelKind.LINEAR_REGRESSION,
    "differenced_ar": ModelKind.DIFFERENCED_AR,
    "differencedar": ModelKind.DIFFERENCED_AR,
})
