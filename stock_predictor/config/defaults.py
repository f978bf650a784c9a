"""Default configuration parameters for the forecasting core."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SymbolParams:
    """Random-walk parameters for one ticker symbol."""
    start_price: float = 100.0                       # Price on the first generated day
    volatility: float = 0.02                         # Width of the uniform daily shock
    drift: float = 0.0003                            # Deterministic daily trend fraction


# Built-in symbols; anything else falls back to SymbolParams()
SYMBOL_PARAMS: dict[str, SymbolParams] = {
    "AAPL": SymbolParams(start_price=150.0, volatility=0.02, drift=0.0002),
    "GOOGL": SymbolParams(start_price=2500.0, volatility=0.02, drift=0.0001),
    "TSLA": SymbolParams(start_price=800.0, volatility=0.03, drift=0.0003),
}


@dataclass(frozen=True)
class GeneratorParams:
    """Synthetic series generation parameters."""
    history_days: int = 365
    volume_min: int = 500_000                        # Inclusive
    volume_max: int = 1_500_000                      # Exclusive
    floor_ratio: float = 0.5                         # Emitted price >= floor_ratio * start_price
    monday_factor: float = 0.999                     # Monday effect
    friday_factor: float = 1.001                     # Friday effect


@dataclass(frozen=True)
class ModelParams:
    """Forecast model parameters."""
    sma_window: int = 20
    ema_period: int = 20
    linear_lookback: int = 60
    ar_lookback: int = 30
    ar_order: int = 2                                # Differences averaged into the drift
    jitter_pct: float = 0.02                         # Full width of SMA/EMA/naive jitter
    ar_noise_pct: float = 0.01                       # Full width of AR drift noise
    forecast_floor_ratio: float = 0.8                # Prediction >= ratio * last price


@dataclass(frozen=True)
class EvaluationParams:
    """Backtest parameters."""
    holdout_days: int = 30


@dataclass(frozen=True)
class ChartParams:
    """Combined history/forecast view parameters."""
    history_window: int = 90


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    generator: GeneratorParams
    models: ModelParams
    evaluation: EvaluationParams
    chart: ChartParams
    symbol: SymbolParams


def get_symbol_params(symbol: str) -> SymbolParams:
    """Look up built-in parameters for a symbol, case-insensitively."""
    return SYMBOL_PARAMS.get(symbol.upper(), SymbolParams())


def get_default_config(symbol: str = "") -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        generator=GeneratorParams(),
        models=ModelParams(),
        evaluation=EvaluationParams(),
        chart=ChartParams(),
        symbol=get_symbol_params(symbol),
    )
