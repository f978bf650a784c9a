#!/usr/bin/env python3
"""
Basic Usage Example - Stock Price Predictor

This script demonstrates the forecasting core the way a dashboard would
call it. It shows how to:
- Run the full pipeline for a symbol, model and horizon
- Use the generate/forecast/evaluate entry points directly
- Read the summary and backtest metrics

Run: python examples/basic_usage.py
"""

import random

from stock_predictor import ModelKind, StockPredictor, evaluate, forecast, generate
from stock_predictor.logging import configure_logging
from stock_predictor.models.metrics import PredictionResult


def print_result(result: PredictionResult) -> None:
    """Print one pipeline result."""
    summary = result.summary
    sign = "+" if summary.is_gain else ""
    print(f"📈 {result.symbol} · {ModelKind.parse(result.model).description}")
    print(f"  Current price:   ${summary.current_price:.2f}")
    print(f"  Predicted price: ${summary.predicted_price:.2f} in {result.horizon_days} days")
    print(f"  Change:          {sign}${summary.change:.2f} ({summary.change_pct:.1f}%)")
    if result.backtest is not None:
        metrics = result.backtest.rounded(2)
        print(f"  Backtest:        MAE ${metrics.mae}  RMSE ${metrics.rmse}  MAPE {metrics.mape}%")
    else:
        print("  Backtest:        unavailable")
    print("-" * 50)


def main():
    """Main demo function."""
    configure_logging(level="WARNING")

    print("🚀 Stock Price Predictor - Basic Usage Demo")
    print("=" * 60)

    predictor = StockPredictor(seed=42)
    for symbol in ("AAPL", "GOOGL", "TSLA", "MSFT"):
        for model in ModelKind:
            print_result(predictor.run(symbol, model, horizon_days=30))

    print("\n🔧 Using the entry points directly")
    rng = random.Random(7)
    history = generate("AAPL", 365, rng=rng)
    train, test = history[:-30], history[-30:]
    predictions = forecast(train, "arima", 30, rng=rng)
    metrics = evaluate(test, predictions).rounded(2)
    print(f"  ARIMA-style backtest on AAPL: {metrics.to_dict()}")


if __name__ == "__main__":
    main()
