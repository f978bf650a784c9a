"""Integration tests for the full prediction pipeline."""

import random
from datetime import timedelta

import pytest

import stock_predictor
from stock_predictor import ModelKind, StockPredictor, evaluate, forecast, generate


@pytest.mark.integration
class TestFullPipeline:
    """Integration tests for the public entry points."""

    def test_generate_forecast_evaluate(self, end_date) -> None:
        """Test the three entry points chained as the presentation layer does."""
        rng = random.Random(2024)
        history = generate("AAPL", 365, rng=rng, end_date=end_date)

        predictions = forecast(history, ModelKind.EMA, 30, rng=rng)
        assert predictions[0].date == end_date + timedelta(days=1)

        train, test = history[:-30], history[-30:]
        backtest = forecast(train, ModelKind.EMA, 30, rng=rng)
        metrics = evaluate(test, backtest)

        assert metrics.mae >= 0
        assert metrics.rmse >= metrics.mae
        assert 0 <= metrics.mape < 100

    def test_public_api(self) -> None:
        """Test the package exports."""
        assert set(stock_predictor.__all__) == {
            "generate", "forecast", "evaluate", "ModelKind", "StockPredictor"
        }

    def test_independent_sources_do_not_interfere(self, end_date) -> None:
        """Test interleaved calls with separate sources stay reproducible."""
        solo = generate("MSFT", 100, seed=1, end_date=end_date)

        rng_a, rng_b = random.Random(1), random.Random(2)
        interleaved = generate("MSFT", 100, rng=rng_a, end_date=end_date)
        generate("MSFT", 100, rng=rng_b, end_date=end_date)

        assert interleaved == solo

    def test_predictor_end_to_end(self, tmp_path, end_date) -> None:
        """Test a full run serializes for the presentation layer."""
        result = StockPredictor(config_dir=tmp_path, seed=3).run(
            "GOOGL", "arima", 60, end_date=end_date
        )
        rows = [row.to_dict() for row in result.chart]
        assert rows[-1]["predictedPrice"] == result.forecast[-1].price
        assert result.backtest.rounded(2).to_dict().keys() == {"mae", "rmse", "mape"}
