"""Unit tests for configuration management."""

from pathlib import Path

import pytest

from stock_predictor.config.defaults import SymbolParams, get_default_config, get_symbol_params
from stock_predictor.config.loader import ConfigLoader
from stock_predictor.config.validation import ConfigValidator


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        """Test that default configuration can be created."""
        config = get_default_config()
        assert config.generator.history_days == 365
        assert config.models.sma_window == 20
        assert config.models.linear_lookback == 60
        assert config.models.ar_lookback == 30
        assert config.evaluation.holdout_days == 30
        assert config.chart.history_window == 90

    def test_builtin_symbols(self) -> None:
        """Test built-in symbol parameters."""
        assert get_symbol_params("AAPL") == SymbolParams(150.0, 0.02, 0.0002)
        assert get_symbol_params("googl") == SymbolParams(2500.0, 0.02, 0.0001)
        assert get_symbol_params("TSLA").volatility == 0.03

    def test_unknown_symbol_defaults(self) -> None:
        """Test unknown symbols use default parameters."""
        assert get_symbol_params("NOPE") == SymbolParams()
        assert get_default_config("NOPE").symbol.start_price == 100.0


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        """Test that ConfigLoader can be created."""
        loader = ConfigLoader.create()
        assert isinstance(loader.config_dir, Path)

    def test_merge_config_defaults_only(self, tmp_path: Path) -> None:
        """Test config merging with defaults only."""
        loader = ConfigLoader.create(tmp_path)
        config = loader.merge_config("AAPL")

        assert config["symbol"]["start_price"] == 150.0
        assert config["models"]["sma_window"] == 20

    def test_merge_config_with_overrides(self, tmp_path: Path) -> None:
        """Test config merging with per-call overrides."""
        loader = ConfigLoader.create(tmp_path)
        config = loader.merge_config("AAPL", {"models": {"sma_window": 10}})

        assert config["models"]["sma_window"] == 10
        # Other defaults should remain
        assert config["models"]["ema_period"] == 20

    def test_symbol_yaml_precedence(self, tmp_path: Path) -> None:
        """Test YAML overrides sit between defaults and per-call overrides."""
        (tmp_path / "symbols.yaml").write_text(
            "symbols:\n"
            "  NVDA:\n"
            "    symbol:\n"
            "      start_price: 450.0\n"
            "      volatility: 0.04\n"
            "    models:\n"
            "      sma_window: 15\n"
        )
        loader = ConfigLoader.create(tmp_path)

        config = loader.merge_config("nvda")
        assert config["symbol"]["start_price"] == 450.0
        assert config["symbol"]["drift"] == 0.0003
        assert config["models"]["sma_window"] == 15

        config = loader.merge_config("NVDA", {"models": {"sma_window": 5}})
        assert config["models"]["sma_window"] == 5

    def test_empty_yaml(self, tmp_path: Path) -> None:
        """Test an empty symbols file."""
        (tmp_path / "symbols.yaml").write_text("")
        assert ConfigLoader.create(tmp_path).load_symbol_config("AAPL") == {}

    def test_resolve_builds_dataclasses(self, tmp_path: Path) -> None:
        """Test merged dictionaries become frozen dataclasses."""
        config = ConfigLoader.create(tmp_path).resolve(
            "TSLA", {"evaluation": {"holdout_days": 10}, "models": {"unknown_key": 1}}
        )
        assert config.evaluation.holdout_days == 10
        assert config.symbol.start_price == 800.0

    def test_shipped_symbols_file(self) -> None:
        """Test the repository symbols file loads."""
        loader = ConfigLoader.create()
        config = loader.merge_config("MSFT")
        assert config["symbol"]["start_price"] == 100.0


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_defaults_are_valid(self, tmp_path: Path) -> None:
        """Test that merged defaults pass validation."""
        config = ConfigLoader.create(tmp_path).merge_config("AAPL")
        assert ConfigValidator.validate_config(config) == []

    def test_invalid_start_price(self) -> None:
        """Test validation of a non-positive start price."""
        errors = ConfigValidator.validate_symbol_params({"start_price": 0})
        assert len(errors) == 1
        assert errors[0].field == "start_price"

    def test_invalid_volatility(self) -> None:
        """Test validation of volatility outside [0, 1]."""
        errors = ConfigValidator.validate_symbol_params({"volatility": 1.5})
        assert [e.field for e in errors] == ["volatility"]

    def test_invalid_drift(self) -> None:
        """Test validation of an implausible drift."""
        errors = ConfigValidator.validate_symbol_params({"drift": 0.5})
        assert [e.field for e in errors] == ["drift"]

    def test_volume_bounds(self) -> None:
        """Test volume_min must be below volume_max."""
        errors = ConfigValidator.validate_generator_params(
            {"volume_min": 10, "volume_max": 10}
        )
        assert [e.field for e in errors] == ["volume_max"]

    @pytest.mark.parametrize("field,value", [
        ("sma_window", 0),
        ("ema_period", -1),
        ("ar_order", 1.5),
        ("linear_lookback", 1),
        ("ar_lookback", True),
        ("jitter_pct", 1.0),
        ("ar_noise_pct", -0.1),
        ("forecast_floor_ratio", 0),
    ])
    def test_invalid_model_params(self, field, value) -> None:
        """Test validation of model parameters."""
        errors = ConfigValidator.validate_model_params({field: value})
        assert len(errors) == 1
        assert errors[0].field == field
        assert errors[0].value == value

    def test_validate_config_sections(self) -> None:
        """Test every section is validated."""
        errors = ConfigValidator.validate_config({
            "symbol": {"start_price": -1},
            "generator": {"history_days": 0},
            "models": {"sma_window": 0},
            "evaluation": {"holdout_days": 0},
            "chart": {"history_window": "90"},
        })
        assert {e.field for e in errors} == {
            "start_price", "history_days", "sma_window", "holdout_days", "history_window"
        }
