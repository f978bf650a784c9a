"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def _positive_ints(params: dict[str, Any], fields: tuple[str, ...]) -> list[ValidationError]:
        errors = []
        for name in fields:
            if name in params:
                value = params[name]
                if not _is_int(value) or value <= 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a positive integer",
                        value=value
                    ))
        return errors

    @staticmethod
    def _fractions(params: dict[str, Any], fields: tuple[str, ...]) -> list[ValidationError]:
        errors = []
        for name in fields:
            if name in params:
                value = params[name]
                if not _is_number(value) or value < 0 or value >= 1:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a number in [0, 1)",
                        value=value
                    ))
        return errors

    @staticmethod
    def validate_symbol_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate symbol random-walk parameters."""
        errors = []

        # Validate start_price
        if "start_price" in params:
            value = params["start_price"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="start_price",
                    message="Must be a positive number",
                    value=value
                ))

        # Validate volatility
        if "volatility" in params:
            value = params["volatility"]
            if not _is_number(value) or value < 0 or value > 1:
                errors.append(ValidationError(
                    field="volatility",
                    message="Must be a number between 0 and 1",
                    value=value
                ))

        # Validate drift; a daily move beyond 10% is not a drift
        if "drift" in params:
            value = params["drift"]
            if not _is_number(value) or abs(value) > 0.1:
                errors.append(ValidationError(
                    field="drift",
                    message="Must be a number between -0.1 and 0.1",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_generator_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate series generator parameters."""
        errors = ConfigValidator._positive_ints(params, ("history_days",))

        # Validate volume bounds
        for name in ("volume_min", "volume_max"):
            if name in params:
                value = params[name]
                if not _is_int(value) or value < 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a non-negative integer",
                        value=value
                    ))

        volume_min = params.get("volume_min")
        volume_max = params.get("volume_max")
        if _is_int(volume_min) and _is_int(volume_max) and volume_min >= volume_max:
            errors.append(ValidationError(
                field="volume_max",
                message="Must be greater than volume_min",
                value=volume_max
            ))

        # Validate floor_ratio
        if "floor_ratio" in params:
            value = params["floor_ratio"]
            if not _is_number(value) or value <= 0 or value > 1:
                errors.append(ValidationError(
                    field="floor_ratio",
                    message="Must be a positive number not above 1",
                    value=value
                ))

        # Validate calendar factors
        for name in ("monday_factor", "friday_factor"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value <= 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a positive number",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_model_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate forecast model parameters."""
        errors = ConfigValidator._positive_ints(
            params, ("sma_window", "ema_period", "ar_order")
        )

        # Linear and AR windows need two points for a slope or a difference
        for name in ("linear_lookback", "ar_lookback"):
            if name in params:
                value = params[name]
                if not _is_int(value) or value < 2:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be an integer of at least 2",
                        value=value
                    ))

        errors.extend(ConfigValidator._fractions(params, ("jitter_pct", "ar_noise_pct")))

        # Validate forecast_floor_ratio
        if "forecast_floor_ratio" in params:
            value = params["forecast_floor_ratio"]
            if not _is_number(value) or value <= 0 or value > 1:
                errors.append(ValidationError(
                    field="forecast_floor_ratio",
                    message="Must be a positive number not above 1",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "symbol" in config:
            errors.extend(ConfigValidator.validate_symbol_params(config["symbol"]))

        if "generator" in config:
            errors.extend(ConfigValidator.validate_generator_params(config["generator"]))

        if "models" in config:
            errors.extend(ConfigValidator.validate_model_params(config["models"]))

        if "evaluation" in config:
            errors.extend(ConfigValidator._positive_ints(config["evaluation"], ("holdout_days",)))

        if "chart" in config:
            errors.extend(ConfigValidator._positive_ints(config["chart"], ("history_window",)))

        return errors
