"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from .defaults import (
    ChartParams,
    DefaultConfig,
    EvaluationParams,
    GeneratorParams,
    ModelParams,
    SymbolParams,
    get_default_config,
)

_SECTIONS = {
    "generator": GeneratorParams,
    "models": ModelParams,
    "evaluation": EvaluationParams,
    "chart": ChartParams,
    "symbol": SymbolParams,
}


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(config_dir=Path(config_dir))

    def load_symbol_config(self, symbol: str) -> dict[str, Any]:
        """Load symbol-specific configuration overrides."""
        symbols_file = self.config_dir / "symbols.yaml"

        if not symbols_file.exists():
            return {}

        with open(symbols_file) as f:
            symbols_config = yaml.safe_load(f) or {}

        symbols = symbols_config.get("symbols", {}) or {}
        return symbols.get(symbol.upper(), {}) or {}  # type: ignore[no-any-return]

    def merge_config(
        self,
        symbol: str,
        overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-call overrides (highest priority)
        2. Symbol-specific overrides from symbols.yaml
        3. Global defaults, including built-in symbol parameters (lowest priority)
        """
        config = self._dataclass_to_dict(get_default_config(symbol))

        symbol_config = self.load_symbol_config(symbol)
        config = self._deep_merge(config, symbol_config)

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def resolve(
        self,
        symbol: str,
        overrides: Optional[dict[str, Any]] = None
    ) -> DefaultConfig:
        """Merge configuration for a symbol and rebuild the frozen dataclasses."""
        return self.from_dict(self.merge_config(symbol, overrides))

    @staticmethod
    def from_dict(config: dict[str, Any]) -> DefaultConfig:
        """Build a DefaultConfig from a merged dictionary, ignoring unknown keys."""
        sections = {}
        for name, params_cls in _SECTIONS.items():
            values = config.get(name, {}) or {}
            known = {k: v for k, v in values.items() if k in params_cls.__dataclass_fields__}
            sections[name] = params_cls(**known)
        return DefaultConfig(**sections)

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
