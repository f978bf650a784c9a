#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List

import yaml

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from stock_predictor.config.loader import ConfigLoader
from stock_predictor.config.validation import ConfigValidator, ValidationError


def validate_symbol_config(loader: ConfigLoader, symbol: str) -> List[ValidationError]:
    """Validate merged configuration for a specific symbol."""
    config = loader.merge_config(symbol)
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    print("🔍 Validating Stock Predictor configuration...")

    loader = ConfigLoader.create()

    # Built-in symbols plus everything listed in symbols.yaml
    symbols = ["AAPL", "GOOGL", "TSLA", "MSFT", "UNKNOWN"]
    symbols_file = loader.config_dir / "symbols.yaml"
    if symbols_file.exists():
        with open(symbols_file) as f:
            listed = (yaml.safe_load(f) or {}).get("symbols", {}) or {}
        symbols.extend(s for s in listed if s not in symbols)

    all_valid = True

    for symbol in symbols:
        print(f"\n📊 Validating {symbol}...")

        errors = validate_symbol_config(loader, symbol)
        if errors:
            print(f"❌ Found {len(errors)} validation errors:")
            for error in errors:
                print(f"  • {error.field}: {error.message} (value: {error.value})")
            all_valid = False
        else:
            print(f"✅ {symbol} configuration is valid")

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
