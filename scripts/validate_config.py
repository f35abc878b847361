#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from xover_app.config.loader import ConfigLoader
from xover_app.config.validation import ConfigValidator, ValidationError


def validate_instrument_config(loader: ConfigLoader, ticker: str) -> List[ValidationError]:
    """Validate configuration for a specific instrument."""
    config = loader.merge_config(ticker)
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    print("🔍 Validating Xover App configuration...")

    loader = ConfigLoader.create()

    test_instruments = [
        "BTC-USD",
        "ETH-USD",
        "UNKNOWN-INSTRUMENT"  # Should use defaults
    ]

    all_valid = True

    for ticker in test_instruments:
        print(f"\n📊 Validating {ticker}...")

        try:
            errors = validate_instrument_config(loader, ticker)

            if errors:
                print(f"❌ Found {len(errors)} validation errors:")
                for error in errors:
                    print(f"  • {error.field}: {error.message} (value: {error.value})")
                all_valid = False
            else:
                config = loader.load_indicator_config(ticker)
                print(f"✅ {ticker} configuration is valid: {config}")

        except Exception as e:
            print(f"❌ Error validating {ticker}: {e}")
            all_valid = False

    if all_valid:
        print(f"\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print(f"\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
