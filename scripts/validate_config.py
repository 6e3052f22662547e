#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from fxscore_app.config.loader import ConfigLoader
from fxscore_app.config.validation import ConfigValidator, ValidationError


def validate_merged_config(overrides=None) -> List[ValidationError]:
    """Validate the merged defaults + currencies.yaml (+ overrides)."""
    loader = ConfigLoader.create()
    config = loader.merge_config(overrides)
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    print("🔍 Validating FX score configuration...")

    all_valid = True

    print(f"\n📊 Validating {ConfigLoader.create().config_dir}...")
    errors = validate_merged_config()
    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        all_valid = False
    else:
        print("✅ Merged configuration is valid")

    # Test caller-level overrides
    print("\n📋 Testing caller overrides...")
    test_overrides = {
        "currencies": {
            "rate_sensitivity": {"NZD": 0.5},
            "risk_factors": {"NZD": 0.8},
            "risk_on_beneficiaries": ["AUD", "EUR", "CAD", "GBP", "NZD"],
        },
        "regime": {"hedge_streak_threshold": 4},
    }

    errors = validate_merged_config(test_overrides)
    if errors:
        print("❌ Override validation failed:")
        for error in errors:
            print(f"  • {error.field}: {error.message}")
        all_valid = False
    else:
        print("✅ Override validation passed")

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
