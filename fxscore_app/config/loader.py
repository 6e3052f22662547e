"""Configuration loader with 3-tier parameter precedence."""

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import (
    CurrencyTables,
    EmploymentBand,
    FactorWeights,
    ModelConfig,
    RegimeParams,
    RegimeWeightTable,
    SignalThresholds,
    frozen_mapping,
    get_default_config,
)
from .validation import ConfigValidator

CONFIG_FILENAME = "currencies.yaml"


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: ModelConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_file_config(self) -> dict[str, Any]:
        """Load on-disk table overrides, empty when the file is absent."""
        config_file = self.config_dir / CONFIG_FILENAME

        if not config_file.exists():
            return {}

        with open(config_file) as f:
            file_config = yaml.safe_load(f)

        return file_config or {}

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Caller overrides (highest priority)
        2. currencies.yaml in the config directory
        3. Built-in defaults (lowest priority)
        """
        config = config_to_dict(self.defaults)

        config = self._deep_merge(config, self.load_file_config())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def build_config(self, overrides: Optional[dict[str, Any]] = None) -> ModelConfig:
        """Merge, validate and materialize a ModelConfig."""
        merged = self.merge_config(overrides)

        errors = ConfigValidator.validate_config(merged)
        if errors:
            raise ConfigurationError(
                f"Invalid configuration: {len(errors)} error(s)",
                errors=errors,
                context={"config_dir": str(self.config_dir)},
            )

        return config_from_dict(merged)

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result


def config_to_dict(obj: Any) -> Any:
    """Convert nested config dataclasses to plain dictionaries."""
    if hasattr(obj, '__dataclass_fields__'):
        return {name: config_to_dict(getattr(obj, name)) for name in obj.__dataclass_fields__}
    if isinstance(obj, Mapping):
        return {key: config_to_dict(value) for key, value in obj.items()}
    if isinstance(obj, (set, frozenset)):
        return sorted(obj)
    return obj


def config_from_dict(data: dict[str, Any]) -> ModelConfig:
    """Build a ModelConfig from a merged (and validated) dictionary."""
    currencies = data["currencies"]
    weights = data["weights"]

    tables = CurrencyTables(
        rate_sensitivity=frozen_mapping({k: float(v) for k, v in currencies["rate_sensitivity"].items()}),
        default_rate_sensitivity=float(currencies["default_rate_sensitivity"]),
        risk_factors=frozen_mapping({k: float(v) for k, v in currencies["risk_factors"].items()}),
        default_risk_factor=float(currencies["default_risk_factor"]),
        risk_on_beneficiaries=frozenset(currencies["risk_on_beneficiaries"]),
        safe_havens=frozenset(currencies["safe_havens"]),
        employment_bands=frozen_mapping({
            code: EmploymentBand(**band) for code, band in currencies["employment_bands"].items()
        }),
    )

    return ModelConfig(
        currencies=tables,
        regime=RegimeParams(**data["regime"]),
        weights=RegimeWeightTable(**{
            regime: FactorWeights(**row) for regime, row in weights.items()
        }),
        signals=SignalThresholds(**data["signals"]),
    )
