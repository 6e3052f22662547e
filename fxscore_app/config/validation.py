"""Configuration validation utilities."""

import math
from dataclasses import dataclass
from typing import Any

WEIGHT_FIELDS = ("rate_policy", "growth_momentum", "real_interest_edge", "risk_appetite", "positioning")
REGIME_ROWS = ("risk_off", "risk_on", "central_bank_week", "neutral")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_weight_table(weights: dict[str, Any]) -> list[ValidationError]:
        """Validate regime weight rows: five non-negative weights with a positive total."""
        errors = []

        for regime in REGIME_ROWS:
            row = weights.get(regime)
            if not isinstance(row, dict):
                errors.append(ValidationError(
                    field=f"weights.{regime}",
                    message="Missing weight row",
                    value=row
                ))
                continue

            missing = [name for name in WEIGHT_FIELDS if name not in row]
            if missing:
                errors.append(ValidationError(
                    field=f"weights.{regime}",
                    message=f"Missing factor weights: {', '.join(missing)}",
                    value=row
                ))
                continue

            for name in WEIGHT_FIELDS:
                value = row[name]
                if not _is_number(value) or value < 0:
                    errors.append(ValidationError(
                        field=f"weights.{regime}.{name}",
                        message="Must be a non-negative number",
                        value=value
                    ))

            if all(_is_number(row[name]) and row[name] >= 0 for name in WEIGHT_FIELDS):
                total = sum(row[name] for name in WEIGHT_FIELDS)
                if total <= 0:
                    errors.append(ValidationError(
                        field=f"weights.{regime}",
                        message="Weights must have a positive total",
                        value=total
                    ))

        unknown = sorted(set(weights) - set(REGIME_ROWS))
        for regime in unknown:
            errors.append(ValidationError(
                field=f"weights.{regime}",
                message="Unknown regime",
                value=weights[regime]
            ))

        return errors

    @staticmethod
    def validate_currency_tables(tables: dict[str, Any]) -> list[ValidationError]:
        """Validate per-currency constant tables."""
        errors = []

        for table_name in ("rate_sensitivity", "risk_factors"):
            for code, value in (tables.get(table_name) or {}).items():
                if not _is_number(value) or value < 0:
                    errors.append(ValidationError(
                        field=f"currencies.{table_name}.{code}",
                        message="Must be a non-negative number",
                        value=value
                    ))

        for default_name in ("default_rate_sensitivity", "default_risk_factor"):
            value = tables.get(default_name)
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field=f"currencies.{default_name}",
                    message="Must be a non-negative number",
                    value=value
                ))

        overlap = set(tables.get("risk_on_beneficiaries") or []) & set(tables.get("safe_havens") or [])
        if overlap:
            errors.append(ValidationError(
                field="currencies.safe_havens",
                message="A currency cannot be both a safe haven and a risk-on beneficiary",
                value=sorted(overlap)
            ))

        for code, band in (tables.get("employment_bands") or {}).items():
            errors.extend(ConfigValidator.validate_employment_band(code, band))

        return errors

    @staticmethod
    def validate_employment_band(code: str, band: Any) -> list[ValidationError]:
        """Validate a single employment band."""
        errors = []

        if not isinstance(band, dict):
            return [ValidationError(
                field=f"currencies.employment_bands.{code}",
                message="Must be a mapping",
                value=band
            )]

        for name in ("good", "bad", "midpoint", "scale"):
            if not _is_number(band.get(name)):
                errors.append(ValidationError(
                    field=f"currencies.employment_bands.{code}.{name}",
                    message="Must be a number",
                    value=band.get(name)
                ))

        if errors:
            return errors

        if band["scale"] <= 0:
            errors.append(ValidationError(
                field=f"currencies.employment_bands.{code}.scale",
                message="Must be a positive number",
                value=band["scale"]
            ))

        inverted = band.get("inverted", False)
        if not isinstance(inverted, bool):
            errors.append(ValidationError(
                field=f"currencies.employment_bands.{code}.inverted",
                message="Must be a boolean",
                value=inverted
            ))
        elif (band["good"] < band["bad"]) != inverted:
            errors.append(ValidationError(
                field=f"currencies.employment_bands.{code}",
                message="Good threshold must lie above bad threshold (below when inverted)",
                value=band
            ))

        return errors

    @staticmethod
    def validate_regime_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate regime detection parameters."""
        errors = []

        window_length = params.get("window_length")
        if not isinstance(window_length, int) or isinstance(window_length, bool) or window_length <= 0:
            errors.append(ValidationError(
                field="regime.window_length",
                message="Must be a positive integer",
                value=window_length
            ))

        for name in ("upper_percentile", "lower_percentile"):
            value = params.get(name)
            if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value < 100:
                errors.append(ValidationError(
                    field=f"regime.{name}",
                    message="Must be an integer percent in [0, 100)",
                    value=value
                ))

        streak = params.get("hedge_streak_threshold")
        if not isinstance(streak, int) or isinstance(streak, bool) or streak <= 0:
            errors.append(ValidationError(
                field="regime.hedge_streak_threshold",
                message="Must be a positive integer",
                value=streak
            ))

        return errors

    @staticmethod
    def validate_signal_thresholds(params: dict[str, Any]) -> list[ValidationError]:
        """Validate differential thresholds are positive and strictly descending."""
        errors = []
        names = ("very_strong", "strong", "moderate", "weak")

        for name in names:
            value = params.get(name)
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field=f"signals.{name}",
                    message="Must be a positive number",
                    value=value
                ))

        if not errors:
            values = [params[name] for name in names]
            if any(higher <= lower for higher, lower in zip(values, values[1:])):
                errors.append(ValidationError(
                    field="signals",
                    message="Thresholds must be strictly descending",
                    value=values
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "currencies" in config:
            errors.extend(ConfigValidator.validate_currency_tables(config["currencies"]))

        if "regime" in config:
            errors.extend(ConfigValidator.validate_regime_params(config["regime"]))

        if "weights" in config:
            errors.extend(ConfigValidator.validate_weight_table(config["weights"]))

        if "signals" in config:
            errors.extend(ConfigValidator.validate_signal_thresholds(config["signals"]))

        return errors
