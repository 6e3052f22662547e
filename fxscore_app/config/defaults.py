"""Default configuration parameters for the currency strength model."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


def frozen_mapping(mapping: dict) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class EmploymentBand:
    """
    Piecewise-linear employment mapping for one currency.

    Values beyond ``good`` map to 1.0, values beyond ``bad`` map to -1.0 and
    anything in between is ``(value - midpoint) / scale``. Inverted bands
    (lower is better, e.g. unemployment rates) use ``(midpoint - value) / scale``.
    """
    good: float
    bad: float
    midpoint: float
    scale: float
    inverted: bool = False


DEFAULT_RATE_SENSITIVITY = {
    "USD": 0.4,
    "EUR": 0.6,
    "GBP": 0.5,
    "JPY": 1.0,
    "AUD": 0.4,
    "CAD": 0.3,
    "CHF": 0.8,
}

DEFAULT_RISK_FACTORS = {
    "AUD": 1.0,
    "EUR": 0.5,
    "CAD": 0.3,
    "GBP": 0.2,
    "JPY": 1.0,
    "CHF": 0.8,
    "USD": 0.3,
}

DEFAULT_EMPLOYMENT_BANDS = {
    "USD": EmploymentBand(good=180.0, bad=100.0, midpoint=140.0, scale=40.0),    # NFP change (k)
    "EUR": EmploymentBand(good=0.3, bad=-0.1, midpoint=-0.1, scale=0.4),         # employment YoY
    "GBP": EmploymentBand(good=-20.0, bad=40.0, midpoint=10.0, scale=30.0, inverted=True),  # claimant count
    "JPY": EmploymentBand(good=1.30, bad=1.25, midpoint=1.275, scale=0.025),     # jobs-to-applicants
    "AUD": EmploymentBand(good=66.5, bad=66.0, midpoint=66.25, scale=0.25),      # participation rate
    "CAD": EmploymentBand(good=62.5, bad=61.5, midpoint=62.0, scale=0.5),        # employment rate
    "CHF": EmploymentBand(good=2.0, bad=3.0, midpoint=2.5, scale=0.5, inverted=True),  # unemployment rate
}


@dataclass(frozen=True)
class CurrencyTables:
    """Per-currency constant tables shared by the factor scorers."""
    rate_sensitivity: Mapping[str, float] = field(
        default_factory=lambda: frozen_mapping(DEFAULT_RATE_SENSITIVITY))
    default_rate_sensitivity: float = 0.5                # Unlisted currencies
    risk_factors: Mapping[str, float] = field(
        default_factory=lambda: frozen_mapping(DEFAULT_RISK_FACTORS))
    default_risk_factor: float = 0.0
    risk_on_beneficiaries: frozenset = frozenset({"AUD", "EUR", "CAD", "GBP"})
    safe_havens: frozenset = frozenset({"JPY", "CHF", "USD"})
    employment_bands: Mapping[str, EmploymentBand] = field(
        default_factory=lambda: frozen_mapping(DEFAULT_EMPLOYMENT_BANDS))


@dataclass(frozen=True)
class RegimeParams:
    """Regime detection parameters."""
    window_length: int = 20             # Rolling volatility window size
    upper_percentile: int = 75          # Above this -> risk off
    lower_percentile: int = 25          # Below this (and trend up) -> risk on
    hedge_streak_threshold: int = 5     # Consecutive hedge outperformance days -> risk off


@dataclass(frozen=True)
class FactorWeights:
    """One row of the regime weight table."""
    rate_policy: float
    growth_momentum: float
    real_interest_edge: float
    risk_appetite: float
    positioning: float


@dataclass(frozen=True)
class RegimeWeightTable:
    """Relative factor weights per market regime, normalized on lookup."""
    risk_off: FactorWeights = FactorWeights(0.45, 0.15, 0.25, 0.15, 0.05)
    risk_on: FactorWeights = FactorWeights(0.30, 0.35, 0.25, 0.10, 0.05)
    central_bank_week: FactorWeights = FactorWeights(0.55, 0.15, 0.25, 0.05, 0.05)
    neutral: FactorWeights = FactorWeights(0.35, 0.25, 0.30, 0.10, 0.05)


@dataclass(frozen=True)
class SignalThresholds:
    """Absolute score differential thresholds, evaluated highest first."""
    very_strong: float = 2.0    # strictly greater than
    strong: float = 1.5
    moderate: float = 1.0
    weak: float = 0.5


@dataclass(frozen=True)
class ModelConfig:
    """Complete model configuration."""
    currencies: CurrencyTables
    regime: RegimeParams
    weights: RegimeWeightTable
    signals: SignalThresholds


def get_default_config() -> ModelConfig:
    """Get the default configuration instance."""
    return ModelConfig(
        currencies=CurrencyTables(),
        regime=RegimeParams(),
        weights=RegimeWeightTable(),
        signals=SignalThresholds(),
    )
