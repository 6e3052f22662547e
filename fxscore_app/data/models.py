"""
Canonical input models for the currency scoring engine.

This module defines immutable data structures for one recompute cycle. The
caller owns every instance and replaces it wholesale when inputs change;
nothing in the engine mutates them.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class VolatilityState:
    """Current volatility index reading and its rolling history."""
    current: float
    window: tuple[float, ...] = ()      # oldest first, at most 20 entries

    def __post_init__(self) -> None:
        # Accept any sequence from callers but store an immutable copy
        object.__setattr__(self, "window", tuple(float(v) for v in self.window))


@dataclass(frozen=True)
class MarketSnapshot:
    """Cross-asset market inputs, e.g. equity index vs gold."""
    primary_return: float
    hedge_return: float
    primary_ma20: float
    primary_price: float
    hedge_outperform_streak: int = 0    # consecutive days hedge beat primary


@dataclass(frozen=True)
class RatePolicyInput:
    """Central bank policy path and communication tone."""
    currency: str
    current_rate: float
    terminal_rate: float
    hawkish_mentions: int = 0
    dovish_mentions: int = 0


@dataclass(frozen=True)
class EmploymentMetric:
    """Headline labour-market print; meaning depends on the currency."""
    currency: str
    value: float


@dataclass(frozen=True)
class GrowthInput:
    """Growth momentum inputs."""
    employment: EmploymentMetric
    pmi: float
    gdp_qoq: float


@dataclass(frozen=True)
class RealRateInput:
    """Nominal front-end yield and long-run inflation expectations."""
    currency: str
    two_year_yield: float
    breakeven_inflation_5y5y: float


@dataclass(frozen=True)
class PositioningInput:
    """Speculative positioning (COT style)."""
    currency: str
    net_position: int
    percentile_52_week: float           # expected in [0, 100]


@dataclass(frozen=True)
class CurrencyInputs:
    """Full per-currency input bundle."""
    rate_policy: RatePolicyInput
    growth: GrowthInput
    real_rate: RealRateInput
    positioning: PositioningInput


@dataclass(frozen=True)
class ModelSnapshot:
    """Everything one recompute needs."""
    volatility: VolatilityState
    market: MarketSnapshot
    currencies: Mapping[str, CurrencyInputs] = field(default_factory=dict)
    is_policy_week: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "currencies", MappingProxyType(dict(self.currencies)))

    def with_currency(self, code: str, inputs: CurrencyInputs) -> "ModelSnapshot":
        """Return a new snapshot with one currency bundle added or replaced."""
        currencies = dict(self.currencies)
        currencies[code] = inputs
        return ModelSnapshot(
            volatility=self.volatility,
            market=self.market,
            currencies=currencies,
            is_policy_week=self.is_policy_week,
        )
