"""Data models for scoring results"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from ..regime.models import Regime, RegimeAssessment

FACTOR_NAMES = ("rate_policy", "growth_momentum", "real_interest_edge", "risk_appetite", "positioning")


@dataclass(frozen=True)
class WeightVector:
    """Factor weights for one regime, summing to 1.0"""
    rate_policy: float
    growth_momentum: float
    real_interest_edge: float
    risk_appetite: float
    positioning: float

    def total(self) -> float:
        return sum(self.as_dict().values())

    def as_dict(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in FACTOR_NAMES}


@dataclass(frozen=True)
class CurrencyScore:
    """Factor sub-scores and regime-weighted total for one currency"""
    currency: str
    rate_policy: float
    growth_momentum: float
    real_interest_edge: float
    risk_appetite: float
    positioning: float
    total_score: float

    def factors(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in FACTOR_NAMES}

    def to_dict(self) -> dict:
        return {"currency": self.currency, **self.factors(), "total_score": self.total_score}


class SignalStrength(str, Enum):
    """Differential buckets, strongest first"""
    VERY_STRONG = "VERY_STRONG"
    STRONG = "STRONG"
    MODERATE = "MODERATE"
    WEAK = "WEAK"
    NEUTRAL = "NEUTRAL"


@dataclass(frozen=True)
class TradingSignal:
    """Pairwise signal derived from two currency scores"""
    base: str
    quote: str
    differential: float                 # base total minus quote total
    strength: SignalStrength
    recommendation: str

    @property
    def is_actionable(self) -> bool:
        """Only the three strongest buckets carry a buy/sell call"""
        return self.strength in (SignalStrength.VERY_STRONG, SignalStrength.STRONG, SignalStrength.MODERATE)

    def to_dict(self) -> dict:
        return {
            "pair": f"{self.base}/{self.quote}",
            "differential": self.differential,
            "strength": self.strength.value,
            "recommendation": self.recommendation,
        }


@dataclass(frozen=True)
class ScoringResult:
    """Output of one engine recompute"""
    regime: Regime
    weights: WeightVector
    scores: Mapping[str, CurrencyScore]
    assessment: RegimeAssessment

    def __post_init__(self) -> None:
        object.__setattr__(self, "scores", MappingProxyType(dict(self.scores)))

    def ranked(self) -> list[CurrencyScore]:
        """Scores ordered strongest first"""
        return sorted(self.scores.values(), key=lambda s: s.total_score, reverse=True)

    def to_dict(self) -> dict:
        return {
            "regime": self.regime.value,
            "weights": self.weights.as_dict(),
            "assessment": self.assessment.to_dict(),
            "scores": {code: score.to_dict() for code, score in self.scores.items()},
        }
