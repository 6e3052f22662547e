"""
Regime data models.

The regime is derived on every recompute and never stored; the assessment
carries the figures behind the decision for observability.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Regime(str, Enum):
    """Market regime driving the factor weighting scheme."""
    RISK_OFF = "RISK_OFF"
    RISK_ON = "RISK_ON"
    NEUTRAL = "NEUTRAL"
    CENTRAL_BANK_WEEK = "CENTRAL_BANK_WEEK"


@dataclass(frozen=True)
class RegimeAssessment:
    """Regime decision plus the statistics it was based on."""
    regime: Regime
    rule: str                           # which check decided the regime
    p25: Optional[float] = None         # None when the policy week short-circuits
    p75: Optional[float] = None
    window_padded: bool = False         # True when the window had < 20 observations
    observations: int = 0               # window length before padding

    def to_dict(self) -> dict:
        return {
            "regime": self.regime.value,
            "rule": self.rule,
            "p25": self.p25,
            "p75": self.p75,
            "window_padded": self.window_padded,
            "observations": self.observations,
        }
