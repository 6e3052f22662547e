"""Factor scorers: one pure function per input category"""

from .growth import band_score, employment_score, gdp_score, growth_momentum_score, pmi_score
from .positioning import positioning_score
from .rate_policy import clamp, rate_policy_score, rate_sensitivity, tone_score
from .real_rate import real_interest_edge_score, real_rate
from .risk_appetite import apply_risk_appetite, cross_asset_score, risk_appetite_score, volatility_score

__all__ = [
    "clamp",
    "rate_sensitivity",
    "tone_score",
    "rate_policy_score",
    "band_score",
    "employment_score",
    "pmi_score",
    "gdp_score",
    "growth_momentum_score",
    "real_rate",
    "real_interest_edge_score",
    "volatility_score",
    "cross_asset_score",
    "apply_risk_appetite",
    "risk_appetite_score",
    "positioning_score",
]
