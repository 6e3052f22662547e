"""Combine factor scores with regime weights into one score per currency"""

from typing import Optional

from ..config.defaults import ModelConfig, get_default_config
from ..data.models import (
    GrowthInput,
    MarketSnapshot,
    ModelSnapshot,
    PositioningInput,
    RatePolicyInput,
    RealRateInput,
    VolatilityState,
)
from ..factors import (
    growth_momentum_score,
    positioning_score,
    rate_policy_score,
    real_interest_edge_score,
    risk_appetite_score,
)
from ..models.scores import CurrencyScore
from ..regime.models import Regime
from .weights import weights_for


def score_currency(
    currency: str,
    rate_input: RatePolicyInput,
    growth_input: GrowthInput,
    real_rate_input: RealRateInput,
    vol_state: VolatilityState,
    market: MarketSnapshot,
    positioning_input: PositioningInput,
    regime: Regime,
    config: Optional[ModelConfig] = None
) -> CurrencyScore:
    """
    Compute all five factor scores and the regime-weighted total

    Args:
        currency: Currency code the score is for (drives risk routing)
        rate_input: Policy path and tone inputs
        growth_input: Employment, PMI and GDP inputs
        real_rate_input: 2-year yield and 5y5y breakeven
        vol_state: Volatility reading and rolling window
        market: Cross-asset snapshot
        positioning_input: 52-week positioning percentile
        regime: Regime selecting the weight row
        config: Model configuration, defaults when omitted

    Returns:
        CurrencyScore with every sub-score and the weighted total
    """
    config = config or get_default_config()
    weights = weights_for(regime, config.weights)

    rate_policy = rate_policy_score(rate_input, config.currencies)
    growth_momentum = growth_momentum_score(growth_input, config.currencies)
    real_interest_edge = real_interest_edge_score(real_rate_input)
    risk_appetite = risk_appetite_score(currency, vol_state, market, config.currencies, config.regime)
    positioning = positioning_score(positioning_input)

    total_score = (
        rate_policy * weights.rate_policy
        + growth_momentum * weights.growth_momentum
        + real_interest_edge * weights.real_interest_edge
        + risk_appetite * weights.risk_appetite
        + positioning * weights.positioning
    )

    return CurrencyScore(
        currency=currency,
        rate_policy=rate_policy,
        growth_momentum=growth_momentum,
        real_interest_edge=real_interest_edge,
        risk_appetite=risk_appetite,
        positioning=positioning,
        total_score=total_score,
    )


def score_currencies(snapshot: ModelSnapshot, regime: Regime,
                     config: Optional[ModelConfig] = None) -> dict[str, CurrencyScore]:
    """Score every currency in the snapshot from scratch"""
    config = config or get_default_config()
    return {
        code: score_currency(
            code,
            inputs.rate_policy,
            inputs.growth,
            inputs.real_rate,
            snapshot.volatility,
            snapshot.market,
            inputs.positioning,
            regime,
            config,
        )
        for code, inputs in snapshot.currencies.items()
    }
