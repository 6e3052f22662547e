"""
Market regime classification.

Maps the volatility window and cross-asset snapshot to one of four regimes.
Checks run in a fixed order: policy week first, then risk off, then risk on,
with neutral as the fallback.
"""

from typing import Optional

from ..config.defaults import RegimeParams
from ..data.models import MarketSnapshot, VolatilityState
from ..logging.config import get_regime_logger, log_regime_decision
from ..metrics.percentiles import window_percentiles
from .models import Regime, RegimeAssessment

regime_logger = get_regime_logger(__name__)


def assess_regime(
    vol: VolatilityState,
    market: MarketSnapshot,
    is_policy_week: bool = False,
    params: Optional[RegimeParams] = None
) -> RegimeAssessment:
    """
    Classify the market regime and report the statistics behind it.

    Args:
        vol: Current volatility reading and rolling window
        market: Cross-asset snapshot (returns, trend, hedge streak)
        is_policy_week: Central bank meeting week flag
        params: Regime parameters, defaults when omitted

    Returns:
        RegimeAssessment with regime, deciding rule and window percentiles
    """
    params = params or RegimeParams()

    if is_policy_week:
        log_regime_decision(regime_logger, Regime.CENTRAL_BANK_WEEK.value, "policy_week")
        return RegimeAssessment(
            regime=Regime.CENTRAL_BANK_WEEK,
            rule="policy_week",
            observations=len(vol.window),
        )

    observations = len(vol.window)
    padded = observations < params.window_length
    if padded:
        regime_logger.warning(
            "Volatility window incomplete, padding with current value",
            available=observations,
            required=params.window_length,
            current=vol.current,
        )

    p25, p75 = window_percentiles(
        vol.current,
        vol.window,
        (params.lower_percentile, params.upper_percentile),
        params.window_length,
    )

    context = {
        "current": vol.current,
        "p25": p25,
        "p75": p75,
        "hedge_outperform_streak": market.hedge_outperform_streak,
        "primary_price": market.primary_price,
        "primary_ma20": market.primary_ma20,
        "window_padded": padded,
    }

    if vol.current > p75:
        regime, rule = Regime.RISK_OFF, "volatility_high"
    elif market.hedge_outperform_streak >= params.hedge_streak_threshold:
        regime, rule = Regime.RISK_OFF, "hedge_streak"
    elif vol.current < p25 and market.primary_price > market.primary_ma20:
        regime, rule = Regime.RISK_ON, "volatility_low_trend_up"
    else:
        regime, rule = Regime.NEUTRAL, "default"

    log_regime_decision(regime_logger, regime.value, rule, context)

    return RegimeAssessment(
        regime=regime,
        rule=rule,
        p25=p25,
        p75=p75,
        window_padded=padded,
        observations=observations,
    )


def classify_regime(
    vol: VolatilityState,
    market: MarketSnapshot,
    is_policy_week: bool = False,
    params: Optional[RegimeParams] = None
) -> Regime:
    """Classify the market regime; see assess_regime for the rules."""
    return assess_regime(vol, market, is_policy_week, params).regime
