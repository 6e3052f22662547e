"""Risk appetite factor: volatility regime plus cross-asset sentiment"""

from typing import Optional

from ..config.defaults import CurrencyTables, RegimeParams
from ..data.models import MarketSnapshot, VolatilityState
from ..metrics.percentiles import window_percentiles
from .rate_policy import clamp

VOLATILITY_WEIGHT = 0.6
CROSS_ASSET_WEIGHT = 0.4
CROSS_ASSET_MULTIPLIER = 2.0
VOLATILITY_PERCENTS = (20, 40, 60, 80)
VOLATILITY_BUCKETS = (1.0, 0.5, 0.0, -0.5, -1.0)


def volatility_score(vol: VolatilityState, params: Optional[RegimeParams] = None) -> float:
    """
    Score the current volatility reading against its own history

    The window is split at its 20th/40th/60th/80th nearest-rank percentiles;
    the lowest bracket scores 1.0 and the highest -1.0. Short windows are
    padded the same way the regime classifier pads them.
    """
    params = params or RegimeParams()
    cutoffs = window_percentiles(vol.current, vol.window, VOLATILITY_PERCENTS, params.window_length)

    for cutoff, bucket in zip(cutoffs, VOLATILITY_BUCKETS):
        if vol.current < cutoff:
            return bucket
    return VOLATILITY_BUCKETS[-1]


def cross_asset_score(market: MarketSnapshot) -> float:
    """Primary minus hedge return, doubled and clamped to [-1, 1]"""
    return clamp((market.primary_return - market.hedge_return) * CROSS_ASSET_MULTIPLIER)


def apply_risk_appetite(currency: str, cross_asset: float,
                        tables: Optional[CurrencyTables] = None) -> float:
    """
    Route cross-asset sentiment to the currencies that benefit from it

    Risk on (score > 0) only pays risk-on beneficiaries; risk off (score <= 0)
    only pays safe havens, using the magnitude of the score. Everything else
    receives 0.
    """
    tables = tables or CurrencyTables()
    factor = tables.risk_factors.get(currency, tables.default_risk_factor)

    if cross_asset > 0:
        if currency in tables.risk_on_beneficiaries:
            return factor * cross_asset
        return 0.0

    if currency in tables.safe_havens:
        return factor * abs(cross_asset)
    return 0.0


def risk_appetite_score(currency: str, vol: VolatilityState, market: MarketSnapshot,
                        tables: Optional[CurrencyTables] = None,
                        params: Optional[RegimeParams] = None) -> float:
    """Final factor score: 60% volatility score, 40% applied cross-asset score"""
    applied = apply_risk_appetite(currency, cross_asset_score(market), tables)
    return volatility_score(vol, params) * VOLATILITY_WEIGHT + applied * CROSS_ASSET_WEIGHT
