"""Real interest edge factor"""

from ..data.models import RealRateInput

REAL_RATE_MULTIPLIER = 1.5


def real_rate(data: RealRateInput) -> float:
    """2-year yield minus 5y5y breakeven inflation"""
    return data.two_year_yield - data.breakeven_inflation_5y5y


def real_interest_edge_score(data: RealRateInput) -> float:
    """Real rate scaled by 1.5; unbounded, compared across currencies"""
    return real_rate(data) * REAL_RATE_MULTIPLIER
