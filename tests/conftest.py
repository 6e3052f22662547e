"""Pytest configuration and shared fixtures."""

import pytest
from typing import Dict, Any

from fxscore_app.config.defaults import get_default_config
from fxscore_app.data.models import (
    CurrencyInputs,
    EmploymentMetric,
    GrowthInput,
    MarketSnapshot,
    PositioningInput,
    RatePolicyInput,
    RealRateInput,
    VolatilityState,
)
from fxscore_app.data.samples import sample_snapshot


@pytest.fixture
def default_config():
    """Built-in model configuration."""
    return get_default_config()


@pytest.fixture
def calm_window() -> tuple:
    """20 observations from 20.0 to 29.5 in 0.5 steps."""
    return tuple(20 + i * 0.5 for i in range(20))


@pytest.fixture
def high_vol_state(calm_window) -> VolatilityState:
    """Volatility spike well above the window's 75th percentile."""
    return VolatilityState(current=35.0, window=calm_window)


@pytest.fixture
def downtrend_market() -> MarketSnapshot:
    """Equities down, gold up, equities below their 20-day average."""
    return MarketSnapshot(
        primary_return=-2.5,
        hedge_return=1.5,
        primary_ma20=450.0,
        primary_price=440.0,
        hedge_outperform_streak=0,
    )


@pytest.fixture
def usd_inputs() -> CurrencyInputs:
    """USD bundle from the reference dataset."""
    return CurrencyInputs(
        rate_policy=RatePolicyInput("USD", current_rate=5.25, terminal_rate=5.50,
                                    hawkish_mentions=3, dovish_mentions=1),
        growth=GrowthInput(EmploymentMetric("USD", 175.0), pmi=48.5, gdp_qoq=1.5),
        real_rate=RealRateInput("USD", two_year_yield=4.7, breakeven_inflation_5y5y=2.3),
        positioning=PositioningInput("USD", net_position=50000, percentile_52_week=75.0),
    )


@pytest.fixture
def reference_snapshot():
    """Reference dataset with six currencies."""
    return sample_snapshot()


@pytest.fixture
def snapshot_document() -> Dict[str, Any]:
    """Raw snapshot document as it would appear in a JSON/YAML file."""
    return {
        "is_policy_week": False,
        "volatility": {
            "current": 35.0,
            "window": [20 + i * 0.5 for i in range(20)],
        },
        "market": {
            "primary_return": -2.5,
            "hedge_return": 1.5,
            "primary_ma20": 450.0,
            "primary_price": 440.0,
            "hedge_outperform_streak": 0,
        },
        "currencies": {
            "USD": {
                "rate_policy": {"current_rate": 5.25, "terminal_rate": 5.50,
                                "hawkish_mentions": 3, "dovish_mentions": 1},
                "growth": {"employment": 175, "pmi": 48.5, "gdp_qoq": 1.5},
                "real_rate": {"two_year_yield": 4.7, "breakeven_inflation_5y5y": 2.3},
                "positioning": {"net_position": 50000, "percentile_52_week": 75},
            },
            "eur": {
                "rate_policy": {"current_rate": 4.00, "terminal_rate": 3.75,
                                "hawkish_mentions": 1, "dovish_mentions": 2},
                "growth": {"employment": {"value": -0.2}, "pmi": 47.2, "gdp_qoq": 0.8},
                "real_rate": {"two_year_yield": 3.2, "breakeven_inflation_5y5y": 2.0},
                "positioning": {"net_position": -30000, "percentile_52_week": 25},
            },
        },
    }
