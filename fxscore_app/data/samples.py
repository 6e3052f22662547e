"""Reference dataset used by the CLI ``--sample`` flag, scripts and tests."""

from .models import (
    CurrencyInputs,
    EmploymentMetric,
    GrowthInput,
    MarketSnapshot,
    ModelSnapshot,
    PositioningInput,
    RatePolicyInput,
    RealRateInput,
    VolatilityState,
)


def sample_volatility() -> VolatilityState:
    """VIX at 35 over a calm 20..29.5 history."""
    return VolatilityState(current=35.0, window=tuple(20 + i * 0.5 for i in range(20)))


def sample_market() -> MarketSnapshot:
    """SPY down 2.5% vs GLD up 1.5%, SPY below its 20-day average."""
    return MarketSnapshot(
        primary_return=-2.5,
        hedge_return=1.5,
        primary_ma20=450.0,
        primary_price=440.0,
        hedge_outperform_streak=0,
    )


def _bundle(code, rate, employment, pmi, gdp, yields, positioning) -> CurrencyInputs:
    current_rate, terminal_rate, hawkish, dovish = rate
    two_year, breakeven = yields
    net_position, percentile = positioning
    return CurrencyInputs(
        rate_policy=RatePolicyInput(code, current_rate, terminal_rate, hawkish, dovish),
        growth=GrowthInput(EmploymentMetric(code, employment), pmi, gdp),
        real_rate=RealRateInput(code, two_year, breakeven),
        positioning=PositioningInput(code, net_position, percentile),
    )


def sample_currencies() -> dict[str, CurrencyInputs]:
    """Input bundles for the six majors in the reference dataset."""
    return {
        "USD": _bundle("USD", (5.25, 5.50, 3, 1), 175.0, 48.5, 1.5, (4.7, 2.3), (50000, 75.0)),
        "EUR": _bundle("EUR", (4.00, 3.75, 1, 2), -0.2, 47.2, 0.8, (3.2, 2.0), (-30000, 25.0)),
        "GBP": _bundle("GBP", (5.25, 5.00, 2, 1), 15.0, 49.8, 1.2, (4.3, 2.2), (20000, 60.0)),
        "JPY": _bundle("JPY", (0.10, 0.25, 1, 3), 1.28, 50.1, 0.3, (0.5, 2.0), (-80000, 15.0)),
        "AUD": _bundle("AUD", (4.35, 4.50, 2, 1), 66.3, 51.2, 2.1, (4.1, 2.1), (35000, 80.0)),
        "CAD": _bundle("CAD", (5.00, 4.75, 1, 2), 62.2, 50.8, 1.8, (4.0, 2.0), (15000, 55.0)),
    }


def sample_snapshot(is_policy_week: bool = False) -> ModelSnapshot:
    """Complete reference snapshot."""
    return ModelSnapshot(
        volatility=sample_volatility(),
        market=sample_market(),
        currencies=sample_currencies(),
        is_policy_week=is_policy_week,
    )
