#!/usr/bin/env python3
"""Model self-check against the reference dataset.

Runs the scoring pipeline on the built-in sample snapshot and checks the
properties the model is expected to hold:

1. Regime detection on the reference volatility window
2. Normalized weight rows
3. Table coverage for the seven major currencies
4. Inverted CHF employment band
5. Risk appetite routing to beneficiaries and safe havens
6. Real rate multiplier
7. Complete currency score
8. Trading signal for USD/EUR

Usage:
    python scripts/model_check.py
"""
from __future__ import annotations

import math
import pathlib
import sys
from typing import Callable, List, Tuple

ROOT_DIR = pathlib.Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT_DIR))

from fxscore_app.config.defaults import get_default_config
from fxscore_app.data.models import EmploymentMetric, GrowthInput
from fxscore_app.data.samples import sample_snapshot
from fxscore_app.engine import ScoringEngine
from fxscore_app.factors import (
    apply_risk_appetite,
    growth_momentum_score,
    real_interest_edge_score,
)
from fxscore_app.logging import configure_logging
from fxscore_app.regime import Regime
from fxscore_app.scoring import weights_for

MAJORS = ("USD", "EUR", "GBP", "JPY", "AUD", "CAD", "CHF")


def check_regime() -> str:
    result = ScoringEngine(config=get_default_config()).recompute(sample_snapshot())
    assert result.regime == Regime.RISK_OFF, result.regime
    return f"{result.regime.value} via {result.assessment.rule} (p75={result.assessment.p75})"


def check_weights() -> str:
    totals = {regime.value: weights_for(regime).total() for regime in Regime}
    for regime, total in totals.items():
        assert abs(total - 1.0) < 1e-3, f"{regime} weights sum to {total}"
    return ", ".join(f"{regime}={total:.3f}" for regime, total in totals.items())


def check_currency_support() -> str:
    tables = get_default_config().currencies
    for code in MAJORS:
        assert code in tables.rate_sensitivity, f"{code} must have rate sensitivity"
        assert code in tables.risk_factors, f"{code} must have risk factor"
        assert code in tables.employment_bands, f"{code} must have an employment band"
    return f"{len(MAJORS)} major currencies covered"


def check_chf_employment() -> str:
    good = growth_momentum_score(GrowthInput(EmploymentMetric("CHF", 1.8), pmi=51.0, gdp_qoq=1.2))
    bad = growth_momentum_score(GrowthInput(EmploymentMetric("CHF", 3.2), pmi=47.0, gdp_qoq=0.5))
    assert good > bad, "Lower CHF unemployment should score higher"
    return f"good={good:.3f} bad={bad:.3f}"


def check_risk_routing() -> str:
    tables = get_default_config().currencies
    for code in sorted(tables.risk_on_beneficiaries):
        assert apply_risk_appetite(code, 1.0) > 0, f"{code} should benefit from risk-on"
    for code in sorted(tables.safe_havens):
        assert apply_risk_appetite(code, -1.0) > 0, f"{code} should benefit from risk-off"
    return "beneficiaries and safe havens routed"


def check_real_rate() -> str:
    usd = sample_snapshot().currencies["USD"].real_rate
    score = real_interest_edge_score(usd)
    expected = (usd.two_year_yield - usd.breakeven_inflation_5y5y) * 1.5
    assert abs(score - expected) < 1e-3, "Real rate calculation mismatch"
    return f"USD real edge {score:.3f}"


def check_currency_score() -> str:
    result = ScoringEngine(config=get_default_config()).recompute(sample_snapshot())
    usd = result.scores["USD"]
    assert math.isfinite(usd.total_score), "Total score must be finite"
    return f"USD total {usd.total_score:.4f}"


def check_signal() -> str:
    engine = ScoringEngine(config=get_default_config())
    signal = engine.trading_signal(engine.recompute(sample_snapshot()), "USD", "EUR")
    assert signal is not None
    return f"{signal.strength.value} ({signal.differential:+.3f}): {signal.recommendation}"


CHECKS: List[Tuple[str, Callable[[], str]]] = [
    ("Regime detection", check_regime),
    ("Factor weights", check_weights),
    ("Currency support", check_currency_support),
    ("CHF employment", check_chf_employment),
    ("Risk appetite routing", check_risk_routing),
    ("Real rate", check_real_rate),
    ("Complete currency score", check_currency_score),
    ("Trading signal", check_signal),
]


def main() -> None:
    configure_logging(level="WARNING")
    failures: List[Tuple[str, str]] = []

    for name, check in CHECKS:
        try:
            detail = check()
            print(f"✅ {name}: {detail}")
        except AssertionError as exc:
            print(f"❌ {name}: {exc}")
            failures.append((name, str(exc)))

    print("\n" + "=" * 60)
    if failures:
        print(f"❌ {len(failures)} of {len(CHECKS)} checks failed")
        sys.exit(1)
    print(f"🎉 All {len(CHECKS)} checks passed")
    sys.exit(0)


if __name__ == "__main__":
    main()
