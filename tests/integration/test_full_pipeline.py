"""
Integration tests for the complete scoring pipeline.

Tests the end-to-end flow from a snapshot file through history updates,
regime classification, scoring and signal generation.
"""

import pytest
import yaml

from fxscore_app.config.defaults import get_default_config
from fxscore_app.data.models import MarketSnapshot, ModelSnapshot, VolatilityState
from fxscore_app.data.parsers import load_snapshot
from fxscore_app.data.samples import sample_currencies
from fxscore_app.engine import ScoringEngine
from fxscore_app.models.scores import SignalStrength
from fxscore_app.regime import Regime


@pytest.fixture
def engine():
    return ScoringEngine(config=get_default_config())


@pytest.fixture
def cold_start_snapshot():
    """No volatility history yet, equities trending up."""
    return ModelSnapshot(
        volatility=VolatilityState(current=20.0, window=()),
        market=MarketSnapshot(primary_return=0.5, hedge_return=0.1,
                              primary_ma20=450.0, primary_price=460.0),
        currencies=sample_currencies(),
    )


class TestFullPipeline:
    """End-to-end scoring."""

    def test_file_to_signals(self, tmp_path, engine, snapshot_document):
        path = tmp_path / "snapshot.yaml"
        path.write_text(yaml.safe_dump(snapshot_document))

        result = engine.recompute(load_snapshot(path))
        signals = engine.all_signals(result)

        assert result.regime == Regime.RISK_OFF
        assert len(signals) == 2
        usd_eur = next(s for s in signals if s.base == "USD")
        assert usd_eur.strength == SignalStrength.WEAK
        assert usd_eur.recommendation == "WAIT FOR BETTER SETUP"

    def test_cold_start_to_full_window(self, engine, cold_start_snapshot):
        """Padding stops once twenty observations are available."""
        snapshot = cold_start_snapshot
        assert engine.recompute(snapshot).assessment.window_padded is True

        for _ in range(19):
            snapshot = engine.advance(snapshot, 20.0, primary_return=0.5, hedge_return=0.1)
            assert len(snapshot.volatility.window) <= 20
        assert engine.recompute(snapshot).assessment.window_padded is True

        snapshot = engine.advance(snapshot, 20.0, primary_return=0.5, hedge_return=0.1)
        result = engine.recompute(snapshot)
        assert result.assessment.window_padded is False
        assert result.regime == Regime.NEUTRAL

        for _ in range(10):
            snapshot = engine.advance(snapshot, 20.0, primary_return=0.5, hedge_return=0.1)
        assert len(snapshot.volatility.window) == 20

    def test_hedge_streak_turns_risk_off(self, engine, cold_start_snapshot):
        """Five straight days of gold beating equities flip the regime."""
        snapshot = cold_start_snapshot
        for _ in range(20):
            snapshot = engine.advance(snapshot, 20.0, primary_return=0.5, hedge_return=0.1)

        regimes = []
        for _ in range(5):
            snapshot = engine.advance(snapshot, 20.0, primary_return=-0.3, hedge_return=0.4)
            regimes.append(engine.recompute(snapshot).regime)

        assert regimes == [Regime.NEUTRAL] * 4 + [Regime.RISK_OFF]
        assert engine.recompute(snapshot).assessment.rule == "hedge_streak"

        snapshot = engine.advance(snapshot, 20.0, primary_return=0.4, hedge_return=0.4)
        assert snapshot.market.hedge_outperform_streak == 0
        assert engine.recompute(snapshot).regime == Regime.NEUTRAL

    def test_calm_market_turns_risk_on(self, engine, cold_start_snapshot):
        """A reading below the window's lower quartile in an uptrend is RISK_ON."""
        snapshot = cold_start_snapshot
        for i in range(20):
            snapshot = engine.advance(snapshot, 20.0 + i, primary_return=0.5, hedge_return=0.1)

        snapshot = engine.advance(snapshot, 15.0, primary_return=0.5, hedge_return=0.1)
        result = engine.recompute(snapshot)

        assert result.regime == Regime.RISK_ON
        assert result.weights.growth_momentum == max(result.weights.as_dict().values())

    def test_regime_changes_totals_not_factors(self, engine, cold_start_snapshot):
        """Switching regimes reweights the same factor scores."""
        neutral = engine.recompute(cold_start_snapshot)
        policy = engine.recompute(ModelSnapshot(
            volatility=cold_start_snapshot.volatility,
            market=cold_start_snapshot.market,
            currencies=cold_start_snapshot.currencies,
            is_policy_week=True,
        ))

        assert policy.regime == Regime.CENTRAL_BANK_WEEK
        for code, score in neutral.scores.items():
            assert score.factors() == policy.scores[code].factors()
