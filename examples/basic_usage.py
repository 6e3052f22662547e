#!/usr/bin/env python3
"""
Basic Usage Example - FX Currency Strength Scoring Engine

This script demonstrates the basic usage of the scoring engine with the
built-in reference dataset. It shows how to:
- Initialize the engine
- Score every currency for the current regime
- Query pairwise trading signals
- Roll the snapshot forward with new daily observations

Run: python examples/basic_usage.py
"""

from fxscore_app.data.samples import sample_snapshot
from fxscore_app.engine import ScoringEngine
from fxscore_app.logging import configure_logging
from fxscore_app.models.scores import ScoringResult, TradingSignal


def print_scores(result: ScoringResult) -> None:
    """Print regime, weights and the ranked currency table."""
    print(f"📊 Regime: {result.regime.value} ({result.assessment.rule})")
    for name, weight in result.weights.as_dict().items():
        print(f"    {name:<20} {weight:.3f}")
    print()
    for rank, score in enumerate(result.ranked(), start=1):
        print(f"  {rank}. {score.currency}  total={score.total_score:+.3f}")
        for name, value in score.factors().items():
            print(f"       {name:<20} {value:+.3f}")
    print()


def print_signal(signal: TradingSignal) -> None:
    """Print one pairwise signal."""
    marker = "🚨" if signal.is_actionable else "  "
    print(f"{marker} {signal.base}/{signal.quote}: {signal.strength.value:<12} "
          f"{signal.differential:+.3f}  {signal.recommendation}")


def main():
    """Main demonstration function."""
    configure_logging(level="WARNING")

    print("🚀 FX Currency Strength Scoring Engine - Basic Usage Demo")
    print("=" * 60)

    print("1. Initializing the scoring engine...")
    engine = ScoringEngine()
    snapshot = sample_snapshot()
    print(f"   Engine initialized, {len(snapshot.currencies)} currencies in the sample")
    print()

    print("2. Scoring the reference dataset...")
    result = engine.recompute(snapshot)
    print_scores(result)

    print("3. Pairwise signals (strongest first)...")
    signals = sorted(engine.all_signals(result), key=lambda s: s.differential, reverse=True)
    for signal in signals:
        if signal.differential > 0:
            print_signal(signal)
    print()

    print("4. Rolling forward: five days of gold beating equities...")
    for day in range(1, 6):
        snapshot = engine.advance(snapshot, volatility_value=24.0, primary_return=-0.4, hedge_return=0.6)
        day_result = engine.recompute(snapshot)
        print(f"   Day {day}: streak={snapshot.market.hedge_outperform_streak} "
              f"regime={day_result.regime.value} ({day_result.assessment.rule})")
    print()

    print("5. Central bank week...")
    policy_result = engine.recompute(sample_snapshot(is_policy_week=True))
    print_scores(policy_result)

    print("✅ Demo completed successfully!")


if __name__ == "__main__":
    main()
