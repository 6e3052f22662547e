"""Pairwise trading signals from score differentials"""

from itertools import permutations
from typing import Iterator, Mapping, Optional

from ..config.defaults import SignalThresholds
from ..logging.config import get_scoring_logger, log_signal
from ..models.scores import CurrencyScore, SignalStrength, TradingSignal

scoring_logger = get_scoring_logger(__name__)


def classify_differential(abs_diff: float, thresholds: Optional[SignalThresholds] = None) -> SignalStrength:
    """Bucket an absolute differential, highest threshold first"""
    thresholds = thresholds or SignalThresholds()
    if abs_diff > thresholds.very_strong:
        return SignalStrength.VERY_STRONG
    if abs_diff >= thresholds.strong:
        return SignalStrength.STRONG
    if abs_diff >= thresholds.moderate:
        return SignalStrength.MODERATE
    if abs_diff >= thresholds.weak:
        return SignalStrength.WEAK
    return SignalStrength.NEUTRAL


def recommendation_for(strength: SignalStrength, buy: str, sell: str) -> str:
    """Recommendation text for a strength bucket and trade direction"""
    if strength == SignalStrength.VERY_STRONG:
        return f"STRONG BUY {buy}, SELL {sell}"
    if strength == SignalStrength.STRONG:
        return f"BUY {buy}, SELL {sell} (wait for pullback)"
    if strength == SignalStrength.MODERATE:
        return f"MODERATE BUY {buy}, SELL {sell}"
    if strength == SignalStrength.WEAK:
        return "WAIT FOR BETTER SETUP"
    return "NO CLEAR SIGNAL - DO NOT TRADE"


def generate_signal(score_a: CurrencyScore, score_b: CurrencyScore,
                    thresholds: Optional[SignalThresholds] = None) -> TradingSignal:
    """
    Compare two currency scores

    The first currency is the buy target only when its total is strictly
    higher; otherwise the second currency is.

    Args:
        score_a: Base currency score
        score_b: Quote currency score
        thresholds: Differential thresholds, defaults when omitted

    Returns:
        TradingSignal with differential = score_a.total - score_b.total
    """
    differential = score_a.total_score - score_b.total_score
    strength = classify_differential(abs(differential), thresholds)

    if differential > 0:
        buy, sell = score_a.currency, score_b.currency
    else:
        buy, sell = score_b.currency, score_a.currency

    signal = TradingSignal(
        base=score_a.currency,
        quote=score_b.currency,
        differential=differential,
        strength=strength,
        recommendation=recommendation_for(strength, buy, sell),
    )

    log_signal(
        scoring_logger,
        base=signal.base,
        quote=signal.quote,
        differential=differential,
        strength=strength.value,
        recommendation=signal.recommendation,
    )

    return signal


def signal_matrix(scores: Mapping[str, CurrencyScore],
                  thresholds: Optional[SignalThresholds] = None) -> Iterator[TradingSignal]:
    """Signals for every ordered pair of distinct currencies"""
    for base, quote in permutations(scores, 2):
        yield generate_signal(scores[base], scores[quote], thresholds)
