"""Regime weighting, score aggregation and signal generation"""

from .aggregator import score_currencies, score_currency
from .signals import classify_differential, generate_signal, recommendation_for, signal_matrix
from .weights import weights_for

__all__ = [
    "weights_for",
    "score_currency",
    "score_currencies",
    "classify_differential",
    "recommendation_for",
    "generate_signal",
    "signal_matrix",
]
