"""
FX Score App - Macro Currency Strength Scoring Engine

Computes a regime-weighted composite strength score per currency from
macroeconomic and market inputs, classifies the prevailing market regime,
and derives pairwise trading signals from score differentials.
"""

__version__ = "0.1.0"
__author__ = "FX Score Team"
