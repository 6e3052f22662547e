"""
Output models module.

Immutable results produced by the scoring engine: weight vectors, currency
scores and trading signals. Regenerated wholesale on every recompute.
"""
