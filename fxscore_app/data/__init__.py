"""
Input data module.

Immutable input structures for one recompute cycle, parsers for snapshot
documents, and the reference sample dataset.
"""
