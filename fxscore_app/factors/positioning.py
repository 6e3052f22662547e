"""Positioning factor from 52-week percentile of net speculative positions"""

from ..data.models import PositioningInput


def positioning_score(data: PositioningInput) -> float:
    """
    Step function on the 52-week percentile

    Percentiles outside [0, 100] are not rejected: they land in the end
    buckets (above 100 scores 1.0, below 0 scores -1.0).
    """
    percentile = data.percentile_52_week
    if percentile > 90:
        return 1.0
    if percentile > 70:
        return 0.5
    if percentile > 30:
        return 0.0
    if percentile > 10:
        return -0.5
    return -1.0
