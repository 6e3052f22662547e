"""Nearest-rank percentile helpers over the rolling volatility window"""

from typing import Sequence


def nearest_rank(sorted_values: Sequence[float], percent: int) -> float:
    """
    Nearest-rank percentile without interpolation

    Indexes the ascending sequence at floor(n * percent / 100). Integer
    percents keep the index exact (no float rounding at 20 * 0.6).

    Args:
        sorted_values: Values in ascending order, non-empty
        percent: Integer percent in [0, 100]

    Returns:
        Value at the percentile rank
    """
    index = len(sorted_values) * percent // 100
    return sorted_values[min(index, len(sorted_values) - 1)]


def pad_window(current: float, window: Sequence[float], length: int = 20) -> tuple[float, ...]:
    """
    Front-pad a short window with copies of the current reading

    Always returns a new tuple; the caller's sequence is left untouched.
    Windows already at (or above) ``length`` are returned as-is.
    """
    missing = length - len(window)
    if missing <= 0:
        return tuple(window)
    return (current,) * missing + tuple(window)


def window_percentiles(current: float, window: Sequence[float], percents: Sequence[int],
                       length: int = 20) -> list[float]:
    """Percentiles of the (padded) window for each requested percent"""
    ordered = sorted(pad_window(current, window, length))
    return [nearest_rank(ordered, p) for p in percents]
