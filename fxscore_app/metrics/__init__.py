"""Rolling-window statistics for the volatility index"""

from .history import (
    advance_market,
    advance_volatility_state,
    append_observation,
    update_outperform_streak,
    update_volatility_window,
)
from .percentiles import nearest_rank, pad_window, window_percentiles

__all__ = [
    "append_observation",
    "update_volatility_window",
    "update_outperform_streak",
    "advance_volatility_state",
    "advance_market",
    "nearest_rank",
    "pad_window",
    "window_percentiles",
]
