"""Rolling volatility window and hedge outperformance streak tracking"""

from collections import deque
from dataclasses import replace
from typing import Sequence

from ..data.models import MarketSnapshot, VolatilityState

DEFAULT_WINDOW_LENGTH = 20


def append_observation(value: float, window: Sequence[float],
                       max_length: int = DEFAULT_WINDOW_LENGTH) -> tuple[float, ...]:
    """
    Append a volatility reading to the rolling window

    Keeps only the most recent ``max_length`` values, evicting from the front.

    Args:
        value: New observation
        window: Existing history, oldest first
        max_length: Window capacity (default 20)

    Returns:
        New window; the input sequence is not modified
    """
    rolling = deque(window, maxlen=max_length)
    rolling.append(float(value))
    return tuple(rolling)


update_volatility_window = append_observation


def update_outperform_streak(primary_return: float, hedge_return: float,
                             previous_streak: int = 0) -> int:
    """
    Count consecutive periods in which the hedge asset beat the primary asset

    Returns previous_streak + 1 when hedge_return > primary_return, otherwise
    resets to 0 (ties reset).
    """
    if hedge_return > primary_return:
        return previous_streak + 1
    return 0


def advance_volatility_state(state: VolatilityState, value: float,
                             max_length: int = DEFAULT_WINDOW_LENGTH) -> VolatilityState:
    """New state with ``value`` as the current reading and appended to history"""
    return VolatilityState(
        current=float(value),
        window=append_observation(value, state.window, max_length),
    )


def advance_market(market: MarketSnapshot, primary_return: float,
                   hedge_return: float) -> MarketSnapshot:
    """New market snapshot with fresh returns and the streak carried forward"""
    return replace(
        market,
        primary_return=primary_return,
        hedge_return=hedge_return,
        hedge_outperform_streak=update_outperform_streak(
            primary_return, hedge_return, market.hedge_outperform_streak
        ),
    )
