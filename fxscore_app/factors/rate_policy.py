"""Rate policy factor: expected policy path plus central bank tone"""

from typing import Optional

from ..config.defaults import CurrencyTables
from ..data.models import RatePolicyInput

RATE_GAP_WEIGHT = 0.8
TONE_WEIGHT = 0.2
TONE_PER_MENTION = 0.1


def clamp(value: float, lower: float = -1.0, upper: float = 1.0) -> float:
    """Clamp value into [lower, upper]"""
    return max(lower, min(upper, value))


def rate_sensitivity(currency: str, tables: Optional[CurrencyTables] = None) -> float:
    """Per-currency sensitivity to the policy path, 0.5 for unlisted codes"""
    tables = tables or CurrencyTables()
    return tables.rate_sensitivity.get(currency, tables.default_rate_sensitivity)


def tone_score(hawkish_mentions: int, dovish_mentions: int) -> float:
    """Net hawkishness, 0.1 per mention, clamped to [-1, 1]"""
    return clamp((hawkish_mentions - dovish_mentions) * TONE_PER_MENTION)


def rate_policy_score(data: RatePolicyInput, tables: Optional[CurrencyTables] = None) -> float:
    """
    Calculate Rate Policy score

    score = 0.8 * (terminal - current) * sensitivity + 0.2 * tone

    The rate gap term is not clamped.
    """
    rate_gap = (data.terminal_rate - data.current_rate) * rate_sensitivity(data.currency, tables)
    tone = tone_score(data.hawkish_mentions, data.dovish_mentions)
    return rate_gap * RATE_GAP_WEIGHT + tone * TONE_WEIGHT
