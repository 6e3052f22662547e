"""Market regime classification"""

from .classifier import assess_regime, classify_regime
from .models import Regime, RegimeAssessment

__all__ = ["Regime", "RegimeAssessment", "assess_regime", "classify_regime"]
