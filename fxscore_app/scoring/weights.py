"""Regime to factor weight lookup"""

from typing import Optional, Union

from ..config.defaults import FactorWeights, RegimeWeightTable
from ..logging.config import get_scoring_logger
from ..models.scores import WeightVector
from ..regime.models import Regime

scoring_logger = get_scoring_logger(__name__)

_ROW_FOR_REGIME = {
    Regime.RISK_OFF: "risk_off",
    Regime.RISK_ON: "risk_on",
    Regime.CENTRAL_BANK_WEEK: "central_bank_week",
    Regime.NEUTRAL: "neutral",
}


def _to_vector(row: FactorWeights) -> WeightVector:
    # Rows are relative weights; the default rows each total 1.05
    total = (row.rate_policy + row.growth_momentum + row.real_interest_edge
             + row.risk_appetite + row.positioning)
    return WeightVector(
        rate_policy=row.rate_policy / total,
        growth_momentum=row.growth_momentum / total,
        real_interest_edge=row.real_interest_edge / total,
        risk_appetite=row.risk_appetite / total,
        positioning=row.positioning / total,
    )


def weights_for(regime: Union[Regime, str, None],
                table: Optional[RegimeWeightTable] = None) -> WeightVector:
    """
    Look up the factor weights for a regime

    Args:
        regime: Regime member or its string value
        table: Weight table, defaults when omitted

    Returns:
        WeightVector for the regime, normalized to sum to 1.0; the NEUTRAL
        row for anything unrecognised
    """
    table = table or RegimeWeightTable()

    try:
        resolved = Regime(regime)
    except ValueError:
        scoring_logger.warning("Unknown regime, using neutral weights", regime=repr(regime))
        resolved = Regime.NEUTRAL

    return _to_vector(getattr(table, _ROW_FOR_REGIME[resolved]))
