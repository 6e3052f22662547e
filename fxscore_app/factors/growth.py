"""Growth momentum factor: employment, manufacturing PMI and GDP"""

from typing import Optional

from ..config.defaults import CurrencyTables, EmploymentBand
from ..data.models import EmploymentMetric, GrowthInput

EMPLOYMENT_WEIGHT = 0.4
PMI_WEIGHT = 0.3
GDP_WEIGHT = 0.3


def band_score(value: float, band: EmploymentBand) -> float:
    """
    Map a raw employment print through a piecewise-linear band

    Args:
        value: Raw metric (payrolls, claimant count, unemployment rate, ...)
        band: Thresholds and interpolation for the currency

    Returns:
        1.0 past the good threshold, -1.0 past the bad threshold, linear in between
    """
    if band.inverted:
        if value < band.good:
            return 1.0
        if value > band.bad:
            return -1.0
        return (band.midpoint - value) / band.scale

    if value > band.good:
        return 1.0
    if value < band.bad:
        return -1.0
    return (value - band.midpoint) / band.scale


def employment_score(metric: EmploymentMetric, tables: Optional[CurrencyTables] = None) -> float:
    """Employment sub-score; currencies without a band score 0"""
    tables = tables or CurrencyTables()
    band = tables.employment_bands.get(metric.currency)
    if band is None:
        return 0.0
    return band_score(metric.value, band)


def pmi_score(pmi: float) -> float:
    """Manufacturing PMI step function"""
    if pmi > 52:
        return 1.0
    if pmi >= 50:
        return 0.5
    if pmi >= 48:
        return 0.0
    if pmi >= 45:
        return -0.5
    return -1.0


def gdp_score(gdp_qoq: float) -> float:
    """GDP QoQ (annualized %) step function"""
    if gdp_qoq > 3.0:
        return 1.0
    if gdp_qoq >= 2.0:
        return 0.5
    if gdp_qoq >= 1.0:
        return 0.0
    if gdp_qoq >= 0:
        return -0.5
    return -1.0


def growth_momentum_score(data: GrowthInput, tables: Optional[CurrencyTables] = None) -> float:
    """Composite growth score: 40% employment, 30% PMI, 30% GDP"""
    return (
        employment_score(data.employment, tables) * EMPLOYMENT_WEIGHT
        + pmi_score(data.pmi) * PMI_WEIGHT
        + gdp_score(data.gdp_qoq) * GDP_WEIGHT
    )
