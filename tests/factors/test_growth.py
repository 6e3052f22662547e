"""Tests for the growth momentum factor"""

import pytest

from fxscore_app.config.defaults import EmploymentBand
from fxscore_app.data.models import EmploymentMetric, GrowthInput
from fxscore_app.factors import (
    band_score,
    employment_score,
    gdp_score,
    growth_momentum_score,
    pmi_score,
)


class TestEmploymentScore:
    """Per-currency employment bands"""

    @pytest.mark.parametrize("currency,value,expected", [
        ("USD", 175.0, 0.875),
        ("USD", 200.0, 1.0),
        ("USD", 90.0, -1.0),
        ("EUR", 0.1, 0.5),
        ("EUR", -0.2, -1.0),
        ("GBP", 15.0, -1 / 6),
        ("GBP", -25.0, 1.0),
        ("GBP", 50.0, -1.0),
        ("JPY", 1.28, 0.2),
        ("AUD", 66.3, 0.2),
        ("CAD", 62.2, 0.4),
        ("CHF", 2.25, 0.5),
    ])
    def test_bands(self, currency, value, expected):
        assert employment_score(EmploymentMetric(currency, value)) == pytest.approx(expected)

    def test_chf_lower_unemployment_scores_higher(self):
        """Inverted band: 1.8% unemployment beats 3.2%"""
        low = employment_score(EmploymentMetric("CHF", 1.8))
        high = employment_score(EmploymentMetric("CHF", 3.2))

        assert low == 1.0
        assert high == -1.0
        assert low > high

    def test_unknown_currency_scores_zero(self):
        assert employment_score(EmploymentMetric("NZD", 4.0)) == 0.0

    def test_band_edges_interpolate(self):
        """Values exactly on a threshold use the linear segment"""
        band = EmploymentBand(good=180.0, bad=100.0, midpoint=140.0, scale=40.0)
        assert band_score(180.0, band) == pytest.approx(1.0)
        assert band_score(100.0, band) == pytest.approx(-1.0)
        assert band_score(140.0, band) == 0.0


class TestStepFunctions:
    """PMI and GDP step functions"""

    @pytest.mark.parametrize("pmi,expected", [
        (55.0, 1.0), (52.1, 1.0), (52.0, 0.5), (50.0, 0.5),
        (49.9, 0.0), (48.0, 0.0), (47.9, -0.5), (45.0, -0.5), (44.9, -1.0),
    ])
    def test_pmi(self, pmi, expected):
        assert pmi_score(pmi) == expected

    @pytest.mark.parametrize("gdp,expected", [
        (3.1, 1.0), (3.0, 0.5), (2.0, 0.5), (1.9, 0.0),
        (1.0, 0.0), (0.5, -0.5), (0.0, -0.5), (-0.1, -1.0),
    ])
    def test_gdp(self, gdp, expected):
        assert gdp_score(gdp) == expected


class TestGrowthMomentum:
    """Weighted composite"""

    def test_usd_reference(self):
        """0.4 * 0.875 + 0.3 * 0 + 0.3 * 0"""
        data = GrowthInput(EmploymentMetric("USD", 175.0), pmi=48.5, gdp_qoq=1.5)
        assert growth_momentum_score(data) == pytest.approx(0.35)

    def test_all_weak(self):
        data = GrowthInput(EmploymentMetric("EUR", -0.2), pmi=47.2, gdp_qoq=0.8)
        assert growth_momentum_score(data) == pytest.approx(-0.7)

    def test_bounded(self):
        """Composite stays within [-1, 1]"""
        best = GrowthInput(EmploymentMetric("USD", 500.0), pmi=60.0, gdp_qoq=5.0)
        worst = GrowthInput(EmploymentMetric("USD", -500.0), pmi=30.0, gdp_qoq=-5.0)
        assert growth_momentum_score(best) == pytest.approx(1.0)
        assert growth_momentum_score(worst) == pytest.approx(-1.0)
