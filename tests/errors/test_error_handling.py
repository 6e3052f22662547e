"""
Error handling tests for the currency scoring system.

Tests cover the error classification hierarchy, the parser's data quality
errors and wrapping of unexpected failures inside the engine.
"""

import pytest
from unittest.mock import patch

from fxscore_app.config.defaults import get_default_config
from fxscore_app.data.parsers import parse_snapshot
from fxscore_app.engine import ScoringEngine
from fxscore_app.errors import (
    ConfigurationError,
    DataQualityError,
    MalformedDataError,
    MissingDataError,
    ScoringCalculationError,
    SystemFailureError,
)


class TestErrorClassification:
    """Test error classification system."""

    def test_data_quality_error_hierarchy(self):
        """Test that data quality errors have proper hierarchy."""
        base_error = DataQualityError("base error")
        assert base_error.recoverable is True
        assert base_error.context == {}

        missing_error = MissingDataError("missing data", data_type="market")
        assert isinstance(missing_error, DataQualityError)
        assert missing_error.data_type == "market"

        malformed_error = MalformedDataError("bad format", raw_data="abc", expected_format="number")
        assert isinstance(malformed_error, DataQualityError)
        assert malformed_error.raw_data == "abc"
        assert malformed_error.expected_format == "number"

    def test_system_failure_hierarchy(self):
        """Test that system failures are not recoverable."""
        base_error = SystemFailureError("base failure")
        assert base_error.recoverable is False

        calc_error = ScoringCalculationError("calc failed", factor_name="growth",
                                             calculation_input={"pmi": 50.0})
        assert isinstance(calc_error, SystemFailureError)
        assert calc_error.factor_name == "growth"
        assert calc_error.calculation_input == {"pmi": 50.0}

        config_error = ConfigurationError("bad config", errors=["x"], context={"config_dir": "/tmp"})
        assert isinstance(config_error, SystemFailureError)
        assert config_error.errors == ["x"]
        assert config_error.context == {"config_dir": "/tmp"}

    def test_families_are_disjoint(self):
        """Caller-fixable and system errors do not share a base."""
        assert not issubclass(MissingDataError, SystemFailureError)
        assert not issubclass(ConfigurationError, DataQualityError)

    def test_context_passthrough(self):
        error = MissingDataError("missing", data_type="volatility", context={"source": "file"})
        assert error.context == {"source": "file"}
        assert str(error) == "missing"


class TestParserErrors:
    """Malformed snapshots are rejected before scoring."""

    def test_empty_document(self):
        with pytest.raises(MissingDataError):
            parse_snapshot({})

    def test_section_wrong_type(self, snapshot_document):
        snapshot_document["volatility"] = [35.0]

        with pytest.raises(MalformedDataError) as exc_info:
            parse_snapshot(snapshot_document)
        assert exc_info.value.expected_format == "mapping"

    def test_window_value_wrong_type(self, snapshot_document):
        snapshot_document["volatility"]["window"][3] = None

        with pytest.raises(MissingDataError):
            parse_snapshot(snapshot_document)


class TestEngineFailures:
    """Unexpected failures inside the model."""

    def test_regime_failure_wrapped(self, reference_snapshot):
        engine = ScoringEngine(config=get_default_config())

        with patch('fxscore_app.engine.assess_regime', side_effect=ValueError("bad window")):
            with pytest.raises(ScoringCalculationError) as exc_info:
                engine.recompute(reference_snapshot)

        assert "bad window" in str(exc_info.value)
        assert exc_info.value.calculation_input["volatility_current"] == 35.0
