"""Unit tests for snapshot parsing."""

import orjson
import pytest
import yaml

from fxscore_app.data.models import ModelSnapshot
from fxscore_app.data.parsers import load_snapshot, parse_currency_inputs, parse_snapshot
from fxscore_app.errors import DataQualityError, MalformedDataError, MissingDataError


class TestParseSnapshot:
    """Test parsing of decoded snapshot documents."""

    def test_valid_document(self, snapshot_document) -> None:
        snapshot = parse_snapshot(snapshot_document)

        assert isinstance(snapshot, ModelSnapshot)
        assert snapshot.volatility.current == 35.0
        assert len(snapshot.volatility.window) == 20
        assert snapshot.market.primary_price == 440.0
        assert snapshot.is_policy_week is False

    def test_currency_codes_upper_cased(self, snapshot_document) -> None:
        """Keys are normalized and propagate into every input."""
        snapshot = parse_snapshot(snapshot_document)

        assert set(snapshot.currencies) == {"USD", "EUR"}
        eur = snapshot.currencies["EUR"]
        assert eur.rate_policy.currency == "EUR"
        assert eur.growth.employment.currency == "EUR"
        assert eur.growth.employment.value == -0.2

    def test_counts_default_to_zero(self, snapshot_document) -> None:
        del snapshot_document["market"]["hedge_outperform_streak"]
        del snapshot_document["currencies"]["USD"]["rate_policy"]["dovish_mentions"]

        snapshot = parse_snapshot(snapshot_document)
        assert snapshot.market.hedge_outperform_streak == 0
        assert snapshot.currencies["USD"].rate_policy.dovish_mentions == 0

    def test_missing_section(self, snapshot_document) -> None:
        del snapshot_document["market"]

        with pytest.raises(MissingDataError) as exc_info:
            parse_snapshot(snapshot_document)
        assert exc_info.value.data_type == "market"
        assert exc_info.value.recoverable is True

    def test_missing_field(self, snapshot_document) -> None:
        del snapshot_document["currencies"]["USD"]["growth"]["pmi"]

        with pytest.raises(MissingDataError) as exc_info:
            parse_snapshot(snapshot_document)
        assert exc_info.value.data_type == "currencies.USD.growth.pmi"

    @pytest.mark.parametrize("value", ["48.5", True, float("nan"), float("inf")])
    def test_malformed_number(self, snapshot_document, value) -> None:
        snapshot_document["currencies"]["USD"]["growth"]["pmi"] = value

        with pytest.raises(MalformedDataError):
            parse_snapshot(snapshot_document)

    def test_negative_mentions(self, snapshot_document) -> None:
        snapshot_document["currencies"]["USD"]["rate_policy"]["hawkish_mentions"] = -1

        with pytest.raises(MalformedDataError) as exc_info:
            parse_snapshot(snapshot_document)
        assert exc_info.value.expected_format == "non-negative integer"

    def test_window_must_be_list(self, snapshot_document) -> None:
        snapshot_document["volatility"]["window"] = "20,21,22"

        with pytest.raises(MalformedDataError):
            parse_snapshot(snapshot_document)

    def test_policy_week_must_be_bool(self, snapshot_document) -> None:
        snapshot_document["is_policy_week"] = "yes"

        with pytest.raises(MalformedDataError):
            parse_snapshot(snapshot_document)

    def test_document_must_be_mapping(self) -> None:
        with pytest.raises(MalformedDataError):
            parse_snapshot([1, 2, 3])

    def test_employment_currency_override(self) -> None:
        """The employment metric may name a different band explicitly."""
        bundle = {
            "rate_policy": {"current_rate": 1.0, "terminal_rate": 1.0},
            "growth": {"employment": {"currency": "chf", "value": 1.8}, "pmi": 50, "gdp_qoq": 1},
            "real_rate": {"two_year_yield": 1.0, "breakeven_inflation_5y5y": 1.0},
            "positioning": {"net_position": 0, "percentile_52_week": 50},
        }
        inputs = parse_currency_inputs("XYZ", bundle)
        assert inputs.growth.employment.currency == "CHF"
        assert inputs.rate_policy.currency == "XYZ"


class TestLoadSnapshot:
    """Test loading snapshot files."""

    def test_json_file(self, tmp_path, snapshot_document) -> None:
        path = tmp_path / "snapshot.json"
        path.write_bytes(orjson.dumps(snapshot_document))

        assert load_snapshot(path) == parse_snapshot(snapshot_document)

    def test_yaml_file(self, tmp_path, snapshot_document) -> None:
        path = tmp_path / "snapshot.yaml"
        path.write_text(yaml.safe_dump(snapshot_document))

        snapshot = load_snapshot(str(path))
        assert snapshot.currencies["USD"].real_rate.two_year_yield == 4.7

    def test_invalid_json(self, tmp_path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json")

        with pytest.raises(MalformedDataError) as exc_info:
            load_snapshot(path)
        assert exc_info.value.expected_format == "json"

    def test_invalid_yaml(self, tmp_path) -> None:
        path = tmp_path / "broken.yml"
        path.write_text("volatility: [unclosed\n")

        with pytest.raises(MalformedDataError):
            load_snapshot(path)

    def test_unsupported_suffix(self, tmp_path) -> None:
        path = tmp_path / "snapshot.csv"
        path.write_text("a,b\n")

        with pytest.raises(MalformedDataError):
            load_snapshot(path)

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(MissingDataError):
            load_snapshot(tmp_path / "absent.json")

    def test_errors_share_base_class(self, tmp_path) -> None:
        with pytest.raises(DataQualityError):
            load_snapshot(tmp_path / "absent.yaml")
