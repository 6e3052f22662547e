"""
Snapshot parsers for converting raw caller payloads to model inputs.

This module handles parsing of JSON/YAML snapshot documents (or already
decoded dictionaries) into the canonical frozen input structures, with type
conversion and data quality errors for anything malformed.
"""

import math
from pathlib import Path
from typing import Any, Mapping, Union

import orjson
import yaml

from ..errors import MalformedDataError, MissingDataError
from .models import (
    CurrencyInputs,
    EmploymentMetric,
    GrowthInput,
    MarketSnapshot,
    ModelSnapshot,
    PositioningInput,
    RatePolicyInput,
    RealRateInput,
    VolatilityState,
)

JSON_SUFFIXES = {".json"}
YAML_SUFFIXES = {".yaml", ".yml"}


def _section(data: Mapping[str, Any], key: str, path: str) -> Mapping[str, Any]:
    if key not in data or data[key] is None:
        raise MissingDataError(f"Missing required section '{path}{key}'", data_type=f"{path}{key}")
    value = data[key]
    if not isinstance(value, Mapping):
        raise MalformedDataError(
            f"Section '{path}{key}' must be a mapping",
            raw_data=repr(value)[:100],
            expected_format="mapping",
        )
    return value


def _number(data: Mapping[str, Any], key: str, path: str) -> float:
    if key not in data or data[key] is None:
        raise MissingDataError(f"Missing required field '{path}{key}'", data_type=f"{path}{key}")
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedDataError(
            f"Field '{path}{key}' must be numeric",
            raw_data=repr(value)[:100],
            expected_format="number",
        )
    if math.isnan(value) or math.isinf(value):
        raise MalformedDataError(
            f"Field '{path}{key}' must be finite",
            raw_data=repr(value),
            expected_format="finite number",
        )
    return float(value)


def _count(data: Mapping[str, Any], key: str, path: str, default: int = 0) -> int:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        else:
            raise MalformedDataError(
                f"Field '{path}{key}' must be an integer",
                raw_data=repr(value)[:100],
                expected_format="integer",
            )
    return value


def _non_negative_count(data: Mapping[str, Any], key: str, path: str, default: int = 0) -> int:
    value = _count(data, key, path, default)
    if value < 0:
        raise MalformedDataError(
            f"Field '{path}{key}' must not be negative",
            raw_data=repr(value),
            expected_format="non-negative integer",
        )
    return value


def parse_volatility(data: Mapping[str, Any]) -> VolatilityState:
    """Parse the volatility section: current reading and rolling window."""
    current = _number(data, "current", "volatility.")
    window = data.get("window", [])
    if isinstance(window, (str, bytes)) or not isinstance(window, (list, tuple)):
        raise MalformedDataError(
            "Field 'volatility.window' must be a list of numbers",
            raw_data=repr(window)[:100],
            expected_format="list[number]",
        )
    values = [_number({"value": v}, "value", f"volatility.window[{i}].") for i, v in enumerate(window)]
    return VolatilityState(current=current, window=tuple(values))


def parse_market(data: Mapping[str, Any]) -> MarketSnapshot:
    """Parse the cross-asset market section."""
    return MarketSnapshot(
        primary_return=_number(data, "primary_return", "market."),
        hedge_return=_number(data, "hedge_return", "market."),
        primary_ma20=_number(data, "primary_ma20", "market."),
        primary_price=_number(data, "primary_price", "market."),
        hedge_outperform_streak=_non_negative_count(data, "hedge_outperform_streak", "market."),
    )


def parse_currency_inputs(code: str, data: Mapping[str, Any]) -> CurrencyInputs:
    """Parse one currency bundle; the mapping key supplies the currency code."""
    path = f"currencies.{code}."

    rate = _section(data, "rate_policy", path)
    growth = _section(data, "growth", path)
    real_rate = _section(data, "real_rate", path)
    positioning = _section(data, "positioning", path)

    employment_raw = growth.get("employment")
    if isinstance(employment_raw, Mapping):
        employment = EmploymentMetric(
            currency=str(employment_raw.get("currency", code)).upper(),
            value=_number(employment_raw, "value", f"{path}growth.employment."),
        )
    else:
        employment = EmploymentMetric(
            currency=code,
            value=_number(growth, "employment", f"{path}growth."),
        )

    return CurrencyInputs(
        rate_policy=RatePolicyInput(
            currency=code,
            current_rate=_number(rate, "current_rate", f"{path}rate_policy."),
            terminal_rate=_number(rate, "terminal_rate", f"{path}rate_policy."),
            hawkish_mentions=_non_negative_count(rate, "hawkish_mentions", f"{path}rate_policy."),
            dovish_mentions=_non_negative_count(rate, "dovish_mentions", f"{path}rate_policy."),
        ),
        growth=GrowthInput(
            employment=employment,
            pmi=_number(growth, "pmi", f"{path}growth."),
            gdp_qoq=_number(growth, "gdp_qoq", f"{path}growth."),
        ),
        real_rate=RealRateInput(
            currency=code,
            two_year_yield=_number(real_rate, "two_year_yield", f"{path}real_rate."),
            breakeven_inflation_5y5y=_number(real_rate, "breakeven_inflation_5y5y", f"{path}real_rate."),
        ),
        positioning=PositioningInput(
            currency=code,
            net_position=_count(positioning, "net_position", f"{path}positioning."),
            percentile_52_week=_number(positioning, "percentile_52_week", f"{path}positioning."),
        ),
    )


def parse_snapshot(data: Mapping[str, Any]) -> ModelSnapshot:
    """
    Parse a decoded snapshot document.

    Args:
        data: Mapping with ``volatility``, ``market``, ``currencies`` and an
            optional ``is_policy_week`` flag

    Returns:
        ModelSnapshot ready for the engine

    Raises:
        MissingDataError: A required section or field is absent
        MalformedDataError: A value has the wrong type or is not finite
    """
    if not isinstance(data, Mapping):
        raise MalformedDataError(
            "Snapshot document must be a mapping",
            raw_data=repr(data)[:100],
            expected_format="mapping",
        )

    policy_week = data.get("is_policy_week", False)
    if not isinstance(policy_week, bool):
        raise MalformedDataError(
            "Field 'is_policy_week' must be a boolean",
            raw_data=repr(policy_week),
            expected_format="boolean",
        )

    currencies_raw = _section(data, "currencies", "")
    currencies = {}
    for code, bundle in currencies_raw.items():
        normalized = str(code).upper()
        if not isinstance(bundle, Mapping):
            raise MalformedDataError(
                f"Currency bundle '{normalized}' must be a mapping",
                raw_data=repr(bundle)[:100],
                expected_format="mapping",
            )
        currencies[normalized] = parse_currency_inputs(normalized, bundle)

    return ModelSnapshot(
        volatility=parse_volatility(_section(data, "volatility", "")),
        market=parse_market(_section(data, "market", "")),
        currencies=currencies,
        is_policy_week=policy_week,
    )


def load_snapshot(path: Union[str, Path]) -> ModelSnapshot:
    """Load and parse a JSON or YAML snapshot file."""
    path = Path(path)
    if not path.is_file():
        raise MissingDataError(f"Snapshot file not found: {path}", data_type="snapshot")
    suffix = path.suffix.lower()

    if suffix in JSON_SUFFIXES:
        try:
            data = orjson.loads(path.read_bytes())
        except orjson.JSONDecodeError as e:
            raise MalformedDataError(
                f"Invalid JSON in {path}: {e}",
                expected_format="json",
            ) from e
    elif suffix in YAML_SUFFIXES:
        try:
            data = yaml.safe_load(path.read_text())
        except yaml.YAMLError as e:
            raise MalformedDataError(
                f"Invalid YAML in {path}: {e}",
                expected_format="yaml",
            ) from e
    else:
        raise MalformedDataError(
            f"Unsupported snapshot format: {path.name}",
            expected_format="json or yaml",
        )

    return parse_snapshot(data)
