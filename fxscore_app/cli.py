"""
Command line interface.

    fxscore score  [--snapshot PATH | --sample] [--json]
    fxscore signal BASE QUOTE [--snapshot PATH | --sample] [--json]
    fxscore validate [--config-dir DIR]
"""

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence

import orjson

from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .data.parsers import load_snapshot
from .data.samples import sample_snapshot
from .engine import ScoringEngine
from .errors import ConfigurationError, DataQualityError
from .logging.config import configure_logging
from .models.scores import ScoringResult, TradingSignal


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fxscore", description="Macro currency strength scoring.")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default WARNING)")
    parser.add_argument("--log-json", action="store_true", help="Emit logs as JSON")
    parser.add_argument("--config-dir", type=Path, default=None, help="Directory holding currencies.yaml")

    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_snapshot_args(sub: argparse.ArgumentParser) -> None:
        source = sub.add_mutually_exclusive_group(required=True)
        source.add_argument("--snapshot", type=Path, help="JSON or YAML snapshot file")
        source.add_argument("--sample", action="store_true", help="Use the built-in reference dataset")
        sub.add_argument("--policy-week", action="store_true", help="Force a central bank week")
        sub.add_argument("--json", action="store_true", help="Print machine-readable JSON")

    score = subparsers.add_parser("score", help="Regime, weights and per-currency scores")
    add_snapshot_args(score)

    signal = subparsers.add_parser("signal", help="Trading signal for one currency pair")
    signal.add_argument("base", help="First currency, e.g. USD")
    signal.add_argument("quote", help="Second currency, e.g. EUR")
    add_snapshot_args(signal)

    subparsers.add_parser("validate", help="Validate the merged configuration")

    return parser


def _load(args: argparse.Namespace):
    snapshot = sample_snapshot() if args.sample else load_snapshot(args.snapshot)
    if args.policy_week and not snapshot.is_policy_week:
        snapshot = replace(snapshot, is_policy_week=True)
    return snapshot


def _print_json(payload) -> None:
    sys.stdout.write(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode() + "\n")


def format_result(result: ScoringResult) -> str:
    """Plain-text table of the recompute result"""
    lines = [f"Regime: {result.regime.value} ({result.assessment.rule})"]
    if result.assessment.window_padded:
        lines.append(f"  warning: volatility window padded from {result.assessment.observations} observations")
    weights = ", ".join(f"{name}={value:.2f}" for name, value in result.weights.as_dict().items())
    lines.append(f"Weights: {weights}")
    lines.append("")
    lines.append(f"{'CCY':<5}{'RATE':>9}{'GROWTH':>9}{'REAL':>9}{'RISK':>9}{'POS':>9}{'TOTAL':>9}")
    for score in result.ranked():
        lines.append(
            f"{score.currency:<5}{score.rate_policy:>9.3f}{score.growth_momentum:>9.3f}"
            f"{score.real_interest_edge:>9.3f}{score.risk_appetite:>9.3f}"
            f"{score.positioning:>9.3f}{score.total_score:>9.3f}"
        )
    return "\n".join(lines)


def format_signal(signal: TradingSignal) -> str:
    return (f"{signal.base}/{signal.quote}: {signal.strength.value} "
            f"(differential {signal.differential:+.3f}) - {signal.recommendation}")


def cmd_score(args: argparse.Namespace, engine: ScoringEngine) -> int:
    result = engine.recompute(_load(args))
    if args.json:
        _print_json(result.to_dict())
    else:
        print(format_result(result))
    return 0


def cmd_signal(args: argparse.Namespace, engine: ScoringEngine) -> int:
    result = engine.recompute(_load(args))
    signal = engine.trading_signal(result, args.base, args.quote)
    if signal is None:
        print(f"No score for {args.base.upper()} or {args.quote.upper()}; "
              f"scored: {', '.join(sorted(result.scores))}", file=sys.stderr)
        return 1
    if args.json:
        _print_json(signal.to_dict())
    else:
        print(format_signal(signal))
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    loader = ConfigLoader.create(args.config_dir)
    errors = ConfigValidator.validate_config(loader.merge_config())
    if errors:
        print(f"Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  - {error.field}: {error.message} (value: {error.value})")
        return 1
    print(f"Configuration in {loader.config_dir} is valid")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level, format_json=args.log_json)

    if args.command == "validate":
        return cmd_validate(args)

    try:
        engine = ScoringEngine(config_dir=args.config_dir)
        if args.command == "score":
            return cmd_score(args, engine)
        return cmd_signal(args, engine)
    except (DataQualityError, ConfigurationError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
