"""
Main scoring engine coordinator.

Runs one recompute cycle over a caller-owned snapshot:
history -> regime -> weights -> factor scores -> totals, and answers
pairwise signal queries against the result.
"""

from dataclasses import replace
from pathlib import Path
from typing import Optional, Union

import structlog

from .config.defaults import ModelConfig
from .config.loader import ConfigLoader
from .data.models import ModelSnapshot
from .errors import ScoringCalculationError
from .metrics.history import advance_market, advance_volatility_state
from .models.scores import ScoringResult, TradingSignal
from .regime.classifier import assess_regime
from .scoring.aggregator import score_currencies
from .scoring.signals import generate_signal, signal_matrix
from .scoring.weights import weights_for

logger = structlog.get_logger(__name__)


class ScoringEngine:
    """
    Coordinator for the currency strength model.

    Holds only immutable configuration. Every call takes the full snapshot
    and returns fresh results, so one engine can serve concurrent callers
    working on independent snapshots.
    """

    def __init__(
        self,
        config: Optional[ModelConfig] = None,
        config_dir: Optional[Union[str, Path]] = None
    ) -> None:
        """Initialize the engine from an explicit config or the config directory."""
        self.logger = logger

        if config is None:
            config = ConfigLoader.create(Path(config_dir) if config_dir else None).build_config()
        self.config = config

        self.logger.debug("Scoring engine initialized")

    def recompute(self, snapshot: ModelSnapshot) -> ScoringResult:
        """
        Run a full recompute cycle.

        Args:
            snapshot: Volatility, market and per-currency inputs

        Returns:
            ScoringResult with regime, weights and a score for every currency

        Raises:
            ScoringCalculationError: An unexpected failure inside the model
        """
        try:
            assessment = assess_regime(
                snapshot.volatility,
                snapshot.market,
                snapshot.is_policy_week,
                self.config.regime,
            )
            weights = weights_for(assessment.regime, self.config.weights)
            scores = score_currencies(snapshot, assessment.regime, self.config)
        except Exception as e:
            raise ScoringCalculationError(
                f"Unexpected error in score recompute: {str(e)}",
                factor_name="recompute",
                calculation_input={
                    "currencies": sorted(snapshot.currencies),
                    "volatility_current": snapshot.volatility.current,
                    "is_policy_week": snapshot.is_policy_week,
                },
            ) from e

        if assessment.window_padded:
            self.logger.warning(
                "Scores computed on a padded volatility window",
                observations=assessment.observations,
                required=self.config.regime.window_length,
            )

        self.logger.info(
            "Recompute completed",
            regime=assessment.regime.value,
            currencies=len(scores),
        )

        return ScoringResult(
            regime=assessment.regime,
            weights=weights,
            scores=scores,
            assessment=assessment,
        )

    def trading_signal(self, result: ScoringResult, base: str, quote: str) -> Optional[TradingSignal]:
        """Signal for one pair, None when either currency was not scored."""
        score_a = result.scores.get(base.upper())
        score_b = result.scores.get(quote.upper())

        if score_a is None or score_b is None:
            self.logger.warning(
                "Signal requested for unscored currency",
                base=base,
                quote=quote,
                scored=sorted(result.scores),
            )
            return None

        return generate_signal(score_a, score_b, self.config.signals)

    def all_signals(self, result: ScoringResult) -> list[TradingSignal]:
        """Signals for every ordered pair in the result."""
        return list(signal_matrix(result.scores, self.config.signals))

    def advance(
        self,
        snapshot: ModelSnapshot,
        volatility_value: float,
        primary_return: float,
        hedge_return: float
    ) -> ModelSnapshot:
        """
        Produce the next snapshot after a new daily observation.

        The volatility reading is appended to the rolling window and the
        hedge outperformance streak is carried forward. Currency bundles and
        the policy-week flag are kept as they are.
        """
        return replace(
            snapshot,
            volatility=advance_volatility_state(
                snapshot.volatility, volatility_value, self.config.regime.window_length
            ),
            market=advance_market(snapshot.market, primary_return, hedge_return),
        )
