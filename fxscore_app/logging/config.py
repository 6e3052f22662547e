"""
Centralized logging configuration for the currency scoring engine.

This module provides standardized logging configuration using structlog
for all components. All logging throughout the system should use this
configuration to ensure consistent formatting and structured logging.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stderr,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_regime_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for regime classification decisions.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for regime decisions
    """
    return structlog.get_logger(name, subsystem="regime")


def get_scoring_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for factor scoring and signal generation.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for scoring
    """
    return structlog.get_logger(name, subsystem="scoring")


def log_regime_decision(
    logger: FilteringBoundLogger,
    regime: str,
    rule: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a regime classification with standardized format.

    Args:
        logger: Structlog logger instance
        regime: Resulting regime value
        rule: Which rule decided the regime (policy_week, volatility_high, ...)
        context: Additional context data (percentiles, streak, prices)
    """
    bound_logger = logger.bind(
        regime=regime,
        rule=rule,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("Regime classified")


def log_signal(
    logger: FilteringBoundLogger,
    base: str,
    quote: str,
    differential: float,
    strength: str,
    recommendation: str
) -> None:
    """
    Log a pairwise trading signal with standardized format.

    Args:
        logger: Structlog logger instance
        base: First currency of the pair
        quote: Second currency of the pair
        differential: Base total score minus quote total score
        strength: Signal strength bucket
        recommendation: Human-readable recommendation
    """
    logger.bind(
        pair=f"{base}/{quote}",
        differential=round(differential, 6),
        strength=strength,
        recommendation=recommendation,
    ).debug("Trading signal generated")
