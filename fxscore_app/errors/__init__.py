"""
Error classification for currency scoring.

Data quality errors describe malformed caller input and are raised by the
parsers. System failures describe problems in the engine or its configuration.
The scoring functions themselves are total over well-formed inputs.
"""

from .data_quality import (
    DataQualityError,
    MissingDataError,
    MalformedDataError,
)
from .system_failures import (
    SystemFailureError,
    ScoringCalculationError,
    ConfigurationError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MissingDataError",
    "MalformedDataError",
    # System Failures
    "SystemFailureError",
    "ScoringCalculationError",
    "ConfigurationError",
]
