"""
Error classification for entry point evaluation.

Input problems (empty candle windows, payloads that cannot be parsed) are
data quality errors; broken configuration is a system failure. Rule
disqualifications are never raised.
"""

from .data_quality import (
    DataQualityError,
    TemporalDataError,
    MissingDataError,
    MalformedDataError,
)
from .system_failures import (
    SystemFailureError,
    ConfigurationError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "TemporalDataError",
    "MissingDataError",
    "MalformedDataError",
    # System Failures
    "SystemFailureError",
    "ConfigurationError",
]
