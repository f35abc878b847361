"""
Timestamp helpers for candle and crossover times.

Payloads from indicator services carry epoch milliseconds, ISO-8601 strings
or datetimes. The engine only ever compares timestamps; these helpers
normalise input and render times for logging.
"""

from datetime import datetime, timezone
from typing import Any

from ..errors import TemporalDataError


def ms_to_datetime(epoch_ms: float) -> datetime:
    """Convert epoch milliseconds to a UTC datetime."""
    return datetime.fromtimestamp(epoch_ms / 1000.0, tz=timezone.utc)


def parse_timestamp(value: Any) -> Any:
    """
    Normalise a raw timestamp from a payload.

    Args:
        value: Epoch milliseconds (int/float), ISO-8601 string or datetime

    Returns:
        Epoch milliseconds unchanged, or a timezone-aware datetime

    Raises:
        TemporalDataError: If the value cannot be interpreted as a timestamp
    """
    if isinstance(value, bool):
        raise TemporalDataError(f"Invalid timestamp: {value!r}", timestamp=value)

    if isinstance(value, (int, float)):
        if value < 0:
            raise TemporalDataError(f"Negative timestamp: {value}", timestamp=value)
        return value

    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)

    if isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError as e:
            raise TemporalDataError(f"Invalid timestamp: {value!r}", timestamp=value) from e
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)

    raise TemporalDataError(f"Unsupported timestamp type: {type(value).__name__}", timestamp=value)


def format_timestamp(ts: Any) -> str:
    """
    Format a candle or crossover timestamp for logging.

    Numbers that are not representable as epoch milliseconds (nanosecond
    epochs, NaN, bar indices past the datetime range) are rendered as-is.

    Returns:
        ISO8601 formatted string, or ``str(ts)`` when no conversion applies
    """
    if isinstance(ts, datetime):
        return ts.isoformat()
    if isinstance(ts, (int, float)) and not isinstance(ts, bool):
        try:
            return ms_to_datetime(ts).isoformat()
        except (OverflowError, ValueError, OSError):
            return str(ts)
    return str(ts)
