"""
Payload parsers for candles and crossover events.

Indicator services export crossovers as nested objects
(``{"time": ..., "macd": {"cross": ...}, "rsi": ..., "stoch": {"k": ..., "d": ...}}``).
This module turns those payloads, or JSON arrays of them, into the
canonical models with type conversion and error reporting.
"""

from collections.abc import Mapping
from typing import Any, Union

import orjson

from ..errors import MalformedDataError
from ..utils.time import parse_timestamp
from .models import Candle, CrossoverEvent, MACDReading, StochReading


def _require(payload: Mapping, key: str, kind: str) -> Any:
    if key not in payload or payload[key] is None:
        raise MalformedDataError(
            f"{kind} payload missing required field: {key}",
            raw_data=str(payload)[:100],
            expected_format=kind
        )
    return payload[key]


def _to_float(value: Any, name: str, kind: str) -> float:
    if isinstance(value, bool):
        raise MalformedDataError(f"{kind} field {name} must be numeric, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise MalformedDataError(
            f"{kind} field {name} must be numeric, got {value!r}",
            raw_data=str(value)[:100],
            expected_format=kind
        ) from e


def _optional_float(payload: Mapping, name: str, kind: str) -> Any:
    value = payload.get(name)
    return None if value is None else _to_float(value, name, kind)


def parse_candle(payload: Mapping) -> Candle:
    """Parse a single candle payload."""
    if not isinstance(payload, Mapping):
        raise MalformedDataError(
            f"Candle payload must be a mapping, got {type(payload).__name__}",
            raw_data=str(payload)[:100]
        )

    ticker = _require(payload, "ticker", "candle")
    if not isinstance(ticker, str) or not ticker:
        raise MalformedDataError(f"Candle ticker must be a non-empty string, got {ticker!r}")

    return Candle(
        ticker=ticker,
        time=parse_timestamp(_require(payload, "time", "candle")),
        open=_to_float(_require(payload, "open", "candle"), "open", "candle"),
        high=_to_float(_require(payload, "high", "candle"), "high", "candle"),
        low=_to_float(_require(payload, "low", "candle"), "low", "candle"),
        close=_to_float(_require(payload, "close", "candle"), "close", "candle"),
        volume=_to_float(payload.get("volume", 0.0), "volume", "candle"),
    )


def parse_crossover(payload: Mapping) -> CrossoverEvent:
    """Parse a single crossover payload."""
    if not isinstance(payload, Mapping):
        raise MalformedDataError(
            f"Crossover payload must be a mapping, got {type(payload).__name__}",
            raw_data=str(payload)[:100]
        )

    macd = _require(payload, "macd", "crossover")
    stoch = _require(payload, "stoch", "crossover")
    if not isinstance(macd, Mapping) or not isinstance(stoch, Mapping):
        raise MalformedDataError(
            "Crossover macd and stoch fields must be objects",
            raw_data=str(payload)[:100],
            expected_format="crossover"
        )

    return CrossoverEvent(
        time=parse_timestamp(_require(payload, "time", "crossover")),
        macd=MACDReading(
            cross=_to_float(_require(macd, "cross", "macd"), "cross", "macd"),
            macd=_optional_float(macd, "macd", "macd"),
            signal=_optional_float(macd, "signal", "macd"),
            histogram=_optional_float(macd, "histogram", "macd"),
        ),
        rsi=_to_float(_require(payload, "rsi", "crossover"), "rsi", "crossover"),
        stoch=StochReading(
            k=_to_float(_require(stoch, "k", "stoch"), "k", "stoch"),
            d=_to_float(_require(stoch, "d", "stoch"), "d", "stoch"),
        ),
    )


def _load_json_array(raw: Union[str, bytes], kind: str) -> list:
    try:
        data = orjson.loads(raw)
    except orjson.JSONDecodeError as e:
        raise MalformedDataError(
            f"Invalid JSON for {kind}: {e}",
            raw_data=str(raw)[:100],
            expected_format="json"
        ) from e

    if not isinstance(data, list):
        raise MalformedDataError(
            f"Expected a JSON array of {kind}, got {type(data).__name__}",
            raw_data=str(raw)[:100],
            expected_format="json array"
        )
    return data


def parse_candles_json(raw: Union[str, bytes]) -> list[Candle]:
    """Parse a JSON array of candle payloads."""
    return [parse_candle(item) for item in _load_json_array(raw, "candles")]


def parse_crossovers_json(raw: Union[str, bytes]) -> list[CrossoverEvent]:
    """Parse a JSON array of crossover payloads."""
    return [parse_crossover(item) for item in _load_json_array(raw, "crossovers")]
