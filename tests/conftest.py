"""Pytest configuration and shared fixtures."""

import pytest
from typing import Any, Dict, List

from xover_app.data.models import Candle, CrossoverEvent, MACDReading, StochReading


@pytest.fixture
def sample_candle_payload() -> Dict[str, Any]:
    """Sample candle payload as exported by the market data feed."""
    return {
        "ticker": "BTC-USD",
        "time": 1672574400000,  # 2023-01-01T12:00:00Z
        "open": 100.0,
        "high": 105.0,
        "low": 99.0,
        "close": 103.0,
        "volume": 1000.0,
    }


@pytest.fixture
def sample_crossover_payload() -> Dict[str, Any]:
    """Sample crossover payload as exported by the indicator service."""
    return {
        "time": 1672574400000,
        "macd": {"cross": 0.3, "macd": 1.2, "signal": 0.9, "histogram": 0.3},
        "rsi": 55.0,
        "stoch": {"k": 60.0, "d": 40.0},
    }


@pytest.fixture
def candles() -> List[Candle]:
    """Five one-minute BTC candles with times 1..5."""
    return [
        Candle(ticker="BTC-USD", time=t, open=100.0 + t, high=102.0 + t,
               low=99.0 + t, close=101.0 + t, volume=500.0)
        for t in range(1, 6)
    ]


@pytest.fixture
def bullish_crossovers() -> List[CrossoverEvent]:
    """Two crossovers where the second is a valid entry."""
    return [
        CrossoverEvent(time=1, macd=MACDReading(cross=0.1), rsi=45.0,
                       stoch=StochReading(k=20.0, d=30.0)),
        CrossoverEvent(time=2, macd=MACDReading(cross=0.3), rsi=55.0,
                       stoch=StochReading(k=60.0, d=40.0)),
    ]
