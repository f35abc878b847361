"""
Canonical data models for candles and indicator crossovers.

This module defines immutable data structures shared by the crossover
sources and the entry decision engine.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

# Epoch milliseconds or an aware datetime; both are orderable
Timestamp = Union[int, float, datetime]


@dataclass(frozen=True)
class Candle:
    """One bar of price history for a single instrument."""
    ticker: str         # Instrument identifier
    time: Timestamp     # Bar open time
    open: float        # Opening price
    high: float        # High price
    low: float         # Low price
    close: float       # Closing price
    volume: float = 0.0


@dataclass(frozen=True)
class MACDReading:
    """MACD values at a crossover."""
    cross: float                       # Crossover momentum metric
    macd: Optional[float] = None       # MACD line
    signal: Optional[float] = None     # Signal line
    histogram: Optional[float] = None  # MACD - signal


@dataclass(frozen=True)
class StochReading:
    """Stochastic oscillator lines (0-100)."""
    k: float
    d: float


@dataclass(frozen=True)
class CrossoverEvent:
    """Indicator snapshot at the bar where a monitored indicator crossed."""
    time: Timestamp
    macd: MACDReading
    rsi: float
    stoch: StochReading
