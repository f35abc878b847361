"""Tests for the replay crossover source."""

import asyncio
import pytest

from xover_app.config.defaults import get_default_config
from xover_app.data.models import CrossoverEvent, MACDReading, StochReading
from xover_app.errors import MissingDataError, TemporalDataError
from xover_app.sources.base import CrossoverSource
from xover_app.sources.replay import ReplayCrossoverSource


def _crossover(time) -> CrossoverEvent:
    return CrossoverEvent(time=time, macd=MACDReading(cross=0.1), rsi=50.0,
                          stoch=StochReading(k=50.0, d=50.0))


class TestReplayCrossoverSource:
    """Test replaying exported crossovers."""

    def test_is_crossover_source(self):
        assert isinstance(ReplayCrossoverSource([]), CrossoverSource)

    def test_filters_to_candle_window(self, candles):
        source = ReplayCrossoverSource([_crossover(t) for t in (0, 1, 3, 5, 8)])
        window = asyncio.run(source.compute_crossovers(candles, get_default_config()))
        assert [c.time for c in window] == [1, 3, 5]

    def test_no_crossovers_in_window(self, candles):
        source = ReplayCrossoverSource([_crossover(10)])
        assert asyncio.run(source.compute_crossovers(candles, get_default_config())) == []

    def test_returns_new_list(self, candles):
        source = ReplayCrossoverSource([_crossover(2)])
        first = asyncio.run(source.compute_crossovers(candles, get_default_config()))
        first.clear()
        second = asyncio.run(source.compute_crossovers(candles, get_default_config()))
        assert len(second) == 1

    def test_empty_candles_raise(self):
        source = ReplayCrossoverSource([_crossover(1)])
        with pytest.raises(MissingDataError):
            asyncio.run(source.compute_crossovers([], get_default_config()))

    @pytest.mark.parametrize("times", [(2, 1), (1, 1)])
    def test_unordered_crossovers_rejected(self, times):
        with pytest.raises(TemporalDataError):
            ReplayCrossoverSource([_crossover(t) for t in times])
