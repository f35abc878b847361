"""Crossover source backed by precomputed crossovers."""

from collections.abc import Iterable, Sequence

import structlog

from ..config.defaults import IndicatorConfig
from ..data.models import Candle, CrossoverEvent
from ..errors import MissingDataError, TemporalDataError
from .base import CrossoverSource

logger = structlog.get_logger(__name__)


class ReplayCrossoverSource(CrossoverSource):
    """
    Serves crossovers exported from an indicator service.

    The configuration is not used: the crossovers were already computed
    with whatever periods the exporter ran.
    """

    def __init__(self, crossovers: Iterable[CrossoverEvent]) -> None:
        self.crossovers = tuple(crossovers)

        for previous, current in zip(self.crossovers, self.crossovers[1:]):
            if not previous.time < current.time:
                raise TemporalDataError(
                    "Replay crossovers must be in ascending time order",
                    timestamp=current.time,
                    expected_timestamp=previous.time
                )

    async def compute_crossovers(
        self,
        candles: Sequence[Candle],
        config: IndicatorConfig
    ) -> list[CrossoverEvent]:
        """Return the stored crossovers inside the candle window."""
        if not candles:
            raise MissingDataError("No candles provided for crossover replay", data_type="candles")

        start, end = candles[0].time, candles[-1].time
        window = [c for c in self.crossovers if start <= c.time <= end]

        logger.debug(
            "Replayed crossovers for candle window",
            ticker=candles[0].ticker,
            candle_count=len(candles),
            crossover_count=len(window)
        )
        return window
