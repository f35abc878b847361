"""
Entry point evaluation engine.

Coordinates the open-position check, the crossover source and the entry
rules:
Candles → Crossover Source → Crossovers → Entry Rules → Decision
"""

from collections.abc import Sequence
from typing import Optional

import structlog

from .config.defaults import IndicatorConfig, get_default_config
from .data.models import Candle, CrossoverEvent
from .errors import MissingDataError
from .positions.store import OpenPositionQuery
from .signals.rules import evaluate_crossovers, evaluate_pair
from .sources.base import CrossoverSource
from .utils.time import format_timestamp

logger = structlog.get_logger(__name__)


def scan_entry_points(
    crossovers: Sequence[CrossoverEvent],
    ticker: Optional[str] = None
) -> list[CrossoverEvent]:
    """
    Return every crossover that was a valid entry when it happened.

    Each crossover is only compared with the one before it, so a single
    forward pass gives the same answer as re-evaluating every prefix.
    """
    entries = []
    previous: Optional[CrossoverEvent] = None

    for current in crossovers:
        if previous is None:
            decision = evaluate_crossovers([current], ticker=ticker)
        else:
            decision = evaluate_pair(previous, current, ticker=ticker)

        if decision.valid:
            entries.append(current)
        previous = current

    return entries


class EntryPointEngine:
    """
    Decides whether to open a position on the latest crossover.

    Holds no state between calls; every decision depends only on the
    candles passed in, the configuration and the open-position query.
    """

    def __init__(
        self,
        crossover_source: CrossoverSource,
        position_query: OpenPositionQuery,
        config: Optional[IndicatorConfig] = None
    ) -> None:
        self.logger = logger
        self.crossover_source = crossover_source
        self.position_query = position_query
        self.config = config if config is not None else get_default_config()

    async def should_enter(self, candles: Sequence[Candle]) -> bool:
        """
        Check whether the most recent candle carries a valid entry signal.

        Args:
            candles: Non-empty, time-ordered candles for one instrument

        Returns:
            True if a long position should be opened now

        Raises:
            MissingDataError: If ``candles`` is empty
        """
        if not candles:
            raise MissingDataError("No candles provided for entry check", data_type="candles")

        ticker = candles[0].ticker

        # Never compute indicators for an instrument already in a position
        if self.position_query.has_open_position(ticker):
            self.logger.debug("Entry position already exists", ticker=ticker)
            return False

        crossovers = await self.crossover_source.compute_crossovers(candles, self.config)
        if not crossovers:
            self.logger.debug("No crossovers in candle window", ticker=ticker)
            return False

        recent_crossover = crossovers[-1]
        recent_candle = candles[-1]
        if recent_crossover.time != recent_candle.time:
            self.logger.debug(
                "Latest crossover is not on the current candle",
                ticker=ticker,
                crossover_time=format_timestamp(recent_crossover.time),
                candle_time=format_timestamp(recent_candle.time)
            )
            return False

        decision = evaluate_crossovers(crossovers, ticker=ticker)

        self.logger.info(
            "Live entry decision",
            ticker=ticker,
            crossover_time=format_timestamp(recent_crossover.time),
            should_enter=decision.valid,
            failed_rule=decision.failed_rule.value if decision.failed_rule else None,
            reason=decision.reason
        )
        return decision.valid

    async def historical_entry_points(self, candles: Sequence[Candle]) -> list[CrossoverEvent]:
        """
        Enumerate every past crossover that qualified as an entry point.

        Each crossover is judged only on crossovers up to and including
        itself. Open positions are not consulted.

        Raises:
            MissingDataError: If ``candles`` is empty
        """
        if not candles:
            raise MissingDataError("No candles provided for historical entries", data_type="candles")

        ticker = candles[0].ticker

        self.logger.info(
            "Calculating historical entry points",
            ticker=ticker,
            window_start=format_timestamp(candles[0].time),
            window_end=format_timestamp(candles[-1].time)
        )

        crossovers = await self.crossover_source.compute_crossovers(candles, self.config)
        entries = scan_entry_points(crossovers, ticker=ticker)

        self.logger.info(
            "Found historical entry points",
            ticker=ticker,
            crossover_count=len(crossovers),
            entry_count=len(entries),
            entry_times=[format_timestamp(c.time) for c in entries]
        )
        return entries
