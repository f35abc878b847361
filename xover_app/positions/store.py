"""
Open position state consulted before any entry evaluation.

The engine only needs to know whether a ticker already holds a position;
``OpenPositionStore`` is the in-process implementation used by the live
loop and by tests.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

import structlog

from ..data.models import Timestamp

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class OpenPosition:
    """A position opened on an entry signal."""
    ticker: str
    opened_at: Timestamp
    entry_price: Optional[float] = None


class OpenPositionQuery(ABC):
    """Read-only view of open positions."""

    @abstractmethod
    def has_open_position(self, ticker: str) -> bool:
        """Return True if ``ticker`` currently holds an open position."""
        pass


class OpenPositionStore(OpenPositionQuery):
    """In-memory open positions keyed by ticker."""

    def __init__(self) -> None:
        self.logger = logger
        self.positions: dict[str, OpenPosition] = {}

    def get_open_position(self, ticker: str) -> Optional[OpenPosition]:
        """Return the open position for ``ticker``, if any."""
        return self.positions.get(ticker)

    def has_open_position(self, ticker: str) -> bool:
        return ticker in self.positions

    def open_position(self, position: OpenPosition) -> None:
        """Record a newly opened position, replacing any previous one."""
        previous = self.positions.get(position.ticker)
        self.positions[position.ticker] = position

        self.logger.info(
            "Recorded open position",
            ticker=position.ticker,
            opened_at=position.opened_at,
            entry_price=position.entry_price,
            replaced=previous is not None
        )

    def close_position(self, ticker: str) -> Optional[OpenPosition]:
        """Remove and return the open position for ``ticker``."""
        position = self.positions.pop(ticker, None)

        if position is None:
            self.logger.warning("No open position to close", ticker=ticker)
        else:
            self.logger.info("Closed position", ticker=ticker)

        return position

    def open_tickers(self) -> list[str]:
        """Tickers with an open position, sorted."""
        return sorted(self.positions)
