"""Base class for crossover sources."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from ..config.defaults import IndicatorConfig
from ..data.models import Candle, CrossoverEvent


class CrossoverSource(ABC):
    """Computes indicator crossovers for a candle window."""

    @abstractmethod
    async def compute_crossovers(
        self,
        candles: Sequence[Candle],
        config: IndicatorConfig
    ) -> list[CrossoverEvent]:
        """
        Compute the crossovers for ``candles``.

        Args:
            candles: Time-ordered candles for a single instrument
            config: Indicator periods to compute with

        Returns:
            Crossovers in ascending time order, possibly empty

        Raises:
            DataQualityError: If ``candles`` is empty or malformed
        """
        pass
