"""Default indicator parameters forwarded to the crossover source."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MACDParams:
    """Moving-average convergence/divergence periods."""
    fast: int = 12                  # Fast EMA period
    slow: int = 26                  # Slow EMA period
    signal: int = 14                # Signal line EMA period


@dataclass(frozen=True)
class RSIParams:
    """Relative strength index parameters."""
    period: int = 10


@dataclass(frozen=True)
class StochParams:
    """Stochastic oscillator periods."""
    k: int = 14                     # %K lookback
    slowing: int = 3                # %K smoothing
    d: int = 3                      # %D moving average


@dataclass(frozen=True)
class IndicatorConfig:
    """Complete indicator configuration."""
    macd: MACDParams
    rsi: RSIParams
    stoch: StochParams


def get_default_config() -> IndicatorConfig:
    """Get the default configuration instance."""
    return IndicatorConfig(
        macd=MACDParams(),
        rsi=RSIParams(),
        stoch=StochParams(),
    )
