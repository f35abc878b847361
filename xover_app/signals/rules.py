"""
Crossover-pair entry rules.

A crossover is a valid long entry when, compared with the crossover right
before it, MACD momentum is accelerating, RSI is rising and above 50, and
the stochastic lines are bullishly aligned outside the exhaustion bands.
Rules run in that order and stop at the first failure.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, NamedTuple, Optional

from ..data.models import CrossoverEvent
from ..logging.config import get_gating_logger, log_rule_decision
from ..utils.time import format_timestamp

gating_logger = get_gating_logger(__name__)

RSI_BULLISH_THRESHOLD = 50.0


class StochBand(NamedTuple):
    """Inclusive (k, d) region where an entry is refused."""
    k_low: float
    k_high: float
    d_low: float
    d_high: float

    def contains(self, k: float, d: float) -> bool:
        return in_range(k, self.k_low, self.k_high) and in_range(d, self.d_low, self.d_high)


# Overbought zones that historically precede reversals
STOCH_BLACKLIST: tuple[StochBand, ...] = (
    StochBand(90, 99, 90, 99),
    StochBand(80, 89, 80, 89),
    StochBand(80, 84, 70, 79),
)


class RuleName(str, Enum):
    """Entry rules, in evaluation order."""
    HISTORY = "history"
    MACD = "macd"
    RSI = "rsi"
    STOCH = "stoch"


@dataclass(frozen=True)
class RuleResult:
    """Outcome of a single entry rule."""
    rule: RuleName
    passed: bool
    reason: str
    context: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class EntryDecision:
    """Outcome of checking the last crossover of a sequence."""
    valid: bool
    crossover: Optional[CrossoverEvent] = None
    failed_rule: Optional[RuleName] = None
    reason: Optional[str] = None

    @classmethod
    def accepted(cls, crossover: CrossoverEvent) -> "EntryDecision":
        """Create a valid entry decision."""
        return cls(valid=True, crossover=crossover, reason="All entry rules passed")

    @classmethod
    def rejected(cls, result: RuleResult,
                 crossover: Optional[CrossoverEvent] = None) -> "EntryDecision":
        """Create a disqualified decision from the failing rule."""
        return cls(valid=False, crossover=crossover, failed_rule=result.rule, reason=result.reason)


def in_range(number: float, low: float, high: float) -> bool:
    """Inclusive range check."""
    return low <= number <= high


def verify_macd(previous: CrossoverEvent, current: CrossoverEvent) -> RuleResult:
    """MACD cross must be strictly higher than at the previous crossover."""
    context = {"previous_cross": previous.macd.cross, "current_cross": current.macd.cross}

    if not current.macd.cross > previous.macd.cross:
        return RuleResult(
            RuleName.MACD, False,
            f"MACD crossover wasn't higher than previous crossover, "
            f"{previous.macd.cross} -> {current.macd.cross}",
            context
        )

    return RuleResult(
        RuleName.MACD, True,
        f"MACD crossover rose {previous.macd.cross} -> {current.macd.cross}",
        context
    )


def verify_rsi(previous: CrossoverEvent, current: CrossoverEvent) -> RuleResult:
    """RSI must be rising and in bullish territory."""
    context = {"previous_rsi": previous.rsi, "current_rsi": current.rsi}

    if not current.rsi > previous.rsi:
        return RuleResult(
            RuleName.RSI, False,
            f"RSI wasn't higher than the previous crossover, {previous.rsi} -> {current.rsi}",
            context
        )

    if not current.rsi > RSI_BULLISH_THRESHOLD:
        return RuleResult(
            RuleName.RSI, False,
            f"RSI wasn't above {RSI_BULLISH_THRESHOLD:g}, {current.rsi}",
            context
        )

    return RuleResult(
        RuleName.RSI, True,
        f"RSI rose {previous.rsi} -> {current.rsi}",
        context
    )


def verify_stoch(current: CrossoverEvent) -> RuleResult:
    """%K must lead %D and the pair must sit outside every blacklisted band."""
    k, d = current.stoch.k, current.stoch.d
    context = {"k": k, "d": d}

    if not k > d:
        return RuleResult(
            RuleName.STOCH, False,
            f"STOCH wasn't favorable, k:{k} d:{d}",
            context
        )

    for band in STOCH_BLACKLIST:
        if band.contains(k, d):
            return RuleResult(
                RuleName.STOCH, False,
                f"STOCH falls within blacklisted ranges, k:{k} d:{d}",
                {**context, "band": band._asdict()}
            )

    return RuleResult(RuleName.STOCH, True, f"STOCH favorable, k:{k} d:{d}", context)


def _verify_stoch_pair(previous: CrossoverEvent, current: CrossoverEvent) -> RuleResult:
    return verify_stoch(current)


_PAIR_RULES: tuple[Callable[[CrossoverEvent, CrossoverEvent], RuleResult], ...] = (
    verify_macd,
    verify_rsi,
    _verify_stoch_pair,
)


def evaluate_pair(
    previous: CrossoverEvent,
    current: CrossoverEvent,
    ticker: Optional[str] = None
) -> EntryDecision:
    """
    Check ``current`` against the crossover immediately before it.

    Args:
        previous: Second-to-last crossover
        current: Crossover being judged
        ticker: Instrument, for logging only

    Returns:
        EntryDecision carrying the first failing rule, if any
    """
    gating_logger.debug(
        "Checking crossover",
        ticker=ticker,
        crossover_time=format_timestamp(current.time)
    )

    for rule in _PAIR_RULES:
        result = rule(previous, current)
        log_rule_decision(
            gating_logger,
            rule_name=result.rule.value,
            passed=result.passed,
            reason=result.reason,
            ticker=ticker,
            context=result.context
        )
        if not result.passed:
            return EntryDecision.rejected(result, current)

    return EntryDecision.accepted(current)


def evaluate_crossovers(
    crossovers: Sequence[CrossoverEvent],
    ticker: Optional[str] = None
) -> EntryDecision:
    """
    Decide whether the final crossover of ``crossovers`` is a valid entry.

    Fewer than two crossovers is a disqualification (nothing to compare
    against), reported with ``RuleName.HISTORY``.
    """
    if not crossovers or len(crossovers) < 2:
        result = RuleResult(
            RuleName.HISTORY, False,
            "No previous crossover found to compare against",
            {"crossover_count": len(crossovers) if crossovers else 0}
        )
        log_rule_decision(
            gating_logger,
            rule_name=result.rule.value,
            passed=False,
            reason=result.reason,
            ticker=ticker,
            context=result.context
        )
        return EntryDecision.rejected(result, crossovers[-1] if crossovers else None)

    return evaluate_pair(crossovers[-2], crossovers[-1], ticker=ticker)


def should_enter_from_crossovers(
    crossovers: Sequence[CrossoverEvent],
    ticker: Optional[str] = None
) -> bool:
    """Boolean form of :func:`evaluate_crossovers`."""
    return evaluate_crossovers(crossovers, ticker=ticker).valid
