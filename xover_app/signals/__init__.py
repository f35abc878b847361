"""
Entry signal rules module.

Crossover-pair verification: MACD momentum, RSI strength and stochastic
alignment checks with human-readable failure reasons.
"""

from .rules import (
    EntryDecision,
    RuleName,
    RuleResult,
    evaluate_crossovers,
    evaluate_pair,
    should_enter_from_crossovers,
)

__all__ = [
    "EntryDecision",
    "RuleName",
    "RuleResult",
    "evaluate_crossovers",
    "evaluate_pair",
    "should_enter_from_crossovers",
]
