"""
Logging configuration and utilities for the crossover entry engine.
"""
from .config import configure_logging, get_gating_logger, get_logger, log_rule_decision

__all__ = ["configure_logging", "get_logger", "get_gating_logger", "log_rule_decision"]
