"""
Centralized logging configuration for the crossover entry engine.

This module provides standardized logging configuration using structlog
for all components. Rule decisions are logged through a dedicated gating
logger so every pass/fail carries the same structured fields.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_gating_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for entry rule decisions.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for rule decisions
    """
    logger = get_logger(name)

    return logger.bind(
        subsystem="entry_rules",
        audit_trail=True
    )


def log_rule_decision(
    logger: FilteringBoundLogger,
    rule_name: str,
    passed: bool,
    reason: str,
    ticker: Optional[str] = None,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log an entry rule decision with standardized format.

    Args:
        logger: Structlog logger instance
        rule_name: Name of the rule being evaluated
        passed: Whether the rule passed or failed
        reason: Detailed reason for the decision
        ticker: Instrument the crossovers belong to, when known
        context: Additional context data
    """
    bound_logger = logger.bind(
        rule_name=rule_name,
        rule_result="PASS" if passed else "FAIL",
        ticker=ticker,
        reason=reason,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if passed:
        bound_logger.debug("Entry rule passed")
    else:
        bound_logger.info("Entry rule failed")
