"""
Centralized logging configuration for the stock tracker.

This module provides standardized logging configuration using structlog
for all components. Match decisions and ledger updates are logged through
the helpers here so every run leaves a consistent audit trail.
"""
import logging
import sys
from typing import Any, Optional, TextIO

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    stream: Optional[TextIO] = None
) -> None:
    """
    Configure structlog for reconciliation runs and scripts.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON lines for log shipping; otherwise
            colored console output
        include_timestamp: Include an ISO timestamp on every event
        stream: Output stream, stdout when omitted
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        stream=stream or sys.stdout,
        format="%(message)s"
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.format_exc_info,
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=stream is None))

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


def get_match_logger(name: str) -> FilteringBoundLogger:
    """Logger bound for name matching decisions."""
    return get_logger(name).bind(
        subsystem="matching",
        audit_trail=True
    )


def get_ledger_logger(name: str) -> FilteringBoundLogger:
    """Logger bound for ledger row updates."""
    return get_logger(name).bind(
        subsystem="ledger",
        audit_trail=True
    )


def log_match_decision(
    logger: FilteringBoundLogger,
    recorded_name: str,
    matched_name: Optional[str],
    strategy: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a name matching decision with standardized format.

    Args:
        logger: Structlog logger instance
        recorded_name: Name held by the ledger
        matched_name: Candidate chosen, or None when nothing matched
        strategy: Cascade strategy that produced the result
        context: Additional context data
    """
    bound_logger = logger.bind(
        recorded_name=recorded_name,
        matched_name=matched_name,
        strategy=strategy,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if matched_name is None:
        bound_logger.debug("No match found")
    else:
        bound_logger.debug("Name matched")


def log_ledger_update(
    logger: FilteringBoundLogger,
    stock_name: str,
    status: str,
    strategy: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the outcome for a single ledger row.

    Args:
        logger: Structlog logger instance
        stock_name: Ledger identity key
        status: Row status (updated, date-only-updated, unmatched, new)
        strategy: Cascade strategy used, "none" when unmatched
        context: Additional context data
    """
    bound_logger = logger.bind(
        stock_name=stock_name,
        status=status,
        strategy=strategy,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if status == "unmatched":
        bound_logger.warning("Ledger row not updated")
    else:
        bound_logger.info("Ledger row reconciled")
