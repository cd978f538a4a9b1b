"""
Centralized logging configuration for the trip ledger.

This module provides standardized logging configuration using structlog
for all components. All logging throughout the library should use this
configuration to ensure consistent formatting and structured logging.
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
    Configure structlog for the entire library.

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
    logging.getLogger().setLevel(log_level)

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
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

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


def get_ledger_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the ledger subsystem.

    Settlement and budget decisions are logged through this logger so they
    can be filtered as one audit trail.
    """
    return get_logger(name).bind(
        subsystem="ledger",
        audit_trail=True
    )


def log_settlement(
    logger: FilteringBoundLogger,
    from_member_id: str,
    to_member_id: str,
    amount: float,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a proposed settlement transfer with standardized format.

    Args:
        logger: Structlog logger instance
        from_member_id: Debtor paying the transfer
        to_member_id: Creditor receiving the transfer
        amount: Transfer amount in currency units
        context: Additional context data
    """
    bound_logger = logger.bind(
        from_member_id=from_member_id,
        to_member_id=to_member_id,
        amount=amount,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("Settlement proposed")


def log_budget_status(
    logger: FilteringBoundLogger,
    target_budget: Optional[float],
    combined_total: float,
    over_budget: bool,
    overage: Optional[float] = None,
) -> None:
    """Log the outcome of a budget reconciliation."""
    bound_logger = logger.bind(
        target_budget=target_budget,
        combined_total=combined_total,
        budget_result="OVER" if over_budget else "WITHIN",
    )

    if over_budget:
        bound_logger.warning("Budget exceeded", overage=overage)
    else:
        bound_logger.info("Budget reconciled")
