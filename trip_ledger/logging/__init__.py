"""
Logging configuration and utilities for the trip ledger.
"""
from .config import configure_logging, get_ledger_logger, get_logger

__all__ = ["configure_logging", "get_ledger_logger", "get_logger"]
