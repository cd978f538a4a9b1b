"""
System failure error classifications.

These exceptions signal bugs or misconfiguration rather than bad snapshots,
so retrying with the same input will not help.
"""

from typing import Any, Optional


class LedgerComputationError(Exception):
    """Unexpected failure while computing balances, settlements or budget."""

    def __init__(self, message: str, stage: Optional[str] = None,
                 context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.stage = stage
        self.context = context or {}
        self.recoverable = False


class ConfigurationError(Exception):
    """Configuration overrides failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None):
        super().__init__(message)
        self.errors = errors or []
        self.recoverable = False
