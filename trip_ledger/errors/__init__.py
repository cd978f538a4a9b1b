"""
Error classification system for the trip ledger.

Input validation failures are recoverable and are surfaced to callers as
typed failure results; system failures indicate bugs or bad configuration.
"""

from .input_validation import (
    InputValidationError,
    UnknownPayerError,
    InvalidAmountError,
    DuplicateMemberError,
    CurrencyMismatchError,
    MalformedRecordError,
    PrecisionDriftError,
)
from .system_failures import (
    LedgerComputationError,
    ConfigurationError,
)
from .degenerate_input import DegenerateInputWarning

__all__ = [
    # Input Validation Errors
    "InputValidationError",
    "UnknownPayerError",
    "InvalidAmountError",
    "DuplicateMemberError",
    "CurrencyMismatchError",
    "MalformedRecordError",
    "PrecisionDriftError",
    # System Failures
    "LedgerComputationError",
    "ConfigurationError",
    # Notes
    "DegenerateInputWarning",
]
