"""
Input validation error classifications for ledger snapshots.

These exceptions describe snapshots the ledger refuses to compute on. They
are recoverable: the caller fixes the input and recomputes.
"""

from typing import Any, Optional


class InputValidationError(Exception):
    """Base class for snapshot problems that abort a single computation."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class UnknownPayerError(InputValidationError):
    """An expense names a payer that is not in the member roster."""

    def __init__(self, message: str, expense_id: Optional[str] = None,
                 payer_id: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.expense_id = expense_id
        self.payer_id = payer_id


class InvalidAmountError(InputValidationError):
    """A monetary amount is negative, NaN or infinite."""

    def __init__(self, message: str, record_id: Optional[str] = None,
                 amount: Optional[float] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.record_id = record_id
        self.amount = amount


class DuplicateMemberError(InputValidationError):
    """The roster lists the same member id more than once."""

    def __init__(self, message: str, member_id: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.member_id = member_id


class CurrencyMismatchError(InputValidationError):
    """Expenses in one snapshot use more than one currency."""

    def __init__(self, message: str, currencies: Optional[list[str]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.currencies = currencies or []


class MalformedRecordError(InputValidationError):
    """A raw data-API record cannot be turned into a model."""

    def __init__(self, message: str, record_type: Optional[str] = None,
                 field: Optional[str] = None, raw_value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.record_type = record_type
        self.field = field
        self.raw_value = raw_value


class PrecisionDriftError(InputValidationError):
    """Summation drift left the ledger open by more than the settlement threshold."""

    def __init__(self, message: str, drift: Optional[float] = None,
                 threshold: Optional[float] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.drift = drift
        self.threshold = threshold
