"""
Snapshot validation for ledger inputs.

This module checks member rosters, expenses and planned costs before any
arithmetic runs, so that computations either see clean input or abort with
a typed InputValidationError.
"""

from collections.abc import Iterable, Sequence
from typing import Optional

from ..config.defaults import LedgerParams
from ..errors import (
    CurrencyMismatchError,
    DuplicateMemberError,
    InvalidAmountError,
    UnknownPayerError,
)
from ..utils.money import is_valid_amount
from .models import Expense, Member, PlannedCostItem


class SnapshotValidator:
    """Validates ledger snapshots against data quality rules."""

    def __init__(self, params: Optional[LedgerParams] = None):
        self.params = params or LedgerParams()

    def validate_members(self, members: Sequence[Member]) -> None:
        """
        Validate the member roster.

        Raises:
            DuplicateMemberError: If a member id appears twice
        """
        seen: set[str] = set()
        for member in members:
            if member.id in seen:
                raise DuplicateMemberError(
                    f"Member {member.id!r} appears more than once in the roster",
                    member_id=member.id
                )
            seen.add(member.id)

    def validate_expenses(self, expenses: Sequence[Expense],
                          members: Optional[Sequence[Member]] = None) -> None:
        """
        Validate expense amounts, payers and currencies.

        Args:
            expenses: Recorded expenses
            members: Roster to check payers against; payers are not checked if None

        Raises:
            InvalidAmountError: Negative, NaN or infinite amount
            UnknownPayerError: Payer not in the roster
            CurrencyMismatchError: More than one currency with uniform currency required
        """
        roster = {m.id for m in members} if members is not None else None

        for expense in expenses:
            self._check_amount(expense.id, expense.amount)

            if roster is not None and expense.paid_by not in roster:
                raise UnknownPayerError(
                    f"Expense {expense.id!r} is paid by {expense.paid_by!r}, "
                    f"who is not a trip member",
                    expense_id=expense.id,
                    payer_id=expense.paid_by
                )

        if self.params.require_uniform_currency:
            self.validate_currency(e.currency for e in expenses)

    def validate_planned_items(self, items: Sequence[PlannedCostItem]) -> None:
        """Validate planned cost estimates; missing estimates are allowed."""
        for item in items:
            if item.estimated_amount is not None:
                self._check_amount(item.id, item.estimated_amount)

    def validate_currency(self, currencies: Iterable[Optional[str]]) -> Optional[str]:
        """
        Ensure every given currency code is the same.

        Returns:
            The shared currency code, or None when no currency was given
        """
        codes = sorted({c.upper() for c in currencies if c})
        if len(codes) > 1:
            raise CurrencyMismatchError(
                f"Expenses use more than one currency: {', '.join(codes)}",
                currencies=codes
            )
        return codes[0] if codes else None

    def _check_amount(self, record_id: str, amount: float) -> None:
        if not is_valid_amount(amount):
            raise InvalidAmountError(
                f"Amount {amount!r} on {record_id!r} must be a finite, non-negative number",
                record_id=record_id,
                amount=amount
            )
