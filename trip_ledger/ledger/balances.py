"""Per-member balance sheet: amount paid, fair share and net balance"""

from collections.abc import Sequence
from typing import Optional

from ..config.defaults import LedgerParams
from ..data.models import Expense, Member
from ..data.validators import SnapshotValidator
from ..errors import PrecisionDriftError
from ..logging.config import get_ledger_logger
from ..models.ledger import Balance

logger = get_ledger_logger(__name__)


def calculate_fair_share(total_spent: float, member_count: int) -> float:
    """
    Calculate the equal per-member portion of total spend

    Args:
        total_spent: Sum of all expense amounts
        member_count: Number of members in the roster

    Returns:
        Fair share, or 0.0 for an empty roster
    """
    if member_count <= 0:
        return 0.0
    return total_spent / member_count


def calculate_paid(member_id: str, expenses: Sequence[Expense]) -> float:
    """Sum of expense amounts paid by one member"""
    return sum(float(e.amount) for e in expenses if e.paid_by == member_id)


def calculate_balances(members: Sequence[Member], expenses: Sequence[Expense]) -> list[Balance]:
    """
    Calculate a Balance for every member, in roster order

    balance = paid - total_spent / member_count

    Does not validate input; use BalanceCalculator for checked computation.
    """
    total_spent = sum(float(e.amount) for e in expenses)
    share = calculate_fair_share(total_spent, len(members))

    balances = []
    for member in members:
        paid = calculate_paid(member.id, expenses)
        balances.append(Balance(
            member_id=member.id,
            name=member.name,
            paid=paid,
            share=share,
            balance=paid - share,
        ))
    return balances


class BalanceCalculator:
    """Validated balance sheet computation over an immutable snapshot"""

    def __init__(self, params: Optional[LedgerParams] = None):
        self.params = params or LedgerParams()
        self.validator = SnapshotValidator(self.params)

    def calculate(self, members: Sequence[Member], expenses: Sequence[Expense]) -> list[Balance]:
        """
        Calculate balances for a member roster and its expenses

        Args:
            members: Trip roster
            expenses: Recorded expenses, each paid by a roster member

        Returns:
            One Balance per member; empty for an empty roster

        Raises:
            InputValidationError: Unknown payer, bad amount, duplicate member,
                mixed currencies, or a ledger that does not close
        """
        self.validator.validate_members(members)
        self.validator.validate_expenses(expenses, members)

        if not members:
            return []

        balances = calculate_balances(members, expenses)
        self.check_closed(balances)

        logger.debug(
            "Balances calculated",
            member_count=len(members),
            expense_count=len(expenses),
            fair_share=balances[0].share,
        )
        return balances

    def check_closed(self, balances: Sequence[Balance]) -> float:
        """
        Check that balances sum to zero

        Drift above the zero-sum tolerance is logged; drift at or above the
        settlement threshold means the ledger cannot be settled and is rejected.

        Returns:
            The observed drift
        """
        drift = sum(b.balance for b in balances)

        if abs(drift) >= self.params.settlement_threshold:
            raise PrecisionDriftError(
                f"Balances sum to {drift:.6f}, ledger does not close",
                drift=drift,
                threshold=self.params.settlement_threshold
            )

        if abs(drift) > self.params.zero_sum_tolerance:
            logger.warning(
                "Balance drift above tolerance",
                drift=drift,
                tolerance=self.params.zero_sum_tolerance,
            )

        return drift
