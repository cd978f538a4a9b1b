"""
Debt settlement planning.

Turns member balances into point-to-point transfers using a greedy
two-pointer sweep over balances sorted from largest creditor to largest
debtor. The sweep is bounded by n-1 transfers for n members; it does not
search for the minimum possible transfer count.
"""

from collections.abc import Sequence
from typing import Optional

from ..config.defaults import LedgerParams
from ..errors import PrecisionDriftError
from ..logging.config import get_ledger_logger, log_settlement
from ..models.ledger import Balance, Settlement
from ..utils.money import allocate_minor_units, floor_minor_units, from_minor_units

logger = get_ledger_logger(__name__)


def apply_settlements(balances: Sequence[Balance],
                      settlements: Sequence[Settlement]) -> dict[str, float]:
    """
    Apply transfers to balances and return what is left per member.

    A debtor paying moves their balance up; a creditor receiving moves
    theirs down. A complete plan leaves every residual near zero.
    """
    residual = {b.member_id: b.balance for b in balances}
    for s in settlements:
        residual[s.from_member_id] = residual.get(s.from_member_id, 0.0) + s.amount
        residual[s.to_member_id] = residual.get(s.to_member_id, 0.0) - s.amount
    return residual


def greedy_settle(units: list[int], threshold_units: int = 1) -> list[tuple[int, int, int]]:
    """
    Two-pointer sweep over balances in minor units, sorted descending.

    Every transfer closes the creditor, the debtor or both, so the sweep ends
    after at most len(units) - 1 transfers with every balance at zero. A
    transfer smaller than threshold_units is left out of the result while the
    amount it leaves outstanding on each side stays below threshold_units.

    Args:
        units: Balances in minor units, largest creditor first; modified in place
        threshold_units: Smallest transfer worth recording

    Returns:
        (debtor_index, creditor_index, amount_units) for every recorded transfer
    """
    transfers = []
    outstanding = [0] * len(units)
    i = 0
    j = len(units) - 1

    while i < j:
        if units[i] <= 0:
            i += 1
            continue
        if units[j] >= 0:
            j -= 1
            continue

        amount = min(units[i], -units[j])
        units[i] -= amount
        units[j] += amount

        if (amount < threshold_units
                and outstanding[i] + amount < threshold_units
                and outstanding[j] + amount < threshold_units):
            outstanding[i] += amount
            outstanding[j] += amount
        else:
            transfers.append((j, i, amount))

    return transfers


class SettlementPlanner:
    """Plans the transfers that zero every balance"""

    def __init__(self, params: Optional[LedgerParams] = None):
        self.params = params or LedgerParams()

    @property
    def threshold_units(self) -> int:
        """Settlement threshold in whole minor units, rounded down, at least one."""
        return max(1, floor_minor_units(self.params.settlement_threshold,
                                        self.params.currency_precision))

    def plan(self, balances: Sequence[Balance]) -> list[Settlement]:
        """
        Produce debtor -> creditor settlements for a closed ledger.

        Args:
            balances: Member balances summing to zero; not modified

        Returns:
            Settlements with positive amounts rounded to currency precision,
            at most len(balances) - 1 of them

        Raises:
            PrecisionDriftError: If the balances do not sum to zero within
                the settlement threshold, or the plan fails to close them
        """
        threshold = self.params.settlement_threshold
        drift = sum(b.balance for b in balances)
        if abs(drift) >= threshold:
            raise PrecisionDriftError(
                f"Cannot settle balances that sum to {drift:.6f}",
                drift=drift,
                threshold=threshold
            )

        precision = self.params.currency_precision
        ordered = sorted(balances, key=lambda b: b.balance, reverse=True)
        units = allocate_minor_units([b.balance for b in ordered], precision)

        settlements = []
        for debtor_idx, creditor_idx, amount_units in greedy_settle(units, self.threshold_units):
            debtor = ordered[debtor_idx]
            creditor = ordered[creditor_idx]
            settlement = Settlement(
                from_member_id=debtor.member_id,
                from_member_name=debtor.name,
                to_member_id=creditor.member_id,
                to_member_name=creditor.name,
                amount=from_minor_units(amount_units, precision),
            )
            settlements.append(settlement)
            log_settlement(logger, settlement.from_member_id,
                           settlement.to_member_id, settlement.amount)

        self.verify(balances, settlements)

        logger.info(
            "Settlement plan ready",
            member_count=len(balances),
            settlement_count=len(settlements),
        )
        return settlements

    def verify(self, balances: Sequence[Balance], settlements: Sequence[Settlement]) -> None:
        """Check that applying the settlements closes every balance."""
        residual = apply_settlements(balances, settlements)
        worst_id, worst = max(residual.items(), key=lambda kv: abs(kv[1]),
                              default=(None, 0.0))
        if abs(worst) > self.params.settlement_threshold:
            raise PrecisionDriftError(
                f"Settlements leave {worst_id!r} with {worst:.6f} outstanding",
                drift=worst,
                threshold=self.params.settlement_threshold,
                context={"member_id": worst_id}
            )
