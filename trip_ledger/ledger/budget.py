"""Budget-vs-spend reconciliation and category breakdown"""

from collections.abc import Sequence
from typing import Optional

from ..config.defaults import LedgerParams
from ..data.models import Expense, PlannedCostItem
from ..data.validators import SnapshotValidator
from ..logging.config import get_ledger_logger, log_budget_status
from ..models.ledger import BudgetStatus

logger = get_ledger_logger(__name__)


def calculate_progress(amount: float, target_budget: Optional[float],
                       cap_pct: float = 100.0) -> float:
    """
    Percentage of the target budget used by an amount, clamped for display

    Returns 0.0 when there is no positive target budget.
    """
    if target_budget is None or target_budget <= 0:
        return 0.0
    pct = 100.0 * amount / target_budget
    return min(max(pct, 0.0), cap_pct)


class BudgetReconciler:
    """Compares a target budget with actual and planned spend"""

    def __init__(self, params: Optional[LedgerParams] = None):
        self.params = params or LedgerParams()
        self.validator = SnapshotValidator(self.params)

    def reconcile(self, target_budget: Optional[float], expenses: Sequence[Expense],
                  planned_items: Sequence[PlannedCostItem] = ()) -> BudgetStatus:
        """
        Calculate budget status for a snapshot

        Args:
            target_budget: Target budget, None when no budget is set
            expenses: Recorded (actual) expenses
            planned_items: Forecast costs from the itinerary

        Returns:
            BudgetStatus; overage is None without a budget, 0 within budget
        """
        self.validator.validate_expenses(expenses)
        self.validator.validate_planned_items(planned_items)

        total_actual = sum(float(e.amount) for e in expenses)
        total_planned = sum(float(p.amount) for p in planned_items)
        combined = total_actual + total_planned

        if target_budget is None:
            status = BudgetStatus(
                target_budget=None,
                total_actual=total_actual,
                total_planned=total_planned,
                combined_total=combined,
            )
            logger.debug("No budget set", combined_total=combined)
            return status

        target_budget = float(target_budget)
        over_budget = combined > target_budget
        cap = self.params.progress_cap_pct

        # Stacked bars: planned fills whatever the spent bar leaves
        spent_pct = calculate_progress(total_actual, target_budget, cap)
        planned_pct = min(calculate_progress(total_planned, target_budget, cap),
                          max(0.0, cap - spent_pct))

        status = BudgetStatus(
            target_budget=target_budget,
            total_actual=total_actual,
            total_planned=total_planned,
            combined_total=combined,
            over_budget=over_budget,
            overage=combined - target_budget if over_budget else 0.0,
            remaining=max(target_budget - combined, 0.0),
            progress_pct=calculate_progress(combined, target_budget, cap),
            spent_progress_pct=spent_pct,
            planned_progress_pct=planned_pct,
        )

        log_budget_status(logger, target_budget, combined, over_budget, status.overage)
        return status

    def category_totals(self, expenses: Sequence[Expense]) -> dict[str, float]:
        """
        Sum actual spend per category, largest first

        Uncategorised expenses are grouped under the default category.
        """
        totals: dict[str, float] = {}
        for expense in expenses:
            key = expense.category or self.params.default_category
            totals[key] = totals.get(key, 0.0) + float(expense.amount)

        return dict(sorted(totals.items(), key=lambda kv: (-kv[1], kv[0])))
