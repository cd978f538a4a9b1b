"""
Ledger facade.

Composes the ledger pipeline for the presentation layer:
Snapshot → Balances → Settlements, and Snapshot → Budget status.
"""

import warnings
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Optional

import structlog

from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .data.entries import unify_entries
from .data.filters import ExpenseFilter
from .data.models import Expense, LedgerEntry, Member, PlannedCostItem
from .data.parsers import parse_expenses, parse_itinerary_items, parse_members
from .errors import (
    ConfigurationError,
    DegenerateInputWarning,
    InputValidationError,
    LedgerComputationError,
)
from .ledger.balances import BalanceCalculator
from .ledger.budget import BudgetReconciler
from .ledger.settlement import SettlementPlanner
from .logging.config import configure_logging
from .models.ledger import LedgerReport, LedgerResult

logger = structlog.get_logger(__name__)


class LedgerFacade:
    """
    Entry point for computing a trip's ledger from a snapshot.

    Stateless between calls: every computation reads only its arguments, so
    one facade can serve concurrent recomputations for different trips.
    """

    def __init__(self, config_dir: Optional[Path] = None, trip_id: Optional[str] = None,
                 overrides: Optional[dict[str, Any]] = None) -> None:
        """
        Initialize the facade.

        Args:
            config_dir: Directory holding trips.yaml; defaults to ./config
            trip_id: Trip whose trips.yaml overrides apply
            overrides: Per-call overrides, highest precedence

        Raises:
            ConfigurationError: If the merged configuration is invalid
        """
        self.logger = logger.bind(trip_id=trip_id)
        self.trip_id = trip_id

        self.config_loader = ConfigLoader.create(config_dir)
        merged = self.config_loader.merge_config(trip_id, overrides)

        validation_errors = ConfigValidator.validate_config(merged)
        if validation_errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in validation_errors]
            self.logger.error("Ledger configuration validation failed", errors=error_msgs)
            raise ConfigurationError("Invalid ledger configuration", errors=validation_errors)

        self.config = self.config_loader.build_config(merged)
        params = self.config.ledger

        self.balance_calculator = BalanceCalculator(params)
        self.settlement_planner = SettlementPlanner(params)
        self.budget_reconciler = BudgetReconciler(params)

    def apply_logging_config(self) -> None:
        """Configure structlog from the merged logging section."""
        configure_logging(
            level=self.config.logging.level,
            format_json=self.config.logging.format_json,
        )

    def compute(
        self,
        members: Sequence[Member],
        expenses: Sequence[Expense],
        planned_items: Sequence[PlannedCostItem] = (),
        target_budget: Optional[float] = None,
    ) -> LedgerResult:
        """
        Compute balances, settlements and budget status in one call.

        Input validation problems come back as a failed LedgerResult rather
        than an exception, so callers can show a recoverable message.

        Raises:
            LedgerComputationError: On unexpected failures
        """
        # Snapshot copies; callers' collections are never touched
        members = tuple(members)
        expenses = tuple(expenses)
        planned_items = tuple(planned_items)

        try:
            balances = self.balance_calculator.calculate(members, expenses)
            settlements = self.settlement_planner.plan(balances)
            budget_status = self.budget_reconciler.reconcile(target_budget, expenses, planned_items)
            category_totals = self.budget_reconciler.category_totals(expenses)

        except InputValidationError as e:
            self.logger.warning(
                "Ledger input rejected",
                error_type=type(e).__name__,
                error=str(e),
            )
            return LedgerResult.failure(e)

        except Exception as e:
            raise LedgerComputationError(
                f"Unexpected error computing ledger: {e}",
                stage="compute",
                context={"member_count": len(members), "expense_count": len(expenses)}
            ) from e

        notes = self._degenerate_notes(members, expenses, settlements)
        for note in notes:
            self.logger.warning("Degenerate ledger input", note=note)
            warnings.warn(note, DegenerateInputWarning, stacklevel=2)

        currency = expenses[0].currency if expenses else None

        report = LedgerReport(
            balances=balances,
            settlements=settlements,
            budget_status=budget_status,
            category_totals=category_totals,
            currency=currency,
            warnings=notes,
        )

        self.logger.info(
            "Ledger computed",
            member_count=len(members),
            expense_count=len(expenses),
            settlement_count=len(settlements),
            over_budget=budget_status.over_budget,
        )
        return LedgerResult.ok(report)

    def compute_from_records(
        self,
        member_records: Sequence[dict[str, Any]],
        expense_records: Sequence[dict[str, Any]],
        itinerary_records: Sequence[dict[str, Any]] = (),
        target_budget: Optional[float] = None,
    ) -> LedgerResult:
        """
        Parse raw data-API records, then compute the ledger.

        Records that cannot be parsed produce a failed LedgerResult.
        """
        try:
            members = parse_members(member_records)
            expenses = parse_expenses(expense_records,
                                      default_currency=self.config.ledger.default_currency)
            planned_items = parse_itinerary_items(itinerary_records)
        except InputValidationError as e:
            self.logger.warning("Ledger records rejected", error=str(e))
            return LedgerResult.failure(e)

        return self.compute(members, expenses, planned_items, target_budget)

    def entries(
        self,
        expenses: Sequence[Expense],
        planned_items: Sequence[PlannedCostItem] = (),
        expense_filter: Optional[ExpenseFilter] = None,
    ) -> list[LedgerEntry]:
        """Unified, date-ordered expense rows, optionally filtered."""
        rows = unify_entries(expenses, planned_items)
        if expense_filter is not None:
            rows = expense_filter.apply(rows)
        return rows

    def _degenerate_notes(self, members, expenses, settlements) -> list[str]:
        notes = []
        if not members:
            notes.append("No trip members; balances and settlements are empty")
        if not expenses:
            notes.append("No expenses recorded; all balances are zero")
        elif members and not settlements:
            notes.append("All balances are already settled")
        return notes
