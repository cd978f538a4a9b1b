"""Data models for ledger computations"""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class Balance:
    """A member's position: positive is owed money, negative owes money"""
    member_id: str
    name: str
    paid: float
    share: float
    balance: float


@dataclass(frozen=True)
class Settlement:
    """Proposed payment from a debtor to a creditor"""
    from_member_id: str
    from_member_name: str
    to_member_id: str
    to_member_name: str
    amount: float


@dataclass(frozen=True)
class BudgetStatus:
    """Target budget compared against actual and planned spend"""
    target_budget: Optional[float]
    total_actual: float
    total_planned: float
    combined_total: float
    over_budget: bool = False
    overage: Optional[float] = None       # None when no budget is set
    remaining: Optional[float] = None     # Headroom left, never negative
    progress_pct: float = 0.0             # Display values, clamped
    spent_progress_pct: float = 0.0
    planned_progress_pct: float = 0.0

    @property
    def has_budget(self) -> bool:
        return self.target_budget is not None

    @property
    def label(self) -> str:
        """Short status text for display"""
        if not self.has_budget:
            return "No budget set"
        if self.over_budget:
            return "Over budget"
        return "Within budget"


@dataclass(frozen=True)
class LedgerReport:
    """Everything the presentation layer needs for one snapshot"""
    balances: list[Balance]
    settlements: list[Settlement]
    budget_status: BudgetStatus
    category_totals: dict[str, float] = field(default_factory=dict)
    currency: Optional[str] = None
    warnings: list[str] = field(default_factory=list)

    @property
    def total_settlement_amount(self) -> float:
        return sum(s.amount for s in self.settlements)


@dataclass(frozen=True)
class LedgerResult:
    """Result of a ledger computation: a report, or a typed failure"""
    report: Optional[LedgerReport] = None
    success: bool = True
    error_type: Optional[str] = None
    error_msg: Optional[str] = None
    context: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, report: LedgerReport) -> "LedgerResult":
        """Create successful result with report."""
        return cls(report=report, success=True)

    @classmethod
    def failure(cls, error: Exception) -> "LedgerResult":
        """Create failure result from a validation error."""
        context = dict(getattr(error, "context", {}) or {})
        for key, value in vars(error).items():
            if key not in ("context", "recoverable") and value is not None:
                context.setdefault(key, value)

        return cls(
            success=False,
            error_type=type(error).__name__,
            error_msg=str(error),
            context=context,
        )
