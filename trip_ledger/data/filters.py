"""
Expense filtering by search text, category, date range and payer.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from .models import LedgerEntry


@dataclass(frozen=True)
class ExpenseFilter:
    """Filter criteria for ledger entries; empty criteria match everything."""
    search: Optional[str] = None
    categories: frozenset[str] = field(default_factory=frozenset)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    member_ids: frozenset[str] = field(default_factory=frozenset)

    @property
    def active_filter_count(self) -> int:
        """Number of criteria that restrict the result."""
        return sum([
            bool(self.search),
            bool(self.categories),
            self.start_date is not None or self.end_date is not None,
            bool(self.member_ids),
        ])

    def matches(self, entry: LedgerEntry) -> bool:
        """Check a single entry against every active criterion."""
        if self.search and self.search.lower() not in (entry.title or "").lower():
            return False

        if self.categories and entry.category not in self.categories:
            return False

        if self.start_date is not None or self.end_date is not None:
            if entry.date is None:
                return False
            if self.start_date is not None and entry.date < self.start_date:
                return False
            if self.end_date is not None and entry.date > self.end_date:
                return False

        # Planned rows have no payer, so they never match a member filter
        if self.member_ids and entry.paid_by not in self.member_ids:
            return False

        return True

    def apply(self, entries: Iterable[LedgerEntry]) -> list[LedgerEntry]:
        """Return the matching entries in their original order."""
        return [e for e in entries if self.matches(e)]

    def cleared(self) -> "ExpenseFilter":
        return ExpenseFilter()
