"""Unified expense rows combining recorded expenses with planned costs."""

from collections.abc import Iterable
from datetime import date

from .models import Expense, LedgerEntry, PlannedCostItem


def unify_entries(expenses: Iterable[Expense],
                  planned_items: Iterable[PlannedCostItem] = ()) -> list[LedgerEntry]:
    """
    Merge manual expenses and planned costs into one list ordered by date.

    Undated rows sort last; rows on the same day keep manual entries first,
    then input order.
    """
    entries = [LedgerEntry.from_expense(e) for e in expenses]
    entries.extend(LedgerEntry.from_planned(p) for p in planned_items)

    def sort_key(indexed: tuple[int, LedgerEntry]):
        position, entry = indexed
        return (
            entry.date is None,
            entry.date or date.min,
            entry.is_planned,
            position,
        )

    return [entry for _, entry in sorted(enumerate(entries), key=sort_key)]
