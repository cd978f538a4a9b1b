"""
Canonical data models for ledger snapshots.

This module defines immutable data structures for the member roster, recorded
expenses and planned itinerary costs, as read from the trip data store.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional


class ExpenseSource(Enum):
    """Where a ledger row comes from."""
    MANUAL = "manual"      # Recorded expense with a payer
    PLANNED = "planned"    # Forecast cost from an itinerary item


class ExpenseCategory(Enum):
    """Expense categories offered by the trip budget."""
    ACCOMMODATION = "accommodation"
    FOOD = "food"
    TRANSPORTATION = "transportation"
    ACTIVITIES = "activities"
    ENTERTAINMENT = "entertainment"
    SHOPPING = "shopping"
    FLIGHTS = "flights"
    FEES = "fees"
    OTHER = "other"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class Member:
    """Trip member identity."""
    id: str
    name: str


@dataclass(frozen=True)
class Expense:
    """Recorded expense, attributed entirely to its payer."""
    id: str
    title: str
    amount: float
    paid_by: str                       # Member id
    currency: str = "USD"
    date: Optional[date] = None
    category: Optional[str] = None


@dataclass(frozen=True)
class PlannedCostItem:
    """Forecast spend derived from an itinerary item."""
    id: str
    title: str
    estimated_amount: Optional[float] = None
    currency: Optional[str] = None
    date: Optional[date] = None
    category: Optional[str] = None

    @property
    def amount(self) -> float:
        """Estimated amount, missing estimates count as zero."""
        return self.estimated_amount if self.estimated_amount is not None else 0.0


@dataclass(frozen=True)
class LedgerEntry:
    """Unified expense row for display, tagged by source."""
    id: str
    title: str
    amount: float
    source: ExpenseSource
    currency: Optional[str] = None
    date: Optional[date] = None
    category: Optional[str] = None
    paid_by: Optional[str] = None      # Only set for manual entries

    @property
    def is_planned(self) -> bool:
        return self.source is ExpenseSource.PLANNED

    @classmethod
    def from_expense(cls, expense: Expense) -> "LedgerEntry":
        """Create a manual entry from a recorded expense."""
        return cls(
            id=expense.id,
            title=expense.title,
            amount=expense.amount,
            source=ExpenseSource.MANUAL,
            currency=expense.currency,
            date=expense.date,
            category=expense.category,
            paid_by=expense.paid_by,
        )

    @classmethod
    def from_planned(cls, item: PlannedCostItem) -> "LedgerEntry":
        """Create a planned entry from an itinerary cost."""
        return cls(
            id=item.id,
            title=item.title,
            amount=item.amount,
            source=ExpenseSource.PLANNED,
            currency=item.currency,
            date=item.date,
            category=item.category,
        )
