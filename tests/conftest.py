"""Pytest configuration and shared fixtures."""

from datetime import date
from typing import Any, Dict, List

import pytest

from trip_ledger.data.models import Expense, Member, PlannedCostItem


@pytest.fixture
def members_abc() -> List[Member]:
    """Three-member roster."""
    return [
        Member(id="a", name="Alice"),
        Member(id="b", name="Bob"),
        Member(id="c", name="Cara"),
    ]


@pytest.fixture
def uneven_expenses() -> List[Expense]:
    """A pays 90, C pays 30, B pays nothing (total 120)."""
    return [
        Expense(id="e1", title="Hotel", amount=90.0, paid_by="a",
                date=date(2024, 5, 1), category="accommodation"),
        Expense(id="e2", title="Taxi", amount=30.0, paid_by="c",
                date=date(2024, 5, 2), category="transportation"),
    ]


@pytest.fixture
def planned_items() -> List[PlannedCostItem]:
    """Planned itinerary costs (total 250)."""
    return [
        PlannedCostItem(id="p1", title="Museum tickets", estimated_amount=100.0,
                        date=date(2024, 5, 3), category="activities"),
        PlannedCostItem(id="p2", title="Boat tour", estimated_amount=150.0,
                        category="activities"),
    ]


@pytest.fixture
def member_records() -> List[Dict[str, Any]]:
    """Raw trip_members rows as returned by the data API."""
    return [
        {"user_id": "a", "role": "admin", "profiles": {"name": "Alice", "avatar_url": None}},
        {"user_id": "b", "role": "editor", "profiles": {"name": "Bob"}},
        {"user_id": "c", "role": "viewer", "profiles": None},
    ]


@pytest.fixture
def expense_records() -> List[Dict[str, Any]]:
    """Raw manual expense rows as returned by the data API."""
    return [
        {
            "id": "e1",
            "trip_id": "trip-1",
            "title": "Hotel",
            "amount": 90,
            "currency": "usd",
            "category": "accommodation",
            "paid_by": "a",
            "date": "2024-05-01T00:00:00+00:00",
        },
        {
            "id": "e2",
            "trip_id": "trip-1",
            "title": "Taxi",
            "amount": "30.00",
            "currency": "USD",
            "category": "transportation",
            "paid_by": "c",
            "date": "2024-05-02",
        },
    ]


@pytest.fixture
def itinerary_records() -> List[Dict[str, Any]]:
    """Raw itinerary items; only those with a positive cost are planned spend."""
    return [
        {"id": 1, "title": "Museum", "estimated_cost": 100.0, "currency": "USD",
         "category": "activities", "day_number": 3, "date": "2024-05-03"},
        {"id": 2, "title": "Boat tour", "estimated_cost": 150, "category": "activities",
         "day_number": None, "date": "2024-05-04"},
        {"id": 3, "title": "Free walking tour", "estimated_cost": 0},
        {"id": 4, "title": "Park", "estimated_cost": None},
    ]
