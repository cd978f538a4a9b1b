#!/usr/bin/env python3
"""
Basic Usage Example - Trip Ledger

This script demonstrates the basic usage of the trip ledger with records
shaped like the trip data API. It shows how to:
- Initialize the facade
- Compute balances, settlements and budget status from raw records
- Handle a rejected snapshot
- Filter the unified expense list

Run: python examples/basic_usage.py
"""

from typing import Any, Dict, List

from trip_ledger.data.filters import ExpenseFilter
from trip_ledger.data.parsers import parse_expenses, parse_itinerary_items
from trip_ledger.engine import LedgerFacade


def sample_members() -> List[Dict[str, Any]]:
    return [
        {"user_id": "u-ana", "profiles": {"name": "Ana"}},
        {"user_id": "u-ben", "profiles": {"name": "Ben"}},
        {"user_id": "u-chloe", "profiles": {"name": "Chloé"}},
        {"user_id": "u-dev", "profiles": {"name": "Dev"}},
    ]


def sample_expenses() -> List[Dict[str, Any]]:
    return [
        {"id": "e1", "title": "Apartment deposit", "amount": 480.0, "currency": "EUR",
         "category": "accommodation", "paid_by": "u-ana", "date": "2024-06-01"},
        {"id": "e2", "title": "Train tickets", "amount": "136.40", "currency": "EUR",
         "category": "transportation", "paid_by": "u-ben", "date": "2024-06-01"},
        {"id": "e3", "title": "Market dinner", "amount": 92.75, "currency": "EUR",
         "category": "food", "paid_by": "u-chloe", "date": "2024-06-02"},
    ]


def sample_itinerary() -> List[Dict[str, Any]]:
    return [
        {"id": 11, "title": "Catacombs tour", "estimated_cost": 120.0, "currency": "EUR",
         "category": "activities", "day_number": 3, "date": "2024-06-03"},
        {"id": 12, "title": "Picnic in the park", "estimated_cost": 0},
    ]


def main():
    facade = LedgerFacade(overrides={
        "ledger": {"default_currency": "EUR"},
        "logging": {"level": "WARNING"},
    })
    facade.apply_logging_config()

    result = facade.compute_from_records(
        sample_members(), sample_expenses(), sample_itinerary(), target_budget=800.0
    )
    report = result.report

    print("Balances")
    for b in report.balances:
        print(f"  {b.name:<8} paid {b.paid:>8.2f}  share {b.share:>8.2f}  balance {b.balance:>+8.2f}")

    print("\nSettle up")
    for s in report.settlements:
        print(f"  {s.from_member_name} pays {s.to_member_name} {s.amount:.2f} {report.currency}")

    status = report.budget_status
    print(f"\nBudget: {status.label}")
    print(f"  spent {status.total_actual:.2f} + planned {status.total_planned:.2f}"
          f" of {status.target_budget:.2f} ({status.progress_pct:.0f}%)")

    print("\nBy category")
    for category, total in report.category_totals.items():
        print(f"  {category:<15} {total:>8.2f}")

    rejected = facade.compute_from_records(
        sample_members(),
        [{"id": "e9", "title": "Mystery", "amount": 10, "paid_by": "u-zed"}],
    )
    print(f"\nRejected snapshot: {rejected.error_type}: {rejected.error_msg}")

    rows = facade.entries(
        parse_expenses(sample_expenses(), default_currency="EUR"),
        parse_itinerary_items(sample_itinerary()),
        ExpenseFilter(categories=frozenset({"activities", "food"})),
    )
    print("\nFood and activities")
    for row in rows:
        print(f"  [{row.source.value}] {row.title}: {row.amount:.2f}")


if __name__ == "__main__":
    main()
