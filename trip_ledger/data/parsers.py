"""
Trip data API parsers for converting raw records to ledger models.

This module handles parsing of member, expense and itinerary-item records
as returned by the remote trip data store into canonical dataclasses, with
type conversion and typed errors for records that cannot be read.
"""

from collections.abc import Iterable
from datetime import date, datetime
from typing import Any, Optional

from ..errors import MalformedRecordError
from .models import Expense, ExpenseCategory, Member, PlannedCostItem

UNKNOWN_MEMBER_NAME = "Unknown"


def parse_members(records: Iterable[dict[str, Any]]) -> list[Member]:
    """Parse a list of trip member records."""
    return [parse_member_record(r) for r in records]


def parse_member_record(record: dict[str, Any]) -> Member:
    """
    Parse a single member record.

    Two shapes are accepted:
    {"user_id": "u1", "profiles": {"name": "Ann"}}   (trip_members join)
    {"id": "u1", "name": "Ann"}                       (flat roster)

    Members without a profile name are shown as "Unknown".
    """
    if not isinstance(record, dict):
        raise MalformedRecordError("Member record must be a dictionary",
                                   record_type="member", raw_value=record)

    member_id = record.get("user_id") or record.get("id")
    if not member_id:
        raise MalformedRecordError("Member record has no id",
                                   record_type="member", field="user_id", raw_value=record)

    profile = record.get("profiles") or {}
    name = profile.get("name") if isinstance(profile, dict) else None
    name = name or record.get("name") or UNKNOWN_MEMBER_NAME

    return Member(id=str(member_id), name=str(name))


def parse_expenses(records: Iterable[dict[str, Any]],
                   default_currency: str = "USD") -> list[Expense]:
    """Parse a list of manual expense records."""
    return [parse_expense_record(r, default_currency=default_currency) for r in records]


def parse_expense_record(record: dict[str, Any], default_currency: str = "USD") -> Expense:
    """
    Parse a single manual expense record.

    Expected format:
    {
        "id": "e1",
        "title": "Dinner",
        "amount": 42.5,            # number or numeric string
        "currency": "USD",
        "category": "food",
        "paid_by": "u1",
        "date": "2024-05-01"       # or full ISO timestamp
    }
    """
    if not isinstance(record, dict):
        raise MalformedRecordError("Expense record must be a dictionary",
                                   record_type="expense", raw_value=record)

    expense_id = _require(record, "id", "expense")
    paid_by = _require(record, "paid_by", "expense")
    amount = _parse_amount(record.get("amount"), "expense", "amount")
    if amount is None:
        raise MalformedRecordError(f"Expense {expense_id!r} has no amount",
                                   record_type="expense", field="amount")

    return Expense(
        id=str(expense_id),
        title=str(record.get("title") or ""),
        amount=amount,
        paid_by=str(paid_by),
        currency=str(record.get("currency") or default_currency).upper(),
        date=_parse_date(record.get("date"), "expense"),
        category=_parse_category(record.get("category")),
    )


def parse_itinerary_items(records: Iterable[dict[str, Any]]) -> list[PlannedCostItem]:
    """
    Derive planned costs from itinerary items.

    Only items with a positive estimated cost count as planned spend.
    """
    items = []
    for record in records:
        item = parse_itinerary_item(record)
        if item is not None:
            items.append(item)
    return items


def parse_itinerary_item(record: dict[str, Any]) -> Optional[PlannedCostItem]:
    """
    Parse an itinerary item into a planned cost, or None if it has no cost.

    Expected format:
    {
        "id": 17,
        "title": "Louvre tickets",
        "estimated_cost": 34.0,
        "currency": "EUR",
        "category": "activities",
        "day_number": 2,           # unscheduled items have no date
        "date": "2024-05-02"
    }
    """
    if not isinstance(record, dict):
        raise MalformedRecordError("Itinerary item must be a dictionary",
                                   record_type="itinerary_item", raw_value=record)

    cost = _parse_amount(record.get("estimated_cost"), "itinerary_item", "estimated_cost")
    if cost is None or cost <= 0:
        return None

    item_id = _require(record, "id", "itinerary_item")
    item_date = _parse_date(record.get("date"), "itinerary_item") if record.get("day_number") else None

    return PlannedCostItem(
        id=str(item_id),
        title=str(record.get("title") or ""),
        estimated_amount=cost,
        currency=(record.get("currency") or None),
        date=item_date,
        category=_parse_category(record.get("category")),
    )


def _require(record: dict[str, Any], field: str, record_type: str) -> Any:
    value = record.get(field)
    if value is None or value == "":
        raise MalformedRecordError(f"Missing '{field}' field in {record_type} record",
                                   record_type=record_type, field=field, raw_value=record)
    return value


def _parse_amount(raw: Any, record_type: str, field: str) -> Optional[float]:
    """Parse a numeric amount; None stays None."""
    if raw is None or raw == "":
        return None
    if isinstance(raw, bool):
        raise MalformedRecordError(f"Invalid {field} {raw!r}",
                                   record_type=record_type, field=field, raw_value=raw)
    try:
        return float(raw)
    except (TypeError, ValueError) as e:
        raise MalformedRecordError(f"Invalid {field} {raw!r}: {e}",
                                   record_type=record_type, field=field, raw_value=raw)


def _parse_category(raw: Any) -> Optional[str]:
    """Canonical lower-case value for known categories; other labels pass through."""
    if raw is None:
        return None
    text = str(raw).strip()
    if not text:
        return None
    try:
        return ExpenseCategory(text.lower()).value
    except ValueError:
        return text


def _parse_date(raw: Any, record_type: str) -> Optional[date]:
    """Parse an ISO date or timestamp string into a date."""
    if raw is None or raw == "":
        return None
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    try:
        text = str(raw)
        if len(text) == 10:
            return date.fromisoformat(text)
        return datetime.fromisoformat(text).date()
    except ValueError as e:
        raise MalformedRecordError(f"Invalid date {raw!r}: {e}",
                                   record_type=record_type, field="date", raw_value=raw)
