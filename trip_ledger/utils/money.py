"""
Money helpers for converting between currency units and minor units.

Balances are computed in floats; settlements are planned in integer minor
units so rounding never leaves a residual that the planner has to chase.
"""

import math
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal


def is_valid_amount(amount: object) -> bool:
    """Check that an amount is a finite, non-negative int, float or Decimal."""
    if isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal)):
        return False
    if isinstance(amount, Decimal):
        return amount.is_finite() and amount >= 0
    return math.isfinite(amount) and amount >= 0


def to_minor_units(amount: float, precision: int = 2) -> int:
    """Convert a currency amount to integer minor units, rounding half-up."""
    scaled = Decimal(repr(amount)).scaleb(precision)
    return int(scaled.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def floor_minor_units(amount: float, precision: int = 2) -> int:
    """Convert a currency amount to whole minor units, rounding down."""
    return int(math.floor(Decimal(repr(amount)).scaleb(precision)))


def from_minor_units(units: int, precision: int = 2) -> float:
    """Convert integer minor units back to a currency amount."""
    return float(Decimal(units).scaleb(-precision))


def allocate_minor_units(amounts: Sequence[float], precision: int = 2) -> list[int]:
    """
    Convert amounts that sum to zero into minor units that also sum to zero.

    Each amount is floored to whole minor units, then the units missing from
    the total are handed out one at a time to the amounts with the largest
    fractional remainder (ties go to the earlier position). Every result
    differs from its exact scaled value by less than one minor unit.
    """
    if not amounts:
        return []

    scale = Decimal(1).scaleb(precision)
    exact = [Decimal(repr(a)) * scale for a in amounts]
    floors = [int(math.floor(e)) for e in exact]
    target = int(sum(exact).quantize(Decimal(1), rounding=ROUND_HALF_UP))
    shortfall = target - sum(floors)

    by_remainder = sorted(
        range(len(amounts)),
        key=lambda idx: (-(exact[idx] - floors[idx]), idx)
    )
    for idx in by_remainder[:max(shortfall, 0)]:
        floors[idx] += 1

    return floors
