"""Pricing analytics derived from a catalog snapshot.

Every function here is pure and recomputed from the snapshot it is given.
Results are never cached, so they cannot drift from the catalog.
"""
import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Dict, Sequence

from chef_menu.services.catalog.models import Course, MenuItem, MenuSummary

_CENT = Decimal("0.01")


def round_price(value: float) -> float:
    """Round to two decimals, halves away from zero."""
    if not math.isfinite(value):
        return value
    amount = Decimal(repr(value))
    with localcontext() as ctx:
        # Enough digits for every integer digit plus the two cents
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        return float(amount.quantize(_CENT, rounding=ROUND_HALF_UP))


def _mean_price(items: Sequence[MenuItem]) -> float:
    if not items:
        return 0
    count = len(items)
    total = sum(item.price for item in items)
    if math.isinf(total):
        # Sum overflowed; each share is at most the largest price
        return round_price(sum(item.price / count for item in items))
    return round_price(total / count)


def total_count(snapshot: Sequence[MenuItem]) -> int:
    """Number of items in the snapshot."""
    return len(snapshot)


def average_by_course(snapshot: Sequence[MenuItem]) -> Dict[Course, float]:
    """
    Average price per course.

    Every course is present in the result; a course without items maps to 0.
    """
    return {
        course: _mean_price([item for item in snapshot if item.course == course])
        for course in Course
    }


def overall_average(snapshot: Sequence[MenuItem]) -> float:
    """Average price across the whole snapshot, 0 when it is empty."""
    return _mean_price(snapshot)


def menu_summary(snapshot: Sequence[MenuItem]) -> MenuSummary:
    """Bundle the dashboard figures for a snapshot."""
    return MenuSummary(
        total_items=total_count(snapshot),
        overall_average=overall_average(snapshot),
        average_by_course=average_by_course(snapshot),
    )
