"""Bracket lookups for rate sheets and scoring tiers.

Tables are ordered ``(threshold, value)`` pairs scanned top-down; the first
matching bracket wins, and a value sitting exactly on a threshold lands in
that (better) bracket.
"""

from decimal import Decimal
from typing import Any, Sequence


def tier_at_least(value: Decimal, tiers: Sequence[tuple[Decimal, Any]], default: Any) -> Any:
    """First bracket whose threshold is <= value (higher is better)."""
    for threshold, result in tiers:
        if value >= threshold:
            return result
    return default


def tier_at_most(value: Decimal, tiers: Sequence[tuple[Decimal, Any]], default: Any) -> Any:
    """First bracket whose threshold is >= value (lower is better)."""
    for threshold, result in tiers:
        if value <= threshold:
            return result
    return default


def tier_below(value: Decimal, tiers: Sequence[tuple[Decimal, Any]], default: Any) -> Any:
    """First bracket whose threshold is strictly above value."""
    for threshold, result in tiers:
        if value < threshold:
            return result
    return default
