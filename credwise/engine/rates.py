"""Annual percentage rate to monthly periodic rate."""

from decimal import Decimal

MONTHS_PER_YEAR = 12


def monthly_rate(annual_rate_pct: Decimal) -> Decimal:
    """Monthly periodic rate for an annual percentage (e.g. 6 -> 0.005)."""
    return Decimal(annual_rate_pct) / 100 / MONTHS_PER_YEAR
