"""Savings growth with monthly compounding and recurring contributions.

Pure functions. No I/O.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP

from credwise.engine.rates import monthly_rate, MONTHS_PER_YEAR
from credwise.models.inputs import SavingsParameters
from credwise.models.results import SavingsPoint, SavingsProjection

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")

MAX_SAVINGS_YEARS = 50


def project_savings(params: SavingsParameters) -> SavingsProjection:
    """Project a savings balance year by year.

    Each month the contribution lands first, then the whole balance earns one
    month of interest. Returns one point per year plus a year-0 starting point.
    """
    if not 1 <= params.years <= MAX_SAVINGS_YEARS:
        logger.debug("Savings horizon %s outside 1-%d years", params.years, MAX_SAVINGS_YEARS)
        return SavingsProjection()
    if params.annual_rate_pct < 0:
        logger.debug("Savings skipped for negative rate %s", params.annual_rate_pct)
        return SavingsProjection()

    r = monthly_rate(params.annual_rate_pct)
    balance = params.initial_deposit
    contributions = params.initial_deposit
    total_interest = Decimal("0")

    series = [SavingsPoint(
        year=0,
        balance=balance.quantize(TWO_PLACES, ROUND_HALF_UP),
        contributions=contributions.quantize(TWO_PLACES, ROUND_HALF_UP),
        interest=Decimal("0"),
    )]

    for year in range(1, params.years + 1):
        for _ in range(MONTHS_PER_YEAR):
            balance += params.monthly_contribution
            contributions += params.monthly_contribution

            interest = balance * r
            balance += interest
            total_interest += interest

        series.append(SavingsPoint(
            year=year,
            balance=balance.quantize(TWO_PLACES, ROUND_HALF_UP),
            contributions=contributions.quantize(TWO_PLACES, ROUND_HALF_UP),
            interest=total_interest.quantize(TWO_PLACES, ROUND_HALF_UP),
        ))

    return SavingsProjection(
        final_balance=balance.quantize(TWO_PLACES, ROUND_HALF_UP),
        total_contributions=contributions.quantize(TWO_PLACES, ROUND_HALF_UP),
        total_interest=total_interest.quantize(TWO_PLACES, ROUND_HALF_UP),
        yearly_series=series,
    )
