"""Revolving-balance payoff simulation (credit cards).

Pure functions. No I/O.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP

from credwise.engine.rates import monthly_rate
from credwise.models.inputs import PayoffParameters
from credwise.models.results import PayoffResult, PayoffStatus, SchedulePoint

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")

PAYOFF_MAX_MONTHS = 600  # 50 years
PAYOFF_SERIES_LIMIT = 24  # Monthly points returned for charting


def _money(value: Decimal) -> Decimal:
    return value.quantize(TWO_PLACES, ROUND_HALF_UP)


def minimum_payment(balance: Decimal, annual_rate_pct: Decimal) -> Decimal:
    """Interest owed on ``balance`` for one month.

    A payment at or below this never reduces principal.
    """
    return max(Decimal("0"), balance) * monthly_rate(annual_rate_pct)


def is_payment_too_low(params: PayoffParameters) -> bool:
    return params.monthly_payment <= minimum_payment(params.balance, params.annual_rate_pct)


def simulate_payoff(params: PayoffParameters) -> PayoffResult:
    """Walk the balance down month by month until it reaches zero.

    Interest accrues on the opening balance, the rest of the payment retires
    principal. Stops early when the payment cannot cover a month's interest
    and gives up after PAYOFF_MAX_MONTHS.
    """
    if params.balance <= 0 or params.monthly_payment <= 0 or params.annual_rate_pct < 0:
        logger.debug("Payoff skipped, invalid card input: %s", params)
        return PayoffResult(status=PayoffStatus.INVALID_INPUT)

    r = monthly_rate(params.annual_rate_pct)
    floor_payment = _money(minimum_payment(params.balance, params.annual_rate_pct))
    if is_payment_too_low(params):
        logger.debug("Payment %s does not cover interest %s", params.monthly_payment, floor_payment)
        return PayoffResult(status=PayoffStatus.PAYMENT_TOO_LOW, minimum_payment=floor_payment)

    balance = params.balance
    total_interest = Decimal("0")
    total_principal = Decimal("0")
    series: list[SchedulePoint] = []
    month = 0

    while balance > 0 and month < PAYOFF_MAX_MONTHS:
        month += 1
        interest = balance * r
        if params.monthly_payment <= interest:
            # Unreachable once the opening check passes; interest only shrinks
            return PayoffResult(status=PayoffStatus.PAYMENT_TOO_LOW, minimum_payment=floor_payment)

        principal = min(params.monthly_payment - interest, balance)
        balance = max(Decimal("0"), balance - principal)
        total_interest += interest
        total_principal += principal

        if len(series) < PAYOFF_SERIES_LIMIT:
            series.append(SchedulePoint(
                period=month,
                payment=_money(principal + interest),
                principal=_money(principal),
                interest=_money(interest),
                balance=_money(balance),
            ))

    status = PayoffStatus.PAID_OFF
    if balance > 0:
        logger.debug("Payoff capped at %d months with %s outstanding", month, balance)
        status = PayoffStatus.CAPPED

    return PayoffResult(
        status=status,
        months=month,
        total_interest=_money(total_interest),
        total_paid=_money(total_principal + total_interest),
        minimum_payment=floor_payment,
        series=series,
    )
