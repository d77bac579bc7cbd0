"""Fixed-payment loan math and amortization schedules.

Pure functions: Decimal in, dataclass out. No I/O.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP

from credwise.engine.rates import monthly_rate
from credwise.models.inputs import LoanParameters
from credwise.models.results import LoanAmortization, SchedulePoint, YearlyDebtSummary

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")

# Number of monthly rows returned with a loan result; yearly buckets cover the rest
LOAN_SCHEDULE_PREVIEW_PERIODS = 12


def _money(value: Decimal) -> Decimal:
    return value.quantize(TWO_PLACES, ROUND_HALF_UP)


def amortized_payment(principal: Decimal, rate: Decimal, term_months: int) -> Decimal:
    """Fixed monthly payment that retires ``principal`` in ``term_months``.

    ``rate`` is the monthly periodic rate. Full precision is returned; callers
    quantize for display.
    """
    if principal <= 0 or term_months < 1:
        return Decimal("0")

    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    factor = (1 + rate) ** term_months
    # Rates below Decimal precision compound to exactly 1
    if rate == 0 or factor == 1:
        return principal / term_months
    return principal * (rate * factor) / (factor - 1)


def max_principal(max_monthly_payment: Decimal, rate: Decimal, term_months: int) -> Decimal:
    """Largest principal a payment of ``max_monthly_payment`` can retire."""
    if max_monthly_payment <= 0 or term_months < 1:
        return Decimal("0")

    # P = M * [1 - (1+r)^-n] / r
    discount = (1 + rate) ** -term_months
    if rate == 0 or discount == 1:
        return max_monthly_payment * term_months
    return max_monthly_payment * (1 - discount) / rate


def amortization_schedule(
    principal: Decimal,
    annual_rate_pct: Decimal,
    term_months: int,
) -> list[SchedulePoint]:
    """Month-by-month schedule for a fully amortizing loan.

    Each period accrues interest on the opening balance, applies the rest of
    the payment to principal and floors the balance at zero.
    """
    r = monthly_rate(annual_rate_pct)
    pmt = amortized_payment(principal, r, term_months)
    if pmt == 0:
        return []

    schedule: list[SchedulePoint] = []
    balance = principal
    for period in range(1, term_months + 1):
        interest = balance * r
        principal_paid = pmt - interest
        balance = max(Decimal("0"), balance - principal_paid)

        schedule.append(SchedulePoint(
            period=period,
            payment=_money(pmt),
            principal=_money(principal_paid),
            interest=_money(interest),
            balance=_money(balance),
        ))

    return schedule


def yearly_debt_summary(schedule: list[SchedulePoint]) -> list[YearlyDebtSummary]:
    """Aggregate a schedule into 12-period buckets.

    A short final year is flushed at the last period.
    """
    yearly: list[YearlyDebtSummary] = []
    year_principal = Decimal("0")
    year_interest = Decimal("0")
    year_debt_service = Decimal("0")

    for p in schedule:
        year_principal += p.principal
        year_interest += p.interest
        year_debt_service += p.payment

        if p.period % 12 == 0 or p.period == len(schedule):
            yearly.append(YearlyDebtSummary(
                year=(p.period - 1) // 12 + 1,
                principal=year_principal,
                interest=year_interest,
                debt_service=year_debt_service,
                ending_balance=p.balance,
            ))
            year_principal = Decimal("0")
            year_interest = Decimal("0")
            year_debt_service = Decimal("0")

    return yearly


def simulate_loan_amortization(params: LoanParameters) -> LoanAmortization:
    """Payment, totals, a short monthly preview and yearly buckets for a loan."""
    n = params.term_months
    if params.principal <= 0 or params.annual_rate_pct < 0 or n < 1:
        logger.debug("Skipping amortization for invalid loan input: %s", params)
        return LoanAmortization()

    pmt = amortized_payment(params.principal, monthly_rate(params.annual_rate_pct), n)
    total_payment = pmt * n
    schedule = amortization_schedule(params.principal, params.annual_rate_pct, n)

    return LoanAmortization(
        monthly_payment=_money(pmt),
        total_payment=_money(total_payment),
        total_interest=_money(total_payment - params.principal),
        term_months=n,
        ending_balance=schedule[-1].balance,
        schedule=schedule[:LOAN_SCHEDULE_PREVIEW_PERIODS],
        yearly_series=yearly_debt_summary(schedule),
    )
