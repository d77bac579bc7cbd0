"""Credit card payoff routes."""

import logging

from fastapi import APIRouter

from credwise.api.schemas import PayoffRequest, PayoffResponse, SchedulePointResponse
from credwise.config import settings
from credwise.engine.payoff import simulate_payoff
from credwise.models.inputs import PayoffParameters
from credwise.models.results import PayoffStatus

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/credit-card", tags=["credit-card"])


def payoff_message(status: PayoffStatus, minimum_payment) -> str | None:
    if status is PayoffStatus.PAYMENT_TOO_LOW:
        return (
            "Your payment is too low to pay off the balance. It must be higher than "
            f"{settings.currency_symbol}{minimum_payment:,.2f} to reduce the principal."
        )
    if status is PayoffStatus.CAPPED:
        return "At this payment the balance is not paid off within 50 years."
    return None


@router.post("/payoff", response_model=PayoffResponse)
async def payoff(req: PayoffRequest):
    """Months to pay off a card balance at a fixed monthly payment.

    A payment that cannot cover the interest is reported in ``status``,
    not as an error.
    """
    result = simulate_payoff(PayoffParameters(
        balance=req.balance,
        annual_rate_pct=req.annual_rate_pct,
        monthly_payment=req.monthly_payment,
    ))
    if not result.ok:
        logger.info("Payoff not computed: %s", result.status.value)

    return PayoffResponse(
        status=result.status.value,
        months=result.months,
        total_interest=result.total_interest,
        total_paid=result.total_paid,
        minimum_payment=result.minimum_payment,
        message=payoff_message(result.status, result.minimum_payment),
        series=[
            SchedulePointResponse(
                period=p.period,
                payment=p.payment,
                principal=p.principal,
                interest=p.interest,
                balance=p.balance,
            )
            for p in result.series
        ],
    )
