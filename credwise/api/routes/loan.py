"""Loan amortization routes."""

from fastapi import APIRouter

from credwise.api.schemas import LoanRequest, LoanResponse, SchedulePointResponse, YearlyDebtResponse
from credwise.engine.debt import simulate_loan_amortization
from credwise.models.inputs import LoanParameters

router = APIRouter(prefix="/api/v1/loan", tags=["loan"])


@router.post("/amortization", response_model=LoanResponse)
async def amortize(req: LoanRequest):
    """Monthly payment, totals and schedule for a fixed-rate loan."""
    result = simulate_loan_amortization(LoanParameters(
        principal=req.principal,
        annual_rate_pct=req.annual_rate_pct,
        term=req.term,
        term_unit=req.term_unit,
    ))
    return LoanResponse(
        monthly_payment=result.monthly_payment,
        total_payment=result.total_payment,
        total_interest=result.total_interest,
        term_months=result.term_months,
        ending_balance=result.ending_balance,
        schedule=[
            SchedulePointResponse(
                period=p.period,
                payment=p.payment,
                principal=p.principal,
                interest=p.interest,
                balance=p.balance,
            )
            for p in result.schedule
        ],
        yearly_series=[
            YearlyDebtResponse(
                year=y.year,
                principal=y.principal,
                interest=y.interest,
                debt_service=y.debt_service,
                ending_balance=y.ending_balance,
            )
            for y in result.yearly_series
        ],
    )
