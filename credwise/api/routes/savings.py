"""Savings growth routes."""

from fastapi import APIRouter

from credwise.api.schemas import SavingsPointResponse, SavingsRequest, SavingsResponse
from credwise.engine.savings import project_savings
from credwise.models.inputs import SavingsParameters

router = APIRouter(prefix="/api/v1/savings", tags=["savings"])


@router.post("/projection", response_model=SavingsResponse)
async def projection(req: SavingsRequest):
    result = project_savings(SavingsParameters(
        initial_deposit=req.initial_deposit,
        monthly_contribution=req.monthly_contribution,
        annual_rate_pct=req.annual_rate_pct,
        years=req.years,
    ))
    return SavingsResponse(
        final_balance=result.final_balance,
        total_contributions=result.total_contributions,
        total_interest=result.total_interest,
        interest_share_pct=result.interest_share_pct,
        yearly_series=[
            SavingsPointResponse(
                year=p.year,
                balance=p.balance,
                contributions=p.contributions,
                interest=p.interest,
            )
            for p in result.yearly_series
        ],
    )
