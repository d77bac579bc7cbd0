"""Loan eligibility routes."""

from fastapi import APIRouter

from credwise.api.schemas import EligibilityRequest, EligibilityResponse
from credwise.engine.eligibility import resolve_eligibility
from credwise.models.inputs import EligibilityInput

router = APIRouter(prefix="/api/v1/eligibility", tags=["eligibility"])


@router.post("", response_model=EligibilityResponse)
async def eligibility(req: EligibilityRequest):
    """Maximum eligible loan and approval odds for a borrower."""
    result = resolve_eligibility(EligibilityInput(
        monthly_income=req.monthly_income,
        existing_monthly_debt=req.existing_monthly_debt,
        credit_score=req.credit_score,
        loan_type=req.loan_type,
        employment_status=req.employment_status,
    ))
    return EligibilityResponse(
        max_eligible_principal=result.max_eligible_principal,
        approval_chance_pct=result.approval_chance_pct,
        approval_rating=result.approval_rating.label,
        max_dti=result.max_dti,
        current_dti=result.current_dti,
        interest_rate=result.interest_rate,
        term_months=result.term_months,
        max_monthly_payment=result.max_monthly_payment,
        tips=result.tips,
    )
