"""Credit score simulator and debt-to-income routes."""

from fastapi import APIRouter

from credwise.api.schemas import CreditScoreRequest, CreditScoreResponse, DTIRequest, DTIResponse
from credwise.engine.credit_score import (
    credit_rating,
    credit_score_tips,
    estimate_credit_score,
    factor_scores,
)
from credwise.engine.dti import compute_dti
from credwise.models.inputs import ScoreFactors

router = APIRouter(prefix="/api/v1", tags=["credit"])


@router.post("/credit-score/estimate", response_model=CreditScoreResponse)
async def estimate(req: CreditScoreRequest):
    factors = ScoreFactors(
        payment_history_pct=req.payment_history_pct,
        utilization_pct=req.utilization_pct,
        credit_age_years=req.credit_age_years,
        credit_mix_count=req.credit_mix_count,
        hard_inquiries=req.hard_inquiries,
    )
    score = estimate_credit_score(factors)
    return CreditScoreResponse(
        score=score,
        rating=credit_rating(score).label,
        factor_scores=factor_scores(factors),
        tips=credit_score_tips(factors),
    )


@router.post("/dti", response_model=DTIResponse)
async def dti(req: DTIRequest):
    # Income is validated positive, so ratio and rating are always present
    result = compute_dti(req.monthly_income, req.monthly_debt)
    return DTIResponse(
        ratio=result.ratio,
        remaining_income=result.remaining_income,
        rating=result.rating.label,
        description=result.rating.description,
        tips=result.tips,
    )
