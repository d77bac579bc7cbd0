"""Debt-to-income ratio with lender-style rating bands."""

from decimal import Decimal, ROUND_HALF_UP

from credwise.engine.tiers import tier_below
from credwise.models.results import DTIResult, Rating

DTI_RATINGS = (
    (Decimal("20"), Rating("Excellent", "Lenders view this as very low risk.")),
    (Decimal("36"), Rating("Good", "Most lenders consider this acceptable.")),
    (Decimal("43"), Rating("Fair", "This is the maximum for most mortgage approvals.")),
    (Decimal("50"), Rating("Poor", "May be difficult to qualify for new credit.")),
)
VERY_POOR = Rating("Very Poor", "Significant financial stress, difficult to qualify for loans.")


def dti_ratio(monthly_income: Decimal, monthly_debt: Decimal) -> Decimal | None:
    """Monthly debt payments as a percentage of gross monthly income."""
    if monthly_income <= 0:
        return None
    return monthly_debt / monthly_income * 100


def dti_rating(ratio: Decimal) -> Rating:
    return tier_below(ratio, DTI_RATINGS, VERY_POOR)


def dti_tips(ratio: Decimal) -> list[str]:
    tips = []
    if ratio > 36:
        tips.append("Focus on paying down your highest-interest debt first to reduce your monthly obligations.")
    if ratio > 20:
        tips.append("Look for ways to increase your income through side gigs, overtime, or asking for a raise.")
    if ratio > 43:
        tips.append("Consider debt consolidation to potentially lower your monthly payments.")
    tips.append("Avoid taking on new debt that will increase your monthly payment obligations.")
    return tips


def compute_dti(monthly_income: Decimal, monthly_debt: Decimal) -> DTIResult:
    ratio = dti_ratio(monthly_income, monthly_debt)
    remaining = max(Decimal("0"), monthly_income - monthly_debt)
    if ratio is None:
        return DTIResult(remaining_income=remaining)

    return DTIResult(
        ratio=ratio.quantize(Decimal("0.1"), ROUND_HALF_UP),
        remaining_income=remaining.quantize(Decimal("0.01"), ROUND_HALF_UP),
        rating=dti_rating(ratio),
        tips=dti_tips(ratio),
    )
