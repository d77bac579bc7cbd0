"""Loan eligibility: DTI headroom, score-bracketed rate sheets and approval odds.

Approval chance (0-100):
  Credit score bracket:   0-40
  DTI vs. lender maximum: 0-40
  Employment status:      0-20
"""

import logging
from dataclasses import dataclass
from decimal import Decimal, ROUND_FLOOR, ROUND_HALF_UP

from credwise.engine.debt import max_principal
from credwise.engine.rates import monthly_rate
from credwise.engine.tiers import tier_at_least, tier_at_most
from credwise.models.inputs import EligibilityInput, EmploymentStatus, LoanType
from credwise.models.results import EligibilityResult, Rating

logger = logging.getLogger(__name__)

MAX_DTI = {
    LoanType.MORTGAGE: Decimal("43"),  # Qualified mortgage limit
    LoanType.AUTO: Decimal("50"),
    LoanType.PERSONAL: Decimal("40"),
    LoanType.STUDENT: Decimal("45"),
}
DEFAULT_MAX_DTI = Decimal("43")


@dataclass(frozen=True)
class RateSheet:
    term_months: int
    # (minimum credit score, annual rate %) from best to worst
    tiers: tuple[tuple[Decimal, Decimal], ...]
    base_rate: Decimal  # Below every tier, or the only rate when there are none

    def rate_for(self, credit_score: int) -> Decimal:
        return tier_at_least(Decimal(credit_score), self.tiers, self.base_rate)


SCORE_BRACKETS = (Decimal("760"), Decimal("700"), Decimal("660"), Decimal("620"))


def _score_tiers(*rates: str) -> tuple[tuple[Decimal, Decimal], ...]:
    return tuple(zip(SCORE_BRACKETS, (Decimal(r) for r in rates)))


RATE_SHEETS = {
    LoanType.MORTGAGE: RateSheet(360, _score_tiers("5.5", "6.0", "6.5", "7.0"), Decimal("8.0")),
    LoanType.AUTO: RateSheet(60, _score_tiers("4.5", "5.0", "6.0", "7.5"), Decimal("10.0")),
    LoanType.PERSONAL: RateSheet(36, _score_tiers("7.0", "9.0", "12.0", "15.0"), Decimal("20.0")),
    LoanType.STUDENT: RateSheet(120, (), Decimal("6.5")),  # Fixed regardless of score
}
DEFAULT_RATE_SHEET = RateSheet(60, (), Decimal("7.0"))

CREDIT_POINTS = tuple(zip(SCORE_BRACKETS, (40, 35, 25, 15)))
CREDIT_POINTS_FLOOR = 5

# Current DTI as a fraction of the lender maximum
DTI_POINTS = (
    (Decimal("0.5"), 40),
    (Decimal("0.7"), 30),
    (Decimal("0.9"), 20),
    (Decimal("1.0"), 10),
)

EMPLOYMENT_POINTS = {
    EmploymentStatus.FULL_TIME: 20,
    EmploymentStatus.PART_TIME: 15,
    EmploymentStatus.SELF_EMPLOYED: 10,
    EmploymentStatus.RETIRED: 15,
    EmploymentStatus.UNEMPLOYED: 5,
}

APPROVAL_RATINGS = (
    (Decimal("80"), Rating("Excellent")),
    (Decimal("60"), Rating("Good")),
    (Decimal("40"), Rating("Fair")),
    (Decimal("20"), Rating("Poor")),
)
VERY_POOR = Rating("Very Poor")

TIP_CREDIT = "Improve your credit score to qualify for better interest rates and higher loan amounts."
TIP_DTI = (
    "Your debt-to-income ratio is high. Consider paying down existing debts "
    "before applying for a new loan."
)
TIP_EMPLOYMENT = (
    "Lenders prefer borrowers with stable, full-time employment. Consider "
    "applying after securing more stable income."
)
TIP_COSIGNER = "Consider applying with a co-signer to improve your chances of approval."
TIP_STRONG = "You have a strong application profile. Shop around for the best rates."
TIP_NO_INCOME = "Enter a positive monthly income to estimate your loan eligibility."


def max_dti_for(loan_type: LoanType) -> Decimal:
    return MAX_DTI.get(loan_type, DEFAULT_MAX_DTI)


def rate_sheet_for(loan_type: LoanType) -> RateSheet:
    return RATE_SHEETS.get(loan_type, DEFAULT_RATE_SHEET)


def approval_chance(
    credit_score: int,
    current_dti: Decimal,
    max_dti: Decimal,
    employment_status: EmploymentStatus,
) -> int:
    """Bracket-based approval odds, summed directly as a percentage."""
    chance = tier_at_least(Decimal(credit_score), CREDIT_POINTS, CREDIT_POINTS_FLOOR)
    if max_dti > 0:
        chance += tier_at_most(current_dti / max_dti, DTI_POINTS, 0)
    chance += EMPLOYMENT_POINTS.get(employment_status, EMPLOYMENT_POINTS[EmploymentStatus.UNEMPLOYED])
    return chance


def approval_rating(chance: int) -> Rating:
    return tier_at_least(Decimal(chance), APPROVAL_RATINGS, VERY_POOR)


def eligibility_tips(
    credit_score: int,
    current_dti: Decimal,
    max_dti: Decimal,
    employment_status: EmploymentStatus,
    chance: int,
) -> list[str]:
    tips = []
    if credit_score < 700:
        tips.append(TIP_CREDIT)
    if current_dti > max_dti * Decimal("0.8"):
        tips.append(TIP_DTI)
    if employment_status not in (EmploymentStatus.FULL_TIME, EmploymentStatus.RETIRED):
        tips.append(TIP_EMPLOYMENT)
    if chance < 50:
        tips.append(TIP_COSIGNER)
    if not tips:
        tips.append(TIP_STRONG)
    return tips


def resolve_eligibility(data: EligibilityInput) -> EligibilityResult:
    """Maximum loan, approval odds and advice for a borrower and loan type."""
    if data.monthly_income <= 0:
        logger.debug("Eligibility skipped for non-positive income")
        return EligibilityResult(tips=[TIP_NO_INCOME])

    max_dti = max_dti_for(data.loan_type)
    sheet = rate_sheet_for(data.loan_type)
    rate = sheet.rate_for(data.credit_score)
    current_dti = data.current_dti

    headroom = max(Decimal("0"), max_dti - current_dti)
    max_payment = headroom / 100 * data.monthly_income

    principal = max_principal(max_payment, monthly_rate(rate), sheet.term_months)
    principal = (principal / 1000).to_integral_value(rounding=ROUND_FLOOR) * 1000

    chance = approval_chance(data.credit_score, current_dti, max_dti, data.employment_status)

    return EligibilityResult(
        max_eligible_principal=principal,
        approval_chance_pct=chance,
        approval_rating=approval_rating(chance),
        max_dti=max_dti,
        current_dti=current_dti.quantize(Decimal("0.1"), ROUND_HALF_UP),
        interest_rate=rate,
        term_months=sheet.term_months,
        max_monthly_payment=max_payment.quantize(Decimal("0.01"), ROUND_HALF_UP),
        tips=eligibility_tips(data.credit_score, current_dti, max_dti, data.employment_status, chance),
    )
