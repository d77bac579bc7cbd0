"""Credit score simulator.

Weighted factors (0-100 composite, rescaled to 300-850):
  Payment history:  35%
  Utilization:      30% (lower is better)
  Credit age:       15% (ceiling at 10 years)
  Credit mix:       10%
  Hard inquiries:   10% (fewer is better)
"""

from decimal import Decimal, ROUND_HALF_UP

from credwise.engine.tiers import tier_at_least
from credwise.models.inputs import ScoreFactors
from credwise.models.results import Rating

SCORE_MIN = 300
SCORE_MAX = 850

WEIGHTS = {
    "payment_history": Decimal("0.35"),
    "utilization": Decimal("0.30"),
    "credit_age": Decimal("0.15"),
    "credit_mix": Decimal("0.10"),
    "inquiries": Decimal("0.10"),
}

CREDIT_AGE_CEILING_YEARS = 10
MAX_CREDIT_MIX = 5
MAX_PENALIZED_INQUIRIES = 10

CREDIT_RATINGS = (
    (Decimal("800"), Rating("Exceptional")),
    (Decimal("740"), Rating("Very Good")),
    (Decimal("670"), Rating("Good")),
    (Decimal("580"), Rating("Fair")),
)
POOR = Rating("Poor")


def _clamp(value: Decimal, low: Decimal, high: Decimal) -> Decimal:
    return max(low, min(high, value))


def factor_scores(factors: ScoreFactors) -> dict[str, Decimal]:
    """Each factor normalized to 0-100 before weighting."""
    hundred = Decimal("100")
    age = max(Decimal("0"), Decimal(factors.credit_age_years))
    mix = _clamp(Decimal(factors.credit_mix_count), Decimal("1"), Decimal(MAX_CREDIT_MIX))
    inquiries = _clamp(Decimal(factors.hard_inquiries), Decimal("0"), Decimal(MAX_PENALIZED_INQUIRIES))
    return {
        "payment_history": _clamp(Decimal(factors.payment_history_pct), Decimal("0"), hundred),
        "utilization": hundred - _clamp(Decimal(factors.utilization_pct), Decimal("0"), hundred),
        "credit_age": min(age * hundred / CREDIT_AGE_CEILING_YEARS, hundred),
        "credit_mix": mix / MAX_CREDIT_MIX * hundred,
        "inquiries": (MAX_PENALIZED_INQUIRIES - inquiries) * hundred / MAX_PENALIZED_INQUIRIES,
    }


def composite_score(factors: ScoreFactors) -> Decimal:
    scores = factor_scores(factors)
    return sum((scores[name] * weight for name, weight in WEIGHTS.items()), Decimal("0"))


def estimate_credit_score(factors: ScoreFactors) -> int:
    """Simulated score in the 300-850 range."""
    composite = composite_score(factors)
    raw = SCORE_MIN + composite / 100 * (SCORE_MAX - SCORE_MIN)
    score = int(raw.quantize(Decimal("1"), ROUND_HALF_UP))
    return max(SCORE_MIN, min(SCORE_MAX, score))


def credit_rating(score: int) -> Rating:
    return tier_at_least(Decimal(score), CREDIT_RATINGS, POOR)


def credit_score_tips(factors: ScoreFactors) -> list[str]:
    tips = []
    if factors.utilization_pct > 30:
        tips.append("Try to keep your credit utilization below 30% to improve your score.")
    if factors.payment_history_pct < 100:
        tips.append("Make all payments on time. Set up automatic payments to avoid missing due dates.")
    if factors.hard_inquiries > 3:
        tips.append("Limit new credit applications. Too many hard inquiries can lower your score.")
    if factors.credit_age_years < 2:
        tips.append("Keep your oldest accounts open to increase your average credit age.")
    if factors.credit_mix_count < 3:
        tips.append("Consider diversifying your credit mix with different types of accounts.")
    return tips
