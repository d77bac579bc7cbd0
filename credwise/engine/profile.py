"""Onboarding history seeding and overview figures for a financial profile.

Pure functions; randomness is injected so the output is reproducible.
"""

import random
from datetime import date
from decimal import Decimal, ROUND_HALF_UP

from credwise.engine.dti import dti_ratio
from credwise.models.profile import FinancialProfile, HistoryPoint

HISTORY_MONTHS = 6

DEFAULT_BASE_SCORE = 650
DEFAULT_BASE_SAVINGS = Decimal("2000")
DEFAULT_BASE_DEBT = Decimal("5000")

SCORE_STEP = 10  # Points gained per month toward the current score
SCORE_JITTER = 5
SAVINGS_STEP = Decimal("0.10")
DEBT_STEP = Decimal("0.05")


def _month_back(today: date, months: int) -> date:
    index = today.year * 12 + today.month - 1 - months
    return date(index // 12, index % 12 + 1, 1)


def build_history(
    profile: FinancialProfile,
    today: date,
    rng: random.Random | None = None,
) -> FinancialProfile:
    """Seed six months of credit, savings and debt history ending at ``today``.

    Credit trends up toward the current score with a little jitter, savings
    grow and debt shrinks. Missing figures fall back to defaults.
    """
    rng = rng or random.Random()
    base_score = profile.credit_score or DEFAULT_BASE_SCORE
    base_savings = profile.total_savings or DEFAULT_BASE_SAVINGS
    base_debt = profile.total_debt or DEFAULT_BASE_DEBT

    credit, savings, debt = [], [], []
    for i in range(HISTORY_MONTHS - 1, -1, -1):
        month = _month_back(today, i).strftime("%b")

        jitter = rng.randint(-SCORE_JITTER, SCORE_JITTER - 1)
        score = max(300, min(850, base_score - i * SCORE_STEP + jitter))
        credit.append(HistoryPoint(month=month, value=Decimal(score)))

        saved = base_savings * (1 - i * SAVINGS_STEP)
        savings.append(HistoryPoint(month=month, value=saved.quantize(Decimal("1"), ROUND_HALF_UP)))

        owed = base_debt * (1 - i * DEBT_STEP)
        debt.append(HistoryPoint(month=month, value=owed.quantize(Decimal("1"), ROUND_HALF_UP)))

    return profile.model_copy(update={
        "credit_history": credit,
        "savings_history": savings,
        "debt_history": debt,
    })


def complete_onboarding(
    profile: FinancialProfile,
    today: date,
    rng: random.Random | None = None,
) -> FinancialProfile:
    seeded = build_history(profile, today, rng)
    return seeded.model_copy(update={"has_completed_onboarding": True})


def month_over_month_change(history: list[HistoryPoint]) -> Decimal | None:
    if len(history) < 2:
        return None
    return history[-1].value - history[-2].value


def profile_dti(profile: FinancialProfile) -> Decimal | None:
    """DTI percentage for the overview card, if both figures are known."""
    if not profile.monthly_income or not profile.monthly_debt:
        return None
    ratio = dti_ratio(profile.monthly_income, profile.monthly_debt)
    return ratio.quantize(Decimal("0.1"), ROUND_HALF_UP) if ratio is not None else None
