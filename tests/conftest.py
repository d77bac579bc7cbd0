"""Canonical test fixtures used across the engine and API tests.

Loan: 200K at 5.5% for 30 years.
Card: 5K balance at 18.99% APR, 200/month.
Borrower: 5K/month income, 1.5K existing debt, 700 score, full-time.
"""

import pytest
from decimal import Decimal

from credwise.models.inputs import (
    EligibilityInput,
    EmploymentStatus,
    LoanParameters,
    LoanType,
    PayoffParameters,
    SavingsParameters,
    ScoreFactors,
    TermUnit,
)


@pytest.fixture
def standard_mortgage() -> LoanParameters:
    return LoanParameters(
        principal=Decimal("200000"),
        annual_rate_pct=Decimal("5.5"),
        term=30,
        term_unit=TermUnit.YEARS,
    )


@pytest.fixture
def standard_card() -> PayoffParameters:
    return PayoffParameters(
        balance=Decimal("5000"),
        annual_rate_pct=Decimal("18.99"),
        monthly_payment=Decimal("200"),
    )


@pytest.fixture
def standard_savings() -> SavingsParameters:
    return SavingsParameters(
        initial_deposit=Decimal("1000"),
        monthly_contribution=Decimal("200"),
        annual_rate_pct=Decimal("5"),
        years=10,
    )


@pytest.fixture
def typical_factors() -> ScoreFactors:
    return ScoreFactors(
        payment_history_pct=Decimal("95"),
        utilization_pct=Decimal("30"),
        credit_age_years=Decimal("5"),
        credit_mix_count=3,
        hard_inquiries=2,
    )


@pytest.fixture
def typical_borrower() -> EligibilityInput:
    return EligibilityInput(
        monthly_income=Decimal("5000"),
        existing_monthly_debt=Decimal("1500"),
        credit_score=700,
        loan_type=LoanType.MORTGAGE,
        employment_status=EmploymentStatus.FULL_TIME,
    )
