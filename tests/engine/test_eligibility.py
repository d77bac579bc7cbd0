from decimal import Decimal

import pytest

from credwise.engine.eligibility import (
    TIP_COSIGNER,
    TIP_CREDIT,
    TIP_DTI,
    TIP_EMPLOYMENT,
    TIP_NO_INCOME,
    TIP_STRONG,
    approval_chance,
    approval_rating,
    max_dti_for,
    rate_sheet_for,
    resolve_eligibility,
)
from credwise.models.inputs import EligibilityInput, EmploymentStatus, LoanType


def _borrower(income="5000", debt="1500", score=700, loan_type=LoanType.MORTGAGE,
              employment=EmploymentStatus.FULL_TIME) -> EligibilityInput:
    return EligibilityInput(
        monthly_income=Decimal(income),
        existing_monthly_debt=Decimal(debt),
        credit_score=score,
        loan_type=loan_type,
        employment_status=employment,
    )


class TestRateSheets:
    @pytest.mark.parametrize("loan_type,max_dti", [
        (LoanType.MORTGAGE, "43"),
        (LoanType.AUTO, "50"),
        (LoanType.PERSONAL, "40"),
        (LoanType.STUDENT, "45"),
    ])
    def test_max_dti(self, loan_type, max_dti):
        assert max_dti_for(loan_type) == Decimal(max_dti)

    @pytest.mark.parametrize("score,rate", [
        (800, "5.5"),
        (760, "5.5"),
        (759, "6.0"),
        (700, "6.0"),
        (660, "6.5"),
        (620, "7.0"),
        (619, "8.0"),
    ])
    def test_mortgage_rate_by_score(self, score, rate):
        assert rate_sheet_for(LoanType.MORTGAGE).rate_for(score) == Decimal(rate)

    def test_personal_worst_rate(self):
        assert rate_sheet_for(LoanType.PERSONAL).rate_for(500) == Decimal("20.0")

    def test_student_rate_ignores_score(self):
        sheet = rate_sheet_for(LoanType.STUDENT)
        assert sheet.rate_for(820) == sheet.rate_for(400) == Decimal("6.5")
        assert sheet.term_months == 120

    def test_terms(self):
        assert rate_sheet_for(LoanType.MORTGAGE).term_months == 360
        assert rate_sheet_for(LoanType.AUTO).term_months == 60
        assert rate_sheet_for(LoanType.PERSONAL).term_months == 36


class TestApprovalChance:
    def test_strong_applicant(self):
        assert approval_chance(780, Decimal("10"), Decimal("43"), EmploymentStatus.FULL_TIME) == 100

    def test_weak_applicant(self):
        assert approval_chance(500, Decimal("60"), Decimal("43"), EmploymentStatus.UNEMPLOYED) == 10

    def test_dti_exactly_at_max(self):
        # Ratio 1.0 still earns the last DTI bracket
        assert approval_chance(620, Decimal("43"), Decimal("43"), EmploymentStatus.SELF_EMPLOYED) == 35

    @pytest.mark.parametrize("chance,label", [
        (100, "Excellent"),
        (80, "Excellent"),
        (79, "Good"),
        (60, "Good"),
        (40, "Fair"),
        (20, "Poor"),
        (19, "Very Poor"),
    ])
    def test_rating_bands(self, chance, label):
        assert approval_rating(chance).label == label


class TestResolveEligibility:
    def test_typical_borrower(self, typical_borrower):
        result = resolve_eligibility(typical_borrower)
        assert result.max_dti == Decimal("43")
        assert result.current_dti == Decimal("30.0")
        assert result.interest_rate == Decimal("6.0")
        assert result.term_months == 360
        assert result.max_monthly_payment == Decimal("650.00")
        # 650 at 0.5%/month over 360 months supports ~108,415
        assert result.max_eligible_principal == Decimal("108000")
        assert result.approval_chance_pct == 85
        assert result.approval_rating.label == "Excellent"
        assert result.tips == [TIP_STRONG]

    def test_principal_rounds_down_to_thousand(self):
        result = resolve_eligibility(_borrower(debt="1000", loan_type=LoanType.STUDENT))
        assert result.max_eligible_principal % 1000 == 0
        assert result.max_eligible_principal > 0

    def test_no_headroom(self):
        result = resolve_eligibility(_borrower(debt="2500"))
        assert result.max_eligible_principal == Decimal("0")
        assert result.max_monthly_payment == Decimal("0.00")
        assert result.approval_chance_pct == 55
        assert result.tips == [TIP_DTI]

    def test_weak_part_time_applicant_gets_all_tips(self):
        result = resolve_eligibility(_borrower(debt="2500", score=600, employment=EmploymentStatus.PART_TIME))
        assert result.approval_chance_pct == 20
        assert result.approval_rating.label == "Poor"
        assert result.interest_rate == Decimal("8.0")
        assert result.tips == [TIP_CREDIT, TIP_DTI, TIP_EMPLOYMENT, TIP_COSIGNER]

    def test_retired_is_not_flagged(self):
        result = resolve_eligibility(_borrower(employment=EmploymentStatus.RETIRED))
        assert TIP_EMPLOYMENT not in result.tips

    def test_auto_loan_allows_more_dti(self):
        mortgage = resolve_eligibility(_borrower(debt="2300"))
        auto = resolve_eligibility(_borrower(debt="2300", loan_type=LoanType.AUTO))
        assert mortgage.max_monthly_payment == Decimal("0.00")
        assert auto.max_monthly_payment == Decimal("200.00")
        assert auto.max_eligible_principal == Decimal("10000")

    def test_no_income(self):
        result = resolve_eligibility(_borrower(income="0"))
        assert result.max_eligible_principal == Decimal("0")
        assert result.approval_rating is None
        assert result.tips == [TIP_NO_INCOME]
