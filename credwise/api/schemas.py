"""Pydantic schemas for API request/response models."""

from decimal import Decimal

from pydantic import BaseModel, Field

from credwise.models.inputs import EmploymentStatus, LoanType, TermUnit


# ---- Request schemas ----

class LoanRequest(BaseModel):
    principal: Decimal = Field(..., gt=0, description="Amount borrowed")
    annual_rate_pct: Decimal = Field(..., ge=0, le=100, description="Annual rate, e.g. 5.5 for 5.5%")
    term: int = Field(30, ge=1, le=600)
    term_unit: TermUnit = TermUnit.YEARS


class PayoffRequest(BaseModel):
    balance: Decimal = Field(..., gt=0)
    annual_rate_pct: Decimal = Field(..., ge=0, le=100)
    monthly_payment: Decimal = Field(..., gt=0)


class SavingsRequest(BaseModel):
    initial_deposit: Decimal = Field(Decimal("0"), ge=0)
    monthly_contribution: Decimal = Field(Decimal("0"), ge=0)
    annual_rate_pct: Decimal = Field(..., ge=0, le=100)
    years: int = Field(..., ge=1, le=50)


class CreditScoreRequest(BaseModel):
    payment_history_pct: Decimal = Field(..., ge=0, le=100)
    utilization_pct: Decimal = Field(..., ge=0, le=100)
    credit_age_years: Decimal = Field(..., ge=0)
    credit_mix_count: int = Field(..., ge=1, le=5)
    hard_inquiries: int = Field(..., ge=0)


class DTIRequest(BaseModel):
    monthly_income: Decimal = Field(..., gt=0)
    monthly_debt: Decimal = Field(..., ge=0)


class EligibilityRequest(BaseModel):
    monthly_income: Decimal = Field(..., gt=0)
    existing_monthly_debt: Decimal = Field(Decimal("0"), ge=0)
    credit_score: int = Field(..., ge=300, le=850)
    loan_type: LoanType = LoanType.MORTGAGE
    employment_status: EmploymentStatus = EmploymentStatus.FULL_TIME


# ---- Response schemas ----

class SchedulePointResponse(BaseModel):
    period: int
    payment: Decimal
    principal: Decimal
    interest: Decimal
    balance: Decimal


class YearlyDebtResponse(BaseModel):
    year: int
    principal: Decimal
    interest: Decimal
    debt_service: Decimal
    ending_balance: Decimal


class LoanResponse(BaseModel):
    monthly_payment: Decimal
    total_payment: Decimal
    total_interest: Decimal
    term_months: int
    ending_balance: Decimal
    schedule: list[SchedulePointResponse]
    yearly_series: list[YearlyDebtResponse]


class PayoffResponse(BaseModel):
    status: str
    months: int
    total_interest: Decimal
    total_paid: Decimal
    minimum_payment: Decimal
    message: str | None = None
    series: list[SchedulePointResponse] = []


class SavingsPointResponse(BaseModel):
    year: int
    balance: Decimal
    contributions: Decimal
    interest: Decimal


class SavingsResponse(BaseModel):
    final_balance: Decimal
    total_contributions: Decimal
    total_interest: Decimal
    interest_share_pct: Decimal
    yearly_series: list[SavingsPointResponse]


class CreditScoreResponse(BaseModel):
    score: int
    rating: str
    factor_scores: dict[str, Decimal]
    tips: list[str]


class DTIResponse(BaseModel):
    ratio: Decimal
    remaining_income: Decimal
    rating: str
    description: str
    tips: list[str]


class EligibilityResponse(BaseModel):
    max_eligible_principal: Decimal
    approval_chance_pct: int
    approval_rating: str
    max_dti: Decimal
    current_dti: Decimal
    interest_rate: Decimal
    term_months: int
    max_monthly_payment: Decimal
    tips: list[str]
