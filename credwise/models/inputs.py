from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class TermUnit(Enum):
    MONTHS = "months"
    YEARS = "years"


class LoanType(Enum):
    MORTGAGE = "mortgage"
    AUTO = "auto"
    PERSONAL = "personal"
    STUDENT = "student"


class EmploymentStatus(Enum):
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    SELF_EMPLOYED = "self-employed"
    RETIRED = "retired"
    UNEMPLOYED = "unemployed"


@dataclass(frozen=True)
class LoanParameters:
    principal: Decimal
    annual_rate_pct: Decimal  # e.g. Decimal("5.5") for 5.5%
    term: int = 30
    term_unit: TermUnit = TermUnit.YEARS

    @property
    def term_months(self) -> int:
        if self.term_unit is TermUnit.YEARS:
            return self.term * 12
        return self.term


@dataclass(frozen=True)
class PayoffParameters:
    balance: Decimal
    annual_rate_pct: Decimal
    monthly_payment: Decimal


@dataclass(frozen=True)
class SavingsParameters:
    initial_deposit: Decimal
    monthly_contribution: Decimal
    annual_rate_pct: Decimal
    years: int


@dataclass(frozen=True)
class ScoreFactors:
    payment_history_pct: Decimal  # 0-100, share of on-time payments
    utilization_pct: Decimal  # 0-100, lower is better
    credit_age_years: Decimal
    credit_mix_count: int  # 1-5 account types
    hard_inquiries: int


@dataclass(frozen=True)
class EligibilityInput:
    monthly_income: Decimal
    existing_monthly_debt: Decimal
    credit_score: int
    loan_type: LoanType = LoanType.MORTGAGE
    employment_status: EmploymentStatus = EmploymentStatus.FULL_TIME

    @property
    def current_dti(self) -> Decimal:
        """Existing debt payments as a percentage of income."""
        if self.monthly_income <= 0:
            return Decimal("0")
        return self.existing_monthly_debt / self.monthly_income * 100
