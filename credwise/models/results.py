from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


@dataclass(frozen=True)
class SchedulePoint:
    period: int  # 1-based
    payment: Decimal
    principal: Decimal
    interest: Decimal
    balance: Decimal  # Ending balance, never negative


@dataclass(frozen=True)
class YearlyDebtSummary:
    year: int
    principal: Decimal
    interest: Decimal
    debt_service: Decimal
    ending_balance: Decimal


@dataclass
class LoanAmortization:
    monthly_payment: Decimal = Decimal("0")
    total_payment: Decimal = Decimal("0")
    total_interest: Decimal = Decimal("0")
    term_months: int = 0
    ending_balance: Decimal = Decimal("0")

    # First periods only; the yearly series covers the whole term
    schedule: list[SchedulePoint] = field(default_factory=list)
    yearly_series: list[YearlyDebtSummary] = field(default_factory=list)


class PayoffStatus(Enum):
    PAID_OFF = "paid_off"
    PAYMENT_TOO_LOW = "payment_too_low"
    CAPPED = "capped"  # Hit the iteration cap before reaching zero
    INVALID_INPUT = "invalid_input"


@dataclass
class PayoffResult:
    status: PayoffStatus
    months: int = 0
    total_interest: Decimal = Decimal("0")
    total_paid: Decimal = Decimal("0")
    minimum_payment: Decimal = Decimal("0")  # Payment must exceed this to cut principal
    series: list[SchedulePoint] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status in (PayoffStatus.PAID_OFF, PayoffStatus.CAPPED)


@dataclass(frozen=True)
class SavingsPoint:
    year: int  # 0 = starting point
    balance: Decimal
    contributions: Decimal  # Cumulative, including the initial deposit
    interest: Decimal  # Cumulative


@dataclass
class SavingsProjection:
    final_balance: Decimal = Decimal("0")
    total_contributions: Decimal = Decimal("0")
    total_interest: Decimal = Decimal("0")
    yearly_series: list[SavingsPoint] = field(default_factory=list)

    @property
    def interest_share_pct(self) -> Decimal:
        """Share of the final balance that came from interest."""
        if self.final_balance <= 0:
            return Decimal("0")
        return (self.total_interest / self.final_balance * 100).quantize(Decimal("0.1"))


@dataclass(frozen=True)
class Rating:
    label: str
    description: str = ""


@dataclass
class DTIResult:
    ratio: Decimal | None = None  # Percentage; None when income is not positive
    remaining_income: Decimal = Decimal("0")
    rating: Rating | None = None
    tips: list[str] = field(default_factory=list)


@dataclass
class EligibilityResult:
    max_eligible_principal: Decimal = Decimal("0")
    approval_chance_pct: int = 0
    approval_rating: Rating | None = None
    max_dti: Decimal = Decimal("0")
    current_dti: Decimal = Decimal("0")
    interest_rate: Decimal = Decimal("0")
    term_months: int = 0
    max_monthly_payment: Decimal = Decimal("0")
    tips: list[str] = field(default_factory=list)
