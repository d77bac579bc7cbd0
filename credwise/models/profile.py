"""User financial profile kept in browser-local storage.

Pydantic so it round-trips through the dashboard's JSON store.
"""

from decimal import Decimal

from pydantic import BaseModel, Field


class HistoryPoint(BaseModel):
    month: str  # Short month name, e.g. "Jan"
    value: Decimal


class FinancialProfile(BaseModel):
    name: str = ""
    credit_score: int | None = Field(None, ge=300, le=850)
    monthly_income: Decimal | None = Field(None, ge=0)
    monthly_debt: Decimal | None = Field(None, ge=0)
    total_savings: Decimal | None = Field(None, ge=0)
    total_debt: Decimal | None = Field(None, ge=0)

    credit_history: list[HistoryPoint] = Field(default_factory=list)
    savings_history: list[HistoryPoint] = Field(default_factory=list)
    debt_history: list[HistoryPoint] = Field(default_factory=list)

    has_completed_onboarding: bool = False
