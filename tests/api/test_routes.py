"""API endpoint tests against the in-process app."""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from credwise.api.app import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def _dec(value) -> Decimal:
    return Decimal(str(value))


def test_health_endpoint(client: TestClient):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


class TestLoanRoute:
    def test_amortization(self, client: TestClient):
        response = client.post("/api/v1/loan/amortization", json={
            "principal": 200000, "annual_rate_pct": 5.5, "term": 30, "term_unit": "years",
        })
        assert response.status_code == 200
        data = response.json()
        assert _dec(data["monthly_payment"]) == Decimal("1135.58")
        assert data["term_months"] == 360
        assert len(data["schedule"]) == 12
        assert len(data["yearly_series"]) == 30

    def test_term_in_months(self, client: TestClient):
        response = client.post("/api/v1/loan/amortization", json={
            "principal": 12000, "annual_rate_pct": 0, "term": 12, "term_unit": "months",
        })
        assert response.status_code == 200
        assert _dec(response.json()["monthly_payment"]) == Decimal("1000")

    def test_rate_below_decimal_precision(self, client: TestClient):
        response = client.post("/api/v1/loan/amortization", json={
            "principal": 1000, "annual_rate_pct": "1E-26", "term": 12, "term_unit": "months",
        })
        assert response.status_code == 200
        assert _dec(response.json()["monthly_payment"]) == Decimal("83.33")

    def test_rejects_non_positive_principal(self, client: TestClient):
        response = client.post("/api/v1/loan/amortization", json={"principal": 0, "annual_rate_pct": 5})
        assert response.status_code == 422


class TestCreditCardRoute:
    def test_payoff(self, client: TestClient):
        response = client.post("/api/v1/credit-card/payoff", json={
            "balance": 5000, "annual_rate_pct": 18.99, "monthly_payment": 200,
        })
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "paid_off"
        assert data["months"] == 33
        assert data["message"] is None
        assert len(data["series"]) == 24

    def test_payment_too_low_is_not_an_error(self, client: TestClient):
        response = client.post("/api/v1/credit-card/payoff", json={
            "balance": 10000, "annual_rate_pct": 24, "monthly_payment": 150,
        })
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "payment_too_low"
        assert _dec(data["minimum_payment"]) == Decimal("200.00")
        assert "200.00" in data["message"]
        assert data["series"] == []

    def test_capped(self, client: TestClient):
        response = client.post("/api/v1/credit-card/payoff", json={
            "balance": 10000, "annual_rate_pct": 12, "monthly_payment": 100.1,
        })
        data = response.json()
        assert data["status"] == "capped"
        assert data["months"] == 600
        assert _dec(data["total_paid"]) == Decimal("60060.00")
        assert "50 years" in data["message"]

    def test_rejects_zero_payment(self, client: TestClient):
        response = client.post("/api/v1/credit-card/payoff", json={
            "balance": 5000, "annual_rate_pct": 18.99, "monthly_payment": 0,
        })
        assert response.status_code == 422


class TestSavingsRoute:
    def test_projection(self, client: TestClient):
        response = client.post("/api/v1/savings/projection", json={
            "initial_deposit": 0, "monthly_contribution": 100, "annual_rate_pct": 12, "years": 1,
        })
        assert response.status_code == 200
        data = response.json()
        assert _dec(data["final_balance"]) == Decimal("1280.93")
        assert _dec(data["interest_share_pct"]) == Decimal("6.3")
        assert [p["year"] for p in data["yearly_series"]] == [0, 1]

    def test_rejects_long_horizon(self, client: TestClient):
        response = client.post("/api/v1/savings/projection", json={"annual_rate_pct": 5, "years": 51})
        assert response.status_code == 422


class TestCreditRoutes:
    def test_estimate(self, client: TestClient):
        response = client.post("/api/v1/credit-score/estimate", json={
            "payment_history_pct": 95,
            "utilization_pct": 30,
            "credit_age_years": 5,
            "credit_mix_count": 3,
            "hard_inquiries": 2,
        })
        assert response.status_code == 200
        data = response.json()
        assert data["score"] == 717
        assert data["rating"] == "Good"
        assert set(data["factor_scores"]) == {
            "payment_history", "utilization", "credit_age", "credit_mix", "inquiries",
        }
        assert len(data["tips"]) == 1

    def test_dti(self, client: TestClient):
        response = client.post("/api/v1/dti", json={"monthly_income": 5000, "monthly_debt": 1400})
        assert response.status_code == 200
        data = response.json()
        assert _dec(data["ratio"]) == Decimal("28.0")
        assert data["rating"] == "Good"
        assert data["description"]
        assert len(data["tips"]) == 2

    def test_dti_rejects_zero_income(self, client: TestClient):
        response = client.post("/api/v1/dti", json={"monthly_income": 0, "monthly_debt": 1400})
        assert response.status_code == 422


class TestEligibilityRoute:
    def test_typical_borrower(self, client: TestClient):
        response = client.post("/api/v1/eligibility", json={
            "monthly_income": 5000,
            "existing_monthly_debt": 1500,
            "credit_score": 700,
            "loan_type": "mortgage",
            "employment_status": "full-time",
        })
        assert response.status_code == 200
        data = response.json()
        assert _dec(data["max_eligible_principal"]) == Decimal("108000")
        assert data["approval_chance_pct"] == 85
        assert data["approval_rating"] == "Excellent"
        assert data["term_months"] == 360

    def test_rejects_unknown_loan_type(self, client: TestClient):
        response = client.post("/api/v1/eligibility", json={
            "monthly_income": 5000, "credit_score": 700, "loan_type": "boat",
        })
        assert response.status_code == 422
