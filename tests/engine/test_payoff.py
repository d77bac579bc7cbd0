from decimal import Decimal

from credwise.engine.payoff import (
    PAYOFF_MAX_MONTHS,
    PAYOFF_SERIES_LIMIT,
    is_payment_too_low,
    minimum_payment,
    simulate_payoff,
)
from credwise.models.inputs import PayoffParameters
from credwise.models.results import PayoffStatus


class TestMinimumPayment:
    def test_one_month_of_interest(self):
        assert minimum_payment(Decimal("10000"), Decimal("12")) == Decimal("100")

    def test_payment_equal_to_interest_is_too_low(self):
        params = PayoffParameters(Decimal("10000"), Decimal("12"), Decimal("100"))
        assert is_payment_too_low(params)

    def test_payment_above_interest_is_fine(self):
        params = PayoffParameters(Decimal("10000"), Decimal("12"), Decimal("100.01"))
        assert not is_payment_too_low(params)


class TestSimulatePayoff:
    def test_standard_card(self, standard_card):
        """$5K at 18.99% paying $200/month."""
        result = simulate_payoff(standard_card)
        assert result.status is PayoffStatus.PAID_OFF
        assert result.ok
        assert result.months == 33
        assert Decimal("1350") < result.total_interest < Decimal("1480")
        assert result.total_paid == Decimal("5000") + result.total_interest

    def test_first_month_split(self, standard_card):
        result = simulate_payoff(standard_card)
        first = result.series[0]
        # 5000 * 0.1899 / 12 = 79.125
        assert first.interest == Decimal("79.13")
        assert first.principal == Decimal("120.88")
        assert first.period == 1

    def test_series_is_truncated(self, standard_card):
        result = simulate_payoff(standard_card)
        assert len(result.series) == PAYOFF_SERIES_LIMIT
        assert [p.period for p in result.series] == list(range(1, PAYOFF_SERIES_LIMIT + 1))

    def test_short_payoff_series_ends_at_zero(self):
        result = simulate_payoff(PayoffParameters(Decimal("1000"), Decimal("12"), Decimal("500")))
        assert result.months == 3
        assert len(result.series) == 3
        assert result.series[-1].balance == Decimal("0.00")
        # Last payment only covers what is left
        assert result.series[-1].payment < Decimal("500")

    def test_payment_too_low(self):
        result = simulate_payoff(PayoffParameters(Decimal("10000"), Decimal("24"), Decimal("150")))
        assert result.status is PayoffStatus.PAYMENT_TOO_LOW
        assert not result.ok
        assert result.minimum_payment == Decimal("200.00")
        assert result.months == 0
        assert result.series == []

    def test_capped_when_barely_above_interest(self):
        result = simulate_payoff(PayoffParameters(Decimal("10000"), Decimal("12"), Decimal("100.1")))
        assert result.status is PayoffStatus.CAPPED
        assert result.ok
        assert result.months == PAYOFF_MAX_MONTHS
        assert result.total_interest > 0
        # Only what was actually paid, not the balance still outstanding
        assert result.total_paid == Decimal("100.1") * PAYOFF_MAX_MONTHS
        assert result.total_paid < Decimal("10000") + result.total_interest

    def test_slightly_higher_payment_finishes(self):
        result = simulate_payoff(PayoffParameters(Decimal("10000"), Decimal("12"), Decimal("101")))
        assert result.status is PayoffStatus.PAID_OFF
        assert 455 < result.months < 470

    def test_zero_rate(self):
        result = simulate_payoff(PayoffParameters(Decimal("1000"), Decimal("0"), Decimal("100")))
        assert result.months == 10
        assert result.total_interest == Decimal("0.00")
        assert result.total_paid == Decimal("1000.00")

    def test_invalid_balance(self):
        result = simulate_payoff(PayoffParameters(Decimal("0"), Decimal("18"), Decimal("100")))
        assert result.status is PayoffStatus.INVALID_INPUT

    def test_negative_rate_is_invalid(self):
        result = simulate_payoff(PayoffParameters(Decimal("1000"), Decimal("-12"), Decimal("100")))
        assert result.status is PayoffStatus.INVALID_INPUT
        assert result.total_interest == Decimal("0")

    def test_invalid_payment(self):
        result = simulate_payoff(PayoffParameters(Decimal("1000"), Decimal("18"), Decimal("-5")))
        assert result.status is PayoffStatus.INVALID_INPUT
        assert not result.ok
