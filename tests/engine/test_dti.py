from decimal import Decimal

import pytest

from credwise.engine.dti import compute_dti, dti_rating, dti_ratio, dti_tips


class TestDTIRatio:
    def test_basic(self):
        assert dti_ratio(Decimal("5000"), Decimal("1400")) == Decimal("28")

    def test_no_income(self):
        assert dti_ratio(Decimal("0"), Decimal("1400")) is None
        assert dti_ratio(Decimal("-10"), Decimal("1400")) is None


class TestDTIRating:
    @pytest.mark.parametrize("ratio,label", [
        ("0", "Excellent"),
        ("19.9", "Excellent"),
        ("20", "Good"),
        ("35.9", "Good"),
        ("36", "Fair"),
        ("42.9", "Fair"),
        ("43", "Poor"),
        ("49.9", "Poor"),
        ("50", "Very Poor"),
        ("120", "Very Poor"),
    ])
    def test_bands(self, ratio, label):
        assert dti_rating(Decimal(ratio)).label == label

    def test_rating_has_description(self):
        assert dti_rating(Decimal("10")).description


class TestDTITips:
    def test_low_ratio_gets_only_general_tip(self):
        tips = dti_tips(Decimal("15"))
        assert len(tips) == 1
        assert "new debt" in tips[0]

    def test_high_ratio_gets_everything(self):
        tips = dti_tips(Decimal("45"))
        assert len(tips) == 4
        assert "highest-interest" in tips[0]
        assert "increase your income" in tips[1]
        assert "consolidation" in tips[2]
        assert "new debt" in tips[3]


class TestComputeDTI:
    def test_good_ratio(self):
        result = compute_dti(Decimal("5000"), Decimal("1400"))
        assert result.ratio == Decimal("28.0")
        assert result.rating.label == "Good"
        assert result.remaining_income == Decimal("3600.00")
        assert len(result.tips) == 2

    def test_ratio_rounds_to_one_decimal(self):
        result = compute_dti(Decimal("3000"), Decimal("1000"))
        assert result.ratio == Decimal("33.3")

    def test_debt_above_income(self):
        result = compute_dti(Decimal("2000"), Decimal("2500"))
        assert result.ratio == Decimal("125.0")
        assert result.rating.label == "Very Poor"
        assert result.remaining_income == Decimal("0")

    def test_no_income(self):
        result = compute_dti(Decimal("0"), Decimal("500"))
        assert result.ratio is None
        assert result.rating is None
        assert result.tips == []
