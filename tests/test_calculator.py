"""Tests for the stand-alone extra-repayment calculator."""

import pytest
from debtpro.calculator import _annuity_repayment, calculate_extra_repayment, format_years_months


class TestAnnuityRepayment:
    def test_known_repayment(self):
        """600,000 at 5.5% over 30 years ≈ 3,406.73/month"""
        assert _annuity_repayment(600_000, 0.055 / 12, 360) == pytest.approx(3_406.73, abs=0.05)

    def test_total_exceeds_principal(self):
        payment = _annuity_repayment(500_000, 0.06 / 12, 300)
        assert payment * 300 > 500_000


class TestCalculateExtraRepayment:
    def test_missing_inputs(self):
        assert calculate_extra_repayment(0, 0.055, 30, 300) is None
        assert calculate_extra_repayment(600_000, 0, 30, 300) is None
        assert calculate_extra_repayment(600_000, 0.055, 0, 300) is None

    def test_no_extra_matches_term(self):
        result = calculate_extra_repayment(600_000, 0.055, 30, 0)
        assert result.payoff_months_with_extra == 360
        assert result.months_saved == 0
        assert result.interest_saved == pytest.approx(0, abs=1.0)

    def test_baseline(self):
        result = calculate_extra_repayment(600_000, 0.055, 30, 300)
        assert result.baseline_months == 360
        assert result.min_repayment == pytest.approx(3_406.73, abs=0.05)
        assert result.baseline_interest == pytest.approx(result.min_repayment * 360 - 600_000)

    def test_extra_saves_time_and_interest(self):
        result = calculate_extra_repayment(600_000, 0.055, 30, 300)
        assert result.payoff_months_with_extra < 360
        assert result.months_saved == 360 - result.payoff_months_with_extra
        assert result.interest_saved > 0
        assert result.interest_with_extra < result.baseline_interest

    def test_more_extra_saves_more(self):
        small = calculate_extra_repayment(600_000, 0.055, 30, 200)
        large = calculate_extra_repayment(600_000, 0.055, 30, 1_000)
        assert large.months_saved > small.months_saved
        assert large.interest_saved > small.interest_saved


class TestFormatYearsMonths:
    @pytest.mark.parametrize(
        "months, expected",
        [
            (27, "2 years 3 months"),
            (24, "2 years"),
            (5, "5 months"),
            (2.5, "3 months"),
            (26.5, "2 years 3 months"),
            (23.5, "2 years"),
            (360, "30 years"),
            (0, "-"),
            (-3, "-"),
            (float("nan"), "-"),
            (float("inf"), "-"),
        ],
    )
    def test_format(self, months, expected):
        assert format_years_months(months) == expected
