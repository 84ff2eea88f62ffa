"""Tests for tax and sale-cost functions."""

import pytest
from debtpro.tax import (
    IP_SELLING_COST_RATE,
    calc_ip_net_sale_proceeds,
    calc_portfolio_after_cgt,
    calc_tax_effect,
)


class TestTaxEffect:
    def test_negative_gearing_refund(self):
        """Loss of 10,000 at 39% → 3,900 refund"""
        assert calc_tax_effect(-10_000, 0.39) == pytest.approx(3_900)

    def test_positive_gearing_extra_tax(self):
        """Profit of 5,000 at 39% → 1,950 extra tax"""
        assert calc_tax_effect(5_000, 0.39) == pytest.approx(-1_950)

    def test_break_even(self):
        assert calc_tax_effect(0, 0.39) == 0

    def test_zero_rate(self):
        assert calc_tax_effect(-10_000, 0) == 0

    def test_symmetric(self):
        assert calc_tax_effect(8_000, 0.3) == pytest.approx(-calc_tax_effect(-8_000, 0.3))


class TestPortfolioAfterCgt:
    def test_flat_rate_on_whole_value(self):
        assert calc_portfolio_after_cgt(100_000, 0.10) == pytest.approx(90_000)

    def test_empty_portfolio(self):
        assert calc_portfolio_after_cgt(0, 0.10) == 0

    def test_negative_value(self):
        assert calc_portfolio_after_cgt(-5_000, 0.10) == 0

    def test_zero_rate(self):
        assert calc_portfolio_after_cgt(50_000, 0) == 50_000


class TestIpNetSaleProceeds:
    def test_selling_cost_rate(self):
        assert IP_SELLING_COST_RATE == 0.03

    def test_equity_released(self):
        """800,000 × 0.97 - 600,000 = 176,000"""
        assert calc_ip_net_sale_proceeds(800_000, 600_000) == pytest.approx(176_000)

    def test_underwater_floors_at_zero(self):
        assert calc_ip_net_sale_proceeds(700_000, 735_000) == 0

    def test_selling_costs_can_sink_sale(self):
        """Value above loan but below loan after 3% costs"""
        assert calc_ip_net_sale_proceeds(740_000, 720_000) == 0

    def test_no_property(self):
        assert calc_ip_net_sale_proceeds(0, 0) == 0
