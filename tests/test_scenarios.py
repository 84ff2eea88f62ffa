"""Tests for tip comparison and growth scenarios."""

import pytest
from debtpro import BaseInputs, StrategyInputs, run_simulation
from debtpro.scenarios import (
    ALL_TIPS_LABEL,
    BASELINE_LABEL,
    SCENARIOS,
    TIP_VARIANTS,
    compare_tips,
    isolate_tips,
    run_scenarios,
)

BASE = BaseInputs(
    property_value_home=900_000,
    home_loan_balance=600_000,
    home_loan_rate=0.055,
    min_repayment_monthly=3_500,
    marginal_tax_rate=0.39,
    net_income_annual=130_000,
    living_expenses_annual_ex_mortgage=60_000,
)
STRATEGY = StrategyInputs(
    tip1_extra_savings_per_month=500,
    tip4_salary_growth_rate=0.03,
    tip5_purchase_price=700_000,
    tip5_purchase_costs_rate=0.05,
    tip5_rent_annual=30_000,
    tip5_expenses_annual=8_000,
    tip5_ip_loan_rate=0.065,
    tip6_recycle_per_year=10_000,
    tip6_invest_return=0.07,
    tip6_dividend_yield=0.04,
)


class TestIsolateTips:
    def test_keeps_named_fields(self):
        isolated = isolate_tips(STRATEGY, ("tip1_extra_savings_per_month",))
        assert isolated.tip1_extra_savings_per_month == 500
        assert isolated.tip4_salary_growth_rate == 0
        assert isolated.tip5_purchase_price == 0

    def test_nothing_named(self):
        assert isolate_tips(STRATEGY, ()) == StrategyInputs()


class TestCompareTips:
    def setup_method(self):
        self.results = compare_tips(BASE, STRATEGY, {"projection_years": 30})

    def test_labels_in_order(self):
        assert list(self.results) == [BASELINE_LABEL, *TIP_VARIANTS, ALL_TIPS_LABEL]

    def test_baseline_is_minimum_repayments(self):
        expected = run_simulation(BASE, StrategyInputs(), {"projection_years": 30})
        assert self.results[BASELINE_LABEL] == expected

    def test_all_tips_is_full_strategy(self):
        expected = run_simulation(BASE, STRATEGY, {"projection_years": 30})
        assert self.results[ALL_TIPS_LABEL] == expected

    def test_extra_repayments_repay_sooner(self):
        baseline = self.results[BASELINE_LABEL].payoff_year_index
        tip1 = self.results["Tip 1: extra repayments"].payoff_year_index
        assert tip1 < baseline

    def test_recycling_needs_property(self):
        tip56 = self.results["Tips 5+6: debt recycling"]
        assert any(y.investment_loan_balance > 0 for y in tip56.years)
        tip5 = self.results["Tip 5: investment property"]
        assert all(y.investment_loan_balance == 0 for y in tip5.years)


class TestRunScenarios:
    def test_returns_3_scenarios(self):
        results = run_scenarios(BASE, STRATEGY)
        assert set(results) == {"Low growth", "Standard", "High growth"}

    def test_scenario_rates_applied(self):
        results = run_scenarios(BASE, StrategyInputs(), {"projection_years": 2})
        for name, scenario in SCENARIOS.items():
            y1 = results[name].years[1]
            assert y1.home_value == pytest.approx(900_000 * (1 + scenario["home_growth_rate"]))

    def test_shared_overrides_kept(self):
        results = run_scenarios(BASE, StrategyInputs(), {"projection_years": 4})
        assert all(len(r.years) == 4 for r in results.values())


class TestScenarioOrdering:
    """High growth > Standard > Low growth on final net worth."""

    def test_home_only(self):
        results = run_scenarios(BASE, StrategyInputs())
        low = results["Low growth"].final.net_worth
        mid = results["Standard"].final.net_worth
        high = results["High growth"].final.net_worth
        assert high > mid > low

    def test_home_loan_path_unchanged(self):
        """Growth only moves asset values; repayments are identical."""
        results = run_scenarios(BASE, StrategyInputs())
        paths = [[y.home_loan_balance for y in r.years] for r in results.values()]
        assert paths[0] == paths[1] == paths[2]
