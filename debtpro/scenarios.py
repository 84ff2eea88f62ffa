"""Scenario definitions and multi-run comparison."""

import dataclasses
from typing import Mapping

from debtpro.params import Assumptions, BaseInputs, StrategyInputs, resolve_assumptions
from debtpro.simulation import SimulationResult, run_simulation

SCENARIOS = {
    "Low growth": {
        "home_growth_rate": 0.01,
        "ip_growth_rate": 0.01,
    },
    "Standard": {
        "home_growth_rate": 0.03,
        "ip_growth_rate": 0.03,
    },
    "High growth": {
        "home_growth_rate": 0.05,
        "ip_growth_rate": 0.05,
    },
}

BASELINE_LABEL = "Baseline (13 repayments/yr)"
ALL_TIPS_LABEL = "All tips"

_TIP1_FIELDS = ("tip1_extra_savings_per_month",)
_TIP4_FIELDS = ("tip4_salary_growth_rate",)
_TIP5_FIELDS = (
    "tip5_purchase_year",
    "tip5_purchase_price",
    "tip5_purchase_costs_rate",
    "tip5_rent_annual",
    "tip5_expenses_annual",
    "tip5_ip_loan_rate",
)
_TIP6_FIELDS = ("tip6_recycle_per_year", "tip6_invest_return", "tip6_dividend_yield")

# Tip 6 only activates after the tip 5 purchase, so it is never run alone
TIP_VARIANTS: dict[str, tuple[str, ...]] = {
    "Tip 1: extra repayments": _TIP1_FIELDS,
    "Tip 4: salary growth": _TIP4_FIELDS,
    "Tip 5: investment property": _TIP5_FIELDS,
    "Tips 5+6: debt recycling": _TIP5_FIELDS + _TIP6_FIELDS,
}


def isolate_tips(strategy: StrategyInputs, field_names: tuple[str, ...]) -> StrategyInputs:
    """Keep only the named tip fields from strategy; everything else is zeroed."""
    return StrategyInputs(**{name: getattr(strategy, name) for name in field_names})


def compare_tips(
    base: BaseInputs,
    strategy: StrategyInputs,
    assumptions: "Assumptions | Mapping[str, float] | None" = None,
) -> dict[str, SimulationResult]:
    """Run baseline, each tip alone, and all tips together.

    The 13-payment cadence (tip 3) is part of every run, including the baseline.
    """
    assumptions = resolve_assumptions(assumptions)
    results = {BASELINE_LABEL: run_simulation(base, StrategyInputs(), assumptions)}
    for label, field_names in TIP_VARIANTS.items():
        results[label] = run_simulation(base, isolate_tips(strategy, field_names), assumptions)
    results[ALL_TIPS_LABEL] = run_simulation(base, strategy, assumptions)
    return results


def run_scenarios(
    base: BaseInputs,
    strategy: StrategyInputs,
    assumptions: "Assumptions | Mapping[str, float] | None" = None,
) -> dict[str, SimulationResult]:
    """Execute the projection for every growth scenario.

    assumptions: shared overrides (e.g. projection_years); scenario values win on overlap.
    """
    shared = resolve_assumptions(assumptions)
    all_results = {}
    for scenario_name, scenario_params in SCENARIOS.items():
        params = dataclasses.replace(shared, **scenario_params)
        all_results[scenario_name] = run_simulation(base, strategy, params)
    return all_results
