"""CLI entry point for tip and growth-scenario comparison."""

from debtpro.cli import fmt_aud, fmt_pct
from debtpro.config import load_inputs
from debtpro.scenarios import SCENARIOS, compare_tips, run_scenarios
from debtpro.simulation import SimulationResult


def _format_year(index: int | None) -> str:
    return f"{'---':>10}" if index is None else f"{'year ' + str(index):>10}"


def _print_comparison_table(title: str, results: dict[str, SimulationResult]):
    """Print a label × outcome comparison table"""
    print("=" * 110)
    print(f"[{title}]")
    print("=" * 110)
    print(
        f"{'':<30} {'Repaid':>10} {'Can clear':>10} {'Interest paid':>15}"
        f" {'Home loan end':>15} {'Net worth end':>15}"
    )
    print("-" * 110)
    for label, result in results.items():
        final = result.final
        if final is None:
            print(f"{label:<30}  --- no years projected ---")
            continue
        interest = sum(y.home_loan_interest for y in result.years)
        print(
            f"{label:<30} {_format_year(result.payoff_year_index)}"
            f" {_format_year(result.debt_free_year_index)}"
            f" {fmt_aud(interest):>15} {fmt_aud(final.home_loan_balance):>15}"
            f" {fmt_aud(final.net_worth):>15}"
        )
    print("-" * 110)
    print()


def print_scenario_parameters():
    """Print growth scenario parameters"""
    print(f"{'Scenario':<14} {'Home growth':>12} {'IP growth':>12}")
    for name, scenario in SCENARIOS.items():
        print(
            f"{name:<14} {fmt_pct(scenario['home_growth_rate']):>12}"
            f" {fmt_pct(scenario['ip_growth_rate']):>12}"
        )
    print()


def main(argv: list[str] | None = None):
    base, strategy, assumptions, _ = load_inputs("DebtPro tip and scenario comparison", argv=argv)

    _print_comparison_table("Tips, one at a time", compare_tips(base, strategy, assumptions))

    print_scenario_parameters()
    _print_comparison_table("All tips under growth scenarios", run_scenarios(base, strategy, assumptions))


if __name__ == "__main__":
    main()
