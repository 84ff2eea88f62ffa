"""CLI entry point for a single projection."""

from debtpro.config import load_inputs
from debtpro.params import Assumptions, BaseInputs, StrategyInputs
from debtpro.simulation import SimulationResult, run_simulation


def fmt_aud(v: float) -> str:
    """1234567.8 → "$1,234,568" """
    if v < 0:
        return f"-${-v:,.0f}"
    return f"${v:,.0f}"


def fmt_pct(v: float) -> str:
    """0.055 → "5.50%" """
    return f"{v * 100:.2f}%"


def _print_header(base: BaseInputs, strategy: StrategyInputs, assumptions: Assumptions):
    print("=" * 100)
    print(f"DebtPro mortgage reduction projection ({assumptions.projection_years} years max)")
    print(
        f"  Home: {fmt_aud(base.property_value_home)} / loan {fmt_aud(base.home_loan_balance)}"
        f" at {fmt_pct(base.home_loan_rate)} / minimum {fmt_aud(base.min_repayment_monthly)}/month"
    )
    print(
        f"  Income: {fmt_aud(base.net_income_annual)} net / living {fmt_aud(base.living_expenses_annual_ex_mortgage)}"
        f" / marginal tax {fmt_pct(base.marginal_tax_rate)}"
    )
    if base.offset_balance > 0:
        print(f"  Offset: {fmt_aud(base.offset_balance)} (emergency fund {fmt_aud(base.emergency_fund_target)})")
    if strategy.tip1_extra_savings_per_month > 0:
        print(f"  Tip 1: +{fmt_aud(strategy.tip1_extra_savings_per_month)}/month")
    print("  Tip 3: fortnightly repayments (13 monthly repayments a year)")
    if strategy.tip4_salary_growth_rate > 0:
        print(f"  Tip 4: salary +{fmt_pct(strategy.tip4_salary_growth_rate)}/yr, half of each rise to the loan")
    if strategy.tip5_purchase_price > 0:
        print(
            f"  Tip 5: IP {fmt_aud(strategy.tip5_purchase_price)} (+{fmt_pct(strategy.tip5_purchase_costs_rate)} costs),"
            f" rent {fmt_aud(strategy.tip5_rent_annual)}, expenses {fmt_aud(strategy.tip5_expenses_annual)},"
            f" loan {fmt_pct(strategy.tip5_ip_loan_rate)} IO"
        )
    if strategy.tip6_recycle_per_year > 0:
        print(
            f"  Tip 6: recycle {fmt_aud(strategy.tip6_recycle_per_year)}/yr, return {fmt_pct(strategy.tip6_invest_return)}"
            f" (yield {fmt_pct(strategy.tip6_dividend_yield)})"
        )
    print(
        f"  Growth: home {fmt_pct(assumptions.home_growth_rate)} / IP {fmt_pct(assumptions.ip_growth_rate)}"
        f" / CGT {fmt_pct(assumptions.effective_cgt_rate)}"
        + (f" / CPI {fmt_pct(assumptions.cpi_rate)}" if assumptions.cpi_rate else "")
    )
    print("=" * 100)
    print()


def _print_yearly_table(result: SimulationResult):
    print("[Yearly projection]")
    print("-" * 100)
    print(
        f"{'Year':>4} {'Home loan':>12} {'IP loan':>12} {'Inv. loan':>12} {'Portfolio':>12}"
        f" {'Tax effect':>11} {'Surplus':>11} {'Net worth':>13}  Clear?"
    )
    print("-" * 100)
    for y in result.years:
        marker = "yes" if y.could_clear_home_loan else ""
        print(
            f"{y.year_index:>4} {fmt_aud(y.home_loan_balance):>12} {fmt_aud(y.ip_loan_balance):>12}"
            f" {fmt_aud(y.investment_loan_balance):>12} {fmt_aud(y.invest_portfolio_value):>12}"
            f" {fmt_aud(y.tax_effect_net):>11} {fmt_aud(y.surplus_cashflow):>11}"
            f" {fmt_aud(y.net_worth):>13}  {marker}"
        )
    print("-" * 100)


def _print_summary(result: SimulationResult):
    print()
    print("[Summary]")
    final = result.final
    if final is None:
        print("  No years projected.")
        return
    if result.payoff_year_index is not None:
        print(f"  Home loan repaid in year {result.payoff_year_index}")
    else:
        print(
            f"  Home loan not repaid within {len(result.years)} years"
            f" (balance {fmt_aud(final.home_loan_balance)})"
        )
    if result.debt_free_year_index is not None:
        y = result.years[result.debt_free_year_index]
        print(
            f"  Could clear the home loan by selling the IP + portfolio from year {y.year_index}"
            f" ({fmt_aud(y.total_available_if_sold)} available vs {fmt_aud(y.home_loan_balance)} owing)"
        )
    else:
        print("  Selling the IP + portfolio never covers the home loan")
    ip_years = [y for y in result.years if y.ip_value > 0]
    if ip_years:
        print(f"  Investment property bought in year {ip_years[0].year_index}")
    print(f"  Final net worth (year {final.year_index}): {fmt_aud(final.net_worth)}")
    total_interest = sum(y.home_loan_interest for y in result.years)
    print(f"  Home loan interest paid: {fmt_aud(total_interest)}")


def main(argv: list[str] | None = None):
    """Execute a single projection and print the yearly table"""
    base, strategy, assumptions, _ = load_inputs("DebtPro mortgage reduction projection", argv=argv)
    result = run_simulation(base, strategy, assumptions)
    _print_header(base, strategy, assumptions)
    _print_yearly_table(result)
    _print_summary(result)


if __name__ == "__main__":
    main()
