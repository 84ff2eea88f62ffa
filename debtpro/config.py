"""TOML config loader with CLI > config > default resolution."""

import argparse
import dataclasses
import sys
import tomllib
from pathlib import Path
from typing import Callable

from debtpro.params import DEFAULT_ASSUMPTIONS, Assumptions, BaseInputs, StrategyInputs

DEFAULT_CONFIG_PATH = Path("debtpro.toml")

# Rates are fractions (0.055 = 5.5%), amounts are AUD
DEFAULTS = {
    # Household
    "property_value_home": 900_000.0,
    "home_loan_balance": 600_000.0,
    "home_loan_rate": 0.055,
    "min_repayment_monthly": 3_500.0,
    "marginal_tax_rate": 0.39,
    "net_income_annual": 130_000.0,
    "living_expenses_annual_ex_mortgage": 60_000.0,
    "offset_balance": 0.0,
    "emergency_fund_target": 0.0,
    # Tips
    "tip1_extra_savings_per_month": 0.0,
    "tip4_salary_growth_rate": 0.0,
    "tip5_purchase_year": 0,
    "tip5_purchase_price": 0.0,
    "tip5_purchase_costs_rate": 0.0,
    "tip5_rent_annual": 0.0,
    "tip5_expenses_annual": 0.0,
    "tip5_ip_loan_rate": 0.0,
    "tip6_recycle_per_year": 0.0,
    "tip6_invest_return": 0.0,
    "tip6_dividend_yield": 0.0,
    # Assumptions
    **dataclasses.asdict(DEFAULT_ASSUMPTIONS),
}


def load_config(path: Path | None = None) -> dict:
    """Load TOML config file. Returns empty dict if file doesn't exist.

    Accepts flat keys or [household] / [tips] / [assumptions] tables.
    """
    if path is None:
        path = DEFAULT_CONFIG_PATH
    if not path.exists():
        return {}
    try:
        with open(path, "rb") as f:
            raw = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        print(f"Failed to read config file: {path}: {e}", file=sys.stderr)
        raise SystemExit(1)
    # Flatten section tables into the top level (explicit top-level keys win)
    for section in ("household", "tips", "assumptions"):
        table = raw.pop(section, None)
        if isinstance(table, dict):
            for key, value in table.items():
                raw.setdefault(key, value)
    unknown = sorted(set(raw) - set(DEFAULTS))
    if unknown:
        print(f"Ignoring unknown config keys in {path}: {', '.join(unknown)}", file=sys.stderr)
    return raw


def create_parser(description: str) -> argparse.ArgumentParser:
    """Create argparse parser with shared projection flags."""
    d = DEFAULTS
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--config", type=Path, default=None, help="config file path (default: debtpro.toml)")

    household = parser.add_argument_group("household")
    household.add_argument("--property-value-home", type=float, default=None, help=f"home value now (default: {d['property_value_home']:,.0f})")
    household.add_argument("--home-loan-balance", type=float, default=None, help=f"home loan outstanding (default: {d['home_loan_balance']:,.0f})")
    household.add_argument("--home-loan-rate", type=float, default=None, help=f"home loan rate p.a. as a fraction (default: {d['home_loan_rate']})")
    household.add_argument("--min-repayment-monthly", type=float, default=None, help=f"minimum monthly repayment (default: {d['min_repayment_monthly']:,.0f})")
    household.add_argument("--marginal-tax-rate", type=float, default=None, help=f"marginal tax rate incl. Medicare levy (default: {d['marginal_tax_rate']})")
    household.add_argument("--net-income-annual", type=float, default=None, help=f"after-tax income p.a. (default: {d['net_income_annual']:,.0f})")
    household.add_argument("--living-expenses-annual-ex-mortgage", type=float, default=None, help=f"living expenses p.a. excluding the mortgage (default: {d['living_expenses_annual_ex_mortgage']:,.0f})")
    household.add_argument("--offset-balance", type=float, default=None, help=f"offset account balance (default: {d['offset_balance']:,.0f})")
    household.add_argument("--emergency-fund-target", type=float, default=None, help=f"emergency fund kept in offset (default: {d['emergency_fund_target']:,.0f})")

    tips = parser.add_argument_group("tips")
    tips.add_argument("--tip1-extra-savings-per-month", type=float, default=None, help="Tip 1: extra repayment per month")
    tips.add_argument("--tip4-salary-growth-rate", type=float, default=None, help="Tip 4: salary growth p.a. (50%% of the increase goes to the loan)")
    tips.add_argument("--tip5-purchase-year", type=int, default=None, help="Tip 5: planned purchase year (informational; purchase is equity-gated)")
    tips.add_argument("--tip5-purchase-price", type=float, default=None, help="Tip 5: investment property price")
    tips.add_argument("--tip5-purchase-costs-rate", type=float, default=None, help="Tip 5: purchase costs as a fraction of price")
    tips.add_argument("--tip5-rent-annual", type=float, default=None, help="Tip 5: rent p.a.")
    tips.add_argument("--tip5-expenses-annual", type=float, default=None, help="Tip 5: holding expenses p.a.")
    tips.add_argument("--tip5-ip-loan-rate", type=float, default=None, help="Tip 5: investment loan rate p.a. (interest only)")
    tips.add_argument("--tip6-recycle-per-year", type=float, default=None, help="Tip 6: amount recycled into the portfolio p.a.")
    tips.add_argument("--tip6-invest-return", type=float, default=None, help="Tip 6: portfolio total return p.a.")
    tips.add_argument("--tip6-dividend-yield", type=float, default=None, help="Tip 6: portfolio income yield p.a.")

    assumptions = parser.add_argument_group("assumptions")
    assumptions.add_argument("--projection-years", type=int, default=None, help=f"years to project (default: {d['projection_years']})")
    assumptions.add_argument("--home-growth-rate", type=float, default=None, help=f"home value growth p.a. (default: {d['home_growth_rate']})")
    assumptions.add_argument("--ip-growth-rate", type=float, default=None, help=f"investment property growth p.a. (default: {d['ip_growth_rate']})")
    assumptions.add_argument("--effective-cgt-rate", type=float, default=None, help=f"flat CGT on the portfolio at sale (default: {d['effective_cgt_rate']})")
    assumptions.add_argument("--cpi-rate", type=float, default=None, help=f"index IP rent/expenses by CPI p.a. (default: {d['cpi_rate']}, off)")
    return parser


def resolve(args: argparse.Namespace, config: dict) -> dict:
    """Resolve values with priority: CLI flag > config file > hardcoded default."""
    resolved = {}
    for key, default in DEFAULTS.items():
        cli_val = getattr(args, key, None)
        resolved[key] = cli_val if cli_val is not None else config.get(key, default)
    return resolved


def build_inputs(r: dict) -> tuple[BaseInputs, StrategyInputs, Assumptions]:
    """Build engine inputs from resolved config dict."""
    base = BaseInputs(**{f.name: r[f.name] for f in dataclasses.fields(BaseInputs)})
    strategy = StrategyInputs(**{f.name: r[f.name] for f in dataclasses.fields(StrategyInputs)})
    assumptions = Assumptions(**{f.name: r[f.name] for f in dataclasses.fields(Assumptions)})
    years = assumptions.projection_years
    # TOML "30.0" → 30; fractional counts are left for validate_inputs to report
    if isinstance(years, float) and years.is_integer():
        assumptions = dataclasses.replace(assumptions, projection_years=int(years))
    return base, strategy, assumptions


def parse_args(
    description: str,
    add_args_fn: Callable[[argparse.ArgumentParser], None] | None = None,
    argv: list[str] | None = None,
) -> tuple[dict, argparse.Namespace]:
    """Parse CLI args, load config, resolve values.

    Returns (resolved_dict, namespace). The namespace carries any extra
    CLI args added via add_args_fn.
    """
    parser = create_parser(description)
    if add_args_fn:
        add_args_fn(parser)
    args = parser.parse_args(argv)
    config = load_config(args.config)
    return resolve(args, config), args


def load_inputs(
    description: str,
    add_args_fn: Callable[[argparse.ArgumentParser], None] | None = None,
    argv: list[str] | None = None,
) -> tuple[BaseInputs, StrategyInputs, Assumptions, argparse.Namespace]:
    """parse_args + build_inputs, exiting with status 1 on invalid inputs."""
    from debtpro.simulation import validate_inputs

    r, args = parse_args(description, add_args_fn, argv)
    base, strategy, assumptions = build_inputs(r)
    errors = validate_inputs(base, strategy, assumptions)
    if errors:
        print("Invalid inputs:", file=sys.stderr)
        for e in errors:
            print(f"  x {e}", file=sys.stderr)
        raise SystemExit(1)
    return base, strategy, assumptions, args
