"""Projection inputs and assumption defaults."""

import dataclasses
from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True)
class BaseInputs:
    """Household snapshot at the start of the projection (annual figures unless noted)."""

    property_value_home: float
    home_loan_balance: float
    home_loan_rate: float          # e.g. 0.06 for 6% p.a.
    min_repayment_monthly: float

    marginal_tax_rate: float = 0.0  # incl. Medicare levy, e.g. 0.39

    net_income_annual: float = 0.0                  # after-tax income now
    living_expenses_annual_ex_mortgage: float = 0.0

    offset_balance: float = 0.0
    emergency_fund_target: float = 0.0  # kept in offset, excluded from interest relief


@dataclass(frozen=True)
class StrategyInputs:
    """Mortgage-reduction tips. All zero = minimum repayments only."""

    # Tip 1: budget surplus added to every repayment
    tip1_extra_savings_per_month: float = 0.0

    # Tip 4: salary growth, 50% of the net increase goes to the mortgage
    tip4_salary_growth_rate: float = 0.0

    # Tip 5: investment property (purchase is equity-gated, purchase year is not honoured)
    tip5_purchase_year: int = 0
    tip5_purchase_price: float = 0.0
    tip5_purchase_costs_rate: float = 0.0  # stamp duty etc., e.g. 0.05
    tip5_rent_annual: float = 0.0
    tip5_expenses_annual: float = 0.0
    tip5_ip_loan_rate: float = 0.0

    # Tip 6: debt recycling into a portfolio
    tip6_recycle_per_year: float = 0.0
    tip6_invest_return: float = 0.0   # total return incl. yield
    tip6_dividend_yield: float = 0.0


@dataclass(frozen=True)
class Assumptions:

    projection_years: int = 30
    home_growth_rate: float = 0.03
    ip_growth_rate: float = 0.03
    effective_cgt_rate: float = 0.10  # flat rate on portfolio value at liquidation
    # Optional: index IP rent and holding expenses from the purchase year (0 = off)
    cpi_rate: float = 0.0


DEFAULT_ASSUMPTIONS = Assumptions()


def resolve_assumptions(
    overrides: "Assumptions | Mapping[str, float] | None" = None,
) -> Assumptions:
    """Merge caller overrides over DEFAULT_ASSUMPTIONS (shallow, per field).

    Unknown option names raise TypeError.
    """
    if overrides is None:
        return DEFAULT_ASSUMPTIONS
    if isinstance(overrides, Assumptions):
        return overrides
    return dataclasses.replace(DEFAULT_ASSUMPTIONS, **dict(overrides))
