"""Core year-by-year projection engine."""

import enum
import math
from dataclasses import dataclass, field, fields
from typing import Mapping

from debtpro.params import Assumptions, BaseInputs, StrategyInputs, resolve_assumptions
from debtpro.tax import (
    calc_ip_net_sale_proceeds,
    calc_portfolio_after_cgt,
    calc_tax_effect,
)

# Tip 3: half the monthly repayment every fortnight = 13 monthly repayments a year
REPAYMENTS_PER_YEAR = 13
# Tip 4: share of each salary increase redirected to the home loan
SALARY_INCREASE_TO_MORTGAGE = 0.5

# Tip 5 purchase gate: usable equity at 80% LVR must cover 30% of the price
USABLE_EQUITY_LVR = 0.8
REQUIRED_EQUITY_RATIO = 0.3

# Home loan balances at or below this count as repaid (float residue)
PAYOFF_TOLERANCE = 0.01


class AcquisitionState(enum.Enum):
    """Investment property lifecycle. Transitions once, never back."""

    NOT_ACQUIRED = "not_acquired"
    ACQUIRED = "acquired"


@dataclass
class RunningState:
    """Balances carried from one projection year to the next."""

    net_income: float
    living_expenses: float
    home_value: float
    home_loan_balance: float
    offset_balance: float

    ip_state: AcquisitionState = AcquisitionState.NOT_ACQUIRED
    ip_value: float = 0.0
    ip_loan_balance: float = 0.0
    ip_years_held: int = 0

    invest_portfolio_value: float = 0.0
    investment_loan_balance: float = 0.0  # recycled, deductible debt

    @classmethod
    def from_inputs(cls, base: BaseInputs) -> "RunningState":
        return cls(
            net_income=base.net_income_annual,
            living_expenses=base.living_expenses_annual_ex_mortgage,
            home_value=base.property_value_home,
            home_loan_balance=base.home_loan_balance,
            offset_balance=base.offset_balance,
        )

    @property
    def has_ip(self) -> bool:
        return self.ip_state is AcquisitionState.ACQUIRED


@dataclass(frozen=True)
class YearSnapshot:
    """One projection year. Flows are annual; balances are end of year."""

    year_index: int  # 0 = start year

    # Income & expenses
    net_income: float
    living_expenses: float

    home_loan_interest: float
    home_loan_repayments: float  # total paid towards the home loan this year

    ip_rent: float
    ip_expenses: float
    ip_interest: float

    invest_contribution: float  # recycled into the portfolio this year
    invest_income: float
    tax_effect_net: float  # refund (+) / extra tax (-) from IP + portfolio

    total_income: float
    total_expenses: float
    surplus_cashflow: float

    # Assets
    home_value: float
    ip_value: float
    invest_portfolio_value: float
    offset_balance: float

    # Liabilities
    home_loan_balance: float
    ip_loan_balance: float
    investment_loan_balance: float

    total_assets: float
    total_liabilities: float
    net_worth: float

    # "Could we clear the home loan if we sold the IP + portfolio?"
    could_clear_home_loan: bool
    total_available_if_sold: float


@dataclass
class SimulationResult:
    years: list[YearSnapshot] = field(default_factory=list)
    debt_free_year_index: int | None = None  # first year could_clear_home_loan is True

    @property
    def final(self) -> YearSnapshot | None:
        return self.years[-1] if self.years else None

    @property
    def payoff_year_index(self) -> int | None:
        """Year the home loan was repaid outright, or None within the horizon."""
        for snapshot in self.years:
            if snapshot.home_loan_balance <= PAYOFF_TOLERANCE:
                return snapshot.year_index
        return None


def validate_inputs(
    base: BaseInputs,
    strategy: StrategyInputs,
    assumptions: Assumptions | None = None,
) -> list[str]:
    """Check caller-side input sanity. Returns list of error messages.

    The engine itself never validates; callers decide what to do with these.
    """
    errors = []
    for record in (base, strategy):
        for f in fields(record):
            value = getattr(record, f.name)
            if not math.isfinite(value):
                errors.append(f"{f.name} must be a finite number (got {value})")
            elif value < 0:
                errors.append(f"{f.name} must not be negative (got {value})")

    if strategy.tip6_dividend_yield > strategy.tip6_invest_return:
        errors.append(
            f"tip6_dividend_yield {strategy.tip6_dividend_yield:.2%} exceeds "
            f"tip6_invest_return {strategy.tip6_invest_return:.2%} (negative capital growth)"
        )

    if assumptions is not None:
        # Growth rates may be negative (falling markets)
        for f in fields(assumptions):
            value = getattr(assumptions, f.name)
            if not math.isfinite(value):
                errors.append(f"{f.name} must be a finite number (got {value})")
        years = assumptions.projection_years
        if math.isfinite(years) and years != int(years):
            errors.append(f"projection_years must be a whole number of years (got {years})")
        if years < 1:
            errors.append("projection_years must be at least 1")
    return errors


def _apply_growth(
    state: RunningState, year_index: int,
    strategy: StrategyInputs, assumptions: Assumptions,
) -> float:
    """Grow home value and salary. Returns the salary increase diverted to the mortgage."""
    if year_index == 0:
        return 0.0
    state.home_value *= 1 + assumptions.home_growth_rate

    if strategy.tip4_salary_growth_rate <= 0:
        return 0.0
    previous_income = state.net_income
    state.net_income = previous_income * (1 + strategy.tip4_salary_growth_rate)
    return SALARY_INCREASE_TO_MORTGAGE * (state.net_income - previous_income)


def _repay_home_loan(
    state: RunningState, base: BaseInputs, strategy: StrategyInputs,
    extra_from_salary: float,
) -> tuple[float, float]:
    """Charge a year of interest and apply repayments. Returns (interest, repayments).

    Interest is simple annual on the balance net of offset funds above the
    emergency fund. A repayment below the interest capitalises the interest.
    """
    monthly = base.min_repayment_monthly + strategy.tip1_extra_savings_per_month
    repayments = monthly * REPAYMENTS_PER_YEAR + extra_from_salary

    offset_relief = max(0.0, state.offset_balance - base.emergency_fund_target)
    effective_debt = max(0.0, state.home_loan_balance - offset_relief)
    interest = effective_debt * base.home_loan_rate

    principal_paid = repayments - interest
    if principal_paid < 0:
        state.home_loan_balance += interest
    else:
        state.home_loan_balance = max(0.0, state.home_loan_balance - principal_paid)
    return interest, repayments


def ip_purchase_triggered(
    home_value: float, home_loan_balance: float, purchase_price: float,
) -> bool:
    """True when usable home equity covers the deposit share of the IP price."""
    usable_equity = max(0.0, home_value * USABLE_EQUITY_LVR - home_loan_balance)
    return usable_equity >= REQUIRED_EQUITY_RATIO * purchase_price


def _try_ip_purchase(state: RunningState, strategy: StrategyInputs) -> bool:
    """Buy the investment property once the equity gate opens. Returns True on the purchase year.

    Fully debt funded (price + purchase costs); the equity is only a gate.
    """
    if state.has_ip or strategy.tip5_purchase_price <= 0:
        return False
    if not ip_purchase_triggered(
        state.home_value, state.home_loan_balance, strategy.tip5_purchase_price,
    ):
        return False
    price = strategy.tip5_purchase_price
    state.ip_state = AcquisitionState.ACQUIRED
    state.ip_value = price
    state.ip_loan_balance = price * (1 + strategy.tip5_purchase_costs_rate)
    return True


def _hold_ip(
    state: RunningState, strategy: StrategyInputs, assumptions: Assumptions,
) -> tuple[float, float, float]:
    """Grow the IP and collect a year of flows. Returns (rent, expenses, interest)."""
    if not state.has_ip:
        return 0.0, 0.0, 0.0
    state.ip_value *= 1 + assumptions.ip_growth_rate

    rent = strategy.tip5_rent_annual
    expenses = strategy.tip5_expenses_annual
    if assumptions.cpi_rate:
        index = (1 + assumptions.cpi_rate) ** state.ip_years_held
        rent *= index
        expenses *= index
    state.ip_years_held += 1

    # Interest only, no principal reduction on the IP loan
    interest = state.ip_loan_balance * strategy.tip5_ip_loan_rate
    return rent, expenses, interest


def _recycle_debt(state: RunningState, strategy: StrategyInputs) -> float:
    """Borrow up to the recycle target (capped at the home loan) and invest it. Returns the contribution."""
    if not (state.has_ip and strategy.tip6_recycle_per_year > 0 and state.home_loan_balance > 0):
        return 0.0
    contribution = min(strategy.tip6_recycle_per_year, state.home_loan_balance)
    state.investment_loan_balance += contribution
    state.invest_portfolio_value += contribution
    return contribution


def _accrue_portfolio(
    state: RunningState, base: BaseInputs, strategy: StrategyInputs,
) -> tuple[float, float]:
    """Apply a year of portfolio return. Returns (dividend income, recycled loan interest)."""
    dividend = 0.0
    if state.invest_portfolio_value > 0:
        dividend = state.invest_portfolio_value * strategy.tip6_dividend_yield
        capital_growth = state.invest_portfolio_value * (
            strategy.tip6_invest_return - strategy.tip6_dividend_yield
        )
        state.invest_portfolio_value += dividend + capital_growth

    # Recycled debt is priced at the home loan rate
    recycled_interest = 0.0
    if state.investment_loan_balance > 0 and strategy.tip6_invest_return > 0:
        recycled_interest = state.investment_loan_balance * base.home_loan_rate
    return dividend, recycled_interest


def _calc_tax_effect_net(
    marginal_rate: float,
    ip_rent: float, ip_expenses: float, ip_interest: float,
    invest_income: float, recycled_interest: float,
) -> float:
    """Sum of IP gearing and portfolio gearing tax effects."""
    tax_effect_ip = calc_tax_effect(ip_rent - ip_expenses - ip_interest, marginal_rate)
    tax_effect_invest = calc_tax_effect(invest_income - recycled_interest, marginal_rate)
    return tax_effect_ip + tax_effect_invest


def _liquidation_test(
    state: RunningState, assumptions: Assumptions,
) -> tuple[bool, float]:
    """Could selling the IP and portfolio clear the home loan? Returns (flag, proceeds)."""
    portfolio_after_cgt = calc_portfolio_after_cgt(
        state.invest_portfolio_value, assumptions.effective_cgt_rate,
    )
    ip_proceeds = calc_ip_net_sale_proceeds(state.ip_value, state.ip_loan_balance)
    total_available = ip_proceeds + portfolio_after_cgt
    could_clear = state.home_loan_balance > 0 and total_available >= state.home_loan_balance
    return could_clear, total_available


def run_simulation(
    base: BaseInputs,
    strategy: StrategyInputs,
    assumptions: "Assumptions | Mapping[str, float] | None" = None,
) -> SimulationResult:
    """Project the household year by year until the horizon or home loan payoff.

    assumptions: partial overrides of DEFAULT_ASSUMPTIONS (mapping) or a full Assumptions.
    Pure: no state is shared between calls.
    """
    assumptions = resolve_assumptions(assumptions)
    state = RunningState.from_inputs(base)
    result = SimulationResult()

    year_index = 0
    while year_index < assumptions.projection_years:
        extra_from_salary = _apply_growth(state, year_index, strategy, assumptions)
        home_loan_interest, home_loan_repayments = _repay_home_loan(
            state, base, strategy, extra_from_salary,
        )
        _try_ip_purchase(state, strategy)
        ip_rent, ip_expenses, ip_interest = _hold_ip(state, strategy, assumptions)
        invest_contribution = _recycle_debt(state, strategy)
        invest_income, recycled_interest = _accrue_portfolio(state, base, strategy)
        tax_effect_net = _calc_tax_effect_net(
            base.marginal_tax_rate,
            ip_rent, ip_expenses, ip_interest,
            invest_income, recycled_interest,
        )

        # Cash flow: refunds are inflows, extra tax is an outflow
        total_income = (
            state.net_income + ip_rent + invest_income + max(0.0, tax_effect_net)
        )
        total_expenses = (
            state.living_expenses
            + home_loan_repayments
            + ip_expenses
            + ip_interest
            + max(0.0, -tax_effect_net)
        )

        total_assets = (
            state.home_value
            + state.ip_value
            + state.invest_portfolio_value
            + state.offset_balance
        )
        total_liabilities = (
            state.home_loan_balance
            + state.ip_loan_balance
            + state.investment_loan_balance
        )

        could_clear, total_available = _liquidation_test(state, assumptions)
        if could_clear and result.debt_free_year_index is None:
            result.debt_free_year_index = year_index

        result.years.append(YearSnapshot(
            year_index=year_index,
            net_income=state.net_income,
            living_expenses=state.living_expenses,
            home_loan_interest=home_loan_interest,
            home_loan_repayments=home_loan_repayments,
            ip_rent=ip_rent,
            ip_expenses=ip_expenses,
            ip_interest=ip_interest,
            invest_contribution=invest_contribution,
            invest_income=invest_income,
            tax_effect_net=tax_effect_net,
            total_income=total_income,
            total_expenses=total_expenses,
            surplus_cashflow=total_income - total_expenses,
            home_value=state.home_value,
            ip_value=state.ip_value,
            invest_portfolio_value=state.invest_portfolio_value,
            offset_balance=state.offset_balance,
            home_loan_balance=state.home_loan_balance,
            ip_loan_balance=state.ip_loan_balance,
            investment_loan_balance=state.investment_loan_balance,
            total_assets=total_assets,
            total_liabilities=total_liabilities,
            net_worth=total_assets - total_liabilities,
            could_clear_home_loan=could_clear,
            total_available_if_sold=total_available,
        ))
        year_index += 1

        if state.home_loan_balance <= PAYOFF_TOLERANCE:
            break

    return result
