"""DebtPro mortgage reduction projection package."""

from debtpro.params import (
    BaseInputs,
    StrategyInputs,
    Assumptions,
    DEFAULT_ASSUMPTIONS,
    resolve_assumptions,
)
from debtpro.simulation import (
    run_simulation,
    validate_inputs,
    ip_purchase_triggered,
    AcquisitionState,
    RunningState,
    YearSnapshot,
    SimulationResult,
    REPAYMENTS_PER_YEAR,
    SALARY_INCREASE_TO_MORTGAGE,
    USABLE_EQUITY_LVR,
    REQUIRED_EQUITY_RATIO,
    PAYOFF_TOLERANCE,
)
from debtpro.tax import (
    IP_SELLING_COST_RATE,
    calc_tax_effect,
    calc_portfolio_after_cgt,
    calc_ip_net_sale_proceeds,
)
from debtpro.calculator import (
    ExtraRepaymentResult,
    calculate_extra_repayment,
    format_years_months,
)
from debtpro.scenarios import SCENARIOS, compare_tips, run_scenarios

__all__ = [
    "BaseInputs",
    "StrategyInputs",
    "Assumptions",
    "DEFAULT_ASSUMPTIONS",
    "resolve_assumptions",
    "run_simulation",
    "validate_inputs",
    "ip_purchase_triggered",
    "AcquisitionState",
    "RunningState",
    "YearSnapshot",
    "SimulationResult",
    "REPAYMENTS_PER_YEAR",
    "SALARY_INCREASE_TO_MORTGAGE",
    "USABLE_EQUITY_LVR",
    "REQUIRED_EQUITY_RATIO",
    "PAYOFF_TOLERANCE",
    "IP_SELLING_COST_RATE",
    "calc_tax_effect",
    "calc_portfolio_after_cgt",
    "calc_ip_net_sale_proceeds",
    "ExtraRepaymentResult",
    "calculate_extra_repayment",
    "format_years_months",
    "SCENARIOS",
    "compare_tips",
    "run_scenarios",
]
