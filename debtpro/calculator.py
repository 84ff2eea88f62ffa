"""Stand-alone extra-repayment calculator (monthly amortisation).

Independent of the yearly projection engine: compares a standard
principal-and-interest loan with the same loan plus a fixed extra
monthly repayment.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class ExtraRepaymentResult:
    min_repayment: float
    baseline_interest: float
    baseline_months: int
    payoff_months_with_extra: int
    interest_with_extra: float
    interest_saved: float
    months_saved: int


def _annuity_repayment(principal: float, monthly_rate: float, months: int) -> float:
    """Level monthly repayment that clears principal in months (monthly_rate > 0)."""
    growth = (1 + monthly_rate) ** months
    return principal * monthly_rate * growth / (growth - 1)


def calculate_extra_repayment(
    loan_amount: float,
    annual_rate: float,
    term_years: int,
    extra_per_month: float,
) -> ExtraRepaymentResult | None:
    """Time and interest saved by paying extra_per_month on top of the minimum.

    annual_rate is a fraction (0.055 = 5.5%). Returns None when the loan,
    rate or term is zero, as there is nothing to compare.
    """
    if not loan_amount or not annual_rate or not term_years:
        return None

    total_months = term_years * 12
    monthly_rate = annual_rate / 12
    min_repayment = _annuity_repayment(loan_amount, monthly_rate, total_months)
    baseline_interest = min_repayment * total_months - loan_amount

    balance = loan_amount
    month = 0
    interest_with_extra = 0.0
    repayment = min_repayment + extra_per_month
    while balance > 0 and month < total_months:
        interest = balance * monthly_rate
        interest_with_extra += interest
        balance -= repayment - interest
        month += 1

    return ExtraRepaymentResult(
        min_repayment=min_repayment,
        baseline_interest=baseline_interest,
        baseline_months=total_months,
        payoff_months_with_extra=month,
        interest_with_extra=interest_with_extra,
        interest_saved=baseline_interest - interest_with_extra,
        months_saved=total_months - month,
    )


def format_years_months(total_months: float) -> str:
    """27 → "2 years 3 months". Non-positive or non-finite → "-"."""
    if not math.isfinite(total_months) or total_months <= 0:
        return "-"
    months = math.floor(total_months + 0.5)  # halves round up
    years, remaining = divmod(months, 12)
    if years == 0:
        return f"{remaining} months"
    if remaining == 0:
        return f"{years} years"
    return f"{years} years {remaining} months"
