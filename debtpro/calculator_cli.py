"""CLI entry point for the extra-repayment calculator."""

import argparse

from debtpro.calculator import calculate_extra_repayment, format_years_months
from debtpro.cli import fmt_aud


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="See how fast you could be debt-free")
    parser.add_argument(
        "--loan-amount", type=float, default=600_000,
        help="loan balance (default: 600,000)",
    )
    parser.add_argument(
        "--rate", type=float, default=0.055,
        help="interest rate p.a. as a fraction (default: 0.055)",
    )
    parser.add_argument(
        "--term-years", type=int, default=30,
        help="remaining loan term in years (default: 30)",
    )
    parser.add_argument(
        "--extra-per-month", type=float, default=300,
        help="extra repayment per month (default: 300)",
    )
    return parser


def main(argv: list[str] | None = None):
    args = _build_parser().parse_args(argv)
    result = calculate_extra_repayment(
        args.loan_amount, args.rate, args.term_years, args.extra_per_month,
    )
    if result is None:
        print("Enter a loan amount, rate and term to see a projection.")
        return

    rows = [
        ("Minimum monthly repayment", fmt_aud(result.min_repayment)),
        ("Time to repay (minimums only)", format_years_months(result.baseline_months)),
        ("Time to repay (with extra)", format_years_months(result.payoff_months_with_extra)),
        ("Time saved from your loan", format_years_months(result.months_saved)),
        ("Total interest (no extra)", fmt_aud(result.baseline_interest)),
        ("Total interest (with extra)", fmt_aud(result.interest_with_extra)),
        ("Interest saved", fmt_aud(result.interest_saved)),
    ]
    for label, value in rows:
        print(f"{label:<32} {value:>20}")
    print()
    print("General information only; rates, loan features and behaviour will change outcomes.")


if __name__ == "__main__":
    main()
