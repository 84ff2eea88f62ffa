"""CLI entry point for chart generation."""

import sys
from pathlib import Path

from debtpro.charts import plot_balances, plot_cashflow_stack, plot_tip_comparison
from debtpro.config import load_inputs
from debtpro.scenarios import ALL_TIPS_LABEL, compare_tips


def _add_chart_args(parser):
    parser.add_argument(
        "--output", type=Path, default=Path("reports/charts"),
        help="output directory (default: reports/charts)",
    )
    parser.add_argument(
        "--name", type=str, default="",
        help="output filename suffix (e.g. ip → balances-ip.png)",
    )


def main(argv: list[str] | None = None):
    base, strategy, assumptions, args = load_inputs(
        "DebtPro chart generation", _add_chart_args, argv,
    )

    print(f"Projecting {assumptions.projection_years} years...", file=sys.stderr)
    results = compare_tips(base, strategy, assumptions)
    combined = results[ALL_TIPS_LABEL]

    for path in (
        plot_balances(combined, args.output, name=args.name),
        plot_cashflow_stack(combined, args.output, name=args.name),
        plot_tip_comparison(results, args.output, name=args.name),
    ):
        print(f"  → {path}", file=sys.stderr)
    print("Done", file=sys.stderr)


if __name__ == "__main__":
    main()
