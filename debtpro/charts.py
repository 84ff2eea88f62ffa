"""Chart generation for projection results."""

from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import matplotlib.ticker as ticker

from debtpro.simulation import SimulationResult

BALANCE_COLORS = {
    "home_loan_balance": "#d62728",       # red
    "ip_loan_balance": "#ff7f0e",         # orange
    "investment_loan_balance": "#9467bd",  # purple
    "net_worth": "#2ca02c",               # green
}
BALANCE_LABELS = {
    "home_loan_balance": "Home loan",
    "ip_loan_balance": "IP loan",
    "investment_loan_balance": "Recycled loan",
    "net_worth": "Net worth",
}

DEFAULT_COLOR = "#7f7f7f"
COMPARISON_COLORS = ["#7f7f7f", "#1f77b4", "#2ca02c", "#ff7f0e", "#9467bd", "#d62728"]


def _format_aud_axis(ax: plt.Axes):
    """Dollar labels on the left, $M on the right."""
    ax.yaxis.set_major_formatter(
        ticker.FuncFormatter(lambda x, _: f"${x:,.0f}")
    )
    ax_right = ax.secondary_yaxis("right")
    ax_right.yaxis.set_major_formatter(
        ticker.FuncFormatter(lambda x, _: f"${x / 1_000_000:.1f}M" if x != 0 else "0")
    )
    ax_right.set_ylabel("")


def _mark_year(ax: plt.Axes, year: int, label: str, color: str, level: int = 0):
    ax.axvline(year, color=color, linewidth=1.2, linestyle=":", zorder=3)
    y_lo, y_hi = ax.get_ylim()
    ax.annotate(
        label,
        xy=(year, y_hi - (y_hi - y_lo) * (0.08 + 0.07 * level)),
        fontsize=10, color=color,
        ha="center", va="bottom",
        bbox=dict(boxstyle="round,pad=0.4", fc="white", ec=color, alpha=0.9, linewidth=0.8),
        zorder=10,
    )


def _save(fig: plt.Figure, output_path: Path, stem: str, name: str) -> Path:
    output_path.mkdir(parents=True, exist_ok=True)
    suffix = f"-{name}" if name else ""
    filepath = output_path / f"{stem}{suffix}.png"
    fig.tight_layout()
    fig.savefig(filepath, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return filepath


def plot_balances(result: SimulationResult, output_path: Path, name: str = "") -> Path:
    """Generate a line chart of loan balances and net worth by year.

    Args:
        result: run_simulation() result.
        output_path: directory to save the PNG.
        name: optional suffix for the output filename (e.g. "ip" → "balances-ip.png").

    Returns:
        Path to the generated PNG file.
    """
    if not result.years:
        raise ValueError("No years in SimulationResult")

    fig, ax = plt.subplots(figsize=(14, 8))
    years = [y.year_index for y in result.years]
    for key, label in BALANCE_LABELS.items():
        values = [getattr(y, key) for y in result.years]
        if key != "home_loan_balance" and key != "net_worth" and not any(values):
            continue
        ax.plot(years, values, label=label, color=BALANCE_COLORS.get(key, DEFAULT_COLOR), linewidth=2)

    ax.set_xlabel("Year")
    ax.set_ylabel("Balance (AUD)")
    ax.set_title("Loan balances and net worth")
    ax.axhline(0, color="black", linewidth=1.0)
    ax.legend(loc="upper left")
    ax.grid(True, alpha=0.3)
    _format_aud_axis(ax)

    ip_years = [y.year_index for y in result.years if y.ip_value > 0]
    if ip_years:
        _mark_year(ax, ip_years[0], f"IP bought (year {ip_years[0]})", "#ff7f0e", level=0)
    if result.debt_free_year_index is not None:
        _mark_year(ax, result.debt_free_year_index, f"Can clear (year {result.debt_free_year_index})", "#2ca02c", level=1)
    if result.payoff_year_index is not None:
        _mark_year(ax, result.payoff_year_index, f"Repaid (year {result.payoff_year_index})", "#d62728", level=2)

    return _save(fig, output_path, "balances", name)


def plot_cashflow_stack(result: SimulationResult, output_path: Path, name: str = "") -> Path:
    """Generate a stacked cash-flow chart (expenses stacked against total income)."""
    if not result.years:
        raise ValueError("No years for cashflow chart")

    fig, ax = plt.subplots(figsize=(14, 8))
    years = [y.year_index for y in result.years]
    living = [y.living_expenses for y in result.years]
    repayments = [y.home_loan_repayments for y in result.years]
    ip_costs = [y.ip_expenses + y.ip_interest for y in result.years]
    extra_tax = [max(0.0, -y.tax_effect_net) for y in result.years]

    ax.stackplot(
        years, living, repayments, ip_costs, extra_tax,
        labels=["Living", "Home loan repayments", "IP expenses + interest", "Extra tax"],
        colors=["#66c2a5", "#8da0cb", "#fc8d62", "#e78ac3"],
        alpha=0.75,
    )
    ax.plot(years, [y.total_income for y in result.years], color="#1f77b4", linewidth=2, label="Total income")
    ax.plot(
        years, [y.surplus_cashflow for y in result.years],
        color="#d62728", linewidth=1.8, linestyle="--", label="Surplus",
    )

    ax.set_xlabel("Year")
    ax.set_ylabel("Annual cash flow (AUD)")
    ax.set_title("Cash flow")
    ax.axhline(0, color="black", linewidth=2.0, zorder=5)
    ax.grid(True, alpha=0.3)
    ax.legend(loc="upper left", fontsize=9)
    _format_aud_axis(ax)

    return _save(fig, output_path, "cashflow", name)


def plot_tip_comparison(
    results: dict[str, SimulationResult], output_path: Path, name: str = "",
) -> Path:
    """Generate a home-loan balance chart with one line per tip variant."""
    valid = {label: r for label, r in results.items() if r.years}
    if not valid:
        raise ValueError("No results for comparison chart")

    fig, ax = plt.subplots(figsize=(14, 8))
    for i, (label, r) in enumerate(valid.items()):
        color = COMPARISON_COLORS[i % len(COMPARISON_COLORS)]
        years = [y.year_index for y in r.years]
        ax.plot(years, [y.home_loan_balance for y in r.years], label=label, color=color, linewidth=2)
        if r.debt_free_year_index is not None:
            y = r.years[r.debt_free_year_index]
            ax.scatter([y.year_index], [y.home_loan_balance], color=color, marker="o", zorder=6)

    ax.set_xlabel("Year")
    ax.set_ylabel("Home loan balance (AUD)")
    ax.set_title("Home loan balance by tip (dot = could clear by selling investments)")
    ax.legend(loc="upper right")
    ax.grid(True, alpha=0.3)
    _format_aud_axis(ax)

    return _save(fig, output_path, "tips", name)
