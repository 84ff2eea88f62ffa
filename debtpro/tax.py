"""Simplified tax and sale-cost calculations.

A single marginal rate stands in for the bracket schedule, and a flat
effective CGT rate stands in for capital-gains taxation.
"""

IP_SELLING_COST_RATE = 0.03  # agent + legal costs on sale of the investment property


def calc_tax_effect(net_before_tax: float, marginal_rate: float) -> float:
    """Tax effect of an investment's net result (positive = refund, negative = extra tax).

    A loss (negative gearing) gives a refund of loss × marginal_rate; a profit
    costs the same proportion. Both sides use the one sign convention.
    """
    if net_before_tax == 0:
        return 0.0
    return -net_before_tax * marginal_rate


def calc_portfolio_after_cgt(portfolio_value: float, effective_cgt_rate: float) -> float:
    """Portfolio proceeds after a flat effective CGT on the whole value.

    The rate is applied to the full balance, including the debt-funded part.
    """
    if portfolio_value <= 0:
        return 0.0
    return portfolio_value * (1 - effective_cgt_rate)


def calc_ip_net_sale_proceeds(ip_value: float, ip_loan_balance: float) -> float:
    """Cash left after selling the investment property and repaying its loan (never negative)."""
    if ip_value <= 0:
        return 0.0
    return max(0.0, ip_value * (1 - IP_SELLING_COST_RATE) - ip_loan_balance)
