"""
Hold-Period Returns

NPV helpers and the simplified five-year hold IRR shown alongside rental
metrics. The IRR is found with Newton-Raphson steps.
"""

from dataclasses import dataclass
from typing import List

import numpy as np

DEFAULT_GUESS = 0.1

HOLD_PERIOD_YEARS = 5
HOLD_PERIOD_MAX_ITERATIONS = 20
HOLD_PERIOD_TOLERANCE = 1e-6


def calculate_npv(cash_flows: List[float], discount_rate: float) -> float:
    """
    Calculate NPV (Net Present Value) of cash flows.

    Args:
        cash_flows: Array of cash flows (negative = outflow, positive = inflow)
        discount_rate: Periodic discount rate as decimal (e.g., 0.10 for 10%)

    Returns:
        NPV value
    """
    flows = np.asarray(cash_flows, dtype=float)
    periods = np.arange(len(flows))
    return float(np.sum(flows / (1 + discount_rate) ** periods))


def _npv_derivative(cash_flows: List[float], rate: float) -> float:
    """Calculate derivative of NPV with respect to rate (for Newton-Raphson)."""
    flows = np.asarray(cash_flows, dtype=float)
    periods = np.arange(len(flows))
    return float(-np.sum(periods * flows / (1 + rate) ** (periods + 1)))


@dataclass(frozen=True)
class HoldPeriodReturns:
    irr: float  # percent
    total_profit: float
    equity_multiple: float


def build_hold_period_cash_flows(
    initial_investment: float,
    year1_cash_flow: float,
    initial_property_value: float,
    selling_costs_percent: float = 6,
    annual_growth_rate: float = 0.03,
) -> List[float]:
    """
    Annual cash flows for a five-year hold ending in a sale.

    Cash flow and property value grow at ``annual_growth_rate``. The sale
    returns the initial investment plus appreciation, less selling costs;
    principal paydown is ignored.
    """
    cash_flows = [-initial_investment]

    current_cash_flow = year1_cash_flow
    for _ in range(HOLD_PERIOD_YEARS):
        cash_flows.append(current_cash_flow)
        current_cash_flow *= 1 + annual_growth_rate

    projected_sale_price = initial_property_value * (1 + annual_growth_rate) ** HOLD_PERIOD_YEARS
    net_sale_proceeds = (
        initial_investment
        + (projected_sale_price - initial_property_value)
        - (projected_sale_price * (selling_costs_percent / 100))
    )
    cash_flows[HOLD_PERIOD_YEARS] += net_sale_proceeds

    return cash_flows


def calculate_hold_period_irr(
    initial_investment: float,
    year1_cash_flow: float,
    initial_property_value: float,
    selling_costs_percent: float = 6,
    annual_growth_rate: float = 0.03,
) -> HoldPeriodReturns:
    """
    Simplified five-year IRR for a rental.

    Never raises: it runs a fixed number of Newton-Raphson steps from a
    10% guess and reports the last estimate.

    Args:
        initial_investment: Cash invested at close
        year1_cash_flow: Annual cash flow in year 1
        initial_property_value: Property value at purchase
        selling_costs_percent: Selling costs as a percent of sale price
        annual_growth_rate: Growth of cash flow and value, as decimal

    Returns:
        HoldPeriodReturns with IRR in percent. No investment means an
        infinite IRR and multiple.
    """
    if initial_investment <= 0:
        return HoldPeriodReturns(
            irr=float("inf"), total_profit=0.0, equity_multiple=float("inf")
        )

    cash_flows = build_hold_period_cash_flows(
        initial_investment,
        year1_cash_flow,
        initial_property_value,
        selling_costs_percent,
        annual_growth_rate,
    )
    total_profit = sum(cash_flows)

    guess = DEFAULT_GUESS
    for _ in range(HOLD_PERIOD_MAX_ITERATIONS):
        npv = calculate_npv(cash_flows, guess)
        derivative = _npv_derivative(cash_flows, guess)
        if abs(derivative) < HOLD_PERIOD_TOLERANCE:
            break
        next_guess = guess - npv / derivative
        if abs(next_guess - guess) < HOLD_PERIOD_TOLERANCE:
            guess = next_guess
            break
        guess = next_guess

    return HoldPeriodReturns(
        irr=guess * 100,
        total_profit=total_profit,
        equity_multiple=(total_profit + initial_investment) / initial_investment,
    )
