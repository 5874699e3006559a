"""
Hold Projections

Year-by-year projection of a rental deal over a 30-year hold: appreciation,
rent and expense growth, loan paydown, equity and total return.
"""

import math
from typing import List

from deal_analyzer.calculations.amortization import (
    calculate_fixed_payment,
    calculate_payment,
    calculate_remaining_balance,
)
from deal_analyzer.calculations.totals import pick_amounts, sum_amounts
from deal_analyzer.schemas.projections import ProjectionAssumptions, ProjectionYear
from deal_analyzer.schemas.rental import Financials

PROJECTION_YEARS = 30

FIXED_EXPENSE_FIELDS = (
    "monthly_taxes",
    "monthly_insurance",
    "monthly_water_sewer",
    "monthly_street_lights",
    "monthly_gas",
    "monthly_electric",
    "monthly_landscaping",
    "monthly_hoa_fee",
    "operating_misc_fee",
)


def round_half_up(value: float) -> int:
    """Round to the nearest dollar, halves rounding up."""
    return math.floor(value + 0.5)


def calculate_initial_monthly_expenses(financials: Financials, annual_income: float) -> float:
    """Fixed costs plus vacancy, maintenance, management and capex allowances."""
    f = financials
    monthly_income = annual_income / 12
    return sum_amounts(
        list(pick_amounts(f, FIXED_EXPENSE_FIELDS).values())
        + [
            monthly_income * (f.vacancy_rate / 100),
            monthly_income * (f.maintenance_rate / 100),
            monthly_income * (f.management_rate / 100),
            monthly_income * (f.capex_rate / 100),
        ]
    )


def calculate_projections(
    financials: Financials,
    assumptions: ProjectionAssumptions,
    years: int = PROJECTION_YEARS,
) -> List[ProjectionYear]:
    """
    Project a rental deal forward year by year.

    Appreciation applies from year 1; income and expense growth start in
    year 2. The loan balance at each year end is the present value of the
    payments still due.

    Args:
        financials: Rental deal inputs
        assumptions: Appreciation, income growth and expense growth percents
        years: Number of years to project

    Returns:
        One ProjectionYear per year, rounded to whole dollars
    """
    f = financials
    projections = []

    current_value = f.purchase_price or f.list_price
    current_loan_balance = (
        f.purchase_price * (1 - (f.down_payment_percent / 100))
        if f.purchase_price
        else 0.0
    )

    number_of_payments = f.loan_term_years * 12
    if f.loan_interest_rate:
        monthly_pi = calculate_fixed_payment(
            current_loan_balance, f.loan_interest_rate, number_of_payments
        )
    else:
        monthly_pi = calculate_payment(current_loan_balance, 0.0, number_of_payments)
    annual_debt_service = monthly_pi * 12

    current_annual_income = sum_amounts(f.monthly_rents) * 12
    current_annual_expenses = (
        calculate_initial_monthly_expenses(f, current_annual_income) * 12
    )

    cumulative_cash_flow = 0.0
    initial_value = current_value
    initial_loan = current_loan_balance

    for year in range(1, years + 1):
        current_value += current_value * (assumptions.appreciation_rate / 100)

        if year > 1:
            current_annual_income *= 1 + (assumptions.income_growth_rate / 100)
            current_annual_expenses *= 1 + (assumptions.expense_growth_rate / 100)

        remaining_payments = number_of_payments - year * 12
        current_loan_balance = calculate_remaining_balance(
            monthly_pi, f.loan_interest_rate, remaining_payments
        )

        noi = current_annual_income - current_annual_expenses
        cash_flow = noi - annual_debt_service
        cumulative_cash_flow += cash_flow

        equity = current_value - current_loan_balance
        cumulative_appreciation = current_value - initial_value
        cumulative_principal_paydown = initial_loan - current_loan_balance
        total_return = (
            cumulative_cash_flow + cumulative_principal_paydown + cumulative_appreciation
        )

        projections.append(
            ProjectionYear(
                year=year,
                property_value=round_half_up(current_value),
                loan_balance=round_half_up(current_loan_balance),
                equity=round_half_up(equity),
                gross_income=round_half_up(current_annual_income),
                operating_expenses=round_half_up(current_annual_expenses),
                net_operating_income=round_half_up(noi),
                debt_service=round_half_up(annual_debt_service),
                cash_flow=round_half_up(cash_flow),
                cumulative_cash_flow=round_half_up(cumulative_cash_flow),
                cumulative_appreciation=round_half_up(cumulative_appreciation),
                cumulative_principal_paydown=round_half_up(cumulative_principal_paydown),
                total_return=round_half_up(total_return),
            )
        )

    return projections
