"""
Seller Financing Calculations

Owner-carried note: payment on the seller's loan, spread against market
rent, return on the down payment, and a full monthly operating picture.
"""

from deal_analyzer.calculations.amortization import (
    calculate_interest_only_payment,
    calculate_payment,
)
from deal_analyzer.calculations.totals import pick_amounts, sum_amounts
from deal_analyzer.schemas.seller_financing import (
    SellerFinancingCalculations,
    SellerFinancingInputs,
)

FIXED_EXPENSE_FIELDS = (
    "monthly_taxes",
    "monthly_insurance",
    "monthly_hoa",
    "monthly_water_sewer",
    "monthly_street_lights",
    "monthly_gas",
    "monthly_electric",
    "monthly_landscaping",
    "monthly_misc_fees",
)


def calculate_seller_loan_payment(inputs: SellerFinancingInputs) -> float:
    """
    Monthly payment on the seller-carried loan.

    Returns 0 unless the loan amount, rate and term are all positive.
    """
    loan_amount = inputs.purchase_price - inputs.down_payment
    if loan_amount > 0 and inputs.seller_loan_rate > 0 and inputs.loan_term > 0:
        if inputs.payment_type == "Amortization":
            return calculate_payment(
                loan_amount, inputs.seller_loan_rate, inputs.loan_term * 12
            )
        if inputs.payment_type == "Interest Only":
            return calculate_interest_only_payment(loan_amount, inputs.seller_loan_rate)
    return 0.0


def calculate_seller_financing_metrics(
    inputs: SellerFinancingInputs,
) -> SellerFinancingCalculations:
    monthly_payment = calculate_seller_loan_payment(inputs)

    spread_vs_market_rent = inputs.market_rent - monthly_payment
    return_on_dp = (
        ((spread_vs_market_rent * 12) / inputs.down_payment) * 100
        if inputs.down_payment > 0
        else 0.0
    )

    # Income
    expenses = inputs.expenses
    gross_income = inputs.market_rent + inputs.other_monthly_income
    vacancy_loss = gross_income * (expenses.vacancy_rate / 100)
    effective_income = gross_income - vacancy_loss

    # Expenses
    maintenance_cost = gross_income * (expenses.maintenance_rate / 100)
    management_cost = gross_income * (expenses.management_rate / 100)
    capex_cost = gross_income * (expenses.capex_rate / 100)
    fixed_expenses = sum_amounts(pick_amounts(expenses, FIXED_EXPENSE_FIELDS))
    operating_expenses = fixed_expenses + maintenance_cost + management_cost + capex_cost

    # NOI & cash flow
    net_operating_income = effective_income - operating_expenses
    cash_flow = net_operating_income - monthly_payment

    total_cash_invested = inputs.down_payment + inputs.rehab_cost
    cash_on_cash_return = (
        ((cash_flow * 12) / total_cash_invested) * 100
        if total_cash_invested > 0
        else 0.0
    )

    return SellerFinancingCalculations(
        monthly_payment=monthly_payment,
        spread_vs_market_rent=spread_vs_market_rent,
        return_on_dp=return_on_dp,
        gross_income=gross_income,
        vacancy_loss=vacancy_loss,
        effective_income=effective_income,
        operating_expenses=operating_expenses,
        net_operating_income=net_operating_income,
        cash_flow=cash_flow,
        cash_on_cash_return=cash_on_cash_return,
    )
