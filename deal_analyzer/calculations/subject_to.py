"""
Subject-To Calculations

Takeover of a seller's existing loan. The headline numbers are the spread
between market rent and the existing PITI and the return on the cash needed
to get the loan current and close. The full deal sheet adds operating
expenses, a seller second note, private money and the exit plan.
"""

from typing import Tuple

from deal_analyzer.calculations.amortization import (
    calculate_interest_only_payment,
    calculate_payment,
)
from deal_analyzer.calculations.totals import pick_amounts, sum_amounts
from deal_analyzer.schemas.subject_to import SubjectToCalculations, SubjectToInputs

CASH_NEEDED_FIELDS = (
    "reinstatement_needed",
    "seller_cash_needed",
    "closing_costs",
)

ENTRY_FEE_FIELDS = CASH_NEEDED_FIELDS + (
    "liens_judgments",
    "hoa_fees",
    "past_due_taxes",
    "escrow_shortage",
    "wholesale_fee",
    "trust_setup_fees",
)


def calculate_seller_second_payment(inputs: SubjectToInputs) -> float:
    """Amortized payment on a seller-carried second note, if one is set up."""
    if (
        inputs.seller_second_note_amount > 0
        and inputs.seller_second_note_rate > 0
        and inputs.seller_second_note_term > 0
    ):
        return calculate_payment(
            inputs.seller_second_note_amount,
            inputs.seller_second_note_rate,
            inputs.seller_second_note_term * 12,
        )
    return 0.0


def calculate_private_money_payment(inputs: SubjectToInputs) -> float:
    """Private money is modelled as interest-only."""
    if inputs.private_money_amount > 0 and inputs.private_money_rate > 0:
        return calculate_interest_only_payment(
            inputs.private_money_amount, inputs.private_money_rate
        )
    return 0.0


def calculate_exit(
    inputs: SubjectToInputs, monthly_cash_flow: float, total_investment: float
) -> Tuple[float, float]:
    """
    Projected profit and ROI for the chosen exit plan.

    A flip sells the property and pays off every loan; every other exit
    holds the property, so profit is a year of cash flow.
    """
    if inputs.exit_plan_type == "Flip":
        sale_proceeds = inputs.sale_price * (
            1 - ((inputs.resale_costs_percent + inputs.agent_fees_percent) / 100)
        )
        total_payoff = (
            inputs.existing_loan_balance
            + inputs.seller_second_note_amount
            + inputs.private_money_amount
        )
        projected_profit = sale_proceeds - total_payoff - total_investment
    else:
        projected_profit = monthly_cash_flow * 12

    roi = (projected_profit / total_investment) * 100 if total_investment > 0 else 0.0
    return projected_profit, roi


def calculate_subject_to_metrics(inputs: SubjectToInputs) -> SubjectToCalculations:
    # Headline spread
    monthly_spread = inputs.market_rent - inputs.monthly_piti
    cash_needed = sum_amounts(pick_amounts(inputs, CASH_NEEDED_FIELDS))
    cash_on_cash_return = (
        ((monthly_spread * 12) / cash_needed) * 100 if cash_needed > 0 else 0.0
    )

    # Upfront costs (entry fee)
    total_entry_fee = sum_amounts(pick_amounts(inputs, ENTRY_FEE_FIELDS))
    total_investment = total_entry_fee + inputs.rehab_cost

    # Monthly income
    gross_income = inputs.market_rent + inputs.other_monthly_income
    vacancy_loss = gross_income * (inputs.vacancy_rate / 100)
    effective_income = gross_income - vacancy_loss

    # Monthly expenses
    maintenance_cost = gross_income * (inputs.maintenance_rate / 100)
    management_cost = gross_income * (inputs.management_rate / 100)
    capex_cost = gross_income * (inputs.capex_rate / 100)
    total_expenses = sum_amounts(
        [
            inputs.monthly_taxes,
            inputs.monthly_insurance,
            inputs.monthly_utilities,
            maintenance_cost,
            management_cost,
            capex_cost,
        ]
    )

    net_operating_income = effective_income - total_expenses

    # Debt service
    existing_loan_payment = inputs.monthly_piti
    seller_second_payment = calculate_seller_second_payment(inputs)
    private_money_payment = calculate_private_money_payment(inputs)
    total_debt_service = existing_loan_payment + seller_second_payment + private_money_payment

    monthly_cash_flow = net_operating_income - total_debt_service

    projected_profit, roi = calculate_exit(inputs, monthly_cash_flow, total_investment)

    return SubjectToCalculations(
        monthly_spread=monthly_spread,
        cash_needed=cash_needed,
        cash_on_cash_return=cash_on_cash_return,
        total_entry_fee=total_entry_fee,
        total_investment=total_investment,
        gross_income=gross_income,
        vacancy_loss=vacancy_loss,
        effective_income=effective_income,
        total_expenses=total_expenses,
        net_operating_income=net_operating_income,
        existing_loan_payment=existing_loan_payment,
        seller_second_payment=seller_second_payment,
        private_money_payment=private_money_payment,
        total_debt_service=total_debt_service,
        monthly_cash_flow=monthly_cash_flow,
        projected_profit=projected_profit,
        roi=roi,
    )
