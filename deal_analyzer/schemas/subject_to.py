"""
Subject-To (existing loan takeover) schemas.
"""

from typing import Literal

from pydantic import Field

from deal_analyzer.schemas.base import (
    Amount,
    CalculationResult,
    CamelModel,
    Count,
    Percent,
)


class SubjectToInputs(CamelModel):
    """Deal sheet for taking over a seller's existing loan."""

    # Loan & seller
    existing_loan_balance: Amount = 0.0
    existing_loan_rate: Percent = 0.0
    monthly_piti: Amount = Field(default=0.0, alias="monthlyPITI")
    reinstatement_needed: Amount = 0.0
    seller_cash_needed: Amount = 0.0
    seller_second_note_amount: Amount = 0.0
    seller_second_note_rate: Percent = 0.0
    seller_second_note_term: Count = 0.0
    closing_costs: Amount = 0.0
    liens_judgments: Amount = 0.0
    hoa_fees: Amount = 0.0
    past_due_taxes: Amount = 0.0
    escrow_shortage: Amount = 0.0

    # Income
    market_rent: Amount = 0.0
    other_monthly_income: Amount = 0.0
    vacancy_rate: Percent = 0.0

    # Expenses
    monthly_taxes: Amount = 0.0
    monthly_insurance: Amount = 0.0
    maintenance_rate: Percent = 0.0
    management_rate: Percent = 0.0
    capex_rate: Percent = 0.0
    monthly_utilities: Amount = 0.0

    # Rehab & value
    as_is_value: Amount = 0.0
    arv: Amount = 0.0
    rehab_cost: Amount = 0.0

    # Investor capital
    private_money_amount: Amount = 0.0
    private_money_rate: Percent = 0.0
    wholesale_fee: Amount = 0.0

    # Exit
    exit_plan_type: Literal["Rental", "Wrap", "Flip", "Wholesale"] = "Rental"
    sale_price: Amount = 0.0
    resale_costs_percent: Percent = 0.0
    agent_fees_percent: Percent = 0.0

    # Legal & risk
    due_on_sale_risk: Literal["Low", "Medium", "High"] = "Low"
    trust_setup_fees: Amount = 0.0


class SubjectToCalculations(CalculationResult):
    """Headline spread metrics plus the full monthly deal sheet."""

    monthly_spread: float
    cash_needed: float
    cash_on_cash_return: float

    # Upfront
    total_entry_fee: float
    total_investment: float

    # Monthly operations
    gross_income: float
    vacancy_loss: float
    effective_income: float
    total_expenses: float
    net_operating_income: float

    # Debt service
    existing_loan_payment: float
    seller_second_payment: float
    private_money_payment: float
    total_debt_service: float

    monthly_cash_flow: float

    # Exit
    projected_profit: float
    roi: float
