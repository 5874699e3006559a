"""
Buy-and-hold rental schemas.
"""

from typing import List

from deal_analyzer.schemas.base import (
    Amount,
    CalculationResult,
    CamelModel,
    Count,
    Percent,
)


class Financials(CamelModel):
    """Purchase, operating and financing parameters for a single property."""

    list_price: Amount = 0.0
    estimated_value: Amount = 0.0
    purchase_price: Amount = 0.0
    rehab_cost: Amount = 0.0
    down_payment_percent: Percent = 0.0

    # Income, one rent per unit
    monthly_rents: List[Amount] = []
    other_monthly_income: Amount = 0.0

    # Operating rates (percent of gross income)
    vacancy_rate: Percent = 0.0
    maintenance_rate: Percent = 0.0
    management_rate: Percent = 0.0
    capex_rate: Percent = 0.0

    # Fixed monthly operating costs
    monthly_taxes: Amount = 0.0
    monthly_insurance: Amount = 0.0
    monthly_water_sewer: Amount = 0.0
    monthly_street_lights: Amount = 0.0
    monthly_gas: Amount = 0.0
    monthly_electric: Amount = 0.0
    monthly_landscaping: Amount = 0.0
    monthly_hoa_fee: Amount = 0.0
    operating_misc_fee: Amount = 0.0

    # Loan terms
    loan_interest_rate: Percent = 0.0
    loan_term_years: Count = 30
    origination_fee_percent: Percent = 0.0

    # One-time closing fees
    closing_fee: Amount = 0.0
    processing_fee: Amount = 0.0
    appraisal_fee: Amount = 0.0
    title_fee: Amount = 0.0
    broker_agent_fee: Amount = 0.0
    home_warranty_fee: Amount = 0.0
    attorney_fee: Amount = 0.0
    closing_misc_fee: Amount = 0.0

    # Seller credits (reduce cash due at close)
    seller_credit_tax: Amount = 0.0
    seller_credit_sewer: Amount = 0.0
    seller_credit_origination: Amount = 0.0
    seller_credit_closing: Amount = 0.0
    seller_credit_rents: Amount = 0.0
    seller_credit_security_deposit: Amount = 0.0
    seller_credit_misc: Amount = 0.0

    @property
    def unit_count(self) -> int:
        return len(self.monthly_rents)


class CalculatedMetrics(CalculationResult):
    """Rental metrics. Expense and NOI figures are monthly."""

    down_payment_amount: float
    total_cash_to_close: float
    total_investment: float
    loan_amount: float
    monthly_debt_service: float

    gross_annual_rent: float
    vacancy_loss: float
    effective_gross_income: float

    maintenance_cost: float
    management_cost: float
    capex_cost: float
    total_operating_expenses: float
    net_operating_income: float

    cap_rate: float
    all_in_cap_rate: float
    cash_on_cash_return: float
    monthly_cash_flow_no_debt: float
    monthly_cash_flow_with_debt: float
    total_closing_costs: float
    dscr: float
