"""
Seller-financing (owner carry) schemas.
"""

from typing import Annotated, Literal

from pydantic import BeforeValidator, Field

from deal_analyzer.schemas.base import (
    Amount,
    CalculationResult,
    Count,
    CamelModel,
    Percent,
    none_as_empty,
)

PaymentType = Literal["Amortization", "Interest Only"]


class SellerFinancingExpenses(CamelModel):
    vacancy_rate: Percent = 0.0
    maintenance_rate: Percent = 0.0
    management_rate: Percent = 0.0
    capex_rate: Percent = 0.0
    monthly_taxes: Amount = 0.0
    monthly_insurance: Amount = 0.0
    monthly_hoa: Amount = 0.0
    monthly_water_sewer: Amount = 0.0
    monthly_street_lights: Amount = 0.0
    monthly_gas: Amount = 0.0
    monthly_electric: Amount = 0.0
    monthly_landscaping: Amount = 0.0
    monthly_misc_fees: Amount = 0.0


class SellerFinancingInputs(CamelModel):
    purchase_price: Amount = 0.0
    down_payment: Amount = 0.0
    seller_loan_rate: Percent = 0.0
    loan_term: Count = 0.0  # years
    balloon_years: Count = 0.0  # 0 if none
    payment_type: PaymentType = "Amortization"
    market_rent: Amount = 0.0
    other_monthly_income: Amount = 0.0
    rehab_cost: Amount = 0.0
    expenses: Annotated[SellerFinancingExpenses, BeforeValidator(none_as_empty)] = Field(
        default_factory=SellerFinancingExpenses
    )


class SellerFinancingCalculations(CalculationResult):
    monthly_payment: float
    spread_vs_market_rent: float
    return_on_dp: float

    gross_income: float
    vacancy_loss: float
    effective_income: float
    operating_expenses: float
    net_operating_income: float
    cash_flow: float
    cash_on_cash_return: float
