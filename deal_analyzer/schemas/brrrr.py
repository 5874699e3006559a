"""
BRRRR (Buy, Rehab, Rent, Refinance, Repeat) schemas.

Purchase costs and each rehab category are open-ended bags of named line
items, so new items can be added by the frontend without a schema change.
"""

from typing import Annotated, Dict, Optional

from pydantic import BeforeValidator, Field, field_serializer

from deal_analyzer.schemas.base import (
    Amount,
    CalculationResult,
    CamelModel,
    Count,
    Percent,
    finite_or_none,
    none_as_empty,
)

LineItems = Annotated[Dict[str, Amount], BeforeValidator(none_as_empty)]


class BrrrrRehabCosts(CamelModel):
    exterior: LineItems = Field(default_factory=dict)
    interior: LineItems = Field(default_factory=dict)
    general: LineItems = Field(default_factory=dict)


class BrrrrFinancing(CamelModel):
    """Acquisition/rehab loan used until the refinance."""

    is_cash: bool = False
    points: Percent = 0.0
    other_charges: Amount = 0.0
    wrap_fees_into_loan: bool = False
    interest_only: bool = True
    include_pmi: bool = False
    pmi_amount: Amount = 0.0
    refinance_timeline_months: Count = 0.0
    rehab_timeline_months: Count = 0.0
    loan_amount: Amount = 0.0
    interest_rate: Percent = 0.0


class BrrrrRefinance(CamelModel):
    # None falls back to DEFAULT_REFINANCE_LTV
    loan_ltv: Optional[float] = None
    interest_rate: Percent = 0.0
    closing_costs: Amount = 0.0


class BrrrrOperatingExpenses(CamelModel):
    monthly_taxes: Amount = 0.0
    monthly_insurance: Amount = 0.0
    monthly_hoa: Amount = 0.0
    monthly_water_sewer: Amount = 0.0
    monthly_street_lights: Amount = 0.0
    monthly_gas: Amount = 0.0
    monthly_electric: Amount = 0.0
    monthly_landscaping: Amount = 0.0
    monthly_misc_fees: Amount = 0.0

    vacancy_rate: Percent = 0.0
    maintenance_rate: Percent = 0.0
    capex_rate: Percent = 0.0
    management_rate: Percent = 0.0

    other_monthly_income: Amount = 0.0


class BrrrrInputs(CamelModel):
    purchase_price: Amount = 0.0
    arv: Amount = 0.0
    purchase_costs: LineItems = Field(default_factory=dict)
    rehab_costs: Annotated[BrrrrRehabCosts, BeforeValidator(none_as_empty)] = Field(
        default_factory=BrrrrRehabCosts
    )
    financing: Annotated[BrrrrFinancing, BeforeValidator(none_as_empty)] = Field(
        default_factory=BrrrrFinancing
    )
    refinance: Annotated[BrrrrRefinance, BeforeValidator(none_as_empty)] = Field(
        default_factory=BrrrrRefinance
    )
    expenses: Annotated[
        BrrrrOperatingExpenses, BeforeValidator(none_as_empty)
    ] = Field(default_factory=BrrrrOperatingExpenses)
    monthly_rent: Amount = 0.0
    holding_costs_monthly: Amount = 0.0


class BrrrrRevenueBreakdown(CalculationResult):
    gross_rent: float
    other_income: float
    vacancy_loss: float
    effective_income: float


class BrrrrExpenseBreakdown(CalculationResult):
    property_taxes: float
    insurance: float
    hoa: float
    utilities: float
    repairs_maintenance: float
    capex: float
    management: float
    debt_service: float
    misc: float
    total_operating_expenses: float
    total_expenses: float


class BrrrrBreakdown(CalculationResult):
    revenue: BrrrrRevenueBreakdown
    expenses: BrrrrExpenseBreakdown


class BrrrrCalculations(CalculationResult):
    """
    Project cost, refinance and post-refinance results.

    ``roi`` is ``inf`` when no cash is left in the deal; check
    ``is_infinite_return`` before formatting it. JSON output renders the
    infinite value as null.
    """

    total_project_cost: float
    total_rehab_cost: float
    total_purchase_closing_costs: float
    total_holding_costs: float
    total_financing_costs: float

    refinance_loan_amount: float
    refi_closing_costs: float
    net_refi_proceeds: float
    cash_out_amount: float
    cash_left_in_deal: float
    roi: float
    monthly_cash_flow_post_refi: float
    monthly_revenue: float
    monthly_expenses: float

    breakdown: BrrrrBreakdown

    is_infinite_return: bool

    @field_serializer("roi", when_used="json")
    def _serialize_roi(self, roi: float) -> Optional[float]:
        return finite_or_none(roi)
