"""
Financial calculation API endpoints.

These endpoints accept deal inputs and return calculated results. They are
stateless: the caller persists the returned calculations alongside the deal.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter
from pydantic import field_serializer

from deal_analyzer.calculations import (
    brrrr,
    irr,
    projections,
    rental,
    seller_financing,
    subject_to,
    wholesale,
)
from deal_analyzer.calculations.dispatch import recalculate
from deal_analyzer.config import get_settings
from deal_analyzer.schemas import (
    BrrrrCalculations,
    BrrrrInputs,
    CalculatedMetrics,
    DealAnalysis,
    Financials,
    ProjectionAssumptions,
    ProjectionYear,
    SellerFinancingCalculations,
    SellerFinancingInputs,
    SubjectToCalculations,
    SubjectToInputs,
    WholesaleCalculations,
    WholesaleInputs,
)
from deal_analyzer.schemas.base import CamelModel, finite_or_none

logger = logging.getLogger(__name__)

router = APIRouter()


# ============================================================================
# STRATEGY CALCULATORS
# ============================================================================


@router.post("/rental", response_model=CalculatedMetrics)
async def calculate_rental(financials: Financials):
    """Calculate buy-and-hold rental metrics."""
    return rental.calculate_metrics(financials)


@router.post("/wholesale", response_model=WholesaleCalculations)
async def calculate_wholesale(inputs: WholesaleInputs):
    """Calculate MAO and assignment fee for a wholesale deal."""
    return wholesale.calculate_wholesale_metrics(inputs)


@router.post("/subject-to", response_model=SubjectToCalculations)
async def calculate_subject_to(inputs: SubjectToInputs):
    """Calculate spread and returns for a subject-to takeover."""
    return subject_to.calculate_subject_to_metrics(inputs)


@router.post("/seller-financing", response_model=SellerFinancingCalculations)
async def calculate_seller_financing(inputs: SellerFinancingInputs):
    """Calculate payment and returns on a seller-carried loan."""
    return seller_financing.calculate_seller_financing_metrics(inputs)


@router.post("/brrrr", response_model=BrrrrCalculations)
async def calculate_brrrr(inputs: BrrrrInputs):
    """Calculate project cost, refinance and post-refi returns for a BRRRR."""
    return brrrr.calculate_brrrr_metrics(inputs)


class DealCalculationRequest(CamelModel):
    """Strategy-tagged analysis to recompute."""

    analysis: DealAnalysis


@router.post("/deal")
async def calculate_deal(request: DealCalculationRequest):
    """Recompute whichever strategy the analysis is tagged with."""
    analysis = request.analysis
    calculations = recalculate(analysis)
    return {
        "strategy": analysis.strategy,
        "calculations": calculations.model_dump(mode="json", by_alias=True),
    }


# ============================================================================
# PROJECTIONS AND RETURNS
# ============================================================================


class ProjectionRequest(CamelModel):
    """Rental deal plus growth assumptions (configured defaults if omitted)."""

    financials: Financials
    assumptions: Optional[ProjectionAssumptions] = None


class ProjectionResponse(CamelModel):
    assumptions: ProjectionAssumptions
    years: List[ProjectionYear]


@router.post("/projections", response_model=ProjectionResponse)
async def calculate_projections(request: ProjectionRequest):
    """Project a rental deal over a 30-year hold."""
    assumptions = request.assumptions
    if assumptions is None:
        settings = get_settings()
        assumptions = ProjectionAssumptions(
            appreciation_rate=settings.projection_appreciation_rate,
            income_growth_rate=settings.projection_income_growth_rate,
            expense_growth_rate=settings.projection_expense_growth_rate,
        )
        logger.debug(f"Projecting with configured assumptions: {assumptions}")

    return ProjectionResponse(
        assumptions=assumptions,
        years=projections.calculate_projections(request.financials, assumptions),
    )


class HoldPeriodIRRResponse(CamelModel):
    """Five-year hold returns. IRR is in percent; null when infinite."""

    irr: float
    total_profit: float
    equity_multiple: float

    @field_serializer("irr", "equity_multiple", when_used="json")
    def _serialize_ratio(self, value: float) -> Optional[float]:
        return finite_or_none(value)


@router.post("/hold-period-irr", response_model=HoldPeriodIRRResponse)
async def calculate_hold_period_irr(financials: Financials):
    """Five-year IRR for a rental, seeded from its cash to close and cash flow."""
    settings = get_settings()
    metrics = rental.calculate_metrics(financials)

    returns = irr.calculate_hold_period_irr(
        initial_investment=metrics.total_cash_to_close,
        year1_cash_flow=metrics.monthly_cash_flow_with_debt * 12,
        initial_property_value=financials.purchase_price,
        selling_costs_percent=settings.hold_period_selling_costs_percent,
        annual_growth_rate=settings.hold_period_growth_rate,
    )

    return HoldPeriodIRRResponse(
        irr=returns.irr,
        total_profit=returns.total_profit,
        equity_multiple=returns.equity_multiple,
    )
