"""
Request and result schemas for the calculation engine.
"""

from deal_analyzer.schemas.rental import Financials, CalculatedMetrics
from deal_analyzer.schemas.wholesale import WholesaleInputs, WholesaleCalculations
from deal_analyzer.schemas.subject_to import SubjectToInputs, SubjectToCalculations
from deal_analyzer.schemas.seller_financing import (
    SellerFinancingExpenses,
    SellerFinancingInputs,
    SellerFinancingCalculations,
)
from deal_analyzer.schemas.brrrr import (
    BrrrrRehabCosts,
    BrrrrFinancing,
    BrrrrRefinance,
    BrrrrOperatingExpenses,
    BrrrrInputs,
    BrrrrCalculations,
)
from deal_analyzer.schemas.projections import ProjectionAssumptions, ProjectionYear
from deal_analyzer.schemas.deal import (
    Strategy,
    DealAnalysis,
    RentalAnalysis,
    WholesaleAnalysis,
    SubjectToAnalysis,
    SellerFinancingAnalysis,
    BrrrrAnalysis,
)

__all__ = [
    "Financials",
    "CalculatedMetrics",
    "WholesaleInputs",
    "WholesaleCalculations",
    "SubjectToInputs",
    "SubjectToCalculations",
    "SellerFinancingExpenses",
    "SellerFinancingInputs",
    "SellerFinancingCalculations",
    "BrrrrRehabCosts",
    "BrrrrFinancing",
    "BrrrrRefinance",
    "BrrrrOperatingExpenses",
    "BrrrrInputs",
    "BrrrrCalculations",
    "ProjectionAssumptions",
    "ProjectionYear",
    "Strategy",
    "DealAnalysis",
    "RentalAnalysis",
    "WholesaleAnalysis",
    "SubjectToAnalysis",
    "SellerFinancingAnalysis",
    "BrrrrAnalysis",
]
