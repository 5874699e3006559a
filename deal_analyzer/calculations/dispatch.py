"""
Recompute dispatcher.

Maps a strategy-tagged analysis to its calculator. This is the only place
the strategies meet; the calculators never call each other.
"""

import logging
from typing import Callable, Dict

from pydantic import BaseModel

from deal_analyzer.calculations.brrrr import calculate_brrrr_metrics
from deal_analyzer.calculations.rental import calculate_metrics
from deal_analyzer.calculations.seller_financing import calculate_seller_financing_metrics
from deal_analyzer.calculations.subject_to import calculate_subject_to_metrics
from deal_analyzer.calculations.wholesale import calculate_wholesale_metrics
from deal_analyzer.schemas.deal import DealAnalysis

logger = logging.getLogger(__name__)

CALCULATORS: Dict[str, Callable[..., BaseModel]] = {
    "Rental": calculate_metrics,
    "Wholesale": calculate_wholesale_metrics,
    "Subject-To": calculate_subject_to_metrics,
    "Seller Financing": calculate_seller_financing_metrics,
    "BRRRR": calculate_brrrr_metrics,
}


def recalculate(analysis: DealAnalysis) -> BaseModel:
    """
    Run the calculator matching the analysis strategy.

    Args:
        analysis: Strategy-tagged inputs

    Returns:
        The strategy's calculations record
    """
    calculator = CALCULATORS[analysis.strategy]
    logger.debug(f"Recalculating {analysis.strategy} analysis")
    return calculator(analysis.inputs)
