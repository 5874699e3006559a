"""
Financial Calculation Engine

Pure calculators for real estate investment analysis, one per acquisition
strategy. Each takes an inputs record and returns a fresh calculations
record; none performs I/O or depends on another.
"""

from deal_analyzer.calculations import (
    amortization,
    brrrr,
    dispatch,
    irr,
    projections,
    rental,
    seller_financing,
    subject_to,
    totals,
    wholesale,
)
from deal_analyzer.calculations.rental import calculate_metrics
from deal_analyzer.calculations.wholesale import calculate_wholesale_metrics
from deal_analyzer.calculations.subject_to import calculate_subject_to_metrics
from deal_analyzer.calculations.seller_financing import calculate_seller_financing_metrics
from deal_analyzer.calculations.brrrr import calculate_brrrr_metrics
from deal_analyzer.calculations.projections import calculate_projections
from deal_analyzer.calculations.dispatch import recalculate

__all__ = [
    "amortization",
    "brrrr",
    "dispatch",
    "irr",
    "projections",
    "rental",
    "seller_financing",
    "subject_to",
    "totals",
    "wholesale",
    "calculate_metrics",
    "calculate_wholesale_metrics",
    "calculate_subject_to_metrics",
    "calculate_seller_financing_metrics",
    "calculate_brrrr_metrics",
    "calculate_projections",
    "recalculate",
]
