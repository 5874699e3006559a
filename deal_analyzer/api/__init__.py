"""
API routes for the deal calculators.
"""

from fastapi import APIRouter

from deal_analyzer.api import calculations

router = APIRouter()

router.include_router(calculations.router, prefix="/calculate", tags=["calculations"])
