"""
Wholesale (contract assignment) schemas.
"""

from deal_analyzer.schemas.base import Amount, CalculationResult, CamelModel, Percent


class WholesaleInputs(CamelModel):
    arv: Amount = 0.0
    estimated_rehab: Amount = 0.0
    mao_percent_of_arv: Percent = 0.0
    closing_cost: Amount = 0.0
    wholesale_fee_goal: Amount = 0.0
    seller_ask: Amount = 0.0
    is_assignable: bool = True


class WholesaleCalculations(CalculationResult):
    mao: float
    potential_fees: float
    is_eligible: bool
