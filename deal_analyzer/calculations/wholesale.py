"""
Wholesale Calculations

Maximum allowable offer (MAO) and assignment fee for a wholesale deal.
"""

from deal_analyzer.schemas.wholesale import WholesaleCalculations, WholesaleInputs


def calculate_mao(inputs: WholesaleInputs) -> float:
    """
    Maximum allowable offer.

    ARV * MAO% less rehab, closing cost and the wholesaler's fee goal.
    """
    return (
        (inputs.arv * (inputs.mao_percent_of_arv / 100))
        - inputs.estimated_rehab
        - inputs.closing_cost
        - inputs.wholesale_fee_goal
    )


def calculate_wholesale_metrics(inputs: WholesaleInputs) -> WholesaleCalculations:
    mao = calculate_mao(inputs)
    potential_fees = mao - inputs.seller_ask
    return WholesaleCalculations(
        mao=mao,
        potential_fees=potential_fees,
        is_eligible=potential_fees > 0,
    )
