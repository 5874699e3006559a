"""
Sample deal inputs shared by the calculator and API tests.

Each builder returns a fresh inputs record; keyword overrides replace
top-level fields.
"""

from deal_analyzer.schemas import (
    BrrrrInputs,
    Financials,
    SellerFinancingInputs,
    SubjectToInputs,
    WholesaleInputs,
)


def rental_financials(**overrides) -> Financials:
    data = dict(
        list_price=210000,
        estimated_value=215000,
        purchase_price=200000,
        rehab_cost=0,
        down_payment_percent=20,
        monthly_rents=[2000],
        vacancy_rate=5,
        maintenance_rate=5,
        management_rate=10,
        capex_rate=5,
        loan_interest_rate=6,
        loan_term_years=30,
    )
    data.update(overrides)
    return Financials(**data)


def wholesale_inputs(**overrides) -> WholesaleInputs:
    data = dict(
        arv=200000,
        mao_percent_of_arv=70,
        estimated_rehab=30000,
        closing_cost=5000,
        wholesale_fee_goal=10000,
        seller_ask=80000,
    )
    data.update(overrides)
    return WholesaleInputs(**data)


def subject_to_inputs(**overrides) -> SubjectToInputs:
    data = dict(
        market_rent=1500,
        monthly_piti=1000,
        reinstatement_needed=5000,
        seller_cash_needed=2000,
        closing_costs=1000,
    )
    data.update(overrides)
    return SubjectToInputs(**data)


def seller_financing_inputs(**overrides) -> SellerFinancingInputs:
    data = dict(
        purchase_price=120000,
        down_payment=20000,
        seller_loan_rate=6,
        loan_term=30,
        payment_type="Amortization",
        market_rent=1200,
    )
    data.update(overrides)
    return SellerFinancingInputs(**data)


def brrrr_inputs(**overrides) -> BrrrrInputs:
    data = dict(
        purchase_price=100000,
        arv=200000,
        purchase_costs={"titleEscrowFees": 2000, "attorneyFees": 1000},
        rehab_costs={
            "exterior": {"roof": 10000},
            "interior": {"flooring": 5000, "painting": 3000},
            "general": {"permits": 2000},
        },
        financing={
            "is_cash": False,
            "loan_amount": 80000,
            "interest_rate": 12,
            "points": 2,
            "other_charges": 500,
            "interest_only": True,
            "rehab_timeline_months": 6,
        },
        refinance={"interest_rate": 6, "closing_costs": 3000},
        expenses={
            "monthly_taxes": 200,
            "monthly_insurance": 100,
            "vacancy_rate": 5,
            "maintenance_rate": 5,
            "capex_rate": 5,
            "management_rate": 8,
        },
        monthly_rent=1600,
        holding_costs_monthly=500,
    )
    data.update(overrides)
    return BrrrrInputs(**data)
