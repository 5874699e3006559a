"""
Long-term hold projection schemas.
"""

from deal_analyzer.schemas.base import CalculationResult, CamelModel, Percent


class ProjectionAssumptions(CamelModel):
    appreciation_rate: Percent = 3.0
    income_growth_rate: Percent = 3.0
    expense_growth_rate: Percent = 2.0


class ProjectionYear(CalculationResult):
    """One year of a hold projection, rounded to whole dollars."""

    year: int
    property_value: int
    loan_balance: int
    equity: int
    gross_income: int
    operating_expenses: int
    net_operating_income: int
    debt_service: int
    cash_flow: int
    cumulative_cash_flow: int
    cumulative_appreciation: int
    cumulative_principal_paydown: int
    # Cash flow + principal paydown + appreciation
    total_return: int
