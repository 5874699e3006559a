"""
Tests for 30-year hold projections.
"""

import pytest

from deal_analyzer.calculations.amortization import calculate_payment
from deal_analyzer.calculations.projections import (
    calculate_initial_monthly_expenses,
    calculate_projections,
    round_half_up,
)
from deal_analyzer.schemas import ProjectionAssumptions
from tests.fixtures.deals import rental_financials


@pytest.fixture
def assumptions():
    return ProjectionAssumptions()


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(-2.5) == -2
    assert round_half_up(1234.49) == 1234


def test_default_assumptions():
    assumptions = ProjectionAssumptions()
    assert assumptions.appreciation_rate == 3
    assert assumptions.income_growth_rate == 3
    assert assumptions.expense_growth_rate == 2


def test_initial_monthly_expenses(financials):
    # 25% of 2000 in allowances, no fixed costs
    assert calculate_initial_monthly_expenses(financials, 24000) == pytest.approx(500)


def test_thirty_years(financials, assumptions):
    years = calculate_projections(financials, assumptions)

    assert len(years) == 30
    assert [y.year for y in years] == list(range(1, 31))


def test_year_one(financials, assumptions):
    year1 = calculate_projections(financials, assumptions)[0]
    payment = calculate_payment(160000, 6, 360)

    assert year1.property_value == 206000
    assert year1.gross_income == 24000
    assert year1.operating_expenses == 6000
    assert year1.net_operating_income == 18000
    assert year1.debt_service == round_half_up(payment * 12)
    assert year1.loan_balance == pytest.approx(158035, abs=1)
    assert abs(year1.equity - (year1.property_value - year1.loan_balance)) <= 1
    assert year1.cumulative_appreciation == 6000


def test_growth_starts_in_year_two(financials, assumptions):
    years = calculate_projections(financials, assumptions)

    assert years[1].gross_income == 24720
    assert years[1].operating_expenses == 6120


def test_loan_paid_off_at_term(financials, assumptions):
    final = calculate_projections(financials, assumptions)[-1]

    assert final.loan_balance == 0
    assert final.cumulative_principal_paydown == 160000


def test_total_return_components(financials, assumptions):
    for year in calculate_projections(financials, assumptions):
        components = (
            year.cumulative_cash_flow
            + year.cumulative_principal_paydown
            + year.cumulative_appreciation
        )
        assert abs(year.total_return - components) <= 2


def test_zero_rate_loan_pays_straight_line(assumptions):
    financials = rental_financials(loan_interest_rate=0)
    year1 = calculate_projections(financials, assumptions)[0]

    assert year1.debt_service == 5333
    assert year1.loan_balance == 154667


def test_zero_loan_term_has_no_payment(assumptions):
    financials = rental_financials(loan_term_years=0)
    years = calculate_projections(financials, assumptions)

    assert len(years) == 30
    assert all(y.debt_service == 0 for y in years)
    assert all(y.loan_balance == 0 for y in years)
    assert years[0].cash_flow == 18000


def test_all_cash_has_no_loan(assumptions):
    financials = rental_financials(down_payment_percent=100)
    years = calculate_projections(financials, assumptions)

    assert all(y.loan_balance == 0 for y in years)
    assert all(y.debt_service == 0 for y in years)
    assert years[0].cash_flow == 18000


def test_list_price_used_without_purchase_price(assumptions):
    financials = rental_financials(purchase_price=0)
    year1 = calculate_projections(financials, assumptions)[0]

    assert year1.property_value == 216300
    assert year1.loan_balance == 0


def test_custom_horizon(financials, assumptions):
    assert len(calculate_projections(financials, assumptions, years=10)) == 10
