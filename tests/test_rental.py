"""
Tests for buy-and-hold rental metrics.
"""

import pytest

from deal_analyzer.calculations.amortization import calculate_payment
from deal_analyzer.calculations.rental import SELLER_CREDIT_FIELDS, calculate_metrics
from tests.fixtures.deals import rental_financials


class TestRentalAcquisition:
    def test_loan_and_down_payment(self, financials):
        metrics = calculate_metrics(financials)

        assert metrics.down_payment_amount == 40000
        assert metrics.loan_amount == 160000
        assert metrics.total_investment == 200000

    def test_cash_to_close_without_fees(self, financials):
        metrics = calculate_metrics(financials)
        assert metrics.total_closing_costs == 0
        assert metrics.total_cash_to_close == 40000

    def test_closing_costs_include_origination(self):
        financials = rental_financials(
            origination_fee_percent=1,
            closing_fee=500,
            title_fee=1200,
            attorney_fee=800,
        )
        metrics = calculate_metrics(financials)

        # 1% of 160000 plus 2500 of flat fees
        assert metrics.total_closing_costs == pytest.approx(4100)
        assert metrics.total_cash_to_close == pytest.approx(44100)

    def test_seller_credits_reduce_cash_to_close(self):
        financials = rental_financials(
            rehab_cost=10000,
            seller_credit_tax=1000,
            seller_credit_closing=2000,
            seller_credit_rents=500,
            seller_credit_security_deposit=500,
        )
        metrics = calculate_metrics(financials)

        assert metrics.total_cash_to_close == pytest.approx(40000 + 10000 - 4000)
        assert metrics.total_investment == 210000


class TestRentalOperations:
    def test_income_and_expenses(self, financials):
        metrics = calculate_metrics(financials)

        assert metrics.gross_annual_rent == 24000
        assert metrics.vacancy_loss == pytest.approx(1200)
        assert metrics.effective_gross_income == pytest.approx(22800)
        # Monthly allowances: 5% maintenance, 10% management, 5% capex of 2000
        assert metrics.maintenance_cost == pytest.approx(100)
        assert metrics.management_cost == pytest.approx(200)
        assert metrics.capex_cost == pytest.approx(100)
        assert metrics.total_operating_expenses == pytest.approx(400)
        assert metrics.net_operating_income == pytest.approx(1500)

    def test_multi_unit_rents_are_summed(self):
        financials = rental_financials(monthly_rents=[1000, 1200, None])
        metrics = calculate_metrics(financials)

        assert financials.unit_count == 3
        assert metrics.gross_annual_rent == 26400

    def test_fixed_costs_are_monthly(self):
        financials = rental_financials(
            monthly_taxes=250,
            monthly_insurance=100,
            monthly_water_sewer=60,
            monthly_gas=40,
            monthly_hoa_fee=50,
        )
        metrics = calculate_metrics(financials)
        assert metrics.total_operating_expenses == pytest.approx(400 + 500)

    def test_other_income_counts_toward_gross(self):
        financials = rental_financials(other_monthly_income=100)
        metrics = calculate_metrics(financials)

        # Rent total excludes other income, vacancy does not
        assert metrics.gross_annual_rent == 24000
        assert metrics.vacancy_loss == pytest.approx(2100 * 12 * 0.05)


class TestRentalReturns:
    def test_debt_service(self, financials):
        metrics = calculate_metrics(financials)
        assert metrics.monthly_debt_service == pytest.approx(959.28, abs=0.01)

    def test_cap_rates(self, financials):
        metrics = calculate_metrics(financials)
        assert metrics.cap_rate == pytest.approx(9.0)
        assert metrics.all_in_cap_rate == pytest.approx(9.0)

    def test_cash_flow_and_cash_on_cash(self, financials):
        metrics = calculate_metrics(financials)
        payment = calculate_payment(160000, 6, 360)

        assert metrics.monthly_cash_flow_no_debt == pytest.approx(1500)
        assert metrics.monthly_cash_flow_with_debt == pytest.approx(1500 - payment)
        assert metrics.cash_on_cash_return == pytest.approx(
            (1500 - payment) * 12 / 40000 * 100
        )

    def test_dscr(self, financials):
        metrics = calculate_metrics(financials)
        payment = calculate_payment(160000, 6, 360)
        assert metrics.dscr == pytest.approx(18000 / (payment * 12))

    def test_zero_rate_loan_has_no_debt_service(self):
        metrics = calculate_metrics(rental_financials(loan_interest_rate=0))

        assert metrics.monthly_debt_service == 0
        assert metrics.dscr == 0
        assert metrics.monthly_cash_flow_with_debt == pytest.approx(1500)

    def test_all_cash_purchase(self):
        metrics = calculate_metrics(rental_financials(down_payment_percent=100))

        assert metrics.loan_amount == 0
        assert metrics.monthly_debt_service == 0
        assert metrics.cash_on_cash_return == pytest.approx(1500 * 12 / 200000 * 100)

    def test_empty_deal_reports_zero_ratios(self):
        metrics = calculate_metrics(rental_financials(purchase_price=0, monthly_rents=[]))

        assert metrics.cap_rate == 0
        assert metrics.all_in_cap_rate == 0
        assert metrics.cash_on_cash_return == 0
        assert metrics.dscr == 0


class TestRentalInvariants:
    def test_same_inputs_same_metrics(self, financials):
        assert calculate_metrics(financials) == calculate_metrics(financials)

    @pytest.mark.parametrize(
        "overrides",
        [
            {},
            {"rehab_cost": 15000},
            {"origination_fee_percent": 1.5, "appraisal_fee": 600, "closing_misc_fee": 250},
            {"seller_credit_sewer": 800, "seller_credit_origination": 1200},
            {
                "down_payment_percent": 25,
                "rehab_cost": 8000,
                "processing_fee": 400,
                "broker_agent_fee": 3000,
                "home_warranty_fee": 500,
                "seller_credit_closing": 2500,
                "seller_credit_misc": 300,
            },
        ],
    )
    def test_cash_to_close_identity(self, overrides):
        financials = rental_financials(**overrides)
        metrics = calculate_metrics(financials)
        seller_credits = sum(
            getattr(financials, name) for name in SELLER_CREDIT_FIELDS
        )

        assert metrics.total_cash_to_close == pytest.approx(
            metrics.down_payment_amount
            + financials.rehab_cost
            + metrics.total_closing_costs
            - seller_credits
        )
