"""
Rental Calculations

Buy-and-hold metrics for a financed rental: cash to close, debt service,
NOI, cap rates, cash-on-cash return and DSCR.

Ratios whose denominator is zero or negative are reported as 0, which
callers must read as "not applicable" rather than "no return".
"""

from deal_analyzer.calculations.amortization import calculate_dscr, calculate_payment
from deal_analyzer.calculations.totals import pick_amounts, sum_amounts
from deal_analyzer.schemas.rental import CalculatedMetrics, Financials

CLOSING_FEE_FIELDS = (
    "closing_fee",
    "processing_fee",
    "appraisal_fee",
    "title_fee",
    "broker_agent_fee",
    "home_warranty_fee",
    "attorney_fee",
    "closing_misc_fee",
)

SELLER_CREDIT_FIELDS = (
    "seller_credit_tax",
    "seller_credit_sewer",
    "seller_credit_origination",
    "seller_credit_closing",
    "seller_credit_rents",
    "seller_credit_security_deposit",
    "seller_credit_misc",
)

UTILITY_FIELDS = (
    "monthly_water_sewer",
    "monthly_street_lights",
    "monthly_gas",
    "monthly_electric",
    "monthly_landscaping",
)


def calculate_monthly_debt_service(financials: Financials, loan_amount: float) -> float:
    """
    Monthly P&I on the purchase loan.

    A loan with a 0% rate is reported as having no payment at all.
    """
    if loan_amount > 0 and financials.loan_interest_rate > 0:
        return calculate_payment(
            loan_amount,
            financials.loan_interest_rate,
            financials.loan_term_years * 12,
        )
    return 0.0


def calculate_metrics(financials: Financials) -> CalculatedMetrics:
    """
    Calculate rental investment metrics from deal financials.

    Args:
        financials: Purchase, operating and financing inputs

    Returns:
        CalculatedMetrics (income/expense figures monthly, rent and
        income totals annual)
    """
    f = financials

    # Acquisition
    down_payment_amount = f.purchase_price * (f.down_payment_percent / 100)
    loan_amount = f.purchase_price - down_payment_amount

    origination_fee_amount = loan_amount * (f.origination_fee_percent / 100)
    other_closing_fees = sum_amounts(pick_amounts(f, CLOSING_FEE_FIELDS))
    total_closing_costs = other_closing_fees + origination_fee_amount

    total_seller_credits = sum_amounts(pick_amounts(f, SELLER_CREDIT_FIELDS))
    total_cash_to_close = (
        down_payment_amount + f.rehab_cost + total_closing_costs - total_seller_credits
    )
    total_investment = f.purchase_price + f.rehab_cost

    # Debt service
    monthly_debt_service = calculate_monthly_debt_service(f, loan_amount)
    annual_debt_service = monthly_debt_service * 12

    # Income
    total_monthly_rent = sum_amounts(f.monthly_rents)
    gross_annual_rent = total_monthly_rent * 12
    gross_monthly_income = total_monthly_rent + f.other_monthly_income
    gross_annual_income = gross_monthly_income * 12

    vacancy_loss = gross_annual_income * (f.vacancy_rate / 100)
    effective_gross_income = gross_annual_income - vacancy_loss

    # Operating expenses (annual)
    maintenance_cost = gross_annual_income * (f.maintenance_rate / 100)
    management_cost = gross_annual_income * (f.management_rate / 100)
    capex_cost = gross_annual_income * (f.capex_rate / 100)
    annual_utilities = sum_amounts(pick_amounts(f, UTILITY_FIELDS)) * 12
    total_operating_expenses_annual = sum_amounts(
        [
            maintenance_cost,
            management_cost,
            capex_cost,
            f.monthly_taxes * 12,
            f.monthly_insurance * 12,
            annual_utilities,
            f.monthly_hoa_fee * 12,
            f.operating_misc_fee * 12,
        ]
    )

    net_operating_income_annual = effective_gross_income - total_operating_expenses_annual

    monthly_cash_flow_no_debt = net_operating_income_annual / 12
    monthly_cash_flow_with_debt = monthly_cash_flow_no_debt - monthly_debt_service

    # Ratios
    cap_rate = (
        (net_operating_income_annual / f.purchase_price) * 100
        if f.purchase_price > 0
        else 0.0
    )
    all_in_cap_rate = (
        (net_operating_income_annual / total_investment) * 100
        if total_investment > 0
        else 0.0
    )
    cash_on_cash_return = (
        ((monthly_cash_flow_with_debt * 12) / total_cash_to_close) * 100
        if total_cash_to_close > 0
        else 0.0
    )
    dscr = calculate_dscr(net_operating_income_annual, annual_debt_service)

    return CalculatedMetrics(
        down_payment_amount=down_payment_amount,
        total_cash_to_close=total_cash_to_close,
        total_investment=total_investment,
        loan_amount=loan_amount,
        monthly_debt_service=monthly_debt_service,
        gross_annual_rent=gross_annual_rent,
        vacancy_loss=vacancy_loss,
        effective_gross_income=effective_gross_income,
        maintenance_cost=maintenance_cost / 12,
        management_cost=management_cost / 12,
        capex_cost=capex_cost / 12,
        total_operating_expenses=total_operating_expenses_annual / 12,
        net_operating_income=net_operating_income_annual / 12,
        cap_rate=cap_rate,
        all_in_cap_rate=all_in_cap_rate,
        cash_on_cash_return=cash_on_cash_return,
        monthly_cash_flow_no_debt=monthly_cash_flow_no_debt,
        monthly_cash_flow_with_debt=monthly_cash_flow_with_debt,
        total_closing_costs=total_closing_costs,
        dscr=dscr,
    )
