"""
BRRRR Calculations

Buy, Rehab, Rent, Refinance, Repeat. The deal is modelled in four phases:

1. Acquisition: purchase closing costs, rehab line items, holding costs
2. Initial financing: points, lender charges and interest during the rehab
3. Refinance: new loan at a target LTV of ARV, and the cash left in (or
   pulled out of) the deal
4. Post-refinance operations: monthly cash flow on the new loan

ROI is annual post-refinance cash flow over the cash left in the deal. When
the refinance returns all of the investor's cash (or more), ROI is infinite.
"""

from dataclasses import dataclass

from deal_analyzer.calculations.amortization import (
    calculate_fixed_payment,
    calculate_interest_only_payment,
)
from deal_analyzer.calculations.totals import pick_amounts, sum_amounts
from deal_analyzer.schemas.brrrr import (
    BrrrrBreakdown,
    BrrrrCalculations,
    BrrrrExpenseBreakdown,
    BrrrrInputs,
    BrrrrRevenueBreakdown,
)

DEFAULT_REFINANCE_LTV = 75.0
REFINANCE_AMORTIZATION_MONTHS = 30 * 12

UTILITY_FIELDS = (
    "monthly_water_sewer",
    "monthly_street_lights",
    "monthly_gas",
    "monthly_electric",
    "monthly_landscaping",
)

FIXED_EXPENSE_FIELDS = (
    "monthly_taxes",
    "monthly_insurance",
    "monthly_hoa",
) + UTILITY_FIELDS + ("monthly_misc_fees",)


@dataclass
class AcquisitionCosts:
    """Phase 1 totals."""

    total_purchase_closing_costs: float
    total_rehab_cost: float
    total_holding_costs: float


@dataclass
class InitialFinancingCosts:
    """Phase 2 totals for the acquisition/rehab loan."""

    initial_loan_amount: float
    total_initial_loan_interest: float
    initial_loan_points_amount: float
    other_lender_charges: float

    @property
    def total(self) -> float:
        return (
            self.initial_loan_points_amount
            + self.other_lender_charges
            + self.total_initial_loan_interest
        )


def calculate_acquisition_costs(inputs: BrrrrInputs) -> AcquisitionCosts:
    rehab = inputs.rehab_costs
    total_rehab_cost = (
        sum_amounts(rehab.exterior)
        + sum_amounts(rehab.interior)
        + sum_amounts(rehab.general)
    )
    return AcquisitionCosts(
        total_purchase_closing_costs=sum_amounts(inputs.purchase_costs),
        total_rehab_cost=total_rehab_cost,
        total_holding_costs=inputs.holding_costs_monthly
        * inputs.financing.rehab_timeline_months,
    )


def calculate_initial_financing_costs(inputs: BrrrrInputs) -> InitialFinancingCosts:
    """
    Cost of carrying the acquisition loan through the rehab.

    Interest-only and amortizing loans both accrue simple interest on the
    full loan amount for the rehab timeline. Lender charges apply even to
    all-cash purchases; points and interest do not.
    """
    financing = inputs.financing
    costs = InitialFinancingCosts(
        initial_loan_amount=0.0,
        total_initial_loan_interest=0.0,
        initial_loan_points_amount=0.0,
        other_lender_charges=financing.other_charges,
    )

    if not financing.is_cash:
        costs.initial_loan_amount = financing.loan_amount
        monthly_interest = calculate_interest_only_payment(
            financing.loan_amount, financing.interest_rate
        )
        costs.total_initial_loan_interest = (
            monthly_interest * financing.rehab_timeline_months
        )
        costs.initial_loan_points_amount = financing.loan_amount * (
            financing.points / 100
        )

    return costs


def calculate_refinance_loan_amount(inputs: BrrrrInputs) -> float:
    loan_ltv = inputs.refinance.loan_ltv
    if loan_ltv is None:
        loan_ltv = DEFAULT_REFINANCE_LTV
    return inputs.arv * (loan_ltv / 100)


def calculate_brrrr_metrics(inputs: BrrrrInputs) -> BrrrrCalculations:
    """
    Calculate BRRRR project cost, refinance outcome and post-refi returns.

    Args:
        inputs: Purchase, rehab, financing, refinance and operating inputs

    Returns:
        BrrrrCalculations. ``cash_out_amount`` is the negative of
        ``cash_left_in_deal``.
    """
    # Phase 1: acquisition
    acquisition = calculate_acquisition_costs(inputs)

    # Phase 2: initial financing
    financing_costs = calculate_initial_financing_costs(inputs)
    total_financing_costs = financing_costs.total

    total_project_cost = (
        inputs.purchase_price
        + acquisition.total_rehab_cost
        + acquisition.total_purchase_closing_costs
        + acquisition.total_holding_costs
        + total_financing_costs
    )

    # Phase 3: refinance
    refinance_loan_amount = calculate_refinance_loan_amount(inputs)
    refi_closing_costs = inputs.refinance.closing_costs
    net_refi_proceeds = refinance_loan_amount - refi_closing_costs
    cash_left_in_deal = total_project_cost - net_refi_proceeds

    # Phase 4: post-refinance operations
    refi_monthly_payment = calculate_fixed_payment(
        refinance_loan_amount,
        inputs.refinance.interest_rate,
        REFINANCE_AMORTIZATION_MONTHS,
    )

    expenses = inputs.expenses
    gross_monthly_income = inputs.monthly_rent + expenses.other_monthly_income

    # Vacancy applies to rent only, not other income
    vacancy_loss = inputs.monthly_rent * (expenses.vacancy_rate / 100)
    effective_income = gross_monthly_income - vacancy_loss

    maintenance_cost = gross_monthly_income * (expenses.maintenance_rate / 100)
    capex_cost = gross_monthly_income * (expenses.capex_rate / 100)
    management_cost = gross_monthly_income * (expenses.management_rate / 100)

    total_fixed_expenses = sum_amounts(pick_amounts(expenses, FIXED_EXPENSE_FIELDS))
    total_monthly_expenses = (
        total_fixed_expenses + maintenance_cost + capex_cost + management_cost
    )

    monthly_cash_flow_post_refi = (
        effective_income - total_monthly_expenses - refi_monthly_payment
    )

    # ROI
    annual_cash_flow = monthly_cash_flow_post_refi * 12
    if cash_left_in_deal <= 0:
        roi = float("inf")
        is_infinite_return = True
    else:
        roi = (annual_cash_flow / cash_left_in_deal) * 100
        is_infinite_return = False

    breakdown = BrrrrBreakdown(
        revenue=BrrrrRevenueBreakdown(
            gross_rent=inputs.monthly_rent,
            other_income=expenses.other_monthly_income,
            vacancy_loss=vacancy_loss,
            effective_income=effective_income,
        ),
        expenses=BrrrrExpenseBreakdown(
            property_taxes=expenses.monthly_taxes,
            insurance=expenses.monthly_insurance,
            hoa=expenses.monthly_hoa,
            utilities=sum_amounts(pick_amounts(expenses, UTILITY_FIELDS)),
            repairs_maintenance=maintenance_cost,
            capex=capex_cost,
            management=management_cost,
            debt_service=refi_monthly_payment,
            misc=expenses.monthly_misc_fees,
            total_operating_expenses=total_monthly_expenses,
            total_expenses=total_monthly_expenses + refi_monthly_payment,
        ),
    )

    return BrrrrCalculations(
        total_project_cost=total_project_cost,
        total_rehab_cost=acquisition.total_rehab_cost,
        total_purchase_closing_costs=acquisition.total_purchase_closing_costs,
        total_holding_costs=acquisition.total_holding_costs,
        total_financing_costs=total_financing_costs,
        refinance_loan_amount=refinance_loan_amount,
        refi_closing_costs=refi_closing_costs,
        net_refi_proceeds=net_refi_proceeds,
        cash_out_amount=-cash_left_in_deal,
        cash_left_in_deal=cash_left_in_deal,
        roi=roi,
        monthly_cash_flow_post_refi=monthly_cash_flow_post_refi,
        monthly_revenue=effective_income,
        monthly_expenses=total_monthly_expenses + refi_monthly_payment,
        breakdown=breakdown,
        is_infinite_return=is_infinite_return,
    )
