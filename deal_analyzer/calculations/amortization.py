"""
Loan Payment Calculations

Implements fixed-rate loan payment, interest-only payment, remaining balance
and DSCR calculations. Interest rates are whole-number annual percents
(e.g., 6 for 6%), matching the deal inputs entered by users.
"""


def monthly_rate_from_percent(annual_rate: float) -> float:
    """Convert an annual percent rate to a monthly decimal rate."""
    return (annual_rate / 100) / 12


def calculate_payment(
    principal: float, annual_rate: float, amortization_months: float
) -> float:
    """
    Calculate monthly loan payment.

    Standard fixed-rate mortgage formula: P * r * (1+r)^n / ((1+r)^n - 1).

    Args:
        principal: Loan principal amount
        annual_rate: Annual interest rate in percent (e.g., 6 for 6%)
        amortization_months: Total amortization period in months

    Returns:
        Monthly payment amount (positive number). A zero rate repays
        principal in equal installments.
    """
    if principal <= 0:
        return 0.0
    if amortization_months <= 0:
        return 0.0

    monthly_rate = monthly_rate_from_percent(annual_rate)

    if monthly_rate == 0:
        return principal / amortization_months

    payment = (
        principal
        * monthly_rate
        * ((1 + monthly_rate) ** amortization_months)
        / (((1 + monthly_rate) ** amortization_months) - 1)
    )

    return payment


# Same formula as calculate_payment, grouped as P * (r * g) / (g - 1). The
# BRRRR refinance and the hold projections call this one because they treat
# a 0% loan as having no payment.
def calculate_fixed_payment(
    principal: float, annual_rate: float, amortization_months: float
) -> float:
    """
    Monthly payment on a fixed-rate loan, or 0 when the rate or term is 0.
    """
    if amortization_months <= 0:
        return 0.0

    monthly_rate = monthly_rate_from_percent(annual_rate)
    if monthly_rate == 0:
        return 0.0

    growth = (1 + monthly_rate) ** amortization_months
    return principal * (monthly_rate * growth) / (growth - 1)


def calculate_interest_only_payment(principal: float, annual_rate: float) -> float:
    """Monthly interest on a balance at an annual percent rate."""
    return (principal * (annual_rate / 100)) / 12


def calculate_remaining_balance(
    monthly_payment: float,
    annual_rate: float,
    remaining_payments: float,
) -> float:
    """
    Calculate loan balance given the payments still to be made.

    Present value of the remaining payments at the loan rate.
    """
    if remaining_payments <= 0:
        return 0.0

    monthly_rate = monthly_rate_from_percent(annual_rate)

    if monthly_rate == 0:
        return monthly_payment * remaining_payments

    balance = (monthly_payment / monthly_rate) * (
        1 - (1 + monthly_rate) ** -remaining_payments
    )

    return max(0.0, balance)


def calculate_dscr(noi: float, debt_service: float) -> float:
    """
    Calculate Debt Service Coverage Ratio (DSCR).

    Args:
        noi: Net Operating Income for the period
        debt_service: Debt service for the period

    Returns:
        DSCR ratio, or 0 when there is no debt service (not applicable)
    """
    if debt_service <= 0:
        return 0.0
    return noi / debt_service
