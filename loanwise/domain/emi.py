"""EMI (equated monthly installment) calculation for amortizing loans"""

from dataclasses import replace
from loanwise.domain.models import Loan

LOAN_TYPE_LABELS = {
    "home": "Home Loan",
    "car": "Car Loan",
    "education": "Education Loan",
    "personal": "Personal Loan",
    "credit_card": "Credit Card",
    "other": "Other",
}


def calculate_emi(principal: float, annual_rate: float, tenure_months: int) -> float:
    """
    Monthly installment for a reducing-balance loan.

    EMI = P * r * (1+r)^n / ((1+r)^n - 1), with r the monthly rate.
    A zero rate falls back to straight-line P / n, as does a rate so small
    that (1+r)^n rounds to exactly 1.0. When (1+r)^n overflows a float the
    installment converges to the interest-only payment P * r.

    tenure_months must be >= 1; zero raises ZeroDivisionError instead of
    yielding inf/nan.
    No rounding is applied.

    Example:
        calculate_emi(100000, 12, 12) -> 8884.88...
    """
    if annual_rate == 0:
        return principal / tenure_months

    r = annual_rate / 12 / 100
    try:
        growth = (1 + r) ** tenure_months
    except OverflowError:
        return principal * r
    if growth == 1:
        return principal / tenure_months
    return principal * r * (growth / (growth - 1))


def with_computed_emi(loan: Loan) -> Loan:
    """Copy of the loan with emi recomputed from outstanding, rate and tenure"""
    return replace(loan, emi=calculate_emi(loan.outstanding, loan.interest_rate, loan.tenure_months))


def loan_type_label(loan_type: str) -> str:
    return LOAN_TYPE_LABELS.get(loan_type, LOAN_TYPE_LABELS["other"])
