"""Aggregate accessors - monthly totals and ratios derived from a profile"""

from loanwise.domain.models import FinancialProfile

# Returned when monthly outflow is zero: effectively unlimited runway
NO_OUTFLOW_SENTINEL = 99.0


def total_income(profile: FinancialProfile) -> float:
    return profile.monthly_income + profile.other_income


def total_expenses(profile: FinancialProfile) -> float:
    return profile.fixed_expenses + profile.variable_expenses


def total_emi(profile: FinancialProfile) -> float:
    """Sum of stored EMIs (the stored value is authoritative, not recomputed)"""
    return sum(loan.emi for loan in profile.loans)


def total_outstanding(profile: FinancialProfile) -> float:
    return sum(loan.outstanding for loan in profile.loans)


def debt_to_income_ratio(profile: FinancialProfile) -> float:
    """EMI as a percentage of income, 0 when there is no income"""
    income = total_income(profile)
    if income == 0:
        return 0.0
    return total_emi(profile) / income * 100


def emi_burden_percent(profile: FinancialProfile) -> float:
    """EMI as a percentage of income, 0 when there is no income"""
    income = total_income(profile)
    if income == 0:
        return 0.0
    return total_emi(profile) / income * 100


def monthly_surplus(profile: FinancialProfile) -> float:
    """Income left after expenses and EMIs; negative means a structural deficit"""
    return total_income(profile) - total_expenses(profile) - total_emi(profile)


def monthly_need(profile: FinancialProfile) -> float:
    return total_expenses(profile) + total_emi(profile)


def emergency_fund_months(profile: FinancialProfile) -> float:
    """Months of expenses and EMIs covered by liquid savings"""
    need = monthly_need(profile)
    if need == 0:
        return NO_OUTFLOW_SENTINEL
    return profile.liquid_savings / need


def liquidity_ratio(profile: FinancialProfile) -> float:
    """Savings plus investments against a six month reserve target"""
    need = monthly_need(profile)
    if need == 0:
        return NO_OUTFLOW_SENTINEL
    return (profile.liquid_savings + profile.investments) / (need * 6)
