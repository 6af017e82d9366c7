"""Financial context snapshot handed to the LLM gateway"""

from typing import Any, Dict
from loanwise.domain.models import FinancialProfile
from loanwise.domain.metrics import (
    debt_to_income_ratio,
    emergency_fund_months,
    emi_burden_percent,
    monthly_surplus,
    total_emi,
    total_income,
    total_outstanding,
)


def build_financial_context(profile: FinancialProfile) -> Dict[str, Any]:
    """
    Project a profile into the JSON document the advisor prompts embed.

    Keys and ordering are fixed so identical profiles always serialize
    identically. Ratios are pre-formatted strings, matching what the
    advisor sees on the dashboard.
    """
    return {
        "monthlyIncome": total_income(profile),
        "totalEMI": total_emi(profile),
        "totalOutstanding": total_outstanding(profile),
        "debtToIncome": f"{debt_to_income_ratio(profile):.1f}%",
        "emiBurden": f"{emi_burden_percent(profile):.1f}%",
        "emergencyFundMonths": f"{emergency_fund_months(profile):.1f}",
        "monthlySurplus": monthly_surplus(profile),
        "loans": [
            {
                "name": loan.name,
                "type": loan.loan_type,
                "outstanding": loan.outstanding,
                "rate": loan.interest_rate,
                "emi": loan.emi,
                "tenure": loan.tenure_months,
            }
            for loan in profile.loans
        ],
        "liquidSavings": profile.liquid_savings,
        "investments": profile.investments,
        "fixedExpenses": profile.fixed_expenses,
        "variableExpenses": profile.variable_expenses,
    }
