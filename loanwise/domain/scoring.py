"""Health scoring engine - heuristic score and risk alerts for a financial profile"""

from typing import List
from loanwise.domain.models import FinancialProfile, HealthScore, RiskAlert
from loanwise.domain.metrics import (
    debt_to_income_ratio,
    emergency_fund_months,
    monthly_surplus,
    total_income,
)

BASE_SCORE = 50
HIGH_INTEREST_THRESHOLD = 15.0  # annual %


def grade_for_score(score: int) -> tuple[str, str]:
    """
    Map a 0-100 score to its grade band and display color.

    Bands:
    - 80+:   Excellent
    - 60-79: Good
    - 40-59: Fair
    - 20-39: Poor
    - <20:   Critical

    Returns: (grade, color)
    """
    if score >= 80:
        return "Excellent", "hsl(152 60% 45%)"
    elif score >= 60:
        return "Good", "hsl(174 72% 46%)"
    elif score >= 40:
        return "Fair", "hsl(45 90% 55%)"
    elif score >= 20:
        return "Poor", "hsl(25 80% 50%)"
    else:
        return "Critical", "hsl(0 72% 55%)"


def calculate_health_score(profile: FinancialProfile) -> HealthScore:
    """
    Additive heuristic score from a base of 50, clamped to [0, 100].

    Adjustments:
    - DTI:            <20% +20, <35% +10, <50% -10, else -30
    - Emergency fund: >=6 months +15, >=3 +5, >=1 -5, else -20
    - Savings rate:   >=20% +15, >=10% +5, >=0% -5, else -15
                      (only when there is income)

    Band boundaries and deltas are hand-tuned, not fitted; keep them exact.
    """
    score = BASE_SCORE

    dti = debt_to_income_ratio(profile)
    if dti < 20:
        score += 20
    elif dti < 35:
        score += 10
    elif dti < 50:
        score -= 10
    else:
        score -= 30

    ef_months = emergency_fund_months(profile)
    if ef_months >= 6:
        score += 15
    elif ef_months >= 3:
        score += 5
    elif ef_months >= 1:
        score -= 5
    else:
        score -= 20

    income = total_income(profile)
    if income > 0:
        savings_rate = monthly_surplus(profile) / income * 100
        if savings_rate >= 20:
            score += 15
        elif savings_rate >= 10:
            score += 5
        elif savings_rate >= 0:
            score -= 5
        else:
            score -= 15

    score = max(0, min(100, score))
    grade, color = grade_for_score(score)

    return HealthScore(score=score, grade=grade, color=color)


def generate_risk_alerts(profile: FinancialProfile) -> List[RiskAlert]:
    """
    Evaluate independent alert rules in display order.

    Order: debt load, emergency fund, cash flow, high-interest loans.
    When no rule fires a single informational alert is returned.
    """
    alerts: List[RiskAlert] = []
    dti = debt_to_income_ratio(profile)
    ef_months = emergency_fund_months(profile)
    surplus = monthly_surplus(profile)

    if dti > 50:
        alerts.append(RiskAlert(
            severity="critical",
            title="Extreme Debt Load",
            message=f"Your EMIs consume {dti:.0f}% of income. Immediate action needed.",
        ))
    elif dti > 35:
        alerts.append(RiskAlert(
            severity="warning",
            title="High Debt-to-Income",
            message=f"DTI at {dti:.0f}%. Consider reducing debt load.",
        ))

    if ef_months < 1:
        alerts.append(RiskAlert(
            severity="critical",
            title="No Emergency Fund",
            message="Less than 1 month of expenses saved. Build emergency reserves urgently.",
        ))
    elif ef_months < 3:
        alerts.append(RiskAlert(
            severity="warning",
            title="Low Emergency Fund",
            message=f"Only {ef_months:.1f} months of buffer. Target 6 months.",
        ))

    if surplus < 0:
        alerts.append(RiskAlert(
            severity="critical",
            title="Negative Cash Flow",
            message=f"You're spending ₹{abs(surplus):,.0f} more than you earn monthly.",
        ))

    high_rate_count = sum(1 for loan in profile.loans if loan.interest_rate > HIGH_INTEREST_THRESHOLD)
    if high_rate_count > 0:
        noun = "loan" if high_rate_count == 1 else "loans"
        alerts.append(RiskAlert(
            severity="warning",
            title="High Interest Loans",
            message=f"{high_rate_count} {noun} above 15% interest. Prioritize repayment.",
        ))

    if not alerts:
        alerts.append(RiskAlert(
            severity="info",
            title="Looking Good",
            message="No critical financial risks detected. Keep it up!",
        ))

    return alerts
