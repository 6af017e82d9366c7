"""Domain models - immutable dataclasses representing the financial profile and derived values"""

from dataclasses import dataclass, field
from typing import Tuple

LOAN_TYPES = ("home", "car", "education", "personal", "credit_card", "other")


@dataclass(frozen=True)
class Loan:
    """Single loan as entered by the user"""

    id: str
    name: str
    loan_type: str  # one of LOAN_TYPES
    principal: float
    outstanding: float
    interest_rate: float  # annual %
    tenure_months: int
    emi: float
    lender: str = ""


@dataclass(frozen=True)
class FinancialProfile:
    """Monthly cash flow, reserves and loans of one user"""

    monthly_income: float
    other_income: float
    fixed_expenses: float
    variable_expenses: float
    liquid_savings: float
    investments: float
    loans: Tuple[Loan, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class HealthScore:
    """Composite 0-100 score with its grade band"""

    score: int
    grade: str  # Excellent | Good | Fair | Poor | Critical
    color: str


@dataclass(frozen=True)
class RiskAlert:
    """Threshold-triggered warning shown on the dashboard"""

    severity: str  # critical | warning | info
    title: str
    message: str


@dataclass(frozen=True)
class RepaymentPlan:
    """Priority assignment for one loan under a repayment strategy"""

    loan_id: str
    loan_name: str
    order: int
    months_to_payoff: int
    total_interest: float
    total_paid: float


@dataclass(frozen=True)
class ScenarioResult:
    """Metrics recomputed on a hypothetical copy of the profile"""

    label: str
    new_surplus: float
    new_dti: float
    new_health_score: HealthScore
    impact_description: str


SAMPLE_PROFILE = FinancialProfile(
    monthly_income=80000,
    other_income=5000,
    fixed_expenses=25000,
    variable_expenses=15000,
    liquid_savings=200000,
    investments=300000,
    loans=(
        Loan("1", "Home Loan", "home", 3000000, 2500000, 8.5, 240, 26036, "SBI"),
        Loan("2", "Car Loan", "car", 600000, 350000, 9.5, 48, 15066, "HDFC"),
        Loan("3", "Credit Card", "credit_card", 80000, 80000, 36, 12, 8133, "ICICI"),
    ),
)
