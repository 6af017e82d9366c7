"""Pydantic schemas for API request/response validation"""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field, computed_field, field_validator

from loanwise.domain.emi import loan_type_label, with_computed_emi
from loanwise.domain.models import (
    LOAN_TYPES,
    FinancialProfile,
    HealthScore,
    Loan,
    RepaymentPlan,
    RiskAlert,
    ScenarioResult,
)

LoanType = Literal[LOAN_TYPES]

# 50 years
MAX_TENURE_MONTHS = 600


class LoanSchema(BaseModel):
    """Single loan; emi is computed from outstanding, rate and tenure when omitted"""

    id: str = Field(..., min_length=1, description="Stable loan identifier")
    name: str
    loan_type: LoanType = "personal"
    principal: float = Field(..., ge=0)
    outstanding: float = Field(..., ge=0)
    interest_rate: float = Field(..., ge=0, description="Annual interest rate in percent")
    tenure_months: int = Field(..., gt=0, le=MAX_TENURE_MONTHS)
    emi: Optional[float] = Field(None, ge=0)
    lender: str = ""

    def to_domain(self) -> Loan:
        loan = Loan(
            id=self.id,
            name=self.name,
            loan_type=self.loan_type,
            principal=self.principal,
            outstanding=self.outstanding,
            interest_rate=self.interest_rate,
            tenure_months=self.tenure_months,
            emi=self.emi if self.emi is not None else 0.0,
            lender=self.lender,
        )
        return loan if self.emi is not None else with_computed_emi(loan)

    @computed_field
    @property
    def type_label(self) -> str:
        return loan_type_label(self.loan_type)

    @classmethod
    def from_domain(cls, loan: Loan) -> "LoanSchema":
        return cls(
            id=loan.id,
            name=loan.name,
            loan_type=loan.loan_type,
            principal=loan.principal,
            outstanding=loan.outstanding,
            interest_rate=loan.interest_rate,
            tenure_months=loan.tenure_months,
            emi=loan.emi,
            lender=loan.lender,
        )


class ProfileSchema(BaseModel):
    """Complete financial profile submitted or returned as a whole"""

    monthly_income: float = Field(..., ge=0)
    other_income: float = Field(0.0, ge=0)
    fixed_expenses: float = Field(0.0, ge=0)
    variable_expenses: float = Field(0.0, ge=0)
    liquid_savings: float = Field(0.0, ge=0)
    investments: float = Field(0.0, ge=0)
    loans: List[LoanSchema] = []

    @field_validator("loans")
    @classmethod
    def loan_ids_unique(cls, loans: List[LoanSchema]) -> List[LoanSchema]:
        ids = [loan.id for loan in loans]
        if len(ids) != len(set(ids)):
            raise ValueError("loan ids must be unique")
        return loans

    def to_domain(self) -> FinancialProfile:
        return FinancialProfile(
            monthly_income=self.monthly_income,
            other_income=self.other_income,
            fixed_expenses=self.fixed_expenses,
            variable_expenses=self.variable_expenses,
            liquid_savings=self.liquid_savings,
            investments=self.investments,
            loans=tuple(loan.to_domain() for loan in self.loans),
        )

    @classmethod
    def from_domain(cls, profile: FinancialProfile) -> "ProfileSchema":
        return cls(
            monthly_income=profile.monthly_income,
            other_income=profile.other_income,
            fixed_expenses=profile.fixed_expenses,
            variable_expenses=profile.variable_expenses,
            liquid_savings=profile.liquid_savings,
            investments=profile.investments,
            loans=[LoanSchema.from_domain(loan) for loan in profile.loans],
        )


class ProfileResponse(BaseModel):
    """Response for GET/PUT /v1/profile/{user_id}"""

    user_id: str
    has_data: bool
    profile: ProfileSchema


class HealthScoreSchema(BaseModel):
    score: int
    grade: str
    color: str

    @classmethod
    def from_domain(cls, health: HealthScore) -> "HealthScoreSchema":
        return cls(score=health.score, grade=health.grade, color=health.color)


class RiskAlertSchema(BaseModel):
    severity: Literal["critical", "warning", "info"]
    title: str
    message: str

    @classmethod
    def from_domain(cls, alert: RiskAlert) -> "RiskAlertSchema":
        return cls(severity=alert.severity, title=alert.title, message=alert.message)


class MetricsSchema(BaseModel):
    """Aggregate monthly figures and ratios"""

    total_income: float
    total_expenses: float
    total_emi: float
    total_outstanding: float
    debt_to_income_ratio: float
    emi_burden_percent: float
    monthly_surplus: float
    emergency_fund_months: float
    liquidity_ratio: float


class DashboardResponse(BaseModel):
    """Response for GET /v1/profile/{user_id}/dashboard"""

    user_id: str
    has_data: bool
    metrics: MetricsSchema
    health_score: HealthScoreSchema
    alerts: List[RiskAlertSchema]


class RepaymentPlanSchema(BaseModel):
    loan_id: str
    loan_name: str
    order: int
    months_to_payoff: int
    total_interest: float
    total_paid: float

    @classmethod
    def from_domain(cls, plan: RepaymentPlan) -> "RepaymentPlanSchema":
        return cls(
            loan_id=plan.loan_id,
            loan_name=plan.loan_name,
            order=plan.order,
            months_to_payoff=plan.months_to_payoff,
            total_interest=plan.total_interest,
            total_paid=plan.total_paid,
        )


class StrategySchema(BaseModel):
    plans: List[RepaymentPlanSchema]
    total_interest: float


class RepaymentResponse(BaseModel):
    """Response for GET /v1/profile/{user_id}/repayment"""

    user_id: str
    avalanche: StrategySchema
    snowball: StrategySchema


class ScenarioSchema(BaseModel):
    scenario: str
    label: str
    new_surplus: float
    new_dti: float
    new_health_score: HealthScoreSchema
    impact_description: str

    @classmethod
    def from_domain(cls, scenario: str, result: ScenarioResult) -> "ScenarioSchema":
        return cls(
            scenario=scenario,
            label=result.label,
            new_surplus=result.new_surplus,
            new_dti=result.new_dti,
            new_health_score=HealthScoreSchema.from_domain(result.new_health_score),
            impact_description=result.impact_description,
        )


class ScenarioResponse(BaseModel):
    """Response for GET /v1/profile/{user_id}/scenarios[/{scenario}]"""

    user_id: str
    baseline_health_score: HealthScoreSchema
    scenarios: List[ScenarioSchema]


class ChatMessage(BaseModel):
    role: Literal["user", "assistant"]
    content: str = Field(..., min_length=1)


class ChatRequest(BaseModel):
    """Request body for POST /v1/advisor/{user_id}/chat"""

    messages: List[ChatMessage] = Field(..., min_length=1)
