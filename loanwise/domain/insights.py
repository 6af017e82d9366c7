"""Structured insight document returned by the LLM gateway"""

from typing import List, Literal
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class InsightModel(BaseModel):
    """Base model: camelCase on the wire, snake_case in Python"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RiskFactor(InsightModel):
    factor: str
    impact: Literal["positive", "negative", "neutral"]
    weight: float = Field(..., description="How much this factor contributes 0-1")


class DefaultRisk(InsightModel):
    probability: float = Field(..., description="Default probability 0-100")
    risk_level: Literal["low", "moderate", "high", "critical"]
    key_factors: List[RiskFactor]
    recommendation: str


class ScoreRange(InsightModel):
    low: float
    high: float


class CreditFactor(InsightModel):
    name: str
    score: float = Field(..., description="Factor score 0-100")
    status: Literal["excellent", "good", "fair", "poor"]


class CreditScore(InsightModel):
    estimated: float = Field(..., description="Estimated CIBIL score 300-900")
    range: ScoreRange
    category: Literal["poor", "fair", "good", "very_good", "excellent"]
    factors: List[CreditFactor]
    improvement_tips: List[str]


class LoanAllocation(InsightModel):
    loan_name: str
    current_emi: float = Field(..., alias="currentEMI")
    suggested_emi: float = Field(..., alias="suggestedEMI")
    priority: int = Field(..., description="1 = highest priority")
    interest_saved: float
    months_saved: float


class RepaymentOptimizer(InsightModel):
    strategy: Literal["avalanche", "snowball", "hybrid"]
    reason: str
    allocations: List[LoanAllocation]
    total_interest_saved: float
    total_months_saved: float


class Anomaly(InsightModel):
    type: Literal["spending", "debt", "savings", "income"]
    severity: Literal["info", "warning", "critical"]
    title: str
    description: str
    metric: str
    value: str
    benchmark: str


class MLPredictions(InsightModel):
    """Default risk, credit score estimate, repayment advice and anomalies"""

    default_risk: DefaultRisk
    credit_score: CreditScore
    repayment_optimizer: RepaymentOptimizer
    anomalies: List[Anomaly]
