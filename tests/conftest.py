"""Pytest fixtures for testing"""

import pytest
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from loanwise.api.main import create_app
from loanwise.infrastructure.database.models import Base
from loanwise.infrastructure.database.session import get_db
from loanwise.domain.models import FinancialProfile, Loan, SAMPLE_PROFILE


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def sample_profile() -> FinancialProfile:
    """Three-loan profile: home 8.5%, car 9.5%, credit card 36%"""
    return SAMPLE_PROFILE


@pytest.fixture
def single_loan_profile() -> FinancialProfile:
    """Income 85000, expenses 40000 and only the home loan (EMI 26036)"""
    return FinancialProfile(
        monthly_income=80000,
        other_income=5000,
        fixed_expenses=25000,
        variable_expenses=15000,
        liquid_savings=200000,
        investments=300000,
        loans=(Loan("1", "Home Loan", "home", 3000000, 2500000, 8.5, 240, 26036, "SBI"),),
    )


@pytest.fixture
def ml_predictions_payload() -> dict:
    """Tool-call arguments as returned by the LLM gateway (camelCase)"""
    return {
        "defaultRisk": {
            "probability": 18.5,
            "riskLevel": "moderate",
            "keyFactors": [{"factor": "EMI burden above 50%", "impact": "negative", "weight": 0.6}],
            "recommendation": "Clear the credit card balance first.",
        },
        "creditScore": {
            "estimated": 710,
            "range": {"low": 690, "high": 730},
            "category": "good",
            "factors": [{"name": "Payment capacity", "score": 55, "status": "fair"}],
            "improvementTips": ["Reduce credit card utilization"],
        },
        "repaymentOptimizer": {
            "strategy": "avalanche",
            "reason": "Credit card rate is 36%",
            "allocations": [
                {
                    "loanName": "Credit Card",
                    "currentEMI": 8133,
                    "suggestedEMI": 12000,
                    "priority": 1,
                    "interestSaved": 4000,
                    "monthsSaved": 4,
                }
            ],
            "totalInterestSaved": 4000,
            "totalMonthsSaved": 4,
        },
        "anomalies": [
            {
                "type": "debt",
                "severity": "critical",
                "title": "High EMI burden",
                "description": "EMIs take more than half of income",
                "metric": "DTI",
                "value": "57.9%",
                "benchmark": "<35%",
            }
        ],
    }
