"""Dependency injection for FastAPI endpoints"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session
from loanwise.domain.models import FinancialProfile, SAMPLE_PROFILE
from loanwise.infrastructure.clients.llm import LLMClient
from loanwise.infrastructure.database.repositories import ProfileRepository
from loanwise.infrastructure.database.session import get_db


class ResolvedProfile:
    """Profile for the current request and whether it came from the store"""

    def __init__(self, user_id: str, profile: FinancialProfile, has_data: bool):
        self.user_id = user_id
        self.profile = profile
        self.has_data = has_data


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_llm_client() -> LLMClient:
    """Provide LLM gateway client instance"""
    return LLMClient()


def get_profile(user_id: str, db: Session = Depends(get_db)) -> ResolvedProfile:
    """Load the user's stored profile, substituting the sample profile when absent"""
    profile = ProfileRepository(db).load(user_id)
    if profile is None:
        return ResolvedProfile(user_id, SAMPLE_PROFILE, has_data=False)
    return ResolvedProfile(user_id, profile, has_data=True)
