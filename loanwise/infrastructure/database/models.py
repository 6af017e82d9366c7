"""SQLAlchemy ORM models for stored financial profiles"""

import uuid
from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, Text
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy.sql import func

Base = declarative_base()


class ProfileRecord(Base):
    """Latest financial profile snapshot of a user"""

    __tablename__ = "financial_profile"

    user_id = Column(Text, primary_key=True)
    monthly_income = Column(Float, nullable=False, default=0.0)
    other_income = Column(Float, nullable=False, default=0.0)
    fixed_expenses = Column(Float, nullable=False, default=0.0)
    variable_expenses = Column(Float, nullable=False, default=0.0)
    liquid_savings = Column(Float, nullable=False, default=0.0)
    investments = Column(Float, nullable=False, default=0.0)
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    loans = relationship(
        "LoanRecord",
        back_populates="profile",
        cascade="all, delete-orphan",
        order_by="LoanRecord.position",
    )


class LoanRecord(Base):
    """Loan row belonging to a profile snapshot"""

    __tablename__ = "loan"

    id = Column(Text, primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(Text, ForeignKey("financial_profile.user_id", ondelete="CASCADE"), nullable=False, index=True)
    loan_id = Column(Text, nullable=False)  # caller-assigned identifier, unique per profile
    position = Column(Integer, nullable=False)
    name = Column(Text, nullable=False)
    loan_type = Column(Text, nullable=False)
    principal = Column(Float, nullable=False)
    outstanding = Column(Float, nullable=False)
    interest_rate = Column(Float, nullable=False)
    tenure_months = Column(Integer, nullable=False)
    emi = Column(Float, nullable=False)
    lender = Column(Text, nullable=False, default="")

    profile = relationship("ProfileRecord", back_populates="loans")
