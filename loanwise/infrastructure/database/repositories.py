"""Data access layer for financial profiles"""

from typing import Optional
from sqlalchemy.orm import Session
from loanwise.infrastructure.database.models import LoanRecord, ProfileRecord
from loanwise.domain.models import FinancialProfile, Loan


class ProfileRepository:
    """Repository for per-user profile snapshots (last writer wins)"""

    def __init__(self, db: Session):
        self.db = db

    def load(self, user_id: str) -> Optional[FinancialProfile]:
        """Fetch a user's profile, or None when nothing has been saved"""
        record = self.db.get(ProfileRecord, user_id)
        if record is None:
            return None

        return FinancialProfile(
            monthly_income=record.monthly_income,
            other_income=record.other_income,
            fixed_expenses=record.fixed_expenses,
            variable_expenses=record.variable_expenses,
            liquid_savings=record.liquid_savings,
            investments=record.investments,
            loans=tuple(
                Loan(
                    id=row.loan_id,
                    name=row.name,
                    loan_type=row.loan_type,
                    principal=row.principal,
                    outstanding=row.outstanding,
                    interest_rate=row.interest_rate,
                    tenure_months=row.tenure_months,
                    emi=row.emi,
                    lender=row.lender,
                )
                for row in record.loans
            ),
        )

    def save(self, user_id: str, profile: FinancialProfile) -> ProfileRecord:
        """Upsert the profile row and replace all of its loan rows"""
        record = self.db.get(ProfileRecord, user_id)
        if record is None:
            record = ProfileRecord(user_id=user_id)
            self.db.add(record)

        record.monthly_income = profile.monthly_income
        record.other_income = profile.other_income
        record.fixed_expenses = profile.fixed_expenses
        record.variable_expenses = profile.variable_expenses
        record.liquid_savings = profile.liquid_savings
        record.investments = profile.investments

        # Orphaned rows are deleted by the relationship cascade
        record.loans = [
            LoanRecord(
                loan_id=loan.id,
                position=position,
                name=loan.name,
                loan_type=loan.loan_type,
                principal=loan.principal,
                outstanding=loan.outstanding,
                interest_rate=loan.interest_rate,
                tenure_months=loan.tenure_months,
                emi=loan.emi,
                lender=loan.lender,
            )
            for position, loan in enumerate(profile.loans)
        ]

        self.db.flush()
        return record

    def delete(self, user_id: str) -> bool:
        """Remove a profile with its loans; False when there was none"""
        record = self.db.get(ProfileRecord, user_id)
        if record is None:
            return False

        self.db.delete(record)
        self.db.flush()
        return True
