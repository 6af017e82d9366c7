"""Repayment strategies - priority ordering of loans for display"""

from typing import Iterable, List
from loanwise.domain.models import Loan, RepaymentPlan


def _build_plans(ordered_loans: List[Loan]) -> List[RepaymentPlan]:
    """
    Emit one plan per loan in priority order.

    Plans use each loan's stated tenure and EMI; the ordering does not
    simulate accelerated payoff.
    """
    plans = []
    for position, loan in enumerate(ordered_loans, start=1):
        total_paid = loan.emi * loan.tenure_months
        plans.append(
            RepaymentPlan(
                loan_id=loan.id,
                loan_name=loan.name,
                order=position,
                months_to_payoff=loan.tenure_months,
                total_interest=total_paid - loan.outstanding,
                total_paid=total_paid,
            )
        )
    return plans


def avalanche_strategy(loans: Iterable[Loan]) -> List[RepaymentPlan]:
    """Highest interest rate first; ties keep their input order"""
    return _build_plans(sorted(loans, key=lambda loan: loan.interest_rate, reverse=True))


def snowball_strategy(loans: Iterable[Loan]) -> List[RepaymentPlan]:
    """Smallest outstanding balance first; ties keep their input order"""
    return _build_plans(sorted(loans, key=lambda loan: loan.outstanding))


def total_interest(plans: Iterable[RepaymentPlan]) -> float:
    return sum(plan.total_interest for plan in plans)
