"""What-if scenario simulation on hypothetical copies of a profile"""

from dataclasses import replace
from enum import Enum
from typing import List
from loanwise.domain.models import FinancialProfile, ScenarioResult
from loanwise.domain.emi import calculate_emi
from loanwise.domain.metrics import debt_to_income_ratio, monthly_surplus
from loanwise.domain.scoring import calculate_health_score
from loanwise.domain.exceptions import UnknownScenarioError

RATE_HIKE_POINTS = 2.0
PREPAY_FRACTION = 0.2


class ScenarioKind(str, Enum):
    INCOME_DROP_20 = "income_drop_20"
    INCOME_DROP_50 = "income_drop_50"
    RATE_INCREASE_2 = "rate_increase_2"
    PREPAY_LARGEST = "prepay_largest"


SCENARIO_COPY = {
    ScenarioKind.INCOME_DROP_20: (
        "20% Income Drop",
        "Simulates a 20% salary cut or income reduction.",
    ),
    ScenarioKind.INCOME_DROP_50: (
        "50% Income Drop (Job Loss)",
        "Simulates losing half your income.",
    ),
    ScenarioKind.RATE_INCREASE_2: (
        "+2% Interest Rate Hike",
        "Simulates a 2% increase across all loan rates.",
    ),
    ScenarioKind.PREPAY_LARGEST: (
        "20% Prepayment on Largest Loan",
        "Uses 20% of savings to prepay the largest loan.",
    ),
}


def _scale_income(profile: FinancialProfile, factor: float) -> FinancialProfile:
    return replace(profile, monthly_income=profile.monthly_income * factor)


def _raise_rates(profile: FinancialProfile) -> FinancialProfile:
    loans = tuple(
        replace(
            loan,
            interest_rate=loan.interest_rate + RATE_HIKE_POINTS,
            emi=calculate_emi(loan.outstanding, loan.interest_rate + RATE_HIKE_POINTS, loan.tenure_months),
        )
        for loan in profile.loans
    )
    return replace(profile, loans=loans)


def _prepay_largest(profile: FinancialProfile) -> FinancialProfile:
    """
    Prepay 20% of the largest outstanding balance out of liquid savings.

    The first loan wins ties. When savings cannot cover the prepayment the
    profile is returned as is.
    """
    if not profile.loans:
        return profile

    index, largest = max(enumerate(profile.loans), key=lambda pair: pair[1].outstanding)
    prepay_amount = largest.outstanding * PREPAY_FRACTION
    if profile.liquid_savings < prepay_amount:
        return profile

    remaining = largest.outstanding - prepay_amount
    prepaid = replace(
        largest,
        outstanding=remaining,
        emi=calculate_emi(remaining, largest.interest_rate, largest.tenure_months),
    )
    loans = profile.loans[:index] + (prepaid,) + profile.loans[index + 1:]
    return replace(profile, loans=loans, liquid_savings=profile.liquid_savings - prepay_amount)


def simulate_scenario(profile: FinancialProfile, scenario: ScenarioKind | str) -> ScenarioResult:
    """
    Apply a what-if transformation to a copy of the profile and rescore it.

    The caller's profile is never modified; the transformed copy is
    discarded once the result is computed.

    Raises:
        UnknownScenarioError: scenario is not a ScenarioKind value
    """
    try:
        kind = ScenarioKind(scenario)
    except ValueError as e:
        raise UnknownScenarioError(f"Unknown scenario: {scenario}") from e

    if kind is ScenarioKind.INCOME_DROP_20:
        modified = _scale_income(profile, 0.8)
    elif kind is ScenarioKind.INCOME_DROP_50:
        modified = _scale_income(profile, 0.5)
    elif kind is ScenarioKind.RATE_INCREASE_2:
        modified = _raise_rates(profile)
    else:
        modified = _prepay_largest(profile)

    label, description = SCENARIO_COPY[kind]
    return ScenarioResult(
        label=label,
        new_surplus=monthly_surplus(modified),
        new_dti=debt_to_income_ratio(modified),
        new_health_score=calculate_health_score(modified),
        impact_description=description,
    )


def simulate_all(profile: FinancialProfile) -> List[ScenarioResult]:
    """Run every scenario kind in declaration order"""
    return [simulate_scenario(profile, kind) for kind in ScenarioKind]
