"""GET /v1/profile/{user_id}/... - Derived metrics, repayment plans and what-if scenarios"""

import time
from fastapi import APIRouter, Depends, Request

from loanwise.api.v1.schemas import (
    DashboardResponse,
    HealthScoreSchema,
    MetricsSchema,
    RepaymentPlanSchema,
    RepaymentResponse,
    RiskAlertSchema,
    ScenarioResponse,
    ScenarioSchema,
    StrategySchema,
)
from loanwise.api.dependencies import ResolvedProfile, get_profile, get_request_id
from loanwise.domain import metrics
from loanwise.domain.models import ScenarioResult
from loanwise.domain.scoring import calculate_health_score, generate_risk_alerts
from loanwise.domain.strategies import avalanche_strategy, snowball_strategy, total_interest
from loanwise.domain.scenarios import ScenarioKind, simulate_all, simulate_scenario
from loanwise.infrastructure.observability.metrics import record_analysis, scenario_counter
from loanwise.infrastructure.observability.logging import log_analysis

router = APIRouter()


@router.get("/profile/{user_id}/dashboard", response_model=DashboardResponse)
def get_dashboard(request: Request, resolved: ResolvedProfile = Depends(get_profile)):
    """
    Compute dashboard figures for a user's profile.

    Returns:
        Aggregate metrics, health score and ordered risk alerts
    """
    start_time = time.time()
    profile = resolved.profile

    health = calculate_health_score(profile)
    alerts = generate_risk_alerts(profile)

    duration_ms = (time.time() - start_time) * 1000
    record_analysis(health.grade, [alert.severity for alert in alerts])
    log_analysis(get_request_id(request), resolved.user_id, health.score, health.grade, len(alerts), duration_ms)

    return DashboardResponse(
        user_id=resolved.user_id,
        has_data=resolved.has_data,
        metrics=MetricsSchema(
            total_income=metrics.total_income(profile),
            total_expenses=metrics.total_expenses(profile),
            total_emi=metrics.total_emi(profile),
            total_outstanding=metrics.total_outstanding(profile),
            debt_to_income_ratio=metrics.debt_to_income_ratio(profile),
            emi_burden_percent=metrics.emi_burden_percent(profile),
            monthly_surplus=metrics.monthly_surplus(profile),
            emergency_fund_months=metrics.emergency_fund_months(profile),
            liquidity_ratio=metrics.liquidity_ratio(profile),
        ),
        health_score=HealthScoreSchema.from_domain(health),
        alerts=[RiskAlertSchema.from_domain(alert) for alert in alerts],
    )


@router.get("/profile/{user_id}/repayment", response_model=RepaymentResponse)
def get_repayment_plans(resolved: ResolvedProfile = Depends(get_profile)):
    """Avalanche and snowball priority orderings of the user's loans"""
    avalanche = avalanche_strategy(resolved.profile.loans)
    snowball = snowball_strategy(resolved.profile.loans)

    return RepaymentResponse(
        user_id=resolved.user_id,
        avalanche=StrategySchema(
            plans=[RepaymentPlanSchema.from_domain(plan) for plan in avalanche],
            total_interest=total_interest(avalanche),
        ),
        snowball=StrategySchema(
            plans=[RepaymentPlanSchema.from_domain(plan) for plan in snowball],
            total_interest=total_interest(snowball),
        ),
    )


@router.get("/profile/{user_id}/scenarios", response_model=ScenarioResponse)
def get_all_scenarios(resolved: ResolvedProfile = Depends(get_profile)):
    """Run every what-if scenario against the user's profile"""
    results = simulate_all(resolved.profile)
    return _scenario_response(resolved, list(zip(ScenarioKind, results)))


@router.get("/profile/{user_id}/scenarios/{scenario}", response_model=ScenarioResponse)
def get_scenario(scenario: ScenarioKind, resolved: ResolvedProfile = Depends(get_profile)):
    """Run a single what-if scenario; unknown scenario names are rejected with 422"""
    result = simulate_scenario(resolved.profile, scenario)
    return _scenario_response(resolved, [(scenario, result)])


def _scenario_response(
    resolved: ResolvedProfile,
    results: list[tuple[ScenarioKind, ScenarioResult]],
) -> ScenarioResponse:
    for kind, _ in results:
        scenario_counter.labels(scenario=kind.value).inc()

    return ScenarioResponse(
        user_id=resolved.user_id,
        baseline_health_score=HealthScoreSchema.from_domain(calculate_health_score(resolved.profile)),
        scenarios=[ScenarioSchema.from_domain(kind.value, result) for kind, result in results],
    )
