"""Unit tests for health scoring and risk alerts"""

import pytest
from loanwise.domain.models import FinancialProfile, Loan
from loanwise.domain.scoring import calculate_health_score, generate_risk_alerts, grade_for_score


def _profile(income, expenses, savings, loans=()) -> FinancialProfile:
    return FinancialProfile(
        monthly_income=income,
        other_income=0,
        fixed_expenses=expenses,
        variable_expenses=0,
        liquid_savings=savings,
        investments=0,
        loans=tuple(loans),
    )


def _loan(loan_id, emi, rate=10.0, outstanding=100000):
    return Loan(loan_id, f"Loan {loan_id}", "personal", outstanding, outstanding, rate, 36, emi)


@pytest.mark.parametrize(
    "score, grade",
    [
        (100, "Excellent"),
        (85, "Excellent"),
        (80, "Excellent"),
        (79, "Good"),
        (60, "Good"),
        (59, "Fair"),
        (45, "Fair"),
        (40, "Fair"),
        (39, "Poor"),
        (20, "Poor"),
        (19, "Critical"),
        (0, "Critical"),
    ],
)
def test_grade_for_score_bands(score, grade):
    """Test band boundaries are inclusive at the lower edge"""
    assert grade_for_score(score)[0] == grade


def test_grade_colors_are_distinct():
    colors = {grade_for_score(score)[1] for score in (90, 70, 50, 30, 10)}
    assert len(colors) == 5


def test_health_score_sample_profile(sample_profile):
    """Test DTI 57.9% (-30), 2.2 months fund (-5), -5% savings rate (-15)"""
    health = calculate_health_score(sample_profile)

    assert health.score == 0
    assert health.grade == "Critical"


def test_health_score_single_loan(single_loan_profile):
    """Test DTI 30.6% (+10), 3.0 months fund (+5), 22% savings rate (+15)"""
    health = calculate_health_score(single_loan_profile)

    assert health.score == 80
    assert health.grade == "Excellent"


def test_health_score_skips_savings_rate_without_income():
    """Test zero income: DTI 0 (+20), no outflow sentinel (+15), no savings-rate delta"""
    health = calculate_health_score(_profile(income=0, expenses=0, savings=0))

    assert health.score == 85
    assert health.grade == "Excellent"


def test_health_score_clamped_at_zero():
    """Test raw score of -15 is clamped"""
    profile = _profile(income=10000, expenses=20000, savings=0, loans=[_loan("1", 8000)])
    assert calculate_health_score(profile).score == 0


def test_health_score_maximum():
    """Test best case in every band reaches exactly 100"""
    profile = _profile(income=100000, expenses=20000, savings=1000000, loans=[_loan("1", 5000)])
    assert calculate_health_score(profile).score == 100


def test_health_score_middle_bands():
    """Test DTI 40% (-10), 4 months fund (+5), 10% savings rate (+5)"""
    profile = _profile(income=100000, expenses=50000, savings=360000, loans=[_loan("1", 40000)])

    health = calculate_health_score(profile)

    assert health.score == 50
    assert health.grade == "Fair"


def test_health_score_band_edges():
    """Test DTI exactly 20% lands in the +10 band and 6 months in +15"""
    # income 100000, emi 20000, expenses 0 -> fund need 20000, savings 120000 = 6 months
    # surplus 80000 -> 80% savings rate
    profile = _profile(income=100000, expenses=0, savings=120000, loans=[_loan("1", 20000)])
    assert calculate_health_score(profile).score == 50 + 10 + 15 + 15


def test_risk_alerts_all_rules_fire_in_order():
    """Test DTI 60%, fund 0.5 months, surplus -2000, one loan at 20%"""
    profile = _profile(income=10000, expenses=6000, savings=6000, loans=[_loan("1", 6000, rate=20)])

    alerts = generate_risk_alerts(profile)

    assert [a.title for a in alerts] == [
        "Extreme Debt Load",
        "No Emergency Fund",
        "Negative Cash Flow",
        "High Interest Loans",
    ]
    assert [a.severity for a in alerts] == ["critical", "critical", "critical", "warning"]
    assert "60%" in alerts[0].message
    assert "₹2,000" in alerts[2].message
    assert alerts[3].message.startswith("1 loan above 15% interest")


def test_risk_alerts_warning_levels():
    """Test DTI 40% and a 2 month fund raise warnings, not critical alerts"""
    profile = _profile(income=100000, expenses=20000, savings=120000, loans=[_loan("1", 40000)])

    alerts = generate_risk_alerts(profile)

    assert [(a.severity, a.title) for a in alerts] == [
        ("warning", "High Debt-to-Income"),
        ("warning", "Low Emergency Fund"),
    ]
    assert alerts[0].message == "DTI at 40%. Consider reducing debt load."
    assert alerts[1].message == "Only 2.0 months of buffer. Target 6 months."


def test_risk_alerts_high_interest_pluralized():
    """Test count of loans above 15%; exactly 15% is not counted"""
    loans = [_loan("1", 1000, rate=18), _loan("2", 1000, rate=24), _loan("3", 1000, rate=15)]
    profile = _profile(income=100000, expenses=10000, savings=1000000, loans=loans)

    alerts = generate_risk_alerts(profile)

    assert len(alerts) == 1
    assert alerts[0].title == "High Interest Loans"
    assert alerts[0].message == "2 loans above 15% interest. Prioritize repayment."


def test_risk_alerts_all_clear():
    """Test exactly one informational alert when nothing fires"""
    profile = _profile(income=100000, expenses=20000, savings=1000000, loans=[_loan("1", 10000, rate=8)])

    alerts = generate_risk_alerts(profile)

    assert len(alerts) == 1
    assert alerts[0].severity == "info"
    assert alerts[0].title == "Looking Good"


def test_risk_alerts_sample_profile(sample_profile):
    alerts = generate_risk_alerts(sample_profile)

    assert [a.title for a in alerts] == [
        "Extreme Debt Load",
        "Low Emergency Fund",
        "Negative Cash Flow",
        "High Interest Loans",
    ]
