"""Unit tests for EMI calculation"""

import pytest
from loanwise.domain.emi import calculate_emi, loan_type_label, with_computed_emi
from loanwise.domain.models import Loan


def test_calculate_emi_zero_rate_is_straight_line():
    """Test zero interest falls back to principal / tenure"""
    assert calculate_emi(12000, 0, 12) == 1000.0
    assert calculate_emi(100000, 0, 7) == 100000 / 7


def test_calculate_emi_known_value():
    """Test reducing-balance formula: 1,00,000 at 12% for 12 months"""
    assert calculate_emi(100000, 12, 12) == pytest.approx(8884.88, abs=0.01)


def test_calculate_emi_matches_sample_home_loan():
    """Test 30,00,000 at 8.5% over 240 months is close to the stored 26036"""
    assert calculate_emi(3000000, 8.5, 240) == pytest.approx(26036, rel=1e-3)


@pytest.mark.parametrize(
    "principal, rate, tenure",
    [(100000, 12, 12), (2500000, 8.5, 240), (80000, 36, 12), (5000, 0.1, 1), (350000, 9.5, 48)],
)
def test_calculate_emi_total_paid_covers_principal(principal, rate, tenure):
    """Test interest is never negative when the rate is positive"""
    assert calculate_emi(principal, rate, tenure) * tenure >= principal


def test_calculate_emi_single_month_with_interest():
    """Test one-month tenure repays principal plus one month of interest"""
    assert calculate_emi(12000, 12, 1) == pytest.approx(12120)


def test_calculate_emi_zero_tenure_raises():
    """Test zero tenure is a precondition violation, not a recovered error"""
    with pytest.raises(ZeroDivisionError):
        calculate_emi(10000, 0, 0)
    with pytest.raises(ZeroDivisionError):
        calculate_emi(10000, 10, 0)


def test_with_computed_emi_returns_new_loan():
    """Test EMI is derived from outstanding balance without touching the input"""
    loan = Loan("a", "Laptop", "personal", 15000, 12000, 0, 12, 0.0)

    updated = with_computed_emi(loan)

    assert updated.emi == 1000.0
    assert updated.outstanding == 12000
    assert loan.emi == 0.0


def test_loan_type_label():
    assert loan_type_label("credit_card") == "Credit Card"
    assert loan_type_label("home") == "Home Loan"
    assert loan_type_label("unknown") == "Other"


def test_calculate_emi_vanishing_rate_is_straight_line():
    """Test a rate too small to move (1+r)^n off 1.0 behaves like zero interest"""
    assert calculate_emi(100000, 1e-15, 12) == pytest.approx(100000 / 12)


def test_calculate_emi_overflowing_growth_is_interest_only():
    """Test a tenure long enough to overflow (1+r)^n pays monthly interest only"""
    assert calculate_emi(100000, 36, 100000) == pytest.approx(100000 * 0.03)


def test_calculate_emi_large_finite_growth_stays_finite():
    """Test a growth factor near the float ceiling does not overflow the numerator"""
    emi = calculate_emi(10**300, 36, 23000)

    assert emi == pytest.approx(10**300 * 0.03)


def test_with_computed_emi_vanishing_rate():
    loan = Loan("a", "Promo", "personal", 12000, 12000, 1e-15, 12, 0.0)

    assert with_computed_emi(loan).emi == pytest.approx(1000.0)
