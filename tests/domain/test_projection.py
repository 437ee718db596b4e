"""Tests for the savings-goal projection services."""

import pytest

from kakeibo.domain.models import SavingsGoal
from kakeibo.domain.services.projection import (
    achievement_rate,
    annual_bonus,
    build_milestones,
    future_value_of_monthly_contribution,
    per_bonus_amount,
    period_years,
    project_goal,
    required_monthly_savings,
    total_projected_savings,
)


def test_future_value_is_zero_without_contribution() -> None:
    """No contribution means no accumulated value, whatever the rate."""
    assert future_value_of_monthly_contribution(0, 5.0, 10) == 0
    assert future_value_of_monthly_contribution(0, 0.0, 3) == 0


def test_future_value_without_yield_is_linear() -> None:
    """A zero rate accumulates contributions without compounding."""
    assert future_value_of_monthly_contribution(10000, 0, 1) == 120000
    assert future_value_of_monthly_contribution(33333, 0.0, 5) == 33333 * 60


def test_future_value_compounds_monthly() -> None:
    """10,000 a month at 5% for a year accumulates to 122,789."""
    assert future_value_of_monthly_contribution(10000, 5.0, 1) == 122789


def test_future_value_accepts_fractional_years() -> None:
    """Partial-year horizons are converted to months."""
    assert future_value_of_monthly_contribution(10000, 0, 0.25) == 30000
    quarter = future_value_of_monthly_contribution(10000, 5.0, 0.25)
    assert 30000 < quarter < 30300


@pytest.mark.parametrize(
    ("lower", "higher"),
    [
        ((10000, 5.0, 3), (20000, 5.0, 3)),
        ((10000, 1.0, 3), (10000, 7.0, 3)),
        ((10000, 5.0, 1), (10000, 5.0, 10)),
        ((10000, 0.0, 3), (10000, 0.5, 3)),
        ((0, 5.0, 3), (1, 5.0, 3)),
        ((5000, 3.0, 0), (5000, 3.0, 1)),
    ],
)
def test_future_value_is_monotonic(lower, higher) -> None:
    """Raising any single argument never lowers the future value."""
    assert future_value_of_monthly_contribution(
        *lower
    ) <= future_value_of_monthly_contribution(*higher)


def test_total_projected_savings_only_compounds_nisa() -> None:
    """Bonus and flat savings are added linearly to the NISA value."""
    goal = SavingsGoal(
        period="1year",
        target_amount=1_000_000,
        nisa_monthly=10000,
        nisa_yield_rate=5.0,
        bonus_per_year=200000,
        bonus_frequency=2,
        monthly_savings=30000,
    )

    assert total_projected_savings(goal, 1) == 122789 + 200000 + 360000
    assert total_projected_savings(goal, 3) == (
        future_value_of_monthly_contribution(10000, 5.0, 3)
        + 600000
        + 1_080_000
    )


def test_achievement_rate_rounds_percentage() -> None:
    """Achievement is the rounded share of the target."""
    goal = SavingsGoal(
        period="1year",
        target_amount=800000,
        monthly_savings=50000,
    )

    assert achievement_rate(goal, 1) == 75


def test_achievement_rate_rounds_half_up() -> None:
    """An exact half percent rounds upwards."""
    goal = SavingsGoal(period="1year", target_amount=1000, bonus_per_year=5)

    assert achievement_rate(goal, 1) == 1


def test_achievement_rate_with_zero_target_is_zero() -> None:
    """A zero target is a valid state and never divides by zero."""
    goal = SavingsGoal(
        period="5year",
        target_amount=0,
        monthly_savings=10000,
    )

    assert achievement_rate(goal, 5) == 0


def test_bonus_helpers_round_trip_through_frequency() -> None:
    """Yearly bonus is stored multiplied and shown per occurrence."""
    assert annual_bonus(100000, 2) == 200000
    goal = SavingsGoal(
        period="1year",
        target_amount=0,
        bonus_per_year=200000,
        bonus_frequency=2,
    )
    assert per_bonus_amount(goal) == 100000
    no_frequency = SavingsGoal(
        period="1year",
        target_amount=0,
        bonus_per_year=50000,
        bonus_frequency=0,
    )
    assert per_bonus_amount(no_frequency) == 50000


def test_required_monthly_savings_rounds_up() -> None:
    """Monthly savings cover the gap left by NISA and bonuses."""
    assert required_monthly_savings(1_000_000, 0, 5.0, 100000, 1) == 75000
    assert required_monthly_savings(1_000_001, 0, 5.0, 0, 1) == 83334


def test_required_monthly_savings_never_negative() -> None:
    """Targets already covered need no monthly savings."""
    assert required_monthly_savings(100000, 0, 5.0, 500000, 1) == 0


def test_period_years_rejects_unknown_periods() -> None:
    """Only the four fixed period keys are accepted."""
    assert period_years("10year") == 10
    with pytest.raises(ValueError):
        period_years("2year")


def test_milestones_follow_period_interval() -> None:
    """One-year goals show quarterly milestones ending at month 12."""
    goal = SavingsGoal(
        period="1year",
        target_amount=0,
        bonus_per_year=120000,
        monthly_savings=1000,
    )

    milestones = build_milestones(goal, 1)

    assert [item.month for item in milestones] == [3, 6, 9, 12]
    assert milestones[0].bonus == 30000
    assert milestones[0].monthly == 3000
    assert milestones[-1].total == 120000 + 12000


def test_milestones_are_yearly_for_long_goals() -> None:
    """Five-year goals show one milestone per year."""
    goal = SavingsGoal(period="5year", target_amount=0, monthly_savings=1)

    months = [item.month for item in build_milestones(goal, 5)]

    assert months == [12, 24, 36, 48, 60]


def test_project_goal_builds_full_projection() -> None:
    """Projection combines period totals, milestones and long-term views."""
    goal = SavingsGoal(
        period="3year",
        target_amount=3_000_000,
        nisa_monthly=10000,
        nisa_yield_rate=5.0,
        bonus_per_year=200000,
        bonus_frequency=2,
        monthly_savings=40000,
    )

    projection = project_goal(goal)

    assert projection.years == 3
    assert projection.bonus_total == 600000
    assert projection.monthly_total == 1_440_000
    assert projection.nisa_total == future_value_of_monthly_contribution(
        10000,
        5.0,
        3,
    )
    assert projection.total == total_projected_savings(goal, 3)
    assert projection.achievement_rate == achievement_rate(goal, 3)
    assert [item.years for item in projection.long_term] == [5, 7, 10]
    assert [item.month for item in projection.milestones] == [
        6,
        12,
        18,
        24,
        30,
        36,
    ]
    assert projection.milestones[-1].nisa == projection.nisa_total
