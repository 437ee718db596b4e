"""Domain services for savings-goal projections.

Only NISA contributions compound; bonus and flat monthly savings
accumulate linearly.
"""

import math

from kakeibo.domain.constants import (
    GOAL_PERIOD_YEARS,
    LONG_TERM_PROJECTION_YEARS,
)
from kakeibo.domain.models import (
    GoalProjection,
    LongTermProjection,
    ProjectionMilestone,
    SavingsGoal,
)
from kakeibo.utils.decimal_utils import round_half_up


def future_value_of_monthly_contribution(
    monthly_amount: int,
    annual_yield_percent: float,
    years: float,
) -> int | float:
    """Return the future value of a recurring monthly contribution.

    Uses FV = PMT * ((1 + r)^n - 1) / r with r the monthly rate and n the
    number of months. Fractional years are accepted for partial-year
    milestones.

    Args:
        monthly_amount: Amount contributed every month.
        annual_yield_percent: Expected annual yield in percent (5.0 = 5%).
        years: Contribution horizon in years.

    Returns:
        int | float: Accumulated amount; rounded half-up when compounding.
    """
    return _future_value_for_months(
        monthly_amount,
        annual_yield_percent,
        years * 12,
    )


def _future_value_for_months(
    monthly_amount: int,
    annual_yield_percent: float,
    months: float,
) -> int | float:
    if monthly_amount == 0:
        return 0
    monthly_rate = annual_yield_percent / 100 / 12
    if monthly_rate == 0:
        return monthly_amount * months
    growth = (1 + monthly_rate) ** months - 1
    return round_half_up(monthly_amount * growth / monthly_rate)


def total_projected_savings(goal: SavingsGoal, years: float) -> int | float:
    """Return NISA, bonus and flat monthly savings accumulated over years.

    Args:
        goal: Savings goal holding the contribution settings.
        years: Horizon in years.

    Returns:
        int | float: Total projected savings.
    """
    nisa_total = future_value_of_monthly_contribution(
        goal.nisa_monthly,
        goal.nisa_yield_rate,
        years,
    )
    bonus_total = goal.bonus_per_year * years
    monthly_total = goal.monthly_savings * years * 12
    return nisa_total + bonus_total + monthly_total


def achievement_rate(goal: SavingsGoal, years: float) -> int:
    """Return the projected savings as a percentage of the target.

    A zero target yields 0 instead of dividing by zero.
    """
    if goal.target_amount == 0:
        return 0
    total = total_projected_savings(goal, years)
    return round_half_up(total / goal.target_amount * 100)


def annual_bonus(per_bonus_amount: int, bonus_frequency: int) -> int:
    """Return the yearly bonus savings stored on a goal."""
    return per_bonus_amount * bonus_frequency


def per_bonus_amount(goal: SavingsGoal) -> int:
    """Return the amount saved from a single bonus."""
    if goal.bonus_frequency <= 0:
        return goal.bonus_per_year
    return round_half_up(goal.bonus_per_year / goal.bonus_frequency)


def required_monthly_savings(
    target_amount: int,
    nisa_monthly: int,
    nisa_yield_rate: float,
    bonus_per_year: int,
    years: int,
) -> int:
    """Return the flat monthly savings needed to close the gap to a target.

    Args:
        target_amount: Amount to reach.
        nisa_monthly: Monthly NISA contribution.
        nisa_yield_rate: Expected annual NISA yield in percent.
        bonus_per_year: Yearly bonus savings.
        years: Goal horizon in whole years.

    Returns:
        int: Monthly amount, rounded up; 0 when NISA and bonuses suffice.
    """
    if years <= 0:
        return 0
    nisa_total = future_value_of_monthly_contribution(
        nisa_monthly,
        nisa_yield_rate,
        years,
    )
    remaining = target_amount - nisa_total - bonus_per_year * years
    return max(0, math.ceil(remaining / (years * 12)))


def period_years(period: str) -> int:
    """Return the number of years for a goal period key.

    Raises:
        ValueError: If the period key is unknown.
    """
    try:
        return GOAL_PERIOD_YEARS[period]
    except KeyError:
        raise ValueError(f"Unknown goal period: {period}") from None


def milestone_interval(years: int) -> int:
    """Return the number of months between displayed milestones."""
    if years == 1:
        return 3
    if years == 3:
        return 6
    return 12


def build_milestones(goal: SavingsGoal, years: int) -> list[ProjectionMilestone]:
    """Return accumulated savings at each milestone month.

    The final month is always included even when it does not fall on the
    milestone interval.
    """
    total_months = years * 12
    interval = milestone_interval(years)
    milestones = []
    for month in range(1, total_months + 1):
        if month % interval != 0 and month != total_months:
            continue
        milestones.append(
            ProjectionMilestone(
                month=month,
                nisa=round_half_up(
                    _future_value_for_months(
                        goal.nisa_monthly,
                        goal.nisa_yield_rate,
                        month,
                    )
                ),
                bonus=round_half_up(goal.bonus_per_year * month / 12),
                monthly=goal.monthly_savings * month,
            )
        )
    return milestones


def project_goal(goal: SavingsGoal) -> GoalProjection:
    """Build the full projection of a goal over its period.

    Args:
        goal: Savings goal to project.

    Returns:
        GoalProjection: Period totals, achievement rate, long-term
        projections and milestone timeline.
    """
    years = period_years(goal.period)
    nisa_total = round_half_up(
        future_value_of_monthly_contribution(
            goal.nisa_monthly,
            goal.nisa_yield_rate,
            years,
        )
    )
    long_term = [
        LongTermProjection(
            years=horizon,
            amount=round_half_up(total_projected_savings(goal, horizon)),
        )
        for horizon in LONG_TERM_PROJECTION_YEARS
    ]
    return GoalProjection(
        period=goal.period,
        years=years,
        target_amount=goal.target_amount,
        nisa_total=nisa_total,
        bonus_total=goal.bonus_per_year * years,
        monthly_total=goal.monthly_savings * years * 12,
        achievement_rate=achievement_rate(goal, years),
        long_term=long_term,
        milestones=build_milestones(goal, years),
    )


__all__ = [
    "future_value_of_monthly_contribution",
    "total_projected_savings",
    "achievement_rate",
    "annual_bonus",
    "per_bonus_amount",
    "required_monthly_savings",
    "period_years",
    "milestone_interval",
    "build_milestones",
    "project_goal",
]
