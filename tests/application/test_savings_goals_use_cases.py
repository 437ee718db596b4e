"""Tests for the savings goal use cases."""

from unittest.mock import MagicMock

import pytest

from kakeibo.application.session import UserSession
from kakeibo.application.use_cases.savings_goals import (
    GetGoalProjectionUseCase,
    ListGoalProjectionsUseCase,
    SaveSavingsGoalUseCase,
)
from kakeibo.domain.errors import SavingsGoalNotFoundError
from kakeibo.domain.models import SavingsGoal


class FakeGoalsRepository:
    """In-memory goal store keyed by (user, period)."""

    def __init__(self) -> None:
        self.goals: dict[tuple[str, str], SavingsGoal] = {}

    def fetch_goals(self, user_id):
        return [
            goal for (owner, _), goal in self.goals.items() if owner == user_id
        ]

    def fetch_goal(self, user_id, period):
        return self.goals.get((user_id, period))

    def upsert_goal(self, user_id, goal):
        self.goals[(user_id, goal.period)] = goal


def test_save_fills_defaults_and_multiplies_bonus() -> None:
    """Bonus is stored per year; yield and frequency fall back to defaults."""
    goals = FakeGoalsRepository()
    use_case = SaveSavingsGoalUseCase(
        goals,
        logger=MagicMock(),
        usage_logger=MagicMock(),
        default_yield_rate=4.0,
        default_bonus_frequency=2,
    )

    goal = use_case.execute(
        UserSession("user-1"),
        "1year",
        target_amount=1_000_000,
        bonus_per_occurrence=50000,
        monthly_savings=20000,
    )

    assert goal.nisa_yield_rate == 4.0
    assert goal.bonus_frequency == 2
    assert goal.bonus_per_year == 100000
    assert goal.monthly_savings == 20000
    assert goals.fetch_goal("user-1", "1year") == goal


def test_save_computes_required_monthly_savings() -> None:
    """Omitted monthly savings are filled with the amount still needed."""
    goals = FakeGoalsRepository()
    use_case = SaveSavingsGoalUseCase(
        goals,
        logger=MagicMock(),
        usage_logger=MagicMock(),
    )

    goal = use_case.execute(
        UserSession("user-1"),
        "1year",
        target_amount=1_000_000,
        bonus_per_occurrence=50000,
        bonus_frequency=2,
    )

    assert goal.monthly_savings == 75000


def test_save_rejects_unknown_period() -> None:
    """Only the fixed period keys can be stored."""
    goals = FakeGoalsRepository()
    use_case = SaveSavingsGoalUseCase(
        goals,
        logger=MagicMock(),
        usage_logger=MagicMock(),
    )

    with pytest.raises(ValueError):
        use_case.execute(UserSession("user-1"), "2year", target_amount=1)

    assert goals.goals == {}


def test_save_replaces_goal_for_same_period() -> None:
    """One goal per user and period; the later save wins."""
    goals = FakeGoalsRepository()
    use_case = SaveSavingsGoalUseCase(
        goals,
        logger=MagicMock(),
        usage_logger=MagicMock(),
    )

    use_case.execute(UserSession("user-1"), "3year", 100, monthly_savings=0)
    use_case.execute(UserSession("user-1"), "3year", 200, monthly_savings=0)

    assert [goal.target_amount for goal in goals.fetch_goals("user-1")] == [200]


def test_projection_returns_goal_projection() -> None:
    """Stored goals are projected over their period."""
    goals = FakeGoalsRepository()
    goals.upsert_goal(
        "user-1",
        SavingsGoal(
            period="1year",
            target_amount=800000,
            monthly_savings=50000,
        ),
    )
    use_case = GetGoalProjectionUseCase(goals, logger=MagicMock())

    projection = use_case.execute(UserSession("user-1"), "1year")

    assert projection.total == 600000
    assert projection.achievement_rate == 75
    assert projection.is_achieved is False


def test_projection_warns_on_zero_target() -> None:
    """A zero target projects with a zero rate and a warning."""
    goals = FakeGoalsRepository()
    goals.upsert_goal(
        "user-1",
        SavingsGoal(period="5year", target_amount=0, monthly_savings=1000),
    )
    logger = MagicMock()
    use_case = GetGoalProjectionUseCase(goals, logger=logger)

    projection = use_case.execute(UserSession("user-1"), "5year")

    assert projection.achievement_rate == 0
    logger.warning.assert_called_once()


def test_projection_missing_goal_raises() -> None:
    """Projecting a period without a goal is an error."""
    use_case = GetGoalProjectionUseCase(
        FakeGoalsRepository(),
        logger=MagicMock(),
    )

    with pytest.raises(SavingsGoalNotFoundError):
        use_case.execute(UserSession("user-1"), "10year")


def test_list_projects_goals_in_period_order() -> None:
    """Every goal of the user is projected, shortest period first."""
    goals = FakeGoalsRepository()
    for period in ("10year", "1year", "3year"):
        goals.upsert_goal(
            "user-1",
            SavingsGoal(period=period, target_amount=100, monthly_savings=10),
        )
    goals.upsert_goal("user-2", SavingsGoal(period="5year", target_amount=1))

    projections = ListGoalProjectionsUseCase(goals, logger=MagicMock()).execute(
        UserSession("user-1")
    )

    assert [projection.period for projection in projections] == [
        "1year",
        "3year",
        "10year",
    ]
    assert projections[0].monthly_total == 120


def test_list_without_goals_is_empty() -> None:
    """A user with no goals gets an empty list."""
    use_case = ListGoalProjectionsUseCase(FakeGoalsRepository(), logger=MagicMock())

    assert use_case.execute(UserSession("user-1")) == []
