"""Use cases for saving and projecting savings goals."""

from kakeibo.application.ports.goals import SavingsGoalRepositoryPort
from kakeibo.application.session import UserSession
from kakeibo.domain.constants import (
    DEFAULT_BONUS_FREQUENCY,
    DEFAULT_NISA_YIELD_RATE,
)
from kakeibo.domain.errors import SavingsGoalNotFoundError
from kakeibo.domain.models import GoalProjection, SavingsGoal
from kakeibo.domain.services.projection import (
    annual_bonus,
    period_years,
    project_goal,
    required_monthly_savings,
)
from kakeibo.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


class SaveSavingsGoalUseCase:
    """Create or update the user's goal for a period."""

    def __init__(
        self,
        goals: SavingsGoalRepositoryPort,
        logger=None,
        usage_logger=None,
        default_yield_rate: float = DEFAULT_NISA_YIELD_RATE,
        default_bonus_frequency: int = DEFAULT_BONUS_FREQUENCY,
    ) -> None:
        """Initialize the use case.

        Args:
            goals: Port reading and writing savings goals.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger for user actions.
            default_yield_rate: Yield used when none is given, in percent.
            default_bonus_frequency: Bonuses per year when none is given.
        """
        self._goals = goals
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()
        self._default_yield_rate = default_yield_rate
        self._default_bonus_frequency = default_bonus_frequency

    def execute(
        self,
        session: UserSession,
        period: str,
        target_amount: int,
        nisa_monthly: int = 0,
        nisa_yield_rate: float | None = None,
        bonus_per_occurrence: int = 0,
        bonus_frequency: int | None = None,
        monthly_savings: int | None = None,
    ) -> SavingsGoal:
        """Upsert the goal keyed by (user, period).

        Args:
            session: Session of the acting user.
            period: Period key (1year, 3year, 5year or 10year).
            target_amount: Amount to reach.
            nisa_monthly: Monthly NISA contribution.
            nisa_yield_rate: Annual yield in percent; defaults from settings.
            bonus_per_occurrence: Amount saved from one bonus.
            bonus_frequency: Bonuses per year; defaults from settings.
            monthly_savings: Flat monthly savings. When None, the amount
                needed to reach the target is filled in.

        Returns:
            SavingsGoal: Goal as stored, with ``bonus_per_year``
            pre-multiplied by the frequency.

        Raises:
            ValueError: If the period key is unknown.
        """
        years = period_years(period)
        if nisa_yield_rate is None:
            nisa_yield_rate = self._default_yield_rate
        if bonus_frequency is None:
            bonus_frequency = self._default_bonus_frequency
        bonus_per_year = annual_bonus(bonus_per_occurrence, bonus_frequency)
        if monthly_savings is None:
            monthly_savings = required_monthly_savings(
                target_amount,
                nisa_monthly,
                nisa_yield_rate,
                bonus_per_year,
                years,
            )

        goal = SavingsGoal(
            period=period,
            target_amount=target_amount,
            nisa_monthly=nisa_monthly,
            nisa_yield_rate=nisa_yield_rate,
            bonus_per_year=bonus_per_year,
            bonus_frequency=bonus_frequency,
            monthly_savings=monthly_savings,
            is_active=True,
        )
        self._goals.upsert_goal(session.user_id, goal)
        self._usage_logger.info(
            f"user={session.user_id} saved {period} goal "
            f"target={target_amount}"
        )
        return goal


class GetGoalProjectionUseCase:
    """Project the user's goal for a period."""

    def __init__(self, goals: SavingsGoalRepositoryPort, logger=None) -> None:
        self._goals = goals
        self._logger = logger or get_app_logger()

    def execute(self, session: UserSession, period: str) -> GoalProjection:
        """Return the projection of the goal.

        Raises:
            SavingsGoalNotFoundError: If the user has no goal for the period.
        """
        goal = self._goals.fetch_goal(session.user_id, period)
        if goal is None:
            raise SavingsGoalNotFoundError(period)
        projection = project_goal(goal)
        if goal.target_amount == 0:
            self._logger.warning(
                f"Goal {period} has a zero target; achievement rate is 0"
            )
        self._logger.info(
            f"Projected {period} goal: total={projection.total}, "
            f"rate={projection.achievement_rate}%"
        )
        return projection


class ListGoalProjectionsUseCase:
    """Project every goal the user has saved, shortest period first."""

    def __init__(self, goals: SavingsGoalRepositoryPort, logger=None) -> None:
        self._goals = goals
        self._logger = logger or get_app_logger()

    def execute(self, session: UserSession) -> list[GoalProjection]:
        goals = sorted(
            self._goals.fetch_goals(session.user_id),
            key=lambda goal: period_years(goal.period),
        )
        self._logger.info(
            f"Projecting {len(goals)} goals for user={session.user_id}"
        )
        return [project_goal(goal) for goal in goals]


__all__ = [
    "SaveSavingsGoalUseCase",
    "GetGoalProjectionUseCase",
    "ListGoalProjectionsUseCase",
]
