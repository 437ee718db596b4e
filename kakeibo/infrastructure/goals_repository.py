"""SQLAlchemy-backed repository for savings goals."""

from sqlalchemy import text

from kakeibo.application.ports.database import DatabaseEnginePort
from kakeibo.application.ports.goals import SavingsGoalRepositoryPort
from kakeibo.domain.models import SavingsGoal

_GOAL_COLUMNS = """
    period,
    target_amount,
    nisa_monthly,
    nisa_yield_rate,
    bonus_per_year,
    bonus_frequency,
    monthly_savings,
    is_active
"""

SELECT_GOALS_SQL = text(
    f"""
    SELECT {_GOAL_COLUMNS}
    FROM savings_goals
    WHERE user_id = :user_id
    ORDER BY period
    """
)

SELECT_GOAL_SQL = text(
    f"""
    SELECT {_GOAL_COLUMNS}
    FROM savings_goals
    WHERE user_id = :user_id AND period = :period
    """
)

UPSERT_GOAL_SQL = text(
    """
    INSERT INTO savings_goals (
        user_id,
        period,
        target_amount,
        nisa_monthly,
        nisa_yield_rate,
        bonus_per_year,
        bonus_frequency,
        monthly_savings,
        is_active
    )
    VALUES (
        :user_id,
        :period,
        :target_amount,
        :nisa_monthly,
        :nisa_yield_rate,
        :bonus_per_year,
        :bonus_frequency,
        :monthly_savings,
        :is_active
    )
    ON CONFLICT (user_id, period) DO UPDATE SET
        target_amount = excluded.target_amount,
        nisa_monthly = excluded.nisa_monthly,
        nisa_yield_rate = excluded.nisa_yield_rate,
        bonus_per_year = excluded.bonus_per_year,
        bonus_frequency = excluded.bonus_frequency,
        monthly_savings = excluded.monthly_savings,
        is_active = excluded.is_active
    """
)


def _row_to_goal(row) -> SavingsGoal:
    return SavingsGoal(
        period=row.period,
        target_amount=int(row.target_amount),
        nisa_monthly=int(row.nisa_monthly),
        nisa_yield_rate=float(row.nisa_yield_rate),
        bonus_per_year=int(row.bonus_per_year),
        bonus_frequency=int(row.bonus_frequency),
        monthly_savings=int(row.monthly_savings),
        is_active=bool(row.is_active),
    )


class SqlAlchemySavingsGoalRepository(SavingsGoalRepositoryPort):
    """Repository backed by SQLAlchemy for savings goals."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def fetch_goals(self, user_id: str) -> list[SavingsGoal]:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_GOALS_SQL, {"user_id": user_id}).all()
        return [_row_to_goal(row) for row in rows]

    def fetch_goal(self, user_id: str, period: str) -> SavingsGoal | None:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_GOAL_SQL,
                {"user_id": user_id, "period": period},
            ).first()
        return _row_to_goal(row) if row is not None else None

    def upsert_goal(self, user_id: str, goal: SavingsGoal) -> None:
        params = {
            "user_id": user_id,
            "period": goal.period,
            "target_amount": goal.target_amount,
            "nisa_monthly": goal.nisa_monthly,
            "nisa_yield_rate": goal.nisa_yield_rate,
            "bonus_per_year": goal.bonus_per_year,
            "bonus_frequency": goal.bonus_frequency,
            "monthly_savings": goal.monthly_savings,
            "is_active": goal.is_active,
        }
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(UPSERT_GOAL_SQL, params)


__all__ = ["SqlAlchemySavingsGoalRepository"]
