"""Port for savings goals."""

from typing import Protocol

from kakeibo.domain.models import SavingsGoal


class SavingsGoalRepositoryPort(Protocol):
    """Port exposing read/write access to savings goals."""

    def fetch_goals(self, user_id: str) -> list[SavingsGoal]:
        """Return every goal of the user."""

    def fetch_goal(self, user_id: str, period: str) -> SavingsGoal | None:
        """Return the user's goal for a period, or None when absent."""

    def upsert_goal(self, user_id: str, goal: SavingsGoal) -> None:
        """Insert or replace the goal keyed by (user, period)."""


__all__ = ["SavingsGoalRepositoryPort"]
