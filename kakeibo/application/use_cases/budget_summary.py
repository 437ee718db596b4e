"""Use cases computing monthly and weekly budget views."""

from datetime import date

from kakeibo.application.ports.budget import BudgetRepositoryPort
from kakeibo.application.session import UserSession
from kakeibo.domain.models import BudgetSummary, WeeklyBudgetSummary
from kakeibo.domain.services.budget import summarize, summarize_week
from kakeibo.domain.services.periods import (
    month_window,
    week_window,
    year_month_of,
)
from kakeibo.infrastructure.logging.logger import get_app_logger


class GetBudgetSummaryUseCase:
    """Compute the budget status of every category for a month."""

    def __init__(self, budget: BudgetRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            budget: Port providing categories and expenses.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._budget = budget
        self._logger = logger or get_app_logger()

    def execute(self, session: UserSession, month: date) -> BudgetSummary:
        """Return the summary for the calendar month containing ``month``."""
        start, end = month_window(year_month_of(month))
        categories = self._budget.fetch_categories(session.user_id)
        expenses = self._budget.fetch_expenses(session.user_id, start, end)
        self._logger.info(
            f"Fetched {len(categories)} categories and {len(expenses)} "
            f"expenses for {start:%Y-%m}"
        )
        return summarize(categories, expenses, start, end)


class GetWeeklyBudgetSummaryUseCase:
    """Compute the weekly view of variable-cost categories."""

    def __init__(self, budget: BudgetRepositoryPort, logger=None) -> None:
        self._budget = budget
        self._logger = logger or get_app_logger()

    def execute(self, session: UserSession, day: date) -> WeeklyBudgetSummary:
        """Return the summary for the Monday-Sunday week containing ``day``."""
        start, end = week_window(day)
        categories = self._budget.fetch_categories(session.user_id)
        expenses = self._budget.fetch_expenses(session.user_id, start, end)
        self._logger.info(
            f"Fetched {len(expenses)} expenses for week {start} - {end}"
        )
        return summarize_week(categories, expenses, day)


__all__ = ["GetBudgetSummaryUseCase", "GetWeeklyBudgetSummaryUseCase"]
