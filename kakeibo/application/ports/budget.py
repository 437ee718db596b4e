"""Port for categories and ledger entries."""

from datetime import date
from typing import Protocol

from kakeibo.domain.models import Category, Expense


class BudgetRepositoryPort(Protocol):
    """Port exposing the data needed for budget summaries."""

    def fetch_categories(self, user_id: str) -> list[Category]:
        """Return the user's categories in display order."""

    def fetch_expenses(
        self,
        user_id: str,
        start_date: date,
        end_date: date,
    ) -> list[Expense]:
        """Return the user's expenses dated between the bounds."""


__all__ = ["BudgetRepositoryPort"]
