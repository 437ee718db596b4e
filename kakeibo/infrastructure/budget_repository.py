"""SQLAlchemy-backed repository for categories and expenses."""

from datetime import date

from sqlalchemy import text

from kakeibo.application.ports.budget import BudgetRepositoryPort
from kakeibo.application.ports.database import DatabaseEnginePort
from kakeibo.domain.models import Category, Expense

SELECT_CATEGORIES_SQL = text(
    """
    SELECT id, name, budget, is_fixed
    FROM categories
    WHERE user_id = :user_id
    ORDER BY display_order, name
    """
)

SELECT_EXPENSES_SQL = text(
    """
    SELECT id, category_id, amount, expense_date, memo
    FROM expenses
    WHERE user_id = :user_id
      AND expense_date >= :start_date
      AND expense_date <= :end_date
    ORDER BY expense_date, id
    """
)


def _coerce_date(value) -> date:
    """Normalize DATE values; SQLite hands them back as ISO strings."""
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


class SqlAlchemyBudgetRepository(BudgetRepositoryPort):
    """Repository backed by SQLAlchemy for budget data."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def fetch_categories(self, user_id: str) -> list[Category]:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_CATEGORIES_SQL,
                {"user_id": user_id},
            ).all()
        return [
            Category(
                id=row.id,
                name=row.name,
                budget=int(row.budget),
                is_fixed=bool(row.is_fixed),
            )
            for row in rows
        ]

    def fetch_expenses(
        self,
        user_id: str,
        start_date: date,
        end_date: date,
    ) -> list[Expense]:
        params = {
            "user_id": user_id,
            "start_date": start_date.isoformat(),
            "end_date": end_date.isoformat(),
        }
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_EXPENSES_SQL, params).all()
        return [
            Expense(
                id=row.id,
                category_id=row.category_id,
                amount=int(row.amount),
                date=_coerce_date(row.expense_date),
                memo=row.memo,
            )
            for row in rows
        ]


__all__ = ["SqlAlchemyBudgetRepository"]
