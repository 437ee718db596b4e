"""SQLAlchemy-backed reads of recurring income, cards and NISA accounts."""

import json

from sqlalchemy import text

from kakeibo.application.ports.database import DatabaseEnginePort
from kakeibo.application.ports.monthly_records import RecurringDefinitionsPort
from kakeibo.domain.models import DefaultCreditCard, RecurringIncome

SELECT_ACTIVE_INCOMES_SQL = text(
    """
    SELECT id, name, amount, frequency, is_active
    FROM income_records
    WHERE user_id = :user_id AND is_active = :is_active
    ORDER BY name, id
    """
)

SELECT_DEFAULT_CARDS_SQL = text(
    """
    SELECT default_credit_cards
    FROM user_settings
    WHERE user_id = :user_id
    """
)

SELECT_NISA_CONTRIBUTIONS_SQL = text(
    """
    SELECT monthly_contribution
    FROM nisa_accounts
    WHERE user_id = :user_id AND is_active = :is_active
    ORDER BY id
    """
)


class SqlAlchemyRecurringDefinitionsRepository(RecurringDefinitionsPort):
    """Repository backed by SQLAlchemy for standing definitions."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def fetch_active_incomes(self, user_id: str) -> list[RecurringIncome]:
        """Return active income definitions of every frequency."""
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_ACTIVE_INCOMES_SQL,
                {"user_id": user_id, "is_active": True},
            ).all()
        return [
            RecurringIncome(
                id=row.id,
                name=row.name,
                amount=int(row.amount),
                frequency=row.frequency,
                is_active=bool(row.is_active),
            )
            for row in rows
        ]

    def fetch_default_credit_cards(
        self,
        user_id: str,
    ) -> list[DefaultCreditCard]:
        """Return the card charges stored in the user settings."""
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_DEFAULT_CARDS_SQL,
                {"user_id": user_id},
            ).first()
        if row is None or row.default_credit_cards is None:
            return []
        raw = row.default_credit_cards
        entries = json.loads(raw) if isinstance(raw, str) else raw
        return [
            DefaultCreditCard(
                name=entry.get("name", ""),
                amount=int(entry.get("amount", 0)),
            )
            for entry in entries
        ]

    def fetch_nisa_monthly_contributions(self, user_id: str) -> list[int]:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_NISA_CONTRIBUTIONS_SQL,
                {"user_id": user_id, "is_active": True},
            ).all()
        return [int(row.monthly_contribution) for row in rows]


__all__ = ["SqlAlchemyRecurringDefinitionsRepository"]
