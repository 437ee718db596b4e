"""Ports for monthly asset records and the definitions that seed them."""

from typing import Protocol

from kakeibo.domain.models import (
    DefaultCreditCard,
    MonthlyAssetRecord,
    RecurringIncome,
)


class MonthlyAssetRecordRepositoryPort(Protocol):
    """Port exposing read/write access to monthly asset records."""

    def fetch_record(
        self,
        user_id: str,
        year_month: str,
    ) -> MonthlyAssetRecord | None:
        """Return the user's record for a month, or None when absent."""

    def upsert_record(self, user_id: str, record: MonthlyAssetRecord) -> None:
        """Insert or replace the record keyed by (user, year_month)."""


class RecurringDefinitionsPort(Protocol):
    """Port exposing the standing definitions used for rollover."""

    def fetch_active_incomes(self, user_id: str) -> list[RecurringIncome]:
        """Return the user's active recurring income definitions."""

    def fetch_default_credit_cards(
        self,
        user_id: str,
    ) -> list[DefaultCreditCard]:
        """Return the expected card charges from the user settings."""

    def fetch_nisa_monthly_contributions(self, user_id: str) -> list[int]:
        """Return the monthly contribution of each active NISA account."""


__all__ = [
    "MonthlyAssetRecordRepositoryPort",
    "RecurringDefinitionsPort",
]
