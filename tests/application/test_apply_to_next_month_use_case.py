"""Tests for the ApplyToNextMonthUseCase."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from kakeibo.application.session import UserSession
from kakeibo.application.use_cases.apply_to_next_month import (
    ApplyToNextMonthUseCase,
)
from kakeibo.domain.errors import (
    MonthlyRecordNotFoundError,
    NextMonthRecordExistsError,
)
from kakeibo.domain.models import (
    DefaultCreditCard,
    LineItem,
    MonthlyAssetRecord,
    RecurringIncome,
)


class FakeRecordsRepository:
    """In-memory record store keyed by (user, year_month)."""

    def __init__(self, *records: MonthlyAssetRecord) -> None:
        self.records = {record.year_month: record for record in records}
        self.upserts: list[MonthlyAssetRecord] = []

    def fetch_record(self, user_id, year_month):
        return self.records.get(year_month)

    def upsert_record(self, user_id, record):
        self.upserts.append(record)
        self.records[record.year_month] = record


def _definitions() -> MagicMock:
    definitions = MagicMock()
    definitions.fetch_active_incomes.return_value = [
        RecurringIncome(name="Salary", amount=300000, frequency="monthly")
    ]
    definitions.fetch_default_credit_cards.return_value = [
        DefaultCreditCard(name="Card", amount=80000)
    ]
    definitions.fetch_nisa_monthly_contributions.return_value = [20000]
    return definitions


def _source() -> MonthlyAssetRecord:
    return MonthlyAssetRecord(
        year_month="2024-01",
        bank_balance=100000,
        monthly_income=300000,
        credit_expenses=80000,
        nisa_value=500000,
        income_details=(LineItem(name="Salary", amount=300000),),
    )


def _use_case(records, usage_logger=None) -> ApplyToNextMonthUseCase:
    return ApplyToNextMonthUseCase(
        records,
        _definitions(),
        logger=MagicMock(),
        usage_logger=usage_logger or MagicMock(),
    )


def test_execute_writes_next_month_without_details() -> None:
    """Applying stores totals only and clears every detail list."""
    records = FakeRecordsRepository(_source())
    usage_logger = MagicMock()

    result = _use_case(records, usage_logger).execute(
        UserSession("user-1"),
        "2024-01",
    )

    assert result.overwritten is False
    assert result.record.year_month == "2024-02"
    assert result.record.bank_balance == 320000
    assert result.record.monthly_income == 300000
    assert result.record.credit_expenses == 80000
    assert result.record.nisa_value == 520000
    assert result.record.income_details is None
    assert result.record.credit_details is None
    assert result.record.is_confirmed is False
    assert records.upserts == [result.record]
    usage_logger.info.assert_called_once()


def test_execute_requires_overwrite_confirmation() -> None:
    """An existing next month is left untouched without confirmation."""
    existing = MonthlyAssetRecord(
        year_month="2024-02",
        bank_balance=1,
        monthly_income=2,
        credit_expenses=3,
        nisa_value=4,
        is_confirmed=True,
    )
    records = FakeRecordsRepository(_source(), existing)
    use_case = _use_case(records)

    with pytest.raises(NextMonthRecordExistsError) as excinfo:
        use_case.execute(UserSession("user-1"), "2024-01")

    assert excinfo.value.year_month == "2024-02"
    assert records.upserts == []
    assert records.records["2024-02"] is existing


def test_execute_overwrites_after_confirmation() -> None:
    """The second, confirmed call replaces the next month."""
    existing = MonthlyAssetRecord(
        year_month="2024-02",
        bank_balance=1,
        monthly_income=2,
        credit_expenses=3,
        nisa_value=4,
        is_confirmed=True,
    )
    records = FakeRecordsRepository(_source(), existing)
    use_case = _use_case(records)

    with pytest.raises(NextMonthRecordExistsError):
        use_case.execute(UserSession("user-1"), "2024-01")
    result = use_case.execute(UserSession("user-1"), "2024-01", overwrite=True)

    assert result.overwritten is True
    assert records.records["2024-02"].bank_balance == 320000
    assert records.records["2024-02"].is_confirmed is False


def test_execute_without_source_record_fails() -> None:
    """Applying a month that was never saved is an error."""
    records = FakeRecordsRepository()

    with pytest.raises(MonthlyRecordNotFoundError):
        _use_case(records).execute(UserSession("user-1"), "2024-01")

    assert records.upserts == []


def test_execute_rejects_non_canonical_month() -> None:
    """A lookalike key never reaches the repository."""
    records = MagicMock()

    with pytest.raises(ValueError):
        _use_case(records).execute(UserSession("user-1"), "2024-+1", overwrite=True)

    records.fetch_record.assert_not_called()
    records.upsert_record.assert_not_called()
