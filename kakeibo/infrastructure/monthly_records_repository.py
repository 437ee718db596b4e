"""SQLAlchemy-backed repository for monthly asset records."""

import json

from sqlalchemy import text

from kakeibo.application.ports.database import DatabaseEnginePort
from kakeibo.application.ports.monthly_records import (
    MonthlyAssetRecordRepositoryPort,
)
from kakeibo.domain.models import LineItem, MonthlyAssetRecord

SELECT_RECORD_SQL = text(
    """
    SELECT year_month,
           bank_balance,
           monthly_income,
           credit_expenses,
           nisa_value,
           is_confirmed,
           notes,
           bank_details,
           income_details,
           credit_details,
           nisa_details
    FROM monthly_asset_records
    WHERE user_id = :user_id AND year_month = :year_month
    """
)

UPSERT_RECORD_SQL = text(
    """
    INSERT INTO monthly_asset_records (
        user_id,
        year_month,
        bank_balance,
        monthly_income,
        credit_expenses,
        nisa_value,
        calculated_balance,
        is_confirmed,
        notes,
        bank_details,
        income_details,
        credit_details,
        nisa_details
    )
    VALUES (
        :user_id,
        :year_month,
        :bank_balance,
        :monthly_income,
        :credit_expenses,
        :nisa_value,
        :calculated_balance,
        :is_confirmed,
        :notes,
        :bank_details,
        :income_details,
        :credit_details,
        :nisa_details
    )
    ON CONFLICT (user_id, year_month) DO UPDATE SET
        bank_balance = excluded.bank_balance,
        monthly_income = excluded.monthly_income,
        credit_expenses = excluded.credit_expenses,
        nisa_value = excluded.nisa_value,
        calculated_balance = excluded.calculated_balance,
        is_confirmed = excluded.is_confirmed,
        notes = excluded.notes,
        bank_details = excluded.bank_details,
        income_details = excluded.income_details,
        credit_details = excluded.credit_details,
        nisa_details = excluded.nisa_details
    """
)

# Older rows name the bank and NISA amounts "balance" and "value".
_AMOUNT_KEYS = ("amount", "balance", "value")


def encode_line_items(items: tuple[LineItem, ...] | None) -> str | None:
    """Serialize detail line items to a JSON column value."""
    if items is None:
        return None
    payload = []
    for item in items:
        entry = {"name": item.name, "amount": item.amount}
        if item.source_id is not None:
            entry["id"] = item.source_id
        payload.append(entry)
    return json.dumps(payload, ensure_ascii=False)


def decode_line_items(raw) -> tuple[LineItem, ...] | None:
    """Parse a JSON column value into detail line items.

    Args:
        raw: JSON text, an already decoded list, or None.

    Returns:
        tuple[LineItem, ...] | None: Items in stored order.
    """
    if raw is None:
        return None
    entries = json.loads(raw) if isinstance(raw, str) else raw
    items = []
    for entry in entries:
        amount = next(
            (entry[key] for key in _AMOUNT_KEYS if key in entry),
            0,
        )
        items.append(
            LineItem(
                name=entry.get("name", ""),
                amount=int(amount),
                source_id=entry.get("id"),
            )
        )
    return tuple(items)


class SqlAlchemyMonthlyAssetRecordRepository(MonthlyAssetRecordRepositoryPort):
    """Repository backed by SQLAlchemy for monthly asset records."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def fetch_record(
        self,
        user_id: str,
        year_month: str,
    ) -> MonthlyAssetRecord | None:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_RECORD_SQL,
                {"user_id": user_id, "year_month": year_month},
            ).first()
        if row is None:
            return None
        return MonthlyAssetRecord(
            year_month=row.year_month,
            bank_balance=int(row.bank_balance),
            monthly_income=int(row.monthly_income),
            credit_expenses=int(row.credit_expenses),
            nisa_value=int(row.nisa_value),
            is_confirmed=bool(row.is_confirmed),
            notes=row.notes,
            bank_details=decode_line_items(row.bank_details),
            income_details=decode_line_items(row.income_details),
            credit_details=decode_line_items(row.credit_details),
            nisa_details=decode_line_items(row.nisa_details),
        )

    def upsert_record(self, user_id: str, record: MonthlyAssetRecord) -> None:
        """Insert or replace the record; the last write wins.

        ``calculated_balance`` is always recomputed from the record.
        """
        params = {
            "user_id": user_id,
            "year_month": record.year_month,
            "bank_balance": record.bank_balance,
            "monthly_income": record.monthly_income,
            "credit_expenses": record.credit_expenses,
            "nisa_value": record.nisa_value,
            "calculated_balance": record.calculated_balance,
            "is_confirmed": record.is_confirmed,
            "notes": record.notes,
            "bank_details": encode_line_items(record.bank_details),
            "income_details": encode_line_items(record.income_details),
            "credit_details": encode_line_items(record.credit_details),
            "nisa_details": encode_line_items(record.nisa_details),
        }
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(UPSERT_RECORD_SQL, params)


__all__ = [
    "SqlAlchemyMonthlyAssetRecordRepository",
    "encode_line_items",
    "decode_line_items",
    "SELECT_RECORD_SQL",
    "UPSERT_RECORD_SQL",
]
