"""Domain validation helpers."""

from kakeibo.domain.errors import DetailTotalMismatchError
from kakeibo.domain.models import MonthlyAssetRecord

_DETAIL_FIELDS = (
    ("bank_balance", "bank_details"),
    ("monthly_income", "income_details"),
    ("credit_expenses", "credit_details"),
    ("nisa_value", "nisa_details"),
)


def validate_detail_totals(record: MonthlyAssetRecord) -> None:
    """Check that each present detail list sums to its aggregate field.

    Args:
        record: Record about to be written.

    Raises:
        DetailTotalMismatchError: If a detail list disagrees with its total.
    """
    for total_field, details_field in _DETAIL_FIELDS:
        details = getattr(record, details_field)
        if details is None:
            continue
        expected = getattr(record, total_field)
        actual = sum(item.amount for item in details)
        if actual != expected:
            raise DetailTotalMismatchError(total_field, expected, actual)


__all__ = ["validate_detail_totals"]
