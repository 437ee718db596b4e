"""Domain services deriving next month's asset record.

Balances roll forward (last month's calculated balance opens the new
month) while income and card charges reset to the standing recurring
definitions.
"""

from collections.abc import Iterable
from dataclasses import replace

from kakeibo.domain.constants import MONTHLY_FREQUENCY
from kakeibo.domain.models import (
    DefaultCreditCard,
    LineItem,
    MonthlyAssetRecord,
    RecurringIncome,
)
from kakeibo.domain.services.periods import next_year_month


def derive_next_month(
    prior_record: MonthlyAssetRecord,
    recurring_incomes: Iterable[RecurringIncome],
    default_cards: Iterable[DefaultCreditCard],
    nisa_monthly_contribution_total: int,
) -> MonthlyAssetRecord:
    """Return the draft record for the month following ``prior_record``.

    Args:
        prior_record: Draft or confirmed record of the current month.
        recurring_incomes: User income definitions; only active monthly
            ones contribute.
        default_cards: Expected recurring card charges.
        nisa_monthly_contribution_total: Sum of active NISA contributions.

    Returns:
        MonthlyAssetRecord: Unconfirmed record carrying income and credit
        details. Empty detail lists are stored as None.
    """
    income_details = tuple(
        LineItem(name=income.name, amount=income.amount, source_id=income.id)
        for income in recurring_incomes
        if income.is_active and income.frequency == MONTHLY_FREQUENCY
    )
    credit_details = tuple(
        LineItem(name=card.name, amount=card.amount) for card in default_cards
    )
    return MonthlyAssetRecord(
        year_month=next_year_month(prior_record.year_month),
        bank_balance=prior_record.calculated_balance,
        monthly_income=sum(item.amount for item in income_details),
        credit_expenses=sum(item.amount for item in credit_details),
        nisa_value=prior_record.nisa_value + nisa_monthly_contribution_total,
        is_confirmed=False,
        income_details=income_details or None,
        credit_details=credit_details or None,
    )


def derive_applied_month(
    prior_record: MonthlyAssetRecord,
    recurring_incomes: Iterable[RecurringIncome],
    default_cards: Iterable[DefaultCreditCard],
    nisa_monthly_contribution_total: int,
) -> MonthlyAssetRecord:
    """Return the next month's values for the bulk "apply" path.

    Same figures as :func:`derive_next_month` but only the aggregate
    amounts are carried; every detail list is cleared.
    """
    derived = derive_next_month(
        prior_record,
        recurring_incomes,
        default_cards,
        nisa_monthly_contribution_total,
    )
    return clear_details(derived)


def clear_details(record: MonthlyAssetRecord) -> MonthlyAssetRecord:
    """Return a copy of the record without any detail lists."""
    return replace(
        record,
        bank_details=None,
        income_details=None,
        credit_details=None,
        nisa_details=None,
    )


__all__ = ["derive_next_month", "derive_applied_month", "clear_details"]
