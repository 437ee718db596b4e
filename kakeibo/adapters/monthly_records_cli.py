"""CLI adapter for month-to-month asset record operations.

Environment variables:
    KAKEIBO_USER_ID: User acting on the records.
    RECORD_ACTION: ``next`` (navigate forward), ``save``, ``confirm`` or ``apply``.
    RECORD_MONTH: Month to act on, ``YYYY-MM``; defaults to this month.
    RECORD_BANK, RECORD_INCOME, RECORD_CREDIT, RECORD_NISA: Amounts written
        by ``save``.
    RECORD_NOTES: Optional free-text notes for ``save``.
    RECORD_CONFIRMED: ``yes`` or ``no`` on ``save``; unset keeps the stored flag.
    APPLY_NEXT: ``yes`` to also apply a saved record to next month.
    APPLY_OVERWRITE: ``yes`` to confirm replacing next month when applying.
"""

from datetime import date
import os

from kakeibo.adapters.formatting import format_yen
from kakeibo.application.session import UserSession
from kakeibo.domain.errors import KakeiboError, NextMonthRecordExistsError
from kakeibo.domain.models import MonthlyAssetRecord
from kakeibo.domain.services.periods import parse_year_month, year_month_of
from kakeibo.infrastructure.container import (
    build_apply_to_next_month_use_case,
    build_confirm_monthly_record_use_case,
    build_database_adapter,
    build_go_to_next_month_use_case,
    build_save_monthly_record_use_case,
)
from kakeibo.infrastructure.logging.logger import get_app_logger
from kakeibo.infrastructure.settings import KakeiboSettings

_ACTIONS = ("next", "save", "confirm", "apply")
_AMOUNT_VARIABLES = {
    "bank_balance": "RECORD_BANK",
    "monthly_income": "RECORD_INCOME",
    "credit_expenses": "RECORD_CREDIT",
    "nisa_value": "RECORD_NISA",
}


def _parse_month(value: str | None, logger) -> str | None:
    """Validate a ``YYYY-MM`` string.

    Args:
        value: Raw month value; None or empty means the current month.
        logger: Logger used for warnings.

    Returns:
        str | None: Month key, or None when invalid.
    """
    if not value:
        return year_month_of(date.today())
    try:
        parse_year_month(value)
    except ValueError:
        logger.warning(f"Invalid month '{value}'. Expected format YYYY-MM.")
        return None
    return value


def _record_from_env(year_month: str, logger) -> MonthlyAssetRecord | None:
    """Build the record to save from RECORD_* variables.

    Returns:
        MonthlyAssetRecord | None: Record, or None when an amount is
        missing or not a whole number.
    """
    amounts = {}
    for field, name in _AMOUNT_VARIABLES.items():
        raw = os.getenv(name, "").strip().replace(",", "")
        try:
            amounts[field] = int(raw)
        except ValueError:
            logger.warning(f"{name} must be a whole number of yen, got '{raw}'.")
            return None
    return MonthlyAssetRecord(
        year_month=year_month,
        notes=os.getenv("RECORD_NOTES") or None,
        **amounts,
    )


def _confirmed_flag() -> bool | None:
    raw = os.getenv("RECORD_CONFIRMED", "").strip().lower()
    if not raw:
        return None
    return raw == "yes"


def _describe(record: MonthlyAssetRecord) -> str:
    status = "confirmed" if record.is_confirmed else "draft"
    return (
        f"{record.year_month} [{status}] "
        f"bank={format_yen(record.bank_balance)}, "
        f"income={format_yen(record.monthly_income)}, "
        f"credit={format_yen(record.credit_expenses)}, "
        f"nisa={format_yen(record.nisa_value)}, "
        f"balance={format_yen(record.calculated_balance)}"
    )


def main() -> None:
    """Run the requested monthly record action."""
    logger = get_app_logger()
    settings = KakeiboSettings.from_env()
    if settings.user_id is None:
        logger.warning("KAKEIBO_USER_ID is required.")
        return
    action = os.getenv("RECORD_ACTION", "next").strip().lower()
    if action not in _ACTIONS:
        logger.warning(
            f"Unknown RECORD_ACTION '{action}'. Use one of {', '.join(_ACTIONS)}."
        )
        return
    year_month = _parse_month(os.getenv("RECORD_MONTH"), logger)
    if year_month is None:
        return
    overwrite = os.getenv("APPLY_OVERWRITE", "").strip().lower() == "yes"
    if action == "save":
        record = _record_from_env(year_month, logger)
        if record is None:
            return

    session = UserSession(user_id=settings.user_id)
    db_adapter = build_database_adapter()
    try:
        if action == "save":
            saved = build_save_monthly_record_use_case(db_adapter).execute(
                session,
                record,
                is_confirmed=_confirmed_flag(),
                apply_to_next_month=(
                    os.getenv("APPLY_NEXT", "").strip().lower() == "yes"
                ),
                overwrite_next_month=overwrite,
            )
            print(f"{_describe(saved.record)} (saved)")
            if saved.applied is not None:
                suffix = " (replaced existing)" if saved.applied.overwritten else ""
                print(f"{_describe(saved.applied.record)}{suffix}")
        elif action == "next":
            result = build_go_to_next_month_use_case(db_adapter).execute(
                session,
                year_month,
            )
            if result.record is None:
                print(f"{result.year_month}: no record (nothing to roll over).")
            else:
                origin = "generated" if result.generated else "existing"
                print(f"{_describe(result.record)} ({origin})")
        elif action == "confirm":
            record = build_confirm_monthly_record_use_case(db_adapter).execute(
                session,
                year_month,
            )
            print(_describe(record))
        else:
            applied = build_apply_to_next_month_use_case(db_adapter).execute(
                session,
                year_month,
                overwrite=overwrite,
            )
            suffix = " (replaced existing)" if applied.overwritten else ""
            print(f"{_describe(applied.record)}{suffix}")
    except NextMonthRecordExistsError as exc:
        print(f"{exc}. Re-run with APPLY_OVERWRITE=yes to replace it.")
    except KakeiboError as exc:
        logger.error(str(exc))
        print(str(exc))


if __name__ == "__main__":  # pragma: no cover
    main()
