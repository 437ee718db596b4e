"""CLI adapter printing the monthly and weekly budget status."""

from datetime import date
import os

from kakeibo.adapters.formatting import format_signed_yen, format_yen
from kakeibo.application.session import UserSession
from kakeibo.domain.services.budget import category_usage
from kakeibo.infrastructure.container import (
    build_budget_summary_use_case,
    build_database_adapter,
    build_weekly_budget_summary_use_case,
)
from kakeibo.infrastructure.logging.logger import get_app_logger
from kakeibo.infrastructure.settings import KakeiboSettings


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format; empty means today.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return date.today()
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(f"Invalid date '{value}'. Expected format YYYY-MM-DD.")
        return None


def main() -> None:
    """Print the budget report for BUDGET_DATE (default today)."""
    logger = get_app_logger()
    settings = KakeiboSettings.from_env()
    if settings.user_id is None:
        logger.warning("KAKEIBO_USER_ID is required.")
        return
    day = _parse_date(os.getenv("BUDGET_DATE"), logger)
    if day is None:
        return

    session = UserSession(settings.user_id)
    db_adapter = build_database_adapter()
    monthly = build_budget_summary_use_case(db_adapter).execute(session, day)
    weekly = build_weekly_budget_summary_use_case(db_adapter).execute(
        session,
        day,
    )

    print(f"Budget {monthly.window_start:%Y-%m}")
    for status in monthly.categories:
        print(
            f"  {status.name}: {format_yen(status.spent)} / "
            f"{format_yen(status.budget)} "
            f"({category_usage(status.spent, status.budget)}%), "
            f"remaining {format_signed_yen(status.remaining)}"
        )
    print(
        f"  Total: {format_yen(monthly.total_spent)} / "
        f"{format_yen(monthly.total_budget)}, "
        f"remaining {format_signed_yen(monthly.total_remaining)}"
    )
    print(f"Week {weekly.week_start:%m/%d} - {weekly.week_end:%m/%d}")
    for status in weekly.categories:
        print(
            f"  {status.name}: {format_yen(status.weekly_spent)} / "
            f"{format_yen(status.weekly_budget)}, "
            f"remaining {format_signed_yen(status.weekly_remaining)}"
        )
    print(
        f"  Total: remaining {format_signed_yen(weekly.total_weekly_remaining)}"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
