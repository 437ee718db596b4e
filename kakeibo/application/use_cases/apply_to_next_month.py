"""Use case copying a month's totals onto the following month."""

from dataclasses import dataclass

from kakeibo.application.ports.monthly_records import (
    MonthlyAssetRecordRepositoryPort,
    RecurringDefinitionsPort,
)
from kakeibo.application.session import UserSession
from kakeibo.domain.errors import (
    MonthlyRecordNotFoundError,
    NextMonthRecordExistsError,
)
from kakeibo.domain.models import MonthlyAssetRecord
from kakeibo.domain.services.periods import next_year_month, parse_year_month
from kakeibo.domain.services.rollover import derive_applied_month
from kakeibo.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


@dataclass(frozen=True)
class ApplyToNextMonthResult:
    """Outcome of applying a month to the next one.

    Attributes:
        record: Record written for the next month.
        overwritten: True when an existing record was replaced.
    """

    record: MonthlyAssetRecord
    overwritten: bool


class ApplyToNextMonthUseCase:
    """Write next month's record from this month's totals.

    Unlike forward navigation, this path may replace an existing record,
    but only once the caller confirms the overwrite. Detail lists are
    never carried.
    """

    def __init__(
        self,
        records: MonthlyAssetRecordRepositoryPort,
        definitions: RecurringDefinitionsPort,
        logger=None,
        usage_logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            records: Port reading and writing monthly asset records.
            definitions: Port listing recurring income, cards and NISA.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger for user actions.
        """
        self._records = records
        self._definitions = definitions
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()

    def execute(
        self,
        session: UserSession,
        year_month: str,
        overwrite: bool = False,
    ) -> ApplyToNextMonthResult:
        """Derive and store the next month's record.

        Args:
            session: Session of the acting user.
            year_month: Month whose values are applied forward.
            overwrite: Caller's confirmation that an existing next-month
                record may be replaced.

        Returns:
            ApplyToNextMonthResult: Record written and whether it replaced one.

        Raises:
            ValueError: If ``year_month`` is not ``YYYY-MM``.
            MonthlyRecordNotFoundError: If ``year_month`` has no record.
            NextMonthRecordExistsError: If the next month exists and
                ``overwrite`` is false. Nothing is written in that case.
        """
        parse_year_month(year_month)
        user_id = session.user_id
        source = self._records.fetch_record(user_id, year_month)
        if source is None:
            raise MonthlyRecordNotFoundError(year_month)

        target_month = next_year_month(year_month)
        existing = self._records.fetch_record(user_id, target_month)
        if existing is not None and not overwrite:
            self._logger.info(
                f"Apply to {target_month} needs overwrite confirmation"
            )
            raise NextMonthRecordExistsError(target_month)

        record = derive_applied_month(
            source,
            self._definitions.fetch_active_incomes(user_id),
            self._definitions.fetch_default_credit_cards(user_id),
            sum(self._definitions.fetch_nisa_monthly_contributions(user_id)),
        )
        self._records.upsert_record(user_id, record)

        overwritten = existing is not None
        self._usage_logger.info(
            f"user={user_id} applied {year_month} to {target_month} "
            f"(overwritten={overwritten})"
        )
        return ApplyToNextMonthResult(record=record, overwritten=overwritten)


__all__ = ["ApplyToNextMonthUseCase", "ApplyToNextMonthResult"]
