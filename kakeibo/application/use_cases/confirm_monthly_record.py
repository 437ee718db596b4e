"""Use case marking a monthly asset record as verified."""

from dataclasses import replace

from kakeibo.application.ports.monthly_records import (
    MonthlyAssetRecordRepositoryPort,
)
from kakeibo.application.session import UserSession
from kakeibo.domain.errors import MonthlyRecordNotFoundError
from kakeibo.domain.models import MonthlyAssetRecord
from kakeibo.domain.services.periods import parse_year_month
from kakeibo.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


class ConfirmMonthlyRecordUseCase:
    """Re-save a stored record with ``is_confirmed`` set.

    Values are written back unchanged; confirming never recomputes them.
    """

    def __init__(
        self,
        records: MonthlyAssetRecordRepositoryPort,
        logger=None,
        usage_logger=None,
    ) -> None:
        self._records = records
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()

    def execute(
        self,
        session: UserSession,
        year_month: str,
    ) -> MonthlyAssetRecord:
        """Confirm the user's record for a month.

        Raises:
            ValueError: If ``year_month`` is not ``YYYY-MM``.
            MonthlyRecordNotFoundError: If the month has no record.
        """
        parse_year_month(year_month)
        record = self._records.fetch_record(session.user_id, year_month)
        if record is None:
            raise MonthlyRecordNotFoundError(year_month)
        if record.is_confirmed:
            self._logger.debug(f"{year_month} is already confirmed")

        confirmed = replace(record, is_confirmed=True)
        self._records.upsert_record(session.user_id, confirmed)
        self._usage_logger.info(
            f"user={session.user_id} confirmed {year_month}"
        )
        return confirmed


__all__ = ["ConfirmMonthlyRecordUseCase"]
