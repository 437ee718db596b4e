"""Use case saving a user's monthly asset record."""

from dataclasses import dataclass, replace

from kakeibo.application.ports.monthly_records import (
    MonthlyAssetRecordRepositoryPort,
)
from kakeibo.application.session import UserSession
from kakeibo.application.use_cases.apply_to_next_month import (
    ApplyToNextMonthResult,
    ApplyToNextMonthUseCase,
)
from kakeibo.domain.models import MonthlyAssetRecord
from kakeibo.domain.services.periods import parse_year_month
from kakeibo.domain.services.validation import validate_detail_totals
from kakeibo.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class SaveMonthlyRecordResult:
    """Outcome of an explicit save.

    Attributes:
        record: Record as written.
        applied: Result of the optional apply-to-next-month step.
    """

    record: MonthlyAssetRecord
    applied: ApplyToNextMonthResult | None = None


class SaveMonthlyRecordUseCase:
    """Persist user edits to a monthly asset record."""

    def __init__(
        self,
        records: MonthlyAssetRecordRepositoryPort,
        apply_to_next_month: ApplyToNextMonthUseCase | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            records: Port reading and writing monthly asset records.
            apply_to_next_month: Use case run when the caller asks to apply
                the saved values to the following month.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._records = records
        self._apply_to_next_month = apply_to_next_month
        self._logger = logger or get_app_logger()

    def execute(
        self,
        session: UserSession,
        record: MonthlyAssetRecord,
        is_confirmed: bool | None = None,
        apply_to_next_month: bool = False,
        overwrite_next_month: bool = False,
    ) -> SaveMonthlyRecordResult:
        """Validate and upsert the record.

        Args:
            session: Session of the acting user.
            record: Values entered by the user.
            is_confirmed: Explicit confirmation flag. None keeps the stored
                flag, so editing a confirmed record leaves it confirmed.
            apply_to_next_month: Also write the next month from these values.
            overwrite_next_month: Confirmation that an existing next-month
                record may be replaced.

        Returns:
            SaveMonthlyRecordResult: Saved record and optional apply result.

        Raises:
            ValueError: If ``record.year_month`` is not ``YYYY-MM``.
            DetailTotalMismatchError: If a detail list disagrees with its
                aggregate amount.
            NextMonthRecordExistsError: If applying would overwrite without
                confirmation. The current month is saved regardless.
        """
        parse_year_month(record.year_month)
        validate_detail_totals(record)

        user_id = session.user_id
        if is_confirmed is None:
            stored = self._records.fetch_record(user_id, record.year_month)
            is_confirmed = (
                stored.is_confirmed if stored is not None else record.is_confirmed
            )
        to_save = replace(record, is_confirmed=is_confirmed)
        self._records.upsert_record(user_id, to_save)
        self._logger.info(
            f"Saved {to_save.year_month} for user={user_id} "
            f"(confirmed={to_save.is_confirmed}, "
            f"balance={to_save.calculated_balance})"
        )

        applied = None
        if apply_to_next_month:
            if self._apply_to_next_month is None:
                raise RuntimeError(
                    "Apply to next month requested but not configured"
                )
            applied = self._apply_to_next_month.execute(
                session,
                to_save.year_month,
                overwrite=overwrite_next_month,
            )
        return SaveMonthlyRecordResult(record=to_save, applied=applied)


__all__ = ["SaveMonthlyRecordUseCase", "SaveMonthlyRecordResult"]
