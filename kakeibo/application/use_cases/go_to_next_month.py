"""Use case moving the asset view forward one month."""

from dataclasses import dataclass

from kakeibo.application.ports.monthly_records import (
    MonthlyAssetRecordRepositoryPort,
    RecurringDefinitionsPort,
)
from kakeibo.application.session import UserSession
from kakeibo.domain.models import MonthlyAssetRecord
from kakeibo.domain.services.periods import next_year_month
from kakeibo.domain.services.rollover import derive_next_month
from kakeibo.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class NextMonthResult:
    """State of the month the user navigated to.

    Attributes:
        year_month: Month now displayed.
        record: Record of that month, if any.
        generated: True when the record was derived during navigation.
    """

    year_month: str
    record: MonthlyAssetRecord | None
    generated: bool


class GoToNextMonthUseCase:
    """Navigate forward, seeding a draft for a month without a record.

    An existing next-month record is never touched.
    """

    def __init__(
        self,
        records: MonthlyAssetRecordRepositoryPort,
        definitions: RecurringDefinitionsPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            records: Port reading and writing monthly asset records.
            definitions: Port listing recurring income, cards and NISA.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._records = records
        self._definitions = definitions
        self._logger = logger or get_app_logger()

    def execute(self, session: UserSession, year_month: str) -> NextMonthResult:
        """Return the next month, deriving its draft when needed.

        Args:
            session: Session of the acting user.
            year_month: Month currently displayed.

        Returns:
            NextMonthResult: Next month key, its record and whether it was
            generated.
        """
        user_id = session.user_id
        target_month = next_year_month(year_month)
        existing = self._records.fetch_record(user_id, target_month)
        if existing is not None:
            return NextMonthResult(
                year_month=target_month,
                record=existing,
                generated=False,
            )

        current = self._records.fetch_record(user_id, year_month)
        if current is None:
            self._logger.info(
                f"No record for {year_month}; {target_month} left empty"
            )
            return NextMonthResult(
                year_month=target_month,
                record=None,
                generated=False,
            )

        draft = derive_next_month(
            current,
            self._definitions.fetch_active_incomes(user_id),
            self._definitions.fetch_default_credit_cards(user_id),
            sum(self._definitions.fetch_nisa_monthly_contributions(user_id)),
        )
        self._records.upsert_record(user_id, draft)
        self._logger.info(
            f"Generated draft for {target_month} from {year_month}: "
            f"bank={draft.bank_balance}, income={draft.monthly_income}, "
            f"credit={draft.credit_expenses}, nisa={draft.nisa_value}"
        )
        return NextMonthResult(
            year_month=target_month,
            record=draft,
            generated=True,
        )


__all__ = ["GoToNextMonthUseCase", "NextMonthResult"]
