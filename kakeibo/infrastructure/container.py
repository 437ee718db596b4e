"""Composition root for wiring infrastructure adapters."""

from kakeibo.application.ports.budget import BudgetRepositoryPort
from kakeibo.application.ports.database import DatabaseEnginePort
from kakeibo.application.ports.goals import SavingsGoalRepositoryPort
from kakeibo.application.ports.monthly_records import (
    MonthlyAssetRecordRepositoryPort,
    RecurringDefinitionsPort,
)
from kakeibo.application.use_cases.apply_to_next_month import (
    ApplyToNextMonthUseCase,
)
from kakeibo.application.use_cases.budget_summary import (
    GetBudgetSummaryUseCase,
    GetWeeklyBudgetSummaryUseCase,
)
from kakeibo.application.use_cases.confirm_monthly_record import (
    ConfirmMonthlyRecordUseCase,
)
from kakeibo.application.use_cases.go_to_next_month import (
    GoToNextMonthUseCase,
)
from kakeibo.application.use_cases.save_monthly_record import (
    SaveMonthlyRecordUseCase,
)
from kakeibo.application.use_cases.savings_goals import (
    GetGoalProjectionUseCase,
    ListGoalProjectionsUseCase,
    SaveSavingsGoalUseCase,
)
from kakeibo.infrastructure.budget_repository import SqlAlchemyBudgetRepository
from kakeibo.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from kakeibo.infrastructure.goals_repository import (
    SqlAlchemySavingsGoalRepository,
)
from kakeibo.infrastructure.logging.logger import get_app_logger
from kakeibo.infrastructure.monthly_records_repository import (
    SqlAlchemyMonthlyAssetRecordRepository,
)
from kakeibo.infrastructure.recurring_definitions_repository import (
    SqlAlchemyRecurringDefinitionsRepository,
)
from kakeibo.infrastructure.settings import KakeiboSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_monthly_records_repository(
    db_port: DatabaseEnginePort | None = None,
) -> MonthlyAssetRecordRepositoryPort:
    """Return the monthly asset records repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyMonthlyAssetRecordRepository(resolved_db)


def build_recurring_definitions_repository(
    db_port: DatabaseEnginePort | None = None,
) -> RecurringDefinitionsPort:
    """Return the recurring definitions repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyRecurringDefinitionsRepository(resolved_db)


def build_goals_repository(
    db_port: DatabaseEnginePort | None = None,
) -> SavingsGoalRepositoryPort:
    """Return the savings goals repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemySavingsGoalRepository(resolved_db)


def build_budget_repository(
    db_port: DatabaseEnginePort | None = None,
) -> BudgetRepositoryPort:
    """Return the categories and expenses repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyBudgetRepository(resolved_db)


def build_apply_to_next_month_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> ApplyToNextMonthUseCase:
    """Return the apply-to-next-month use case."""
    resolved_db = db_port or build_database_adapter()
    return ApplyToNextMonthUseCase(
        records=build_monthly_records_repository(resolved_db),
        definitions=build_recurring_definitions_repository(resolved_db),
        logger=get_app_logger(),
    )


def build_save_monthly_record_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> SaveMonthlyRecordUseCase:
    """Return the save use case wired with the apply-to-next-month step."""
    resolved_db = db_port or build_database_adapter()
    return SaveMonthlyRecordUseCase(
        records=build_monthly_records_repository(resolved_db),
        apply_to_next_month=build_apply_to_next_month_use_case(resolved_db),
        logger=get_app_logger(),
    )


def build_confirm_monthly_record_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> ConfirmMonthlyRecordUseCase:
    """Return the confirm use case."""
    resolved_db = db_port or build_database_adapter()
    return ConfirmMonthlyRecordUseCase(
        records=build_monthly_records_repository(resolved_db),
        logger=get_app_logger(),
    )


def build_go_to_next_month_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GoToNextMonthUseCase:
    """Return the next-month navigation use case."""
    resolved_db = db_port or build_database_adapter()
    return GoToNextMonthUseCase(
        records=build_monthly_records_repository(resolved_db),
        definitions=build_recurring_definitions_repository(resolved_db),
        logger=get_app_logger(),
    )


def build_save_savings_goal_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: KakeiboSettings | None = None,
) -> SaveSavingsGoalUseCase:
    """Return the save-goal use case using configured defaults."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or KakeiboSettings.from_env()
    return SaveSavingsGoalUseCase(
        goals=build_goals_repository(resolved_db),
        logger=get_app_logger(),
        default_yield_rate=resolved_settings.default_yield_rate,
        default_bonus_frequency=resolved_settings.default_bonus_frequency,
    )


def build_goal_projection_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetGoalProjectionUseCase:
    """Return the goal projection use case."""
    resolved_db = db_port or build_database_adapter()
    return GetGoalProjectionUseCase(
        goals=build_goals_repository(resolved_db),
        logger=get_app_logger(),
    )


def build_list_goal_projections_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> ListGoalProjectionsUseCase:
    """Return the use case projecting all of a user's goals."""
    resolved_db = db_port or build_database_adapter()
    return ListGoalProjectionsUseCase(
        goals=build_goals_repository(resolved_db),
        logger=get_app_logger(),
    )


def build_budget_summary_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetBudgetSummaryUseCase:
    """Return the monthly budget summary use case."""
    resolved_db = db_port or build_database_adapter()
    return GetBudgetSummaryUseCase(
        budget=build_budget_repository(resolved_db),
        logger=get_app_logger(),
    )


def build_weekly_budget_summary_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetWeeklyBudgetSummaryUseCase:
    """Return the weekly budget summary use case."""
    resolved_db = db_port or build_database_adapter()
    return GetWeeklyBudgetSummaryUseCase(
        budget=build_budget_repository(resolved_db),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_monthly_records_repository",
    "build_recurring_definitions_repository",
    "build_goals_repository",
    "build_budget_repository",
    "build_apply_to_next_month_use_case",
    "build_save_monthly_record_use_case",
    "build_confirm_monthly_record_use_case",
    "build_go_to_next_month_use_case",
    "build_save_savings_goal_use_case",
    "build_goal_projection_use_case",
    "build_list_goal_projections_use_case",
    "build_budget_summary_use_case",
    "build_weekly_budget_summary_use_case",
]
