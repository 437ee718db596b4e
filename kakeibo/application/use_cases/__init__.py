"""Application use cases package."""

from .apply_to_next_month import (
    ApplyToNextMonthResult,
    ApplyToNextMonthUseCase,
)
from .budget_summary import (
    GetBudgetSummaryUseCase,
    GetWeeklyBudgetSummaryUseCase,
)
from .confirm_monthly_record import ConfirmMonthlyRecordUseCase
from .go_to_next_month import GoToNextMonthUseCase, NextMonthResult
from .save_monthly_record import (
    SaveMonthlyRecordResult,
    SaveMonthlyRecordUseCase,
)
from .savings_goals import (
    GetGoalProjectionUseCase,
    ListGoalProjectionsUseCase,
    SaveSavingsGoalUseCase,
)

__all__ = [
    "ApplyToNextMonthResult",
    "ApplyToNextMonthUseCase",
    "ConfirmMonthlyRecordUseCase",
    "GetBudgetSummaryUseCase",
    "GetGoalProjectionUseCase",
    "GetWeeklyBudgetSummaryUseCase",
    "GoToNextMonthUseCase",
    "ListGoalProjectionsUseCase",
    "NextMonthResult",
    "SaveMonthlyRecordResult",
    "SaveMonthlyRecordUseCase",
    "SaveSavingsGoalUseCase",
]
