"""Domain package for business rules and core models."""

from .constants import GOAL_PERIOD_YEARS, WEEKS_PER_MONTH
from .errors import (
    DetailTotalMismatchError,
    KakeiboError,
    MonthlyRecordNotFoundError,
    NextMonthRecordExistsError,
    SavingsGoalNotFoundError,
)
from .models import (
    BudgetSummary,
    Category,
    DefaultCreditCard,
    Expense,
    GoalProjection,
    LineItem,
    MonthlyAssetRecord,
    RecurringIncome,
    SavingsGoal,
    WeeklyBudgetSummary,
)
from .services import (
    achievement_rate,
    derive_next_month,
    future_value_of_monthly_contribution,
    summarize,
    summarize_week,
    total_projected_savings,
)

__all__ = [
    "GOAL_PERIOD_YEARS",
    "WEEKS_PER_MONTH",
    "KakeiboError",
    "MonthlyRecordNotFoundError",
    "NextMonthRecordExistsError",
    "DetailTotalMismatchError",
    "SavingsGoalNotFoundError",
    "BudgetSummary",
    "Category",
    "DefaultCreditCard",
    "Expense",
    "GoalProjection",
    "LineItem",
    "MonthlyAssetRecord",
    "RecurringIncome",
    "SavingsGoal",
    "WeeklyBudgetSummary",
    "achievement_rate",
    "derive_next_month",
    "future_value_of_monthly_contribution",
    "summarize",
    "summarize_week",
    "total_projected_savings",
]
