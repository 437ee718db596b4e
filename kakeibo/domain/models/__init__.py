"""Domain models package."""

from .assets import (
    DefaultCreditCard,
    LineItem,
    MonthlyAssetRecord,
    RecurringIncome,
)
from .budget import (
    BudgetSummary,
    Category,
    CategoryBudgetStatus,
    Expense,
    WeeklyBudgetSummary,
    WeeklyCategoryStatus,
)
from .goals import (
    GoalProjection,
    LongTermProjection,
    ProjectionMilestone,
    SavingsGoal,
)

__all__ = [
    "LineItem",
    "MonthlyAssetRecord",
    "RecurringIncome",
    "DefaultCreditCard",
    "SavingsGoal",
    "GoalProjection",
    "LongTermProjection",
    "ProjectionMilestone",
    "Category",
    "Expense",
    "CategoryBudgetStatus",
    "BudgetSummary",
    "WeeklyCategoryStatus",
    "WeeklyBudgetSummary",
]
