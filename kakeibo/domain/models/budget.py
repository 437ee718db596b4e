"""Domain models for categories, expenses and budget summaries."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Category:
    """Expense category with a monthly budget."""

    id: str
    name: str
    budget: int
    is_fixed: bool = False


@dataclass(frozen=True)
class Expense:
    """Ledger entry booked against a category."""

    amount: int
    category_id: str | None
    date: date
    memo: str | None = None
    id: str | None = None


@dataclass(frozen=True)
class CategoryBudgetStatus:
    """Spent and remaining amounts for a category in a window."""

    category_id: str
    name: str
    budget: int
    spent: int

    @property
    def remaining(self) -> int:
        """Return budget minus spent; negative when over budget."""
        return self.budget - self.spent


@dataclass(frozen=True)
class BudgetSummary:
    """Per-category and aggregate budget figures for a window."""

    window_start: date
    window_end: date
    categories: list[CategoryBudgetStatus]
    total_budget: int
    total_spent: int

    @property
    def total_remaining(self) -> int:
        """Return total budget minus total spent."""
        return self.total_budget - self.total_spent


@dataclass(frozen=True)
class WeeklyCategoryStatus:
    """Weekly figures for a variable-cost category."""

    category_id: str
    name: str
    monthly_budget: int
    weekly_budget: int
    weekly_spent: int

    @property
    def weekly_remaining(self) -> int:
        """Return weekly budget minus weekly spent."""
        return self.weekly_budget - self.weekly_spent


@dataclass(frozen=True)
class WeeklyBudgetSummary:
    """Weekly view over variable-cost categories."""

    week_start: date
    week_end: date
    categories: list[WeeklyCategoryStatus]
    total_weekly_budget: int
    total_weekly_spent: int

    @property
    def total_weekly_remaining(self) -> int:
        """Return total weekly budget minus total weekly spent."""
        return self.total_weekly_budget - self.total_weekly_spent


__all__ = [
    "Category",
    "Expense",
    "CategoryBudgetStatus",
    "BudgetSummary",
    "WeeklyCategoryStatus",
    "WeeklyBudgetSummary",
]
