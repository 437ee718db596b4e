"""Domain services aggregating expenses against category budgets."""

from collections.abc import Iterable, Sequence
from datetime import date

from kakeibo.domain.constants import WEEKS_PER_MONTH
from kakeibo.domain.models import (
    BudgetSummary,
    Category,
    CategoryBudgetStatus,
    Expense,
    WeeklyBudgetSummary,
    WeeklyCategoryStatus,
)
from kakeibo.domain.services.periods import week_window
from kakeibo.utils.decimal_utils import round_half_up


def spent_in_window(
    category_id: str,
    expenses: Iterable[Expense],
    window_start: date,
    window_end: date,
) -> int:
    """Return the sum of a category's expenses dated inside the window.

    Bounds are inclusive. Identical entries are all counted.
    """
    return sum(
        expense.amount
        for expense in expenses
        if expense.category_id == category_id
        and window_start <= expense.date <= window_end
    )


def summarize(
    categories: Sequence[Category],
    expenses: Sequence[Expense],
    window_start: date,
    window_end: date,
) -> BudgetSummary:
    """Compute spent and remaining figures per category for a window.

    Args:
        categories: Categories to report on, in display order.
        expenses: Ledger entries; entries outside the window are ignored.
        window_start: First day of the window.
        window_end: Last day of the window.

    Returns:
        BudgetSummary: Per-category statuses and aggregate totals.
    """
    statuses = [
        CategoryBudgetStatus(
            category_id=category.id,
            name=category.name,
            budget=category.budget,
            spent=spent_in_window(
                category.id,
                expenses,
                window_start,
                window_end,
            ),
        )
        for category in categories
    ]
    return BudgetSummary(
        window_start=window_start,
        window_end=window_end,
        categories=statuses,
        total_budget=sum(category.budget for category in categories),
        total_spent=sum(status.spent for status in statuses),
    )


def weekly_budget(monthly_budget: int) -> int:
    """Return a monthly budget spread over a four-week month."""
    return round_half_up(monthly_budget / WEEKS_PER_MONTH)


def summarize_week(
    categories: Sequence[Category],
    expenses: Sequence[Expense],
    day: date,
) -> WeeklyBudgetSummary:
    """Compute the weekly view for the Monday-Sunday week containing ``day``.

    Fixed-cost categories are left out of the weekly view.
    """
    week_start, week_end = week_window(day)
    statuses = [
        WeeklyCategoryStatus(
            category_id=category.id,
            name=category.name,
            monthly_budget=category.budget,
            weekly_budget=weekly_budget(category.budget),
            weekly_spent=spent_in_window(
                category.id,
                expenses,
                week_start,
                week_end,
            ),
        )
        for category in categories
        if not category.is_fixed
    ]
    return WeeklyBudgetSummary(
        week_start=week_start,
        week_end=week_end,
        categories=statuses,
        total_weekly_budget=sum(status.weekly_budget for status in statuses),
        total_weekly_spent=sum(status.weekly_spent for status in statuses),
    )


def category_usage(spent: int, budget: int) -> int:
    """Return spent as a percentage of budget; 0 for a zero budget."""
    if budget == 0:
        return 0
    return round_half_up(spent / budget * 100)


__all__ = [
    "spent_in_window",
    "summarize",
    "weekly_budget",
    "summarize_week",
    "category_usage",
]
