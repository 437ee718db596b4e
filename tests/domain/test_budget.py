"""Tests for the budget aggregation services."""

from datetime import date

from kakeibo.domain.models import Category, Expense
from kakeibo.domain.services.budget import (
    category_usage,
    summarize,
    summarize_week,
    weekly_budget,
)


def test_summarize_excludes_expenses_outside_window() -> None:
    """Only expenses dated inside the window are counted."""
    categories = [Category(id="food", name="Food", budget=30000)]
    expenses = [
        Expense(amount=5000, category_id="food", date=date(2024, 3, 10)),
        Expense(amount=3000, category_id="food", date=date(2024, 4, 2)),
    ]

    summary = summarize(
        categories,
        expenses,
        date(2024, 3, 1),
        date(2024, 3, 31),
    )

    status = summary.categories[0]
    assert status.spent == 5000
    assert status.remaining == 25000
    assert summary.total_budget == 30000
    assert summary.total_spent == 5000
    assert summary.total_remaining == 25000


def test_summarize_includes_window_bounds() -> None:
    """Expenses on the first and last day belong to the window."""
    categories = [Category(id="food", name="Food", budget=10000)]
    expenses = [
        Expense(amount=100, category_id="food", date=date(2024, 3, 1)),
        Expense(amount=200, category_id="food", date=date(2024, 3, 31)),
        Expense(amount=400, category_id="food", date=date(2024, 2, 29)),
    ]

    summary = summarize(
        categories,
        expenses,
        date(2024, 3, 1),
        date(2024, 3, 31),
    )

    assert summary.total_spent == 300


def test_summarize_counts_duplicates_and_allows_overspend() -> None:
    """Identical entries are summed and remaining may go negative."""
    categories = [
        Category(id="food", name="Food", budget=1000),
        Category(id="rent", name="Rent", budget=80000, is_fixed=True),
    ]
    day = date(2024, 3, 5)
    expenses = [
        Expense(amount=700, category_id="food", date=day),
        Expense(amount=700, category_id="food", date=day),
        Expense(amount=80000, category_id="rent", date=day),
        Expense(amount=999, category_id=None, date=day),
    ]

    summary = summarize(categories, expenses, date(2024, 3, 1), date(2024, 3, 31))

    food, rent = summary.categories
    assert food.spent == 1400
    assert food.remaining == -400
    assert rent.remaining == 0
    assert summary.total_spent == 81400
    assert summary.total_remaining == -400


def test_summarize_handles_empty_inputs() -> None:
    """No categories and no expenses give a zero summary."""
    summary = summarize([], [], date(2024, 1, 1), date(2024, 1, 31))

    assert summary.categories == []
    assert summary.total_budget == 0
    assert summary.total_spent == 0
    assert summary.total_remaining == 0


def test_weekly_budget_is_a_quarter_of_monthly() -> None:
    """Weekly budget divides the monthly budget by four, rounded."""
    assert weekly_budget(30000) == 7500
    assert weekly_budget(10002) == 2501
    assert weekly_budget(10001) == 2500
    assert weekly_budget(0) == 0


def test_summarize_week_skips_fixed_categories() -> None:
    """Fixed costs never appear in the weekly view."""
    categories = [
        Category(id="food", name="Food", budget=40000),
        Category(id="rent", name="Rent", budget=0, is_fixed=True),
        Category(id="phone", name="Phone", budget=8000, is_fixed=True),
    ]
    expenses = [
        Expense(amount=1200, category_id="food", date=date(2024, 3, 11)),
        Expense(amount=800, category_id="food", date=date(2024, 3, 17)),
        Expense(amount=5000, category_id="food", date=date(2024, 3, 18)),
        Expense(amount=8000, category_id="phone", date=date(2024, 3, 12)),
    ]

    summary = summarize_week(categories, expenses, date(2024, 3, 13))

    assert summary.week_start == date(2024, 3, 11)
    assert summary.week_end == date(2024, 3, 17)
    assert [status.category_id for status in summary.categories] == ["food"]
    food = summary.categories[0]
    assert food.monthly_budget == 40000
    assert food.weekly_budget == 10000
    assert food.weekly_spent == 2000
    assert food.weekly_remaining == 8000
    assert summary.total_weekly_budget == 10000
    assert summary.total_weekly_remaining == 8000


def test_category_usage_guards_zero_budget() -> None:
    """Usage is a rounded percentage and zero for an empty budget."""
    assert category_usage(2500, 10000) == 25
    assert category_usage(1, 3) == 33
    assert category_usage(100, 0) == 0
