"""Domain services package."""

from .budget import (
    category_usage,
    summarize,
    summarize_week,
    weekly_budget,
)
from .periods import (
    month_window,
    next_year_month,
    parse_year_month,
    week_window,
    year_month_of,
)
from .projection import (
    achievement_rate,
    future_value_of_monthly_contribution,
    project_goal,
    required_monthly_savings,
    total_projected_savings,
)
from .rollover import derive_applied_month, derive_next_month
from .validation import validate_detail_totals

__all__ = [
    "achievement_rate",
    "category_usage",
    "derive_applied_month",
    "derive_next_month",
    "future_value_of_monthly_contribution",
    "month_window",
    "next_year_month",
    "parse_year_month",
    "project_goal",
    "required_monthly_savings",
    "summarize",
    "summarize_week",
    "total_projected_savings",
    "validate_detail_totals",
    "week_window",
    "weekly_budget",
    "year_month_of",
]
