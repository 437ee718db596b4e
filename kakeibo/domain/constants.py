"""Domain constants for household finance tracking."""

MONTHLY_FREQUENCY = "monthly"

GOAL_PERIOD_YEARS = {
    "1year": 1,
    "3year": 3,
    "5year": 5,
    "10year": 10,
}

LONG_TERM_PROJECTION_YEARS = (5, 7, 10)

# Weekly budgets are the monthly budget split evenly over this many weeks.
WEEKS_PER_MONTH = 4

DEFAULT_NISA_YIELD_RATE = 5.0
DEFAULT_BONUS_FREQUENCY = 2


__all__ = [
    "MONTHLY_FREQUENCY",
    "GOAL_PERIOD_YEARS",
    "LONG_TERM_PROJECTION_YEARS",
    "WEEKS_PER_MONTH",
    "DEFAULT_NISA_YIELD_RATE",
    "DEFAULT_BONUS_FREQUENCY",
]
