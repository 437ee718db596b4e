"""Domain errors raised by kakeibo use cases."""


class KakeiboError(Exception):
    """Base class for expected, user-facing failures."""


class MonthlyRecordNotFoundError(KakeiboError):
    """No monthly asset record exists for the requested month."""

    def __init__(self, year_month: str) -> None:
        super().__init__(f"No monthly asset record for {year_month}")
        self.year_month = year_month


class NextMonthRecordExistsError(KakeiboError):
    """Applying to the next month would overwrite an existing record."""

    def __init__(self, year_month: str) -> None:
        super().__init__(
            f"A monthly asset record already exists for {year_month}; "
            "confirm the overwrite to replace it"
        )
        self.year_month = year_month


class DetailTotalMismatchError(KakeiboError):
    """A detail list does not add up to its aggregate field."""

    def __init__(self, field: str, expected: int, actual: int) -> None:
        super().__init__(
            f"{field} details sum to {actual} but {field} is {expected}"
        )
        self.field = field
        self.expected = expected
        self.actual = actual


class SavingsGoalNotFoundError(KakeiboError):
    """No savings goal exists for the requested period."""

    def __init__(self, period: str) -> None:
        super().__init__(f"No savings goal for period {period}")
        self.period = period


__all__ = [
    "KakeiboError",
    "MonthlyRecordNotFoundError",
    "NextMonthRecordExistsError",
    "DetailTotalMismatchError",
    "SavingsGoalNotFoundError",
]
