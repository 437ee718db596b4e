"""Domain models for monthly asset records and recurring definitions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LineItem:
    """Named amount inside a monthly record breakdown.

    Attributes:
        name: Display name (bank account, income source, card...).
        amount: Whole currency amount.
        source_id: Identifier of the definition the line came from, if any.
    """

    name: str
    amount: int
    source_id: str | None = None


@dataclass(frozen=True)
class MonthlyAssetRecord:
    """Asset snapshot for one calendar month of one user.

    A record with ``is_confirmed`` false is a prediction (draft); true means
    the user verified the figures as actual.
    """

    year_month: str
    bank_balance: int
    monthly_income: int
    credit_expenses: int
    nisa_value: int
    is_confirmed: bool = False
    notes: str | None = None
    bank_details: tuple[LineItem, ...] | None = None
    income_details: tuple[LineItem, ...] | None = None
    credit_details: tuple[LineItem, ...] | None = None
    nisa_details: tuple[LineItem, ...] | None = None

    @property
    def calculated_balance(self) -> int:
        """Return bank balance plus income minus card charges."""
        return self.bank_balance + self.monthly_income - self.credit_expenses


@dataclass(frozen=True)
class RecurringIncome:
    """Standing income definition (salary, side job...)."""

    name: str
    amount: int
    frequency: str
    is_active: bool = True
    id: str | None = None


@dataclass(frozen=True)
class DefaultCreditCard:
    """Expected recurring card charge stored in the user settings."""

    name: str
    amount: int


__all__ = [
    "LineItem",
    "MonthlyAssetRecord",
    "RecurringIncome",
    "DefaultCreditCard",
]
