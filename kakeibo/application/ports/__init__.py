"""Application ports package."""

from .budget import BudgetRepositoryPort
from .database import DatabaseEnginePort
from .goals import SavingsGoalRepositoryPort
from .monthly_records import (
    MonthlyAssetRecordRepositoryPort,
    RecurringDefinitionsPort,
)

__all__ = [
    "BudgetRepositoryPort",
    "DatabaseEnginePort",
    "MonthlyAssetRecordRepositoryPort",
    "RecurringDefinitionsPort",
    "SavingsGoalRepositoryPort",
]
