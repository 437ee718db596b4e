"""Domain models for savings goals and their projections."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SavingsGoal:
    """Savings goal for one period key.

    Attributes:
        period: Period key (1year, 3year, 5year or 10year).
        target_amount: Amount to reach at the end of the period.
        nisa_monthly: Monthly NISA contribution.
        nisa_yield_rate: Expected annual NISA yield in percent.
        bonus_per_year: Yearly bonus savings (per bonus x frequency).
        bonus_frequency: Number of bonuses per year.
        monthly_savings: Flat monthly savings outside NISA.
    """

    period: str
    target_amount: int
    nisa_monthly: int = 0
    nisa_yield_rate: float = 0.0
    bonus_per_year: int = 0
    bonus_frequency: int = 0
    monthly_savings: int = 0
    is_active: bool = True


@dataclass(frozen=True)
class ProjectionMilestone:
    """Accumulated savings after a number of months."""

    month: int
    nisa: int
    bonus: int
    monthly: int

    @property
    def total(self) -> int:
        """Return the sum of all savings streams."""
        return self.nisa + self.bonus + self.monthly


@dataclass(frozen=True)
class LongTermProjection:
    """Projected total savings after a number of years."""

    years: int
    amount: int


@dataclass(frozen=True)
class GoalProjection:
    """Projection of a savings goal over its period."""

    period: str
    years: int
    target_amount: int
    nisa_total: int
    bonus_total: int
    monthly_total: int
    achievement_rate: int
    long_term: list[LongTermProjection]
    milestones: list[ProjectionMilestone]

    @property
    def total(self) -> int:
        """Return the total projected savings."""
        return self.nisa_total + self.bonus_total + self.monthly_total

    @property
    def is_achieved(self) -> bool:
        """Return True when the projection reaches the target."""
        return self.achievement_rate >= 100


__all__ = [
    "SavingsGoal",
    "ProjectionMilestone",
    "LongTermProjection",
    "GoalProjection",
]
