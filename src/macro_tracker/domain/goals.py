"""Domain models for daily nutrition goals."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID


@dataclass(frozen=True)
class DailyGoal:
    """Target macros for one user on one calendar date."""

    id: UUID
    user_id: UUID
    date: date
    calories: float
    protein: float
    carbs: float
    fat: float


@dataclass(frozen=True)
class GoalPercentages:
    """Completion percentage per macro."""

    calories: float
    protein: float
    carbs: float
    fat: float

    @property
    def average(self) -> float:
        """Mean completion across the four macros."""
        return (self.calories + self.protein + self.carbs + self.fat) / 4
