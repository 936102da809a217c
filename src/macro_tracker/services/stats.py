"""Nutrition totals and goal completion."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from macro_tracker.domain.entries import ZERO_TOTALS, FoodEntry, MacroTotals
from macro_tracker.domain.goals import DailyGoal, GoalPercentages
from macro_tracker.services.food_entries import FoodEntryRepository
from macro_tracker.services.goals import GoalService


@dataclass
class DailySummary:
    """Totals for a day compared against the effective goal."""

    day: date
    entries: list[FoodEntry]
    totals: MacroTotals
    goal: DailyGoal | None
    goal_percentage: GoalPercentages | None


@dataclass
class StatsService:
    """Service for per-day progress of a single user."""

    entry_repository: FoodEntryRepository
    goal_service: GoalService

    def get_daily_summary(self, user_id: UUID, day: date) -> DailySummary:
        """Return a user's entries, totals and goal progress for a day."""
        entries = self.entry_repository.list_entries(user_id, day)
        totals = aggregate_entries(entries)
        goal = self.goal_service.get_goal(user_id, day)
        return DailySummary(
            day=day,
            entries=entries,
            totals=totals,
            goal=goal,
            goal_percentage=goal_percentages(totals, goal) if goal else None,
        )


def aggregate_entries(entries: Iterable[FoodEntry]) -> MacroTotals:
    """Sum calories and macros across entries."""
    total = ZERO_TOTALS
    for entry in entries:
        total = MacroTotals(
            calories=total.calories + entry.calories,
            protein=total.protein + entry.protein,
            carbs=total.carbs + entry.carbs,
            fat=total.fat + entry.fat,
        )
    return total


def completion_percentage(consumed: float, target: float) -> float:
    """Return consumed as a percentage of target, 0 for a zero target."""
    if target <= 0:
        return 0.0
    return consumed / target * 100


def goal_percentages(totals: MacroTotals, goal: DailyGoal) -> GoalPercentages:
    """Return per-macro completion of a goal."""
    return GoalPercentages(
        calories=completion_percentage(totals.calories, goal.calories),
        protein=completion_percentage(totals.protein, goal.protein),
        carbs=completion_percentage(totals.carbs, goal.carbs),
        fat=completion_percentage(totals.fat, goal.fat),
    )
