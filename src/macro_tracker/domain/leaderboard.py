"""Domain models for the household leaderboard."""

from dataclasses import dataclass
from uuid import UUID

from macro_tracker.domain.entries import MacroTotals
from macro_tracker.domain.goals import DailyGoal, GoalPercentages


@dataclass(frozen=True)
class LeaderboardRow:
    """Ranking data for one user on one date."""

    user_id: UUID
    user_name: str
    totals: MacroTotals
    goal: DailyGoal | None
    goal_percentage: GoalPercentages | None
    average_goal_percentage: float
    entries_count: int
