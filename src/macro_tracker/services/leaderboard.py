"""Household leaderboard ranking."""

from dataclasses import dataclass
from datetime import date

from macro_tracker.domain.leaderboard import LeaderboardRow
from macro_tracker.domain.models import UserRecord
from macro_tracker.services.food_entries import FoodEntryRepository
from macro_tracker.services.goals import GoalService
from macro_tracker.services.stats import aggregate_entries, goal_percentages
from macro_tracker.services.users import UserRepository


@dataclass
class LeaderboardService:
    """Ranks users by average goal completion for a day.

    With ``carry_forward_goals`` off only goals set for exactly that day count.
    When on, the latest earlier goal is used but never stored.
    """

    user_repository: UserRepository
    entry_repository: FoodEntryRepository
    goal_service: GoalService
    carry_forward_goals: bool = False

    def rank(self, day: date) -> list[LeaderboardRow]:
        """Return one row per user, best average completion first."""
        rows = [self._row_for(user, day) for user in self.user_repository.list_users()]
        # stable sort: ties keep the name order of list_users
        return sorted(rows, key=lambda row: row.average_goal_percentage, reverse=True)

    def _row_for(self, user: UserRecord, day: date) -> LeaderboardRow:
        entries = self.entry_repository.list_entries(user.id, day)
        totals = aggregate_entries(entries)
        goal = self.goal_service.find_goal(
            user.id, day, carry_forward=self.carry_forward_goals
        )
        percentages = goal_percentages(totals, goal) if goal else None
        return LeaderboardRow(
            user_id=user.id,
            user_name=user.name,
            totals=totals,
            goal=goal,
            goal_percentage=percentages,
            average_goal_percentage=percentages.average if percentages else 0.0,
            entries_count=len(entries),
        )
