"""Supabase repository for daily goals."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from macro_tracker.domain.entries import MacroTotals
from macro_tracker.domain.errors import PersistenceError
from macro_tracker.domain.goals import DailyGoal
from macro_tracker.services.goals import GoalRepository

_CONFLICT_COLUMNS = "user_id,date"


@dataclass
class SupabaseGoalRepository(GoalRepository):
    """Supabase implementation for daily goals."""

    client: Client

    def get_goal(self, user_id: UUID, day: date) -> DailyGoal | None:
        """Return the goal for exactly this date."""
        response = (
            self.client.table("daily_goals")
            .select("*")
            .eq("user_id", str(user_id))
            .eq("date", day.isoformat())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_goal(response.data[0])

    def get_latest_goal_before(self, user_id: UUID, day: date) -> DailyGoal | None:
        """Return the most recent goal strictly before the date."""
        response = (
            self.client.table("daily_goals")
            .select("*")
            .eq("user_id", str(user_id))
            .lt("date", day.isoformat())
            .order("date", desc=True)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_goal(response.data[0])

    def create_goal(self, user_id: UUID, day: date, targets: MacroTotals) -> DailyGoal:
        """Insert a goal row, keeping any row another request wrote first."""
        response = (
            self.client.table("daily_goals")
            .upsert(
                _goal_payload(user_id, day, targets),
                on_conflict=_CONFLICT_COLUMNS,
                ignore_duplicates=True,
            )
            .execute()
        )
        if response.data:
            return _parse_goal(response.data[0])
        existing = self.get_goal(user_id, day)
        if existing is None:
            raise PersistenceError("Failed to create daily goal")
        return existing

    def upsert_goal(self, user_id: UUID, day: date, targets: MacroTotals) -> DailyGoal:
        """Insert or overwrite the goal for (user, date)."""
        response = (
            self.client.table("daily_goals")
            .upsert(_goal_payload(user_id, day, targets), on_conflict=_CONFLICT_COLUMNS)
            .execute()
        )
        if not response.data:
            raise PersistenceError("Failed to save daily goal")
        return _parse_goal(response.data[0])


def _goal_payload(user_id: UUID, day: date, targets: MacroTotals) -> dict[str, object]:
    return {
        "user_id": str(user_id),
        "date": day.isoformat(),
        "calories": targets.calories,
        "protein": targets.protein,
        "carbs": targets.carbs,
        "fat": targets.fat,
    }


def _parse_goal(row: dict[str, object]) -> DailyGoal:
    return DailyGoal(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        date=date.fromisoformat(str(row["date"])[:10]),
        calories=float(row.get("calories", 0.0)),
        protein=float(row.get("protein", 0.0)),
        carbs=float(row.get("carbs", 0.0)),
        fat=float(row.get("fat", 0.0)),
    )
