"""JSON serialization of domain objects using the API's camelCase names."""

from macro_tracker.domain.consumables import Consumable
from macro_tracker.domain.entries import FoodEntry, MacroTotals
from macro_tracker.domain.goals import DailyGoal, GoalPercentages
from macro_tracker.domain.leaderboard import LeaderboardRow
from macro_tracker.domain.models import UserRecord
from macro_tracker.services.stats import DailySummary


def serialize_user(user: UserRecord) -> dict[str, object]:
    return {
        "id": str(user.id),
        "name": user.name,
        "houseId": str(user.house_id) if user.house_id else None,
    }


def serialize_consumable(consumable: Consumable) -> dict[str, object]:
    return {
        "id": str(consumable.id),
        "name": consumable.name,
        "calories": consumable.calories,
        "protein": consumable.protein,
        "carbs": consumable.carbs,
        "fat": consumable.fat,
        "servingSize": consumable.serving_size,
        "houseId": str(consumable.house_id) if consumable.house_id else None,
        "createdAt": (
            consumable.created_at.isoformat() if consumable.created_at else None
        ),
    }


def serialize_entry(entry: FoodEntry) -> dict[str, object]:
    return {
        "id": str(entry.id),
        "userId": str(entry.user_id),
        "date": entry.date.isoformat(),
        "amount": entry.amount,
        "consumableId": str(entry.consumable_id) if entry.consumable_id else None,
        "name": entry.name,
        "calories": entry.calories,
        "protein": entry.protein,
        "carbs": entry.carbs,
        "fat": entry.fat,
        "description": entry.description,
        "imageUrl": entry.image_url,
        "createdAt": entry.created_at.isoformat() if entry.created_at else None,
    }


def serialize_goal(goal: DailyGoal | None) -> dict[str, object] | None:
    if goal is None:
        return None
    return {
        "id": str(goal.id),
        "userId": str(goal.user_id),
        "date": goal.date.isoformat(),
        "calories": goal.calories,
        "protein": goal.protein,
        "carbs": goal.carbs,
        "fat": goal.fat,
    }


def serialize_totals(totals: MacroTotals) -> dict[str, float]:
    return {
        "calories": totals.calories,
        "protein": totals.protein,
        "carbs": totals.carbs,
        "fat": totals.fat,
    }


def serialize_percentages(
    percentages: GoalPercentages | None,
) -> dict[str, float] | None:
    if percentages is None:
        return None
    return {
        "calories": percentages.calories,
        "protein": percentages.protein,
        "carbs": percentages.carbs,
        "fat": percentages.fat,
    }


def serialize_summary(summary: DailySummary) -> dict[str, object]:
    percentages = summary.goal_percentage
    return {
        "date": summary.day.isoformat(),
        "totals": serialize_totals(summary.totals),
        "goal": serialize_goal(summary.goal),
        "goalPercentage": serialize_percentages(percentages),
        "averageGoalPercentage": percentages.average if percentages else 0.0,
        "entries": [serialize_entry(entry) for entry in summary.entries],
    }


def serialize_leaderboard_row(row: LeaderboardRow) -> dict[str, object]:
    return {
        "userId": str(row.user_id),
        "userName": row.user_name,
        "totals": serialize_totals(row.totals),
        "goal": serialize_goal(row.goal),
        "goalPercentage": serialize_percentages(row.goal_percentage),
        "averageGoalPercentage": row.average_goal_percentage,
        "entriesCount": row.entries_count,
    }
