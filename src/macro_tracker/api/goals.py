"""Daily goal, summary and leaderboard endpoints."""

from datetime import date

from fastapi import APIRouter, Depends

from macro_tracker.api.dependencies import get_container, require_date, require_user
from macro_tracker.api.models import DailyGoalRequest
from macro_tracker.api.serializers import (
    serialize_goal,
    serialize_leaderboard_row,
    serialize_summary,
)
from macro_tracker.containers import AppContainer
from macro_tracker.domain.models import UserRecord

router = APIRouter(prefix="/api", tags=["goals"])


@router.get("/daily-goal")
async def get_daily_goal(
    user: UserRecord = Depends(require_user),
    day: date = Depends(require_date),
    container: AppContainer = Depends(get_container),
) -> dict[str, object] | None:
    """Return the goal effective on a date, carrying earlier goals forward."""
    return serialize_goal(container.goal_service.get_goal(user.id, day))


@router.post("/daily-goal")
async def set_daily_goal(
    body: DailyGoalRequest,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object] | None:
    """Create or overwrite the goal for a date."""
    goal = container.goal_service.set_goal(
        user.id, body.date, body.model_dump(exclude={"date"})
    )
    return serialize_goal(goal)


@router.get("/summary")
async def get_summary(
    user: UserRecord = Depends(require_user),
    day: date = Depends(require_date),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the caller's totals and goal progress for a date."""
    summary = container.stats_service.get_daily_summary(user.id, day)
    return serialize_summary(summary)


@router.get("/leaderboard")
async def get_leaderboard(
    day: date = Depends(require_date),
    container: AppContainer = Depends(get_container),
) -> list[dict[str, object]]:
    """Return every user ranked by average goal completion."""
    rows = container.leaderboard_service.rank(day)
    return [serialize_leaderboard_row(row) for row in rows]
