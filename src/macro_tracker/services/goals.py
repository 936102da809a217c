"""Daily goal service with carry-forward resolution."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from macro_tracker.domain.entries import MacroTotals
from macro_tracker.domain.goals import DailyGoal
from macro_tracker.services.consumables import MACRO_FIELDS, require_number

_logger = logging.getLogger(__name__)


class GoalRepository(Protocol):
    """Persistence interface for daily goals."""

    def get_goal(self, user_id: UUID, day: date) -> DailyGoal | None:
        """Return the goal set for exactly this date, if present."""

    def get_latest_goal_before(self, user_id: UUID, day: date) -> DailyGoal | None:
        """Return the most recent goal strictly before the date, if present."""

    def create_goal(self, user_id: UUID, day: date, targets: MacroTotals) -> DailyGoal:
        """Insert a goal row for a date and return it."""

    def upsert_goal(self, user_id: UUID, day: date, targets: MacroTotals) -> DailyGoal:
        """Insert or overwrite the goal row for (user, date) and return it."""


@dataclass
class GoalService:
    """Service for reading and setting daily goals."""

    repository: GoalRepository

    def get_goal(self, user_id: UUID, day: date) -> DailyGoal | None:
        """Return the goal effective on a day.

        Without an exact match the most recent earlier goal is copied forward
        and stored for this day, so later reads hit the exact row.
        """
        goal = self.repository.get_goal(user_id, day)
        if goal is not None:
            return goal
        previous = self.repository.get_latest_goal_before(user_id, day)
        if previous is None:
            return None
        _logger.info(
            "Carrying goal forward",
            extra={
                "user_id": str(user_id),
                "from_date": previous.date.isoformat(),
                "to_date": day.isoformat(),
            },
        )
        return self.repository.create_goal(user_id, day, _targets(previous))

    def find_goal(
        self, user_id: UUID, day: date, *, carry_forward: bool = False
    ) -> DailyGoal | None:
        """Return the goal for a day without writing anything."""
        goal = self.repository.get_goal(user_id, day)
        if goal is not None or not carry_forward:
            return goal
        return self.repository.get_latest_goal_before(user_id, day)

    def set_goal(
        self, user_id: UUID, day: date, payload: dict[str, object]
    ) -> DailyGoal:
        """Create or overwrite the goal for a day."""
        values = {key: require_number(payload, key) for key in MACRO_FIELDS}
        return self.repository.upsert_goal(user_id, day, MacroTotals(**values))


def _targets(goal: DailyGoal) -> MacroTotals:
    return MacroTotals(
        calories=goal.calories,
        protein=goal.protein,
        carbs=goal.carbs,
        fat=goal.fat,
    )
