"""Tests for daily goal resolution."""

from datetime import date
from uuid import uuid4

import pytest

from macro_tracker.domain.errors import InvalidInputError
from macro_tracker.services.goals import GoalService
from tests.conftest import InMemoryGoalRepository

TARGETS = {"calories": 2000, "protein": 150, "carbs": 200, "fat": 70}


def test_get_goal_returns_exact_match(goal_repository: InMemoryGoalRepository) -> None:
    service = GoalService(goal_repository)
    user_id = uuid4()
    created = service.set_goal(user_id, date(2024, 1, 1), TARGETS)

    assert service.get_goal(user_id, date(2024, 1, 1)) == created


def test_get_goal_carries_latest_earlier_goal_forward(
    goal_repository: InMemoryGoalRepository,
) -> None:
    service = GoalService(goal_repository)
    user_id = uuid4()
    service.set_goal(user_id, date(2024, 1, 1), TARGETS)
    service.set_goal(user_id, date(2024, 1, 3), {**TARGETS, "calories": 1800})

    goal = service.get_goal(user_id, date(2024, 1, 5))

    assert goal is not None
    assert goal.date == date(2024, 1, 5)
    assert goal.calories == 1800
    assert (user_id, date(2024, 1, 5)) in goal_repository.goals


def test_carried_goal_is_stored_once(goal_repository: InMemoryGoalRepository) -> None:
    service = GoalService(goal_repository)
    user_id = uuid4()
    service.set_goal(user_id, date(2024, 1, 1), TARGETS)

    first = service.get_goal(user_id, date(2024, 1, 5))
    second = service.get_goal(user_id, date(2024, 1, 5))

    assert first == second
    assert len(goal_repository.goals) == 2


def test_get_goal_ignores_later_goals(goal_repository: InMemoryGoalRepository) -> None:
    service = GoalService(goal_repository)
    user_id = uuid4()
    service.set_goal(user_id, date(2024, 1, 10), TARGETS)

    assert service.get_goal(user_id, date(2024, 1, 5)) is None
    assert len(goal_repository.goals) == 1


def test_get_goal_does_not_borrow_other_users_goals(
    goal_repository: InMemoryGoalRepository,
) -> None:
    service = GoalService(goal_repository)
    service.set_goal(uuid4(), date(2024, 1, 1), TARGETS)

    assert service.get_goal(uuid4(), date(2024, 1, 5)) is None


def test_set_goal_overwrites_same_date(goal_repository: InMemoryGoalRepository) -> None:
    service = GoalService(goal_repository)
    user_id = uuid4()
    first = service.set_goal(user_id, date(2024, 1, 1), TARGETS)
    second = service.set_goal(user_id, date(2024, 1, 1), {**TARGETS, "fat": 60})

    assert len(goal_repository.goals) == 1
    assert second.id == first.id
    assert second.fat == 60


def test_set_goal_rejects_negative_values(
    goal_repository: InMemoryGoalRepository,
) -> None:
    service = GoalService(goal_repository)

    with pytest.raises(InvalidInputError) as excinfo:
        service.set_goal(uuid4(), date(2024, 1, 1), {**TARGETS, "protein": -1})

    assert excinfo.value.field == "protein"
    assert not goal_repository.goals


def test_find_goal_never_writes(goal_repository: InMemoryGoalRepository) -> None:
    service = GoalService(goal_repository)
    user_id = uuid4()
    service.set_goal(user_id, date(2024, 1, 1), TARGETS)

    assert service.find_goal(user_id, date(2024, 1, 5)) is None
    carried = service.find_goal(user_id, date(2024, 1, 5), carry_forward=True)

    assert carried is not None
    assert carried.date == date(2024, 1, 1)
    assert len(goal_repository.goals) == 1
