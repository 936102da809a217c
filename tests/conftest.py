"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import UTC, date, datetime
from uuid import UUID, uuid4

import pytest

from macro_tracker.config import Settings
from macro_tracker.containers import AppContainer
from macro_tracker.domain.consumables import Consumable
from macro_tracker.domain.entries import FoodEntry, MacroTotals
from macro_tracker.domain.goals import DailyGoal
from macro_tracker.domain.models import HouseRecord, UserRecord
from macro_tracker.services.consumables import ConsumableRepository, ConsumableService
from macro_tracker.services.estimation import EstimationClient, EstimationService
from macro_tracker.services.food_entries import FoodEntryRepository, FoodEntryService
from macro_tracker.services.goals import GoalRepository, GoalService
from macro_tracker.services.leaderboard import LeaderboardService
from macro_tracker.services.stats import StatsService
from macro_tracker.services.users import UserRepository, UserService


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user and house repository for tests."""

    users: dict[UUID, UserRecord] = field(default_factory=dict)
    houses: dict[UUID, HouseRecord] = field(default_factory=dict)

    def add_user(self, name: str, house_id: UUID | None = None) -> UserRecord:
        return self.create_user(name, house_id)

    def list_users(self) -> list[UserRecord]:
        return sorted(self.users.values(), key=lambda user: user.name)

    def get_user(self, user_id: UUID) -> UserRecord | None:
        return self.users.get(user_id)

    def get_user_by_name(self, name: str) -> UserRecord | None:
        return next((u for u in self.users.values() if u.name == name), None)

    def create_user(self, name: str, house_id: UUID | None) -> UserRecord:
        user = UserRecord(id=uuid4(), name=name, house_id=house_id)
        self.users[user.id] = user
        return user

    def get_house_by_name(self, name: str) -> HouseRecord | None:
        return next((h for h in self.houses.values() if h.name == name), None)

    def create_house(self, name: str) -> HouseRecord:
        house = HouseRecord(id=uuid4(), name=name)
        self.houses[house.id] = house
        return house


@dataclass
class InMemoryConsumableRepository(ConsumableRepository):
    """In-memory consumable repository for tests."""

    consumables: dict[UUID, Consumable] = field(default_factory=dict)

    def list_consumables(self, house_id: UUID | None) -> list[Consumable]:
        items = [
            item
            for item in self.consumables.values()
            if house_id is None or item.house_id in (house_id, None)
        ]
        return list(reversed(items))

    def get_consumable(self, consumable_id: UUID) -> Consumable | None:
        return self.consumables.get(consumable_id)

    def create_consumable(self, payload: dict[str, object]) -> Consumable:
        house_id = payload.get("house_id")
        consumable = Consumable(
            id=uuid4(),
            name=str(payload["name"]),
            calories=float(payload["calories"]),
            protein=float(payload["protein"]),
            carbs=float(payload["carbs"]),
            fat=float(payload["fat"]),
            serving_size=float(payload["serving_size"]),
            house_id=UUID(str(house_id)) if house_id else None,
            created_at=datetime.now(UTC),
        )
        self.consumables[consumable.id] = consumable
        return consumable

    def update_consumable(
        self, consumable_id: UUID, payload: dict[str, object]
    ) -> Consumable | None:
        existing = self.consumables.get(consumable_id)
        if existing is None:
            return None
        updated = replace(existing, **payload)
        self.consumables[consumable_id] = updated
        return updated

    def delete_consumable(self, consumable_id: UUID) -> bool:
        return self.consumables.pop(consumable_id, None) is not None


@dataclass
class InMemoryFoodEntryRepository(FoodEntryRepository):
    """In-memory food entry repository for tests."""

    entries: dict[UUID, FoodEntry] = field(default_factory=dict)

    def list_entries(self, user_id: UUID, day: date) -> list[FoodEntry]:
        matching = [
            entry
            for entry in self.entries.values()
            if entry.user_id == user_id and entry.date == day
        ]
        return list(reversed(matching))

    def get_entry(self, entry_id: UUID) -> FoodEntry | None:
        return self.entries.get(entry_id)

    def create_entry(self, user_id: UUID, payload: dict[str, object]) -> FoodEntry:
        consumable_id = payload.get("consumable_id")
        entry = FoodEntry(
            id=uuid4(),
            user_id=user_id,
            date=date.fromisoformat(str(payload["date"])),
            amount=float(payload["amount"]),
            name=str(payload["name"]),
            calories=float(payload["calories"]),
            protein=float(payload["protein"]),
            carbs=float(payload["carbs"]),
            fat=float(payload["fat"]),
            consumable_id=UUID(str(consumable_id)) if consumable_id else None,
            description=payload.get("description"),
            image_url=payload.get("image_url"),
            created_at=datetime.now(UTC),
        )
        self.entries[entry.id] = entry
        return entry

    def delete_entry(self, user_id: UUID, entry_id: UUID) -> bool:
        entry = self.entries.get(entry_id)
        if entry is None or entry.user_id != user_id:
            return False
        del self.entries[entry_id]
        return True


@dataclass
class InMemoryGoalRepository(GoalRepository):
    """In-memory daily goal repository keyed by (user, date)."""

    goals: dict[tuple[UUID, date], DailyGoal] = field(default_factory=dict)

    def get_goal(self, user_id: UUID, day: date) -> DailyGoal | None:
        return self.goals.get((user_id, day))

    def get_latest_goal_before(self, user_id: UUID, day: date) -> DailyGoal | None:
        earlier = [
            goal
            for (owner, goal_day), goal in self.goals.items()
            if owner == user_id and goal_day < day
        ]
        return max(earlier, key=lambda goal: goal.date, default=None)

    def create_goal(self, user_id: UUID, day: date, targets: MacroTotals) -> DailyGoal:
        existing = self.goals.get((user_id, day))
        if existing is not None:
            return existing
        return self.upsert_goal(user_id, day, targets)

    def upsert_goal(self, user_id: UUID, day: date, targets: MacroTotals) -> DailyGoal:
        existing = self.goals.get((user_id, day))
        goal = DailyGoal(
            id=existing.id if existing else uuid4(),
            user_id=user_id,
            date=day,
            calories=targets.calories,
            protein=targets.protein,
            carbs=targets.carbs,
            fat=targets.fat,
        )
        self.goals[(user_id, day)] = goal
        return goal


@dataclass
class FakeEstimationClient(EstimationClient):
    """Fake model client returning a canned reply."""

    reply: str = (
        '{"name": "Grilled chicken", "calories": 240, "protein": 40, '
        '"carbs": 0, "fat": 8, "servingSize": 150}'
    )
    error: Exception | None = None
    calls: list[dict[str, object]] = field(default_factory=list)

    async def complete(
        self,
        *,
        model: str,
        messages: list[dict[str, object]],
        max_tokens: int,
    ) -> str:
        self.calls.append(
            {"model": model, "messages": messages, "max_tokens": max_tokens}
        )
        if self.error is not None:
            raise self.error
        return self.reply


def make_entry_payload(day: date, **overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "date": day,
        "name": "Oats",
        "amount": 50,
        "calories": 190,
        "protein": 7,
        "carbs": 33,
        "fat": 3.5,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        openai_api_key="openai-key",
        environment="test",
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def consumable_repository() -> InMemoryConsumableRepository:
    return InMemoryConsumableRepository()


@pytest.fixture
def entry_repository() -> InMemoryFoodEntryRepository:
    return InMemoryFoodEntryRepository()


@pytest.fixture
def goal_repository() -> InMemoryGoalRepository:
    return InMemoryGoalRepository()


@pytest.fixture
def estimation_client() -> FakeEstimationClient:
    return FakeEstimationClient()


@pytest.fixture
def container(
    settings: Settings,
    user_repository: InMemoryUserRepository,
    consumable_repository: InMemoryConsumableRepository,
    entry_repository: InMemoryFoodEntryRepository,
    goal_repository: InMemoryGoalRepository,
    estimation_client: FakeEstimationClient,
) -> AppContainer:
    goal_service = GoalService(goal_repository)

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        user_service=UserService(user_repository),
        consumable_service=ConsumableService(consumable_repository),
        food_entry_service=FoodEntryService(
            repository=entry_repository,
            consumable_repository=consumable_repository,
        ),
        goal_service=goal_service,
        stats_service=StatsService(
            entry_repository=entry_repository,
            goal_service=goal_service,
        ),
        leaderboard_service=LeaderboardService(
            user_repository=user_repository,
            entry_repository=entry_repository,
            goal_service=goal_service,
            carry_forward_goals=settings.leaderboard_carry_forward_goals,
        ),
        estimation_service=EstimationService(
            client=estimation_client,
            model=settings.openai_model,
            max_tokens=settings.openai_max_tokens,
        ),
        close_resources=close_resources,
    )
