"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from macro_tracker.adapters.openai_chat_client import OpenAIChatClient
from macro_tracker.adapters.supabase_consumable_repository import (
    SupabaseConsumableRepository,
)
from macro_tracker.adapters.supabase_food_entry_repository import (
    SupabaseFoodEntryRepository,
)
from macro_tracker.adapters.supabase_goal_repository import SupabaseGoalRepository
from macro_tracker.adapters.supabase_user_repository import SupabaseUserRepository
from macro_tracker.config import Settings
from macro_tracker.services.consumables import ConsumableService
from macro_tracker.services.estimation import EstimationService
from macro_tracker.services.food_entries import FoodEntryService
from macro_tracker.services.goals import GoalService
from macro_tracker.services.leaderboard import LeaderboardService
from macro_tracker.services.stats import StatsService
from macro_tracker.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    consumable_service: ConsumableService
    food_entry_service: FoodEntryService
    goal_service: GoalService
    stats_service: StatsService
    leaderboard_service: LeaderboardService
    estimation_service: EstimationService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(supabase_client)
    consumable_repository = SupabaseConsumableRepository(supabase_client)
    entry_repository = SupabaseFoodEntryRepository(supabase_client)
    goal_repository = SupabaseGoalRepository(supabase_client)

    goal_service = GoalService(goal_repository)
    openai_client = OpenAIChatClient.create(resolved_settings.openai_api_key)
    estimation_service = EstimationService(
        client=openai_client,
        model=resolved_settings.openai_model,
        max_tokens=resolved_settings.openai_max_tokens,
    )

    async def close_resources() -> None:
        await openai_client.close()

    return AppContainer(
        settings=resolved_settings,
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
            carry_forward_goals=resolved_settings.leaderboard_carry_forward_goals,
        ),
        estimation_service=estimation_service,
        close_resources=close_resources,
    )
