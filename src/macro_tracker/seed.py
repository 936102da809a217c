"""Seed the default household and its users."""

import logging

from macro_tracker.app_logging import configure_logging
from macro_tracker.config import Settings, parse_user_names
from macro_tracker.containers import build_container
from macro_tracker.domain.models import HouseRecord, UserRecord
from macro_tracker.services.users import UserService

_logger = logging.getLogger(__name__)


def seed_household(
    user_service: UserService, house_name: str, user_names: list[str]
) -> tuple[HouseRecord, list[UserRecord]]:
    """Create the house and users if they do not exist yet."""
    house, users = user_service.ensure_household(house_name, user_names)
    _logger.info(
        "Seeded household %s with %s users", house.name, len(users)
    )
    return house, users


def main() -> None:
    """Seed the configured household using the real Supabase project."""
    configure_logging()
    settings = Settings()
    container = build_container(settings)
    seed_household(
        container.user_service,
        settings.seed_house_name,
        parse_user_names(settings.seed_user_names),
    )
    print("House and users created successfully")


if __name__ == "__main__":
    main()
