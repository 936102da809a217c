"""User-related business logic."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from macro_tracker.domain.errors import NotFoundError
from macro_tracker.domain.models import HouseRecord, UserRecord


class UserRepository(Protocol):
    """Persistence interface for users and households."""

    def list_users(self) -> list[UserRecord]:
        """Return all users ordered by name."""

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return a user by id, if present."""

    def get_user_by_name(self, name: str) -> UserRecord | None:
        """Return a user by unique name, if present."""

    def create_user(self, name: str, house_id: UUID | None) -> UserRecord:
        """Create and return a new user record."""

    def get_house_by_name(self, name: str) -> HouseRecord | None:
        """Return a house by unique name, if present."""

    def create_house(self, name: str) -> HouseRecord:
        """Create and return a new house record."""


@dataclass
class UserService:
    """Application service for user lookups and seeding."""

    repository: UserRepository

    def list_users(self) -> list[UserRecord]:
        """Return every user, ordered by name."""
        return self.repository.list_users()

    def require_user(self, user_id: UUID) -> UserRecord:
        """Return the user or raise when the id is unknown."""
        user = self.repository.get_user(user_id)
        if user is None:
            raise NotFoundError(f"User {user_id} not found")
        return user

    def ensure_household(
        self, house_name: str, user_names: list[str]
    ) -> tuple[HouseRecord, list[UserRecord]]:
        """Ensure a house and its members exist, creating what is missing."""
        house = self.repository.get_house_by_name(house_name)
        if house is None:
            house = self.repository.create_house(house_name)
        users = []
        for name in user_names:
            existing = self.repository.get_user_by_name(name)
            if existing:
                users.append(existing)
                continue
            users.append(self.repository.create_user(name, house.id))
        return house, users
