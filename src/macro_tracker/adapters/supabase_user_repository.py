"""Supabase-backed user and household repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from macro_tracker.domain.errors import PersistenceError
from macro_tracker.domain.models import HouseRecord, UserRecord
from macro_tracker.services.users import UserRepository


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def list_users(self) -> list[UserRecord]:
        """Return all users ordered by name."""
        response = (
            self.client.table("users")
            .select("id, name, house_id")
            .order("name", desc=False)
            .execute()
        )
        return [_parse_user(row) for row in response.data or []]

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return a user by id, if present."""
        response = (
            self.client.table("users")
            .select("id, name, house_id")
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_user(response.data[0])

    def get_user_by_name(self, name: str) -> UserRecord | None:
        """Return a user by name, if present."""
        response = (
            self.client.table("users")
            .select("id, name, house_id")
            .eq("name", name)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_user(response.data[0])

    def create_user(self, name: str, house_id: UUID | None) -> UserRecord:
        """Create a new user row and return it."""
        response = (
            self.client.table("users")
            .insert({"name": name, "house_id": str(house_id) if house_id else None})
            .execute()
        )
        if not response.data:
            raise PersistenceError("Failed to create user")
        return _parse_user(response.data[0])

    def get_house_by_name(self, name: str) -> HouseRecord | None:
        """Return a house by name, if present."""
        response = (
            self.client.table("houses")
            .select("id, name")
            .eq("name", name)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return HouseRecord(id=UUID(row["id"]), name=str(row["name"]))

    def create_house(self, name: str) -> HouseRecord:
        """Create a new house row and return it."""
        response = self.client.table("houses").insert({"name": name}).execute()
        if not response.data:
            raise PersistenceError("Failed to create house")
        row = response.data[0]
        return HouseRecord(id=UUID(row["id"]), name=str(row["name"]))


def _parse_user(row: dict[str, object]) -> UserRecord:
    house_id = row.get("house_id")
    return UserRecord(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        house_id=UUID(str(house_id)) if house_id else None,
    )
