"""Supabase repository for food entries."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from macro_tracker.domain.entries import FoodEntry
from macro_tracker.domain.errors import PersistenceError
from macro_tracker.services.food_entries import FoodEntryRepository


@dataclass
class SupabaseFoodEntryRepository(FoodEntryRepository):
    """Supabase implementation for food entries."""

    client: Client

    def list_entries(self, user_id: UUID, day: date) -> list[FoodEntry]:
        """Return a user's entries for a day, newest first."""
        response = (
            self.client.table("food_entries")
            .select("*")
            .eq("user_id", str(user_id))
            .eq("date", day.isoformat())
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_entry(row) for row in response.data or []]

    def get_entry(self, entry_id: UUID) -> FoodEntry | None:
        """Return an entry by id."""
        response = (
            self.client.table("food_entries")
            .select("*")
            .eq("id", str(entry_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_entry(response.data[0])

    def create_entry(self, user_id: UUID, payload: dict[str, object]) -> FoodEntry:
        """Create an entry row and return it."""
        response = (
            self.client.table("food_entries")
            .insert({"user_id": str(user_id), **payload})
            .execute()
        )
        if not response.data:
            raise PersistenceError("Failed to create food entry")
        return _parse_entry(response.data[0])

    def delete_entry(self, user_id: UUID, entry_id: UUID) -> bool:
        """Delete one entry owned by the user."""
        response = (
            self.client.table("food_entries")
            .delete()
            .eq("id", str(entry_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)


def _parse_entry(row: dict[str, object]) -> FoodEntry:
    created_raw = row.get("created_at")
    consumable_id = row.get("consumable_id")
    return FoodEntry(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        date=date.fromisoformat(str(row["date"])[:10]),
        amount=float(row.get("amount", 0.0)),
        name=str(row.get("name", "")),
        calories=float(row.get("calories", 0.0)),
        protein=float(row.get("protein", 0.0)),
        carbs=float(row.get("carbs", 0.0)),
        fat=float(row.get("fat", 0.0)),
        consumable_id=UUID(str(consumable_id)) if consumable_id else None,
        description=row.get("description"),
        image_url=row.get("image_url"),
        created_at=(
            datetime.fromisoformat(created_raw)
            if isinstance(created_raw, str) and created_raw
            else None
        ),
    )
