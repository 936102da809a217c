"""Supabase implementation for the consumable food database."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from macro_tracker.domain.consumables import Consumable
from macro_tracker.domain.errors import PersistenceError
from macro_tracker.services.consumables import ConsumableRepository


@dataclass
class SupabaseConsumableRepository(ConsumableRepository):
    """Supabase-backed repository for consumables."""

    client: Client

    def list_consumables(self, house_id: UUID | None) -> list[Consumable]:
        """Return consumables newest first, optionally for one house.

        A house also sees consumables that were created without one.
        """
        query = self.client.table("consumables").select("*")
        if house_id is not None:
            query = query.or_(f"house_id.eq.{house_id},house_id.is.null")
        response = query.order("created_at", desc=True).execute()
        return [_parse_consumable(row) for row in response.data or []]

    def get_consumable(self, consumable_id: UUID) -> Consumable | None:
        """Return a consumable by id, if present."""
        response = (
            self.client.table("consumables")
            .select("*")
            .eq("id", str(consumable_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_consumable(response.data[0])

    def create_consumable(self, payload: dict[str, object]) -> Consumable:
        """Create a consumable and return it."""
        response = self.client.table("consumables").insert(payload).execute()
        if not response.data:
            raise PersistenceError("Failed to create consumable")
        return _parse_consumable(response.data[0])

    def update_consumable(
        self, consumable_id: UUID, payload: dict[str, object]
    ) -> Consumable | None:
        """Update a consumable and return it."""
        response = (
            self.client.table("consumables")
            .update(payload)
            .eq("id", str(consumable_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_consumable(response.data[0])

    def delete_consumable(self, consumable_id: UUID) -> bool:
        """Delete a consumable row."""
        response = (
            self.client.table("consumables")
            .delete()
            .eq("id", str(consumable_id))
            .execute()
        )
        return bool(response.data)


def _parse_consumable(row: dict[str, object]) -> Consumable:
    """Parse a consumable row into a domain model."""
    created_raw = row.get("created_at")
    house_id = row.get("house_id")
    return Consumable(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        calories=float(row.get("calories", 0.0)),
        protein=float(row.get("protein", 0.0)),
        carbs=float(row.get("carbs", 0.0)),
        fat=float(row.get("fat", 0.0)),
        serving_size=float(row.get("serving_size", 0.0)),
        house_id=UUID(str(house_id)) if house_id else None,
        created_at=(
            datetime.fromisoformat(created_raw)
            if isinstance(created_raw, str) and created_raw
            else None
        ),
    )
