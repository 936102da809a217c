"""Food entry logging service."""

from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from macro_tracker.domain.consumables import Consumable
from macro_tracker.domain.entries import FoodEntry, MacroTotals
from macro_tracker.domain.errors import InvalidInputError, NotFoundError
from macro_tracker.services.consumables import (
    MACRO_FIELDS,
    ConsumableRepository,
    require_number,
)

UNITS = ("grams", "servings")


class FoodEntryRepository(Protocol):
    """Persistence interface for food entries."""

    def list_entries(self, user_id: UUID, day: date) -> list[FoodEntry]:
        """Return a user's entries for a day, newest first."""

    def get_entry(self, entry_id: UUID) -> FoodEntry | None:
        """Return an entry by id, if present."""

    def create_entry(self, user_id: UUID, payload: dict[str, object]) -> FoodEntry:
        """Create an entry and return it."""

    def delete_entry(self, user_id: UUID, entry_id: UUID) -> bool:
        """Delete a user's entry and report whether a row was removed."""


@dataclass
class FoodEntryService:
    """Service that snapshots macros and persists food entries."""

    repository: FoodEntryRepository
    consumable_repository: ConsumableRepository

    def list_entries(self, user_id: UUID, day: date) -> list[FoodEntry]:
        """Return the entries a user logged on a day."""
        return self.repository.list_entries(user_id, day)

    def create_entry(self, user_id: UUID, payload: dict[str, object]) -> FoodEntry:
        """Log an entry from explicit macros or from a consumable portion.

        When a consumable is referenced, macros are scaled from its per-serving
        values; any macro supplied explicitly replaces the computed one.
        """
        day = payload.get("date")
        if not isinstance(day, date):
            raise InvalidInputError("date", "Date is required")
        unit = str(payload.get("unit") or "grams")
        if unit not in UNITS:
            raise InvalidInputError("unit", "Unit must be 'grams' or 'servings'")

        raw_consumable_id = payload.get("consumable_id")
        consumable_id = _to_uuid(raw_consumable_id) if raw_consumable_id else None
        if consumable_id is not None:
            consumable = self.consumable_repository.get_consumable(consumable_id)
            if consumable is None:
                raise NotFoundError(f"Consumable {consumable_id} not found")
            amount = require_number(payload, "amount")
            grams, computed = portion_from_consumable(consumable, amount, unit)
            name = str(payload.get("name") or consumable.name)
            macros = {
                key: (
                    require_number(payload, key)
                    if payload.get(key) is not None
                    else getattr(computed, key)
                )
                for key in MACRO_FIELDS
            }
        else:
            name = str(payload.get("name") or "").strip()
            if not name:
                raise InvalidInputError("name", "Name is required")
            grams = require_number(payload, "amount")
            if unit == "servings":
                raise InvalidInputError(
                    "unit", "Servings require a consumable to size the portion"
                )
            macros = {key: require_number(payload, key) for key in MACRO_FIELDS}

        record: dict[str, object] = {
            "date": day.isoformat(),
            "amount": grams,
            "consumable_id": str(consumable_id) if consumable_id else None,
            "name": name,
            **macros,
            "description": payload.get("description") or None,
            "image_url": payload.get("image_url") or None,
        }
        return self.repository.create_entry(user_id, record)

    def duplicate_entry(
        self, user_id: UUID, entry_id: UUID, day: date | None = None
    ) -> FoodEntry:
        """Log the same food again, copying the original snapshot."""
        original = self._require_own_entry(user_id, entry_id)
        target_day = day or original.date
        record: dict[str, object] = {
            "date": target_day.isoformat(),
            "amount": original.amount,
            "consumable_id": (
                str(original.consumable_id) if original.consumable_id else None
            ),
            "name": original.name,
            "calories": original.calories,
            "protein": original.protein,
            "carbs": original.carbs,
            "fat": original.fat,
            "description": original.description,
            "image_url": original.image_url,
        }
        return self.repository.create_entry(user_id, record)

    def delete_entry(self, user_id: UUID, entry_id: UUID) -> None:
        """Delete exactly one of the user's entries."""
        if not self.repository.delete_entry(user_id, entry_id):
            raise NotFoundError(f"Food entry {entry_id} not found")

    def _require_own_entry(self, user_id: UUID, entry_id: UUID) -> FoodEntry:
        entry = self.repository.get_entry(entry_id)
        if entry is None or entry.user_id != user_id:
            raise NotFoundError(f"Food entry {entry_id} not found")
        return entry


def portion_from_consumable(
    consumable: Consumable, amount: float, unit: str = "grams"
) -> tuple[float, MacroTotals]:
    """Return grams eaten and the macros for that portion of a consumable."""
    grams = amount * consumable.serving_size if unit == "servings" else amount
    if consumable.serving_size <= 0:
        return grams, MacroTotals(0.0, 0.0, 0.0, 0.0)
    ratio = grams / consumable.serving_size
    return grams, MacroTotals(
        calories=consumable.calories * ratio,
        protein=consumable.protein * ratio,
        carbs=consumable.carbs * ratio,
        fat=consumable.fat * ratio,
    )


def _to_uuid(value: object) -> UUID:
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        raise InvalidInputError("consumableId", "Invalid consumable id") from None
