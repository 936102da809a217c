"""Services for the shared consumable food database."""

import math
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from macro_tracker.domain.consumables import Consumable
from macro_tracker.domain.errors import InvalidInputError, NotFoundError

MACRO_FIELDS = ("calories", "protein", "carbs", "fat")


class ConsumableRepository(Protocol):
    """Persistence interface for consumables."""

    def list_consumables(self, house_id: UUID | None) -> list[Consumable]:
        """Return consumables newest first, a house's own plus unowned ones."""

    def get_consumable(self, consumable_id: UUID) -> Consumable | None:
        """Return a consumable by id, if present."""

    def create_consumable(self, payload: dict[str, object]) -> Consumable:
        """Create a consumable and return it."""

    def update_consumable(
        self, consumable_id: UUID, payload: dict[str, object]
    ) -> Consumable | None:
        """Update a consumable and return it, or None when it does not exist."""

    def delete_consumable(self, consumable_id: UUID) -> bool:
        """Delete a consumable and report whether a row was removed."""


@dataclass
class ConsumableService:
    """Application service for consumable CRUD."""

    repository: ConsumableRepository

    def list_consumables(self, house_id: UUID | None = None) -> list[Consumable]:
        """Return consumables visible to a house (all when house is unknown)."""
        return self.repository.list_consumables(house_id)

    def get_consumable(self, consumable_id: UUID) -> Consumable:
        """Return a consumable or raise when it does not exist."""
        consumable = self.repository.get_consumable(consumable_id)
        if consumable is None:
            raise NotFoundError(f"Consumable {consumable_id} not found")
        return consumable

    def create_consumable(
        self, payload: dict[str, object], house_id: UUID | None = None
    ) -> Consumable:
        """Validate and persist a new consumable."""
        cleaned = _validate_payload(payload)
        if house_id is not None:
            cleaned["house_id"] = str(house_id)
        return self.repository.create_consumable(cleaned)

    def update_consumable(
        self, consumable_id: UUID, payload: dict[str, object]
    ) -> Consumable:
        """Replace the name, macros and serving size of a consumable.

        Food entries logged from this consumable keep their own snapshot values.
        """
        cleaned = _validate_payload(payload)
        updated = self.repository.update_consumable(consumable_id, cleaned)
        if updated is None:
            raise NotFoundError(f"Consumable {consumable_id} not found")
        return updated

    def delete_consumable(self, consumable_id: UUID) -> None:
        """Delete a consumable."""
        if not self.repository.delete_consumable(consumable_id):
            raise NotFoundError(f"Consumable {consumable_id} not found")


def _validate_payload(payload: dict[str, object]) -> dict[str, object]:
    name = str(payload.get("name") or "").strip()
    if not name:
        raise InvalidInputError("name", "Name is required")
    cleaned: dict[str, object] = {"name": name}
    for key in MACRO_FIELDS:
        cleaned[key] = require_number(payload, key)
    serving_size = require_number(payload, "serving_size", field="servingSize")
    if serving_size <= 0:
        raise InvalidInputError("servingSize", "Serving size must be greater than 0")
    cleaned["serving_size"] = serving_size
    return cleaned


def require_number(
    payload: dict[str, object], key: str, field: str | None = None
) -> float:
    """Return a finite, non-negative number from a payload or raise."""
    field_name = field or key
    value = payload.get(key)
    if value is None or value == "":
        raise InvalidInputError(field_name, f"{field_name} is required")
    if isinstance(value, bool):
        raise InvalidInputError(field_name, f"{field_name} must be a number")
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise InvalidInputError(field_name, f"{field_name} must be a number") from None
    if not math.isfinite(number):
        raise InvalidInputError(field_name, f"{field_name} must be a number")
    if number < 0:
        raise InvalidInputError(field_name, f"{field_name} must not be negative")
    return number
