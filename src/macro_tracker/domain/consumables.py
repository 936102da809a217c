"""Domain models for the shared food database."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class Consumable:
    """Reusable food definition with macros per serving."""

    id: UUID
    name: str
    calories: float
    protein: float
    carbs: float
    fat: float
    serving_size: float
    house_id: UUID | None = None
    created_at: datetime | None = None
