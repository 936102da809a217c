"""Domain models for logged food intake."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID


@dataclass(frozen=True)
class MacroTotals:
    """Calories and macronutrients summed over some set of foods."""

    calories: float
    protein: float
    carbs: float
    fat: float


ZERO_TOTALS = MacroTotals(calories=0.0, protein=0.0, carbs=0.0, fat=0.0)


@dataclass(frozen=True)
class FoodEntry:
    """A single logged intake event.

    Name and macro values are captured when the entry is created and are never
    recomputed from the linked consumable afterwards.
    """

    id: UUID
    user_id: UUID
    date: date
    amount: float
    name: str
    calories: float
    protein: float
    carbs: float
    fat: float
    consumable_id: UUID | None = None
    description: str | None = None
    image_url: str | None = None
    created_at: datetime | None = None
