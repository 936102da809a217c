"""Pydantic request models for the JSON API."""

import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class _Request(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ConsumableRequest(_Request):
    """Create or replace a consumable."""

    name: str
    calories: float
    protein: float
    carbs: float
    fat: float
    serving_size: float = Field(alias="servingSize")


class FoodEntryRequest(_Request):
    """Log food eaten on a date.

    Either ``name`` with all four macros, or ``consumableId`` with an amount.
    """

    date: datetime.date
    amount: float | None = None
    unit: Literal["grams", "servings"] = "grams"
    consumable_id: UUID | None = Field(default=None, alias="consumableId")
    name: str | None = None
    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
    description: str | None = None
    image_url: str | None = Field(default=None, alias="imageUrl")


class DuplicateEntryRequest(_Request):
    """Copy an entry, optionally onto another date."""

    date: datetime.date | None = None


class DailyGoalRequest(_Request):
    """Set the goal for a date."""

    date: datetime.date
    calories: float
    protein: float
    carbs: float
    fat: float


class AnalyzeFoodRequest(_Request):
    """Photo and/or description to estimate."""

    image_base64: str | None = Field(default=None, alias="imageBase64")
    description: str | None = None


class AnalyzeLabelRequest(_Request):
    """Photo of a nutrition label."""

    image_base64: str | None = Field(default=None, alias="imageBase64")
