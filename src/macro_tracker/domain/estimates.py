"""Models for AI nutrition estimates."""

from pydantic import BaseModel, ConfigDict, Field


class NutritionEstimate(BaseModel):
    """Per-serving nutrition estimate returned by the language model."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = Field(min_length=1)
    calories: float = Field(ge=0, strict=True)
    protein: float = Field(default=0.0, ge=0, strict=True)
    carbs: float = Field(default=0.0, ge=0, strict=True)
    fat: float = Field(default=0.0, ge=0, strict=True)
    serving_size: float | None = Field(
        default=None, alias="servingSize", ge=0, strict=True
    )
