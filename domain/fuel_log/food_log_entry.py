"""
Food log entry.

External data shape written to the health data store as nutrition
samples. Immutable, validated with pydantic.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .meal_type import MealType

# Allowed relative gap between macro calories and stated calories
MACRO_TOLERANCE = 0.1


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class FoodLogEntry(BaseModel):
    """
    A logged food item with its nutrition values.

    Calories are kcal, macros are grams. Entries without barcode or
    custom food reference are quick-add entries.

    Example:
        >>> entry = FoodLogEntry(
        ...     name="Oatmeal",
        ...     calories=150,
        ...     protein=5,
        ...     carbohydrates=27,
        ...     fat=3,
        ...     meal_type=MealType.BREAKFAST,
        ... )
        >>> entry.formatted_serving
        '1 serving'
    """

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    timestamp: datetime = Field(default_factory=_utc_now)
    name: str = Field(..., min_length=1, description="Food name")
    calories: float = Field(..., ge=0, description="Energy in kcal")
    protein: float = Field(..., ge=0, description="Protein in grams")
    carbohydrates: float = Field(..., ge=0, description="Carbohydrates in grams")
    fat: float = Field(..., ge=0, description="Fat in grams")
    meal_type: MealType
    serving_size: float = Field(default=1.0, gt=0)
    serving_unit: str = Field(default="serving", min_length=1)
    barcode: Optional[str] = None
    custom_food_id: Optional[UUID] = None

    @field_validator("name")
    @classmethod
    def not_blank(cls, v: str) -> str:
        """Ensure name is not whitespace only."""
        if not v.strip():
            raise ValueError("Food name cannot be empty or whitespace")
        return v.strip()

    @property
    def total_macro_calories(self) -> float:
        """Calories from macros (protein×4 + carbs×4 + fat×9)."""
        return self.protein * 4 + self.carbohydrates * 4 + self.fat * 9

    @property
    def is_quick_add(self) -> bool:
        """True when the entry references no barcode or custom food."""
        return self.custom_food_id is None and self.barcode is None

    @property
    def has_valid_macros(self) -> bool:
        """True when macro calories are within 10% of stated calories."""
        if self.calories <= 0:
            return False
        difference = abs(self.calories - self.total_macro_calories)
        return difference / self.calories <= MACRO_TOLERANCE

    @property
    def formatted_serving(self) -> str:
        """Serving size with unit, e.g. '1 serving', '2 cups', '1.5 cups'."""
        if self.serving_size == 1.0:
            return f"1 {self.serving_unit}"
        if self.serving_size.is_integer():
            return f"{int(self.serving_size)} {self.serving_unit}"
        return f"{self.serving_size:.1f} {self.serving_unit}"
