"""MealType value object - meal category of a food log entry."""

from enum import Enum


class MealType(str, Enum):
    """Meal a food log entry belongs to."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACKS = "snacks"

    def display_name(self) -> str:
        """Get display name."""
        return self.value.capitalize()

    def sort_order(self) -> int:
        """Position of the meal within a day (breakfast first)."""
        order = {
            MealType.BREAKFAST: 0,
            MealType.LUNCH: 1,
            MealType.DINNER: 2,
            MealType.SNACKS: 3,
        }
        return order[self]
