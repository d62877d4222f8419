"""NutritionGoal value object - user's nutritional objective."""

from enum import Enum
from typing import Tuple


class NutritionGoal(str, Enum):
    """User's nutritional goal determining calorie adjustment.

    - CUT: Weight loss with calorie deficit (-500 kcal/day)
    - MAINTAIN: Weight maintenance at TDEE
    - BULK: Weight gain with calorie surplus (+300 kcal/day)
    """

    CUT = "cut"
    MAINTAIN = "maintain"
    BULK = "bulk"

    @property
    def calorie_adjustment(self) -> float:
        """Get kcal/day added to TDEE for this goal.

        Example:
            >>> NutritionGoal.CUT.calorie_adjustment
            -500.0
        """
        adjustments = {
            NutritionGoal.CUT: -500.0,
            NutritionGoal.MAINTAIN: 0.0,
            NutritionGoal.BULK: 300.0,
        }
        return adjustments[self]

    def macro_distribution(self) -> Tuple[float, float, float]:
        """Get (protein, carbohydrates, fat) share of daily calories.

        Returns:
            Tuple[float, float, float]: Fractions summing to 1.0
        """
        distributions = {
            NutritionGoal.CUT: (0.35, 0.40, 0.25),  # muscle preservation
            NutritionGoal.MAINTAIN: (0.25, 0.45, 0.30),
            NutritionGoal.BULK: (0.20, 0.55, 0.25),  # carbs for training
        }
        return distributions[self]

    def display_name(self) -> str:
        """Get display name."""
        names = {
            NutritionGoal.CUT: "Cut (Lose Weight)",
            NutritionGoal.MAINTAIN: "Maintain Weight",
            NutritionGoal.BULK: "Bulk (Gain Weight)",
        }
        return names[self]

    def description(self) -> str:
        """Get human-readable description."""
        descriptions = {
            NutritionGoal.CUT: "500 calorie deficit for weight loss",
            NutritionGoal.MAINTAIN: "Maintain current weight",
            NutritionGoal.BULK: "300 calorie surplus for weight gain",
        }
        return descriptions[self]
