"""ActivityLevel value object - physical activity level for TDEE."""

from enum import Enum


class ActivityLevel(str, Enum):
    """Physical Activity Level (PAL) for TDEE calculation.

    Represents user's habitual activity level to multiply BMR:
    - SEDENTARY: Little or no exercise
    - LIGHTLY_ACTIVE: Light exercise 1-3 days/week
    - MODERATELY_ACTIVE: Moderate exercise 3-5 days/week
    - VERY_ACTIVE: Hard exercise 6-7 days/week
    - EXTREMELY_ACTIVE: Very hard exercise, physical job
    """

    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightly_active"
    MODERATELY_ACTIVE = "moderately_active"
    VERY_ACTIVE = "very_active"
    EXTREMELY_ACTIVE = "extremely_active"

    @property
    def multiplier(self) -> float:
        """Get PAL multiplier applied to BMR.

        Returns:
            float: Multiplier for BMR to calculate TDEE

        Example:
            >>> ActivityLevel.MODERATELY_ACTIVE.multiplier
            1.55
        """
        multipliers = {
            ActivityLevel.SEDENTARY: 1.2,
            ActivityLevel.LIGHTLY_ACTIVE: 1.375,
            ActivityLevel.MODERATELY_ACTIVE: 1.55,
            ActivityLevel.VERY_ACTIVE: 1.725,
            ActivityLevel.EXTREMELY_ACTIVE: 1.9,
        }
        return multipliers[self]

    def display_name(self) -> str:
        """Get short display name."""
        names = {
            ActivityLevel.SEDENTARY: "Sedentary",
            ActivityLevel.LIGHTLY_ACTIVE: "Lightly Active",
            ActivityLevel.MODERATELY_ACTIVE: "Moderately Active",
            ActivityLevel.VERY_ACTIVE: "Very Active",
            ActivityLevel.EXTREMELY_ACTIVE: "Extremely Active",
        }
        return names[self]

    def description(self) -> str:
        """Get human-readable description.

        Returns:
            str: Activity level description
        """
        descriptions = {
            ActivityLevel.SEDENTARY: "Little or no exercise",
            ActivityLevel.LIGHTLY_ACTIVE: "Light exercise 1-3 days/week",
            ActivityLevel.MODERATELY_ACTIVE: "Moderate exercise 3-5 days/week",
            ActivityLevel.VERY_ACTIVE: "Hard exercise 6-7 days/week",
            ActivityLevel.EXTREMELY_ACTIVE: "Very hard exercise, physical job",
        }
        return descriptions[self]
