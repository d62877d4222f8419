"""TargetsService - goal-based daily nutrition targets."""

from typing import Optional

from ..core.value_objects.activity_level import ActivityLevel
from ..core.value_objects.nutrition_goal import NutritionGoal
from ..core.value_objects.nutrition_targets import NutritionTargets
from ..core.value_objects.physical_data import UserPhysicalData

PROTEIN_KCAL_PER_G = 4
CARBS_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9


class TargetsService:
    """Derive daily calorie and macro targets from TDEE.

    Daily calories are TDEE plus the goal adjustment. Calories are then
    split by the goal's protein/carbs/fat percentages:

        Cut:      35% / 40% / 25%
        Maintain: 25% / 45% / 30%
        Bulk:     20% / 55% / 25%
    """

    def calculate(
        self,
        bmr: float,
        tdee: float,
        activity_level: ActivityLevel,
        goal: NutritionGoal,
        physical_data: Optional[UserPhysicalData] = None,
        user_id: str = "default",
    ) -> NutritionTargets:
        """Calculate nutrition targets.

        Args:
            bmr: Basal metabolic rate in kcal/day
            tdee: Total daily energy expenditure in kcal/day
            activity_level: Activity level TDEE was computed with
            goal: Nutritional goal
            physical_data: Measurements to snapshot on the targets
            user_id: Owner of the targets

        Returns:
            NutritionTargets: New targets stamped with the current time

        Example:
            >>> targets = TargetsService().calculate(
            ...     bmr=1600.0,
            ...     tdee=2000.0,
            ...     activity_level=ActivityLevel.SEDENTARY,
            ...     goal=NutritionGoal.MAINTAIN,
            ... )
            >>> targets.daily_protein
            125.0
        """
        calories = tdee + goal.calorie_adjustment
        protein_share, carbs_share, fat_share = goal.macro_distribution()
        data = physical_data or UserPhysicalData()

        return NutritionTargets(
            daily_calories=calories,
            daily_protein=calories * protein_share / PROTEIN_KCAL_PER_G,
            daily_carbohydrates=calories * carbs_share / CARBS_KCAL_PER_G,
            daily_fat=calories * fat_share / FAT_KCAL_PER_G,
            activity_level=activity_level,
            goal=goal,
            bmr=bmr,
            tdee=tdee,
            weight=data.weight,
            height=data.height,
            age=data.age,
            biological_sex=data.biological_sex,
            user_id=user_id,
        )
