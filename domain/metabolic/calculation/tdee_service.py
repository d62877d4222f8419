"""TDEEService - Total Daily Energy Expenditure calculation."""

from ..core.ports.calculators import ITDEECalculator
from ..core.value_objects.activity_level import ActivityLevel


class TDEEService(ITDEECalculator):
    """Calculate Total Daily Energy Expenditure.

    Formula:
        TDEE = BMR × PAL

    PAL Multipliers:
        - Sedentary: 1.2
        - Lightly active: 1.375
        - Moderately active: 1.55
        - Very active: 1.725
        - Extremely active: 1.9
    """

    def calculate(self, bmr: float, activity_level: ActivityLevel) -> float:
        """Calculate TDEE from BMR and activity level.

        Args:
            bmr: Basal metabolic rate in kcal/day
            activity_level: Physical activity level

        Returns:
            float: TDEE in kcal/day

        Example:
            >>> TDEEService().calculate(1800.0, ActivityLevel.MODERATELY_ACTIVE)
            2790.0
        """
        return bmr * activity_level.multiplier
