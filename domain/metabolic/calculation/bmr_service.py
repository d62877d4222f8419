"""BMRService - Basal Metabolic Rate calculation."""

from typing import Optional

from ..core.ports.calculators import IBMRCalculator
from ..core.value_objects.biological_sex import BiologicalSex
from ..core.value_objects.physical_data import UserPhysicalData

# Lower bound for any estimate, in kcal/day
MIN_BMR = 1000.0


class BMRService(IBMRCalculator):
    """Calculate Basal Metabolic Rate using Mifflin-St Jeor equation.

    Formula:
        Men:   BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age + 5
        Women: BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age - 161
        Other/unspecified: average of both

    The result is floored at 1000 kcal/day. The calculation is total over
    real inputs and has no side effects.

    References:
        Mifflin MD, St Jeor ST, Hill LA, et al. A new predictive equation
        for resting energy expenditure in healthy individuals.
        Am J Clin Nutr. 1990;51(2):241-247.
    """

    def calculate(
        self,
        weight: float,
        height: float,
        age: int,
        sex: BiologicalSex,
    ) -> float:
        """Calculate BMR from biometric data.

        Args:
            weight: Body weight in kg
            height: Height in cm
            age: Age in years
            sex: Biological sex category

        Returns:
            float: BMR in kcal/day, never below 1000

        Example:
            >>> service = BMRService()
            >>> service.calculate(80.0, 180.0, 30, BiologicalSex.MALE)
            1780.0
        """
        # Base calculation (common for both sexes)
        base = 10 * weight + 6.25 * height - 5 * age

        if sex.is_unspecified():
            bmr_value = ((base + 5) + (base - 161)) / 2
        elif sex == BiologicalSex.MALE:
            bmr_value = base + 5
        else:
            bmr_value = base - 161

        return max(float(bmr_value), MIN_BMR)

    def calculate_for(self, physical_data: UserPhysicalData) -> Optional[float]:
        """Calculate BMR from a physical data record.

        Args:
            physical_data: Record with weight, height, age and sex

        Returns:
            Optional[float]: BMR, or None if any measurement is missing
        """
        if not physical_data.has_complete_data:
            return None
        return self.calculate(
            weight=physical_data.weight,
            height=physical_data.height,
            age=physical_data.age,
            sex=physical_data.biological_sex,
        )
