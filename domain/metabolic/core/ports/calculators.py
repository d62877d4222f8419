"""Calculator ports - interfaces for BMR/TDEE calculations."""

from abc import ABC, abstractmethod

from ..value_objects.activity_level import ActivityLevel
from ..value_objects.biological_sex import BiologicalSex


class IBMRCalculator(ABC):
    """Port for BMR calculation.

    Implementations must be pure: identical inputs yield identical output.
    """

    @abstractmethod
    def calculate(
        self,
        weight: float,
        height: float,
        age: int,
        sex: BiologicalSex,
    ) -> float:
        """Calculate BMR in kcal/day.

        Args:
            weight: Body weight in kg
            height: Height in cm
            age: Age in years
            sex: Biological sex category

        Returns:
            float: Basal metabolic rate
        """
        pass


class ITDEECalculator(ABC):
    """Port for TDEE calculation."""

    @abstractmethod
    def calculate(self, bmr: float, activity_level: ActivityLevel) -> float:
        """Calculate TDEE from BMR and activity level.

        Args:
            bmr: Basal metabolic rate in kcal/day
            activity_level: Physical activity level

        Returns:
            float: Total daily energy expenditure in kcal/day
        """
        pass
