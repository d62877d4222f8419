"""Value objects for metabolic estimation domain."""

from .activity_level import ActivityLevel
from .biological_sex import BiologicalSex
from .nutrition_goal import NutritionGoal
from .nutrition_targets import NutritionTargets
from .physical_data import UserPhysicalData

__all__ = [
    "ActivityLevel",
    "BiologicalSex",
    "NutritionGoal",
    "NutritionTargets",
    "UserPhysicalData",
]
