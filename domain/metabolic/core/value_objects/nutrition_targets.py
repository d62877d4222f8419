"""NutritionTargets value object - daily calorie and macro targets."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Optional

from .activity_level import ActivityLevel
from .biological_sex import BiologicalSex
from .nutrition_goal import NutritionGoal
from .physical_data import UserPhysicalData

# Targets older than this should be recalculated from fresh physical data
TARGETS_MAX_AGE = timedelta(days=30)

# Allowed relative gap between macro calories and daily calories
MACRO_TOLERANCE = 0.05


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class NutritionTargets:
    """Daily nutrition targets derived from TDEE and goal.

    Macros are in grams, calories in kcal/day. Uses standard calorie
    conversion: protein 4 kcal/g, carbs 4 kcal/g, fat 9 kcal/g.

    Attributes:
        daily_calories: Target kcal/day (TDEE + goal adjustment)
        daily_protein: Protein in grams
        daily_carbohydrates: Carbohydrates in grams
        daily_fat: Fat in grams
        activity_level: Activity level used for TDEE
        goal: Nutritional goal
        bmr: Basal metabolic rate the targets were derived from
        tdee: Total daily energy expenditure the targets were derived from
        last_updated: When the targets were computed
        weight: Weight snapshot (kg) at calculation time
        height: Height snapshot (cm) at calculation time
        age: Age snapshot at calculation time
        biological_sex: Biological sex snapshot at calculation time
        user_id: Owner of the targets
    """

    daily_calories: float
    daily_protein: float
    daily_carbohydrates: float
    daily_fat: float
    activity_level: ActivityLevel
    goal: NutritionGoal
    bmr: float
    tdee: float
    last_updated: datetime = field(default_factory=_utc_now)
    weight: Optional[float] = None
    height: Optional[float] = None
    age: Optional[int] = None
    biological_sex: Optional[BiologicalSex] = None
    user_id: str = "default"

    @property
    def total_macro_calories(self) -> float:
        """Total calories from macronutrients (protein×4 + carbs×4 + fat×9)."""
        return (
            self.daily_protein * 4
            + self.daily_carbohydrates * 4
            + self.daily_fat * 9
        )

    @property
    def has_valid_macros(self) -> bool:
        """Whether macro calories are within 5% of daily calories."""
        if self.daily_calories <= 0:
            return False
        difference = abs(self.daily_calories - self.total_macro_calories)
        return difference / self.daily_calories <= MACRO_TOLERANCE

    @property
    def protein_percentage(self) -> float:
        """Protein share of daily calories (0-100)."""
        if self.daily_calories <= 0:
            return 0.0
        return (self.daily_protein * 4) / self.daily_calories * 100

    @property
    def carbohydrates_percentage(self) -> float:
        """Carbohydrate share of daily calories (0-100)."""
        if self.daily_calories <= 0:
            return 0.0
        return (self.daily_carbohydrates * 4) / self.daily_calories * 100

    @property
    def fat_percentage(self) -> float:
        """Fat share of daily calories (0-100)."""
        if self.daily_calories <= 0:
            return 0.0
        return (self.daily_fat * 9) / self.daily_calories * 100

    def needs_update(self, now: Optional[datetime] = None) -> bool:
        """Check whether targets are older than 30 days.

        Args:
            now: Reference time (defaults to current UTC time)

        Returns:
            bool: True if targets should be recalculated
        """
        reference = now or _utc_now()
        return reference - self.last_updated > TARGETS_MAX_AGE

    def recalculated(self) -> "NutritionTargets":
        """Return new targets re-derived from this record's TDEE and goal."""
        # Import here to avoid circular dependency
        from ...calculation.targets_service import TargetsService

        return TargetsService().calculate(
            bmr=self.bmr,
            tdee=self.tdee,
            activity_level=self.activity_level,
            goal=self.goal,
            physical_data=UserPhysicalData(
                weight=self.weight,
                height=self.height,
                age=self.age,
                biological_sex=self.biological_sex,
            ),
            user_id=self.user_id,
        )

    def __str__(self) -> str:
        return (
            f"{self.daily_calories:.0f} kcal "
            f"({self.daily_protein:.0f}P / {self.daily_carbohydrates:.0f}C / "
            f"{self.daily_fat:.0f}F)"
        )
