"""Unit tests for TargetsService."""

import pytest

from domain.metabolic.calculation.targets_service import TargetsService
from domain.metabolic.core.value_objects import (
    ActivityLevel,
    BiologicalSex,
    NutritionGoal,
    UserPhysicalData,
)


class TestTargetsService:
    """Test macro distribution per goal."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = TargetsService()

    def _calculate(self, goal: NutritionGoal, tdee: float):
        return self.service.calculate(
            bmr=1600.0,
            tdee=tdee,
            activity_level=ActivityLevel.MODERATELY_ACTIVE,
            goal=goal,
        )

    def test_cut(self):
        """Cut: -500 kcal, 35% protein, 40% carbs, 25% fat."""
        targets = self._calculate(NutritionGoal.CUT, 2000.0)

        assert targets.daily_calories == pytest.approx(1500.0)
        assert targets.daily_protein == pytest.approx(131.25, abs=0.1)
        assert targets.daily_carbohydrates == pytest.approx(150.0, abs=0.1)
        assert targets.daily_fat == pytest.approx(41.67, abs=0.1)

    def test_maintain(self):
        """Maintain: TDEE, 25% protein, 45% carbs, 30% fat."""
        targets = self._calculate(NutritionGoal.MAINTAIN, 2000.0)

        assert targets.daily_calories == pytest.approx(2000.0)
        assert targets.daily_protein == pytest.approx(125.0, abs=0.1)
        assert targets.daily_carbohydrates == pytest.approx(225.0, abs=0.1)
        assert targets.daily_fat == pytest.approx(66.67, abs=0.1)

    def test_bulk(self):
        """Bulk: +300 kcal, 20% protein, 55% carbs, 25% fat."""
        targets = self._calculate(NutritionGoal.BULK, 2000.0)

        assert targets.daily_calories == pytest.approx(2300.0)
        assert targets.daily_protein == pytest.approx(115.0, abs=0.1)
        assert targets.daily_carbohydrates == pytest.approx(316.25, abs=0.1)
        assert targets.daily_fat == pytest.approx(63.89, abs=0.1)

    def test_generated_macros_are_valid(self):
        for goal in NutritionGoal:
            assert self._calculate(goal, 2500.0).has_valid_macros

    def test_snapshots_physical_data(self):
        data = UserPhysicalData(
            weight=70.0, height=170.0, age=40, biological_sex=BiologicalSex.FEMALE
        )

        targets = self.service.calculate(
            bmr=1400.0,
            tdee=1680.0,
            activity_level=ActivityLevel.SEDENTARY,
            goal=NutritionGoal.MAINTAIN,
            physical_data=data,
            user_id="user42",
        )

        assert targets.weight == 70.0
        assert targets.height == 170.0
        assert targets.age == 40
        assert targets.biological_sex == BiologicalSex.FEMALE
        assert targets.user_id == "user42"
        assert targets.bmr == 1400.0
        assert targets.tdee == 1680.0

    def test_without_physical_data(self):
        targets = self._calculate(NutritionGoal.MAINTAIN, 2000.0)

        assert targets.weight is None
        assert targets.biological_sex is None
        assert targets.user_id == "default"
