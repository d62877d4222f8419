"""FuelLogOrchestrator - coordinates health data store and calculators."""

import logging
from dataclasses import replace
from typing import Optional

from domain.fuel_log.food_log_entry import FoodLogEntry
from domain.metabolic.calculation.targets_service import TargetsService
from domain.metabolic.core.exceptions.domain_errors import (
    HealthDataAuthorizationDeniedError,
    HealthDataNotAvailableError,
    InvalidUserDataError,
)
from domain.metabolic.core.ports.calculators import (
    IBMRCalculator,
    ITDEECalculator,
)
from domain.metabolic.core.ports.health_data_store import IHealthDataStore
from domain.metabolic.core.value_objects.activity_level import ActivityLevel
from domain.metabolic.core.value_objects.nutrition_goal import NutritionGoal
from domain.metabolic.core.value_objects.nutrition_targets import (
    NutritionTargets,
)
from domain.metabolic.core.value_objects.physical_data import UserPhysicalData

logger = logging.getLogger(__name__)


class FuelLogOrchestrator:
    """
    Orchestrates the health data store and calculation services.

    Flow:
    1. Check health data availability and request authorization
    2. Read physical data from the store
    3. Calculate BMR, then TDEE from BMR and activity level
    4. Derive goal-based nutrition targets

    Calculations run synchronously once the store has answered.
    """

    def __init__(
        self,
        store: IHealthDataStore,
        bmr_calculator: IBMRCalculator,
        tdee_calculator: ITDEECalculator,
        targets_service: Optional[TargetsService] = None,
    ):
        self._store = store
        self._bmr_calculator = bmr_calculator
        self._tdee_calculator = tdee_calculator
        self._targets_service = targets_service or TargetsService()

    async def authorize(self) -> None:
        """
        Ensure the store is available and access is granted.

        Raises:
            HealthDataNotAvailableError: If the device has no store
            HealthDataAuthorizationDeniedError: If the user refused access
        """
        if not self._store.is_data_available():
            raise HealthDataNotAvailableError()

        granted = await self._store.request_authorization()
        if not granted:
            logger.warning("Health data authorization denied")
            raise HealthDataAuthorizationDeniedError()

    async def load_physical_data(
        self,
        activity_level: ActivityLevel = ActivityLevel.SEDENTARY,
    ) -> UserPhysicalData:
        """
        Read physical data and attach BMR/TDEE when measurements allow.

        Args:
            activity_level: Activity level used for TDEE

        Returns:
            UserPhysicalData with bmr/tdee set if data is complete,
            otherwise the record as read

        Raises:
            HealthDataNotAvailableError: If the device has no store
            HealthDataAuthorizationDeniedError: If the user refused access
        """
        await self.authorize()
        data = await self._store.fetch_user_physical_data()

        if not data.has_complete_data:
            logger.info("Physical data incomplete, skipping BMR estimate")
            return data

        bmr = self._bmr_calculator.calculate(
            weight=data.weight,
            height=data.height,
            age=data.age,
            sex=data.biological_sex,
        )
        tdee = self._tdee_calculator.calculate(bmr, activity_level)
        logger.debug("Estimated BMR=%.1f TDEE=%.1f", bmr, tdee)
        return replace(data, bmr=bmr, tdee=tdee)

    async def calculate_targets(
        self,
        goal: NutritionGoal,
        activity_level: ActivityLevel,
        user_id: str = "default",
    ) -> NutritionTargets:
        """
        Calculate nutrition targets from the user's physical data.

        Args:
            goal: Nutritional goal (cut/maintain/bulk)
            activity_level: Physical activity level
            user_id: Owner of the targets

        Returns:
            NutritionTargets derived from BMR, TDEE and goal

        Raises:
            InvalidUserDataError: If physical data is incomplete
        """
        data = await self.load_physical_data(activity_level)
        if not data.has_complete_data or data.bmr is None or data.tdee is None:
            raise InvalidUserDataError()

        targets = self._targets_service.calculate(
            bmr=data.bmr,
            tdee=data.tdee,
            activity_level=activity_level,
            goal=goal,
            physical_data=data,
            user_id=user_id,
        )
        logger.info(
            "Nutrition targets calculated for %s: %s", user_id, targets
        )
        return targets

    async def log_food(self, entry: FoodLogEntry) -> None:
        """
        Write a food log entry to the health data store.

        Store errors (authorization, persistence) propagate to the caller.

        Args:
            entry: Food log entry to write
        """
        await self._store.write_nutrition_entry(entry)
        logger.info(
            "Logged %s (%.0f kcal) for %s",
            entry.name,
            entry.calories,
            entry.meal_type.value,
        )
