"""In-memory implementation of IHealthDataStore for testing."""

from typing import List, Optional

import structlog

from domain.fuel_log.food_log_entry import FoodLogEntry
from domain.metabolic.core.exceptions.domain_errors import (
    HealthDataAuthorizationDeniedError,
    HealthDataNotAvailableError,
)
from domain.metabolic.core.ports.health_data_store import IHealthDataStore
from domain.metabolic.core.value_objects.physical_data import UserPhysicalData

logger = structlog.get_logger(__name__)


class InMemoryHealthDataStore(IHealthDataStore):
    """
    In-memory health data store.

    Holds a physical data snapshot and the list of written entries.
    Behaves like the device store: unavailable devices refuse
    authorization, unauthorized reads and writes are rejected.
    """

    def __init__(
        self,
        physical_data: Optional[UserPhysicalData] = None,
        available: bool = True,
        grant_authorization: bool = True,
    ) -> None:
        """
        Initialize store.

        Args:
            physical_data: Measurements returned by reads (empty if None)
            available: Whether the device supports health data
            grant_authorization: Whether authorization requests succeed
        """
        self._physical_data = physical_data or UserPhysicalData()
        self._available = available
        self._grant_authorization = grant_authorization
        self._authorized = False
        self._entries: List[FoodLogEntry] = []

    @property
    def is_authorized(self) -> bool:
        """Whether authorization has been granted."""
        return self._authorized

    @property
    def entries(self) -> List[FoodLogEntry]:
        """Copy of the written entries, in write order."""
        return list(self._entries)

    def is_data_available(self) -> bool:
        return self._available

    async def request_authorization(self) -> bool:
        """
        Request authorization.

        Returns:
            True if granted

        Raises:
            HealthDataNotAvailableError: If the store is unavailable
        """
        if not self._available:
            logger.warning("Health data not available")
            raise HealthDataNotAvailableError()

        self._authorized = self._grant_authorization
        logger.info("Authorization requested", granted=self._authorized)
        return self._authorized

    async def fetch_user_physical_data(self) -> UserPhysicalData:
        """
        Return the stored physical data snapshot.

        Raises:
            HealthDataAuthorizationDeniedError: If not authorized
        """
        self._ensure_authorized()
        logger.debug(
            "Physical data read",
            complete=self._physical_data.has_complete_data,
        )
        return self._physical_data

    async def write_nutrition_entry(self, entry: FoodLogEntry) -> None:
        """
        Append entry to the store.

        Raises:
            HealthDataAuthorizationDeniedError: If not authorized
        """
        self._ensure_authorized()
        self._entries.append(entry)
        logger.info(
            "Nutrition entry written",
            entry_id=str(entry.id),
            calories=entry.calories,
            meal_type=entry.meal_type.value,
        )

    def set_physical_data(self, physical_data: UserPhysicalData) -> None:
        """Replace the stored physical data snapshot."""
        self._physical_data = physical_data

    def clear(self) -> None:
        """Remove written entries. Useful for test cleanup."""
        self._entries.clear()

    def _ensure_authorized(self) -> None:
        if not self._available:
            raise HealthDataNotAvailableError()
        if not self._authorized:
            raise HealthDataAuthorizationDeniedError()
