"""IHealthDataStore port - platform health data collaborator."""

from abc import ABC, abstractmethod

from domain.fuel_log.food_log_entry import FoodLogEntry

from ..value_objects.physical_data import UserPhysicalData


class IHealthDataStore(ABC):
    """Port for the device health data store.

    Reads physical measurements and writes nutrition samples. Reads and
    writes are asynchronous and may fail with ``FuelLogError`` subclasses
    (not available, authorization denied, network, persistence).
    """

    @abstractmethod
    def is_data_available(self) -> bool:
        """Check whether the device has a health data store.

        Returns:
            bool: True if health data can be requested
        """
        pass

    @abstractmethod
    async def request_authorization(self) -> bool:
        """Request read/write authorization.

        Returns:
            bool: True if the user granted access

        Raises:
            HealthDataNotAvailableError: If the store is unavailable
        """
        pass

    @abstractmethod
    async def fetch_user_physical_data(self) -> UserPhysicalData:
        """Read the latest physical measurements.

        Returns:
            UserPhysicalData: Measurements, any of which may be missing

        Raises:
            HealthDataAuthorizationDeniedError: If access was not granted
        """
        pass

    @abstractmethod
    async def write_nutrition_entry(self, entry: FoodLogEntry) -> None:
        """Write a food log entry as nutrition samples.

        Args:
            entry: Food log entry to write

        Raises:
            HealthDataAuthorizationDeniedError: If access was not granted
            PersistenceError: If the store rejected the samples
        """
        pass
