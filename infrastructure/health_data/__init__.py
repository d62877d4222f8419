"""Health data store adapters."""

from infrastructure.health_data.factory import (
    create_health_data_store,
    get_health_data_store,
    reset_health_data_store,
)
from infrastructure.health_data.in_memory_store import InMemoryHealthDataStore

__all__ = [
    "InMemoryHealthDataStore",
    "create_health_data_store",
    "get_health_data_store",
    "reset_health_data_store",
]
