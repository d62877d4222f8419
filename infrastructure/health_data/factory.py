"""Factory for creating health data store instances."""

import logging
from typing import Optional

from domain.metabolic.core.ports.health_data_store import IHealthDataStore
from infrastructure.config import get_health_data_backend
from infrastructure.health_data.in_memory_store import InMemoryHealthDataStore

logger = logging.getLogger(__name__)

# Singleton instance
_health_data_store: Optional[IHealthDataStore] = None


def create_health_data_store() -> IHealthDataStore:
    """
    Create health data store based on HEALTH_DATA_BACKEND configuration.

    Environment Variables:
        HEALTH_DATA_BACKEND: Store type (only 'inmemory' is bundled)

    Returns:
        IHealthDataStore implementation

    Default:
        Returns InMemoryHealthDataStore if HEALTH_DATA_BACKEND not set
    """
    backend = get_health_data_backend()

    if backend != "inmemory":
        # Unknown type - graceful fallback to inmemory
        logger.warning(
            "Unknown HEALTH_DATA_BACKEND %r, falling back to inmemory", backend
        )

    return InMemoryHealthDataStore()


def get_health_data_store() -> IHealthDataStore:
    """
    Get singleton health data store instance.

    Lazy initialization on first call.

    Returns:
        IHealthDataStore singleton
    """
    global _health_data_store
    if _health_data_store is None:
        _health_data_store = create_health_data_store()
    return _health_data_store


def reset_health_data_store() -> None:
    """
    Reset singleton instance.

    Useful for testing to ensure clean state.
    """
    global _health_data_store
    _health_data_store = None
