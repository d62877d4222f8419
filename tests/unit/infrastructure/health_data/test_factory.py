"""Unit tests for health data store factory and configuration."""

import logging

import pytest
import structlog

from infrastructure.config import (
    configure_logging,
    get_health_data_backend,
    get_log_level,
)
from infrastructure.health_data.factory import (
    create_health_data_store,
    get_health_data_store,
    reset_health_data_store,
)
from infrastructure.health_data.in_memory_store import InMemoryHealthDataStore


@pytest.fixture(autouse=True)
def clean_singleton():
    """Reset singleton around each test."""
    reset_health_data_store()
    yield
    reset_health_data_store()


class TestCreateHealthDataStore:
    """Test factory creation."""

    def test_default_is_inmemory(self, monkeypatch) -> None:
        monkeypatch.delenv("HEALTH_DATA_BACKEND", raising=False)

        assert isinstance(create_health_data_store(), InMemoryHealthDataStore)

    def test_explicit_inmemory(self, monkeypatch) -> None:
        monkeypatch.setenv("HEALTH_DATA_BACKEND", "InMemory")

        assert get_health_data_backend() == "inmemory"
        assert isinstance(create_health_data_store(), InMemoryHealthDataStore)

    def test_unknown_falls_back(self, monkeypatch, caplog) -> None:
        monkeypatch.setenv("HEALTH_DATA_BACKEND", "healthkit")

        with caplog.at_level(logging.WARNING):
            store = create_health_data_store()

        assert isinstance(store, InMemoryHealthDataStore)
        assert "healthkit" in caplog.text


class TestSingleton:
    """Test singleton accessors."""

    def test_same_instance(self) -> None:
        assert get_health_data_store() is get_health_data_store()

    def test_reset(self) -> None:
        first = get_health_data_store()
        reset_health_data_store()

        assert get_health_data_store() is not first


class TestLogLevel:
    """Test LOG_LEVEL parsing."""

    def test_default(self, monkeypatch) -> None:
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        assert get_log_level() == logging.INFO

    def test_named_level(self, monkeypatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "debug")

        assert get_log_level() == logging.DEBUG

    def test_unknown_level(self, monkeypatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "chatty")

        assert get_log_level() == logging.INFO


class TestConfigureLogging:
    """Test logging setup."""

    def test_configures_structlog(self, monkeypatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "WARNING")

        try:
            configure_logging()

            assert structlog.is_configured()
            structlog.get_logger("test").info("filtered out")
        finally:
            structlog.reset_defaults()
