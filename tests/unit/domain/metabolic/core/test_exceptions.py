"""Unit tests for fuel log domain exceptions."""

import pytest

from domain.metabolic.core.exceptions import (
    CalculationError,
    FoodNotFoundError,
    FuelLogError,
    HealthDataAuthorizationDeniedError,
    HealthDataNotAvailableError,
    InvalidBarcodeError,
    InvalidNutritionDataError,
    InvalidUserDataError,
    NetworkError,
    PersistenceError,
    RateLimitExceededError,
    RequestTimeoutError,
    ServerUnavailableError,
)

SIMPLE_ERRORS = [
    HealthDataNotAvailableError,
    HealthDataAuthorizationDeniedError,
    InvalidBarcodeError,
    FoodNotFoundError,
    InvalidNutritionDataError,
    InvalidUserDataError,
    CalculationError,
    RateLimitExceededError,
    ServerUnavailableError,
    RequestTimeoutError,
]


class TestFuelLogErrors:
    """Test error taxonomy."""

    @pytest.mark.parametrize("error_cls", SIMPLE_ERRORS)
    def test_hierarchy_and_messages(self, error_cls):
        error = error_cls()

        assert isinstance(error, FuelLogError)
        assert str(error) == error_cls.description
        assert error.message == error_cls.description
        assert error.failure_reason
        assert error.recovery_suggestion

    def test_custom_message(self):
        error = InvalidUserDataError("Weight missing")

        assert str(error) == "Weight missing"
        assert error.failure_reason == "User physical data is incomplete or invalid"

    def test_network_error_wraps_cause(self):
        cause = ConnectionError("connection reset")
        error = NetworkError(cause)

        assert error.cause is cause
        assert str(error) == "Network error: connection reset"

    def test_persistence_error_wraps_cause(self):
        cause = OSError("disk full")
        error = PersistenceError(cause)

        assert error.cause is cause
        assert "disk full" in error.message

    @pytest.mark.parametrize(
        "error, delay",
        [
            (NetworkError(Exception("x")), 2.0),
            (PersistenceError(Exception("x")), 1.0),
            (RateLimitExceededError(), 5.0),
            (ServerUnavailableError(), 3.0),
            (RequestTimeoutError(), 2.0),
        ],
    )
    def test_retryable_errors(self, error, delay):
        assert error.is_retryable is True
        assert error.retry_delay == delay

    @pytest.mark.parametrize(
        "error_cls",
        [
            HealthDataNotAvailableError,
            HealthDataAuthorizationDeniedError,
            InvalidBarcodeError,
            FoodNotFoundError,
            InvalidNutritionDataError,
            InvalidUserDataError,
            CalculationError,
        ],
    )
    def test_non_retryable_errors(self, error_cls):
        error = error_cls()

        assert error.is_retryable is False
        assert error.retry_delay == 0.0
