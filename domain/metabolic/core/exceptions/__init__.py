"""Domain exceptions for the fuel log feature."""

from .domain_errors import (
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

__all__ = [
    "FuelLogError",
    "HealthDataNotAvailableError",
    "HealthDataAuthorizationDeniedError",
    "NetworkError",
    "InvalidBarcodeError",
    "FoodNotFoundError",
    "InvalidNutritionDataError",
    "PersistenceError",
    "InvalidUserDataError",
    "CalculationError",
    "RateLimitExceededError",
    "ServerUnavailableError",
    "RequestTimeoutError",
]
