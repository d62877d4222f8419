"""Domain exceptions for the fuel log feature.

The metabolic calculator itself never raises: these errors belong to the
layers that talk to the health data store and the food database.
"""

from typing import Optional


class FuelLogError(Exception):
    """Base exception for fuel log errors.

    Subclasses override the class attributes below; ``message`` defaults
    to the class description.
    """

    description = "Fuel log operation failed"
    failure_reason = "An unexpected error occurred"
    recovery_suggestion = "Please try again"
    is_retryable = False
    retry_delay = 0.0

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.description)
        self.message = message or self.description


class HealthDataNotAvailableError(FuelLogError):
    """Raised when the device has no health data store."""

    description = "Health data is not available on this device"
    failure_reason = "This device does not support health data functionality"
    recovery_suggestion = "Please use manual input for your physical data"


class HealthDataAuthorizationDeniedError(FuelLogError):
    """Raised when the user refused access to health data."""

    description = "Health data authorization is required for this feature"
    failure_reason = "User has not granted permission to access health data"
    recovery_suggestion = "Please grant health data permissions in Settings"


class NetworkError(FuelLogError):
    """Raised when the food database cannot be reached."""

    description = "Network error"
    failure_reason = "Unable to connect to food database"
    recovery_suggestion = "Please check your internet connection and try again"
    is_retryable = True
    retry_delay = 2.0

    def __init__(self, cause: Exception):
        super().__init__(f"Network error: {cause}")
        self.cause = cause


class InvalidBarcodeError(FuelLogError):
    """Raised when a scanned barcode is not recognized."""

    description = "Invalid or unrecognized barcode"
    failure_reason = (
        "The scanned barcode is not valid or not found in the database"
    )
    recovery_suggestion = (
        "Try scanning the barcode again or search for the food manually"
    )


class FoodNotFoundError(FuelLogError):
    """Raised when a food item cannot be found."""

    description = "Food item not found in database"
    failure_reason = "The requested food item could not be found"
    recovery_suggestion = (
        "Try searching with different keywords or create a custom food entry"
    )


class InvalidNutritionDataError(FuelLogError):
    """Raised when nutrition values are invalid."""

    description = "Invalid nutrition data provided"
    failure_reason = "The nutrition data contains invalid values"
    recovery_suggestion = "Please check that all nutrition values are valid numbers"


class PersistenceError(FuelLogError):
    """Raised when saving or loading data fails."""

    description = "Data storage error"
    failure_reason = "Unable to save or retrieve data from storage"
    recovery_suggestion = "Please try again or restart the app"
    is_retryable = True
    retry_delay = 1.0

    def __init__(self, cause: Exception):
        super().__init__(f"Data storage error: {cause}")
        self.cause = cause


class InvalidUserDataError(FuelLogError):
    """Raised when physical data is incomplete or invalid for calculations."""

    description = "Invalid user data for calculations"
    failure_reason = "User physical data is incomplete or invalid"
    recovery_suggestion = "Please complete your profile setup with valid physical data"


class CalculationError(FuelLogError):
    """Raised when nutrition calculations cannot be performed."""

    description = "Error performing nutrition calculations"
    failure_reason = "Unable to calculate nutrition values"
    recovery_suggestion = "Please verify your input data and try again"


class RateLimitExceededError(FuelLogError):
    """Raised when the food database rate limit is hit."""

    description = "Too many requests. Please wait before trying again"
    failure_reason = "API rate limit has been exceeded"
    recovery_suggestion = "Wait a few moments before making another request"
    is_retryable = True
    retry_delay = 5.0


class ServerUnavailableError(FuelLogError):
    """Raised when the food database is down."""

    description = "Food database is temporarily unavailable"
    failure_reason = "The food database server is experiencing issues"
    recovery_suggestion = "Please try again later or use offline functionality"
    is_retryable = True
    retry_delay = 3.0


class RequestTimeoutError(FuelLogError):
    """Raised when a request takes too long."""

    description = "Request timed out"
    failure_reason = "The request took too long to complete"
    recovery_suggestion = "Check your internet connection and try again"
    is_retryable = True
    retry_delay = 2.0
