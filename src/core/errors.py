"""
Custom exceptions and error handling for Voyago.

Defines application-specific exceptions with error codes. Every code maps to a
short user-facing message, which is what the API responses and the transient
notices shown to users carry. The internal message is only ever logged.

Usage:
    from core.errors import PersistenceError, ErrorCode

    raise PersistenceError("insert into trips failed", code=ErrorCode.TRIP_SAVE_FAILED)
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Authentication errors
    AUTH_FAILED = "AUTH_FAILED"
    INVALID_TOKEN = "INVALID_TOKEN"
    NOT_SIGNED_IN = "NOT_SIGNED_IN"

    # Persistence errors
    PERSISTENCE_FAILED = "PERSISTENCE_FAILED"
    MALFORMED_RECORD = "MALFORMED_RECORD"
    TRIP_NOT_FOUND = "TRIP_NOT_FOUND"
    TRIP_SAVE_FAILED = "TRIP_SAVE_FAILED"
    TRIP_UPDATE_FAILED = "TRIP_UPDATE_FAILED"
    TRIP_DELETE_FAILED = "TRIP_DELETE_FAILED"
    ITINERARY_SAVE_FAILED = "ITINERARY_SAVE_FAILED"
    EXPENSE_SAVE_FAILED = "EXPENSE_SAVE_FAILED"
    SHARE_FAILED = "SHARE_FAILED"

    # Mapping errors
    PLACES_FAILED = "PLACES_FAILED"
    GEOCODING_FAILED = "GEOCODING_FAILED"

    # Directory errors
    DIRECTORY_FAILED = "DIRECTORY_FAILED"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_REQUEST = "INVALID_REQUEST"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    TIMEOUT = "TIMEOUT"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.AUTH_FAILED: "Authentication failed. Please sign in again.",
    ErrorCode.INVALID_TOKEN: "Your session has expired. Please sign in again.",
    ErrorCode.NOT_SIGNED_IN: "You need to be signed in to create a trip!",
    ErrorCode.PERSISTENCE_FAILED: "Unable to reach the trip database. Please try again.",
    ErrorCode.MALFORMED_RECORD: "Some trip data could not be read. Please refresh.",
    ErrorCode.TRIP_NOT_FOUND: "That trip no longer exists.",
    ErrorCode.TRIP_SAVE_FAILED: "Error saving trip. Please try again.",
    ErrorCode.TRIP_UPDATE_FAILED: "Error updating trip. Please try again.",
    ErrorCode.TRIP_DELETE_FAILED: "Error deleting trip. Please try again.",
    ErrorCode.ITINERARY_SAVE_FAILED: "Failed to update itinerary",
    ErrorCode.EXPENSE_SAVE_FAILED: "Error adding expense. Please try again.",
    ErrorCode.SHARE_FAILED: "Failed to share trip",
    ErrorCode.PLACES_FAILED: "Failed to fetch data from Google Places API",
    ErrorCode.GEOCODING_FAILED: "Unable to find location",
    ErrorCode.DIRECTORY_FAILED: "Failed to fetch users",
    ErrorCode.VALIDATION_ERROR: "Your request contains invalid information. Please check and try again.",
    ErrorCode.INVALID_REQUEST: "Invalid request format. Please try again.",
    ErrorCode.INTERNAL_ERROR: "Something went wrong!",
    ErrorCode.TIMEOUT: "The request timed out. Please try again.",
}


class VoyagoError(Exception):
    """Base exception for all Voyago errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])


class AuthenticationError(VoyagoError):
    """Authentication or authorization failed."""

    pass


class PersistenceError(VoyagoError):
    """A read or write against the trip database failed."""

    pass


class MalformedRecordError(PersistenceError):
    """A row returned by the database did not match its record shape."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.MALFORMED_RECORD):
        super().__init__(message, code=code)


class MappingError(VoyagoError):
    """Places search or geocoding failed."""

    pass


class DirectoryError(VoyagoError):
    """The user directory could not be fetched."""

    pass


class ValidationError(VoyagoError):
    """Input validation failed."""

    pass
