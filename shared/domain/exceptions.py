"""
Domain Error Taxonomy

Application code raises these typed errors; the API layer maps
them to HTTP responses through ``status_code``.

- ValidationError: missing or malformed input (400)
- ConflictError: double booking (409)
- NotFoundError: unknown identifier (404)
- DomainError: illegal state transition (400)
"""


class HotelError(Exception):
    """Base class for all errors raised by the booking workflow."""

    status_code = 400
    default_message = "Request could not be processed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_payload(self) -> dict:
        return {"error": self.message}


class ValidationError(HotelError):
    default_message = "Invalid request"


class InvalidRange(ValidationError):
    default_message = "Check-out date must be after check-in date"


class ConflictError(HotelError):
    """Raised when a room is already reserved for overlapping dates."""

    status_code = 409
    default_message = "Room is not available for the selected dates"

    def __init__(self, message: str | None = None, *, conflicting_ids: list[str] | None = None):
        super().__init__(message)
        self.conflicting_ids = conflicting_ids or []

    def to_payload(self) -> dict:
        return {
            "error": "Booking conflict",
            "conflict": True,
            "message": self.message,
        }


class NotFoundError(HotelError):
    status_code = 404
    default_message = "Item not found"


class BookingReferenceNotFound(NotFoundError):
    """A payment points at a booking that does not exist."""

    status_code = 400
    default_message = "Associated booking not found"


class DomainError(HotelError):
    default_message = "Operation not allowed in the current state"
