"""Error taxonomy for the booking engine.

Every error carries a human-readable message that is surfaced verbatim to the
caller, plus the HTTP status and machine code the API layer renders it with.
"""


class BookingError(Exception):
    status_code = 400
    code = "booking_error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(BookingError):
    """Malformed or missing input (empty seat list, unknown seat id, ...)."""

    status_code = 400
    code = "validation_error"


class PolicyViolation(BookingError):
    """Weekend/holiday, leave, batch day, advance window or seat ownership."""

    status_code = 403
    code = "policy_violation"


class ConflictError(BookingError):
    """Seat already booked or locked by someone else, or the lock lapsed.

    The caller is expected to re-fetch the seat state and retry.
    """

    status_code = 409
    code = "conflict"


class NotFoundError(BookingError):
    status_code = 404
    code = "not_found"
