# robospark/exceptions.py
"""
Base exceptions shared by every RoboSpark application.

Business rules raise subclasses of :class:`DomainError`. Each
subclass carries the HTTP status it maps to and a human-readable
message; the conversion to a JSON response happens once, in
:func:`robospark.api.exception_handler`.
"""


class DomainError(Exception):
    """
    Base class for business-rule failures.

    Attributes
    ----------
    http_status : int
        Status code used when the error reaches the HTTP boundary.
    default_message : str
        Message used when none is given at raise time.
    """

    http_status = 400
    default_message = "Request could not be processed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFound(DomainError):
    """Raised when a referenced record does not exist or is not visible to the caller."""

    http_status = 404
    default_message = "Not found"


class Forbidden(DomainError):
    """Raised when the caller may not perform the operation."""

    http_status = 403
    default_message = "Forbidden"
